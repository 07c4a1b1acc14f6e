"""Domain enumerations for the portal.

Enums represent fixed sets of domain values (searchable entity types and
the result labels shown to agents).
"""

from enum import Enum


class SearchEntity(str, Enum):
    """Persisted entity types that take part in the federated search."""

    BRAND = "brand"
    CATEGORY = "category"
    SUBCATEGORY = "subcategory"
    PRODUCT = "product"
    PRODUCT_DETAIL = "product_detail"
    SOP_CATEGORY = "sop_category"
    SOP = "sop"
    SOP_TYPE = "sop_type"
    SOP_DETAIL = "sop_detail"
    KNOWLEDGE = "knowledge"
    DETAIL_KNOWLEDGE = "detail_knowledge"
    TYPE_DETAIL_KNOWLEDGE = "type_detail_knowledge"
    PRODUCT_TYPE_DETAIL_KNOWLEDGE = "product_type_detail_knowledge"
    QUALITY_TRAINING = "quality_training"
    TYPE_QUALITY_TRAINING = "type_quality_training"
    DETAIL_QUALITY_TRAINING = "detail_quality_training"
    SUBDETAIL_QUALITY_TRAINING = "subdetail_quality_training"
    USER = "user"
    AGENT = "agent"


class SearchResultType(str, Enum):
    """Label carried in the ``type`` field of every search hit."""

    BRAND = "Brand"
    CATEGORY = "Category"
    SUBCATEGORY = "Subcategory"
    PRODUCT = "Product"
    PRODUCT_DETAIL = "Product Detail"
    SOP_CATEGORY = "SOP Category"
    SOP = "SOP"
    SOP_TYPE = "SOP Type"
    SOP_DETAIL = "SOP Detail"
    KNOWLEDGE = "Knowledge"
    DETAIL_KNOWLEDGE = "Detail Knowledge"
    TYPE_DETAIL_KNOWLEDGE = "Type Detail Knowledge"
    PRODUCT_TYPE_DETAIL_KNOWLEDGE = "Product-Type Detail Knowledge"
    QUALITY_TRAINING = "Quality Training"
    TYPE_QUALITY_TRAINING = "Type Quality Training"
    DETAIL_QUALITY_TRAINING = "Detail Quality Training"
    SUBDETAIL_QUALITY_TRAINING = "Subdetail Quality Training"
    USER = "User"
    AGENT = "Agent"
