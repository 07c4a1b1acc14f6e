"""Persistence models: ORM entities and mixins."""

from portal.infrastructure.persistence.models.knowledge import (
    DetailKnowledge,
    Knowledge,
    ProductTypeDetailKnowledge,
    TypeDetailKnowledge,
)
from portal.infrastructure.persistence.models.mixins import (
    CuidMixin,
    PortalModel,
    TimestampMixin,
)
from portal.infrastructure.persistence.models.people import Agent, User
from portal.infrastructure.persistence.models.product import (
    Brand,
    Product,
    ProductCategory,
    ProductDetail,
    ProductSubcategory,
)
from portal.infrastructure.persistence.models.quality_training import (
    DetailQualityTraining,
    QualityTraining,
    SubdetailQualityTraining,
    TypeQualityTraining,
)
from portal.infrastructure.persistence.models.sop import (
    Sop,
    SopCategory,
    SopDetail,
    SopType,
)

__all__ = [
    "Brand",
    "ProductCategory",
    "ProductSubcategory",
    "Product",
    "ProductDetail",
    "SopCategory",
    "Sop",
    "SopType",
    "SopDetail",
    "Knowledge",
    "DetailKnowledge",
    "TypeDetailKnowledge",
    "ProductTypeDetailKnowledge",
    "QualityTraining",
    "TypeQualityTraining",
    "DetailQualityTraining",
    "SubdetailQualityTraining",
    "User",
    "Agent",
    "CuidMixin",
    "TimestampMixin",
    "PortalModel",
]
