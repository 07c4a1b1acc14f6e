"""Slugs and agent-portal deep links for search hits.

Every link is derived from display names walked up the ancestor chain;
nothing is looked up, so a record with a broken chain fails in the caller.
"""

import re
from typing import Any

NO_DETAIL_PAGE = "#"
PRODUCTS_ROOT = "/agent/products"
SOP_ROOT = "/agent/sop"
KNOWLEDGE_ROOT = "/agent/knowledge"
QUALITY_TRAINING_ROOT = "/agent/quality-training"

_WHITESPACE_RUN = re.compile(r"\s+")


def slugify(name: str) -> str:
    """Lower-case, trim, and replace each whitespace run with one hyphen.

    Punctuation is left in place: "L'Oreal  Paris" -> "l'oreal-paris".
    """
    return _WHITESPACE_RUN.sub("-", name.lower().strip())


def brand_link(brand_name: str) -> str:
    return f"{PRODUCTS_ROOT}/{slugify(brand_name)}"


def category_link(brand_name: str, category_name: str) -> str:
    return f"{brand_link(brand_name)}/{slugify(category_name)}"


def subcategory_link(brand_name: str, category_name: str, subcategory_name: str) -> str:
    return f"{category_link(brand_name, category_name)}/{slugify(subcategory_name)}"


def product_link(product: Any) -> str:
    """Deepest available path for a product whose brand, category and subcategory are optional.

    - no brand: /agent/products
    - brand, no category: /agent/products/{brand}
    - brand and category, no subcategory: /agent/products/{brand}/{category}/{product}
    - all three: /agent/products/{brand}/{category}/{subcategory}/{product}
    """
    brand = product.brand
    if brand is None:
        return PRODUCTS_ROOT
    category = product.category
    if category is None:
        return brand_link(brand.name)
    subcategory = product.subcategory
    if subcategory is None:
        return f"{category_link(brand.name, category.name)}/{slugify(product.name)}"
    return (
        f"{subcategory_link(brand.name, category.name, subcategory.name)}"
        f"/{slugify(product.name)}"
    )


def sop_category_link(sop_category_name: str) -> str:
    return f"{SOP_ROOT}/{slugify(sop_category_name)}"


def sop_link(sop: Any) -> str:
    """SOP page under its category; SOP types and details link here too."""
    return f"{sop_category_link(sop.sop_category.name)}/{slugify(sop.name)}"


def knowledge_link(knowledge_title: str) -> str:
    return f"{KNOWLEDGE_ROOT}/{slugify(knowledge_title)}"


def quality_training_link(quality_training_title: str) -> str:
    return f"{QUALITY_TRAINING_ROOT}/{slugify(quality_training_title)}"
