"""Slug and deep-link rules for search hits."""

from types import SimpleNamespace

import pytest

from portal.application.services.search_links import (
    NO_DETAIL_PAGE,
    brand_link,
    category_link,
    knowledge_link,
    product_link,
    quality_training_link,
    slugify,
    sop_category_link,
    sop_link,
    subcategory_link,
)


@pytest.mark.parametrize(
    ("name", "slug"),
    [
        ("Skin Care", "skin-care"),
        ("  Day Cream  ", "day-cream"),
        ("CreamCo", "creamco"),
        ("Day   Cream", "day-cream"),
        ("Face\tand\nBody", "face-and-body"),
        ("L'Oreal Paris", "l'oreal-paris"),
        ("50% Off", "50%-off"),
    ],
)
def test_slugify(name: str, slug: str) -> None:
    """Lower-cases, trims, collapses each whitespace run to one hyphen, keeps punctuation."""
    assert slugify(name) == slug


def test_product_hierarchy_links() -> None:
    assert brand_link("CreamCo") == "/agent/products/creamco"
    assert category_link("Acme", "Skin Care") == "/agent/products/acme/skin-care"
    assert (
        subcategory_link("Acme", "Skin Care", "Night Creams")
        == "/agent/products/acme/skin-care/night-creams"
    )


def _product(brand=None, category=None, subcategory=None, name="Day Cream"):
    return SimpleNamespace(
        name=name, brand=brand, category=category, subcategory=subcategory
    )


class TestProductLink:
    """Deepest available path depending on which parents the product has."""

    acme = SimpleNamespace(name="Acme")
    skin_care = SimpleNamespace(name="Skin Care")
    night = SimpleNamespace(name="Night Creams")

    def test_without_brand_links_to_products_root(self) -> None:
        assert product_link(_product()) == "/agent/products"

    def test_without_brand_ignores_category(self) -> None:
        assert product_link(_product(category=self.skin_care)) == "/agent/products"

    def test_brand_only_links_to_brand_page(self) -> None:
        assert product_link(_product(brand=self.acme)) == "/agent/products/acme"

    def test_brand_and_category_skip_subcategory_segment(self) -> None:
        product = _product(brand=self.acme, category=self.skin_care)
        assert product_link(product) == "/agent/products/acme/skin-care/day-cream"

    def test_full_chain(self) -> None:
        product = _product(
            brand=self.acme, category=self.skin_care, subcategory=self.night
        )
        assert (
            product_link(product)
            == "/agent/products/acme/skin-care/night-creams/day-cream"
        )


def test_sop_links() -> None:
    sop = SimpleNamespace(
        name="Refund Policy", sop_category=SimpleNamespace(name="Customer Complaints")
    )
    assert sop_category_link("Customer Complaints") == "/agent/sop/customer-complaints"
    assert sop_link(sop) == "/agent/sop/customer-complaints/refund-policy"


def test_knowledge_and_quality_training_links() -> None:
    assert knowledge_link("Skin Types") == "/agent/knowledge/skin-types"
    assert (
        quality_training_link("Call Handling 101")
        == "/agent/quality-training/call-handling-101"
    )


def test_no_detail_page_marker() -> None:
    assert NO_DETAIL_PAGE == "#"
