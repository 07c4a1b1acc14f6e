"""Product catalog ORM models: brand -> category -> subcategory -> product -> product detail.

A product normally hangs off a subcategory but may be attached only to a
category or a brand, so all three product parents are nullable.
"""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.infrastructure.persistence.database import Base
from portal.infrastructure.persistence.models.mixins import PortalModel


class Brand(PortalModel, Base):
    """Product brand. Table: brands."""

    __tablename__ = "brands"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    categories: Mapped[list["ProductCategory"]] = relationship(back_populates="brand")


class ProductCategory(PortalModel, Base):
    """Product category of a brand. Table: kategori_produks."""

    __tablename__ = "kategori_produks"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    brand_id: Mapped[str] = mapped_column(
        String, ForeignKey("brands.id", ondelete="CASCADE"), nullable=False, index=True
    )

    brand: Mapped[Brand] = relationship(back_populates="categories")
    subcategories: Mapped[list["ProductSubcategory"]] = relationship(
        back_populates="category"
    )


class ProductSubcategory(PortalModel, Base):
    """Product subcategory of a category. Table: subkategori_produks."""

    __tablename__ = "subkategori_produks"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("kategori_produks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    category: Mapped[ProductCategory] = relationship(back_populates="subcategories")


class Product(PortalModel, Base):
    """Product. Table: produks."""

    __tablename__ = "produks"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    capacity: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    brand_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("brands.id", ondelete="SET NULL"), nullable=True, index=True
    )
    category_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("kategori_produks.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    subcategory_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("subkategori_produks.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    brand: Mapped[Brand | None] = relationship()
    category: Mapped[ProductCategory | None] = relationship()
    subcategory: Mapped[ProductSubcategory | None] = relationship()
    details: Mapped[list["ProductDetail"]] = relationship(back_populates="product")


class ProductDetail(PortalModel, Base):
    """Free-text detail block of a product. Table: detail_produks."""

    __tablename__ = "detail_produks"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    detail: Mapped[str] = mapped_column(Text, nullable=False)
    product_id: Mapped[str] = mapped_column(
        String, ForeignKey("produks.id", ondelete="CASCADE"), nullable=False, index=True
    )

    product: Mapped[Product] = relationship(back_populates="details")
