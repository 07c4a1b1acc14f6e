"""Knowledge-base ORM models: knowledge -> detail -> type -> product-type detail."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.infrastructure.persistence.database import Base
from portal.infrastructure.persistence.models.mixins import PortalModel


class Knowledge(PortalModel, Base):
    """Knowledge page (e.g. skin knowledge, vocabulary). Table: knowledges."""

    __tablename__ = "knowledges"

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    details: Mapped[list["DetailKnowledge"]] = relationship(back_populates="knowledge")


class DetailKnowledge(PortalModel, Base):
    """Table: detail_knowledges."""

    __tablename__ = "detail_knowledges"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    knowledge_id: Mapped[str] = mapped_column(
        String, ForeignKey("knowledges.id", ondelete="CASCADE"), nullable=False, index=True
    )

    knowledge: Mapped[Knowledge] = relationship(back_populates="details")
    types: Mapped[list["TypeDetailKnowledge"]] = relationship(
        back_populates="detail_knowledge"
    )


class TypeDetailKnowledge(PortalModel, Base):
    """Table: jenis_detail_knowledges."""

    __tablename__ = "jenis_detail_knowledges"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    detail_knowledge_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("detail_knowledges.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    detail_knowledge: Mapped[DetailKnowledge] = relationship(back_populates="types")
    product_types: Mapped[list["ProductTypeDetailKnowledge"]] = relationship(
        back_populates="type_detail_knowledge"
    )


class ProductTypeDetailKnowledge(PortalModel, Base):
    """Table: produk_jenis_detail_knowledges."""

    __tablename__ = "produk_jenis_detail_knowledges"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type_detail_knowledge_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("jenis_detail_knowledges.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type_detail_knowledge: Mapped[TypeDetailKnowledge] = relationship(
        back_populates="product_types"
    )
