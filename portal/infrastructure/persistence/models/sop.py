"""SOP ORM models: SOP category -> SOP -> SOP type -> SOP detail."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.infrastructure.persistence.database import Base
from portal.infrastructure.persistence.models.mixins import PortalModel


class SopCategory(PortalModel, Base):
    """SOP category. Table: kategori_sops."""

    __tablename__ = "kategori_sops"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    sops: Mapped[list["Sop"]] = relationship(back_populates="sop_category")


class Sop(PortalModel, Base):
    """Standard operating procedure. Table: sops."""

    __tablename__ = "sops"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    sop_category_id: Mapped[str] = mapped_column(
        String, ForeignKey("kategori_sops.id", ondelete="CASCADE"), nullable=False, index=True
    )

    sop_category: Mapped[SopCategory] = relationship(back_populates="sops")
    types: Mapped[list["SopType"]] = relationship(back_populates="sop")


class SopType(PortalModel, Base):
    """Section type inside an SOP. Table: jenis_sops."""

    __tablename__ = "jenis_sops"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    sop_id: Mapped[str] = mapped_column(
        String, ForeignKey("sops.id", ondelete="CASCADE"), nullable=False, index=True
    )

    sop: Mapped[Sop] = relationship(back_populates="types")
    details: Mapped[list["SopDetail"]] = relationship(back_populates="sop_type")


class SopDetail(PortalModel, Base):
    """Name/value row of an SOP section. Table: detail_sops."""

    __tablename__ = "detail_sops"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    sop_type_id: Mapped[str] = mapped_column(
        String, ForeignKey("jenis_sops.id", ondelete="CASCADE"), nullable=False, index=True
    )

    sop_type: Mapped[SopType] = relationship(back_populates="details")
