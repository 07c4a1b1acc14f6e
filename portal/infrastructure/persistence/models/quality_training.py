"""Quality-training ORM models: training -> type -> detail -> subdetail."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.infrastructure.persistence.database import Base
from portal.infrastructure.persistence.models.mixins import PortalModel


class QualityTraining(PortalModel, Base):
    """Table: quality_trainings."""

    __tablename__ = "quality_trainings"

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    types: Mapped[list["TypeQualityTraining"]] = relationship(
        back_populates="quality_training"
    )


class TypeQualityTraining(PortalModel, Base):
    """Table: jenis_quality_trainings."""

    __tablename__ = "jenis_quality_trainings"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    quality_training_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("quality_trainings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    quality_training: Mapped[QualityTraining] = relationship(back_populates="types")
    details: Mapped[list["DetailQualityTraining"]] = relationship(
        back_populates="type_quality_training"
    )


class DetailQualityTraining(PortalModel, Base):
    """Table: detail_quality_trainings."""

    __tablename__ = "detail_quality_trainings"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type_quality_training_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("jenis_quality_trainings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type_quality_training: Mapped[TypeQualityTraining] = relationship(
        back_populates="details"
    )
    subdetails: Mapped[list["SubdetailQualityTraining"]] = relationship(
        back_populates="detail_quality_training"
    )


class SubdetailQualityTraining(PortalModel, Base):
    """Table: subdetail_quality_trainings."""

    __tablename__ = "subdetail_quality_trainings"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    detail_quality_training_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("detail_quality_trainings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    detail_quality_training: Mapped[DetailQualityTraining] = relationship(
        back_populates="subdetails"
    )
