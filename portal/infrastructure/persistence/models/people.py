"""Portal accounts: users (staff) and agents. Neither has a detail page."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from portal.infrastructure.persistence.database import Base
from portal.infrastructure.persistence.models.mixins import PortalModel


class User(PortalModel, Base):
    """Portal user. Table: users."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    role: Mapped[str | None] = mapped_column(String(50), nullable=True)


class Agent(PortalModel, Base):
    """Customer-service agent. Table: agents."""

    __tablename__ = "agents"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
