"""SQLAlchemy ORM models."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class Project(Base):
    """Project - a submitted pitch and the artifacts generated for it.

    The analysis, kanban and workflow artifacts are embedded JSON documents
    owned by the project; they have no lifecycle of their own.
    """

    __tablename__ = "projects"
    __table_args__ = (
        Index("ix_projects_created_at", "created_at"),
    )

    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # Generated artifacts
    analysis: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    kanban: Mapped[dict[str, Any] | None] = mapped_column(JSON)
    workflow: Mapped[dict[str, Any] | None] = mapped_column(JSON)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
