"""Project document models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProjectDocument(BaseModel):
    """A stored project as returned by the store, with a string id."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    title: str
    description: str
    analysis: dict[str, Any] | None = None
    kanban: dict[str, Any] | None = None
    workflow: dict[str, Any] | None = None
    created_at: datetime
    updated_at: datetime


class ProjectSubmission(BaseModel):
    """A project pitch submitted for analysis."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=10)


class ArtifactRequest(BaseModel):
    """Request to generate a follow-up artifact for an analysed project.

    Omitted fields are taken from the stored project.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_id: str = Field(..., min_length=1)
    analysis: dict[str, Any] | None = None
    title: str | None = None
    description: str | None = None
