"""Shared building blocks for generated artifact models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ArtifactModel(BaseModel):
    """Base for artifact shapes.

    Artifacts are serialized with camelCase keys, and unknown keys produced
    by the model are preserved rather than rejected.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class Priority(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Level(StrEnum):
    """Three-step scale used for risk, complexity and impact."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Position(ArtifactModel):
    """2-D layout position of a diagram node or entity."""

    x: float
    y: float
