"""Pitchlab artifact generation package."""

from pitchlab.agents.artifact_generator import (
    ArtifactGenerator,
    ArtifactKind,
    ArtifactSource,
    GenerationResult,
)
from pitchlab.agents.oracle import AnthropicTextGenerator, OracleUnavailableError, TextGenerator

__all__ = [
    "AnthropicTextGenerator",
    "ArtifactGenerator",
    "ArtifactKind",
    "ArtifactSource",
    "GenerationResult",
    "OracleUnavailableError",
    "TextGenerator",
]
