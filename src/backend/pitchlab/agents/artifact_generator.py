"""Artifact generator - turns a project pitch into analysis, kanban and workflow artifacts.

Every operation follows the same pipeline: build a prompt, call the text
model once, extract the embedded JSON object and parse it. Any failure
along the way resolves to a static fallback artifact, so callers always
receive a populated result. Whether the artifact was generated or
substituted is recorded on the internal ``GenerationResult`` for logging.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pitchlab.agents.extraction import extract_json_object
from pitchlab.agents.fallbacks import fallback_analysis, fallback_kanban, fallback_workflow
from pitchlab.agents.oracle import TextGenerator
from pitchlab.agents.prompts import (
    build_analysis_prompt,
    build_kanban_prompt,
    build_workflow_prompt,
)

logger = logging.getLogger(__name__)


class ArtifactKind(StrEnum):
    ANALYSIS = "analysis"
    KANBAN = "kanban"
    WORKFLOW = "workflow"


class ArtifactSource(StrEnum):
    GENERATED = "generated"
    FALLBACK = "fallback"


@dataclass
class GenerationResult:
    """An artifact together with where it came from."""

    kind: ArtifactKind
    artifact: dict[str, Any]
    source: ArtifactSource
    error: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.source == ArtifactSource.FALLBACK


_FALLBACKS: dict[ArtifactKind, Callable[[], dict[str, Any]]] = {
    ArtifactKind.ANALYSIS: fallback_analysis,
    ArtifactKind.KANBAN: fallback_kanban,
    ArtifactKind.WORKFLOW: fallback_workflow,
}


class ArtifactGenerator:
    """Generates project artifacts with a text model, falling back to static content."""

    def __init__(self, oracle: TextGenerator):
        self.oracle = oracle

    async def _generate(self, kind: ArtifactKind, prompt: str) -> GenerationResult:
        try:
            text = await self.oracle.generate_text(prompt)
            artifact = extract_json_object(text)
        except Exception as exc:
            reason = f"{type(exc).__name__}: {exc}"
            logger.warning(f"Generating {kind} failed, using fallback: {reason}")
            return GenerationResult(
                kind=kind,
                artifact=_FALLBACKS[kind](),
                source=ArtifactSource.FALLBACK,
                error=reason,
            )

        logger.info(f"Generated {kind} ({len(text)} characters of model output)")
        return GenerationResult(kind=kind, artifact=artifact, source=ArtifactSource.GENERATED)

    async def analysis_result(self, title: str, description: str) -> GenerationResult:
        prompt = build_analysis_prompt(title, description)
        return await self._generate(ArtifactKind.ANALYSIS, prompt)

    async def kanban_result(
        self, analysis: Mapping[str, Any] | None, title: str, description: str
    ) -> GenerationResult:
        prompt = build_kanban_prompt(analysis, title, description)
        return await self._generate(ArtifactKind.KANBAN, prompt)

    async def workflow_result(
        self, analysis: Mapping[str, Any] | None, title: str, description: str
    ) -> GenerationResult:
        prompt = build_workflow_prompt(analysis, title, description)
        return await self._generate(ArtifactKind.WORKFLOW, prompt)

    async def analyze_project(self, title: str, description: str) -> dict[str, Any]:
        """Score a project pitch across the evaluation pillars."""
        return (await self.analysis_result(title, description)).artifact

    async def generate_kanban(
        self, analysis: Mapping[str, Any] | None, title: str, description: str
    ) -> dict[str, Any]:
        """Break an analysed project down into kanban pipelines and tasks."""
        return (await self.kanban_result(analysis, title, description)).artifact

    async def generate_workflow(
        self, analysis: Mapping[str, Any] | None, title: str, description: str
    ) -> dict[str, Any]:
        """Produce technical, user-journey and schema diagrams for an analysed project."""
        return (await self.workflow_result(analysis, title, description)).artifact
