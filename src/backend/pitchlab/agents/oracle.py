"""Text-completion client used to generate project artifacts."""

import logging
import os
from typing import Any, Protocol

import anthropic

from pitchlab.config import settings

logger = logging.getLogger(__name__)

# Map friendly names to Anthropic model identifiers
MODEL_ID_MAP = {
    "haiku": "claude-3-5-haiku-20241022",
    "sonnet": "claude-sonnet-4-20250514",
    "opus": "claude-opus-4-20250514",
}


class OracleUnavailableError(RuntimeError):
    """Raised when no model credential is configured."""


class TextGenerator(Protocol):
    """Anything that turns a prompt into free-form text."""

    async def generate_text(self, prompt: str) -> str: ...


def _response_text(response: Any) -> str:
    parts: list[str] = []
    for block in getattr(response, "content", None) or []:
        if isinstance(block, dict):
            if block.get("type") == "text":
                parts.append(block.get("text", ""))
            continue
        if getattr(block, "type", None) == "text":
            parts.append(getattr(block, "text", ""))
    return "".join(parts)


class AnthropicTextGenerator:
    """Single-turn text completion against the Anthropic Messages API."""

    def __init__(
        self,
        model: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> None:
        self.model = model or settings.generation_model
        self.max_tokens = max_tokens or settings.generation_max_tokens
        self.temperature = (
            settings.generation_temperature if temperature is None else temperature
        )
        self._client: anthropic.AsyncAnthropic | None = None

    @property
    def model_id(self) -> str:
        return MODEL_ID_MAP.get(self.model, self.model)

    def is_available(self) -> bool:
        if not self.model:
            return False
        return bool(settings.anthropic_api_key or os.getenv("ANTHROPIC_API_KEY"))

    def _get_client(self) -> anthropic.AsyncAnthropic:
        if not self._client:
            if settings.anthropic_api_key:
                self._client = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)
            else:
                self._client = anthropic.AsyncAnthropic()
        return self._client

    async def generate_text(self, prompt: str) -> str:
        if not self.is_available():
            raise OracleUnavailableError("No Anthropic API key configured")

        response = await self._get_client().messages.create(
            model=self.model_id,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
        )
        text = _response_text(response)
        logger.debug(f"Model {self.model_id} returned {len(text)} characters")
        return text
