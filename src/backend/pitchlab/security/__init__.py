"""Security utilities for Pitchlab.

Provides sanitization for caller text that is interpolated into prompts.
"""

import re
import unicodedata


class InputSanitizer:
    """Sanitize user input before it reaches a model prompt."""

    # Maximum lengths for different input types
    MAX_TITLE_LENGTH = 200
    MAX_DESCRIPTION_LENGTH = 5000
    MAX_CONTEXT_LENGTH = 20000

    # Patterns that might indicate prompt injection attempts
    INJECTION_PATTERNS = [
        r"ignore\s+(previous|above|all)\s+(instructions?|prompts?)",
        r"disregard\s+(previous|above|all)\s+(instructions?|prompts?)",
        r"forget\s+(previous|above|all)\s+(instructions?|prompts?)",
        r"new\s+instructions?:",
        r"system\s*:",
        r"\[system\]",
        r"<\|im_start\|>",
        r"<\|endoftext\|>",
    ]

    # Control characters other than tab and newline
    _CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")

    @classmethod
    def _clean(cls, value: str | None, max_length: int) -> str:
        if not value:
            return ""
        value = unicodedata.normalize("NFC", value)
        value = value.encode("utf-8", errors="ignore").decode("utf-8")
        value = cls._CONTROL_CHARS.sub(" ", value)
        return value[:max_length].strip()

    @classmethod
    def sanitize_title(cls, title: str | None) -> str:
        """Sanitize a project title."""
        return cls._clean(title, cls.MAX_TITLE_LENGTH)

    @classmethod
    def sanitize_description(cls, description: str | None) -> str:
        """Sanitize a project description."""
        return cls._clean(description, cls.MAX_DESCRIPTION_LENGTH)

    @classmethod
    def sanitize_context(cls, context: str | None) -> str:
        """Sanitize derived context such as a summarized prior analysis."""
        return cls._clean(context, cls.MAX_CONTEXT_LENGTH)

    @classmethod
    def detect_injection_attempt(cls, text: str) -> bool:
        """Check if text contains potential prompt injection patterns.

        Args:
            text: The text to check

        Returns:
            True if injection patterns detected
        """
        text_lower = text.lower()
        for pattern in cls.INJECTION_PATTERNS:
            if re.search(pattern, text_lower, re.IGNORECASE):
                return True
        return False
