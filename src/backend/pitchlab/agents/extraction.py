"""Pull a JSON object out of free-form model output.

Models often wrap the requested JSON in prose or markdown fences, and the
prose itself may contain braces. Candidates are located with a
balanced-brace scan that understands JSON string literals, so a brace
inside a string value or in surrounding commentary does not end the object
early or stretch it to an unrelated closing brace.
"""

import json
from collections.abc import Iterator
from typing import Any


class ExtractionError(ValueError):
    """Raised when no JSON object can be recovered from model output."""


def _balanced_end(text: str, start: int) -> int | None:
    """Return the index of the brace closing the object opened at ``start``."""
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return None


def _opens_object(text: str, start: int) -> bool:
    """Whether the brace at ``start`` can begin a JSON object."""
    rest = text[start + 1:].lstrip()
    return not rest or rest[0] in '"}'


def iter_json_candidates(text: str) -> Iterator[str]:
    """Yield top-level balanced ``{...}`` spans from left to right.

    Scanning resumes after the end of each span, so objects nested inside
    a rejected candidate are never offered on their own. An unterminated
    brace in prose (one not followed by a key or ``}``) is stepped over; an
    unterminated object ends the scan.
    """
    position = text.find("{")
    while position != -1:
        end = _balanced_end(text, position)
        if end is None:
            if _opens_object(text, position):
                return
            position = text.find("{", position + 1)
            continue
        yield text[position:end + 1]
        position = text.find("{", end + 1)


def extract_json_object(text: str | None) -> dict[str, Any]:
    """Return the first top-level JSON object embedded in ``text``."""
    if not text or not text.strip():
        raise ExtractionError("Empty model response")

    found_candidate = False
    for candidate in iter_json_candidates(text):
        found_candidate = True
        try:
            payload = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(payload, dict):
            return payload

    if found_candidate:
        raise ExtractionError("Model response contained no parseable JSON object")
    if "{" in text:
        raise ExtractionError("Model response contained an unterminated JSON object")
    raise ExtractionError("No JSON object found in model response")
