from __future__ import annotations

import json
import re

from learning_api.core.errors import MalformedModelOutputError

# Opening fence with an optional language tag (```json, ```JSON, ```), then the closing fence.
_FENCE_OPEN_RE = re.compile(r"\A\s*```[ \t]*[A-Za-z0-9_+-]*[ \t]*(?:\r?\n|\Z|(?=[\[{]))")
_FENCE_CLOSE_RE = re.compile(r"[ \t]*```\s*\Z")


def strip_code_fences(text: str) -> str:
    """Remove a leading fence line and a trailing fence line, if present.

    Either fence may be missing. Applying this twice gives the same result
    as applying it once.
    """
    stripped = _FENCE_OPEN_RE.sub("", text, count=1)
    stripped = _FENCE_CLOSE_RE.sub("", stripped, count=1)
    return stripped.strip()


def parse_model_json(text: str, error_message: str = "Failed to parse model output as JSON."):
    """Fence-strip ``text`` and decode it, raising ``MalformedModelOutputError`` on failure."""
    cleaned = strip_code_fences(text or "")
    if not cleaned:
        raise MalformedModelOutputError(error_message)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedModelOutputError(error_message) from exc
