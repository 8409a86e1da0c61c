# src/brief2check/tasks/extractor.py

"""
Pull a JSON-object substring out of raw provider text.

The provider is asked for bare JSON but may still wrap it in a markdown fence
or add prose around it. Two stages:
1) if there is a fenced block, use its content;
2) cut from the first "{" to the last "}" (inclusive).
"""

from __future__ import annotations

import logging
import re

from ..core.errors import ExtractionError

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```[\w+-]*\s*([\s\S]*?)\s*```")


def _fenced_content(text: str) -> str | None:
    m = _FENCE_RE.search(text)
    if not m:
        return None
    content = m.group(1).strip()
    # An empty fence or one without an object is not usable; fall back to the full text.
    if not content or "{" not in content:
        return None
    return content


def extract(raw: str) -> str:
    if not isinstance(raw, str):
        raise ExtractionError(
            f"Invalid response: expected string content, got {type(raw).__name__}"
        )

    text = raw.strip()
    fenced = _fenced_content(text)
    if fenced is not None:
        logger.debug("Extractor: using fenced block (len=%d)", len(fenced))
        text = fenced

    first = text.find("{")
    last = text.rfind("}")
    if first == -1 or last == -1 or last < first:
        raise ExtractionError("Invalid response: no JSON object found in the response")

    return text[first : last + 1]
