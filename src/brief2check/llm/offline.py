# src/brief2check/llm/offline.py

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Final

from ..core.ports import ChatMessage

DEMO_RESPONSE: Final[dict[str, list[str]]] = {
    "Marketing": [
        "Use primary brand blue (avoid dark navy from Q1 assets)",
        'Set primary CTA to "Request a Demo"',
        "Keep slides 1–3 visually uncluttered with clear value proposition on slide 2",
        "Ensure text is legible for webinar use and exports cleanly in 16:9 and 1:1",
        "Use gradients only if subtle and brand-aligned",
    ],
    "Legal": [
        "Add standard T&Cs footer on every slide, including title and closing",
        'Remove or replace prohibited terms (e.g. "guaranteed", "risk-free")',
        'Phrase performance claims as "based on internal benchmarks"',
    ],
    "Product": [
        "Insert Feature X workflow screenshot on slide 3 (March 18 build only)",
        "Mention Tool Y integration as complementary, not a replacement",
    ],
    "Brand": [
        "Place logo in bottom-right with required clear space",
        "Do not stretch, recolor, or modify the logo",
        "Use approved heading type scale (no custom font weights)",
    ],
    "Other": [
        "Avoid placing critical content too close to slide edges",
        "Do not include any pricing information in the deck",
    ],
}


class OfflineLLMClient:
    """
    Offline deterministic client used for demos when no external API is configured.

    Ignores the prompt and always returns the same department payload as JSON text,
    so the whole parse pipeline still runs.
    """

    def __init__(self, payload: dict[str, list[str]] | None = None) -> None:
        self._payload = DEMO_RESPONSE if payload is None else payload

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        yield json.dumps(self._payload, ensure_ascii=False, indent=2)
