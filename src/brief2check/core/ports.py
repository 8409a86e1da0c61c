# src/brief2check/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The pipeline depends on a Protocol instead of a concrete provider client,
so the transport stays swappable and tests can use a fake.
"""

from typing import Iterable, Protocol

ChatMessage = dict[str, str]
# OpenAI-style chat messages: {"role": "...", "content": "..."}.


class LLMClient(Protocol):
    """
    Streaming text-generation client.

    Implementations unwrap any provider envelope and yield plain text chunks.
    Failures are raised as core.errors.TransportError (or a subclass).
    An empty system_prompt means "send the messages as they are".
    """

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]: ...
