# src/brief2check/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires concrete implementations into AppState (LLM client, task store, error notice).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.notices import ErrorNotice
from ..core.ports import LLMClient
from ..core.state import AppState
from ..llm.client import OpenRouterLLMClient
from ..llm.offline import OfflineLLMClient
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_llm_client(settings) -> LLMClient:
    if getattr(settings, "offline", False):
        logger.info("LLM: offline mode requested, using demo payload.")
        return OfflineLLMClient()
    try:
        return OpenRouterLLMClient(settings)
    except RuntimeError as e:
        # Fallback for demos / local runs without an API key.
        logger.warning("LLM not configured (%s). Falling back to offline demo client.", e)
        return OfflineLLMClient()


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    return AppState(
        settings=settings,
        llm=create_llm_client(settings),
        task_store=TaskStore(max_task_chars=settings.max_task_chars),
        notice=ErrorNotice(display_seconds=settings.error_display_seconds),
    )
