# src/brief2check/core/notices.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ErrorNotice:
    """
    Single-slot error banner.

    At most one message is visible. A new message replaces the old one,
    and a message expires `display_seconds` after it was shown.
    """

    def __init__(
        self,
        display_seconds: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._display_seconds = float(display_seconds)
        self._clock = clock
        self._message: str | None = None
        self._shown_at = 0.0

    def show(self, message: str) -> None:
        self._message = message
        self._shown_at = self._clock()
        logger.debug("Error notice shown: %s", message)

    def dismiss(self) -> None:
        self._message = None

    def current(self) -> str | None:
        if self._message is None:
            return None
        if self._clock() - self._shown_at >= self._display_seconds:
            self._message = None
            return None
        return self._message
