# src/brief2check/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
With arguments, parses them as instructions once and prints the checklist.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop, run_once
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = sys.argv[1:] if argv is None else argv

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)
    state = create_initial_state(settings=settings)

    if args:
        return run_once(state, " ".join(args))

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
