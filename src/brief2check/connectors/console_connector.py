# src/brief2check/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import CommandEmitter, parse_and_render, render_tasks
from ..core.errors import BriefError, friendly_error_message
from ..core.state import AppState
from ..tasks.task_api import parse_instructions

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_once(state: AppState, instructions: str) -> int:
    """Non-interactive mode: parse once, print the checklist, return an exit code."""
    try:
        parse_instructions(state, instructions)
    except BriefError as e:
        print(f"[ERROR] {friendly_error_message(e)}")
        return 1
    print(render_tasks(state))
    return 0


def handle_line(state: AppState, line: str, emit: CommandEmitter | None = None) -> str:
    """One REPL line: slash commands go to the registry, anything else is parsed as typed."""
    reply = command_registry.handle(state, line, emit=emit)
    if reply is None:
        reply = parse_and_render(state, line, emit)
    return reply


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    _print_ts(
        "[CONSOLE] Paste design instructions to parse them into tasks. "
        "Use /help for commands. Use /exit to quit.\n"
    )

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input, emit)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = friendly_error_message(RuntimeError("command handler crashed"))

        _print_ts(reply or "")
