# src/brief2check/cli/commands.py

from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Callable
from datetime import datetime
from typing import cast

from ..core.errors import BriefError, friendly_error_message
from ..core.state import AppState
from ..tasks.export import format_collection, format_department
from ..tasks.task_models import collection_to_dict
from ..tasks.task_api import parse_instructions
from ..tasks.text_check import DebouncedTextCheck

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
# Handlers that need the text after the command word exactly as typed.
CommandHandler4 = Callable[[AppState, list[str], CommandEmitter | None, str], str]
CommandHandler = CommandHandler2 | CommandHandler3 | CommandHandler4

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /parse, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        head = line[1:].split(maxsplit=1)
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head[0].lower()
        raw = head[1] if len(head) > 1 else ""
        args = raw.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, emit, raw)

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def _resolve_department(state: AppState, raw: str) -> str:
    """Match an existing department case-insensitively; otherwise use the name as typed."""
    for dept in state.task_store.departments():
        if dept.lower() == raw.lower():
            return dept
    return raw


def _parse_position(raw: str) -> int | None:
    """1-based position from the user -> 0-based store index."""
    try:
        n = int(raw)
    except ValueError:
        return None
    return n - 1 if n >= 1 else None


def _progress_line(state: AppState) -> str:
    p = state.task_store.progress()
    return f"{p.completed} / {p.total} tasks completed"


def render_tasks(state: AppState) -> str:
    store = state.task_store
    if store.is_empty():
        return "No tasks found. Try parsing your instructions again."

    lines: list[str] = []
    for dept in store.departments():
        lines.append(f"{dept}:")
        tasks = store.tasks(dept)
        if not tasks:
            lines.append("  (no tasks)")
        for i, t in enumerate(tasks, start=1):
            mark = "x" if t.completed else " "
            lines.append(f"  {i}. [{mark}] {t.text}")
    lines.append("")
    lines.append(_progress_line(state))
    return "\n".join(lines)


def _field_check(state: AppState, dept: str, index: int) -> DebouncedTextCheck:
    """One checker per editable field, keyed by its current position."""
    key = (dept, index)
    checker = state.field_checks.get(key)
    if checker is None:
        checker = DebouncedTextCheck(
            lambda c: logger.debug("Text check dept=%s index=%d valid=%s", dept, index, c.is_valid),
            delay=getattr(state.settings, "validation_debounce_seconds", 0.3),
            max_chars=getattr(state.settings, "max_task_chars", 1000),
        )
        state.field_checks[key] = checker
    return checker


def _drop_field_checks(state: AppState, dept: str | None = None) -> None:
    """Cancel and forget checkers whose positions are no longer valid."""
    for key in [k for k in state.field_checks if dept is None or k[0] == dept]:
        state.field_checks.pop(key).cancel()


def parse_and_render(state: AppState, instructions: str, emit: CommandEmitter | None = None) -> str:
    """Parse instructions (as typed) into a new checklist and render it."""
    if emit:
        emit("[PARSE] Extracting tasks...")
    try:
        parse_instructions(state, instructions)
    except BriefError as e:
        return f"[ERROR] {friendly_error_message(e)}"
    _drop_field_checks(state)
    return render_tasks(state)


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    mode = "OFFLINE (demo payload)" if getattr(settings, "offline", False) else "ONLINE"
    models = ", ".join(list(getattr(settings, "llm_models", []) or []))
    return (
        "Status:\n"
        f"  Mode: {mode}\n"
        f"  Models (priority -> fallback): {models}\n"
        f"  Tasks: {_progress_line(state)}"
    )


def cmd_parse(state: AppState, args: list[str], emit: CommandEmitter | None, raw: str) -> str:
    """
    /parse <instructions>  -> parse free-form instructions into a new checklist
    /parse                 -> re-run the last instructions
    """
    instructions = raw if raw.strip() else state.last_instructions
    return parse_and_render(state, instructions, emit)


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_tasks(state)


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None, raw: str) -> str:
    """/add <department> [text...]"""
    if not args:
        return "Usage: /add <department> [text]"
    dept = _resolve_department(state, args[0])
    index = state.task_store.add(dept)
    parts = raw.split(maxsplit=1)
    text = parts[1] if len(parts) > 1 else ""
    if text:
        state.task_store.set_text(dept, index, text)
    return f"Added task {index + 1} to {dept}."


def cmd_edit(state: AppState, args: list[str], emit: CommandEmitter | None, raw: str) -> str:
    """/edit <department> <n> <text...>"""
    if len(args) < 2:
        return "Usage: /edit <department> <n> <text>"
    dept = _resolve_department(state, args[0])
    index = _parse_position(args[1])
    if index is None:
        return "Task number must be a positive integer."

    parts = raw.split(maxsplit=2)
    text = parts[2] if len(parts) > 2 else ""
    state.task_store.set_text(dept, index, text)

    # A committed edit is the end of the field's editing session.
    check = _field_check(state, dept, index).on_blur(text)
    if not check.is_valid:
        return f"Updated {dept} task {index + 1} (warning: {check.error})."
    return f"Updated {dept} task {index + 1}."


def _set_completed(state: AppState, args: list[str], completed: bool) -> str:
    if len(args) != 2:
        return f"Usage: /{'done' if completed else 'undo'} <department> <n>"
    dept = _resolve_department(state, args[0])
    index = _parse_position(args[1])
    if index is None:
        return "Task number must be a positive integer."
    state.task_store.set_completed(dept, index, completed)
    return f"{dept} task {index + 1} marked {'completed' if completed else 'pending'}. {_progress_line(state)}"


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, True)


def cmd_undo(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, False)


def cmd_rm(state: AppState, args: list[str]) -> str:
    """/rm <department> <n>  (later tasks move up by one)"""
    if len(args) != 2:
        return "Usage: /rm <department> <n>"
    dept = _resolve_department(state, args[0])
    index = _parse_position(args[1])
    if index is None:
        return "Task number must be a positive integer."
    task = state.task_store.get(dept, index)
    if task is None:
        return f"No task {index + 1} in {dept}."

    checker = state.field_checks.pop((dept, index), None)
    if checker is not None:
        checker.on_remove(task.text)
    # Every later position in this department shifts; their checkers are stale.
    _drop_field_checks(state, dept)

    state.task_store.remove(dept, index)
    return render_tasks(state)


def cmd_progress(state: AppState, args: list[str]) -> str:
    return _progress_line(state)


def cmd_export(state: AppState, args: list[str]) -> str:
    """
    /export             -> all departments
    /export <department> -> one department
    """
    now = datetime.now().astimezone()
    snapshot = state.task_store.snapshot()
    if not args:
        text = format_collection(snapshot, now)
        return text or "No tasks to export."

    dept = _resolve_department(state, " ".join(args))
    text = format_department(dept, snapshot, now)
    return text or f"No tasks to export for {dept}."


def cmd_check(state: AppState, args: list[str]) -> str:
    issues = state.task_store.text_issues()
    if not issues:
        return "All tasks look good."
    return "\n".join(["Task text issues:", *(f"  {i}" for i in issues)])


def cmd_json(state: AppState, args: list[str]) -> str:
    """Dump the checklist in the round-trip format ({"Dept": [{"text", "completed"}]})."""
    return json.dumps(collection_to_dict(state.task_store.snapshot()), ensure_ascii=False, indent=2)


def cmd_error(state: AppState, args: list[str]) -> str:
    msg = state.notice.current()
    return msg if msg else "No error."


def cmd_dismiss(state: AppState, args: list[str]) -> str:
    state.notice.dismiss()
    return "Error dismissed."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show mode, models and progress.")
registry.register("parse", cmd_parse, help_text="Parse instructions: /parse <text> (no text = re-run last).")
registry.register("list", cmd_list, help_text="Show the checklist.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <department> [text].")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <department> <n> <text>.")
registry.register("done", cmd_done, help_text="Mark completed: /done <department> <n>.")
registry.register("undo", cmd_undo, help_text="Mark pending: /undo <department> <n>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <department> <n>.", aliases=["del"])
registry.register("progress", cmd_progress, help_text="Show completed / total.")
registry.register("export", cmd_export, help_text="Export text: /export [department].")
registry.register("json", cmd_json, help_text="Dump the checklist as JSON (re-parseable).")
registry.register("check", cmd_check, help_text="List tasks with empty or too-long text.")
registry.register("error", cmd_error, help_text="Show the current error message.")
registry.register("dismiss", cmd_dismiss, help_text="Dismiss the current error message.")
