# src/brief2check/tasks/task_api.py

"""
Parse pipeline: raw provider text -> TaskCollection -> seeded TaskStore.

    extract -> json.loads -> validate -> normalize

The pipeline is synchronous and pure; only the provider call can be slow,
and at most one provider call runs at a time (state.parse_lock).
"""

from __future__ import annotations

import json
import logging

from ..core.errors import BriefError, InputError, ParseError, ParseInProgressError
from ..core.prompt import build_prompt
from ..core.state import AppState
from .extractor import extract
from .normalizer import normalize
from .task_models import TaskCollection
from .validator import validate

logger = logging.getLogger(__name__)


def parse_response(raw: str) -> TaskCollection:
    """Turn raw provider text into a canonical TaskCollection (raises BriefError subclasses)."""
    json_text = extract(raw)
    logger.debug("Parse: extracted JSON len=%d (raw len=%d)", len(json_text), len(raw))

    try:
        data = json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.warning("Parse: invalid JSON from provider: %s", e)
        raise ParseError(
            f"Failed to parse JSON response: {e}. The response may not be valid JSON."
        ) from e

    result = validate(data)
    if not result.is_valid:
        logger.warning("Parse: payload rejected key=%s error=%s", result.key, result.error)
    result.raise_for_error()

    return normalize(data)


def request_raw_response(state: AppState, instructions: str) -> str:
    """Send the prompt through the LLM port and join the streamed chunks."""
    prompt = build_prompt(instructions)
    parts: list[str] = []
    for piece in state.llm.stream_chat([{"role": "user", "content": prompt}], ""):
        if piece:
            parts.append(piece)
    return "".join(parts)


def parse_instructions(state: AppState, instructions: str) -> TaskCollection:
    """
    Full parse for one user request.

    On success the store is replaced wholesale (no merge with the previous list).
    On failure the message goes to the error banner and the error is re-raised;
    nothing is retried.
    """
    text = (instructions or "").strip()
    if not text:
        err = InputError("Please enter some design instructions to parse.")
        state.notice.show(str(err))
        raise err

    if not state.parse_lock.acquire(blocking=False):
        raise ParseInProgressError("A parse is already in progress. Please wait for it to finish.")

    try:
        state.notice.dismiss()
        state.last_instructions = text
        logger.info("Parse: requesting tasks (instructions len=%d)", len(text))

        raw = request_raw_response(state, text)
        collection = parse_response(raw)
        state.task_store.seed(collection)

        logger.info(
            "Parse: done departments=%d tasks=%d",
            len(collection),
            sum(len(v) for v in collection.values()),
        )
        return collection
    except BriefError as e:
        state.notice.show(str(e))
        raise
    finally:
        state.parse_lock.release()
