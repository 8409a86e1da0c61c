# src/brief2check/llm/client.py

from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Iterable, List, Optional

import httpx
import openai
from openai import OpenAI

from ..core.errors import AuthError, RateLimitError, TransportError, classify_http_status
from ..core.ports import ChatMessage

logger = logging.getLogger(__name__)

_BAD_MODEL_COOLDOWN_SECONDS = 3600.0


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip()
    if not s:
        return default
    try:
        return float(s)
    except ValueError:
        return default


def _timeouts_from_env() -> dict[str, float]:
    """
    Timeouts are configurable via env so a slow model cannot hang the parse forever.

    Defaults:
    - connect timeout: 5s
    - read timeout: 40s (no data from server)
    - first token timeout: 30s (no content tokens)
    """
    first_token = _env_float("BRIEF2CHECK_LLM_FIRST_TOKEN_TIMEOUT_SECONDS", 30.0)
    read_timeout = _env_float("BRIEF2CHECK_LLM_READ_TIMEOUT_SECONDS", 40.0)
    connect_timeout = _env_float("BRIEF2CHECK_LLM_CONNECT_TIMEOUT_SECONDS", 5.0)

    # keep read >= first_token as a sane baseline
    read_timeout = max(read_timeout, first_token)

    return {
        "first_token": first_token,
        "read": read_timeout,
        "connect": connect_timeout,
    }


def _status_detail(exc: openai.APIStatusError) -> str:
    """Best-effort provider message from an error body ({"error": {"message": ...}})."""
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
        if body.get("message"):
            return str(body["message"])
    return str(getattr(exc, "message", "") or "")


def transport_error_from(exc: Exception) -> TransportError:
    """Translate an SDK/network exception into our TransportError hierarchy."""
    if isinstance(exc, TransportError):
        return exc
    if isinstance(exc, openai.APIStatusError):
        return classify_http_status(int(exc.status_code), _status_detail(exc))
    if isinstance(exc, (openai.APIConnectionError, httpx.TransportError)):
        return TransportError("Network error while contacting the provider. Please try again later.")
    if isinstance(exc, TimeoutError):
        return TransportError("The provider did not respond in time. Please try again later.")
    return TransportError(str(exc).strip() or "Provider request failed.")


class OpenRouterLLMClient:
    """
    OpenAI-compatible streaming client (OpenRouter by default).

    Behavior:
    - Tries models in the order from settings (BRIEF2CHECK_LLM_MODELS).
    - No first content token within the first-token timeout -> next model.
    - 404 (model not available) -> cooldown + next model.
    - Rate limit / server / network issues -> next model.
    - Auth issues -> fail fast (no retries across models).
    """

    def __init__(self, settings: Any) -> None:
        api_key = getattr(settings, "openrouter_api_key", None)
        base_url = getattr(settings, "openrouter_base_url", "") or ""

        if not api_key or not str(api_key).strip():
            raise RuntimeError("LLM API key is not set. Set BRIEF2CHECK_OPENROUTER_API_KEY in your .env.")
        if not base_url.strip():
            raise RuntimeError("LLM base URL is not set. Set BRIEF2CHECK_OPENROUTER_BASE_URL in your .env.")

        self._models: List[str] = [m.strip() for m in getattr(settings, "llm_models", []) or [] if m.strip()]
        if not self._models:
            raise RuntimeError("LLM model list is empty. Set BRIEF2CHECK_LLM_MODELS in your .env.")

        self._headers: Dict[str, str] = dict(getattr(settings, "extra_headers", {}) or {})
        self._temperature = float(getattr(settings, "llm_temperature", 0.1))
        self._bad_models: dict[str, float] = {}  # model -> retry_at (monotonic)

        t = _timeouts_from_env()
        self._first_token_timeout = float(t["first_token"])
        self._read_timeout = float(t["read"])
        # We disable automatic retries to allow quick fallback across models.
        self._client = OpenAI(
            base_url=str(base_url),
            api_key=str(api_key),
            timeout=httpx.Timeout(connect=t["connect"], read=t["read"], write=10.0, pool=t["connect"]),
            max_retries=0,
        )

    def _create_stream(self, model: str, messages: list[ChatMessage]) -> Any:
        return self._client.chat.completions.create(
            model=model,
            stream=True,
            temperature=self._temperature,
            extra_headers=self._headers or None,
            messages=messages,  # type: ignore[arg-type]
        )

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        full: list[ChatMessage] = list(messages)
        if system_prompt:
            full.insert(0, {"role": "system", "content": system_prompt})

        last_error: Optional[TransportError] = None
        now = time.monotonic()

        for model in self._models:
            retry_at = self._bad_models.get(model)
            if retry_at is not None and retry_at > now:
                continue

            logger.info(
                "LLM: trying model=%s (first_token_timeout=%.1fs, read_timeout=%.1fs)",
                model,
                self._first_token_timeout,
                self._read_timeout,
            )
            t0 = time.monotonic()
            deadline = t0 + self._first_token_timeout

            stream = None
            used_any = False

            try:
                stream = self._create_stream(model, full)

                for chunk in stream:
                    if not used_any and time.monotonic() > deadline:
                        last_error = transport_error_from(TimeoutError(f"First token timeout on model: {model}"))
                        logger.info("LLM: first token timeout on model=%s -> trying next", model)
                        break

                    content = None
                    if chunk.choices:
                        delta = getattr(chunk.choices[0], "delta", None)
                        content = getattr(delta, "content", None) if delta is not None else None

                    if content:
                        if not used_any:
                            logger.info("LLM: first token from model=%s (%.2fs)", model, time.monotonic() - t0)
                        used_any = True
                        yield content

                if used_any:
                    logger.debug("LLM: completed with model=%s", model)
                    return

                if last_error is None:
                    last_error = TransportError("No content received from the provider.")

            except (openai.OpenAIError, httpx.HTTPError) as e:
                err = transport_error_from(e)
                last_error = err

                # Partial output was already yielded; switching models would duplicate it.
                if isinstance(err, AuthError) or used_any:
                    raise err from e

                if err.status == 404:
                    self._bad_models[model] = time.monotonic() + _BAD_MODEL_COOLDOWN_SECONDS
                    logger.info("LLM: model not available (404): %s", model)
                    continue

                if isinstance(err, RateLimitError):
                    logger.info("LLM: rate-limited on model=%s, trying next", model)
                    continue

                logger.info("LLM: error on model=%s (%s), trying next", model, e.__class__.__name__)
                continue

            finally:
                if stream is not None:
                    stream.close()

        if last_error is not None:
            raise last_error
        raise TransportError("All LLM models failed.")
