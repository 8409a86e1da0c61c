# src/brief2check/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time (the offline client is used without a key).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

ENV_PREFIX = "BRIEF2CHECK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- LLM / OpenRouter ----
    offline: bool
    openrouter_api_key: Optional[str]
    openrouter_base_url: str
    llm_models: List[str]
    llm_temperature: float
    extra_headers: Dict[str, str]

    # ---- Editing / UI ----
    validation_debounce_ms: int
    max_task_chars: int
    error_display_seconds: float

    @property
    def validation_debounce_seconds(self) -> float:
        return max(0, self.validation_debounce_ms) / 1000.0

    @staticmethod
    def from_env() -> "Settings":
        app_name = _first_env(_k("APP_NAME"), default="brief2check") or "brief2check"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/brief2check"))

        offline = _env_bool(_k("OFFLINE"), False)
        openrouter_api_key = _first_env(_k("OPENROUTER_API_KEY"), "OPENROUTER_API_KEY", default=None)
        openrouter_base_url = _env(_k("OPENROUTER_BASE_URL"), "https://openrouter.ai/api/v1")

        http_referer = _env(_k("HTTP_REFERER"), "https://example.com")
        title = _env(_k("APP_TITLE"), app_name)
        extra_headers = {
            "HTTP-Referer": http_referer,
            "X-Title": title,
        }

        llm_models = _env_list(
            _k("LLM_MODELS"),
            [
                "google/gemini-2.0-flash-001",
                "qwen/qwen-2.5-72b-instruct:free",
                "deepseek/deepseek-chat-v3-0324:free",
            ],
        )
        # Low temperature keeps the extraction consistent between runs.
        llm_temperature = _env_float(_k("LLM_TEMPERATURE"), 0.1)

        validation_debounce_ms = _env_int(_k("VALIDATION_DEBOUNCE_MS"), 300)
        max_task_chars = _env_int(_k("MAX_TASK_CHARS"), 1000)
        error_display_seconds = _env_float(_k("ERROR_DISPLAY_SECONDS"), 5.0)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            offline=offline,
            openrouter_api_key=openrouter_api_key,
            openrouter_base_url=openrouter_base_url,
            llm_models=llm_models,
            llm_temperature=llm_temperature,
            extra_headers=extra_headers,
            validation_debounce_ms=validation_debounce_ms,
            max_task_chars=max_task_chars,
            error_display_seconds=error_display_seconds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
