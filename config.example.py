# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets. Use .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "BRIEF2CHECK_APP_NAME": "App display name (default: brief2check).",
    "BRIEF2CHECK_LOG_LEVEL": "Console logging level (default: INFO; file log is always DEBUG).",
    "BRIEF2CHECK_DATA_DIR": "Local data directory for logs (default: .local/brief2check).",
    # LLM / OpenRouter
    "BRIEF2CHECK_OFFLINE": "Use the built-in demo payload instead of a real model (true/false).",
    "BRIEF2CHECK_OPENROUTER_API_KEY": "OpenRouter API key (without it the offline demo client is used).",
    "BRIEF2CHECK_OPENROUTER_BASE_URL": "OpenAI-compatible base URL (default: https://openrouter.ai/api/v1).",
    "BRIEF2CHECK_LLM_MODELS": "Comma/space separated list of models to try in order.",
    "BRIEF2CHECK_LLM_TEMPERATURE": "Sampling temperature for extraction (default: 0.1).",
    "BRIEF2CHECK_HTTP_REFERER": "Optional OpenRouter metadata header.",
    "BRIEF2CHECK_APP_TITLE": "Optional OpenRouter metadata header title.",
    "BRIEF2CHECK_LLM_FIRST_TOKEN_TIMEOUT_SECONDS": "Give up on a model without output after N seconds (default: 30).",
    "BRIEF2CHECK_LLM_READ_TIMEOUT_SECONDS": "HTTP read timeout (default: 40).",
    "BRIEF2CHECK_LLM_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5).",
    # Editing
    "BRIEF2CHECK_VALIDATION_DEBOUNCE_MS": "Delay before validating task text while typing (default: 300).",
    "BRIEF2CHECK_MAX_TASK_CHARS": "Max task text length before a warning (default: 1000).",
    "BRIEF2CHECK_ERROR_DISPLAY_SECONDS": "How long an error message stays visible (default: 5).",
}
