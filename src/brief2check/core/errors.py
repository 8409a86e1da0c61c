# src/brief2check/core/errors.py

"""
Error kinds surfaced to the user.

Every failure ends up as one human-readable message (str(exc)).
Ingestion errors (extraction/parse/schema) are terminal for that parse attempt
and are never retried; transport errors are classified by HTTP status.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred while parsing instructions. Please try again."


class BriefError(Exception):
    """Base class for every error the app reports to the user."""


class InputError(BriefError):
    """User input rejected before any provider call."""


class ParseInProgressError(BriefError):
    """A provider call is already in flight."""


class ExtractionError(BriefError):
    """No JSON object boundaries found in the provider text."""


class ParseError(BriefError):
    """Text inside the object boundaries is not valid JSON."""


class SchemaError(BriefError):
    """Parsed payload does not have the department -> list shape."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        expected: str | None = None,
        actual: str | None = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.expected = expected
        self.actual = actual


class TransportError(BriefError):
    """Provider call failed. `status` is None for network/timeout failures."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class AuthError(TransportError):
    pass


class RateLimitError(TransportError):
    pass


class ServerError(TransportError):
    pass


def classify_http_status(status: int, message: str | None = None) -> TransportError:
    """
    Map a non-2xx provider status to a TransportError subclass.

    401/403 -> auth, 429 -> rate limit, >=500 -> server, other -> generic with message.
    """
    if status in (401, 403):
        return AuthError("Invalid API key. Please check your API key configuration.", status=status)
    if status == 429:
        return RateLimitError("Rate limit exceeded. Please try again later.", status=status)
    if status >= 500:
        return ServerError("Server error. Please try again later.", status=status)

    detail = (message or "").strip()
    if not detail:
        return TransportError(f"Request failed with status {status}", status=status)
    return TransportError(f"API Error: {detail}", status=status)


def friendly_error_message(err: BaseException) -> str:
    if isinstance(err, BriefError):
        return str(err).strip() or GENERIC_ERROR_MESSAGE
    logger.debug("Unexpected error type surfaced to user: %s", err.__class__.__name__)
    return GENERIC_ERROR_MESSAGE
