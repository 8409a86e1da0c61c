# tests/test_errors.py

from __future__ import annotations

import pytest

from brief2check.core.errors import (
    GENERIC_ERROR_MESSAGE,
    AuthError,
    ExtractionError,
    RateLimitError,
    ServerError,
    TransportError,
    classify_http_status,
    friendly_error_message,
)
from brief2check.core.notices import ErrorNotice

from .fakes import FakeClock


@pytest.mark.parametrize("status", [401, 403])
def test_auth_statuses(status: int) -> None:
    err = classify_http_status(status, "bad key")
    assert isinstance(err, AuthError)
    assert err.status == status
    assert "Invalid API key" in str(err)


def test_rate_limit_status() -> None:
    assert isinstance(classify_http_status(429), RateLimitError)


@pytest.mark.parametrize("status", [500, 502, 503])
def test_server_statuses(status: int) -> None:
    assert isinstance(classify_http_status(status), ServerError)


def test_other_status_keeps_message() -> None:
    err = classify_http_status(400, "model field missing")
    assert type(err) is TransportError
    assert str(err) == "API Error: model field missing"


def test_other_status_without_message() -> None:
    assert str(classify_http_status(404)) == "Request failed with status 404"


def test_friendly_error_message() -> None:
    assert friendly_error_message(ExtractionError("no object")) == "no object"
    assert friendly_error_message(ValueError("internal detail")) == GENERIC_ERROR_MESSAGE


def test_notice_holds_one_message_and_expires() -> None:
    clock = FakeClock()
    notice = ErrorNotice(display_seconds=5.0, clock=clock)

    notice.show("first")
    notice.show("second")
    assert notice.current() == "second"

    clock.advance(4.9)
    assert notice.current() == "second"

    clock.advance(0.2)
    assert notice.current() is None


def test_notice_dismiss_clears_immediately() -> None:
    notice = ErrorNotice(clock=FakeClock())
    notice.show("boom")
    notice.dismiss()
    assert notice.current() is None
