"""Tests for the read retry helper."""

import pytest

from nutriplan.domain.errors import StoreError, ValidationError
from nutriplan.services.retry import call_with_retry


def test_retries_store_error_once() -> None:
    calls = []

    def flaky() -> str:
        calls.append(1)
        if len(calls) == 1:
            raise StoreError("temporarily unavailable")
        return "ok"

    assert call_with_retry(flaky, action="flaky", retry_delay_seconds=0) == "ok"
    assert len(calls) == 2


def test_raises_after_exhausting_attempts() -> None:
    calls = []

    def broken() -> None:
        calls.append(1)
        raise StoreError("down")

    with pytest.raises(StoreError):
        call_with_retry(broken, action="broken", retry_attempts=2, retry_delay_seconds=0)
    assert len(calls) == 3


def test_does_not_retry_other_errors() -> None:
    calls = []

    def invalid() -> None:
        calls.append(1)
        raise ValidationError("bad input")

    with pytest.raises(ValidationError):
        call_with_retry(invalid, action="invalid", retry_delay_seconds=0)
    assert len(calls) == 1
