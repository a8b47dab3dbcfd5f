"""Retry helper for side-effect free reads."""

import logging
import time
from collections.abc import Callable
from typing import TypeVar

from nutriplan.domain.errors import StoreError

T = TypeVar("T")

_logger = logging.getLogger(__name__)


def call_with_retry(
    func: Callable[[], T],
    *,
    action: str,
    retry_attempts: int = 1,
    retry_delay_seconds: float = 0.3,
) -> T:
    """Call a read with a short retry on store failures."""
    attempt = 0
    while True:
        try:
            return func()
        except StoreError as exc:
            attempt += 1
            _logger.warning(
                "Read %s failed (attempt %s/%s): %s",
                action,
                attempt,
                retry_attempts + 1,
                exc,
            )
            if attempt > retry_attempts:
                raise
            time.sleep(retry_delay_seconds)
