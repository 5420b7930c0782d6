"""Error taxonomy for the aggregator.

A detail record that does not exist upstream is not an error: the detail
use case returns ``None`` instead.
"""

from __future__ import annotations

from typing import Optional


class AggregatorError(Exception):
    """Base class for every failure raised by the aggregator."""


class UpstreamError(AggregatorError):
    """An HTTP call failed, returned non-2xx, or returned a body that is not JSON."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status_code = status_code


class LocalizationMissing(AggregatorError):
    """No entry in the target locale exists and no fallback is configured."""

    def __init__(self, locale: str, what: str) -> None:
        super().__init__(f"No '{locale}' entry for {what}")
        self.locale = locale


class DataShapeViolation(AggregatorError):
    """An upstream payload does not have the shape the view models require."""
