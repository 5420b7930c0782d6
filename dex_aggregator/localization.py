"""Localized display-name lookup in multi-language records."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from dex_aggregator.config import LocaleConfig
from dex_aggregator.errors import DataShapeViolation, LocalizationMissing

logger = logging.getLogger(__name__)


class LocalizationResolver:
    """Pick the display name for the target locale out of a record's ``names``.

    Works on any record carrying ``names: [{language: {name}, name}]``,
    which covers both species and type records. With ``fallback="none"``
    a missing target-locale entry is a data-integrity error.
    """

    def __init__(self, locale: Optional[LocaleConfig] = None) -> None:
        self._locale = locale or LocaleConfig()

    def name(self, record: Dict[str, Any]) -> str:
        found = _first_name(record, self._locale.target_locale)
        if found is not None:
            return found

        what = record.get("name", "record")
        if self._locale.fallback == "source":
            fallback = _first_name(record, self._locale.source_locale)
            if fallback is None:
                fallback = record.get("name")
            if fallback is not None:
                logger.warning(
                    "No '%s' name for %s, using source-locale '%s'",
                    self._locale.target_locale, what, fallback,
                )
                return fallback

        raise LocalizationMissing(self._locale.target_locale, f"name of '{what}'")


def _first_name(record: Dict[str, Any], locale: str) -> Optional[str]:
    for entry in record.get("names", []):
        try:
            if entry["language"]["name"] == locale:
                return entry["name"]
        except (KeyError, TypeError) as exc:
            raise DataShapeViolation(f"Malformed name entry: {entry!r}") from exc
    return None
