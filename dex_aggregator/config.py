"""YAML configuration loader and validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.yaml")

FALLBACK_MODES = ("none", "source")
PAGINATION_MODES = ("cumulative", "offset")


@dataclass
class ApiConfig:
    """Upstream HTTP settings."""

    base_url: str = "https://pokeapi.co/api/v2"
    timeout: float = 30.0
    user_agent: str = "DexAggregator/0.1"
    rate_limit_ms: int = 0


@dataclass
class LocaleConfig:
    """Which language localized text is taken from."""

    target_locale: str = "ko"
    source_locale: str = "en"
    fallback: str = "none"  # "none" (hard failure) or "source"


@dataclass
class ListingConfig:
    page_size: int = 15
    pagination: str = "cumulative"  # "cumulative" (whole prefix) or "offset" (new slice only)


@dataclass
class CacheConfig:
    """Read-through cache of upstream payloads, keyed by URL."""

    enabled: bool = True
    maxsize: int = 2048


@dataclass
class AppConfig:
    """Top-level application configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    locale: LocaleConfig = field(default_factory=LocaleConfig)
    listing: ListingConfig = field(default_factory=ListingConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    random_seed: Optional[int] = None


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration from a YAML file, falling back to defaults."""
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        logger.info("No config file at %s, using defaults", config_path)
        config = AppConfig()
    else:
        logger.info("Loading config from %s", config_path)
        with open(config_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        config = _parse_config(raw) if raw else AppConfig()

    _validate_config(config)
    return config


def _parse_config(raw: Dict[str, Any]) -> AppConfig:
    """Parse raw YAML dict into AppConfig."""
    config = AppConfig()

    if "api" in raw:
        api = raw["api"]
        config.api = ApiConfig(
            base_url=str(api.get("base_url", config.api.base_url)).rstrip("/"),
            timeout=float(api.get("timeout", config.api.timeout)),
            user_agent=str(api.get("user_agent", config.api.user_agent)),
            rate_limit_ms=int(api.get("rate_limit_ms", config.api.rate_limit_ms)),
        )

    if "locale" in raw:
        loc = raw["locale"]
        config.locale = LocaleConfig(
            target_locale=str(loc.get("target_locale", config.locale.target_locale)),
            source_locale=str(loc.get("source_locale", config.locale.source_locale)),
            fallback=str(loc.get("fallback", config.locale.fallback)),
        )

    if "listing" in raw:
        lst = raw["listing"]
        config.listing = ListingConfig(
            page_size=int(lst.get("page_size", config.listing.page_size)),
            pagination=str(lst.get("pagination", config.listing.pagination)),
        )

    if "cache" in raw:
        c = raw["cache"]
        config.cache = CacheConfig(
            enabled=bool(c.get("enabled", config.cache.enabled)),
            maxsize=int(c.get("maxsize", config.cache.maxsize)),
        )

    if raw.get("random_seed") is not None:
        config.random_seed = int(raw["random_seed"])

    return config


def _validate_config(config: AppConfig) -> None:
    """Validate config and raise on errors."""
    if not config.api.base_url.startswith(("http://", "https://")):
        raise ValueError(f"Config error: api.base_url must be an http(s) URL, got '{config.api.base_url}'")

    if config.api.rate_limit_ms < 0:
        raise ValueError("Config error: api.rate_limit_ms must not be negative")

    if not config.locale.target_locale:
        raise ValueError("Config error: locale.target_locale must not be empty")

    if config.locale.fallback not in FALLBACK_MODES:
        raise ValueError(
            f"Config error: unknown locale fallback '{config.locale.fallback}'. "
            f"Known: {list(FALLBACK_MODES)}"
        )

    if config.listing.page_size < 1:
        raise ValueError("Config error: listing.page_size must be at least 1")

    if config.listing.pagination not in PAGINATION_MODES:
        raise ValueError(
            f"Config error: unknown pagination mode '{config.listing.pagination}'. "
            f"Known: {list(PAGINATION_MODES)}"
        )

    if config.cache.enabled and config.cache.maxsize < 1:
        raise ValueError("Config error: cache.maxsize must be at least 1 when the cache is enabled")

    logger.info(
        "Config validated: %s, locale=%s (fallback=%s), page_size=%d (%s)",
        config.api.base_url,
        config.locale.target_locale,
        config.locale.fallback,
        config.listing.page_size,
        config.listing.pagination,
    )
