"""Runtime settings for the upstream stats API."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from urllib.parse import urlparse


logger = logging.getLogger(__name__)

DEFAULT_STATS_URL = "https://www.balldontlie.io/api/v1/stats"
PER_PAGE = 100

_STATS_URL_ENV = "PYHOOPS_STATS_URL"


@dataclass(frozen=True)
class Settings:
    stats_url: str = DEFAULT_STATS_URL


def _env_url(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip()
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        logger.warning("Invalid URL for %s: %s; using default %s", name, raw, default)
        return default
    return value


def load_settings() -> Settings:
    """Build settings from the environment, falling back to defaults."""

    return Settings(stats_url=_env_url(_STATS_URL_ENV, DEFAULT_STATS_URL))
