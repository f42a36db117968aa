"""Environment-driven client configuration."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_OFFICIAL_URL = "https://api.github.com"
DEFAULT_TRENDING_URL = "https://trendings.herokuapp.com/repo"
DEFAULT_TIMEOUT = 30.0

ENV_OFFICIAL_URL = "GHCLIENT_OFFICIAL_URL"
ENV_TRENDING_URL = "GHCLIENT_TRENDING_URL"
ENV_TIMEOUT = "GHCLIENT_TIMEOUT"
ENV_DEBUG = "GHCLIENT_DEBUG"


@dataclass(slots=True)
class ClientConfig:
    """Endpoints and transport settings for GitHubClient."""

    official_url: str = DEFAULT_OFFICIAL_URL
    trending_url: str = DEFAULT_TRENDING_URL
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_TIMEOUT} must be a number of seconds, got {raw!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"{ENV_TIMEOUT} must be a positive finite number, got {raw!r}")
    return timeout


def load_config(environ: Mapping[str, str] | None = None) -> ClientConfig:
    """Build a ClientConfig from GHCLIENT_* variables, falling back to defaults."""
    env = os.environ if environ is None else environ

    raw_timeout = env.get(ENV_TIMEOUT, "").strip()
    return ClientConfig(
        official_url=env.get(ENV_OFFICIAL_URL) or DEFAULT_OFFICIAL_URL,
        trending_url=env.get(ENV_TRENDING_URL) or DEFAULT_TRENDING_URL,
        timeout=_parse_timeout(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT,
        debug=env.get(ENV_DEBUG, "").lower() == "true",
    )
