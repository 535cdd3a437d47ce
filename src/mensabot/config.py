"""Environment based configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import time
from zoneinfo import ZoneInfo

from .exceptions import ConfigError
from .util import load_timezone, parse_rollover_time

DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class Settings:
    bot_token: str
    api_url: str
    next_day: time
    timezone: ZoneInfo | None = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: str | None,
    ) -> Settings:
        """Load settings from ``environ``; non-empty ``overrides`` win."""
        env = dict(os.environ if environ is None else environ)
        for key, value in overrides.items():
            if value:
                env[key.upper()] = value
        return cls(
            bot_token=_require(env, "BOT_TOKEN"),
            api_url=_require(env, "API_URL"),
            next_day=parse_rollover_time(_require(env, "NEXT_DAY")),
            timezone=load_timezone(env.get("TIMEZONE")),
            request_timeout=_parse_timeout(env.get("REQUEST_TIMEOUT")),
            log_level=(env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if not value or not value.strip():
        raise ConfigError(f"Missing required environment variable: {name}")
    return value.strip()


def _parse_timeout(value: str | None) -> float:
    if value is None or not value.strip():
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ConfigError("REQUEST_TIMEOUT must be a number of seconds.") from exc
    if timeout <= 0:
        raise ConfigError("REQUEST_TIMEOUT must be positive.")
    return timeout
