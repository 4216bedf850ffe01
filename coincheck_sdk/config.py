"""Client configuration."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

import httpx

from .exceptions import UsageError
from .logger import LogLevel

DEFAULT_BASE_URL = "https://coincheck.com/api"
DEFAULT_TIMEOUT = 30.0


@dataclass
class ClientConfig:
    api_key: str = ""
    api_secret: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: LogLevel = LogLevel.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Load config from COINCHECK_* environment variables."""
        env = os.environ if environ is None else environ
        config = cls()
        config.api_key = env.get("COINCHECK_API_KEY", "")
        config.api_secret = env.get("COINCHECK_API_SECRET", "")
        base_url = env.get("COINCHECK_BASE_URL")
        if base_url:
            try:
                url = httpx.URL(base_url)
            except httpx.InvalidURL as e:
                raise UsageError(f"COINCHECK_BASE_URL is not a valid URL: {e}") from None
            if url.scheme not in ("http", "https") or not url.host:
                raise UsageError(f"COINCHECK_BASE_URL must be an http(s) URL, got {base_url!r}")
            config.base_url = base_url

        timeout = env.get("COINCHECK_TIMEOUT")
        if timeout:
            try:
                config.timeout = float(timeout)
            except ValueError:
                raise UsageError(f"COINCHECK_TIMEOUT must be a number, got {timeout!r}") from None
            if config.timeout <= 0:
                raise UsageError(f"COINCHECK_TIMEOUT must be positive, got {timeout!r}")

        log_level = env.get("COINCHECK_LOG_LEVEL")
        if log_level:
            try:
                config.log_level = LogLevel.parse(log_level)
            except ValueError:
                choices = ", ".join(level.value for level in LogLevel)
                raise UsageError(
                    f"COINCHECK_LOG_LEVEL must be one of {choices}, got {log_level!r}"
                ) from None

        return config
