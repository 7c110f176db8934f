# =============================================================================
# core/config.py  —  Environment Settings
# =============================================================================
#
# Every knob comes from an environment variable.  main.py calls
# load_dotenv() first, so a local .env file works too.
#
#   AIFAIS_API_BASE             Remote API base URL
#   DEBUG                       "true" → DEBUG-level logging
#   AIFAIS_MAX_RETRIES          Attempts per call (transient failures only)
#   AIFAIS_RETRY_BASE_DELAY_MS  First backoff delay; doubles each retry
#   AIFAIS_TIMEOUT_SECONDS      Per-request HTTP timeout
#   AIFAIS_TOOLS                Comma-separated tools to expose (default: all)
#
# Settings are read ONCE at startup and passed down explicitly; nothing in
# core/ reads os.environ on its own.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.catalog import TOOLS
from core.errors import ConfigurationError

DEFAULT_API_BASE = "https://aifais.com/api/v1"
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_BASE_DELAY_MS = 1000
DEFAULT_TIMEOUT_SECONDS = 60.0


@dataclass(frozen=True)
class Settings:
    api_base: str = DEFAULT_API_BASE
    debug: bool = False
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_base_delay_ms: int = DEFAULT_RETRY_BASE_DELAY_MS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    enabled_tools: Optional[tuple[str, ...]] = None   # None = all tools


def _parse_int(environ: Mapping[str, str], key: str, default: int, minimum: int) -> int:
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, got {value}")
    return value


def _parse_timeout(environ: Mapping[str, str]) -> float:
    raw = environ.get("AIFAIS_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(
            f"AIFAIS_TIMEOUT_SECONDS must be a number, got {raw!r}"
        ) from None
    if value <= 0:
        raise ConfigurationError(f"AIFAIS_TIMEOUT_SECONDS must be > 0, got {value}")
    return value


def _parse_tools(environ: Mapping[str, str]) -> Optional[tuple[str, ...]]:
    raw = environ.get("AIFAIS_TOOLS", "").strip()
    if not raw:
        return None
    names = tuple(name.strip() for name in raw.split(",") if name.strip())
    unknown = [name for name in names if name not in TOOLS]
    if unknown:
        raise ConfigurationError(
            f"AIFAIS_TOOLS contains unknown tool(s): {', '.join(unknown)}. "
            f"Available: {', '.join(TOOLS)}"
        )
    return names


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment (os.environ by default).

    Raises:
        ConfigurationError: if a numeric value or a tool name is invalid.
    """
    if environ is None:
        environ = os.environ

    return Settings(
        api_base=environ.get("AIFAIS_API_BASE") or DEFAULT_API_BASE,
        debug=environ.get("DEBUG", "false").lower() == "true",
        max_retries=_parse_int(environ, "AIFAIS_MAX_RETRIES", DEFAULT_MAX_RETRIES, 1),
        retry_base_delay_ms=_parse_int(
            environ, "AIFAIS_RETRY_BASE_DELAY_MS", DEFAULT_RETRY_BASE_DELAY_MS, 0
        ),
        timeout_seconds=_parse_timeout(environ),
        enabled_tools=_parse_tools(environ),
    )
