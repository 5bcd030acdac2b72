"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from dotenv import load_dotenv

DEFAULT_STORAGE_PATH = "~/.portfolio_advisor/storage.json"
DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-5-20250929"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for stdio and HTTP-hosted modes."""

    app_name: str = "portfolio-advisor"
    app_version: str = "1.0.0"
    transport_mode: str = "auto"
    http_transport: str = "sse"
    host: str = "0.0.0.0"
    port: int = 8000
    mcp_path: str = "/mcp"
    health_path: str = "/health"
    storage_path: str = DEFAULT_STORAGE_PATH
    storage_key: str = "portfolioAppData"
    ai_insights_enabled: bool = False
    claude_api_key: str | None = None
    claude_model: str = DEFAULT_CLAUDE_MODEL
    request_timeout_seconds: float = 20.0
    cache_ttl_seconds: int = 300
    market_seed: int = 2025
    log_level: str = "INFO"


_Number = TypeVar("_Number", int, float)


def _env(*names: str, default: str = "") -> str:
    """First non-empty value among ``names``; later names are aliases."""
    for name in names:
        value = os.getenv(name)
        if value:
            return value.strip()
    return default


def _as_number(value: str, default: _Number, cast: Callable[[str], _Number]) -> _Number:
    if not value:
        return default
    try:
        return cast(value)
    except ValueError:
        return default


def _as_bool(value: str, default: bool) -> bool:
    if not value:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


def get_settings() -> Settings:
    """Load runtime settings from environment variables (and a local .env)."""
    load_dotenv()

    return Settings(
        app_name=_env("APP_NAME", default="portfolio-advisor"),
        transport_mode=_env("TRANSPORT_MODE", default="auto").lower(),
        http_transport=_env("HTTP_TRANSPORT", default="sse").lower(),
        host=_env("HOST", default="0.0.0.0"),
        port=_as_number(_env("PORT"), 8000, int),
        mcp_path=_env("MCP_PATH", default="/mcp"),
        health_path=_env("HEALTH_PATH", default="/health"),
        storage_path=_env("PORTFOLIO_STORAGE_PATH", default=DEFAULT_STORAGE_PATH),
        storage_key=_env("PORTFOLIO_STORAGE_KEY", default="portfolioAppData"),
        ai_insights_enabled=_as_bool(_env("AI_INSIGHTS_ENABLED"), False),
        claude_api_key=_env("CLAUDE_API_KEY", "ANTHROPIC_API_KEY") or None,
        claude_model=_env("CLAUDE_MODEL", "ANTHROPIC_MODEL", default=DEFAULT_CLAUDE_MODEL),
        request_timeout_seconds=_as_number(_env("REQUEST_TIMEOUT_SECONDS"), 20.0, float),
        cache_ttl_seconds=_as_number(_env("CACHE_TTL_SECONDS"), 300, int),
        market_seed=_as_number(_env("MARKET_SEED"), 2025, int),
        log_level=_env("LOG_LEVEL", default="INFO").upper(),
    )
