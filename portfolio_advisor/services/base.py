"""Shared service wiring and JSON payload helpers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from portfolio_advisor.cache.ttl_cache import TTLCache
from portfolio_advisor.portfolio.models import ValidationIssue
from portfolio_advisor.providers.anthropic_client import DisabledTextGenerator, TextGenerator
from portfolio_advisor.runtime.monitoring import ServerMetrics
from portfolio_advisor.storage.portfolio_store import InMemoryPortfolioStore, PortfolioStore


@dataclass
class ServiceContext:
    store: PortfolioStore = field(default_factory=InMemoryPortfolioStore)
    text_generator: TextGenerator = field(default_factory=DisabledTextGenerator)
    cache: TTLCache = field(default_factory=TTLCache)
    cache_ttl_seconds: int = 300
    market_seed: int = 2025
    server_metrics: ServerMetrics | None = None


def validation_error(issues: list[ValidationIssue]) -> dict[str, Any]:
    return {"ok": False, "error": {"type": "validation_error", "errors": [asdict(issue) for issue in issues]}}


def wizard_error(code: str, message: str) -> dict[str, Any]:
    return {"ok": False, "error": {"type": "wizard_error", "code": code, "message": message}}
