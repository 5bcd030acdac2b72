"""AI insight generation over market analytics, with static fallbacks."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict
from typing import Any

from portfolio_advisor.cache.ttl_cache import prompt_cache_key
from portfolio_advisor.market.analytics import (
    analyze_sentiment,
    build_market_prompt,
    build_portfolio_prompt,
    build_risk_prompt,
    extract_key_themes,
    generate_risk_assessment,
    sector_breakdown,
)
from portfolio_advisor.market.feed import MarketSnapshot, build_market_snapshot
from portfolio_advisor.providers.anthropic_client import DISABLED_MESSAGE
from portfolio_advisor.providers.errors import ProviderError
from portfolio_advisor.services.base import ServiceContext

LOGGER = logging.getLogger(__name__)
UNAVAILABLE_MESSAGE = "Unable to generate analysis at this time."
DEFAULT_ALLOCATION = {"Stocks": 45, "Bonds": 15, "Real Estate": 10, "Crypto": 15, "Cash": 15}


class InsightService:
    def __init__(self, ctx: ServiceContext, snapshot: MarketSnapshot | None = None) -> None:
        self.ctx = ctx
        self.snapshot = snapshot or build_market_snapshot(seed=ctx.market_seed)

    def _generate(self, prompt: str) -> str:
        key = prompt_cache_key("insight", prompt)
        cached = self.ctx.cache.get(key)
        if cached is not None:
            return cached
        text = self.ctx.text_generator.generate(prompt)
        if text and text != DISABLED_MESSAGE:
            self.ctx.cache.set(key, text, ttl_seconds=self.ctx.cache_ttl_seconds)
        return text or UNAVAILABLE_MESSAGE

    async def generate_analysis(self, prompt: str) -> str:
        """Never raises; any provider failure degrades to the fallback text."""
        try:
            return await asyncio.to_thread(self._generate, prompt)
        except ProviderError as error:
            LOGGER.warning("insight generation failed: provider=%s code=%s status=%s", error.provider, error.code, error.status)
        except Exception:
            LOGGER.exception("insight generation unexpected failure")
        return UNAVAILABLE_MESSAGE

    def schedule_analysis(self, prompt: str) -> asyncio.Task[str]:
        """Fire-and-forget variant; the caller may cancel the returned task."""
        return asyncio.get_running_loop().create_task(self.generate_analysis(prompt))

    def market_sentiment(self) -> dict[str, Any]:
        return {"ok": True, **asdict(analyze_sentiment(self.snapshot.news))}

    def key_themes(self, limit: int = 5) -> dict[str, Any]:
        return {"ok": True, "themes": extract_key_themes(self.snapshot.news, limit=max(1, limit))}

    def risk_assessment(self) -> dict[str, Any]:
        return {"ok": True, **asdict(generate_risk_assessment(self.snapshot))}

    async def generate_insights(self, allocation: dict[str, int] | None = None) -> dict[str, Any]:
        sentiment = analyze_sentiment(self.snapshot.news)
        themes = extract_key_themes(self.snapshot.news)
        risk = generate_risk_assessment(self.snapshot)
        sectors = sector_breakdown(self.snapshot.stocks)
        prompts = {
            "portfolio": build_portfolio_prompt(allocation or DEFAULT_ALLOCATION, sentiment, risk),
            "market": build_market_prompt(sectors, sentiment, themes),
            "risk": build_risk_prompt(risk),
        }
        results = await asyncio.gather(*(self.generate_analysis(prompt) for prompt in prompts.values()))
        return {
            "ok": True,
            "sentiment": asdict(sentiment),
            "key_themes": themes,
            "risk_assessment": asdict(risk),
            "sectors": sectors,
            "insights": dict(zip(prompts.keys(), results)),
        }
