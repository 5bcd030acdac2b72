"""News sentiment, theme extraction and market risk heuristics."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

import pandas as pd

from portfolio_advisor.market.feed import MarketSnapshot, NewsItem, Stock

POSITIVE_THRESHOLD = 0.5
NEGATIVE_THRESHOLD = -0.5


@dataclass
class SentimentSummary:
    positive_percentage: int
    negative_percentage: int
    neutral_percentage: int
    overall_sentiment: str


@dataclass
class RiskAssessment:
    crypto_risk: str
    market_risk: str
    bond_safety: str


def _pct(count: int, total: int) -> int:
    return int(round(count / total * 100)) if total else 0


def analyze_sentiment(news: list[NewsItem]) -> SentimentSummary:
    positive = sum(1 for item in news if item.sentiment_score > POSITIVE_THRESHOLD)
    negative = sum(1 for item in news if item.sentiment_score < NEGATIVE_THRESHOLD)
    neutral = len(news) - positive - negative
    overall = "bullish" if positive > negative else "bearish" if negative > positive else "neutral"
    return SentimentSummary(
        positive_percentage=_pct(positive, len(news)),
        negative_percentage=_pct(negative, len(news)),
        neutral_percentage=_pct(neutral, len(news)),
        overall_sentiment=overall,
    )


def extract_key_themes(news: list[NewsItem], limit: int = 5) -> list[dict[str, int | str]]:
    counts = Counter(category for item in news for category in item.categories)
    return [{"theme": theme, "count": count} for theme, count in counts.most_common(limit)]


def _mean_abs_change(changes: list[float]) -> float:
    return sum(abs(value) for value in changes) / len(changes) if changes else 0.0


def generate_risk_assessment(snapshot: MarketSnapshot) -> RiskAssessment:
    crypto_volatility = _mean_abs_change([item.change for item in snapshot.cryptocurrencies])
    stock_volatility = _mean_abs_change([item.change for item in snapshot.stocks])
    crypto_risk = "High" if crypto_volatility > 3 else "Medium" if crypto_volatility > 1.5 else "Low"
    market_risk = "Elevated" if stock_volatility > 2 else "Normal"
    first_yield = snapshot.bonds[0].yield_percent if snapshot.bonds else 0.0
    bond_safety = "Attractive" if first_yield > 4.5 else "Average"
    return RiskAssessment(crypto_risk=crypto_risk, market_risk=market_risk, bond_safety=bond_safety)


def sector_breakdown(stocks: list[Stock], limit: int = 6) -> list[dict[str, float | str]]:
    """Total market cap per sector (billions), largest first."""
    if not stocks:
        return []
    frame = pd.DataFrame([{"sector": item.sector, "market_cap": item.market_cap} for item in stocks])
    totals = frame.groupby("sector")["market_cap"].sum().sort_values(ascending=False).head(limit)
    return [{"name": str(sector), "value": round(float(value) / 1000, 3)} for sector, value in totals.items()]


def build_portfolio_prompt(allocation: dict[str, int], sentiment: SentimentSummary, risk: RiskAssessment) -> str:
    mix = ", ".join(f"{name}: {value}%" for name, value in allocation.items())
    return (
        f"Portfolio Allocation:\n{mix}\n\n"
        "Market Conditions:\n"
        f"- Sentiment: {sentiment.overall_sentiment}\n"
        f"- Crypto Risk: {risk.crypto_risk}\n"
        f"- Bond Attractiveness: {risk.bond_safety}\n\n"
        "Provide 3 specific recommendations for portfolio adjustments with brief justifications.\n"
        "Format with clear headings and bullet points."
    )


def build_market_prompt(
    sectors: list[dict[str, float | str]],
    sentiment: SentimentSummary,
    themes: list[dict[str, int | str]],
) -> str:
    top_sectors = ", ".join(f"{item['name']} (${float(item['value']):.1f}B)" for item in sectors[:3])
    top_themes = ", ".join(f"{item['theme']} ({item['count']}x)" for item in themes[:3])
    return (
        "Market Trends:\n"
        f"- Top Sectors: {top_sectors}\n"
        f"- News Sentiment: {sentiment.positive_percentage}% positive\n"
        f"- Key Themes: {top_themes}\n\n"
        "Identify 2 emerging opportunities and 1 potential risk with supporting evidence.\n"
        "Keep response concise and data-driven."
    )


def build_risk_prompt(risk: RiskAssessment) -> str:
    return (
        "Risk Factors:\n"
        f"- Crypto Volatility: {risk.crypto_risk}\n"
        f"- Market Risk: {risk.market_risk}\n"
        f"- Bond Safety: {risk.bond_safety}\n\n"
        "Suggest 3 specific hedging strategies appropriate for these conditions.\n"
        "Format with clear numbered recommendations."
    )
