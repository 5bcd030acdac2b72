"""Synthetic market-data feed used by the analytics tools.

Values are drawn from a seeded generator so a given seed always yields the
same snapshot. Nothing in the recommendation engine reads this module.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

SECTORS = (
    "Technology",
    "Financial",
    "Healthcare",
    "Consumer Cyclical",
    "Industrial",
    "Energy",
    "Utilities",
    "Real Estate",
    "Consumer Defensive",
    "Communication",
    "Basic Materials",
)
NEWS_CATEGORIES = (
    "Economy",
    "Fed",
    "Earnings",
    "Mergers",
    "Politics",
    "Technology",
    "Healthcare",
    "Energy",
    "Financial",
    "International",
)
NEWS_SYMBOLS = ("SPX", "DJI", "IXIC", "AAPL", "MSFT", "GOOG", "AMZN", "TSLA", "NVDA", "META")
NEWS_SOURCES = ("Bloomberg", "CNBC", "Reuters", "WSJ", "Financial Times")
HEADLINES = (
    "Fed Maintains Rates at 3.75-4.00% as Inflation Cools Further",
    "AI Boom Continues as Tech Giants Report Record Earnings",
    "Global Clean Energy Investments Reach $1.5 Trillion in 2024",
    "Bitcoin ETF Trading Volumes Hit Record Highs",
    "Commercial Real Estate Market Shows Signs of Recovery",
    "Quantum Computing Breakthrough Announced by Tech Leaders",
    "EV Adoption Reaches 40% of New Car Sales in Key Markets",
    "Space Economy Projected to Reach $1 Trillion by 2030",
    "Global GDP Growth Revised Upward to 3.2% for 2025",
    "Carbon Credit Markets See Increased Institutional Participation",
)
BOND_DURATIONS = ("1 Month", "3 Month", "6 Month", "1 Year", "2 Year", "3 Year", "5 Year", "7 Year", "10 Year", "20 Year", "30 Year")
CREDIT_RATINGS = ("AAA", "AA+", "AA", "AA-", "A+", "A", "A-", "BBB+", "BBB", "BBB-")
CRYPTO_NAMES = ("Bitcoin", "Ethereum", "Binance Coin", "XRP", "Solana", "Cardano", "Dogecoin", "Polkadot", "Polygon", "Litecoin")


@dataclass
class MarketIndex:
    name: str
    symbol: str
    price: float
    change: float


@dataclass
class Stock:
    name: str
    symbol: str
    price: float
    change: float
    market_cap: float
    sector: str
    beta: float


@dataclass
class Bond:
    name: str
    symbol: str
    yield_percent: float
    change: float
    duration: str
    credit_rating: str


@dataclass
class CryptoAsset:
    name: str
    symbol: str
    price: float
    change: float


@dataclass
class NewsItem:
    id: str
    title: str
    source: str
    categories: list[str]
    symbols: list[str]
    sentiment_score: float


@dataclass
class MarketSnapshot:
    indices: list[MarketIndex] = field(default_factory=list)
    stocks: list[Stock] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)
    cryptocurrencies: list[CryptoAsset] = field(default_factory=list)
    news: list[NewsItem] = field(default_factory=list)


INDICES = (
    MarketIndex("S&P 500", "SPX", 5824.15, 0.42),
    MarketIndex("NASDAQ Composite", "IXIC", 18456.78, 0.85),
    MarketIndex("Dow Jones Industrial", "DJI", 41234.56, 0.31),
    MarketIndex("Russell 2000", "RUT", 2345.67, -0.18),
    MarketIndex("FTSE 100", "FTSE", 8456.78, -0.25),
    MarketIndex("Nikkei 225", "N225", 41234.56, 1.25),
)


def _uniform(rng: np.random.Generator, low: float, high: float) -> float:
    return round(float(rng.uniform(low, high)), 2)


def _normal(rng: np.random.Generator, mean: float, std: float) -> float:
    return round(float(rng.normal(mean, std)), 2)


def build_market_snapshot(seed: int = 2025, stocks_per_sector: int = 10, bond_count: int = 20, news_count: int = 30) -> MarketSnapshot:
    rng = np.random.default_rng(seed)

    stocks: list[Stock] = []
    for sector in SECTORS:
        tech = sector == "Technology"
        sector_beta = _uniform(rng, 0.8, 1.4)
        for idx in range(stocks_per_sector):
            stocks.append(
                Stock(
                    name=f"{sector} Company {idx + 1}",
                    symbol=f"{sector[:3].upper()}{idx + 1}",
                    price=max(1.0, _normal(rng, 250 if tech else 80, 100 if tech else 40)),
                    change=_uniform(rng, -3, 3),
                    market_cap=max(1.0, _normal(rng, 250 if tech else 80, 150 if tech else 50)),
                    sector=sector,
                    beta=_normal(rng, sector_beta, 0.2),
                )
            )

    bonds: list[Bond] = []
    for idx in range(bond_count):
        duration = BOND_DURATIONS[idx % len(BOND_DURATIONS)]
        country, prefix = ("US", "US") if idx < 10 else ("Global", "GL")
        bonds.append(
            Bond(
                name=f"{country} {duration} Bond",
                symbol=f"{prefix}{duration.replace(' ', '')}",
                yield_percent=_normal(rng, 3.8, 1.2),
                change=_uniform(rng, -0.1, 0.1),
                duration=duration,
                credit_rating=CREDIT_RATINGS[idx % len(CREDIT_RATINGS)],
            )
        )

    cryptocurrencies: list[CryptoAsset] = []
    for name in CRYPTO_NAMES:
        symbol = {"Bitcoin": "BTC", "Ethereum": "ETH"}.get(name, name[:3].upper())
        mean = {"Bitcoin": 85000.0, "Ethereum": 6500.0}.get(name, 150.0)
        cryptocurrencies.append(
            CryptoAsset(
                name=name,
                symbol=symbol,
                price=max(0.01, _normal(rng, mean, mean * 0.3)),
                change=_uniform(rng, -5, 5),
            )
        )

    news = [
        NewsItem(
            id=f"news{idx + 1}",
            title=HEADLINES[idx % len(HEADLINES)],
            source=NEWS_SOURCES[idx % len(NEWS_SOURCES)],
            categories=[NEWS_CATEGORIES[idx % len(NEWS_CATEGORIES)]],
            symbols=[NEWS_SYMBOLS[idx % len(NEWS_SYMBOLS)]],
            sentiment_score=_uniform(rng, -1, 1),
        )
        for idx in range(news_count)
    ]

    return MarketSnapshot(
        indices=list(INDICES),
        stocks=stocks,
        bonds=bonds,
        cryptocurrencies=cryptocurrencies,
        news=news,
    )
