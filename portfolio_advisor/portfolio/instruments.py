"""Instrument catalog and bucket-to-instrument expansion."""

from __future__ import annotations

import math
from dataclasses import dataclass

from portfolio_advisor.portfolio.models import (
    AssetAllocation,
    InstrumentType,
    InvestmentOption,
    InvestmentPreference,
    RiskLevel,
)


@dataclass(frozen=True)
class Instrument:
    id: str
    name: str
    type: InstrumentType
    risk_level: RiskLevel
    expected_return: float
    description: str
    ethical: bool = False

    def with_allocation(self, percentage: float) -> InvestmentOption:
        return InvestmentOption(
            id=self.id,
            name=self.name,
            type=self.type,
            risk_level=self.risk_level,
            expected_return=self.expected_return,
            description=self.description,
            allocation_percentage=percentage,
            ethical=self.ethical,
        )


TOTAL_STOCK_MARKET = Instrument("vti", "VTI (Total Stock Market)", "etf", "medium", 7.5, "Diversified exposure to the entire US stock market")
INTERNATIONAL_STOCKS = Instrument("vxus", "VXUS (International Stocks)", "etf", "medium", 6.5, "International stock market exposure")
ESG_STOCKS = Instrument("esgv", "ESGV (ESG US Stock ETF)", "etf", "medium", 7.0, "ESG-focused US stock market exposure", ethical=True)
TOTAL_BOND_MARKET = Instrument("bnd", "BND (Total Bond Market)", "bond", "low", 3.5, "Diversified exposure to US bonds")
INFLATION_PROTECTED = Instrument("tips", "TIP (Treasury Inflation-Protected)", "bond", "low", 2.5, "Protection against inflation")
REAL_ESTATE = Instrument("vnq", "VNQ (Real Estate ETF)", "reit", "medium", 5.5, "Diversified real estate investment trust")
BITCOIN = Instrument("btc", "Bitcoin", "crypto", "high", 10.0, "Digital cryptocurrency with high volatility")
ETHEREUM = Instrument("eth", "Ethereum", "crypto", "high", 8.0, "Blockchain platform with smart contracts")
MONEY_MARKET = Instrument("money-market", "Money Market Fund", "bond", "low", 1.5, "Low-risk cash equivalent")


def round_one_decimal(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def _emit(allocation: AssetAllocation, pref: InvestmentPreference) -> list[InvestmentOption]:
    comfort = pref.asset_comfort
    investments: list[InvestmentOption] = []

    if comfort.stocks:
        investments.append(TOTAL_STOCK_MARKET.with_allocation(allocation.stocks * 0.6))
        investments.append(INTERNATIONAL_STOCKS.with_allocation(allocation.stocks * 0.4))
        # Additive, not a replacement: the overshoot is absorbed by the final rescale.
        if pref.ethical:
            investments.append(ESG_STOCKS.with_allocation(allocation.stocks * 0.3))

    if comfort.bonds:
        investments.append(TOTAL_BOND_MARKET.with_allocation(allocation.bonds * 0.7))
        investments.append(INFLATION_PROTECTED.with_allocation(allocation.bonds * 0.3))

    if comfort.real_estate:
        investments.append(REAL_ESTATE.with_allocation(float(allocation.real_estate)))

    if comfort.crypto and allocation.crypto > 0:
        investments.append(BITCOIN.with_allocation(allocation.crypto * 0.6))
        investments.append(ETHEREUM.with_allocation(allocation.crypto * 0.4))

    investments.append(MONEY_MARKET.with_allocation(float(allocation.cash)))
    return investments


def normalize_investments(investments: list[InvestmentOption]) -> list[InvestmentOption]:
    """Rescale allocation percentages to 100, rounded to one decimal, order preserved."""
    if not investments:
        return investments
    total = sum(item.allocation_percentage for item in investments)
    if total <= 0:
        # Nothing carried weight; the cash equivalent is always last.
        investments[-1].allocation_percentage = 100.0
        return investments
    factor = 1.0 if math.isclose(total, 100.0, abs_tol=1e-9) else 100 / total
    for item in investments:
        item.allocation_percentage = round_one_decimal(item.allocation_percentage * factor)
    return investments


def select_instruments(allocation: AssetAllocation, pref: InvestmentPreference) -> list[InvestmentOption]:
    return normalize_investments(_emit(allocation, pref))
