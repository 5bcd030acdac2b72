"""Rule-based asset allocation: adjust, clamp, then normalize to 100%."""

from __future__ import annotations

import math
from dataclasses import replace

from portfolio_advisor.portfolio.models import BUCKETS, AssetAllocation, FinancialSituation, InvestmentPreference

BASE_ALLOCATIONS: dict[str, AssetAllocation] = {
    "high": AssetAllocation(stocks=60, bonds=10, real_estate=15, crypto=10, cash=5),
    "medium": AssetAllocation(stocks=50, bonds=20, real_estate=10, crypto=5, cash=15),
    "low": AssetAllocation(stocks=30, bonds=40, real_estate=5, crypto=0, cash=25),
}
SHORT_HORIZON_YEARS = 5
LONG_HORIZON_YEARS = 15


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def base_allocation(risk_tolerance: str) -> AssetAllocation:
    """Starting split for a risk level; unrecognized levels use the conservative split."""
    return replace(BASE_ALLOCATIONS.get(risk_tolerance, BASE_ALLOCATIONS["low"]))


def apply_adjustments(
    base: AssetAllocation,
    situation: FinancialSituation,
    pref: InvestmentPreference,
) -> AssetAllocation:
    """Apply horizon, emergency fund, debt and dependents rules in that order.

    Intermediate buckets may go negative; clamping is a separate phase.
    """
    alloc = replace(base)

    if pref.time_horizon < SHORT_HORIZON_YEARS:
        alloc.stocks -= 10
        alloc.bonds += 5
        alloc.cash += 5
    elif pref.time_horizon > LONG_HORIZON_YEARS:
        alloc.stocks += 10
        alloc.bonds -= 5
        alloc.cash -= 5

    if situation.emergency_fund == "none":
        alloc.cash += 10
        alloc.stocks -= 5
        alloc.bonds -= 5

    if situation.debt_type == "high":
        alloc.stocks -= 10
        alloc.bonds += 5
        alloc.cash += 5

    if situation.dependents in {"children", "elderly"}:
        alloc.stocks -= 5
        alloc.bonds += 5

    return alloc


def clamp_allocation(alloc: AssetAllocation) -> AssetAllocation:
    return AssetAllocation(
        stocks=max(0, alloc.stocks),
        bonds=max(0, alloc.bonds),
        real_estate=max(0, alloc.real_estate),
        crypto=max(0, alloc.crypto),
        cash=max(0, alloc.cash),
    )


def normalize_allocation(alloc: AssetAllocation) -> AssetAllocation:
    """Rescale non-negative buckets so they sum to exactly 100."""
    total = alloc.total()
    if total == 100:
        return replace(alloc)
    if total <= 0:
        return AssetAllocation(cash=100)

    factor = 100 / total
    scaled = AssetAllocation(
        stocks=round_half_up(alloc.stocks * factor),
        bonds=round_half_up(alloc.bonds * factor),
        real_estate=round_half_up(alloc.real_estate * factor),
        crypto=round_half_up(alloc.crypto * factor),
        cash=round_half_up(alloc.cash * factor),
    )
    residual = 100 - scaled.total()
    if residual:
        # Per-bucket rounding can drift by a point; settle it on the largest bucket.
        largest = max(BUCKETS, key=lambda name: getattr(scaled, name))
        setattr(scaled, largest, getattr(scaled, largest) + residual)
    return scaled


def compute_allocation(situation: FinancialSituation, pref: InvestmentPreference) -> AssetAllocation:
    adjusted = apply_adjustments(base_allocation(pref.risk_tolerance), situation, pref)
    return normalize_allocation(clamp_allocation(adjusted))
