"""Compounding projection of portfolio value."""

from __future__ import annotations

import math

import numpy as np

from portfolio_advisor.portfolio.models import FinancialSituation, InvestmentPreference

BASE_RATES = {"low": 0.04, "medium": 0.06, "high": 0.08}
HISTORY_VOLATILITY = {"low": 0.1, "medium": 0.2, "high": 0.3}
BENCHMARK_VOLATILITY = 0.15
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def projected_rate(situation: FinancialSituation, pref: InvestmentPreference) -> float:
    """Risk-adjusted annual rate. Not floored: a weak profile can go below zero."""
    rate = BASE_RATES.get(pref.risk_tolerance, BASE_RATES["low"])
    if situation.emergency_fund == "full":
        rate += 0.005
    if situation.debt_type == "high":
        rate -= 0.01
    if situation.employment == "variable":
        rate -= 0.005
    return rate


def project_value(situation: FinancialSituation, pref: InvestmentPreference) -> int:
    rate = projected_rate(situation, pref)
    total = float(pref.initial_amount)
    for _ in range(max(0, int(pref.time_horizon))):
        total = total * (1 + rate) + pref.monthly_contribution * 12
    return int(math.floor(total + 0.5))


def growth_history(
    situation: FinancialSituation,
    pref: InvestmentPreference,
    months: int = 12,
    seed: int = 0,
) -> list[dict[str, float | str]]:
    """Illustrative month-by-month path of portfolio vs. benchmark.

    Uses a seeded generator so the same inputs always draw the same series.
    """
    rng = np.random.default_rng(seed)
    factor = 1.2 if situation.emergency_fund == "full" else 0.8
    volatility = HISTORY_VOLATILITY.get(pref.risk_tolerance, HISTORY_VOLATILITY["low"]) * factor
    steps = np.arange(months, dtype=float)
    contributions = pref.initial_amount + pref.monthly_contribution * steps
    value = contributions + rng.random(months) * volatility * pref.initial_amount * steps / 2
    benchmark = contributions + rng.random(months) * BENCHMARK_VOLATILITY * pref.initial_amount * steps / 2
    return [
        {
            "month": MONTH_LABELS[idx % 12],
            "value": round(float(value[idx]), 2),
            "benchmark": round(float(benchmark[idx]), 2),
        }
        for idx in range(months)
    ]
