"""Risk scoring, profile diagnostics and summary generation."""

from __future__ import annotations

from dataclasses import dataclass

from portfolio_advisor.portfolio.models import (
    AssetAllocation,
    FinancialSituation,
    InvestmentOption,
    InvestmentPreference,
)

RISK_SCORES = {"high": 75, "medium": 50, "low": 25}
RISK_SUMMARIES = {
    "high": "Your portfolio is optimized for growth with higher volatility",
    "medium": "Your portfolio balances growth and stability",
    "low": "Your portfolio prioritizes capital preservation",
}
INVOLVEMENT_ACTIONS = {
    "automated": "Automate This Portfolio",
    "guided": "Schedule Advisor Consultation",
    "self-directed": "Implement Portfolio",
}
BASE_ACTIONS = ("Rebalance Portfolio", "Adjust Risk Level", "Change Contributions")


@dataclass
class RiskFactor:
    name: str
    label: str
    status: str


def risk_score(risk_tolerance: str) -> int:
    return RISK_SCORES.get(risk_tolerance, RISK_SCORES["low"])


def risk_profile_summary(risk_tolerance: str) -> str:
    return RISK_SUMMARIES.get(risk_tolerance, RISK_SUMMARIES["low"])


def _emergency_fund_factor(value: str) -> RiskFactor:
    if value == "full":
        return RiskFactor("Emergency Fund", "Adequate", "good")
    if value == "partial":
        return RiskFactor("Emergency Fund", "Partial", "caution")
    return RiskFactor("Emergency Fund", "None", "risk")


def _debt_factor(value: str) -> RiskFactor:
    if value == "none":
        return RiskFactor("Debt Situation", "No debt", "good")
    if value == "low":
        return RiskFactor("Debt Situation", "Low-interest", "caution")
    return RiskFactor("Debt Situation", "High-interest", "risk")


def _employment_factor(value: str) -> RiskFactor:
    if value == "stable":
        return RiskFactor("Employment Stability", "Stable", "good")
    if value == "variable":
        return RiskFactor("Employment Stability", "Variable", "caution")
    return RiskFactor("Employment Stability", "Retired", "neutral")


def _dependents_factor(value: str) -> RiskFactor:
    if value == "none":
        return RiskFactor("Dependents", "None", "good")
    if value == "single":
        return RiskFactor("Dependents", "Single", "good")
    if value == "partnered":
        return RiskFactor("Dependents", "Partner", "caution")
    if value == "children":
        return RiskFactor("Dependents", "Children", "risk")
    return RiskFactor("Dependents", "Elderly", "risk")


def risk_factors(situation: FinancialSituation) -> list[RiskFactor]:
    return [
        _emergency_fund_factor(situation.emergency_fund),
        _debt_factor(situation.debt_type),
        _employment_factor(situation.employment),
        _dependents_factor(situation.dependents),
    ]


def suggested_actions(situation: FinancialSituation) -> list[str]:
    actions = list(BASE_ACTIONS)
    if situation.emergency_fund != "full":
        actions.append("Boost Emergency Fund")
    if situation.debt_type == "high":
        actions.append("Debt Paydown Strategy")
    return actions


def next_step_action(involvement: str) -> str:
    return INVOLVEMENT_ACTIONS.get(involvement, INVOLVEMENT_ACTIONS["self-directed"])


def total_selected_allocation(investments: list[InvestmentOption], selected: dict[str, bool]) -> float:
    total = sum(item.allocation_percentage for item in investments if selected.get(item.id))
    return round(total, 1)


def generate_fallback_summary(
    pref: InvestmentPreference,
    allocation: AssetAllocation,
    projected_value: int,
    actions: list[str],
) -> str:
    score = risk_score(pref.risk_tolerance)
    parts = allocation.as_dict()
    mix = ", ".join(f"{name} {value}%" for name, value in parts.items() if value > 0)
    follow_up = (
        f"Priority actions: {', '.join(actions[len(BASE_ACTIONS):])}."
        if len(actions) > len(BASE_ACTIONS)
        else "Maintain contributions and rebalance periodically."
    )
    return (
        f"Risk profile is {pref.risk_tolerance} (score {score}/100). {risk_profile_summary(pref.risk_tolerance)}. "
        f"Target mix: {mix}. "
        f"Projected value after {pref.time_horizon} years: ${projected_value:,}. {follow_up}"
    )
