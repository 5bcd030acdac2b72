"""Onboarding form validation."""

from __future__ import annotations

import math
from typing import get_args

from portfolio_advisor.portfolio.models import (
    CashFlow,
    DebtType,
    Dependents,
    EmergencyFund,
    Employment,
    FinancialSituation,
    InvestmentGoal,
    InvestmentPreference,
    Involvement,
    RiskTolerance,
    TaxNeeds,
    ValidationIssue,
)

MIN_TIME_HORIZON = 1
MAX_TIME_HORIZON = 50
MIN_INITIAL_AMOUNT = 100

STEP_FIELDS: dict[int, tuple[str, ...]] = {
    1: ("emergency_fund", "debt_type", "debt_amount", "cash_flow"),
    2: ("employment", "dependents"),
    3: ("investment_goal", "time_horizon", "risk_tolerance"),
    4: ("asset_comfort", "involvement", "tax_needs", "ethical", "initial_amount", "monthly_contribution"),
}

_ENUM_FIELDS: dict[str, tuple[str, ...]] = {
    "emergency_fund": get_args(EmergencyFund),
    "debt_type": get_args(DebtType),
    "cash_flow": get_args(CashFlow),
    "employment": get_args(Employment),
    "dependents": get_args(Dependents),
    "risk_tolerance": get_args(RiskTolerance),
    "investment_goal": get_args(InvestmentGoal),
    "involvement": get_args(Involvement),
    "tax_needs": get_args(TaxNeeds),
}


def step_for_field(name: str) -> int | None:
    for step, fields in STEP_FIELDS.items():
        if name in fields:
            return step
    return None


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(float(value))


def _check_enum(name: str, value: object) -> ValidationIssue | None:
    allowed = _ENUM_FIELDS[name]
    if value in allowed:
        return None
    return ValidationIssue(
        field=name,
        step=step_for_field(name),
        code="invalid_choice",
        message=f"{name} must be one of {list(allowed)}.",
    )


def _check_field(name: str, situation: FinancialSituation, pref: InvestmentPreference) -> list[ValidationIssue]:
    step = step_for_field(name)
    if name in _ENUM_FIELDS:
        value = getattr(situation, name) if hasattr(situation, name) else getattr(pref, name)
        issue = _check_enum(name, value)
        return [issue] if issue else []

    if name == "debt_amount":
        amount = situation.debt_amount
        if amount is not None and (not _is_number(amount) or amount < 0):
            return [ValidationIssue(field=name, step=step, code="invalid_debt_amount", message="Debt amount must be a non-negative number.")]
        return []

    if name == "time_horizon":
        horizon = pref.time_horizon
        if not isinstance(horizon, int) or isinstance(horizon, bool) or not MIN_TIME_HORIZON <= horizon <= MAX_TIME_HORIZON:
            return [
                ValidationIssue(
                    field=name,
                    step=step,
                    code="invalid_time_horizon",
                    message=f"Time horizon must be a whole number of years between {MIN_TIME_HORIZON} and {MAX_TIME_HORIZON}.",
                )
            ]
        return []

    if name == "initial_amount":
        if not _is_number(pref.initial_amount) or pref.initial_amount < MIN_INITIAL_AMOUNT:
            return [
                ValidationIssue(
                    field=name,
                    step=step,
                    code="invalid_initial_amount",
                    message=f"Initial amount must be at least {MIN_INITIAL_AMOUNT}.",
                )
            ]
        return []

    if name == "monthly_contribution":
        if not _is_number(pref.monthly_contribution) or pref.monthly_contribution < 0:
            return [
                ValidationIssue(
                    field=name,
                    step=step,
                    code="invalid_monthly_contribution",
                    message="Monthly contribution must be a non-negative number.",
                )
            ]
        return []

    if name == "ethical":
        if not isinstance(pref.ethical, bool):
            return [ValidationIssue(field=name, step=step, code="invalid_flag", message="ethical must be true or false.")]
        return []

    if name == "asset_comfort":
        comfort = pref.asset_comfort
        flags = {
            "stocks": comfort.stocks,
            "bonds": comfort.bonds,
            "real_estate": comfort.real_estate,
            "crypto": comfort.crypto,
            "metals": comfort.metals,
        }
        return [
            ValidationIssue(
                field=f"asset_comfort.{flag}",
                step=step,
                code="invalid_flag",
                message=f"asset_comfort.{flag} must be true or false.",
            )
            for flag, value in flags.items()
            if not isinstance(value, bool)
        ]

    return []


def validate_step(step: int, situation: FinancialSituation, pref: InvestmentPreference) -> list[ValidationIssue]:
    """Validate only the fields owned by one onboarding step."""
    issues: list[ValidationIssue] = []
    for name in STEP_FIELDS.get(step, ()):
        issues.extend(_check_field(name, situation, pref))
    return issues


def validate_profile(situation: FinancialSituation, pref: InvestmentPreference) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for step in sorted(STEP_FIELDS):
        issues.extend(validate_step(step, situation, pref))
    return issues
