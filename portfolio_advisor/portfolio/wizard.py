"""Four-step onboarding flow that produces the recommendation.

Steps advance linearly: Financial Situation -> Personal Situation ->
Investment Goals -> Investment Preferences -> Completed. Leaving step 4
computes the allocation and instruments once and captures them on the
aggregate. After that the profile is frozen until ``reset()``; only the
investment selection map stays editable.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any

from portfolio_advisor.portfolio.allocation import compute_allocation
from portfolio_advisor.portfolio.instruments import select_instruments
from portfolio_advisor.portfolio.models import (
    AssetComfort,
    FinancialSituation,
    InvestmentPreference,
    PortfolioData,
    Recommendation,
    ValidationIssue,
    default_portfolio_data,
)
from portfolio_advisor.portfolio.validation import validate_profile, validate_step

FIRST_STEP = 1
LAST_STEP = 4
COMPLETED = 5
STEP_TITLES = {
    1: "Financial Situation",
    2: "Personal Situation",
    3: "Investment Goals",
    4: "Investment Preferences",
    COMPLETED: "Completed",
}

_SITUATION_FIELDS = {item.name for item in fields(FinancialSituation)}
_PREFERENCE_FIELDS = {item.name for item in fields(InvestmentPreference)}
_COMFORT_FIELDS = {item.name for item in fields(AssetComfort)}


@dataclass
class WizardError(Exception):
    code: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class StepResult:
    step: int
    issues: list[ValidationIssue] = field(default_factory=list)
    recommendation: Recommendation | None = None

    @property
    def advanced(self) -> bool:
        return not self.issues


def build_recommendation(situation: FinancialSituation, pref: InvestmentPreference) -> Recommendation:
    allocation = compute_allocation(situation, pref)
    return Recommendation(asset_allocation=allocation, investments=select_instruments(allocation, pref))


class OnboardingWizard:
    def __init__(self, data: PortfolioData | None = None) -> None:
        self.data = data or default_portfolio_data()
        self.step = COMPLETED if self.data.completed_onboarding else FIRST_STEP
        if self.data.completed_onboarding and self.data.recommendation is None:
            self.data.recommendation = build_recommendation(self.data.financial_situation, self.data.investment_pref)

    @property
    def completed(self) -> bool:
        return self.step == COMPLETED

    @property
    def step_title(self) -> str:
        return STEP_TITLES[self.step]

    def _ensure_editable(self) -> None:
        if self.completed:
            raise WizardError("onboarding_completed", "Profile is locked after onboarding. Reset to start over.")

    def update_financial_situation(self, updates: dict[str, Any]) -> FinancialSituation:
        self._ensure_editable()
        unknown = sorted(set(updates) - _SITUATION_FIELDS)
        if unknown:
            raise WizardError("unknown_field", f"Unknown financial situation field(s): {', '.join(unknown)}")
        self.data.financial_situation = replace(self.data.financial_situation, **updates)
        return self.data.financial_situation

    def update_investment_preferences(self, updates: dict[str, Any]) -> InvestmentPreference:
        self._ensure_editable()
        unknown = sorted(set(updates) - _PREFERENCE_FIELDS)
        if unknown:
            raise WizardError("unknown_field", f"Unknown investment preference field(s): {', '.join(unknown)}")
        changes = dict(updates)
        comfort = changes.get("asset_comfort")
        if isinstance(comfort, dict):
            unknown_flags = sorted(set(comfort) - _COMFORT_FIELDS)
            if unknown_flags:
                raise WizardError("unknown_field", f"Unknown asset comfort field(s): {', '.join(unknown_flags)}")
            changes["asset_comfort"] = replace(self.data.investment_pref.asset_comfort, **comfort)
        self.data.investment_pref = replace(self.data.investment_pref, **changes)
        return self.data.investment_pref

    def next_step(self) -> StepResult:
        if self.completed:
            return StepResult(step=self.step, recommendation=self.data.recommendation)

        situation = self.data.financial_situation
        pref = self.data.investment_pref
        if self.step < LAST_STEP:
            issues = validate_step(self.step, situation, pref)
            if not issues:
                self.step += 1
            return StepResult(step=self.step, issues=issues)

        issues = validate_profile(situation, pref)
        if issues:
            return StepResult(step=self.step, issues=issues)
        self.data.recommendation = build_recommendation(situation, pref)
        self.data.completed_onboarding = True
        self.step = COMPLETED
        return StepResult(step=self.step, recommendation=self.data.recommendation)

    def previous_step(self) -> int:
        self._ensure_editable()
        self.step = max(FIRST_STEP, self.step - 1)
        return self.step

    def toggle_investment(self, investment_id: str) -> bool:
        if not self.completed or self.data.recommendation is None:
            raise WizardError("onboarding_incomplete", "Complete onboarding before selecting investments.")
        known = {item.id for item in self.data.recommendation.investments}
        if investment_id not in known:
            raise WizardError("unknown_investment", f"Investment is not part of the recommendation: {investment_id}")
        selected = not self.data.selected_investments.get(investment_id, False)
        self.data.selected_investments[investment_id] = selected
        return selected

    def reset(self) -> None:
        self.data = default_portfolio_data()
        self.step = FIRST_STEP
