"""Portfolio onboarding and recommendation orchestration service."""

from __future__ import annotations

import logging
from dataclasses import asdict
from threading import Lock
from typing import Any

from portfolio_advisor.portfolio.intelligence import (
    generate_fallback_summary,
    next_step_action,
    risk_factors,
    risk_profile_summary,
    risk_score,
    suggested_actions,
    total_selected_allocation,
)
from portfolio_advisor.portfolio.models import (
    FinancialSituation,
    InvestmentPreference,
    PortfolioData,
    Recommendation,
    financial_situation_from_dict,
    financial_situation_to_dict,
    investment_preference_from_dict,
    investment_preference_to_dict,
    portfolio_data_to_dict,
)
from portfolio_advisor.portfolio.projection import growth_history, project_value, projected_rate
from portfolio_advisor.portfolio.validation import validate_profile
from portfolio_advisor.portfolio.wizard import OnboardingWizard, WizardError, build_recommendation
from portfolio_advisor.services.base import ServiceContext, validation_error, wizard_error

LOGGER = logging.getLogger(__name__)


class PortfolioService:
    """Owns the session's wizard and writes the aggregate back after every change."""

    def __init__(self, ctx: ServiceContext) -> None:
        self.ctx = ctx
        self._lock = Lock()
        self.wizard = OnboardingWizard(ctx.store.load())

    def _persist(self) -> None:
        self.ctx.store.save(self.wizard.data)

    def _state_payload(self) -> dict[str, Any]:
        return {
            "ok": True,
            "step": self.wizard.step,
            "step_title": self.wizard.step_title,
            "completed": self.wizard.completed,
            "portfolio": portfolio_data_to_dict(self.wizard.data),
        }

    def get_state(self) -> dict[str, Any]:
        with self._lock:
            return self._state_payload()

    def get_current_snapshot(self) -> dict[str, Any]:
        with self._lock:
            return portfolio_data_to_dict(self.wizard.data)

    def update_financial_situation(self, updates: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            try:
                situation = self.wizard.update_financial_situation(updates)
            except WizardError as error:
                return wizard_error(error.code, error.message)
            self._persist()
            return {"ok": True, "step": self.wizard.step, "financialSituation": financial_situation_to_dict(situation)}

    def update_investment_preferences(self, updates: dict[str, Any]) -> dict[str, Any]:
        with self._lock:
            try:
                pref = self.wizard.update_investment_preferences(updates)
            except WizardError as error:
                return wizard_error(error.code, error.message)
            self._persist()
            return {"ok": True, "step": self.wizard.step, "investmentPref": investment_preference_to_dict(pref)}

    def next_step(self) -> dict[str, Any]:
        with self._lock:
            was_completed = self.wizard.completed
            result = self.wizard.next_step()
            if result.issues:
                return validation_error(result.issues)
            if not was_completed:
                self._persist()
                if self.wizard.completed:
                    LOGGER.info(
                        "portfolio created: risk=%s horizon=%s instruments=%s",
                        self.wizard.data.investment_pref.risk_tolerance,
                        self.wizard.data.investment_pref.time_horizon,
                        len(result.recommendation.investments) if result.recommendation else 0,
                    )
            payload = self._state_payload()
            if result.recommendation is not None:
                payload["recommendation"] = result.recommendation.as_dict()
            return payload

    def previous_step(self) -> dict[str, Any]:
        with self._lock:
            try:
                self.wizard.previous_step()
            except WizardError as error:
                return wizard_error(error.code, error.message)
            return self._state_payload()

    def toggle_investment(self, investment_id: str) -> dict[str, Any]:
        with self._lock:
            try:
                selected = self.wizard.toggle_investment(investment_id.strip())
            except WizardError as error:
                return wizard_error(error.code, error.message)
            self._persist()
            data = self.wizard.data
            investments = data.recommendation.investments if data.recommendation else []
            return {
                "ok": True,
                "id": investment_id.strip(),
                "selected": selected,
                "selectedInvestments": dict(data.selected_investments),
                "total_selected_allocation": total_selected_allocation(investments, data.selected_investments),
            }

    def reset(self, confirm: bool) -> dict[str, Any]:
        if not confirm:
            return wizard_error("confirmation_required", "Reset discards all portfolio data; pass confirm=true to proceed.")
        with self._lock:
            self.wizard.reset()
            self.ctx.store.clear()
            LOGGER.info("portfolio reset to defaults")
            return self._state_payload()

    def get_recommendation(self, history_seed: int = 0) -> dict[str, Any]:
        with self._lock:
            data = self.wizard.data
            if not self.wizard.completed or data.recommendation is None:
                return wizard_error("onboarding_incomplete", "Complete onboarding to receive a recommendation.")
            return self._report(data, data.recommendation, history_seed)

    def project(self) -> dict[str, Any]:
        with self._lock:
            situation = self.wizard.data.financial_situation
            pref = self.wizard.data.investment_pref
            issues = validate_profile(situation, pref)
            if issues:
                return validation_error(issues)
            return {
                "ok": True,
                "annual_rate": round(projected_rate(situation, pref), 6),
                "time_horizon": pref.time_horizon,
                "projected_value": project_value(situation, pref),
            }

    def recommend_for_profile(self, profile: dict[str, Any], history_seed: int = 0) -> dict[str, Any]:
        """Stateless recommendation from a payload in the persisted camelCase layout.

        Only the profile sections are read; selections and any stored recommendation are ignored.
        """
        situation = profile.get("financialSituation")
        pref = profile.get("investmentPref")
        data = PortfolioData(
            financial_situation=financial_situation_from_dict(situation) if isinstance(situation, dict) else FinancialSituation(),
            investment_pref=investment_preference_from_dict(pref) if isinstance(pref, dict) else InvestmentPreference(),
        )
        issues = validate_profile(data.financial_situation, data.investment_pref)
        if issues:
            return validation_error(issues)
        recommendation = build_recommendation(data.financial_situation, data.investment_pref)
        return self._report(data, recommendation, history_seed)

    def _report(self, data: PortfolioData, recommendation: Recommendation, history_seed: int) -> dict[str, Any]:
        situation = data.financial_situation
        pref = data.investment_pref
        projected = project_value(situation, pref)
        actions = suggested_actions(situation)
        return {
            "ok": True,
            "asset_allocation": recommendation.asset_allocation.as_dict(),
            "investments": [item.as_dict() for item in recommendation.investments],
            "selected_investments": dict(data.selected_investments),
            "total_selected_allocation": total_selected_allocation(recommendation.investments, data.selected_investments),
            "projected_value": projected,
            "annual_rate": round(projected_rate(situation, pref), 6),
            "risk_score": risk_score(pref.risk_tolerance),
            "risk_summary": risk_profile_summary(pref.risk_tolerance),
            "risk_factors": [asdict(factor) for factor in risk_factors(situation)],
            "suggested_actions": actions,
            "next_step_action": next_step_action(pref.involvement),
            "growth_history": growth_history(situation, pref, seed=history_seed),
            "summary": generate_fallback_summary(pref, recommendation.asset_allocation, projected, actions),
        }
