from portfolio_advisor.portfolio.intelligence import (
    BASE_ACTIONS,
    generate_fallback_summary,
    next_step_action,
    risk_factors,
    risk_score,
    suggested_actions,
    total_selected_allocation,
)
from portfolio_advisor.portfolio.models import AssetAllocation, FinancialSituation, InvestmentOption, InvestmentPreference


def test_risk_score_by_tolerance() -> None:
    assert risk_score("high") == 75
    assert risk_score("medium") == 50
    assert risk_score("low") == 25
    assert risk_score("unknown") == 25


def test_risk_factors_flag_stress() -> None:
    situation = FinancialSituation(emergency_fund="none", debt_type="high", employment="variable", dependents="children")
    statuses = {factor.name: factor.status for factor in risk_factors(situation)}
    assert statuses == {
        "Emergency Fund": "risk",
        "Debt Situation": "risk",
        "Employment Stability": "caution",
        "Dependents": "risk",
    }


def test_suggested_actions_extend_base_list() -> None:
    assert suggested_actions(FinancialSituation(emergency_fund="full")) == list(BASE_ACTIONS)
    actions = suggested_actions(FinancialSituation(emergency_fund="partial", debt_type="high"))
    assert actions[-2:] == ["Boost Emergency Fund", "Debt Paydown Strategy"]


def test_next_step_action_follows_involvement() -> None:
    assert next_step_action("automated") == "Automate This Portfolio"
    assert next_step_action("guided") == "Schedule Advisor Consultation"
    assert next_step_action("self-directed") == "Implement Portfolio"


def test_total_selected_allocation() -> None:
    investments = [
        InvestmentOption("vti", "VTI", "etf", "medium", 7.5, "", 33.3),
        InvestmentOption("bnd", "BND", "bond", "low", 3.5, "", 22.2),
        InvestmentOption("money-market", "MM", "bond", "low", 1.5, "", 44.5),
    ]
    assert total_selected_allocation(investments, {"vti": True, "bnd": True, "money-market": False}) == 55.5
    assert total_selected_allocation(investments, {}) == 0


def test_fallback_summary_mentions_mix_and_projection() -> None:
    pref = InvestmentPreference(risk_tolerance="high", time_horizon=20)
    allocation = AssetAllocation(stocks=70, bonds=5, real_estate=15, crypto=10, cash=0)
    summary = generate_fallback_summary(pref, allocation, 123456, suggested_actions(FinancialSituation(emergency_fund="none")))

    assert "score 75/100" in summary
    assert "$123,456" in summary
    assert "cash" not in summary
    assert "Boost Emergency Fund" in summary


def test_single_household_is_not_flagged() -> None:
    dependents = risk_factors(FinancialSituation(dependents="single"))[-1]
    assert (dependents.label, dependents.status) == ("Single", "good")
