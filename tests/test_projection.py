import pytest

from portfolio_advisor.portfolio.models import FinancialSituation, InvestmentPreference
from portfolio_advisor.portfolio.projection import growth_history, project_value, projected_rate


def test_projection_matches_hand_computed_compounding() -> None:
    situation = FinancialSituation(emergency_fund="full", debt_type="none", employment="stable")
    pref = InvestmentPreference(risk_tolerance="medium", time_horizon=2, initial_amount=10000, monthly_contribution=100)

    assert projected_rate(situation, pref) == pytest.approx(0.065)
    # 10000 -> 11850 -> 13820.25 -> round half-up
    assert project_value(situation, pref) == 13820


def test_default_profile_projection() -> None:
    situation = FinancialSituation()
    pref = InvestmentPreference()
    assert projected_rate(situation, pref) == pytest.approx(0.06)
    assert project_value(situation, pref) == 96993


def test_rate_adjustments_stack() -> None:
    situation = FinancialSituation(emergency_fund="full", debt_type="high", employment="variable")
    pref = InvestmentPreference(risk_tolerance="high")
    assert projected_rate(situation, pref) == pytest.approx(0.07)


def test_unknown_risk_uses_conservative_rate() -> None:
    pref = InvestmentPreference(risk_tolerance="reckless")  # type: ignore[arg-type]
    assert projected_rate(FinancialSituation(), pref) == pytest.approx(0.04)


def test_zero_horizon_returns_initial_amount() -> None:
    pref = InvestmentPreference(time_horizon=0, initial_amount=12345, monthly_contribution=500)
    assert project_value(FinancialSituation(), pref) == 12345


def test_longest_horizon_is_finite_and_repeatable() -> None:
    situation = FinancialSituation(emergency_fund="full")
    pref = InvestmentPreference(risk_tolerance="high", time_horizon=50, initial_amount=1_000_000, monthly_contribution=10_000)
    first = project_value(situation, pref)
    assert isinstance(first, int)
    assert first > pref.initial_amount
    assert project_value(situation, pref) == first


def test_growth_history_is_seeded() -> None:
    situation = FinancialSituation()
    pref = InvestmentPreference()

    history = growth_history(situation, pref, seed=7)
    assert len(history) == 12
    assert [point["month"] for point in history[:3]] == ["Jan", "Feb", "Mar"]
    assert history[0]["value"] == pref.initial_amount
    assert history == growth_history(situation, pref, seed=7)
    assert history != growth_history(situation, pref, seed=8)


def test_single_year_projection() -> None:
    situation = FinancialSituation(emergency_fund="full", debt_type="none", employment="stable")
    pref = InvestmentPreference(risk_tolerance="medium", time_horizon=1, initial_amount=10000, monthly_contribution=500)
    assert project_value(situation, pref) == 16650
    assert project_value(situation, pref) == project_value(situation, pref)
