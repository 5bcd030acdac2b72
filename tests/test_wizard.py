import pytest

from portfolio_advisor.portfolio import wizard as wizard_module
from portfolio_advisor.portfolio.models import AssetAllocation, default_portfolio_data
from portfolio_advisor.portfolio.wizard import COMPLETED, OnboardingWizard, WizardError


def _complete(wizard: OnboardingWizard) -> None:
    for _ in range(4):
        result = wizard.next_step()
        assert result.advanced


def test_steps_advance_linearly_to_completion() -> None:
    wizard = OnboardingWizard()
    assert wizard.step == 1
    assert wizard.step_title == "Financial Situation"

    assert wizard.next_step().step == 2
    assert wizard.next_step().step == 3
    assert wizard.next_step().step == 4
    assert wizard.data.recommendation is None

    result = wizard.next_step()
    assert result.step == COMPLETED
    assert wizard.completed
    assert wizard.data.completed_onboarding is True
    assert result.recommendation is wizard.data.recommendation
    assert result.recommendation.asset_allocation == AssetAllocation(stocks=45, bonds=15, real_estate=10, crypto=5, cash=25)


def test_invalid_step_blocks_advance() -> None:
    wizard = OnboardingWizard()
    wizard.update_investment_preferences({"time_horizon": 0})
    wizard.next_step()
    wizard.next_step()

    result = wizard.next_step()
    assert not result.advanced
    assert result.step == 3
    assert [issue.code for issue in result.issues] == ["invalid_time_horizon"]


def test_previous_step_floors_at_first_step() -> None:
    wizard = OnboardingWizard()
    assert wizard.previous_step() == 1
    wizard.next_step()
    wizard.next_step()
    assert wizard.previous_step() == 2
    assert wizard.data.recommendation is None


def test_recommendation_is_computed_once(monkeypatch) -> None:
    calls = []
    original = wizard_module.compute_allocation

    def counting(situation, pref):
        calls.append(1)
        return original(situation, pref)

    monkeypatch.setattr(wizard_module, "compute_allocation", counting)
    wizard = OnboardingWizard()
    _complete(wizard)
    first = wizard.data.recommendation

    again = wizard.next_step()
    assert again.recommendation is first
    assert len(calls) == 1


def test_profile_is_locked_after_completion() -> None:
    wizard = OnboardingWizard()
    _complete(wizard)

    with pytest.raises(WizardError) as excinfo:
        wizard.update_financial_situation({"debt_type": "high"})
    assert excinfo.value.code == "onboarding_completed"
    with pytest.raises(WizardError):
        wizard.previous_step()


def test_partial_asset_comfort_update_keeps_other_flags() -> None:
    wizard = OnboardingWizard()
    pref = wizard.update_investment_preferences({"asset_comfort": {"crypto": True}})
    assert pref.asset_comfort.crypto is True
    assert pref.asset_comfort.stocks is True


def test_unknown_fields_are_rejected() -> None:
    wizard = OnboardingWizard()
    with pytest.raises(WizardError) as excinfo:
        wizard.update_financial_situation({"salary": 1})
    assert excinfo.value.code == "unknown_field"
    with pytest.raises(WizardError):
        wizard.update_investment_preferences({"asset_comfort": {"art": True}})


def test_toggle_investment_requires_completion_and_known_id() -> None:
    wizard = OnboardingWizard()
    with pytest.raises(WizardError) as excinfo:
        wizard.toggle_investment("vti")
    assert excinfo.value.code == "onboarding_incomplete"

    _complete(wizard)
    assert wizard.toggle_investment("vti") is True
    assert wizard.data.selected_investments == {"vti": True}
    assert wizard.toggle_investment("vti") is False

    with pytest.raises(WizardError) as excinfo:
        wizard.toggle_investment("btc")
    assert excinfo.value.code == "unknown_investment"


def test_reset_restores_defaults() -> None:
    wizard = OnboardingWizard()
    wizard.update_investment_preferences({"risk_tolerance": "high"})
    _complete(wizard)
    wizard.toggle_investment("vti")

    wizard.reset()
    assert wizard.step == 1
    assert wizard.data == default_portfolio_data()


def test_completed_snapshot_without_recommendation_is_rebuilt() -> None:
    data = default_portfolio_data()
    data.completed_onboarding = True

    wizard = OnboardingWizard(data)
    assert wizard.completed
    assert wizard.data.recommendation is not None
    assert wizard.data.recommendation.asset_allocation.total() == 100
