from portfolio_advisor.portfolio.models import AssetComfort, FinancialSituation, InvestmentPreference
from portfolio_advisor.portfolio.validation import step_for_field, validate_profile, validate_step


def test_defaults_are_valid() -> None:
    assert validate_profile(FinancialSituation(), InvestmentPreference()) == []


def test_enum_issue_is_reported_on_its_step() -> None:
    situation = FinancialSituation(emergency_fund="some")  # type: ignore[arg-type]
    issues = validate_step(1, situation, InvestmentPreference())

    assert len(issues) == 1
    assert issues[0].field == "emergency_fund"
    assert issues[0].step == 1
    assert issues[0].code == "invalid_choice"
    assert validate_step(2, situation, InvestmentPreference()) == []


def test_numeric_bounds() -> None:
    situation = FinancialSituation(debt_amount=-1)
    pref = InvestmentPreference(time_horizon=0, initial_amount=50, monthly_contribution=-5)

    codes = {issue.code for issue in validate_profile(situation, pref)}
    assert codes == {
        "invalid_debt_amount",
        "invalid_time_horizon",
        "invalid_initial_amount",
        "invalid_monthly_contribution",
    }


def test_time_horizon_must_be_whole_years() -> None:
    assert validate_step(3, FinancialSituation(), InvestmentPreference(time_horizon=50)) == []
    assert validate_step(3, FinancialSituation(), InvestmentPreference(time_horizon=51))[0].code == "invalid_time_horizon"
    assert validate_step(3, FinancialSituation(), InvestmentPreference(time_horizon=2.5))[0].code == "invalid_time_horizon"  # type: ignore[arg-type]


def test_boolean_flags_are_checked() -> None:
    pref = InvestmentPreference(ethical="yes", asset_comfort=AssetComfort(crypto="sure"))  # type: ignore[arg-type]
    fields = [issue.field for issue in validate_step(4, FinancialSituation(), pref)]
    assert fields == ["asset_comfort.crypto", "ethical"]


def test_step_for_field() -> None:
    assert step_for_field("cash_flow") == 1
    assert step_for_field("dependents") == 2
    assert step_for_field("risk_tolerance") == 3
    assert step_for_field("initial_amount") == 4
    assert step_for_field("nickname") is None
