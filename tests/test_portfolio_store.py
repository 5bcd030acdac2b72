import json

from portfolio_advisor.portfolio.models import default_portfolio_data
from portfolio_advisor.portfolio.wizard import OnboardingWizard
from portfolio_advisor.storage.portfolio_store import InMemoryPortfolioStore, JsonFilePortfolioStore


def _completed_data():
    wizard = OnboardingWizard()
    wizard.update_investment_preferences({"risk_tolerance": "high", "time_horizon": 20})
    for _ in range(4):
        wizard.next_step()
    wizard.toggle_investment("vti")
    return wizard.data


def test_file_store_round_trip(tmp_path) -> None:
    store = JsonFilePortfolioStore(tmp_path / "state" / "storage.json")
    assert store.load() == default_portfolio_data()

    data = _completed_data()
    store.save(data)

    assert JsonFilePortfolioStore(tmp_path / "state" / "storage.json").load() == data
    document = json.loads((tmp_path / "state" / "storage.json").read_text(encoding="utf-8"))
    assert document["portfolioAppData"]["completedOnboarding"] is True
    assert document["portfolioAppData"]["selectedInvestments"] == {"vti": True}


def test_file_store_keys_are_independent(tmp_path) -> None:
    path = tmp_path / "storage.json"
    first = JsonFilePortfolioStore(path, "alice")
    second = JsonFilePortfolioStore(path, "bob")

    first.save(_completed_data())
    second.save(default_portfolio_data())
    second.clear()

    assert first.load().completed_onboarding is True
    assert second.load() == default_portfolio_data()


def test_corrupt_file_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFilePortfolioStore(path)

    assert store.load() == default_portfolio_data()
    store.save(_completed_data())
    assert store.load().completed_onboarding is True


def test_invalid_snapshot_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"portfolioAppData": {"recommendation": {"investments": [{"id": "vti"}]}}}), encoding="utf-8")
    assert JsonFilePortfolioStore(path).load() == default_portfolio_data()


def test_in_memory_store_save_overwrites_and_clear() -> None:
    store = InMemoryPortfolioStore()
    data = _completed_data()
    store.save(default_portfolio_data())
    store.save(data)
    assert store.load() == data

    store.clear()
    assert store.load() == default_portfolio_data()
