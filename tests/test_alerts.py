import pytest

from portfolio_advisor.alerts.alert_service import AlertService
from portfolio_advisor.alerts.models import NewsAlert, PriceAlert, VolumeAlert, is_triggered, parse_alert, parse_volume
from portfolio_advisor.market.feed import build_market_snapshot


def test_parse_volume_shorthand() -> None:
    assert parse_volume("100M") == 100_000_000
    assert parse_volume("57.3k") == pytest.approx(57_300)
    assert parse_volume(42) == 42.0
    with pytest.raises(ValueError):
        parse_volume("lots")


def test_parse_alert_builds_one_record_per_kind() -> None:
    price = parse_alert({"id": 1, "type": "price", "asset": "btc", "condition": "above", "target": "90000"})
    volume = parse_alert({"id": 2, "type": "volume", "asset": "SPX", "condition": "below", "target": "2B"})
    news = parse_alert({"id": 3, "type": "news", "asset": "SPX", "target": "Fed"})

    assert isinstance(price, PriceAlert)
    assert price.asset == "BTC"
    assert price.target_price == 90000.0
    assert isinstance(volume, VolumeAlert)
    assert volume.target_volume == 2e9
    assert isinstance(news, NewsAlert)
    assert news.condition == "mentions"


def test_parse_alert_rejects_bad_definitions() -> None:
    with pytest.raises(ValueError):
        parse_alert({"id": 1, "type": "rumor", "asset": "SPX", "target": 1})
    with pytest.raises(ValueError):
        parse_alert({"id": 1, "type": "price", "asset": "SPX", "condition": "sideways", "target": 1})


def test_is_triggered_per_kind() -> None:
    assert is_triggered(PriceAlert(1, "SPX", "above", 5000.0), price=5824.15)
    assert not is_triggered(PriceAlert(1, "SPX", "below", 5000.0), price=5824.15)
    assert not is_triggered(PriceAlert(1, "SPX", "above", 5000.0, enabled=False), price=5824.15)
    assert not is_triggered(PriceAlert(1, "SPX", "above", 5000.0))
    assert is_triggered(VolumeAlert(2, "SPX", "above", 1e6), volume=2e6)
    assert is_triggered(NewsAlert(3, "SPX", "fed"), headlines=["Fed Maintains Rates"])
    assert not is_triggered(NewsAlert(3, "SPX", "fed"), headlines=[])


def test_alert_service_evaluates_against_snapshot() -> None:
    service = AlertService(build_market_snapshot(seed=2025))

    payload = service.evaluate({"id": 1, "type": "price", "asset": "SPX", "condition": "above", "target": 5000})
    assert payload["ok"] is True
    assert payload["observed_price"] == 5824.15
    assert payload["triggered"] is True
    assert payload["alert"]["kind"] == "price"

    news = service.evaluate({"id": 2, "type": "news", "asset": "SPX", "target": "Fed"})
    assert news["triggered"] is True

    invalid = service.evaluate({"type": "price"})
    assert invalid["error"]["type"] == "validation_error"
