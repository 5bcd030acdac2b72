"""Evaluate alert definitions against the market snapshot."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from portfolio_advisor.alerts.models import is_triggered, parse_alert
from portfolio_advisor.market.feed import MarketSnapshot


class AlertService:
    def __init__(self, snapshot: MarketSnapshot) -> None:
        self.snapshot = snapshot

    def _price(self, symbol: str) -> float | None:
        for collection in (self.snapshot.stocks, self.snapshot.cryptocurrencies, self.snapshot.indices):
            for item in collection:
                if item.symbol == symbol:
                    return item.price
        return None

    def _headlines(self, symbol: str) -> list[str]:
        return [item.title for item in self.snapshot.news if symbol in item.symbols]

    def evaluate(self, raw: dict[str, Any], volume: float | None = None) -> dict[str, Any]:
        try:
            alert = parse_alert(raw)
        except (KeyError, TypeError, ValueError) as error:
            return {"ok": False, "error": {"type": "validation_error", "errors": [{"field": "alert", "message": str(error)}]}}
        price = self._price(alert.asset)
        triggered = is_triggered(alert, price=price, volume=volume, headlines=self._headlines(alert.asset))
        return {"ok": True, "alert": asdict(alert), "observed_price": price, "triggered": triggered}
