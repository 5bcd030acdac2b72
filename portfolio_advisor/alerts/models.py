"""Market alerts, one record type per alert kind."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Literal, Union

VOLUME_PATTERN = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*([KMB]?)\s*$", re.IGNORECASE)
VOLUME_MULTIPLIERS = {"": 1.0, "K": 1e3, "M": 1e6, "B": 1e9}


@dataclass
class PriceAlert:
    id: int
    asset: str
    condition: Literal["above", "below"]
    target_price: float
    enabled: bool = True
    kind: Literal["price"] = "price"


@dataclass
class VolumeAlert:
    id: int
    asset: str
    condition: Literal["above", "below"]
    target_volume: float
    enabled: bool = True
    kind: Literal["volume"] = "volume"


@dataclass
class NewsAlert:
    id: int
    asset: str
    keyword: str
    enabled: bool = True
    condition: Literal["mentions"] = "mentions"
    kind: Literal["news"] = "news"


Alert = Union[PriceAlert, VolumeAlert, NewsAlert]


def parse_volume(value: str | float | int) -> float:
    """Accept raw numbers or shorthand such as ``"100M"`` or ``"57.3K"``."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    match = VOLUME_PATTERN.match(str(value))
    if not match:
        raise ValueError(f"Unrecognized volume value: {value!r}")
    number, suffix = match.groups()
    return float(number) * VOLUME_MULTIPLIERS[suffix.upper()]


def _direction(raw: dict[str, Any]) -> Literal["above", "below"]:
    condition = str(raw.get("condition", "")).lower()
    if condition not in {"above", "below"}:
        raise ValueError(f"Alert condition must be 'above' or 'below', received {condition!r}.")
    return condition  # type: ignore[return-value]


def parse_alert(raw: dict[str, Any]) -> Alert:
    kind = raw.get("type")
    alert_id = int(raw["id"])
    asset = str(raw["asset"]).strip().upper()
    enabled = bool(raw.get("enabled", True))
    if kind == "price":
        return PriceAlert(alert_id, asset, _direction(raw), float(raw["target"]), enabled)
    if kind == "volume":
        return VolumeAlert(alert_id, asset, _direction(raw), parse_volume(raw["target"]), enabled)
    if kind == "news":
        return NewsAlert(alert_id, asset, str(raw["target"]).strip(), enabled)
    raise ValueError(f"Unknown alert type: {kind!r}")


def is_triggered(alert: Alert, price: float | None = None, volume: float | None = None, headlines: list[str] | None = None) -> bool:
    if not alert.enabled:
        return False
    if isinstance(alert, PriceAlert):
        if price is None:
            return False
        return price > alert.target_price if alert.condition == "above" else price < alert.target_price
    if isinstance(alert, VolumeAlert):
        if volume is None:
            return False
        return volume > alert.target_volume if alert.condition == "above" else volume < alert.target_volume
    keyword = alert.keyword.lower()
    return any(keyword in headline.lower() for headline in headlines or [])
