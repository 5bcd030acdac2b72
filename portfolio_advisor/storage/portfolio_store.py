"""Key-value persistence for the portfolio aggregate."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any, Protocol

from portfolio_advisor.portfolio.models import (
    PortfolioData,
    default_portfolio_data,
    portfolio_data_from_dict,
    portfolio_data_to_dict,
)

LOGGER = logging.getLogger(__name__)
DEFAULT_STORAGE_KEY = "portfolioAppData"


class PortfolioStore(Protocol):
    def load(self) -> PortfolioData: ...

    def save(self, data: PortfolioData) -> None: ...

    def clear(self) -> None: ...


class InMemoryPortfolioStore:
    """Keeps serialized snapshots in a dict; each save overwrites the key."""

    def __init__(self, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self.storage_key = storage_key
        self._data: dict[str, str] = {}
        self._lock = Lock()

    def load(self) -> PortfolioData:
        with self._lock:
            raw = self._data.get(self.storage_key)
        if raw is None:
            return default_portfolio_data()
        return portfolio_data_from_dict(json.loads(raw))

    def save(self, data: PortfolioData) -> None:
        serialized = json.dumps(portfolio_data_to_dict(data), ensure_ascii=True)
        with self._lock:
            self._data[self.storage_key] = serialized

    def clear(self) -> None:
        with self._lock:
            self._data.pop(self.storage_key, None)


class JsonFilePortfolioStore:
    """One JSON document on disk mapping storage keys to snapshots.

    Each save overwrites the snapshot under its key wholesale (last writer
    wins) and swaps the file in atomically.
    """

    def __init__(self, path: str | Path, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self.path = Path(path).expanduser()
        self.storage_key = storage_key
        self._lock = Lock()

    def _read_document(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as error:
            LOGGER.warning("portfolio storage unreadable, using defaults: path=%s error=%s", self.path, error)
            return {}
        return document if isinstance(document, dict) else {}

    def _write_document(self, document: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".portfolio-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(document, handle, ensure_ascii=True, indent=2)
            os.replace(tmp_path, self.path)
        except OSError:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def load(self) -> PortfolioData:
        with self._lock:
            snapshot = self._read_document().get(self.storage_key)
        if not isinstance(snapshot, dict):
            return default_portfolio_data()
        try:
            return portfolio_data_from_dict(snapshot)
        except (KeyError, TypeError, ValueError) as error:
            LOGGER.warning("portfolio snapshot invalid, using defaults: key=%s error=%s", self.storage_key, error)
            return default_portfolio_data()

    def save(self, data: PortfolioData) -> None:
        with self._lock:
            document = self._read_document()
            document[self.storage_key] = portfolio_data_to_dict(data)
            self._write_document(document)

    def clear(self) -> None:
        with self._lock:
            document = self._read_document()
            if document.pop(self.storage_key, None) is not None:
                self._write_document(document)
