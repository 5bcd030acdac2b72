"""In-memory TTL cache for generated insight text."""

from __future__ import annotations

import hashlib
import time
from dataclasses import dataclass
from threading import Lock


@dataclass
class _Entry:
    text: str
    expires_at: float


def prompt_cache_key(namespace: str, prompt: str) -> str:
    digest = hashlib.sha256(prompt.encode("utf-8")).hexdigest()[:32]
    return f"{namespace}:{digest}"


class TTLCache:
    """Thread-safe string cache; entries expire after their TTL."""

    def __init__(self, default_ttl_seconds: int = 300, clock=time.monotonic) -> None:
        self.default_ttl_seconds = max(1, default_ttl_seconds)
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._lock = Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[key]
                return None
            return entry.text

    def set(self, key: str, text: str, ttl_seconds: int | None = None) -> None:
        ttl = self.default_ttl_seconds if ttl_seconds is None else max(1, ttl_seconds)
        with self._lock:
            self._entries[key] = _Entry(text=text, expires_at=self._clock() + ttl)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
