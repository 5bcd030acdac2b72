from portfolio_advisor.cache.ttl_cache import TTLCache, prompt_cache_key


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_entries_expire_after_ttl() -> None:
    clock = _Clock()
    cache = TTLCache(default_ttl_seconds=10, clock=clock)
    cache.set("a", "text")
    cache.set("b", "short", ttl_seconds=2)

    clock.now = 5
    assert cache.get("a") == "text"
    assert cache.get("b") is None
    assert len(cache) == 1

    clock.now = 10
    assert cache.get("a") is None


def test_prompt_cache_key_is_stable_and_namespaced() -> None:
    assert prompt_cache_key("insight", "p") == prompt_cache_key("insight", "p")
    assert prompt_cache_key("insight", "p") != prompt_cache_key("insight", "q")
    assert prompt_cache_key("insight", "p").startswith("insight:")
