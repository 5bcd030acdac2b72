from portfolio_advisor.config import settings as settings_module
from portfolio_advisor.config.settings import get_settings


def _clear(monkeypatch) -> None:
    monkeypatch.setattr(settings_module, "load_dotenv", lambda: False)
    for name in (
        "TRANSPORT_MODE",
        "PORT",
        "PORTFOLIO_STORAGE_PATH",
        "PORTFOLIO_STORAGE_KEY",
        "AI_INSIGHTS_ENABLED",
        "CLAUDE_API_KEY",
        "ANTHROPIC_API_KEY",
        "CLAUDE_MODEL",
        "ANTHROPIC_MODEL",
        "CACHE_TTL_SECONDS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch) -> None:
    _clear(monkeypatch)
    settings = get_settings()
    assert settings.transport_mode == "auto"
    assert settings.storage_key == "portfolioAppData"
    assert settings.ai_insights_enabled is False
    assert settings.claude_api_key is None
    assert settings.cache_ttl_seconds == 300


def test_environment_overrides(monkeypatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("TRANSPORT_MODE", " HTTP ")
    monkeypatch.setenv("AI_INSIGHTS_ENABLED", "yes")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "secret")
    monkeypatch.setenv("PORTFOLIO_STORAGE_KEY", "alice")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()
    assert settings.transport_mode == "http"
    assert settings.ai_insights_enabled is True
    assert settings.claude_api_key == "secret"
    assert settings.storage_key == "alice"
    assert settings.log_level == "DEBUG"


def test_malformed_numbers_fall_back(monkeypatch) -> None:
    _clear(monkeypatch)
    monkeypatch.setenv("PORT", "eighty")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "")
    settings = get_settings()
    assert settings.port == 8000
    assert settings.cache_ttl_seconds == 300
