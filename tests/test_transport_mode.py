from portfolio_advisor.config.settings import Settings
from portfolio_advisor.main import build_text_generator, resolve_http_transport, resolve_transport_mode
from portfolio_advisor.providers.anthropic_client import AnthropicClient, DisabledTextGenerator


def test_resolve_transport_mode_auto_local(monkeypatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    assert resolve_transport_mode("auto") == "stdio"


def test_resolve_transport_mode_auto_hosted(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "10000")
    assert resolve_transport_mode("auto") == "http"
    assert resolve_transport_mode("stdio") == "stdio"


def test_resolve_http_transport_default() -> None:
    assert resolve_http_transport("invalid") == "sse"
    assert resolve_http_transport("streamable") == "streamable"


def test_text_generator_requires_flag_and_key() -> None:
    assert isinstance(build_text_generator(Settings()), DisabledTextGenerator)
    assert isinstance(build_text_generator(Settings(ai_insights_enabled=True)), DisabledTextGenerator)
    client = build_text_generator(Settings(ai_insights_enabled=True, claude_api_key="k", claude_model="m"))
    assert isinstance(client, AnthropicClient)
    assert client.model == "m"
