"""Application entrypoint for the Portfolio Advisor MCP server."""

from __future__ import annotations

import asyncio
import logging
import os
import sys

from mcp.server.fastmcp import FastMCP
from starlette.responses import JSONResponse, Response

from portfolio_advisor.cache.ttl_cache import TTLCache
from portfolio_advisor.config.settings import Settings, get_settings
from portfolio_advisor.prompts.portfolio_prompts import register_portfolio_prompts
from portfolio_advisor.providers.anthropic_client import AnthropicClient, DisabledTextGenerator, TextGenerator
from portfolio_advisor.resources.portfolio_resources import register_portfolio_resources
from portfolio_advisor.runtime.monitoring import ServerMetrics
from portfolio_advisor.services.base import ServiceContext
from portfolio_advisor.storage.portfolio_store import JsonFilePortfolioStore
from portfolio_advisor.tools.registry import build_tool_services, register_all_tools

LOGGER = logging.getLogger(__name__)


def resolve_transport_mode(configured_mode: str) -> str:
    if configured_mode in {"stdio", "http"}:
        return configured_mode
    if os.getenv("PORT"):
        return "http"
    return "stdio"


def resolve_http_transport(configured_transport: str) -> str:
    if configured_transport in {"sse", "streamable"}:
        return configured_transport
    return "sse"


def build_text_generator(settings: Settings) -> TextGenerator:
    if settings.ai_insights_enabled and settings.claude_api_key:
        return AnthropicClient(settings.claude_api_key, settings.claude_model, settings.request_timeout_seconds)
    if settings.ai_insights_enabled:
        LOGGER.warning("AI insights enabled but no CLAUDE_API_KEY/ANTHROPIC_API_KEY set; using static fallback.")
    return DisabledTextGenerator()


def configure_logging(level: str) -> None:
    # stdout carries the stdio transport, so logs go to stderr.
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


async def run() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    server_metrics = ServerMetrics()
    service_ctx = ServiceContext(
        store=JsonFilePortfolioStore(settings.storage_path, settings.storage_key),
        text_generator=build_text_generator(settings),
        cache=TTLCache(default_ttl_seconds=settings.cache_ttl_seconds),
        cache_ttl_seconds=settings.cache_ttl_seconds,
        market_seed=settings.market_seed,
        server_metrics=server_metrics,
    )
    mcp = FastMCP(
        name=settings.app_name,
        host=settings.host,
        port=settings.port,
        streamable_http_path=settings.mcp_path,
    )
    services = build_tool_services(service_ctx)
    register_all_tools(mcp, services)
    register_portfolio_prompts(mcp)
    register_portfolio_resources(mcp, services)
    resolved_mode = resolve_transport_mode(settings.transport_mode)
    resolved_http_transport = resolve_http_transport(settings.http_transport)

    @mcp.custom_route(settings.health_path, methods=["GET"])
    async def health_check(_: object) -> Response:
        health = server_metrics.snapshot()
        return JSONResponse(
            {
                "status": "ok",
                "service": settings.app_name,
                "version": settings.app_version,
                "mode": resolved_mode,
                "ai_insights_enabled": not isinstance(service_ctx.text_generator, DisabledTextGenerator),
                "uptime_seconds": round(health.uptime_seconds, 3),
                "total_requests": health.total_requests,
                "error_rate": health.error_rate,
                "avg_latency_ms": round(health.avg_latency_ms, 3),
                "calls_by_tool": health.calls_by_tool,
            }
        )

    LOGGER.info(
        "starting %s: mode=%s http_transport=%s storage=%s",
        settings.app_name,
        resolved_mode,
        resolved_http_transport,
        settings.storage_path,
    )
    if resolved_mode == "stdio":
        await mcp.run_stdio_async()
    elif resolved_http_transport == "streamable":
        await mcp.run_streamable_http_async()
    else:
        await mcp.run_sse_async()


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
