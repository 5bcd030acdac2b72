"""Market analytics and insight MCP tools."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from portfolio_advisor.runtime.monitoring import track_tool

if TYPE_CHECKING:
    from portfolio_advisor.tools.registry import ToolServices


def register_market_tools(mcp: FastMCP, services: ToolServices) -> None:
    metrics = getattr(services, "metrics", None)

    @mcp.tool(description="News sentiment breakdown (positive/negative/neutral) for the market feed.")
    def market_sentiment() -> str:
        with track_tool("market_sentiment", metrics):
            return json.dumps(services.insights.market_sentiment(), ensure_ascii=True)

    @mcp.tool(description="Most frequent news themes in the market feed.")
    def market_key_themes(limit: int = 5) -> str:
        with track_tool("market_key_themes", metrics):
            return json.dumps(services.insights.key_themes(limit=limit), ensure_ascii=True)

    @mcp.tool(description="Heuristic crypto, equity and bond risk levels.")
    def market_risk_assessment() -> str:
        with track_tool("market_risk_assessment", metrics):
            return json.dumps(services.insights.risk_assessment(), ensure_ascii=True)

    @mcp.tool(description="Generate portfolio, market and risk insights; falls back to static text when AI is off.")
    async def generate_market_insights(use_current_portfolio: bool = True) -> str:
        allocation: dict[str, int] | None = None
        if use_current_portfolio:
            snapshot = services.portfolio.get_current_snapshot()
            recommendation = snapshot.get("recommendation")
            if recommendation:
                allocation = recommendation["assetAllocation"]
        with track_tool("generate_market_insights", metrics):
            payload = await services.insights.generate_insights(allocation)
        return json.dumps(payload, ensure_ascii=True)

    @mcp.tool(description="Evaluate a price, volume or news alert definition against the market feed.")
    def evaluate_alert(alert: dict[str, Any], volume: float | None = None) -> str:
        with track_tool("evaluate_alert", metrics):
            return json.dumps(services.alerts.evaluate(alert, volume=volume), ensure_ascii=True)
