"""Domain tool registry entrypoint."""

from __future__ import annotations

from dataclasses import dataclass

from mcp.server.fastmcp import FastMCP

from portfolio_advisor.alerts.alert_service import AlertService
from portfolio_advisor.market.insight_service import InsightService
from portfolio_advisor.portfolio.portfolio_service import PortfolioService
from portfolio_advisor.runtime.monitoring import ServerMetrics
from portfolio_advisor.services.base import ServiceContext
from portfolio_advisor.tools.market_tools import register_market_tools
from portfolio_advisor.tools.portfolio_tools import register_portfolio_tools


@dataclass
class ToolServices:
    portfolio: PortfolioService
    insights: InsightService
    alerts: AlertService
    metrics: ServerMetrics | None = None


def build_tool_services(ctx: ServiceContext) -> ToolServices:
    insights = InsightService(ctx)
    return ToolServices(
        portfolio=PortfolioService(ctx),
        insights=insights,
        alerts=AlertService(insights.snapshot),
        metrics=ctx.server_metrics,
    )


def register_all_tools(mcp: FastMCP, services: ToolServices) -> None:
    register_portfolio_tools(mcp, services)
    register_market_tools(mcp, services)
