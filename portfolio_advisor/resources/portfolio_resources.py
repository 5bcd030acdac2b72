"""Portfolio resource definitions."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from mcp.server.fastmcp import FastMCP

if TYPE_CHECKING:
    from portfolio_advisor.tools.registry import ToolServices

CURRENT_PORTFOLIO_URI = "portfolio://current"
RECOMMENDATION_URI = "portfolio://recommendation"


def register_portfolio_resources(mcp: FastMCP, services: "ToolServices") -> None:
    @mcp.resource(
        CURRENT_PORTFOLIO_URI,
        name="current-portfolio",
        title="Current Portfolio Profile",
        description="Persisted onboarding answers, selections and completion flag.",
        mime_type="application/json",
    )
    def current_portfolio_resource() -> str:
        return json.dumps(services.portfolio.get_current_snapshot(), ensure_ascii=True)

    @mcp.resource(
        RECOMMENDATION_URI,
        name="portfolio-recommendation",
        title="Portfolio Recommendation",
        description="Allocation, instruments and projection captured when onboarding completed.",
        mime_type="application/json",
    )
    def recommendation_resource() -> str:
        report = services.portfolio.get_recommendation()
        if not report.get("ok"):
            raise ValueError("Portfolio recommendation not found. Complete onboarding first.")
        return json.dumps(report, ensure_ascii=True)
