"""Portfolio-domain MCP tools."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from portfolio_advisor.lib.formatters import format_recommendation
from portfolio_advisor.runtime.monitoring import track_tool

if TYPE_CHECKING:
    from portfolio_advisor.tools.registry import ToolServices


def _drop_unset(values: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def register_portfolio_tools(mcp: FastMCP, services: ToolServices) -> None:
    metrics = getattr(services, "metrics", None)

    @mcp.tool(description="Return the onboarding step and the stored portfolio profile.")
    def get_onboarding_state() -> str:
        with track_tool("get_onboarding_state", metrics):
            return json.dumps(services.portfolio.get_state(), ensure_ascii=True)

    @mcp.tool(description="Update financial situation answers (steps 1-2 of onboarding).")
    def update_financial_situation(
        emergency_fund: str | None = None,
        debt_type: str | None = None,
        debt_amount: float | None = None,
        cash_flow: str | None = None,
        employment: str | None = None,
        dependents: str | None = None,
    ) -> str:
        updates = _drop_unset(
            {
                "emergency_fund": emergency_fund,
                "debt_type": debt_type,
                "debt_amount": debt_amount,
                "cash_flow": cash_flow,
                "employment": employment,
                "dependents": dependents,
            }
        )
        with track_tool("update_financial_situation", metrics):
            return json.dumps(services.portfolio.update_financial_situation(updates), ensure_ascii=True)

    @mcp.tool(description="Update investment goal and preference answers (steps 3-4 of onboarding).")
    def update_investment_preferences(
        risk_tolerance: str | None = None,
        investment_goal: str | None = None,
        time_horizon: int | None = None,
        initial_amount: float | None = None,
        monthly_contribution: float | None = None,
        asset_comfort: dict[str, Any] | None = None,
        involvement: str | None = None,
        tax_needs: str | None = None,
        ethical: bool | None = None,
    ) -> str:
        updates = _drop_unset(
            {
                "risk_tolerance": risk_tolerance,
                "investment_goal": investment_goal,
                "time_horizon": time_horizon,
                "initial_amount": initial_amount,
                "monthly_contribution": monthly_contribution,
                "asset_comfort": asset_comfort,
                "involvement": involvement,
                "tax_needs": tax_needs,
                "ethical": ethical,
            }
        )
        with track_tool("update_investment_preferences", metrics):
            return json.dumps(services.portfolio.update_investment_preferences(updates), ensure_ascii=True)

    @mcp.tool(description="Advance onboarding; leaving step 4 creates the portfolio recommendation.")
    def onboarding_next_step() -> str:
        with track_tool("onboarding_next_step", metrics):
            return json.dumps(services.portfolio.next_step(), ensure_ascii=True)

    @mcp.tool(description="Go back one onboarding step.")
    def onboarding_previous_step() -> str:
        with track_tool("onboarding_previous_step", metrics):
            return json.dumps(services.portfolio.previous_step(), ensure_ascii=True)

    @mcp.tool(description="Return the allocation, instruments, projection and risk diagnostics.")
    def get_portfolio_recommendation(history_seed: int = 0) -> str:
        with track_tool("get_portfolio_recommendation", metrics):
            return json.dumps(services.portfolio.get_recommendation(history_seed=history_seed), ensure_ascii=True)

    @mcp.tool(description="Toggle selection of a recommended investment by id.")
    def toggle_investment_selection(investment_id: str) -> str:
        with track_tool("toggle_investment_selection", metrics):
            return json.dumps(services.portfolio.toggle_investment(investment_id), ensure_ascii=True)

    @mcp.tool(description="Reset all portfolio data to defaults. Requires confirm=true.")
    def reset_portfolio(confirm: bool = False) -> str:
        with track_tool("reset_portfolio", metrics):
            return json.dumps(services.portfolio.reset(confirm), ensure_ascii=True)

    @mcp.tool(description="Project future portfolio value from the stored profile.")
    def project_portfolio_value() -> str:
        with track_tool("project_portfolio_value", metrics):
            return json.dumps(services.portfolio.project(), ensure_ascii=True)

    @mcp.tool(description="Stateless recommendation from a profile JSON with financialSituation and investmentPref.")
    def recommend_portfolio(profile_json: str, history_seed: int = 0) -> str:
        with track_tool("recommend_portfolio", metrics):
            try:
                profile = json.loads(profile_json)
            except json.JSONDecodeError as error:
                payload: dict[str, Any] = {
                    "ok": False,
                    "error": {"type": "validation_error", "errors": [{"field": "profile_json", "message": str(error)}]},
                }
                return json.dumps(payload, ensure_ascii=True)
            if not isinstance(profile, dict):
                profile = {}
            return json.dumps(services.portfolio.recommend_for_profile(profile, history_seed=history_seed), ensure_ascii=True)

    @mcp.tool(description="Readable summary of the current portfolio recommendation.")
    def portfolio_summary() -> str:
        with track_tool("portfolio_summary", metrics):
            report = services.portfolio.get_recommendation()
            if not report.get("ok"):
                raise ValueError(report["error"]["message"])
            pref = services.portfolio.get_current_snapshot()["investmentPref"]
            return format_recommendation(
                report,
                initial_amount=pref["initialAmount"],
                monthly_contribution=pref["monthlyContribution"],
                time_horizon=pref["timeHorizon"],
            )
