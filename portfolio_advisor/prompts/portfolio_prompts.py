"""Portfolio prompt definitions."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP


def _build_portfolio_review_prompt(goal: str) -> str:
    goal_text = goal.strip()
    if not goal_text:
        raise ValueError("Missing required argument: goal.")
    return (
        "You are a fee-only financial planner reviewing a model portfolio.\n"
        f"The client's primary goal is: {goal_text}.\n"
        "Read the portfolio://recommendation resource and provide:\n"
        "1) Whether the bucket allocation fits the goal and time horizon\n"
        "2) Gaps in the client's financial foundation (emergency fund, debt, dependents)\n"
        "3) Comments on the instrument selection and any ESG considerations\n"
        "4) A short, prioritized action list."
    )


def register_portfolio_prompts(mcp: FastMCP) -> None:
    @mcp.prompt(
        name="portfolio_review",
        title="Portfolio Review Prompt",
        description="Generate a structured review prompt for the current recommendation.",
    )
    def portfolio_review(goal: str) -> str:
        return _build_portfolio_review_prompt(goal)
