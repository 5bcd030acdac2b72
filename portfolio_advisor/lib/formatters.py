"""Plain-text rendering of recommendation payloads."""

from __future__ import annotations

from typing import Any

FINANCIAL_DISCLAIMER = "Informational use only. This is not financial advice."
BUCKET_LABELS = {
    "stocks": "Stocks",
    "bonds": "Bonds",
    "realEstate": "Real Estate",
    "crypto": "Crypto",
    "cash": "Cash",
}


def _fmt_number(value: float | None, decimals: int = 2) -> str:
    if value is None:
        return "n/a"
    return f"{value:,.{decimals}f}"


def format_response(
    title: str,
    lines: list[str],
    warning: str | None = None,
    include_disclaimer: bool = True,
) -> str:
    chunks: list[str] = [title]
    if warning:
        chunks.append(f"Warning: {warning}")
    chunks.extend(lines)
    if include_disclaimer:
        chunks.extend(["---", FINANCIAL_DISCLAIMER])
    return "\n".join(chunks)


def line_money(label: str, value: float | None, decimals: int = 2) -> str:
    return f"{label}: ${_fmt_number(value, decimals)}"


def line_percent(label: str, value: float | None, decimals: int = 1) -> str:
    if value is None:
        return f"{label}: n/a"
    return f"{label}: {value:.{decimals}f}%"


def format_recommendation(report: dict[str, Any], initial_amount: float, monthly_contribution: float, time_horizon: int) -> str:
    lines = [
        line_money("Initial Investment", initial_amount, 0),
        line_money("Monthly Contribution", monthly_contribution, 0),
        f"Time Horizon: {time_horizon} years",
        line_money(f"Projected Value in {time_horizon} Years", report["projected_value"], 0),
        f"Overall Risk Score: {report['risk_score']}/100 - {report['risk_summary']}",
        "Allocation:",
    ]
    lines.extend(
        f"  {line_percent(BUCKET_LABELS.get(bucket, bucket), float(pct), 0)}"
        for bucket, pct in report["asset_allocation"].items()
        if pct > 0
    )
    lines.append("Recommended Investments:")
    selected = report.get("selected_investments") or {}
    for item in report["investments"]:
        marker = "[x]" if selected.get(item["id"]) else "[ ]"
        lines.append(
            f"  {marker} {item['name']} ({item['riskLevel']} risk, {item['expectedReturn']}% expected) "
            f"- {item['allocationPercentage']}%"
        )
    lines.append(line_percent("Selected", report["total_selected_allocation"]))
    lines.append(f"Next step: {report['next_step_action']}")
    lines.append(f"Suggested actions: {', '.join(report['suggested_actions'])}")
    return format_response("Your Personalized Portfolio", lines)
