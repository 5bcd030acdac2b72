from portfolio_advisor.lib.formatters import FINANCIAL_DISCLAIMER, format_recommendation, format_response, line_money, line_percent
from portfolio_advisor.portfolio.portfolio_service import PortfolioService
from portfolio_advisor.services.base import ServiceContext


def test_format_response_includes_disclaimer() -> None:
    output = format_response("Title", ["a", "b"], warning="Y")
    assert "Title" in output
    assert "Warning: Y" in output
    assert FINANCIAL_DISCLAIMER in output
    assert FINANCIAL_DISCLAIMER not in format_response("Title", [], include_disclaimer=False)


def test_line_helpers() -> None:
    assert line_money("Price", 10.123) == "Price: $10.12"
    assert line_money("Value", 96993, 0) == "Value: $96,993"
    assert line_percent("Selected", 26.3) == "Selected: 26.3%"
    assert line_percent("Selected", None) == "Selected: n/a"


def test_format_recommendation_lists_buckets_and_selection() -> None:
    service = PortfolioService(ServiceContext())
    for _ in range(4):
        service.next_step()
    service.toggle_investment("vti")

    text = format_recommendation(service.get_recommendation(), 10000, 500, 10)
    assert "Projected Value in 10 Years: $96,993" in text
    assert "Real Estate: 10%" in text
    assert "Crypto: 5%" in text
    assert "[x] VTI" in text
    assert "Next step: Schedule Advisor Consultation" in text
    assert text.endswith(FINANCIAL_DISCLAIMER)
