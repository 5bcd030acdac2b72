"""Typed portfolio models and their persisted JSON layout."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

EmergencyFund = Literal["none", "partial", "full"]
DebtType = Literal["none", "low", "high", "other"]
CashFlow = Literal["positive", "neutral", "negative"]
Employment = Literal["stable", "variable", "retired", "other"]
Dependents = Literal["single", "partnered", "children", "elderly", "none"]
RiskTolerance = Literal["low", "medium", "high"]
InvestmentGoal = Literal["retirement", "wealth", "income", "savings", "other"]
Involvement = Literal["automated", "guided", "self-directed"]
TaxNeeds = Literal["high", "maximized", "none"]
InstrumentType = Literal["stock", "etf", "crypto", "bond", "reit", "metal"]
RiskLevel = Literal["low", "medium", "high"]

BUCKETS = ("stocks", "bonds", "real_estate", "crypto", "cash")


@dataclass
class FinancialSituation:
    emergency_fund: EmergencyFund = "none"
    debt_type: DebtType = "none"
    cash_flow: CashFlow = "neutral"
    employment: Employment = "stable"
    dependents: Dependents = "none"
    debt_amount: float | None = None


@dataclass
class AssetComfort:
    stocks: bool = True
    bonds: bool = True
    real_estate: bool = True
    crypto: bool = False
    metals: bool = False
    other: str | None = None


@dataclass
class InvestmentPreference:
    risk_tolerance: RiskTolerance = "medium"
    investment_goal: InvestmentGoal = "wealth"
    time_horizon: int = 10
    initial_amount: float = 10000
    monthly_contribution: float = 500
    asset_comfort: AssetComfort = field(default_factory=AssetComfort)
    involvement: Involvement = "guided"
    tax_needs: TaxNeeds = "none"
    ethical: bool = False


@dataclass
class AssetAllocation:
    stocks: int = 0
    bonds: int = 0
    real_estate: int = 0
    crypto: int = 0
    cash: int = 0

    def total(self) -> int:
        return self.stocks + self.bonds + self.real_estate + self.crypto + self.cash

    def as_dict(self) -> dict[str, int]:
        return {
            "stocks": self.stocks,
            "bonds": self.bonds,
            "realEstate": self.real_estate,
            "crypto": self.crypto,
            "cash": self.cash,
        }


@dataclass
class InvestmentOption:
    id: str
    name: str
    type: InstrumentType
    risk_level: RiskLevel
    expected_return: float
    description: str
    allocation_percentage: float
    ethical: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "riskLevel": self.risk_level,
            "expectedReturn": self.expected_return,
            "description": self.description,
            "allocationPercentage": self.allocation_percentage,
            "ethical": self.ethical,
        }


@dataclass
class Recommendation:
    asset_allocation: AssetAllocation
    investments: list[InvestmentOption]

    def as_dict(self) -> dict[str, Any]:
        return {
            "assetAllocation": self.asset_allocation.as_dict(),
            "investments": [item.as_dict() for item in self.investments],
        }


@dataclass
class PortfolioData:
    financial_situation: FinancialSituation = field(default_factory=FinancialSituation)
    investment_pref: InvestmentPreference = field(default_factory=InvestmentPreference)
    selected_investments: dict[str, bool] = field(default_factory=dict)
    completed_onboarding: bool = False
    recommendation: Recommendation | None = None


@dataclass
class ValidationIssue:
    field: str
    message: str
    step: int | None = None
    code: str = "invalid_value"


def default_portfolio_data() -> PortfolioData:
    return PortfolioData()


def financial_situation_to_dict(situation: FinancialSituation) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "emergencyFund": situation.emergency_fund,
        "debtType": situation.debt_type,
        "cashFlow": situation.cash_flow,
        "employment": situation.employment,
        "dependents": situation.dependents,
    }
    if situation.debt_amount is not None:
        payload["debtAmount"] = situation.debt_amount
    return payload


def investment_preference_to_dict(pref: InvestmentPreference) -> dict[str, Any]:
    comfort: dict[str, Any] = {
        "stocks": pref.asset_comfort.stocks,
        "bonds": pref.asset_comfort.bonds,
        "realEstate": pref.asset_comfort.real_estate,
        "crypto": pref.asset_comfort.crypto,
        "metals": pref.asset_comfort.metals,
    }
    if pref.asset_comfort.other is not None:
        comfort["other"] = pref.asset_comfort.other
    return {
        "riskTolerance": pref.risk_tolerance,
        "investmentGoal": pref.investment_goal,
        "timeHorizon": pref.time_horizon,
        "initialAmount": pref.initial_amount,
        "monthlyContribution": pref.monthly_contribution,
        "assetComfort": comfort,
        "involvement": pref.involvement,
        "taxNeeds": pref.tax_needs,
        "ethical": pref.ethical,
    }


def portfolio_data_to_dict(data: PortfolioData) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "financialSituation": financial_situation_to_dict(data.financial_situation),
        "investmentPref": investment_preference_to_dict(data.investment_pref),
        "selectedInvestments": dict(data.selected_investments),
        "completedOnboarding": data.completed_onboarding,
    }
    if data.recommendation is not None:
        payload["recommendation"] = data.recommendation.as_dict()
    return payload


def financial_situation_from_dict(raw: dict[str, Any]) -> FinancialSituation:
    defaults = FinancialSituation()
    debt_amount = raw.get("debtAmount")
    return FinancialSituation(
        emergency_fund=raw.get("emergencyFund", defaults.emergency_fund),
        debt_type=raw.get("debtType", defaults.debt_type),
        cash_flow=raw.get("cashFlow", defaults.cash_flow),
        employment=raw.get("employment", defaults.employment),
        dependents=raw.get("dependents", defaults.dependents),
        debt_amount=float(debt_amount) if isinstance(debt_amount, (int, float)) else None,
    )


def asset_comfort_from_dict(raw: dict[str, Any]) -> AssetComfort:
    defaults = AssetComfort()
    other = raw.get("other")
    return AssetComfort(
        stocks=bool(raw.get("stocks", defaults.stocks)),
        bonds=bool(raw.get("bonds", defaults.bonds)),
        real_estate=bool(raw.get("realEstate", defaults.real_estate)),
        crypto=bool(raw.get("crypto", defaults.crypto)),
        metals=bool(raw.get("metals", defaults.metals)),
        other=str(other) if other is not None else None,
    )


def investment_preference_from_dict(raw: dict[str, Any]) -> InvestmentPreference:
    defaults = InvestmentPreference()
    comfort = raw.get("assetComfort")
    return InvestmentPreference(
        risk_tolerance=raw.get("riskTolerance", defaults.risk_tolerance),
        investment_goal=raw.get("investmentGoal", defaults.investment_goal),
        time_horizon=raw.get("timeHorizon", defaults.time_horizon),
        initial_amount=raw.get("initialAmount", defaults.initial_amount),
        monthly_contribution=raw.get("monthlyContribution", defaults.monthly_contribution),
        asset_comfort=asset_comfort_from_dict(comfort) if isinstance(comfort, dict) else AssetComfort(),
        involvement=raw.get("involvement", defaults.involvement),
        tax_needs=raw.get("taxNeeds", defaults.tax_needs),
        ethical=bool(raw.get("ethical", defaults.ethical)),
    )


def _recommendation_from_dict(raw: dict[str, Any]) -> Recommendation:
    alloc = raw.get("assetAllocation") or {}
    investments = [
        InvestmentOption(
            id=str(item["id"]),
            name=str(item["name"]),
            type=item["type"],
            risk_level=item["riskLevel"],
            expected_return=float(item["expectedReturn"]),
            description=str(item.get("description", "")),
            allocation_percentage=float(item["allocationPercentage"]),
            ethical=bool(item.get("ethical", False)),
        )
        for item in raw.get("investments") or []
    ]
    return Recommendation(
        asset_allocation=AssetAllocation(
            stocks=int(alloc.get("stocks", 0)),
            bonds=int(alloc.get("bonds", 0)),
            real_estate=int(alloc.get("realEstate", 0)),
            crypto=int(alloc.get("crypto", 0)),
            cash=int(alloc.get("cash", 0)),
        ),
        investments=investments,
    )


def portfolio_data_from_dict(raw: dict[str, Any]) -> PortfolioData:
    """Rebuild the aggregate from its persisted layout; missing keys take defaults."""
    situation = raw.get("financialSituation")
    pref = raw.get("investmentPref")
    selected = raw.get("selectedInvestments")
    recommendation = raw.get("recommendation")
    return PortfolioData(
        financial_situation=financial_situation_from_dict(situation) if isinstance(situation, dict) else FinancialSituation(),
        investment_pref=investment_preference_from_dict(pref) if isinstance(pref, dict) else InvestmentPreference(),
        selected_investments={str(k): bool(v) for k, v in selected.items()} if isinstance(selected, dict) else {},
        completed_onboarding=bool(raw.get("completedOnboarding", False)),
        recommendation=_recommendation_from_dict(recommendation) if isinstance(recommendation, dict) else None,
    )
