from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Tuple

# column name -> trimmed raw value, one per data line of an upload
RawRecord = Dict[str, str]


@dataclass(frozen=True)
class CashPosition:
    entity: str
    bank: str
    account: str
    currency: str
    amount: Decimal               # reporting currency, 0 when unparseable


@dataclass(frozen=True)
class CounterpartyRisk:
    counterparty: str
    agency: str                   # "S&P", "Fitch", "Moody's", ...
    rating: str
    outlook: str
    country_risk: str
    exposure_amount: Decimal
    internal_risk_score: Decimal
    risk_classification: str      # "Low" | "Medium" | "High"
    is_downgrade: bool


@dataclass(frozen=True)
class DividendFlow:
    month: str                    # "YYYY-MM", not validated
    opco: str
    entity: str
    dividends: Decimal
    management_fees: Decimal


@dataclass(frozen=True)
class ForecastMonth:
    month: str
    scenario: str                 # e.g. "Base"
    opening_cash: Decimal
    inflows: Decimal
    outflows: Decimal


# Derived views

@dataclass(frozen=True)
class EntitySummary:
    entity: str
    amount: Decimal
    share: Decimal


@dataclass(frozen=True)
class CurrencySummary:
    currency: str
    amount: Decimal
    share: Decimal
    concentration_risk: bool


@dataclass(frozen=True)
class BankSummary:
    bank: str
    amount: Decimal
    share: Decimal
    concentration_risk: bool


@dataclass(frozen=True)
class ForecastSummary:
    month: str
    scenario: str
    opening_cash: Decimal
    inflows: Decimal
    outflows: Decimal
    net_movement: Decimal
    closing_cash: Decimal


@dataclass(frozen=True)
class DividendSummary:
    month: str
    opco: str
    entity: str
    dividends: Decimal
    management_fees: Decimal
    total_received: Decimal


@dataclass(frozen=True)
class CounterpartyView:
    counterparty: str
    agency: str
    rating: str
    outlook: str
    country_risk: str
    exposure_amount: Decimal
    internal_risk_score: Decimal
    risk_classification: str
    is_downgrade: bool
    is_high_risk: bool            # risk_classification == "High"


@dataclass(frozen=True)
class DashboardViews:
    group_name: str
    reporting_currency: str
    total_cash: Decimal
    entities: Tuple[EntitySummary, ...]
    currencies: Tuple[CurrencySummary, ...]
    banks: Tuple[BankSummary, ...]
    counterparties: Tuple[CounterpartyView, ...]
    dividends: Tuple[DividendSummary, ...]
    forecast: Tuple[ForecastSummary, ...]
