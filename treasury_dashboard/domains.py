from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterable, Tuple

from .coerce import cash_position_from_raw, counterparty_from_raw, dividend_from_raw, forecast_from_raw
from .models import RawRecord


class Domain(str, Enum):
    CASH = "cash"
    COUNTERPARTY = "counterparty"
    DIVIDENDS = "dividends"
    FORECAST = "forecast"


# Exact, case-sensitive header names each upload must carry.
REQUIRED_COLUMNS: Dict[Domain, Tuple[str, ...]] = {
    Domain.CASH: ("entity", "bank", "account", "currency", "amount"),
    Domain.COUNTERPARTY: (
        "counterparty",
        "agency",
        "rating",
        "outlook",
        "countryRisk",
        "exposureAmount",
        "internalRiskScore",
        "riskClassification",
        "isDowngrade",
    ),
    Domain.DIVIDENDS: ("month", "opco", "entity", "dividends", "managementFees"),
    Domain.FORECAST: ("month", "scenario", "openingCash", "inflows", "outflows"),
}

_COERCERS: Dict[Domain, Callable[[RawRecord], object]] = {
    Domain.CASH: cash_position_from_raw,
    Domain.COUNTERPARTY: counterparty_from_raw,
    Domain.DIVIDENDS: dividend_from_raw,
    Domain.FORECAST: forecast_from_raw,
}


def required_columns(domain: Domain | str) -> Tuple[str, ...]:
    return REQUIRED_COLUMNS[Domain(domain)]


def coerce_records(domain: Domain | str, raw_records: Iterable[RawRecord]) -> tuple:
    coerce = _COERCERS[Domain(domain)]
    return tuple(coerce(raw) for raw in raw_records)
