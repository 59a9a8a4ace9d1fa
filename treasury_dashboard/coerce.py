from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any

from .models import CashPosition, CounterpartyRisk, DividendFlow, ForecastMonth, RawRecord

_ZERO = Decimal("0")

# ASCII digits only, with optional sign, fraction and exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# Larger or smaller magnitudes cannot be summed safely in the default context.
_MAX_EXPONENT = 100


def _usable(d: Decimal) -> Decimal:
    if not d.is_finite() or abs(d.adjusted()) > _MAX_EXPONENT:
        return _ZERO
    return d


def to_number(value: Any) -> Decimal:
    """Lenient numeric coercion: anything unusable becomes 0, never an error."""
    if value is None:
        return _ZERO
    if isinstance(value, Decimal):
        return _usable(value)
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, (int, float)):
        value = str(value)
    s = str(value).strip()
    if not _NUMBER_RE.fullmatch(s):
        return _ZERO
    try:
        return _usable(Decimal(s))
    except InvalidOperation:
        return _ZERO


def to_flag(value: Any) -> bool:
    return str(value).lower() == "true"


def _text(raw: RawRecord, column: str) -> str:
    return raw.get(column) or ""


def cash_position_from_raw(raw: RawRecord) -> CashPosition:
    return CashPosition(
        entity=_text(raw, "entity"),
        bank=_text(raw, "bank"),
        account=_text(raw, "account"),
        currency=_text(raw, "currency"),
        amount=to_number(raw.get("amount")),
    )


def counterparty_from_raw(raw: RawRecord) -> CounterpartyRisk:
    return CounterpartyRisk(
        counterparty=_text(raw, "counterparty"),
        agency=_text(raw, "agency"),
        rating=_text(raw, "rating"),
        outlook=_text(raw, "outlook"),
        country_risk=_text(raw, "countryRisk"),
        exposure_amount=to_number(raw.get("exposureAmount")),
        internal_risk_score=to_number(raw.get("internalRiskScore")),
        risk_classification=_text(raw, "riskClassification"),
        is_downgrade=to_flag(raw.get("isDowngrade")),
    )


def dividend_from_raw(raw: RawRecord) -> DividendFlow:
    return DividendFlow(
        month=_text(raw, "month"),
        opco=_text(raw, "opco"),
        entity=_text(raw, "entity"),
        dividends=to_number(raw.get("dividends")),
        management_fees=to_number(raw.get("managementFees")),
    )


def forecast_from_raw(raw: RawRecord) -> ForecastMonth:
    return ForecastMonth(
        month=_text(raw, "month"),
        scenario=_text(raw, "scenario"),
        opening_cash=to_number(raw.get("openingCash")),
        inflows=to_number(raw.get("inflows")),
        outflows=to_number(raw.get("outflows")),
    )
