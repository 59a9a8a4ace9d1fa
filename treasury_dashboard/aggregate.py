from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Callable, DefaultDict, Dict, Iterable, List, Mapping, Optional, Sequence

from .coerce import to_number
from .config import DashboardSettings, Thresholds
from .domains import Domain
from .models import (
    BankSummary,
    CashPosition,
    CounterpartyRisk,
    CounterpartyView,
    CurrencySummary,
    DashboardViews,
    DividendFlow,
    DividendSummary,
    EntitySummary,
    ForecastMonth,
    ForecastSummary,
)

_ZERO = Decimal("0")


def group_totals(records: Iterable[CashPosition], key: Callable[[CashPosition], str]) -> Dict[str, Decimal]:
    """
    Sum amounts per key. Keys keep the order in which they first appear, and
    every record lands in exactly one group, so the group totals always add
    up to the dataset total.
    """
    totals: DefaultDict[str, Decimal] = defaultdict(lambda: _ZERO)
    for rec in records:
        totals[key(rec)] += to_number(rec.amount)
    return dict(totals)


def _share(amount: Decimal, total: Decimal) -> Decimal:
    if not total:
        return _ZERO
    return amount / total


def total_cash(cash: Iterable[CashPosition]) -> Decimal:
    return sum((to_number(rec.amount) for rec in cash), _ZERO)


def entity_summary(cash: Sequence[CashPosition]) -> List[EntitySummary]:
    totals = group_totals(cash, lambda rec: rec.entity)
    total = sum(totals.values(), _ZERO)
    rows = [EntitySummary(entity=k, amount=v, share=_share(v, total)) for k, v in totals.items()]
    return sorted(rows, key=lambda r: r.amount, reverse=True)


def currency_summary(cash: Sequence[CashPosition], thresholds: Optional[Thresholds] = None) -> List[CurrencySummary]:
    limit = (thresholds or Thresholds()).currency_limit
    totals = group_totals(cash, lambda rec: rec.currency)
    total = sum(totals.values(), _ZERO)

    rows = []
    for currency, amount in totals.items():
        share = _share(amount, total)
        rows.append(CurrencySummary(currency=currency, amount=amount, share=share, concentration_risk=share > limit))
    return rows


def bank_summary(cash: Sequence[CashPosition], thresholds: Optional[Thresholds] = None) -> List[BankSummary]:
    limit = (thresholds or Thresholds()).bank_limit
    totals = group_totals(cash, lambda rec: rec.bank)
    total = sum(totals.values(), _ZERO)

    rows = []
    for bank, amount in totals.items():
        share = _share(amount, total)
        rows.append(BankSummary(bank=bank, amount=amount, share=share, concentration_risk=share > limit))
    return sorted(rows, key=lambda r: r.amount, reverse=True)


def forecast_summary(forecast: Iterable[ForecastMonth]) -> List[ForecastSummary]:
    # Each month stands alone: opening cash is taken as uploaded, never
    # rolled forward from the previous month's closing cash.
    out = []
    for row in forecast:
        opening = to_number(row.opening_cash)
        inflows = to_number(row.inflows)
        outflows = to_number(row.outflows)
        net = inflows - outflows
        out.append(
            ForecastSummary(
                month=row.month,
                scenario=row.scenario,
                opening_cash=opening,
                inflows=inflows,
                outflows=outflows,
                net_movement=net,
                closing_cash=opening + net,
            )
        )
    return out


def dividend_summary(dividends: Iterable[DividendFlow]) -> List[DividendSummary]:
    out = []
    for row in dividends:
        div = to_number(row.dividends)
        fees = to_number(row.management_fees)
        out.append(
            DividendSummary(
                month=row.month,
                opco=row.opco,
                entity=row.entity,
                dividends=div,
                management_fees=fees,
                total_received=div + fees,
            )
        )
    return out


def counterparty_view(counterparties: Iterable[CounterpartyRisk]) -> List[CounterpartyView]:
    return [
        CounterpartyView(
            counterparty=row.counterparty,
            agency=row.agency,
            rating=row.rating,
            outlook=row.outlook,
            country_risk=row.country_risk,
            exposure_amount=row.exposure_amount,
            internal_risk_score=row.internal_risk_score,
            risk_classification=row.risk_classification,
            is_downgrade=row.is_downgrade,
            is_high_risk=row.risk_classification == "High",
        )
        for row in counterparties
    ]


def build_views(datasets: Mapping[Domain, Sequence], settings: Optional[DashboardSettings] = None) -> DashboardViews:
    settings = settings or DashboardSettings()
    cash = datasets.get(Domain.CASH, ())
    return DashboardViews(
        group_name=settings.group_name,
        reporting_currency=settings.reporting_currency,
        total_cash=total_cash(cash),
        entities=tuple(entity_summary(cash)),
        currencies=tuple(currency_summary(cash, settings.thresholds)),
        banks=tuple(bank_summary(cash, settings.thresholds)),
        counterparties=tuple(counterparty_view(datasets.get(Domain.COUNTERPARTY, ()))),
        dividends=tuple(dividend_summary(datasets.get(Domain.DIVIDENDS, ()))),
        forecast=tuple(forecast_summary(datasets.get(Domain.FORECAST, ()))),
    )
