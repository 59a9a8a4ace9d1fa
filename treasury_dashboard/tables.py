from __future__ import annotations

import json
from dataclasses import asdict, fields
from decimal import Decimal
from typing import Any, Dict, Iterable, Type

import pandas as pd

from .models import (
    BankSummary,
    CounterpartyView,
    CurrencySummary,
    DashboardViews,
    DividendSummary,
    EntitySummary,
    ForecastSummary,
)

_VIEW_TYPES: Dict[str, Type] = {
    "entities": EntitySummary,
    "currencies": CurrencySummary,
    "banks": BankSummary,
    "counterparties": CounterpartyView,
    "dividends": DividendSummary,
    "forecast": ForecastSummary,
}


class DecimalEncoder(json.JSONEncoder):
    def default(self, o: Any):
        if isinstance(o, Decimal):
            return str(o)
        return super().default(o)


def to_frame(rows: Iterable[Any], row_type: Type) -> pd.DataFrame:
    # Column order follows the dataclass, also for an empty view.
    columns = [f.name for f in fields(row_type)]
    return pd.DataFrame([asdict(r) for r in rows], columns=columns)


def view_frames(views: DashboardViews) -> Dict[str, pd.DataFrame]:
    return {name: to_frame(getattr(views, name), row_type) for name, row_type in _VIEW_TYPES.items()}


def views_to_json(views: DashboardViews, indent: int = 2) -> str:
    return json.dumps(asdict(views), ensure_ascii=False, indent=indent, cls=DecimalEncoder)
