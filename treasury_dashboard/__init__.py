from .aggregate import (
    bank_summary,
    build_views,
    counterparty_view,
    currency_summary,
    dividend_summary,
    entity_summary,
    forecast_summary,
    group_totals,
    total_cash,
)
from .config import DashboardSettings, Thresholds
from .domains import REQUIRED_COLUMNS, Domain, coerce_records, required_columns
from .errors import ParseFailure, SchemaValidationError, UploadError
from .parse import decode_upload, detect_delimiter, parse_delimited
from .session import DashboardSession, UploadOutcome

__all__ = [
    "DashboardSession",
    "DashboardSettings",
    "Domain",
    "ParseFailure",
    "REQUIRED_COLUMNS",
    "SchemaValidationError",
    "Thresholds",
    "UploadError",
    "UploadOutcome",
    "bank_summary",
    "build_views",
    "coerce_records",
    "counterparty_view",
    "currency_summary",
    "decode_upload",
    "detect_delimiter",
    "dividend_summary",
    "entity_summary",
    "forecast_summary",
    "group_totals",
    "parse_delimited",
    "required_columns",
    "total_cash",
]
