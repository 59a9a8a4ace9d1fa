from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Thresholds(BaseModel):
    """Concentration limits as a share of total cash; a row breaches only when strictly above."""

    model_config = ConfigDict(frozen=True)

    bank_limit: Decimal = Field(default=Decimal("0.40"), ge=0, le=1)
    currency_limit: Decimal = Field(default=Decimal("0.35"), ge=0, le=1)


class DashboardSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_name: str = "MTN Dubai"
    reporting_currency: str = "USD"
    thresholds: Thresholds = Field(default_factory=Thresholds)
