from __future__ import annotations

from decimal import Decimal
from typing import Dict

from .domains import Domain
from .models import CashPosition, CounterpartyRisk, DividendFlow, ForecastMonth

# Demo figures shown until the first successful upload of each domain.

SAMPLE_CASH = (
    CashPosition("Global Sourcing Company", "Barclays UAE", "GSC001", "USD", Decimal("32500000")),
    CashPosition("Global Trading Company", "Emirates NBD", "GTC019", "AED", Decimal("18250000")),
    CashPosition("Telecom Sourcing Services", "Standard Bank of South Africa", "TSS112", "ZAR", Decimal("9750000")),
    CashPosition("Interserve", "Stanbic Bank Ghana", "INT550", "GHS", Decimal("6400000")),
    CashPosition("IMB", "ABSA Bank Ghana", "IMB201", "USD", Decimal("8800000")),
    CashPosition("IGL", "Barclays UAE", "IGL020", "EUR", Decimal("11700000")),
    CashPosition("Netherlands BV", "Emirates NBD", "NBV220", "EUR", Decimal("11200000")),
    CashPosition("Netherlands Coop", "Standard Bank of South Africa", "NCP022", "USD", Decimal("9300000")),
    CashPosition("NIC BV", "Barclays UAE", "NIC908", "USD", Decimal("15400000")),
)

SAMPLE_COUNTERPARTIES = (
    CounterpartyRisk(
        counterparty="Barclays UAE",
        agency="S&P",
        rating="A-",
        outlook="Stable",
        country_risk="Medium",
        exposure_amount=Decimal("47900000"),
        internal_risk_score=Decimal("38"),
        risk_classification="Medium",
        is_downgrade=False,
    ),
    CounterpartyRisk(
        counterparty="Stanbic Bank Ghana",
        agency="Fitch",
        rating="BB+",
        outlook="Negative",
        country_risk="High",
        exposure_amount=Decimal("6400000"),
        internal_risk_score=Decimal("74"),
        risk_classification="High",
        is_downgrade=True,
    ),
    CounterpartyRisk(
        counterparty="Standard Bank of South Africa",
        agency="Moody's",
        rating="Baa2",
        outlook="Stable",
        country_risk="Medium",
        exposure_amount=Decimal("19050000"),
        internal_risk_score=Decimal("49"),
        risk_classification="Medium",
        is_downgrade=False,
    ),
)

SAMPLE_DIVIDENDS = (
    DividendFlow("2026-01", "Global Sourcing Company", "Global Sourcing Company", Decimal("2600000"), Decimal("460000")),
    DividendFlow("2026-02", "Global Trading Company", "Global Trading Company", Decimal("2400000"), Decimal("425000")),
    DividendFlow("2026-03", "Interserve", "Interserve", Decimal("1900000"), Decimal("380000")),
    DividendFlow("2026-04", "IMB", "IMB", Decimal("2100000"), Decimal("390000")),
    DividendFlow("2026-05", "IGL", "IGL", Decimal("2050000"), Decimal("405000")),
)

SAMPLE_FORECAST = (
    ForecastMonth("2026-01", "Base", Decimal("123300000"), Decimal("16200000"), Decimal("13700000")),
    ForecastMonth("2026-02", "Base", Decimal("125800000"), Decimal("14800000"), Decimal("13950000")),
    ForecastMonth("2026-03", "Base", Decimal("126650000"), Decimal("17000000"), Decimal("15800000")),
    ForecastMonth("2026-04", "Base", Decimal("127850000"), Decimal("16400000"), Decimal("17200000")),
    ForecastMonth("2026-05", "Base", Decimal("127050000"), Decimal("17600000"), Decimal("16100000")),
)

SAMPLE_DATASETS: Dict[Domain, tuple] = {
    Domain.CASH: SAMPLE_CASH,
    Domain.COUNTERPARTY: SAMPLE_COUNTERPARTIES,
    Domain.DIVIDENDS: SAMPLE_DIVIDENDS,
    Domain.FORECAST: SAMPLE_FORECAST,
}
