from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

import structlog

from .aggregate import bank_summary, build_views, currency_summary, entity_summary, forecast_summary
from .config import DashboardSettings
from .domains import Domain, coerce_records, required_columns
from .errors import UploadError
from .models import BankSummary, CurrencySummary, DashboardViews, EntitySummary, ForecastSummary
from .parse import decode_upload, parse_delimited
from .samples import SAMPLE_DATASETS

log = structlog.get_logger()


@dataclass(frozen=True)
class UploadOutcome:
    domain: Domain
    accepted: bool
    rows: int = 0
    error: Optional[str] = None


class DashboardSession:
    """
    In-memory state for one dashboard session: one dataset per domain.

    Datasets are tuples and are only ever replaced whole, after an upload has
    parsed and coerced cleanly. A rejected upload leaves the previous dataset
    (or the sample data) in place.
    """

    def __init__(self, settings: Optional[DashboardSettings] = None):
        self.settings = settings or DashboardSettings()
        self._datasets: Dict[Domain, tuple] = dict(SAMPLE_DATASETS)

    def dataset(self, domain: Domain | str) -> tuple:
        return self._datasets[Domain(domain)]

    def set_dataset(self, domain: Domain | str, records: Iterable) -> None:
        self._datasets[Domain(domain)] = tuple(records)

    def reset(self, domain: Domain | str | None = None) -> None:
        domains = list(Domain) if domain is None else [Domain(domain)]
        for d in domains:
            self._datasets[d] = SAMPLE_DATASETS[d]
        log.info("dataset_reset", domains=[d.value for d in domains])

    def upload(self, domain: Domain | str, text: str) -> UploadOutcome:
        domain = Domain(domain)
        try:
            raw = parse_delimited(text, required_columns(domain))
        except UploadError as e:
            log.warning("upload_rejected", domain=domain.value, error=str(e))
            return UploadOutcome(domain=domain, accepted=False, error=str(e))

        records = coerce_records(domain, raw)
        self.set_dataset(domain, records)
        log.info("upload_accepted", domain=domain.value, rows=len(records))
        return UploadOutcome(domain=domain, accepted=True, rows=len(records))

    def upload_bytes(self, domain: Domain | str, data: bytes) -> UploadOutcome:
        try:
            text = decode_upload(data)
        except UploadError as e:
            log.warning("upload_rejected", domain=Domain(domain).value, error=str(e))
            return UploadOutcome(domain=Domain(domain), accepted=False, error=str(e))
        return self.upload(domain, text)

    def entity_summary(self) -> List[EntitySummary]:
        return entity_summary(self.dataset(Domain.CASH))

    def currency_summary(self) -> List[CurrencySummary]:
        return currency_summary(self.dataset(Domain.CASH), self.settings.thresholds)

    def bank_summary(self) -> List[BankSummary]:
        return bank_summary(self.dataset(Domain.CASH), self.settings.thresholds)

    def forecast_summary(self) -> List[ForecastSummary]:
        return forecast_summary(self.dataset(Domain.FORECAST))

    def views(self) -> DashboardViews:
        return build_views(self._datasets, self.settings)
