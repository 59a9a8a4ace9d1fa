import unittest
from decimal import Decimal

from treasury_dashboard.config import DashboardSettings, Thresholds
from treasury_dashboard.domains import Domain
from treasury_dashboard.errors import PARSE_FAILURE_MESSAGE
from treasury_dashboard.samples import SAMPLE_CASH, SAMPLE_FORECAST
from treasury_dashboard.session import DashboardSession

CASH_CSV = "entity,bank,account,currency,amount\nA,X,1,USD,60\nB,X,2,EUR,40\n"
FORECAST_TSV = "month\tscenario\topeningCash\tinflows\toutflows\n2026-01\tBase\t100\t20\t30\n"


class DashboardSessionTests(unittest.TestCase):
    def setUp(self):
        self.session = DashboardSession()

    def test_starts_with_samples(self):
        self.assertEqual(self.session.dataset(Domain.CASH), SAMPLE_CASH)
        self.assertEqual(self.session.dataset("forecast"), SAMPLE_FORECAST)

    def test_upload_replaces_dataset(self):
        outcome = self.session.upload(Domain.CASH, CASH_CSV)
        self.assertTrue(outcome.accepted)
        self.assertEqual(outcome.rows, 2)
        self.assertIsNone(outcome.error)
        banks = self.session.bank_summary()
        self.assertEqual([(b.bank, b.amount) for b in banks], [("X", Decimal("100"))])

    def test_upload_tsv_forecast(self):
        self.session.upload("forecast", FORECAST_TSV)
        out = self.session.forecast_summary()
        self.assertEqual(len(out), 1)
        self.assertEqual(out[0].closing_cash, Decimal("90"))

    def test_rejected_upload_keeps_previous_dataset(self):
        self.session.upload(Domain.CASH, CASH_CSV)
        before = self.session.dataset(Domain.CASH)

        outcome = self.session.upload(Domain.CASH, "entity,bank\nA,X")
        self.assertFalse(outcome.accepted)
        self.assertEqual(outcome.error, "Missing required columns: account, currency, amount")
        self.assertIs(self.session.dataset(Domain.CASH), before)

    def test_undecodable_bytes_rejected(self):
        outcome = self.session.upload_bytes(Domain.DIVIDENDS, b"\xff\xfe\x81")
        self.assertFalse(outcome.accepted)
        self.assertEqual(outcome.error, PARSE_FAILURE_MESSAGE)
        self.assertEqual(len(self.session.dataset(Domain.DIVIDENDS)), 5)

    def test_upload_bytes(self):
        outcome = self.session.upload_bytes(Domain.CASH, CASH_CSV.encode("utf-8"))
        self.assertTrue(outcome.accepted)
        self.assertEqual(self.session.views().total_cash, Decimal("100"))

    def test_header_only_upload_empties_dataset(self):
        self.session.upload(Domain.CASH, "entity,bank,account,currency,amount\n")
        self.assertEqual(self.session.dataset(Domain.CASH), ())
        self.assertEqual(self.session.entity_summary(), [])
        self.assertEqual(self.session.views().total_cash, Decimal("0"))

    def test_huge_amounts_do_not_break_views(self):
        header = "entity,bank,account,currency,amount\n"
        outcome = self.session.upload(Domain.CASH, header + "A,X,1,USD,1e1000000\nB,Y,2,EUR,9.9e999999\nC,Y,3,EUR,9.9e999999\n")
        self.assertTrue(outcome.accepted)
        self.assertEqual(self.session.views().total_cash, Decimal("0"))
        self.assertEqual(len(self.session.bank_summary()), 2)

        self.session.upload(
            Domain.FORECAST,
            "month,scenario,openingCash,inflows,outflows\n2026-01,Base,9.9e999999,9.9e999999,5\n",
        )
        self.assertEqual(self.session.forecast_summary()[0].closing_cash, Decimal("-5"))

    def test_reset(self):
        self.session.upload(Domain.CASH, CASH_CSV)
        self.session.upload(Domain.FORECAST, FORECAST_TSV)
        self.session.reset(Domain.CASH)
        self.assertEqual(self.session.dataset(Domain.CASH), SAMPLE_CASH)
        self.assertEqual(len(self.session.dataset(Domain.FORECAST)), 1)
        self.session.reset()
        self.assertEqual(self.session.dataset(Domain.FORECAST), SAMPLE_FORECAST)

    def test_thresholds_from_settings(self):
        session = DashboardSession(DashboardSettings(thresholds=Thresholds(currency_limit=Decimal("0.9"))))
        session.upload(Domain.CASH, CASH_CSV)
        self.assertFalse(any(c.concentration_risk for c in session.currency_summary()))

    def test_set_dataset_stores_tuple(self):
        self.session.set_dataset(Domain.CASH, [])
        self.assertEqual(self.session.dataset(Domain.CASH), ())

    def test_unknown_domain(self):
        with self.assertRaises(ValueError):
            self.session.upload("payroll", CASH_CSV)


if __name__ == "__main__":
    unittest.main()
