import json
import unittest

from treasury_dashboard.aggregate import build_views
from treasury_dashboard.models import BankSummary
from treasury_dashboard.samples import SAMPLE_DATASETS
from treasury_dashboard.tables import to_frame, view_frames, views_to_json


class TablesTests(unittest.TestCase):
    def setUp(self):
        self.views = build_views(SAMPLE_DATASETS)

    def test_view_frames(self):
        frames = view_frames(self.views)
        self.assertEqual(
            set(frames), {"entities", "currencies", "banks", "counterparties", "dividends", "forecast"}
        )
        banks = frames["banks"]
        self.assertEqual(list(banks.columns), ["bank", "amount", "share", "concentration_risk"])
        self.assertEqual(banks.iloc[0]["bank"], "Barclays UAE")
        self.assertEqual(len(frames["forecast"]), 5)

    def test_empty_frame_keeps_columns(self):
        frame = to_frame([], BankSummary)
        self.assertTrue(frame.empty)
        self.assertEqual(list(frame.columns), ["bank", "amount", "share", "concentration_risk"])

    def test_json_renders_decimals_as_strings(self):
        data = json.loads(views_to_json(self.views))
        self.assertEqual(data["total_cash"], "123300000")
        self.assertEqual(data["forecast"][0]["net_movement"], "2500000")
        self.assertIs(data["banks"][0]["concentration_risk"], True)


if __name__ == "__main__":
    unittest.main()
