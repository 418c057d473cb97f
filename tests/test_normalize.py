from __future__ import annotations

from datetime import date
from decimal import Decimal
import unittest

import numpy as np

from chartui_layout import ChartDataError, DatumKind, data_value
from chartui_layout.adapters import categorized_series, ordered_series


class OrderedSeriesTests(unittest.TestCase):
    def test_decimal_values_and_dropped_samples(self) -> None:
        data = [Decimal("1.5"), Decimal("2.25"), None, Decimal("3.5")]
        with self.assertLogs("chartui_layout.adapters.normalize", "WARNING") as logs:
            series = ordered_series(y=data)
        self.assertIn("dropped 1 non-finite samples", logs.output[0])
        self.assertEqual(series.all_x(), [0.0, 1.0, 3.0])
        self.assertEqual(series.all_y(), [1.5, 2.25, 3.5])
        self.assertIs(series.kind, DatumKind.ORDERED)

    def test_dates_keep_native_x(self) -> None:
        days = [date(2024, 1, 3), date(2024, 1, 1), date(2024, 1, 2)]
        series = ordered_series([3, 1, 2], x=days)
        self.assertEqual([datum.x for datum in series.data], sorted(days))
        self.assertEqual(series.first.x_value, data_value(date(2024, 1, 1)))

    def test_numpy_input(self) -> None:
        series = ordered_series(np.array([4, 5, 6], dtype=np.int32), x=np.array([0.5, 1.5, 2.5]))
        self.assertEqual(series.all_y(), [4.0, 5.0, 6.0])
        self.assertEqual(series.last.x_value, 2.5)

    def test_length_mismatch(self) -> None:
        with self.assertRaisesRegex(ChartDataError, "length mismatch"):
            ordered_series([1, 2, 3], x=[0, 1])

    def test_no_finite_points(self) -> None:
        with self.assertRaises(ChartDataError):
            ordered_series([float("nan"), None])

    def test_empty_and_bad_input(self) -> None:
        self.assertTrue(ordered_series([]).is_empty)
        with self.assertRaises(ChartDataError):
            ordered_series(5)
        with self.assertRaises(ChartDataError):
            ordered_series("abc")
        with self.assertRaises(ChartDataError):
            ordered_series(["a", "b"])
        with self.assertRaises(ChartDataError):
            ordered_series(np.zeros((2, 2)))

    def test_missing_numpy_timestamps_are_dropped(self) -> None:
        x = np.array(["2024-01-01", "NaT", "2024-01-03"], dtype="datetime64[D]")
        with self.assertLogs("chartui_layout.adapters.normalize", "WARNING"):
            series = ordered_series([1.0, 2.0, 3.0], x=x)
        self.assertEqual(len(series), 2)
        self.assertEqual(series.first.x_value, data_value(np.datetime64("2024-01-01")))
        self.assertEqual(series.all_y(), [1.0, 3.0])

    def test_missing_pandas_timestamps_are_dropped(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        x = pd.Series(pd.to_datetime(["2024-01-01", None, "2024-01-03"]))
        with self.assertLogs("chartui_layout.adapters.normalize", "WARNING"):
            series = ordered_series([1.0, 2.0, 3.0], x=x)
        self.assertEqual(len(series), 2)
        self.assertEqual(series.last.x_value, pd.Timestamp("2024-01-03").timestamp())

    def test_torch_tensor(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        series = ordered_series(torch.tensor([1, 2, 3], dtype=torch.int64))
        self.assertEqual(series.all_y(), [1.0, 2.0, 3.0])

    def test_pandas_columns(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"t": [0.0, 1.0, 2.0], "value": [1, 2, 3]})
        series = ordered_series("value", x="t", data=df)
        self.assertEqual(series.all_y(), [1.0, 2.0, 3.0])
        with self.assertRaises(ChartDataError):
            ordered_series("missing", data=df)
        self.assertEqual(ordered_series(df[["value"]]).all_y(), [1.0, 2.0, 3.0])


class CategorizedSeriesTests(unittest.TestCase):
    def test_mapping(self) -> None:
        series = categorized_series({"Jan": 3, "Feb": 5})
        self.assertIs(series.kind, DatumKind.CATEGORIZED)
        self.assertEqual(series.datum_for("Feb").y, 5.0)
        self.assertEqual(series.all_x(), [0, 1])

    def test_parallel_sequences(self) -> None:
        series = categorized_series([1, float("inf"), 3], ids=["a", "b", "c"])
        self.assertEqual([datum.id for datum in series.data], ["a", "c"])
        self.assertIsNone(series.datum_for("b"))

    def test_positional_ids(self) -> None:
        series = categorized_series([7, 8])
        self.assertEqual(series.datum_for(1).y, 8.0)

    def test_scalar_values_rejected(self) -> None:
        with self.assertRaises(ChartDataError):
            categorized_series(5)
        with self.assertRaises(ChartDataError):
            categorized_series(["a", "b"])

    def test_mapping_rejects_ids(self) -> None:
        with self.assertRaises(ChartDataError):
            categorized_series({"a": 1}, ids=["b"])
        with self.assertRaisesRegex(ChartDataError, "length mismatch"):
            categorized_series([1, 2], ids=["a"])

    def test_pandas_series_index(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        series = categorized_series(pd.Series([2, 4], index=["x", "y"]))
        self.assertEqual([datum.id for datum in series.data], ["x", "y"])


if __name__ == "__main__":
    unittest.main()
