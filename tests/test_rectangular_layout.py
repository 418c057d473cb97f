from __future__ import annotations

import math
import unittest

from chartui_layout import (
    CategorizedDatum,
    ChartInsets,
    DataSeries,
    Edge,
    EdgeInsets,
    LinearBarsStyle,
    OrderedDatum,
    Point,
    PointSelection,
    Rect,
    RectangularChartLayout,
)
from chartui_layout.transform import absolute_bounds


def _line_series() -> DataSeries:
    return DataSeries(OrderedDatum(x, x * 10) for x in range(11))


def _bar_series() -> DataSeries:
    return DataSeries(CategorizedDatum(name, value) for name, value in (("A", 10), ("B", 20), ("C", 30), ("D", 40)))


class ChartInsetsTests(unittest.TestCase):
    def test_specific_edge_beats_group_beats_all(self) -> None:
        insets = ChartInsets().with_inset(Edge.ALL, 8).with_inset(Edge.HORIZONTAL, 20).with_inset(Edge.TOP, 40)
        self.assertEqual(insets.resolve(), EdgeInsets(top=40, leading=20, bottom=8, trailing=20))

    def test_later_declaration_replaces_same_edge(self) -> None:
        insets = ChartInsets().with_inset(Edge.TOP, 4).with_inset(Edge.TOP, 12)
        self.assertEqual(insets.resolve().top, 12)
        self.assertEqual(insets.resolve().bottom, 0)

    def test_default_length(self) -> None:
        self.assertEqual(ChartInsets().with_inset().resolve(), EdgeInsets(8, 8, 8, 8))

    def test_edge_insets_replace_declarations(self) -> None:
        insets = ChartInsets().with_inset(Edge.ALL, 30).with_edge_insets(EdgeInsets(1, 2, 3, 4))
        self.assertEqual(insets.resolve(), EdgeInsets(1, 2, 3, 4))


class LinearTransformTests(unittest.TestCase):
    def test_bounds_include_zero(self) -> None:
        bounds = absolute_bounds(DataSeries([OrderedDatum(2, 5), OrderedDatum(4, 15)]))
        self.assertEqual((bounds.start, bounds.end, bounds.minimum, bounds.maximum), (2.0, 4.0, 0.0, 15.0))

    def test_data_to_layout_without_insets(self) -> None:
        layout = RectangularChartLayout(_line_series(), Rect(0, 0, 200, 100))
        self.assertAlmostEqual(layout.unit_x, 20.0)
        self.assertAlmostEqual(layout.unit_y, 1.0)
        self.assertAlmostEqual(layout.x_in_layout(5), 100.0)
        self.assertAlmostEqual(layout.y_in_layout(25), 75.0)
        self.assertEqual(layout.origin, Point(0.0, 100.0))

    def test_round_trip(self) -> None:
        layout = RectangularChartLayout(_line_series(), Rect(0, 0, 333, 97))
        for value in (0.0, 1.25, 7.5, 10.0):
            back = layout.transform.x_to_layout(layout.transform.x_to_data(value))
            self.assertAlmostEqual(back, value)
            point = layout.data_point_from_layout(layout.point_in_layout(Point(value, value * 9)))
            self.assertAlmostEqual(point.x, value)
            self.assertAlmostEqual(point.y, value * 9)

    def test_insets_shift_frame_and_widen_visible_bounds(self) -> None:
        insets = EdgeInsets(top=10, leading=20, bottom=10, trailing=20)
        layout = RectangularChartLayout(_line_series(), Rect(0, 0, 240, 120), insets)
        self.assertEqual(layout.inset_frame, Rect(20, 10, 200, 100))
        self.assertAlmostEqual(layout.x_in_layout(0), 20.0)
        self.assertAlmostEqual(layout.y_in_layout(0), 110.0)
        bounds = layout.visible_data_bounds
        self.assertAlmostEqual(bounds.start, -1.0)
        self.assertAlmostEqual(bounds.end, 11.0)
        self.assertAlmostEqual(bounds.minimum, -10.0)
        self.assertAlmostEqual(bounds.maximum, 110.0)

    def test_x_range_limits_visible_points(self) -> None:
        layout = RectangularChartLayout(_line_series(), Rect(0, 0, 100, 100), x_range=(5, 10))
        points = layout.visible_data_points
        self.assertEqual(len(points), 6)
        self.assertAlmostEqual(points[0].x, 0.0)
        self.assertFalse(layout.visible_layout_point(Point(2, 20)).is_valid)

    def test_decorated_points(self) -> None:
        layout = RectangularChartLayout(_line_series(), Rect(0, 0, 100, 100), x_range=(5, 10))
        self.assertEqual(layout.decorated_points(PointSelection.FIRST), [])
        last = layout.decorated_points(PointSelection.LAST)
        self.assertEqual(len(last), 1)
        self.assertAlmostEqual(last[0].x, 100.0)
        self.assertAlmostEqual(last[0].y, 0.0)

    def test_nan_is_not_visible(self) -> None:
        layout = RectangularChartLayout(_line_series(), Rect(0, 0, 100, 100))
        self.assertFalse(layout.is_visible_x(math.nan))

    def test_empty_series_collapses(self) -> None:
        layout = RectangularChartLayout(DataSeries(), Rect(0, 0, 300, 200), EdgeInsets(5, 5, 5, 5))
        self.assertEqual(layout.local_frame, Rect.ZERO)
        self.assertEqual(layout.size.width * layout.size.height, 0)
        self.assertEqual(layout.segments, [])
        self.assertEqual(layout.visible_data_points, [])


class BarLayoutTests(unittest.TestCase):
    def test_auto_widths_and_spacing(self) -> None:
        layout = RectangularChartLayout(_bar_series(), Rect(0, 0, 100, 100))
        rects = [segment.rect for segment in layout.segments]
        self.assertEqual(len(rects), 4)
        for rect in rects:
            self.assertAlmostEqual(rect.width, 20.0)
        self.assertAlmostEqual(rects[1].x, 20 + 20 / 3)
        self.assertAlmostEqual(rects[3].max_x, 100.0)
        self.assertEqual(rects[0], Rect(0, 75, 20, 25))
        self.assertAlmostEqual(rects[3].height, 100.0)
        self.assertTrue(all(segment.is_valid for segment in layout.segments))

    def test_constant_spacing(self) -> None:
        style = LinearBarsStyle(spacing=4)
        layout = RectangularChartLayout(_bar_series(), Rect(0, 0, 100, 100), bars_style=style)
        self.assertEqual([s.rect.x for s in layout.segments], [0, 26, 52, 78])
        self.assertEqual({s.rect.width for s in layout.segments}, {22})

    def test_constant_width_for_one_bar(self) -> None:
        style = LinearBarsStyle().with_width(10, datum_id="B")
        layout = RectangularChartLayout(_bar_series(), Rect(0, 0, 100, 100), bars_style=style)
        xs = [s.rect.x for s in layout.segments]
        widths = [s.rect.width for s in layout.segments]
        self.assertEqual(widths, [24, 10, 24, 24])
        for actual, expected in zip(xs, [0, 30, 46, 76], strict=True):
            self.assertAlmostEqual(actual, expected)

    def test_bars_start_at_inset_frame(self) -> None:
        layout = RectangularChartLayout(_bar_series(), Rect(0, 0, 120, 100), EdgeInsets(leading=10, trailing=10))
        self.assertAlmostEqual(layout.segments[0].rect.x, 10.0)
        self.assertAlmostEqual(layout.segments[-1].rect.max_x, 110.0)

    def test_single_bar_has_no_spacing(self) -> None:
        series = DataSeries([CategorizedDatum("only", 5)])
        layout = RectangularChartLayout(series, Rect(0, 0, 50, 50))
        self.assertAlmostEqual(layout.segments[0].rect.width, 40.0)
        self.assertIsNone(layout.segment_at(1))


if __name__ == "__main__":
    unittest.main()
