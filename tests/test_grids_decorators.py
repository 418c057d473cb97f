from __future__ import annotations

from datetime import date, timedelta
import unittest

from chartui_layout import (
    AxisRange,
    ChartConfigError,
    DataSeries,
    EdgeInsets,
    OrderedDatum,
    OriginMark,
    Point,
    PointAxisMarker,
    PointHighlightStyle,
    Rect,
    RectangularChartLayout,
    RectangularChartStyle,
    XAxisGrid,
    YAxisGrid,
    grid_lines,
    highlight_rects,
    origin_marks,
    validate_layout_config,
    with_alpha,
    x_axis_marker_lines,
    x_grid_lines,
    x_range_band,
    y_axis_marker_lines,
    y_grid_lines,
    y_range_band,
)
from chartui_layout.colors import BLUE, GRAY


def _layout(x_range=None) -> RectangularChartLayout:
    series = DataSeries(OrderedDatum(x, x * 10) for x in range(11))
    return RectangularChartLayout(series, Rect(0, 0, 200, 100), x_range=x_range)


class GridTests(unittest.TestCase):
    def test_grid_values_align_to_origin(self) -> None:
        self.assertEqual(grid_lines(0, 10, 0, 20), (0, 10, 20))
        self.assertEqual(grid_lines(0, 10, 0, 25), (0, 10, 20))
        self.assertEqual(grid_lines(5, 10, 0, 30), (5, 15, 25))
        self.assertEqual(grid_lines(0, 10, -15, 5), (-10, 0))

    def test_degenerate_grids_are_empty(self) -> None:
        self.assertEqual(grid_lines(0, 0, 0, 20), ())
        self.assertEqual(grid_lines(0, 10, 20, 0), ())
        self.assertEqual(grid_lines(0, 10, float("nan"), 20), ())

    def test_grid_spacing_must_be_positive(self) -> None:
        with self.assertRaises(ChartConfigError):
            XAxisGrid(0)
        with self.assertRaises(ChartConfigError):
            YAxisGrid(-5)

    def test_date_grid(self) -> None:
        grid = XAxisGrid(timedelta(days=1), origin=date(2024, 1, 1))
        self.assertEqual(grid.spacing_value, 86400.0)
        self.assertGreater(grid.origin_value, 0)

    def test_grid_lines_span_the_frame(self) -> None:
        layout = _layout()
        lines = x_grid_lines(XAxisGrid(2), layout)
        self.assertEqual([line.value for line in lines], [0, 2, 4, 6, 8, 10])
        self.assertEqual(lines[0].segment.start, Point(0, 0))
        self.assertEqual(lines[-1].segment.end, Point(200, 100))

        rows = y_grid_lines(YAxisGrid(25), layout)
        self.assertEqual([line.segment.start.y for line in rows], [100, 75, 50, 25, 0])


class OriginMarkTests(unittest.TestCase):
    def test_default_lines_cross_the_frame(self) -> None:
        marks = origin_marks(_layout(), RectangularChartStyle())
        self.assertEqual(marks.x.segment.start, Point(0, 0))
        self.assertEqual(marks.x.segment.end, Point(0, 100))
        self.assertEqual(marks.y.segment.start, Point(0, 100))
        self.assertEqual(marks.y.segment.end, Point(200, 100))

    def test_hidden_origin_has_no_mark(self) -> None:
        marks = origin_marks(_layout(x_range=(2, 10)), RectangularChartStyle())
        self.assertIsNone(marks.x)
        self.assertIsNotNone(marks.y)

    def test_origin_inside_insets_is_hidden(self) -> None:
        series = DataSeries(OrderedDatum(x, x * 10) for x in range(11))
        layout = RectangularChartLayout(series, Rect(0, 0, 200, 120), EdgeInsets(10, 0, 10, 0))
        self.assertLess(layout.visible_data_bounds.minimum, -5)
        self.assertFalse(layout.is_visible_y(-5))
        self.assertTrue(layout.is_visible_y(50))
        marks = origin_marks(layout, RectangularChartStyle().with_grids(y=YAxisGrid(10, origin=-5)))
        self.assertIsNone(marks.y)

    def test_disabled_mark(self) -> None:
        marks = origin_marks(_layout(), RectangularChartStyle().with_origin_marks(None, OriginMark.line(2)))
        self.assertIsNone(marks.x)
        self.assertEqual(marks.y.width, 2)

    def test_tics_use_grid_spacing(self) -> None:
        style = (
            RectangularChartStyle()
            .with_grids(XAxisGrid(1), YAxisGrid(10))
            .with_origin_marks(OriginMark.tic(1), OriginMark.positive_tic(1))
        )
        marks = origin_marks(_layout(), style)
        self.assertEqual(marks.x.segment.start.y, 110)
        self.assertEqual(marks.x.segment.end.y, 90)
        self.assertEqual(marks.y.segment.start.x, 0)
        self.assertEqual(marks.y.segment.end.x, 20)


class RangeBandTests(unittest.TestCase):
    def test_closed_range(self) -> None:
        band = x_range_band(AxisRange.closed(2, 4), _layout())
        self.assertEqual(band.rect, Rect(40, 0, 40, 100))
        self.assertEqual(band.fill, with_alpha(BLUE, 0.2))
        self.assertIsNone(band.stroke)
        self.assertEqual(band.stroke_width, 0.5)
        self.assertEqual(band.lower_edge.start.x, 40)
        self.assertEqual(band.upper_edge.start.x, 80)

    def test_half_open_range_pulls_upper_edge_in(self) -> None:
        band = x_range_band(AxisRange.half_open(2, 4), _layout())
        self.assertAlmostEqual(band.upper_edge.start.x, 79.8)
        config = validate_layout_config({"open_range_epsilon": 0.1})
        band = x_range_band(AxisRange.half_open(2, 4), _layout(), config)
        self.assertAlmostEqual(band.upper_edge.start.x, 78.0)

    def test_unbounded_sides_reach_the_frame(self) -> None:
        band = x_range_band(AxisRange.starting_at(5), _layout())
        self.assertEqual(band.rect, Rect(100, 0, 100, 100))
        self.assertIsNone(band.upper_edge)
        band = x_range_band(AxisRange.up_to(5), _layout())
        self.assertIsNone(band.lower_edge)
        self.assertAlmostEqual(band.rect.max_x, 99.8)

    def test_range_outside_view_collapses(self) -> None:
        band = x_range_band(AxisRange.closed(20, 30), _layout())
        self.assertEqual(band.rect.width, 0)
        self.assertEqual(band.rect.min_x, 200)

    def test_band_colours_come_from_chart_style(self) -> None:
        style = RectangularChartStyle(range_fill=GRAY, range_stroke=BLUE, range_stroke_width=2.0)
        band = y_range_band(AxisRange.closed(25, 75), _layout(), style=style)
        self.assertEqual(band.fill, GRAY)
        self.assertEqual(band.stroke, BLUE)
        self.assertEqual(band.stroke_width, 2.0)

    def test_y_range(self) -> None:
        band = y_range_band(AxisRange.closed(25, 75), _layout())
        self.assertEqual(band.rect, Rect(0, 25, 200, 50))
        self.assertEqual(band.lower_edge.start.y, 75)
        band = y_range_band(AxisRange.through(50), _layout())
        self.assertEqual(band.rect, Rect(0, 50, 200, 50))


class PointDecorationTests(unittest.TestCase):
    def test_highlight_rects(self) -> None:
        rects = highlight_rects([Point(10, 10), Point.INVALID])
        self.assertEqual(rects, [Rect(7, 7, 6, 6)])
        rects = highlight_rects([Point(10, 10)], PointHighlightStyle(radius=5))
        self.assertEqual(rects, [Rect(5, 5, 10, 10)])

    def test_x_axis_markers(self) -> None:
        frame = Rect(0, 0, 200, 100)
        points = [Point(40, 60), Point.INVALID]
        tic = x_axis_marker_lines(points, PointAxisMarker.axis_tic(), frame)
        self.assertEqual(len(tic), 1)
        self.assertEqual(tic[0].start, Point(40, 100))
        self.assertEqual(tic[0].end.y, 95)
        self.assertEqual(x_axis_marker_lines(points, PointAxisMarker.to_point(20), frame)[0].end.y, 40)
        self.assertEqual(x_axis_marker_lines(points, PointAxisMarker.thru_range(), frame)[0].end.y, 0)

    def test_y_axis_markers(self) -> None:
        frame = Rect(0, 0, 200, 100)
        points = [Point(40, 60)]
        tic = y_axis_marker_lines(points, PointAxisMarker.axis_tic(), frame)
        self.assertEqual(tic[0].start, Point(0, 60))
        self.assertEqual(tic[0].end.x, 5)
        self.assertEqual(y_axis_marker_lines(points, PointAxisMarker.to_point(12), frame)[0].end.x, 52)
        self.assertEqual(y_axis_marker_lines(points, PointAxisMarker.thru_range(), frame)[0].end.x, 200)

    def test_marker_line_caps(self) -> None:
        self.assertEqual(PointAxisMarker.axis_tic().line_cap, "butt")
        self.assertEqual(PointAxisMarker.to_point().line_cap, "round")
        with self.assertRaises(ChartConfigError):
            PointAxisMarker("arrow")


if __name__ == "__main__":
    unittest.main()
