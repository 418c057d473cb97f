from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Literal

from chartui_layout.colors import Color
from chartui_layout.config import DEFAULT_CONFIG, LayoutConfig
from chartui_layout.datum import data_value
from chartui_layout.errors import ChartConfigError
from chartui_layout.geometry import LineSegment, Point, Rect
from chartui_layout.grids import CartesianLayout
from chartui_layout.style import PointHighlightStyle, RectangularChartStyle


MarkerKind = Literal["axis_tic", "to_point", "thru_range"]
LineCap = Literal["butt", "round"]


@dataclass(frozen=True)
class OriginLine:
    segment: LineSegment
    width: float
    color: Color


@dataclass(frozen=True)
class OriginMarks:
    x: OriginLine | None
    y: OriginLine | None


def origin_marks(layout: CartesianLayout, style: RectangularChartStyle) -> OriginMarks:
    """Axis origin lines or tics; a mark whose origin is out of view is None."""
    x_grid = style.x_axis_grid
    y_grid = style.y_axis_grid
    origin_x = x_grid.origin_value if x_grid is not None else 0.0
    origin_y = y_grid.origin_value if y_grid is not None else 0.0
    frame = layout.local_frame

    x_line = None
    mark = style.x_origin_mark
    if mark is not None and layout.is_visible_x(origin_x):
        x = layout.x_in_layout(origin_x)
        if mark.kind == "line" or y_grid is None:
            ends = (frame.min_y, frame.max_y)
        else:
            tic = mark.length * y_grid.spacing_value
            low = origin_y if mark.kind == "positive_tic" else origin_y - tic
            ends = (layout.y_in_layout(low), layout.y_in_layout(origin_y + tic))
        x_line = OriginLine(LineSegment(Point(x, ends[0]), Point(x, ends[1])), mark.width, style.x_origin_color)

    y_line = None
    mark = style.y_origin_mark
    if mark is not None and layout.is_visible_y(origin_y):
        y = layout.y_in_layout(origin_y)
        if mark.kind == "line" or x_grid is None:
            ends = (frame.min_x, frame.max_x)
        else:
            tic = mark.length * x_grid.spacing_value
            low = origin_x if mark.kind == "positive_tic" else origin_x - tic
            ends = (layout.x_in_layout(low), layout.x_in_layout(origin_x + tic))
        y_line = OriginLine(LineSegment(Point(ends[0], y), Point(ends[1], y)), mark.width, style.y_origin_color)

    return OriginMarks(x=x_line, y=y_line)


@dataclass(frozen=True)
class AxisRange:
    """A data interval on one axis; ``None`` leaves that side unbounded.

    An exclusive upper bound is pulled in by a small epsilon so that it
    renders differently from an inclusive one at the same value.
    """

    lower: Any = None
    upper: Any = None
    upper_inclusive: bool = True

    @classmethod
    def closed(cls, lower: Any, upper: Any) -> AxisRange:
        return cls(lower, upper)

    @classmethod
    def half_open(cls, lower: Any, upper: Any) -> AxisRange:
        return cls(lower, upper, upper_inclusive=False)

    @classmethod
    def starting_at(cls, lower: Any) -> AxisRange:
        return cls(lower=lower)

    @classmethod
    def up_to(cls, upper: Any) -> AxisRange:
        return cls(upper=upper, upper_inclusive=False)

    @classmethod
    def through(cls, upper: Any) -> AxisRange:
        return cls(upper=upper)

    def lower_value(self) -> float | None:
        return None if self.lower is None else data_value(self.lower)

    def upper_value(self, config: LayoutConfig = DEFAULT_CONFIG) -> float | None:
        if self.upper is None:
            return None
        value = data_value(self.upper)
        return value if self.upper_inclusive else value - config.open_range_epsilon


@dataclass(frozen=True)
class RangeBand:
    rect: Rect
    lower_edge: LineSegment | None
    upper_edge: LineSegment | None
    fill: Color
    stroke: Color | None
    stroke_width: float


def x_range_band(
    axis_range: AxisRange,
    layout: CartesianLayout,
    config: LayoutConfig = DEFAULT_CONFIG,
    *,
    style: RectangularChartStyle = RectangularChartStyle(),
) -> RangeBand:
    frame = layout.local_frame
    lower = axis_range.lower_value()
    upper = axis_range.upper_value(config)
    min_x = frame.min_x if lower is None else _clamp(layout.x_in_layout(lower), frame.min_x, frame.max_x)
    max_x = frame.max_x if upper is None else _clamp(layout.x_in_layout(upper), frame.min_x, frame.max_x)
    rect = Rect(min_x, frame.min_y, max_x - min_x, frame.height).standardized()
    lower_edge = None if lower is None else LineSegment(Point(min_x, frame.min_y), Point(min_x, frame.max_y))
    upper_edge = None if upper is None else LineSegment(Point(max_x, frame.min_y), Point(max_x, frame.max_y))
    return RangeBand(rect, lower_edge, upper_edge, style.range_fill, style.range_stroke, style.range_stroke_width)


def y_range_band(
    axis_range: AxisRange,
    layout: CartesianLayout,
    config: LayoutConfig = DEFAULT_CONFIG,
    *,
    style: RectangularChartStyle = RectangularChartStyle(),
) -> RangeBand:
    frame = layout.local_frame
    lower = axis_range.lower_value()
    upper = axis_range.upper_value(config)
    low_y = frame.max_y if lower is None else _clamp(layout.y_in_layout(lower), frame.min_y, frame.max_y)
    high_y = frame.min_y if upper is None else _clamp(layout.y_in_layout(upper), frame.min_y, frame.max_y)
    rect = Rect(frame.min_x, high_y, frame.width, low_y - high_y).standardized()
    lower_edge = None if lower is None else LineSegment(Point(frame.min_x, low_y), Point(frame.max_x, low_y))
    upper_edge = None if upper is None else LineSegment(Point(frame.min_x, high_y), Point(frame.max_x, high_y))
    return RangeBand(rect, lower_edge, upper_edge, style.range_fill, style.range_stroke, style.range_stroke_width)


def highlight_rects(points: Iterable[Point], style: PointHighlightStyle = PointHighlightStyle()) -> list[Rect]:
    """Bounding boxes of the highlight circles around each valid point."""
    return [Rect.from_center(point, style.radius) for point in points if point.is_valid]


@dataclass(frozen=True)
class PointAxisMarker:
    kind: MarkerKind
    length: float = 5.0
    extending: float = 0.0

    def __post_init__(self) -> None:
        if self.kind not in ("axis_tic", "to_point", "thru_range"):
            raise ChartConfigError(f"unknown axis marker kind: {self.kind}")

    @classmethod
    def axis_tic(cls, length: float = 5.0) -> PointAxisMarker:
        return cls("axis_tic", length=length)

    @classmethod
    def to_point(cls, extending: float = 0.0) -> PointAxisMarker:
        return cls("to_point", extending=extending)

    @classmethod
    def thru_range(cls) -> PointAxisMarker:
        return cls("thru_range")

    @property
    def line_cap(self) -> LineCap:
        return "butt" if self.kind == "axis_tic" else "round"


def x_axis_marker_lines(points: Iterable[Point], marker: PointAxisMarker, frame: Rect) -> list[LineSegment]:
    """Vertical markers rising from the bottom edge of ``frame``."""
    lines = []
    for point in points:
        if not point.is_valid:
            continue
        if marker.kind == "axis_tic":
            end_y = frame.max_y - marker.length
        elif marker.kind == "to_point":
            end_y = point.y - marker.extending
        else:
            end_y = frame.min_y
        lines.append(LineSegment(Point(point.x, frame.max_y), Point(point.x, end_y)))
    return lines


def y_axis_marker_lines(points: Iterable[Point], marker: PointAxisMarker, frame: Rect) -> list[LineSegment]:
    """Horizontal markers running from the leading edge of ``frame``."""
    lines = []
    for point in points:
        if not point.is_valid:
            continue
        if marker.kind == "axis_tic":
            end_x = frame.min_x + marker.length
        elif marker.kind == "to_point":
            end_x = point.x + marker.extending
        else:
            end_x = frame.max_x
        lines.append(LineSegment(Point(frame.min_x, point.y), Point(end_x, point.y)))
    return lines


def _clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)
