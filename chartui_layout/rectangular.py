from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from chartui_layout.config import DEFAULT_CONFIG, LayoutConfig
from chartui_layout.datum import AnyDatum
from chartui_layout.geometry import EdgeInsets, Point, Rect, Size, safe_div
from chartui_layout.insets import ChartInsets, resolve_insets
from chartui_layout.selection import PointSelection
from chartui_layout.series import DataSeries
from chartui_layout.style import LinearBarsStyle
from chartui_layout.transform import Bounds, LinearTransform, absolute_bounds


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BarSegment:
    datum: AnyDatum
    rect: Rect

    @property
    def is_valid(self) -> bool:
        return self.datum.is_valid and self.rect.is_valid


class RectangularChartLayout:
    """Data-to-layout mapping for bar and line charts on a rectangular frame.

    Categorized series additionally get one bar segment per datum, sized by
    ``bars_style``.
    """

    def __init__(
        self,
        series: DataSeries,
        local_frame: Rect = Rect.ZERO,
        insets: ChartInsets | EdgeInsets | None = None,
        x_range: tuple[Any, Any] | None = None,
        *,
        bars_style: LinearBarsStyle | None = None,
        config: LayoutConfig = DEFAULT_CONFIG,
    ) -> None:
        self.series = series
        self.config = config
        self.x_range = x_range
        self.bars_style = bars_style or LinearBarsStyle()
        if series.is_empty:
            LOGGER.debug("empty series; layout collapses to a zero frame")
            local_frame = Rect.ZERO
            insets = None
        self.local_frame = local_frame
        self.insets = resolve_insets(insets)
        self.absolute_data_bounds = absolute_bounds(series)
        self.transform = LinearTransform.build(self.absolute_data_bounds, self.inset_frame, x_range)
        self.segments: list[BarSegment] = []
        if series.is_categorized:
            self.segments = self._bar_segments()

    @property
    def inset_frame(self) -> Rect:
        return self.local_frame.inset_by(self.insets)

    @property
    def size(self) -> Size:
        return self.inset_frame.size

    @property
    def unit_x(self) -> float:
        return self.transform.unit_x

    @property
    def unit_y(self) -> float:
        return self.transform.unit_y

    @property
    def origin(self) -> Point:
        """Layout position of data (0, 0)."""
        return Point(self.x_in_layout(0.0), self.y_in_layout(0.0))

    @property
    def visible_x_range(self) -> tuple[float, float]:
        return (self.transform.x_start, self.transform.x_end)

    @property
    def visible_data_bounds(self) -> Bounds:
        """Data extent of the whole local frame, insets included."""
        bounds = self.absolute_data_bounds
        return Bounds(
            start=self.transform.x_start - safe_div(self.insets.leading, self.unit_x),
            end=self.transform.x_end + safe_div(self.insets.trailing, self.unit_x),
            minimum=bounds.minimum - safe_div(self.insets.bottom, self.unit_y),
            maximum=bounds.maximum + safe_div(self.insets.top, self.unit_y),
        )

    @property
    def y_data_bounds_with_insets(self) -> tuple[float, float]:
        bounds = self.visible_data_bounds
        return (bounds.minimum, bounds.maximum)

    def x_in_layout(self, x: float) -> float:
        return self.transform.x_to_layout(x)

    def y_in_layout(self, y: float) -> float:
        return self.transform.y_to_layout(y)

    def point_in_layout(self, datum: AnyDatum | Point) -> Point:
        return self.transform.point_to_layout(Point(_x_of(datum), _y_of(datum)))

    def data_point_from_layout(self, point: Point) -> Point:
        return self.transform.point_to_data(point)

    def is_visible_x(self, x: float) -> bool:
        return self.transform.x_start <= x <= self.transform.x_end

    def is_visible_y(self, y: float) -> bool:
        bounds = self.absolute_data_bounds
        return bounds.minimum <= y <= bounds.maximum

    def is_visible(self, datum: AnyDatum | Point) -> bool:
        return self.is_visible_x(_x_of(datum))

    def visible_layout_point(self, datum: AnyDatum | Point) -> Point:
        if not self.is_visible(datum):
            return Point.INVALID
        return self.point_in_layout(datum)

    @property
    def visible_data_points(self) -> list[Point]:
        return [self.point_in_layout(datum) for datum in self.series.all_data if self.is_visible(datum)]

    def decorated_points(self, selection: PointSelection) -> list[Point]:
        if selection.kind == "all":
            return self.visible_data_points
        if selection.kind == "first":
            candidates = [self.series.first]
        elif selection.kind == "last":
            candidates = [self.series.last]
        else:
            candidates = list(selection.data)
        return [self.point_in_layout(d) for d in candidates if d.is_valid and self.is_visible(d)]

    def segment_at(self, index: int) -> BarSegment | None:
        if 0 <= index < len(self.segments):
            return self.segments[index]
        return None

    def _bar_segments(self) -> list[BarSegment]:
        data = self.series.categorized_data
        available = self.size
        available_width = available.width
        spacer_count = len(data) - 1
        maximum = self.absolute_data_bounds.maximum

        widths: list[float | None] = []
        heights: list[float] = []
        for datum in data:
            heights.append(safe_div(datum.y_value, maximum) * available.height)
            width = self.bars_style.width(datum)
            if width == "auto":
                widths.append(None)
            else:
                available_width -= width
                widths.append(float(width))

        spacing = self.bars_style.spacing
        if spacing != "auto":
            available_width -= spacing * spacer_count

        auto_count = widths.count(None)
        reserved = available_width * self.config.bar_spacing_reserve_ratio if spacing == "auto" else 0.0
        auto_width = safe_div(available_width - reserved, auto_count) if auto_count else 0.0
        widths = [auto_width if w is None else w for w in widths]
        available_width -= auto_width * auto_count

        if spacing == "auto":
            spacing = available_width / spacer_count if spacer_count > 0 else 0.0

        baseline = self.y_in_layout(0.0)
        x = self.inset_frame.min_x
        segments = []
        for datum, width, height in zip(data, widths, heights, strict=True):
            rect = Rect(x, baseline, width, -height).standardized()
            x += spacing + rect.width
            segments.append(BarSegment(datum, rect))
        return segments


def _x_of(value: AnyDatum | Point) -> float:
    return value.x if isinstance(value, Point) else value.x_value


def _y_of(value: AnyDatum | Point) -> float:
    return value.y if isinstance(value, Point) else value.y_value
