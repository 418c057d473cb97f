from __future__ import annotations

from dataclasses import dataclass, field
import enum
import logging
import math
from typing import Any, Sequence

import numpy as np

from chartui_layout.config import DEFAULT_CONFIG, LayoutConfig
from chartui_layout.datum import AnyDatum
from chartui_layout.geometry import EdgeInsets, Point, Rect, Size, safe_div
from chartui_layout.rectangular import RectangularChartLayout
from chartui_layout.scroll import clamp_scroll_offset, max_overscroll_for
from chartui_layout.selection import PointSelection
from chartui_layout.series import DataSeries
from chartui_layout.transform import Bounds, absolute_bounds, resolve_x_range


LOGGER = logging.getLogger(__name__)


class SegmentPosition(enum.Flag):
    NONE = 0
    FIRST = enum.auto()
    LAST = enum.auto()
    MIDDLE = enum.auto()


@dataclass(frozen=True, eq=False)
class SegmentTile:
    """Scroll-independent part of a line segment.

    ``relative_points`` holds each point as fractions of the chunk's data
    rectangle, y flipped so 0 is the top edge.
    """

    data: tuple[AnyDatum, ...]
    absolute_rect: Rect
    relative_points: np.ndarray
    position: SegmentPosition

    @property
    def start_x(self) -> float:
        return self.data[0].x_value if self.data else math.nan

    @property
    def end_x(self) -> float:
        return self.data[-1].x_value if self.data else math.nan


def tile_series(
    series: DataSeries,
    bounds: Bounds | None = None,
    points_per_segment: int = DEFAULT_CONFIG.points_per_segment,
) -> tuple[SegmentTile, ...]:
    """Split an ordered series into chunks that share their boundary points."""
    if points_per_segment < 1:
        raise ValueError("points_per_segment must be >= 1")
    bounds = bounds or absolute_bounds(series)
    data = series.all_data
    count = len(data)
    tiles = []
    for index in range(0, count, points_per_segment):
        through = min(index + points_per_segment + 1, count)
        if index > 0 and through - index < 2:
            # only the boundary point shared with the previous chunk is left
            break
        chunk = tuple(data[index:through])
        first, last = chunk[0], chunk[-1]
        absolute_rect = Rect(first.x_value, bounds.minimum, last.x_value - first.x_value, bounds.height)

        xs = np.fromiter((d.x_value for d in chunk), dtype=np.float64, count=len(chunk))
        ys = np.fromiter((d.y_value for d in chunk), dtype=np.float64, count=len(chunk))
        relative = np.empty((len(chunk), 2), dtype=np.float64)
        relative[:, 0] = _fraction(xs, absolute_rect.x, absolute_rect.width)
        relative[:, 1] = 1.0 - _fraction(ys, absolute_rect.y, absolute_rect.height)

        position = SegmentPosition.MIDDLE
        if index == 0:
            position |= SegmentPosition.FIRST
        if through == count:
            position |= SegmentPosition.LAST
        tiles.append(SegmentTile(chunk, absolute_rect, relative, position))
    LOGGER.debug("tiled %d points into %d segments", count, len(tiles))
    return tuple(tiles)


@dataclass(frozen=True, eq=False)
class ChartSegment:
    """A tile placed in layout space; ``points`` follow ``rect``."""

    tile: SegmentTile
    rect: Rect
    is_visible: bool
    points: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        scale = np.array([self.rect.width, self.rect.height], dtype=np.float64)
        offset = np.array([self.rect.min_x, self.rect.min_y], dtype=np.float64)
        object.__setattr__(self, "points", self.tile.relative_points * scale + offset)

    @property
    def data(self) -> tuple[AnyDatum, ...]:
        return self.tile.data

    @property
    def relative_points(self) -> np.ndarray:
        return self.tile.relative_points

    @property
    def position(self) -> SegmentPosition:
        return self.tile.position

    @property
    def id(self) -> float:
        return self.tile.start_x

    @property
    def start_x(self) -> float:
        return self.tile.start_x

    @property
    def end_x(self) -> float:
        return self.tile.end_x

    def contains_x(self, x: float) -> bool:
        if not (math.isfinite(self.start_x) and math.isfinite(self.end_x)):
            return False
        return self.start_x <= x <= self.end_x

    def x_in_segment(self, x: float) -> float:
        fraction = safe_div(x - self.start_x, self.end_x - self.start_x)
        return self.rect.width * fraction + self.rect.min_x

    def point_list(self) -> list[Point]:
        return [Point(float(px), float(py)) for px, py in self.points]

    def points_for(self, datums: Sequence[AnyDatum]) -> list[Point]:
        wanted = set(datums)
        return [
            Point(float(self.points[i, 0]), float(self.points[i, 1]))
            for i, datum in enumerate(self.data)
            if datum in wanted
        ]

    def points_to_decorate(self, selection: PointSelection) -> list[Point]:
        if len(self.data) == 0:
            return []
        if selection.kind == "all":
            return self.point_list()
        if selection.kind == "first":
            if SegmentPosition.FIRST in self.position:
                return [Point(float(self.points[0, 0]), float(self.points[0, 1]))]
            return []
        if selection.kind == "last":
            if SegmentPosition.LAST in self.position:
                return [Point(float(self.points[-1, 0]), float(self.points[-1, 1]))]
            return []
        return self.points_for(selection.data)

    def rescaled(self, rect: Rect, is_visible: bool | None = None) -> ChartSegment:
        visible = self.is_visible if is_visible is None else is_visible
        return ChartSegment(self.tile, rect, visible)


class LineChartLayout:
    """Horizontal layout of an ordered series with a scrollable x window.

    ``scroll_offset`` 1 shows the most recent data and 0 the earliest; values
    are clamped to the permitted overscroll band.
    """

    def __init__(
        self,
        series: DataSeries,
        rect_layout: RectangularChartLayout,
        x_range: tuple[Any, Any] | None = None,
        scroll_offset: float = 1.0,
        *,
        tiles: Sequence[SegmentTile] | None = None,
        config: LayoutConfig = DEFAULT_CONFIG,
    ) -> None:
        self.series = series
        self.rect_layout = rect_layout
        self.config = config
        self.requested_x_range = x_range
        self.absolute_data_bounds = rect_layout.absolute_data_bounds

        bounds = self.absolute_data_bounds
        available = self.size
        data_start, data_end = resolve_x_range(x_range, bounds)
        self.unit_x = safe_div(available.width, data_end - data_start)

        self.max_scroll_offset = bounds.width * self.unit_x - available.width * config.minimum_window_ratio
        if not math.isfinite(self.max_scroll_offset):
            self.max_scroll_offset = 0.0
        self.max_overscroll = max_overscroll_for(self.local_frame.width, self.max_scroll_offset)
        offset = scroll_offset if math.isfinite(scroll_offset) else 1.0
        self.scroll_offset = clamp_scroll_offset(offset, self.max_overscroll)

        scroll = safe_div(self.max_scroll_offset - self.scroll_offset * self.max_scroll_offset, self.unit_x)
        if not math.isfinite(scroll):
            scroll = 0.0
        self.x_range = (data_start - scroll, data_end - scroll)

        if tiles is None:
            tiles = tile_series(series, bounds, config.points_per_segment)
        self.tiles = tuple(tiles)
        self.segments = [self._place(tile) for tile in self.tiles]

    @property
    def local_frame(self) -> Rect:
        return self.rect_layout.local_frame

    @property
    def insets(self) -> EdgeInsets:
        return self.rect_layout.insets

    @property
    def inset_frame(self) -> Rect:
        return self.rect_layout.inset_frame

    @property
    def size(self) -> Size:
        return self.rect_layout.size

    @property
    def data_start(self) -> float:
        return self.x_range[0]

    @property
    def data_end(self) -> float:
        return self.x_range[1]

    @property
    def visible_segments(self) -> list[ChartSegment]:
        return [segment for segment in self.segments if segment.is_visible]

    @property
    def x_data_bounds_with_insets(self) -> tuple[float, float]:
        return (
            self.data_start - safe_div(self.insets.leading, self.unit_x),
            self.data_end + safe_div(self.insets.trailing, self.unit_x),
        )

    @property
    def visible_data_bounds(self) -> Bounds:
        start, end = self.x_data_bounds_with_insets
        y_bounds = self.rect_layout.visible_data_bounds
        return Bounds(start=start, end=end, minimum=y_bounds.minimum, maximum=y_bounds.maximum)

    def x_in_layout(self, x: float) -> float:
        return self.inset_frame.min_x + (x - self.data_start) * self.unit_x

    def x_in_data(self, x: float) -> float:
        return safe_div(x - self.inset_frame.min_x, self.unit_x) + self.data_start

    def y_in_layout(self, y: float) -> float:
        return self.rect_layout.y_in_layout(y)

    def is_visible_x(self, x: float) -> bool:
        return self.data_start <= x <= self.data_end

    def is_visible_y(self, y: float) -> bool:
        return self.rect_layout.is_visible_y(y)

    def decorated_points(self, selection: PointSelection) -> list[Point]:
        points: list[Point] = []
        for segment in self.visible_segments:
            for point in segment.points_to_decorate(selection):
                if points and _same_point(points[-1], point):
                    continue
                points.append(point)
        return points

    def scrolled(self, scroll_offset: float) -> LineChartLayout:
        """Same layout at another offset, reusing the existing tiles."""
        return LineChartLayout(
            self.series,
            self.rect_layout,
            self.requested_x_range,
            scroll_offset,
            tiles=self.tiles,
            config=self.config,
        )

    def _place(self, tile: SegmentTile) -> ChartSegment:
        start = self.x_in_layout(tile.start_x)
        end = self.x_in_layout(tile.end_x)
        frame = self.inset_frame
        rect = Rect(start, frame.min_y, end - start, frame.height).standardized()
        visible = tile.start_x <= self.data_end and self.data_start <= tile.end_x
        return ChartSegment(tile, rect, visible)


def _fraction(values: np.ndarray, origin: float, extent: float) -> np.ndarray:
    if extent == 0 or not math.isfinite(extent):
        return np.full(values.shape, np.nan)
    return (values - origin) / extent


def _same_point(a: Point, b: Point) -> bool:
    return math.isclose(a.x, b.x, abs_tol=1e-9) and math.isclose(a.y, b.y, abs_tol=1e-9)
