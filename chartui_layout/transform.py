from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from chartui_layout.datum import data_value
from chartui_layout.geometry import Point, Rect, safe_div
from chartui_layout.series import DataSeries


@dataclass(frozen=True)
class Bounds:
    start: float = 0.0
    end: float = 0.0
    minimum: float = 0.0
    maximum: float = 0.0

    ZERO: ClassVar[Bounds]

    @property
    def width(self) -> float:
        return self.end - self.start

    @property
    def height(self) -> float:
        return self.maximum - self.minimum


Bounds.ZERO = Bounds()


def absolute_bounds(series: DataSeries) -> Bounds:
    """Data extent of a whole series; the y range always reaches zero."""
    if series.is_empty:
        return Bounds.ZERO
    return Bounds(
        start=series.first.x_value,
        end=series.last.x_value,
        minimum=abs(min(series.minimum.y_value, 0.0)),
        maximum=series.maximum.y_value,
    )


def resolve_x_range(x_range: tuple[Any, Any] | None, bounds: Bounds) -> tuple[float, float]:
    if x_range is None:
        return bounds.start, bounds.end
    start, end = x_range
    return data_value(start), data_value(end)


@dataclass(frozen=True)
class LinearTransform:
    """Affine map between data space and a layout frame.

    Layout y grows downward, so larger data values land nearer the top of
    ``frame``. Degenerate extents give NaN units and NaN coordinates.
    """

    frame: Rect
    x_start: float
    x_end: float
    y_minimum: float
    y_maximum: float

    @classmethod
    def build(cls, bounds: Bounds, frame: Rect, x_range: tuple[Any, Any] | None = None) -> LinearTransform:
        x_start, x_end = resolve_x_range(x_range, bounds)
        return cls(frame=frame, x_start=x_start, x_end=x_end, y_minimum=bounds.minimum, y_maximum=bounds.maximum)

    @property
    def unit_x(self) -> float:
        return safe_div(self.frame.width, self.x_end - self.x_start)

    @property
    def unit_y(self) -> float:
        return safe_div(self.frame.height, self.y_maximum - self.y_minimum)

    def x_to_layout(self, x: float) -> float:
        return self.frame.min_x + (x - self.x_start) * self.unit_x

    def y_to_layout(self, y: float) -> float:
        return self.frame.max_y - (y - self.y_minimum) * self.unit_y

    def x_to_data(self, x: float) -> float:
        return safe_div(x - self.frame.min_x, self.unit_x) + self.x_start

    def y_to_data(self, y: float) -> float:
        return safe_div(self.frame.max_y - y, self.unit_y) + self.y_minimum

    def point_to_layout(self, point: Point) -> Point:
        return Point(self.x_to_layout(point.x), self.y_to_layout(point.y))

    def point_to_data(self, point: Point) -> Point:
        return Point(self.x_to_data(point.x), self.y_to_data(point.y))
