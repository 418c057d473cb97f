from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Any, Protocol

from chartui_layout.colors import CYAN, GRAY, Color
from chartui_layout.datum import data_value
from chartui_layout.errors import ChartConfigError
from chartui_layout.geometry import LineSegment, Point, Rect


LOGGER = logging.getLogger(__name__)

MAX_GRID_LINES = 10_000


class CartesianLayout(Protocol):
    @property
    def local_frame(self) -> Rect:
        ...

    @property
    def visible_data_bounds(self) -> Any:
        ...

    def x_in_layout(self, x: float) -> float:
        ...

    def y_in_layout(self, y: float) -> float:
        ...

    def is_visible_x(self, x: float) -> bool:
        ...

    def is_visible_y(self, y: float) -> bool:
        ...


@dataclass(frozen=True)
class XAxisGrid:
    """Vertical grid lines every ``spacing`` data units, aligned to ``origin``.

    Both values accept anything ``data_value`` understands, so a date origin
    with a ``timedelta`` spacing works for time series.
    """

    spacing: Any
    origin: Any = 0.0
    color: Color = CYAN

    def __post_init__(self) -> None:
        _check_spacing(data_value(self.spacing))

    @property
    def spacing_value(self) -> float:
        return data_value(self.spacing)

    @property
    def origin_value(self) -> float:
        return data_value(self.origin)


@dataclass(frozen=True)
class YAxisGrid:
    spacing: float
    origin: float = 0.0
    color: Color = GRAY

    def __post_init__(self) -> None:
        _check_spacing(data_value(self.spacing))

    @property
    def spacing_value(self) -> float:
        return data_value(self.spacing)

    @property
    def origin_value(self) -> float:
        return data_value(self.origin)


@dataclass(frozen=True)
class GridLine:
    value: float
    segment: LineSegment


def grid_lines(origin: float, spacing: float, lower: float, upper: float) -> tuple[float, ...]:
    """Every ``origin + k * spacing`` within ``[lower, upper]``, ascending."""
    if not all(math.isfinite(v) for v in (origin, spacing, lower, upper)):
        return ()
    if spacing <= 0 or lower > upper:
        return ()
    tolerance = spacing * 1e-9
    k = math.ceil((lower - origin - tolerance) / spacing)
    values: list[float] = []
    value = origin + k * spacing
    while value <= upper + tolerance:
        if len(values) >= MAX_GRID_LINES:
            LOGGER.warning("grid truncated at %d lines (spacing %s too small)", MAX_GRID_LINES, spacing)
            break
        values.append(value)
        k += 1
        value = origin + k * spacing
    return tuple(values)


def x_grid_lines(grid: XAxisGrid, layout: CartesianLayout) -> list[GridLine]:
    bounds = layout.visible_data_bounds
    frame = layout.local_frame
    lines = []
    for value in grid_lines(grid.origin_value, grid.spacing_value, bounds.start, bounds.end):
        x = layout.x_in_layout(value)
        lines.append(GridLine(value, LineSegment(Point(x, frame.min_y), Point(x, frame.max_y))))
    return lines


def y_grid_lines(grid: YAxisGrid, layout: CartesianLayout) -> list[GridLine]:
    bounds = layout.visible_data_bounds
    frame = layout.local_frame
    lines = []
    for value in grid_lines(grid.origin_value, grid.spacing_value, bounds.minimum, bounds.maximum):
        y = layout.y_in_layout(value)
        lines.append(GridLine(value, LineSegment(Point(frame.min_x, y), Point(frame.max_x, y))))
    return lines


def _check_spacing(spacing: float) -> None:
    if not (math.isfinite(spacing) and spacing > 0):
        raise ChartConfigError("grid spacing must be a finite number > 0")
