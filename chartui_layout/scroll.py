from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING, Any

from chartui_layout.datum import data_value
from chartui_layout.geometry import Rect, safe_div

if TYPE_CHECKING:
    from chartui_layout.line import LineChartLayout


def max_overscroll_for(frame_width: float, max_scroll_offset: float) -> float:
    """Fraction of the scroll range a drag may overshoot, at most 1."""
    half = frame_width / 2
    overscroll = safe_div(half, max(half, max_scroll_offset))
    return overscroll if math.isfinite(overscroll) else 0.0


def max_overscroll(layout: LineChartLayout) -> float:
    return max_overscroll_for(layout.local_frame.width, layout.max_scroll_offset)


def clamp_scroll_offset(offset: float, overscroll: float = 0.0) -> float:
    return min(max(-overscroll, offset), 1 + overscroll)


def drag_scroll_offset(start_offset: float, translation: float, layout: LineChartLayout, *, enabled: bool = True) -> float:
    """Offset while dragging the chart body by ``translation`` points."""
    if not enabled:
        return start_offset
    delta = safe_div(translation, layout.max_scroll_offset)
    if not math.isfinite(delta):
        return start_offset
    return clamp_scroll_offset(start_offset - delta, max_overscroll(layout))


def settle_scroll_offset(
    offset: float,
    translation: float,
    start_x: float,
    layout: LineChartLayout,
    *,
    enabled: bool = True,
) -> float:
    """Offset once a drag or tap on the chart body ends.

    A tap near either frame edge jumps to that end of the data; any drag
    settles back inside [0, 1].
    """
    if not enabled:
        return offset
    if translation == 0:
        frame = layout.local_frame
        edge = layout.config.scroll_edge_tap_width
        if frame.min_x <= start_x <= frame.min_x + edge:
            return 0.0
        if start_x >= frame.max_x - edge:
            return 1.0
        return offset
    return clamp_scroll_offset(offset)


@dataclass(frozen=True)
class MiniMapLayout:
    """Thumb geometry of an overview chart driving another chart's window.

    ``layout`` is the overview's line layout over the full data and
    ``x_range`` the window shown by the main chart.
    """

    layout: LineChartLayout
    x_range: tuple[Any, Any]

    @property
    def _range_values(self) -> tuple[float, float]:
        return data_value(self.x_range[0]), data_value(self.x_range[1])

    @property
    def thumb_width(self) -> float:
        lower, upper = self._range_values
        return self.layout.x_in_layout(upper) - self.layout.x_in_layout(lower)

    @property
    def max_scroll_offset(self) -> float:
        lower, upper = self._range_values
        bounds = self.layout.absolute_data_bounds
        span = self.layout.x_in_layout(max(bounds.end, upper)) - self.layout.x_in_layout(min(bounds.start, lower))
        return span - self.thumb_width

    def thumb_min_x(self, scroll_offset: float) -> float:
        lower, _ = self._range_values
        return self.layout.x_in_layout(lower) - (self.max_scroll_offset - scroll_offset * self.max_scroll_offset)

    def thumb_rect(self, scroll_offset: float) -> Rect:
        frame = self.layout.local_frame
        return Rect(self.thumb_min_x(scroll_offset), frame.min_y, self.thumb_width, frame.height)

    def offset_for_drag(self, start_offset: float, translation: float) -> float:
        delta = safe_div(translation, self.max_scroll_offset)
        if not math.isfinite(delta):
            return start_offset
        return start_offset + delta

    def offset_for_tap(self, x: float) -> float:
        offset = safe_div(x - self.thumb_width / 2, self.max_scroll_offset)
        if not math.isfinite(offset):
            return 1.0
        return clamp_scroll_offset(offset)
