from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from chartui_layout.config import DEFAULT_CONFIG, LayoutConfig
from chartui_layout.datum import AnyDatum
from chartui_layout.geometry import EdgeInsets, Point, Rect, Size, is_valid_number
from chartui_layout.insets import ChartInsets, resolve_insets
from chartui_layout.series import DataSeries
from chartui_layout.style import RadialSegmentsStyle, RadiusPolicy


LOGGER = logging.getLogger(__name__)

START_ANGLE = -90.0


@dataclass(frozen=True)
class RadialSegment:
    """One pie or ring sector. Angles are in degrees, clockwise from +x."""

    datum: AnyDatum
    center: Point
    start_angle: float
    mid_angle: float
    end_angle: float
    outer_radius: float
    inner_radius: float

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def is_valid(self) -> bool:
        return (
            self.datum.is_valid
            and self.center.is_valid
            and all(is_valid_number(v) for v in (self.start_angle, self.end_angle, self.outer_radius, self.inner_radius))
        )

    def bisector_point(self, radius: float) -> Point:
        angle = math.radians(self.mid_angle)
        return Point(self.center.x + math.cos(angle) * radius, self.center.y + math.sin(angle) * radius)


class RadialChartLayout:
    def __init__(
        self,
        series: DataSeries,
        local_frame: Rect = Rect.ZERO,
        insets: ChartInsets | EdgeInsets | None = None,
        *,
        segments_style: RadialSegmentsStyle | None = None,
        config: LayoutConfig = DEFAULT_CONFIG,
    ) -> None:
        self.series = series
        self.config = config
        self.segments_style = segments_style or RadialSegmentsStyle()
        if series.is_empty:
            LOGGER.debug("empty series; radial layout collapses to a zero frame")
            local_frame = Rect.ZERO
            insets = None
        self.local_frame = local_frame
        self.insets = resolve_insets(insets)
        self.center = self.inset_frame.center

        data = series.categorized_data if series.is_categorized else series.all_data
        style = self.segments_style
        max_projection = max([0.0] + [style.projection(datum) for datum in data])
        self.available_radius = min(self.size.width, self.size.height) / 2 - max_projection
        self.total = math.fsum(datum.y_value for datum in data)
        largest = max([0.0] + [datum.y_value for datum in data])
        if self.total == 0:
            if data:
                LOGGER.debug("radial total is zero; all segments have zero sweep")
            self.max_share = 0.0
        else:
            self.max_share = largest / self.total

        self.segments: list[RadialSegment] = []
        start = START_ANGLE
        for datum in data:
            share = datum.y_value / self.total if self.total != 0 else 0.0
            end = start + share * 360
            self.segments.append(self._segment(datum, start, end))
            start = end

    @property
    def inset_frame(self) -> Rect:
        return self.local_frame.inset_by(self.insets)

    @property
    def size(self) -> Size:
        return self.inset_frame.size

    def segment_at(self, index: int) -> RadialSegment | None:
        if 0 <= index < len(self.segments):
            return self.segments[index]
        return None

    def _segment(self, datum: AnyDatum, start: float, end: float) -> RadialSegment:
        mid = start + (end - start) / 2
        center = self.center
        projection = self.segments_style.projection(datum)
        if projection > 0:
            angle = math.radians(mid)
            center = Point(center.x + math.cos(angle) * projection, center.y + math.sin(angle) * projection)

        ratio = (end - start) / 360
        outer = self._outer_radius(self.segments_style.outer_radius(datum), ratio)
        inner = self._inner_radius(self.segments_style.inner_radius(datum), ratio)
        return RadialSegment(datum, center, start, mid, end, outer, inner)

    def _outer_radius(self, policy: RadiusPolicy, ratio: float) -> float:
        available = self.available_radius
        if policy == "auto":
            return available
        if policy == "proportional":
            return available - available * (self.max_share - ratio)
        if policy == "inversely_proportional":
            return available - available * ratio
        return float(policy)

    def _inner_radius(self, policy: RadiusPolicy, ratio: float) -> float:
        available = self.available_radius
        if policy == "auto":
            return available * self.config.auto_inner_radius_ratio
        if policy == "proportional":
            return available * 0.5 - (available / 2) * (self.max_share - ratio)
        if policy == "inversely_proportional":
            return available * 0.5 - (available / 2) * ratio
        return float(policy)
