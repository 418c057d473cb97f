from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field, replace
import math
from typing import TYPE_CHECKING, Any, Literal, Union

from chartui_layout.colors import BLACK, BLUE, WHITE, BasicColorSet, Color, ColorSet, with_alpha
from chartui_layout.datum import AnyDatum
from chartui_layout.errors import ChartConfigError
from chartui_layout.grids import XAxisGrid, YAxisGrid

if TYPE_CHECKING:
    from chartui_layout.legend import LegendStyle


BarWidth = Union[Literal["auto"], float]
RadiusPolicy = Union[Literal["auto", "proportional", "inversely_proportional"], float]
OriginMarkKind = Literal["line", "tic", "positive_tic"]

_RADIUS_KEYWORDS = ("auto", "proportional", "inversely_proportional")


@dataclass(frozen=True)
class SegmentStyle:
    """Optional per-segment values; ``None`` falls through to the next tier."""

    fill: Color | None = None
    stroke: Color | None = None
    stroke_width: float | None = None
    z_index: int | None = None

    def __post_init__(self) -> None:
        if self.stroke_width is not None and not (math.isfinite(self.stroke_width) and self.stroke_width >= 0):
            raise ChartConfigError("stroke_width must be a finite number >= 0")


@dataclass(frozen=True)
class ResolvedSegmentStyle:
    fill: Color
    stroke: Color
    stroke_width: float
    z_index: int


@dataclass(frozen=True)
class CategorizedDataStyle:
    defaults: SegmentStyle = SegmentStyle()
    overrides: Mapping[Hashable, SegmentStyle] = field(default_factory=dict)
    color_set: ColorSet | None = BasicColorSet()
    legend_style: LegendStyle | None = None

    def with_defaults(self, **values: Any) -> CategorizedDataStyle:
        return replace(self, defaults=replace(self.defaults, **values))

    def with_override(self, datum_id: Hashable, **values: Any) -> CategorizedDataStyle:
        overrides = dict(self.overrides)
        overrides[datum_id] = replace(overrides.get(datum_id, SegmentStyle()), **values)
        return replace(self, overrides=overrides)

    def with_color_set(self, color_set: ColorSet | None) -> CategorizedDataStyle:
        return replace(self, color_set=color_set)

    def with_legend(self, legend_style: LegendStyle | None) -> CategorizedDataStyle:
        return replace(self, legend_style=legend_style)

    def _override(self, datum: AnyDatum) -> SegmentStyle:
        return self.overrides.get(datum.id, SegmentStyle())

    def fill(self, datum: AnyDatum) -> Color:
        override = self._override(datum).fill
        if override is not None:
            return override
        if self.defaults.fill is not None:
            return self.defaults.fill
        if self.color_set is not None and datum.index is not None:
            return self.color_set.color_at(datum.index)
        return BLUE

    def stroke(self, datum: AnyDatum) -> Color:
        return _first_set(self._override(datum).stroke, self.defaults.stroke, WHITE)

    def stroke_width(self, datum: AnyDatum) -> float:
        return _first_set(self._override(datum).stroke_width, self.defaults.stroke_width, 1.0)

    def z_index(self, datum: AnyDatum) -> int:
        return _first_set(self._override(datum).z_index, self.defaults.z_index, 0)

    def resolve(self, datum: AnyDatum) -> ResolvedSegmentStyle:
        return ResolvedSegmentStyle(
            fill=self.fill(datum),
            stroke=self.stroke(datum),
            stroke_width=self.stroke_width(datum),
            z_index=self.z_index(datum),
        )

    def z_ordered(self, data: Iterable[AnyDatum]) -> list[AnyDatum]:
        """Data in draw order: ascending z-index, ties keep series order."""
        return sorted(data, key=self.z_index)


@dataclass(frozen=True)
class LinearBarsStyle:
    spacing: BarWidth = "auto"
    default_width: BarWidth = "auto"
    widths: Mapping[Hashable, BarWidth] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_bar_width("spacing", self.spacing)
        _check_bar_width("default_width", self.default_width)
        for datum_id, width in self.widths.items():
            _check_bar_width(f"width for {datum_id!r}", width)

    def with_spacing(self, spacing: BarWidth) -> LinearBarsStyle:
        return replace(self, spacing=spacing)

    def with_width(self, width: BarWidth, datum_id: Hashable | None = None) -> LinearBarsStyle:
        if datum_id is None:
            return replace(self, default_width=width)
        widths = dict(self.widths)
        widths[datum_id] = width
        return replace(self, widths=widths)

    def width(self, datum: AnyDatum) -> BarWidth:
        return self.widths.get(datum.id, self.default_width)


@dataclass(frozen=True)
class RadialSegmentValues:
    projection: float | None = None
    outer_radius: RadiusPolicy | None = None
    inner_radius: RadiusPolicy | None = None

    def __post_init__(self) -> None:
        if self.projection is not None and not (math.isfinite(self.projection) and self.projection >= 0):
            raise ChartConfigError("projection must be a finite number >= 0")
        for name in ("outer_radius", "inner_radius"):
            value = getattr(self, name)
            if value is None or value in _RADIUS_KEYWORDS:
                continue
            if isinstance(value, str) or not (math.isfinite(value) and value >= 0):
                raise ChartConfigError(f"{name} must be one of {_RADIUS_KEYWORDS} or a number >= 0")


@dataclass(frozen=True)
class RadialSegmentsStyle:
    defaults: RadialSegmentValues = RadialSegmentValues()
    overrides: Mapping[Hashable, RadialSegmentValues] = field(default_factory=dict)

    def with_defaults(self, **values: Any) -> RadialSegmentsStyle:
        return replace(self, defaults=replace(self.defaults, **values))

    def with_override(self, datum_id: Hashable, **values: Any) -> RadialSegmentsStyle:
        overrides = dict(self.overrides)
        overrides[datum_id] = replace(overrides.get(datum_id, RadialSegmentValues()), **values)
        return replace(self, overrides=overrides)

    def _override(self, datum: AnyDatum) -> RadialSegmentValues:
        return self.overrides.get(datum.id, RadialSegmentValues())

    def projection(self, datum: AnyDatum) -> float:
        return _first_set(self._override(datum).projection, self.defaults.projection, 0.0)

    def outer_radius(self, datum: AnyDatum) -> RadiusPolicy:
        return _first_set(self._override(datum).outer_radius, self.defaults.outer_radius, "auto")

    def inner_radius(self, datum: AnyDatum) -> RadiusPolicy:
        return _first_set(self._override(datum).inner_radius, self.defaults.inner_radius, "auto")


@dataclass(frozen=True)
class PointHighlightStyle:
    fill: Color | None = BLUE
    stroke: Color | None = None
    stroke_width: float = 0.5
    radius: float = 3.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.radius) and self.radius >= 0):
            raise ChartConfigError("radius must be a finite number >= 0")
        if not (math.isfinite(self.stroke_width) and self.stroke_width >= 0):
            raise ChartConfigError("stroke_width must be a finite number >= 0")


@dataclass(frozen=True)
class OriginMark:
    """How an axis origin is drawn: a full line or a tic in grid-step units."""

    kind: OriginMarkKind = "line"
    width: float = 1.0
    length: float = 0.0

    def __post_init__(self) -> None:
        if self.kind not in ("line", "tic", "positive_tic"):
            raise ChartConfigError(f"unknown origin mark kind: {self.kind}")
        if self.width < 0 or self.length < 0:
            raise ChartConfigError("origin mark width and length must be >= 0")

    @classmethod
    def line(cls, width: float = 1.0) -> OriginMark:
        return cls("line", width=width)

    @classmethod
    def tic(cls, length: float, width: float = 1.0) -> OriginMark:
        return cls("tic", width=width, length=length)

    @classmethod
    def positive_tic(cls, length: float, width: float = 1.0) -> OriginMark:
        return cls("positive_tic", width=width, length=length)


@dataclass(frozen=True)
class RectangularChartStyle:
    x_axis_grid: XAxisGrid | None = None
    y_axis_grid: YAxisGrid | None = None
    x_origin_mark: OriginMark | None = OriginMark()
    y_origin_mark: OriginMark | None = OriginMark()
    x_origin_color: Color = BLACK
    y_origin_color: Color = BLACK
    range_fill: Color = with_alpha(BLUE, 0.2)
    range_stroke: Color | None = None
    range_stroke_width: float = 0.5

    def with_grids(self, x: XAxisGrid | None = None, y: YAxisGrid | None = None) -> RectangularChartStyle:
        return replace(self, x_axis_grid=x, y_axis_grid=y)

    def with_origin_marks(self, x: OriginMark | None, y: OriginMark | None) -> RectangularChartStyle:
        return replace(self, x_origin_mark=x, y_origin_mark=y)


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _check_bar_width(name: str, value: BarWidth) -> None:
    if value == "auto":
        return
    if isinstance(value, str) or not (math.isfinite(value) and value >= 0):
        raise ChartConfigError(f"{name} must be 'auto' or a number >= 0")
