from __future__ import annotations

from dataclasses import dataclass, field
import enum
from typing import Callable, Literal, Union

from chartui_layout.colors import BLACK, Color
from chartui_layout.config import DEFAULT_CONFIG, LayoutConfig
from chartui_layout.datum import AnyDatum
from chartui_layout.geometry import Point, Rect, Size
from chartui_layout.radial import RadialChartLayout
from chartui_layout.rectangular import RectangularChartLayout
from chartui_layout.series import DataSeries
from chartui_layout.style import CategorizedDataStyle
from chartui_layout.text_metrics import DEFAULT_FONT_FAMILY, text_size


LegendNameMapper = Callable[[AnyDatum], Union[str, None]]


class Alignment(enum.Enum):
    TOP_LEADING = ("leading", "top")
    TOP = ("center", "top")
    TOP_TRAILING = ("trailing", "top")
    LEADING = ("leading", "center")
    CENTER = ("center", "center")
    TRAILING = ("trailing", "center")
    BOTTOM_LEADING = ("leading", "bottom")
    BOTTOM = ("center", "bottom")
    BOTTOM_TRAILING = ("trailing", "bottom")

    @property
    def horizontal(self) -> Literal["leading", "center", "trailing"]:
        return self.value[0]

    @property
    def vertical(self) -> Literal["top", "center", "bottom"]:
        return self.value[1]


class LegendOrientation(enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class InlineLegendStyle:
    """Labels drawn on the chart itself, next to each segment."""

    name_mapper: LegendNameMapper | None = None
    font_family: str = DEFAULT_FONT_FAMILY
    font_size_px: float | None = None
    foreground: Color = BLACK


@dataclass(frozen=True)
class StandAloneLegendStyle:
    """A swatch-and-name list anchored to one of nine frame positions."""

    position: Alignment = Alignment.LEADING
    orientation: LegendOrientation = LegendOrientation.VERTICAL
    swatch_size: Size | None = field(default_factory=lambda: Size(16.0, 16.0))
    name_mapper: LegendNameMapper | None = None
    font_family: str = DEFAULT_FONT_FAMILY
    font_size_px: float | None = None
    foreground: Color = BLACK


LegendStyle = Union[InlineLegendStyle, StandAloneLegendStyle]


def legend_name(style: LegendStyle, datum: AnyDatum) -> str | None:
    if style.name_mapper is not None:
        return style.name_mapper(datum)
    if isinstance(datum.id, str):
        return datum.id
    if datum.id is not None:
        return str(datum.id)
    return None


@dataclass(frozen=True)
class InlineLabel:
    datum: AnyDatum
    name: str | None
    anchor: Point
    rect: Rect


def inline_bar_labels(
    layout: RectangularChartLayout,
    style: InlineLegendStyle,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[InlineLabel]:
    """One label box per bar, as wide as the bar and just below it."""
    labels = []
    height = config.inline_label_height
    for segment in layout.segments:
        rect = Rect(segment.rect.mid_x - segment.rect.width / 2, segment.rect.max_y, segment.rect.width, height)
        labels.append(InlineLabel(segment.datum, legend_name(style, segment.datum), rect.center, rect))
    return labels


def inline_radial_labels(
    layout: RadialChartLayout,
    style: InlineLegendStyle,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> list[InlineLabel]:
    """Labels on each sector's bisector, pushed further out for thin sectors."""
    labels = []
    font_size = style.font_size_px or config.legend_font_size_px
    for segment in layout.segments:
        if segment.sweep <= config.narrow_sweep_degrees:
            radius = segment.outer_radius * config.narrow_radial_label_radius_ratio
        else:
            radius = segment.outer_radius * config.radial_label_radius_ratio
        anchor = segment.bisector_point(radius)
        name = legend_name(style, segment.datum)
        size = text_size(name or "", font_family=style.font_family, font_size_px=font_size)
        rect = Rect(anchor.x - size.width / 2, anchor.y - size.height / 2, size.width, size.height)
        labels.append(InlineLabel(segment.datum, name, anchor, rect))
    return labels


@dataclass(frozen=True)
class LegendEntry:
    datum: AnyDatum
    name: str | None
    fill: Color
    stroke: Color
    swatch_rect: Rect | None
    label_rect: Rect | None


@dataclass(frozen=True)
class LegendLayout:
    entries: tuple[LegendEntry, ...]
    rect: Rect


def standalone_legend(
    series: DataSeries,
    data_style: CategorizedDataStyle,
    legend_style: StandAloneLegendStyle | None,
    frame: Rect,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> LegendLayout:
    """Lay out every datum of ``series``, visible or not, as a legend row.

    A ``None`` legend style falls back to the one attached to ``data_style``.
    """
    if legend_style is None:
        attached = data_style.legend_style
        legend_style = attached if isinstance(attached, StandAloneLegendStyle) else StandAloneLegendStyle()
    font_size = legend_style.font_size_px or config.legend_font_size_px
    swatch = legend_style.swatch_size
    rows = []
    for datum in series.categorized_data:
        name = legend_name(legend_style, datum)
        text = text_size(name, font_family=legend_style.font_family, font_size_px=font_size) if name else None
        width = 0.0
        height = 0.0
        if swatch is not None:
            width += swatch.width
            height = swatch.height
        if text is not None:
            width += text.width + (config.legend_swatch_gap if swatch is not None else 0.0)
            height = max(height, text.height)
        rows.append((datum, name, text, Size(width, height)))

    vertical = legend_style.orientation is LegendOrientation.VERTICAL
    if vertical:
        spacing = config.legend_row_spacing
        block = Size(
            max((row[3].width for row in rows), default=0.0),
            sum(row[3].height for row in rows) + spacing * max(len(rows) - 1, 0),
        )
    else:
        spacing = config.legend_column_spacing
        block = Size(
            sum(row[3].width for row in rows) + spacing * max(len(rows) - 1, 0),
            max((row[3].height for row in rows), default=0.0),
        )

    area = Rect(
        frame.min_x + config.legend_padding,
        frame.min_y + config.legend_padding,
        frame.width - 2 * config.legend_padding,
        frame.height - 2 * config.legend_padding,
    )
    block_rect = Rect(
        _align(legend_style.position.horizontal, area.min_x, area.max_x, block.width),
        _align(legend_style.position.vertical, area.min_y, area.max_y, block.height),
        block.width,
        block.height,
    )

    entries = []
    x = block_rect.x
    y = block_rect.y
    for datum, name, text, row in rows:
        row_y = y if vertical else block_rect.y + (block.height - row.height) / 2
        cursor = x
        swatch_rect = None
        if swatch is not None:
            swatch_rect = Rect(cursor, row_y + (row.height - swatch.height) / 2, swatch.width, swatch.height)
            cursor += swatch.width + config.legend_swatch_gap
        label_rect = None
        if text is not None:
            label_rect = Rect(cursor, row_y + (row.height - text.height) / 2, text.width, text.height)
        entries.append(
            LegendEntry(datum, name, data_style.fill(datum), data_style.stroke(datum), swatch_rect, label_rect)
        )
        if vertical:
            y += row.height + spacing
        else:
            x += row.width + spacing
    return LegendLayout(tuple(entries), block_rect)


def _align(mode: str, lower: float, upper: float, extent: float) -> float:
    if mode in ("leading", "top"):
        return lower
    if mode in ("trailing", "bottom"):
        return upper - extent
    return (lower + upper) / 2 - extent / 2
