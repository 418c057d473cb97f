from chartui_layout.colors import BasicColorSet, Color, ColorSet, RepeatingColorSet, parse_hex_color, with_alpha
from chartui_layout.config import DEFAULT_CONFIG, LayoutConfig, validate_layout_config
from chartui_layout.datum import AnyDatum, CategorizedDatum, DatumKind, OrderedDatum, data_value
from chartui_layout.decorators import (
    AxisRange,
    PointAxisMarker,
    RangeBand,
    highlight_rects,
    origin_marks,
    x_axis_marker_lines,
    x_range_band,
    y_axis_marker_lines,
    y_range_band,
)
from chartui_layout.errors import ChartConfigError, ChartDataError
from chartui_layout.geometry import EdgeInsets, LineSegment, Point, Rect, Size
from chartui_layout.grids import GridLine, XAxisGrid, YAxisGrid, grid_lines, x_grid_lines, y_grid_lines
from chartui_layout.insets import ChartInsets, Edge
from chartui_layout.legend import (
    Alignment,
    InlineLegendStyle,
    LegendOrientation,
    StandAloneLegendStyle,
    inline_bar_labels,
    inline_radial_labels,
    legend_name,
    standalone_legend,
)
from chartui_layout.line import ChartSegment, LineChartLayout, SegmentPosition, SegmentTile, tile_series
from chartui_layout.radial import RadialChartLayout, RadialSegment
from chartui_layout.rectangular import BarSegment, RectangularChartLayout
from chartui_layout.scroll import MiniMapLayout, clamp_scroll_offset, drag_scroll_offset, settle_scroll_offset
from chartui_layout.selection import PointSelection
from chartui_layout.series import DataSeries
from chartui_layout.style import (
    CategorizedDataStyle,
    LinearBarsStyle,
    OriginMark,
    PointHighlightStyle,
    RadialSegmentsStyle,
    RectangularChartStyle,
    SegmentStyle,
)
from chartui_layout.transform import Bounds, LinearTransform

__all__ = [
    "DEFAULT_CONFIG",
    "Alignment",
    "AnyDatum",
    "AxisRange",
    "BarSegment",
    "BasicColorSet",
    "Bounds",
    "CategorizedDataStyle",
    "CategorizedDatum",
    "ChartConfigError",
    "ChartDataError",
    "ChartInsets",
    "ChartSegment",
    "Color",
    "ColorSet",
    "DataSeries",
    "DatumKind",
    "Edge",
    "EdgeInsets",
    "GridLine",
    "InlineLegendStyle",
    "LayoutConfig",
    "LegendOrientation",
    "LineChartLayout",
    "LineSegment",
    "LinearBarsStyle",
    "LinearTransform",
    "MiniMapLayout",
    "OrderedDatum",
    "OriginMark",
    "Point",
    "PointAxisMarker",
    "PointHighlightStyle",
    "PointSelection",
    "RadialChartLayout",
    "RadialSegment",
    "RadialSegmentsStyle",
    "RangeBand",
    "Rect",
    "RectangularChartLayout",
    "RectangularChartStyle",
    "RepeatingColorSet",
    "SegmentPosition",
    "SegmentStyle",
    "SegmentTile",
    "Size",
    "StandAloneLegendStyle",
    "XAxisGrid",
    "YAxisGrid",
    "clamp_scroll_offset",
    "data_value",
    "drag_scroll_offset",
    "grid_lines",
    "highlight_rects",
    "inline_bar_labels",
    "inline_radial_labels",
    "legend_name",
    "origin_marks",
    "parse_hex_color",
    "settle_scroll_offset",
    "standalone_legend",
    "tile_series",
    "validate_layout_config",
    "with_alpha",
    "x_axis_marker_lines",
    "x_grid_lines",
    "x_range_band",
    "y_axis_marker_lines",
    "y_grid_lines",
    "y_range_band",
]
