from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from chartui_layout.errors import ChartConfigError


@dataclass(frozen=True)
class LayoutConfig:
    """Tunable constants shared by every layout pass."""

    points_per_segment: int = 500
    minimum_window_ratio: float = 0.75
    open_range_epsilon: float = 0.01
    auto_inner_radius_ratio: float = 0.75
    bar_spacing_reserve_ratio: float = 0.2
    inline_label_height: float = 24.0
    radial_label_radius_ratio: float = 1.12
    narrow_radial_label_radius_ratio: float = 1.25
    narrow_sweep_degrees: float = 10.0
    legend_padding: float = 8.0
    legend_row_spacing: float = 2.0
    legend_column_spacing: float = 4.0
    legend_swatch_gap: float = 8.0
    legend_font_size_px: float = 12.0
    scroll_edge_tap_width: float = 16.0


DEFAULT_CONFIG = LayoutConfig()

_RATIO_KEYS = ("minimum_window_ratio", "bar_spacing_reserve_ratio", "auto_inner_radius_ratio")
_NON_NEGATIVE_KEYS = (
    "open_range_epsilon",
    "inline_label_height",
    "narrow_sweep_degrees",
    "legend_padding",
    "legend_row_spacing",
    "legend_column_spacing",
    "legend_swatch_gap",
    "scroll_edge_tap_width",
)
_POSITIVE_KEYS = ("radial_label_radius_ratio", "narrow_radial_label_radius_ratio", "legend_font_size_px")


def validate_layout_config(overrides: Mapping[str, Any] | None = None) -> LayoutConfig:
    """Merge overrides onto the default layout constants.

    Unknown keys and out-of-range values raise ChartConfigError.
    """

    raw: dict[str, Any] = asdict(DEFAULT_CONFIG)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ChartConfigError(f"Unknown layout setting: {key}")
            raw[key] = value

    points = raw["points_per_segment"]
    if isinstance(points, bool) or not isinstance(points, int) or points < 1:
        raise ChartConfigError("Setting `points_per_segment` must be a positive integer")

    for key in _RATIO_KEYS:
        value = _as_number(key, raw[key])
        if not 0.0 <= value <= 1.0:
            raise ChartConfigError(f"Setting `{key}` must be within [0, 1]")
        raw[key] = value
    for key in _NON_NEGATIVE_KEYS:
        value = _as_number(key, raw[key])
        if value < 0.0:
            raise ChartConfigError(f"Setting `{key}` must be >= 0")
        raw[key] = value
    for key in _POSITIVE_KEYS:
        value = _as_number(key, raw[key])
        if value <= 0.0:
            raise ChartConfigError(f"Setting `{key}` must be > 0")
        raw[key] = value

    return LayoutConfig(**raw)


def _as_number(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ChartConfigError(f"Setting `{key}` must be a number")
    return float(value)
