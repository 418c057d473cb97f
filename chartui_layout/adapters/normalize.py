from __future__ import annotations

from collections.abc import Mapping, Sequence
import logging
from typing import Any

import numpy as np

from chartui_layout.datum import CategorizedDatum, DatumKind, OrderedDatum, data_value
from chartui_layout.errors import ChartDataError
from chartui_layout.series import DataSeries


LOGGER = logging.getLogger(__name__)

try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def ordered_series(y: Any = None, *, x: Any = None, data: Any = None) -> DataSeries:
    """Build an ordered series from array-likes, pandas columns or tensors.

    ``x`` keeps its native values (dates stay dates); a missing ``x`` uses
    the sample index. Pairs with a non-finite or missing x or y are dropped.
    """

    column = _pick_column(y, "y", data)
    if column is None:
        raise ChartDataError("y input is required")
    y_arr = _project(_column_items(column, label="y"), label="y")

    if x is None:
        x_items: list[Any] = list(range(y_arr.size))
    else:
        x_items = _column_items(_pick_column(x, "x", data), label="x")
    if len(x_items) != y_arr.size:
        raise ChartDataError(f"x and y length mismatch: {len(x_items)} != {y_arr.size}")

    mask = np.isfinite(_project(x_items, label="x")) & np.isfinite(y_arr)
    if y_arr.size and not np.any(mask):
        raise ChartDataError("series contains no finite points")
    _report_dropped(mask)
    return DataSeries(
        (OrderedDatum(x_items[i], float(y_arr[i])) for i in np.flatnonzero(mask)),
        kind=DatumKind.ORDERED,
    )


def categorized_series(values: Any = None, *, ids: Any = None, data: Any = None) -> DataSeries:
    """Build a categorized series from a mapping, a pandas Series or parallel sequences."""

    if isinstance(values, Mapping):
        if ids is not None:
            raise ChartDataError("ids cannot be combined with a mapping of values")
        ids = list(values.keys())
        values = list(values.values())

    column = _pick_column(values, "y", data)
    if column is None:
        raise ChartDataError("values input is required")
    y_arr = _project(_column_items(column, label="values"), label="values")

    if ids is not None:
        id_items = _column_items(_pick_column(ids, "ids", data), label="ids")
    elif pd is not None and isinstance(column, pd.Series):
        id_items = list(column.index)
    else:
        id_items = list(range(y_arr.size))
    if len(id_items) != y_arr.size:
        raise ChartDataError(f"ids and values length mismatch: {len(id_items)} != {y_arr.size}")

    mask = np.isfinite(y_arr)
    _report_dropped(mask)
    return DataSeries(
        (CategorizedDatum(id_items[i], float(y_arr[i])) for i in np.flatnonzero(mask)),
        kind=DatumKind.CATEGORIZED,
    )


def _report_dropped(mask: np.ndarray) -> None:
    dropped = int(mask.size - np.count_nonzero(mask))
    if dropped:
        LOGGER.warning("dropped %d non-finite samples", dropped)


def _pick_column(value: Any, key: str, frame: Any) -> Any:
    """Resolve a column name against ``frame``; a bare DataFrame yields its one numeric column."""
    if pd is not None and isinstance(value, pd.DataFrame):
        if key != "y" or frame is not None:
            raise ChartDataError(f"{key} cannot be a DataFrame")
        frame, value = value, None
    elif frame is None:
        return value

    if pd is None or not isinstance(frame, pd.DataFrame):
        raise ChartDataError("`data` must be a pandas DataFrame")
    if isinstance(value, str):
        if value not in frame.columns:
            raise ChartDataError(f"column not found: {value}")
        return frame[value]
    if value is None and key == "y":
        numeric = list(frame.select_dtypes("number").columns)
        if len(numeric) != 1:
            raise ChartDataError("a DataFrame without a named column must have exactly one numeric column")
        return frame[numeric[0]]
    return value


def _column_items(value: Any, *, label: str) -> list[Any]:
    """Raw 1-D items of an array-like; scalars and nested arrays are rejected."""
    if torch is not None and isinstance(value, torch.Tensor):
        value = value.detach().cpu().numpy()
    if pd is not None and isinstance(value, (pd.Series, pd.Index)):
        return list(value)
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ChartDataError(f"{label} must be 1-D")
        return list(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return list(value)
    raise ChartDataError(f"unsupported {label} input type: {type(value)!r}")


def _project(items: list[Any], *, label: str) -> np.ndarray:
    values = np.empty(len(items), dtype=np.float64)
    for i, item in enumerate(items):
        try:
            values[i] = data_value(item)
        except ChartDataError:
            raise ChartDataError(f"{label} contains an unsupported value at index {i}: {item!r}") from None
    return values
