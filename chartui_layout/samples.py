from __future__ import annotations

import calendar
from datetime import datetime, timedelta

import numpy as np

from chartui_layout.datum import AnyDatum, CategorizedDatum, OrderedDatum
from chartui_layout.series import DataSeries


MONTH_IDS = tuple(calendar.month_abbr[1:])
_MONTH_NAMES = dict(zip(MONTH_IDS, calendar.month_name[1:], strict=True))


def _sample_values(count: int, offset: int = 0, seed: int = 7) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return rng.integers(1, 100, size=offset + count)[offset:]


def sample_calendar_data(offset: int = 0) -> DataSeries:
    """Twelve monthly counts keyed by abbreviated month name."""
    values = _sample_values(len(MONTH_IDS), offset)
    return DataSeries(CategorizedDatum(month, int(value)) for month, value in zip(MONTH_IDS, values, strict=True))


def month_name_mapper(datum: AnyDatum) -> str | None:
    return _MONTH_NAMES.get(datum.id)


def sample_quarters() -> DataSeries:
    values = _sample_values(4, offset=8)
    return DataSeries(CategorizedDatum(f"Q{i + 1}", int(value)) for i, value in enumerate(values))


def sample_time_series(days: int = 100, end: datetime | None = None) -> DataSeries:
    """One reading per day ending at ``end`` (default: today at midnight)."""
    end = end or datetime.combine(datetime.now().date(), datetime.min.time())
    values = _sample_values(days)
    return DataSeries(
        OrderedDatum(end - timedelta(days=days - 1 - i), float(value)) for i, value in enumerate(values)
    )
