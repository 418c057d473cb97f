from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import Decimal
import enum
from typing import Any, ClassVar, Hashable, Union

import numpy as np

from chartui_layout.errors import ChartDataError


NAN = float("nan")


class DatumKind(enum.Enum):
    ORDERED = "ordered"
    CATEGORIZED = "categorized"


def data_value(value: Any) -> float:
    """Project a raw x or y value onto the float axis used for layout."""
    if value is None:
        return NAN
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            return NAN
        return float(value.astype("datetime64[ns]").astype(np.int64)) / 1e9
    if isinstance(value, datetime):
        if value != value:
            # missing timestamp (pandas NaT)
            return NAN
        return value.timestamp()
    if isinstance(value, date):
        return datetime.combine(value, time()).timestamp()
    if isinstance(value, np.timedelta64):
        if np.isnat(value):
            return NAN
        return float(value / np.timedelta64(1, "s"))
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, (int, float, Decimal, np.number, np.bool_)):
        return float(value)
    raise ChartDataError(f"unsupported data value: {value!r}")


@dataclass(frozen=True)
class OrderedDatum:
    """A datum on a continuous x axis (numbers, dates)."""

    x: Any
    y: Any
    is_valid: bool = True

    kind: ClassVar[DatumKind] = DatumKind.ORDERED

    @property
    def x_value(self) -> float:
        return data_value(self.x)

    @property
    def y_value(self) -> float:
        if not self.is_valid:
            return NAN
        return data_value(self.y)

    @classmethod
    def invalid(cls) -> OrderedDatum:
        return cls(x=float("-inf"), y=None, is_valid=False)


@dataclass(frozen=True)
class CategorizedDatum:
    """A datum identified by a category id instead of an x value."""

    id: Hashable
    y: Any
    is_valid: bool = True

    kind: ClassVar[DatumKind] = DatumKind.CATEGORIZED

    @property
    def x_value(self) -> float:
        return NAN

    @property
    def y_value(self) -> float:
        if not self.is_valid:
            return NAN
        return data_value(self.y)

    @classmethod
    def invalid(cls) -> CategorizedDatum:
        return cls(id=None, y=None, is_valid=False)


Datum = Union[OrderedDatum, CategorizedDatum]


@dataclass(frozen=True, eq=False)
class AnyDatum:
    """Type-erased datum carrying only projected values.

    Two wrappers compare equal when their projected (x, y) pairs match, so
    callers can select points by value without holding the original datum.
    For categorized data ``x_value`` is the datum's index in its series.
    """

    x_value: float
    y_value: float
    is_valid: bool = True
    id: Hashable | None = None
    index: int | None = field(default=None)

    INVALID: ClassVar[AnyDatum]

    @classmethod
    def wrap(cls, datum: Datum, index: int | None = None) -> AnyDatum:
        if isinstance(datum, CategorizedDatum):
            x_value = float(index) if index is not None else NAN
            return cls(x_value, datum.y_value, datum.is_valid, datum.id, index)
        return cls(datum.x_value, datum.y_value, datum.is_valid, None, index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyDatum):
            return NotImplemented
        return self.x_value == other.x_value and self.y_value == other.y_value

    def __hash__(self) -> int:
        return hash((self.x_value, self.y_value))


AnyDatum.INVALID = AnyDatum(NAN, NAN, False)
