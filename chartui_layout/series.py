from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
import logging
import math
from typing import Any

from chartui_layout.datum import AnyDatum, CategorizedDatum, Datum, DatumKind, OrderedDatum, data_value
from chartui_layout.errors import ChartDataError
from chartui_layout.geometry import NAN, Point, is_valid_number


LOGGER = logging.getLogger(__name__)


class DataSeries:
    """Immutable collection of one kind of datum with cached aggregates.

    Ordered data is kept sorted by x. Categorized data keeps insertion order
    and one datum per id.
    """

    def __init__(self, data: Iterable[Datum] = (), *, kind: DatumKind | None = None) -> None:
        items = list(data)
        for item in items:
            if not isinstance(item, (OrderedDatum, CategorizedDatum)):
                raise ChartDataError(f"not a datum: {item!r}")
        kinds = {item.kind for item in items}
        if len(kinds) > 1:
            raise ChartDataError("a series cannot mix ordered and categorized data")
        if kinds:
            resolved = kinds.pop()
            if kind is not None and kind is not resolved:
                raise ChartDataError(f"series kind mismatch: expected {kind.value}, got {resolved.value}")
            kind = resolved

        if kind is DatumKind.ORDERED:
            items.sort(key=_x_sort_key)
        elif kind is DatumKind.CATEGORIZED:
            items = _dedupe_by_id(items)

        self._kind = kind
        self._data: tuple[Datum, ...] = tuple(items)
        self._index_by_id: dict[Hashable, int] = {}
        if kind is DatumKind.CATEGORIZED:
            self._index_by_id = {item.id: i for i, item in enumerate(self._data)}
        self._recalculate()

    def _recalculate(self) -> None:
        self._wrapped = tuple(AnyDatum.wrap(item, i) for i, item in enumerate(self._data))
        first = last = minimum = maximum = AnyDatum.INVALID
        if self._wrapped:
            first = self._wrapped[0]
            last = self._wrapped[-1]
        for datum in self._wrapped:
            if not _has_value(minimum) or datum.y_value < minimum.y_value:
                minimum = datum
            if not _has_value(maximum) or datum.y_value > maximum.y_value:
                maximum = datum
        self._first = first
        self._last = last
        self._minimum = minimum
        self._maximum = maximum

    @property
    def kind(self) -> DatumKind | None:
        return self._kind

    @property
    def is_categorized(self) -> bool:
        return self._kind is DatumKind.CATEGORIZED

    @property
    def is_empty(self) -> bool:
        return not self._data

    @property
    def data(self) -> tuple[Datum, ...]:
        return self._data

    @property
    def first(self) -> AnyDatum:
        return self._first

    @property
    def last(self) -> AnyDatum:
        return self._last

    @property
    def minimum(self) -> AnyDatum:
        return self._minimum

    @property
    def maximum(self) -> AnyDatum:
        return self._maximum

    @property
    def all_data(self) -> list[AnyDatum]:
        return list(self._wrapped)

    @property
    def categorized_data(self) -> list[AnyDatum]:
        if not self.is_categorized:
            return []
        return list(self._wrapped)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Datum]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Datum:
        return self._data[index]

    def __repr__(self) -> str:
        kind = self._kind.value if self._kind is not None else "empty"
        return f"DataSeries(kind={kind}, count={len(self._data)})"

    def appending(self, *data: Datum) -> DataSeries:
        return DataSeries(self._data + tuple(data), kind=self._kind)

    def all_x(self, where: Callable[[Any], bool] | None = None) -> list[Any]:
        if self.is_categorized:
            values: list[Any] = [float(i) for i in range(len(self._data))]
        else:
            values = [item.x for item in self._data]
        if where is None:
            return values
        return [value for value in values if where(value)]

    def all_y(self, where: Callable[[Any], bool] | None = None) -> list[Any]:
        values = [item.y for item in self._data]
        if where is None:
            return values
        return [value for value in values if where(value)]

    def index_for(self, datum: Datum | AnyDatum) -> int | None:
        if self.is_categorized:
            datum_id = getattr(datum, "id", None)
            if datum_id is None:
                return None
            return self._index_by_id.get(datum_id)
        x_value = datum.x_value
        for i, wrapped in enumerate(self._wrapped):
            if wrapped.x_value == x_value:
                return i
        return None

    def datum_for(self, datum_id: Hashable) -> Datum | None:
        index = self._index_by_id.get(datum_id)
        if index is None:
            return None
        return self._data[index]

    def datum_at(self, index: int) -> AnyDatum:
        if 0 <= index < len(self._wrapped):
            return self._wrapped[index]
        return AnyDatum.INVALID

    def contains_x(self, x: Any) -> bool:
        if self.is_empty or self.is_categorized:
            return False
        value = data_value(x)
        return self._first.x_value <= value <= self._last.x_value

    def point_for(self, datum: Datum | AnyDatum) -> Point:
        """Data-space point of a datum; categorized x is the datum's index."""
        if not self.is_categorized:
            return Point(datum.x_value, datum.y_value)
        index = self.index_for(datum)
        return Point(float(index) if index is not None else NAN, datum.y_value)


def _x_sort_key(datum: Datum) -> tuple[bool, float]:
    value = datum.x_value
    if math.isnan(value):
        return (True, 0.0)
    return (False, value)


def _has_value(datum: AnyDatum) -> bool:
    return datum.is_valid and is_valid_number(datum.y_value)


def _dedupe_by_id(items: list[Datum]) -> list[Datum]:
    seen: set[Hashable] = set()
    unique: list[Datum] = []
    for item in items:
        if item.id in seen:
            LOGGER.warning("dropping duplicate category id %r", item.id)
            continue
        seen.add(item.id)
        unique.append(item)
    return unique
