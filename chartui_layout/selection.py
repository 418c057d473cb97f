from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Literal

from chartui_layout.datum import AnyDatum


SelectionKind = Literal["all", "first", "last", "each"]


@dataclass(frozen=True)
class PointSelection:
    """Which data points a decorator applies to."""

    kind: SelectionKind
    data: tuple[AnyDatum, ...] = ()

    ALL: ClassVar[PointSelection]
    FIRST: ClassVar[PointSelection]
    LAST: ClassVar[PointSelection]

    @classmethod
    def each(cls, data: Iterable[AnyDatum]) -> PointSelection:
        return cls("each", tuple(data))


PointSelection.ALL = PointSelection("all")
PointSelection.FIRST = PointSelection("first")
PointSelection.LAST = PointSelection("last")
