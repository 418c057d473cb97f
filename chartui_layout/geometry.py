from __future__ import annotations

from dataclasses import dataclass
import math
from typing import ClassVar


NAN = float("nan")


def is_valid_number(value: float) -> bool:
    return math.isfinite(value)


def safe_div(numerator: float, denominator: float) -> float:
    """Divide, resolving zero or non-finite divisors to NaN."""
    if denominator == 0 or not math.isfinite(denominator):
        return NAN
    return numerator / denominator


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    INVALID: ClassVar[Point]
    ZERO: ClassVar[Point]

    @property
    def is_valid(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


Point.INVALID = Point(NAN, NAN)
Point.ZERO = Point(0.0, 0.0)


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    @property
    def is_valid(self) -> bool:
        return math.isfinite(self.width) and math.isfinite(self.height)


@dataclass(frozen=True)
class EdgeInsets:
    top: float = 0.0
    leading: float = 0.0
    bottom: float = 0.0
    trailing: float = 0.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    INVALID: ClassVar[Rect]
    ZERO: ClassVar[Rect]

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def is_valid(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.width, self.height))

    def standardized(self) -> Rect:
        """Same rectangle with non-negative width and height."""
        return Rect(self.min_x, self.min_y, abs(self.width), abs(self.height))

    def inset_by(self, insets: EdgeInsets) -> Rect:
        return Rect(
            self.min_x + insets.leading,
            self.min_y + insets.top,
            self.width - (insets.leading + insets.trailing),
            self.height - (insets.top + insets.bottom),
        )

    @classmethod
    def from_center(cls, center: Point, radius: float) -> Rect:
        return cls(center.x - radius, center.y - radius, radius * 2, radius * 2)


Rect.INVALID = Rect(NAN, NAN, NAN, NAN)
Rect.ZERO = Rect(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class LineSegment:
    start: Point
    end: Point

    @property
    def is_valid(self) -> bool:
        return self.start.is_valid and self.end.is_valid
