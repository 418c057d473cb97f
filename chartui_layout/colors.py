from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Protocol, Sequence

from chartui_layout.errors import ChartConfigError


Color = tuple[int, int, int, int]

BLUE: Color = (0, 122, 255, 255)
CYAN: Color = (50, 173, 230, 255)
GRAY: Color = (142, 142, 147, 255)
WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


def parse_hex_color(value: str) -> Color:
    if not isinstance(value, str) or not _HEX_COLOR.match(value):
        raise ChartConfigError(f"color must be #RRGGBB or #RRGGBBAA, got {value!r}")
    r = int(value[1:3], 16)
    g = int(value[3:5], 16)
    b = int(value[5:7], 16)
    a = int(value[7:9], 16) if len(value) == 9 else 255
    return (r, g, b, a)


def with_alpha(color: Color, alpha: float) -> Color:
    if not 0.0 <= alpha <= 1.0:
        raise ChartConfigError("alpha must be within [0, 1]")
    return (color[0], color[1], color[2], int(round(alpha * 255)))


class ColorSet(Protocol):
    def color_at(self, index: int) -> Color:
        ...


@dataclass(frozen=True)
class BasicColorSet:
    """Deterministic colours read as 3-digit hex triples from a seed string."""

    seed: str = "4a4df675f6932bcd5790d0956ce51a52b70ccf4e5ebdc84ac29f9aa1b5ff383f"

    def __post_init__(self) -> None:
        if len(self.seed) < 7 or any(ch not in "0123456789abcdefABCDEF" for ch in self.seed):
            raise ChartConfigError("seed must be a hex string of at least 7 characters")

    def color_at(self, index: int) -> Color:
        start = index % (len(self.seed) - 4)
        value = int(self.seed[start : start + 3], 16)
        return ((value >> 8) * 17, (value >> 4 & 0xF) * 17, (value & 0xF) * 17, 255)


@dataclass(frozen=True)
class RepeatingColorSet:
    colors: tuple[Color, ...]

    def __init__(self, colors: Sequence[Color]) -> None:
        if not colors:
            raise ChartConfigError("RepeatingColorSet needs at least one color")
        object.__setattr__(self, "colors", tuple(colors))

    def color_at(self, index: int) -> Color:
        return self.colors[index % len(self.colors)]
