from __future__ import annotations

from dataclasses import dataclass
import enum

from chartui_layout.geometry import EdgeInsets


DEFAULT_INSET_LENGTH = 8.0


class Edge(enum.IntFlag):
    TOP = 1
    LEADING = 2
    BOTTOM = 4
    TRAILING = 8
    HORIZONTAL = LEADING | TRAILING
    VERTICAL = TOP | BOTTOM
    ALL = TOP | LEADING | BOTTOM | TRAILING


_KEYS = (Edge.TOP, Edge.LEADING, Edge.BOTTOM, Edge.TRAILING, Edge.HORIZONTAL, Edge.VERTICAL, Edge.ALL)
_SINGLE_EDGES = (Edge.TOP, Edge.LEADING, Edge.BOTTOM, Edge.TRAILING)


@dataclass(frozen=True)
class ChartInsets:
    """Accumulated inset declarations, resolved per edge on demand.

    Each edge resolves to its own declaration, then its axis group, then
    ``Edge.ALL``, then 0.
    """

    declarations: tuple[tuple[Edge, float], ...] = ()

    def with_inset(self, edges: Edge = Edge.ALL, length: float = DEFAULT_INSET_LENGTH) -> ChartInsets:
        edges = Edge(edges)
        keys = (edges,) if edges in _KEYS else tuple(edge for edge in _SINGLE_EDGES if edge & edges)
        table = dict(self.declarations)
        for key in keys:
            table.pop(key, None)
            table[key] = float(length)
        return ChartInsets(tuple(table.items()))

    def with_edge_insets(self, insets: EdgeInsets) -> ChartInsets:
        return ChartInsets(
            (
                (Edge.TOP, float(insets.top)),
                (Edge.LEADING, float(insets.leading)),
                (Edge.BOTTOM, float(insets.bottom)),
                (Edge.TRAILING, float(insets.trailing)),
            )
        )

    def length(self, edge: Edge) -> float:
        table = dict(self.declarations)
        group = Edge.VERTICAL if edge in (Edge.TOP, Edge.BOTTOM) else Edge.HORIZONTAL
        for key in (edge, group, Edge.ALL):
            if key in table:
                return table[key]
        return 0.0

    def resolve(self) -> EdgeInsets:
        return EdgeInsets(
            top=self.length(Edge.TOP),
            leading=self.length(Edge.LEADING),
            bottom=self.length(Edge.BOTTOM),
            trailing=self.length(Edge.TRAILING),
        )


def resolve_insets(insets: ChartInsets | EdgeInsets | None) -> EdgeInsets:
    if insets is None:
        return EdgeInsets()
    if isinstance(insets, ChartInsets):
        return insets.resolve()
    return insets
