import math
from collections.abc import Iterable, Sequence
from enum import Enum

from walknav.domain.entities.geometry import LineSeg, Vec2
from walknav.domain.entities.polygon import Polygon, PolygonSet


class AdjacencyGraph(dict[Vec2, list[Vec2]]):
    """Adjacency list keyed by node. Satisfies the A* Graph protocol."""

    def link(self, a: Vec2, b: Vec2) -> "AdjacencyGraph":
        """Add a directed edge a -> b."""
        self.setdefault(a, []).append(b)
        return self

    def neighbours(self, n: Vec2) -> Iterable[Vec2]:
        return iter(self.get(n, ()))

    def edge_count(self) -> int:
        return sum(len(nbs) for nbs in self.values())


def node_dist(a: Vec2, b: Vec2) -> float:
    """Straight-line distance; visibility graph edges are straight walks."""
    return math.hypot(b.x - a.x, b.y - a.y)


class VertexKind(Enum):
    CONCAVE = "concave"
    CONVEX = "convex"


def is_hole(ps: PolygonSet, i: int) -> bool:
    """Polygon i is a hole if an odd number of the other polygons contain it."""
    if not ps[i].vertices:
        return False
    probe = ps[i][0]
    hole = False
    for j, p in enumerate(ps):
        if i != j and p.contains(probe, False):
            hole = not hole
    return hole


def vertices_of_kind(p: Polygon, kind: VertexKind) -> list[Vec2]:
    want_concave = kind is VertexKind.CONCAVE
    return [v for i, v in enumerate(p) if p.is_concave_at(i) == want_concave]


def feature_vertices(ps: PolygonSet) -> list[Vec2]:
    """
    Vertices a shortest path may bend around: corners poking into free space,
    i.e. concave corners of walkable polygons and convex corners of holes.
    """
    vs: list[Vec2] = []
    for i, p in enumerate(ps):
        kind = VertexKind.CONVEX if is_hole(ps, i) else VertexKind.CONCAVE
        vs.extend(vertices_of_kind(p, kind))
    return vs


def in_line_of_sight(ps: PolygonSet, start: Vec2, end: Vec2) -> bool:
    sight = LineSeg(start, end)
    for p in ps:
        if p.is_crossed_by(sight):
            return False
    # rejects chords that leave the region without crossing an edge
    return ps.contains(sight.middle())


def visibility_graph(ps: PolygonSet, points: Sequence[Vec2]) -> AdjacencyGraph:
    vis = AdjacencyGraph()
    for i, a in enumerate(points):
        for j, b in enumerate(points):
            if i == j:
                continue
            if in_line_of_sight(ps, a, b):
                vis.link(a, b)
    return vis
