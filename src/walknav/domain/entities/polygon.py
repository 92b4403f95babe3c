from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from walknav.domain.entities.geometry import Line, LineSeg, Pt, Vec2, to_vec2


@dataclass(frozen=True)
class Polygon:
    """
    Closed loop of vertices. Edge i runs from vertex i to vertex (i+1) mod n;
    the first vertex is not repeated at the end.
    Winding order is whatever the author used and is never normalized.
    """

    vertices: tuple[Vec2, ...]

    @classmethod
    def of(cls, points: Iterable[Pt]) -> "Polygon":
        return cls(tuple(to_vec2(p) for p in points))

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vec2]:
        return iter(self.vertices)

    def __getitem__(self, i: int) -> Vec2:
        return self.vertices[i]

    def reversed(self) -> "Polygon":
        return Polygon(self.vertices[::-1])

    def wrap_index(self, i: int) -> int:
        n = len(self.vertices)
        return ((i % n) + n) % n

    def edge(self, i: int) -> LineSeg:
        return LineSeg(self.vertices[i], self.vertices[(i + 1) % len(self.vertices)])

    def edges(self) -> Iterator[LineSeg]:
        for i in range(len(self.vertices)):
            yield self.edge(i)

    def contains(self, pt: Vec2, tolerance_on_outside: bool) -> bool:
        # Ray casting: a ray from pt to the east crossing an odd number of
        # edges means pt is inside. Points on an edge get the tie-break value.
        inside = False
        for edge in self.edges():
            if edge.closest_pt(pt).near_eq(pt):
                return tolerance_on_outside
            if _h_ray_intersects(pt, edge):
                inside = not inside
        return inside

    def is_crossed_by(self, ls: LineSeg) -> bool:
        for i, v in enumerate(self.vertices):
            if ls.a == v or ls.b == v:
                continue
            if ls.crosses(self.edge(i)):
                return True
            if ls.closest_pt(v) == v:
                # the segment runs through vertex v: it pierces the boundary
                # unless both adjacent edges stay on the same side
                prev = self.vertices[self.wrap_index(i - 1)]
                nxt = self.vertices[self.wrap_index(i + 1)]
                line = Line(ls)
                if line.side(prev) != line.side(nxt):
                    return True
        return False

    def closest_pt(self, pt: Vec2) -> Vec2 | None:
        """Closest point to pt on the outline, None for an empty polygon."""
        if not self.vertices:
            return None
        best, best_d = self.vertices[0], self.vertices[0].sq_dist(pt)
        for edge in self.edges():
            q = edge.closest_pt(pt)
            d = q.sq_dist(pt)
            if d < best_d:
                best, best_d = q, d
        return best

    def is_concave_at(self, i: int) -> bool:
        v = self.vertices[i]
        prev = self.vertices[self.wrap_index(i - 1)]
        nxt = self.vertices[self.wrap_index(i + 1)]
        return v.sub(prev).cross_len(nxt.sub(v)) < 0


def _h_ray_intersects(p: Vec2, ls: LineSeg) -> bool:
    """Does a horizontal ray from p to the right hit the segment?"""
    # endpoints on different sides of the horizontal line through p
    if (ls.a.y >= p.y) == (ls.b.y >= p.y):
        return False
    h_ray = Line(LineSeg(p, Vec2(p.x + 1, p.y)))
    q, _ = h_ray.intersect(Line(ls))
    return p.x <= q.x


@dataclass(frozen=True)
class PolygonSet:
    """
    Polygons describing a walkable region. Nesting alternates between area
    and hole: top-level polygons are walkable, polygons inside them are holes,
    polygons inside holes are walkable again.
    """

    polygons: tuple[Polygon, ...] = ()

    @classmethod
    def of(cls, polygons: Iterable[Polygon | Sequence[Pt]]) -> "PolygonSet":
        return cls(tuple(p if isinstance(p, Polygon) else Polygon.of(p) for p in polygons))

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)

    def __getitem__(self, i: int) -> Polygon:
        return self.polygons[i]

    def contains(self, pt: Vec2) -> bool:
        inside = False
        for p in self.polygons:
            # boundary ties resolve towards walkable given the parity so far
            if p.contains(pt, not inside):
                inside = not inside
        return inside

    def closest_pt(self, pt: Vec2) -> Vec2 | None:
        best, best_d = None, 0.0
        for p in self.polygons:
            q = p.closest_pt(pt)
            if q is None:
                continue
            d = q.sq_dist(pt)
            if best is None or d < best_d:
                best, best_d = q, d
        return best

    def bounds(self) -> tuple[Vec2, Vec2] | None:
        lo = hi = None
        for p in self.polygons:
            for v in p:
                lo = v if lo is None else lo.min(v)
                hi = v if hi is None else hi.max(v)
        return None if lo is None else (lo, hi)
