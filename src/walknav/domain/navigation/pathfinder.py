import time
from collections.abc import Mapping, Sequence

from walknav.app.protocols import CostFunc, PathPlanner
from walknav.domain.entities.geometry import Pt, Vec2, to_vec2
from walknav.domain.entities.polygon import Polygon, PolygonSet
from walknav.domain.navigation.visibility import (
    AdjacencyGraph,
    feature_vertices,
    node_dist,
    visibility_graph,
)
from walknav.search.astar import find_path
from walknav.search.hooks import NoopHooks, SearchHooks


class Pathfinder(PathPlanner):
    """
    Shortest walkable paths inside one location.

    The polygon set is fixed at construction; nested polygons alternate
    between walkable area and hole. Feature vertices are computed once,
    the start/destination part of the visibility graph is rebuilt per query.
    """

    def __init__(
        self,
        polygons: PolygonSet | Sequence[Polygon | Sequence[Pt]],
        *,
        cost: CostFunc = node_dist,
        heuristic: CostFunc = node_dist,
        lattice_step: float = 1.0,
        snap_to_lattice: bool = True,
        hooks: SearchHooks | None = None,
        name: str = "location",
    ):
        self.polygon_set = polygons if isinstance(polygons, PolygonSet) else PolygonSet.of(polygons)
        self.cost, self.heuristic = cost, heuristic
        self.lattice_step, self.snap_to_lattice = lattice_step, snap_to_lattice
        self.name = name
        self._hooks = hooks or NoopHooks()
        self._features = tuple(feature_vertices(self.polygon_set))
        self._graph: AdjacencyGraph | None = None

    @property
    def feature_vertices(self) -> tuple[Vec2, ...]:
        return self._features

    def visibility_graph(self) -> Mapping[Vec2, list[Vec2]] | None:
        """Graph of the last path query, for debug overlays only."""
        return self._graph

    def path(self, start: Pt, dest: Pt) -> list[Vec2]:
        """
        Shortest path from start to dest as a list of waypoints, both ends
        included. Endpoints outside the region are clamped to its nearest
        boundary point. An empty list means there is no path.
        """
        t0 = time.perf_counter()
        s, d = to_vec2(start), to_vec2(dest)
        self._hooks.query_start(location=self.name, start=s, dest=d)

        if not self.polygon_set:
            self._hooks.no_path(location=self.name, start=s, dest=d, reason="empty_region")
            return []

        d = self._clamp("dest", d)
        s = self._clamp("start", s)

        self._graph = visibility_graph(self.polygon_set, [*self._features, s, d])
        self._hooks.graph_built(
            location=self.name, nodes=len(self._features) + 2, edges=self._graph.edge_count()
        )

        found = find_path(self._graph, s, d, self.cost, self.heuristic)
        if found is None:
            self._hooks.no_path(location=self.name, start=s, dest=d, reason="unreachable")
            return []
        self._hooks.query_end(
            location=self.name,
            waypoints=found.as_list(),
            cost=found.cost(self.cost),
            ms=(time.perf_counter() - t0) * 1000,
        )
        return found.as_list()

    # --------------- Helpers -----------------------------

    def _clamp(self, which: str, pt: Vec2) -> Vec2:
        if self.polygon_set.contains(pt):
            return pt
        q = self.polygon_set.closest_pt(pt)
        if q is None:
            return pt
        if self.snap_to_lattice:
            q = snap(q, self.lattice_step)
        q = ensure_inside(self.polygon_set, q, self.lattice_step)
        self._hooks.endpoint_clamped(location=self.name, which=which, original=pt, clamped=q)
        return q


def snap(pt: Vec2, step: float = 1.0) -> Vec2:
    """Round pt to the nearest lattice point."""
    return Vec2(round(pt.x / step) * step, round(pt.y / step) * step)


def ensure_inside(ps: PolygonSet, pt: Vec2, step: float = 1.0) -> Vec2:
    """
    Nudge a boundary point into the region by trying its 8 lattice neighbours.
    Returns pt unchanged if it is already inside or no neighbour is.
    """
    if ps.contains(pt):
        return pt
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            npt = Vec2(pt.x + dx * step, pt.y + dy * step)
            if ps.contains(npt):
                return npt
    return pt
