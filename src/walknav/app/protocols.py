from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Protocol, TypeVar, runtime_checkable

from walknav.domain.entities.geometry import Pt, Vec2

Node = TypeVar("Node", bound=Hashable)

# Cost of the transition from node a to node b. Also the shape of A* heuristics.
CostFunc = Callable[[Node, Node], float]


# ------------- Search --------------------
@runtime_checkable
class Graph(Protocol[Node]):
    """
    Minimal graph surface needed by the A* search.
    Nodes must be hashable and compare by value.
    """

    def neighbours(self, n: Node) -> Iterable[Node]: ...


# ------------- Navigation --------------------
@runtime_checkable
class PathPlanner(Protocol):
    """
    Responsibilities:
      • Find the shortest walkable path between two points of one location.
      • Expose the last search graph for debug overlays.
    Units: scene pixels.
    """

    def path(self, start: Pt, dest: Pt) -> list[Vec2]: ...
    def visibility_graph(self) -> Mapping[Vec2, list[Vec2]] | None: ...
