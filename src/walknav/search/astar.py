# search/astar.py
"""
Generic A* over any graph exposing ``neighbours(n)``.

Queue entries carry the whole path walked so far rather than a back-pointer
map, and every extension copies it. Memory therefore grows with
path length x queue size. Location graphs hold tens of nodes, where this is
negligible; for dense graphs swap in a parent map and reverse walk, which
yields the same paths.
"""

import heapq
import itertools
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic

from walknav.app.protocols import CostFunc, Graph, Node


@dataclass(frozen=True)
class Path(Generic[Node]):
    nodes: tuple[Node, ...]

    def __len__(self) -> int:
        return len(self.nodes)

    def last(self) -> Node:
        return self.nodes[-1]

    def cont(self, n: Node) -> "Path[Node]":
        """New path continuing this one with node n."""
        return Path(self.nodes + (n,))

    def cost(self, d: CostFunc) -> float:
        c = 0.0
        for i in range(1, len(self.nodes)):
            c += d(self.nodes[i - 1], self.nodes[i])
        return c

    def as_list(self) -> list[Node]:
        return list(self.nodes)


def path_cost(nodes: Sequence[Node], d: CostFunc) -> float:
    return Path(tuple(nodes)).cost(d)


def find_path(
    g: Graph[Node], start: Node, dest: Node, d: CostFunc, h: CostFunc
) -> Path[Node] | None:
    """
    Least-cost path from start to dest in g under cost d and heuristic h.
    h must not overestimate for the result to be optimal.
    Returns None if dest is unreachable.
    """
    closed: set[Node] = set()
    tie = itertools.count()  # FIFO among equal estimates
    # (estimated total, seq, cost so far, path)
    q: list[tuple[float, int, float, Path[Node]]] = [(0.0, next(tie), 0.0, Path((start,)))]

    while q:
        _, _, g_cost, p = heapq.heappop(q)
        n = p.last()
        if n in closed:
            continue
        if n == dest:
            return p
        closed.add(n)

        for nb in g.neighbours(n):
            c = g_cost + d(n, nb)
            heapq.heappush(q, (c + h(nb, dest), next(tie), c, p.cont(nb)))

    return None
