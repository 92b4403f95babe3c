# runtime/registries.py
from collections.abc import Callable

from walknav.app.protocols import CostFunc
from walknav.config.models import SearchModel
from walknav.domain.entities.geometry import Vec2
from walknav.domain.navigation.visibility import node_dist

_cost_registry: dict[str, CostFunc] = {}
_heuristic_registry: dict[str, CostFunc] = {}


# ------------------- Edge costs ---------------------------


def register_cost(kind: str) -> Callable[[CostFunc], CostFunc]:
    def deco(fn: CostFunc):
        _cost_registry[kind] = fn
        return fn

    return deco


def make_cost(kind: str) -> CostFunc:
    try:
        return _cost_registry[kind]
    except KeyError:
        raise ValueError(f"Unknown cost kind {kind!r}")


register_cost("euclidean")(node_dist)


# ------------------- Heuristics ---------------------------


def register_heuristic(kind: str) -> Callable[[CostFunc], CostFunc]:
    def deco(fn: CostFunc):
        _heuristic_registry[kind] = fn
        return fn

    return deco


def make_heuristic(kind: str) -> CostFunc:
    try:
        return _heuristic_registry[kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic kind {kind!r}")


register_heuristic("euclidean")(node_dist)


@register_heuristic("zero")
def no_estimate(a: Vec2, b: Vec2) -> float:
    # degrades A* to Dijkstra
    return 0.0


def make_search(cfg: SearchModel) -> tuple[CostFunc, CostFunc]:
    return make_cost(cfg.cost), make_heuristic(cfg.heuristic)
