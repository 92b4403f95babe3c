import math

import numpy as np

from walknav.search.astar import Path, find_path, path_cost


class DictGraph:
    def __init__(self, adj: dict):
        self.adj = adj

    def neighbours(self, n):
        return self.adj.get(n, [])


def _zero(a, b):
    return 0.0


# ---------- Basic behaviour


def test_prefers_cheaper_detour():
    w = {("s", "a"): 1.0, ("a", "t"): 1.0, ("s", "t"): 5.0}
    g = DictGraph({"s": ["t", "a"], "a": ["t"]})
    p = find_path(g, "s", "t", lambda a, b: w[(a, b)], _zero)
    assert p.nodes == ("s", "a", "t")
    assert p.cost(lambda a, b: w[(a, b)]) == 2.0


def test_start_equals_dest():
    p = find_path(DictGraph({}), 3, 3, _zero, _zero)
    assert p == Path((3,))


def test_unreachable_returns_none():
    g = DictGraph({1: [2], 2: [1], 3: [4]})
    assert find_path(g, 1, 4, lambda a, b: 1.0, _zero) is None


def test_cycles_terminate():
    g = DictGraph({1: [2], 2: [1, 3], 3: [2]})
    p = find_path(g, 1, 3, lambda a, b: 1.0, _zero)
    assert p.as_list() == [1, 2, 3]


def test_path_helpers():
    p = Path(("a",)).cont("b").cont("c")
    assert p.last() == "c" and len(p) == 3
    assert path_cost(["a", "b", "c"], lambda a, b: 2.5) == 5.0
    assert Path(("a",)).cost(lambda a, b: 1.0) == 0.0


# ---------- Optimality vs brute force


def _brute_force_min(adj, w, start, dest):
    best = math.inf

    def walk(n, seen, c):
        nonlocal best
        if n == dest:
            best = min(best, c)
            return
        for nb in adj.get(n, []):
            if nb not in seen:
                walk(nb, seen | {nb}, c + w[(n, nb)])

    walk(start, {start}, 0.0)
    return best


def test_optimal_on_random_small_graphs():
    rng = np.random.default_rng(2024)
    for _ in range(200):
        n = int(rng.integers(2, 11))
        pos = rng.uniform(0.0, 100.0, size=(n, 2))
        adj: dict[int, list[int]] = {}
        w: dict[tuple[int, int], float] = {}
        for i in range(n):
            for j in range(n):
                if i != j and rng.random() < 0.35:
                    # edge weight never below the straight-line distance
                    d = float(np.hypot(*(pos[i] - pos[j])))
                    w[(i, j)] = d * float(rng.uniform(1.0, 3.0))
                    adj.setdefault(i, []).append(j)

        def h(a, b):
            return float(np.hypot(*(pos[a] - pos[b])))

        def cost(a, b):
            return w[(a, b)]

        expected = _brute_force_min(adj, w, 0, n - 1)
        p = find_path(DictGraph(adj), 0, n - 1, cost, h)
        if math.isinf(expected):
            assert p is None
        else:
            assert p.nodes[0] == 0 and p.last() == n - 1
            assert abs(p.cost(cost) - expected) < 1e-9


def test_zero_heuristic_matches_brute_force():
    rng = np.random.default_rng(7)
    for _ in range(100):
        n = 6
        adj = {i: [j for j in range(n) if j != i and rng.random() < 0.5] for i in range(n)}
        w = {(i, j): float(rng.uniform(0.1, 10.0)) for i in adj for j in adj[i]}
        expected = _brute_force_min(adj, w, 0, n - 1)
        p = find_path(DictGraph(adj), 0, n - 1, lambda a, b: w[(a, b)], _zero)
        if math.isinf(expected):
            assert p is None
        else:
            assert abs(p.cost(lambda a, b: w[(a, b)]) - expected) < 1e-9
