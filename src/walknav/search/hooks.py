# search/hooks.py
from typing import Protocol

from walknav.domain.entities.geometry import Vec2


class SearchHooks(Protocol):
    def query_start(self, *, location: str, start: Vec2, dest: Vec2): ...
    def endpoint_clamped(self, *, location: str, which: str, original: Vec2, clamped: Vec2): ...
    def graph_built(self, *, location: str, nodes: int, edges: int): ...
    def query_end(self, *, location: str, waypoints: list[Vec2], cost: float, ms: float): ...
    def no_path(self, *, location: str, start: Vec2, dest: Vec2, reason: str): ...


class NoopHooks:
    def query_start(self, **_):
        pass

    def endpoint_clamped(self, **_):
        pass

    def graph_built(self, **_):
        pass

    def query_end(self, **_):
        pass

    def no_path(self, **_):
        pass
