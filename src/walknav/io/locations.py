# io/locations.py
"""
Walkable areas are authored as comma-separated coordinate strings, one per
polygon, e.g. "186.5,364.7,303.25,374,303.1,412".
"""

from collections.abc import Iterable

from walknav.domain.entities.geometry import Vec2
from walknav.domain.entities.polygon import Polygon, PolygonSet


def parse_floats(s: str) -> list[float]:
    """Numbers of a comma-separated string. Spaces are ignored; "" gives []."""
    tokens = [tok.strip() for tok in s.split(",")]
    if len(tokens) == 1 and not tokens[0]:
        return []
    return [float(tok) for tok in tokens]


def parse_polygon(coords: str) -> Polygon:
    """x,y pairs to a polygon. A trailing odd value is ignored."""
    fs = parse_floats(coords)
    return Polygon(tuple(Vec2(fs[i], fs[i + 1]) for i in range(0, len(fs) - 1, 2)))


def parse_polygons(coords: Iterable[str]) -> PolygonSet:
    return PolygonSet(tuple(parse_polygon(cs) for cs in coords))


def format_polygon(p: Polygon) -> str:
    return ",".join(f"{c:g}" for v in p for c in v)
