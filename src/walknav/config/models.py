from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from walknav.domain.entities.geometry import Vec2
from walknav.domain.entities.polygon import Polygon, PolygonSet
from walknav.io.locations import parse_polygon


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    cost: Literal["euclidean"] = "euclidean"
    heuristic: Literal["euclidean", "zero"] = "euclidean"


class PathfinderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    lattice_step: float = Field(default=1.0, gt=0)
    snap_to_lattice: bool = True


# ----------------- LOCATIONS ---------------------


class LocationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: str
    # "x0,y0,x1,y1,..." or [[x0, y0], [x1, y1], ...] per polygon
    polygons: list[str | list[tuple[float, float]]] = Field(default_factory=list)

    @field_validator("polygons")
    @classmethod
    def _check_coords(cls, v):
        for i, poly in enumerate(v):
            if isinstance(poly, str):
                try:
                    parse_polygon(poly)
                except ValueError as e:
                    raise ValueError(f"polygon {i}: bad coordinate string ({e})") from e
        return v

    def polygon_set(self) -> PolygonSet:
        polys = []
        for poly in self.polygons:
            if isinstance(poly, str):
                polys.append(parse_polygon(poly))
            else:
                polys.append(Polygon(tuple(Vec2(float(x), float(y)) for x, y in poly)))
        return PolygonSet(tuple(polys))


# ------------------------------------------------------------------


class NavModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    search: SearchModel = SearchModel()
    pathfinder: PathfinderModel = PathfinderModel()
    locations: list[LocationModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self):
        seen = set()
        for loc in self.locations:
            if loc.id in seen:
                raise ValueError(f"duplicate location id {loc.id!r}")
            seen.add(loc.id)
        return self
