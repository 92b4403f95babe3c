# walknav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from walknav.config.models import NavModel
from walknav.domain.entities.geometry import Pt, Vec2
from walknav.domain.navigation.pathfinder import Pathfinder
from walknav.io.nav_logging import NavLogging  # JSON logs
from walknav.runtime.registries import make_search
from walknav.search.hooks import NoopHooks, SearchHooks


@dataclass
class App:
    model: NavModel
    hooks: SearchHooks
    pathfinders: dict[str, Pathfinder]

    def pathfinder(self, location_id: str) -> Pathfinder:
        return self.pathfinders[location_id]  # raises KeyError if unknown

    def path(self, location_id: str, start: Pt, dest: Pt) -> list[Vec2]:
        return self.pathfinder(location_id).path(start, dest)


def build(cfg: NavModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, NavModel) else NavModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        NavLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Search functions
    cost, heuristic = make_search(model.search)

    # 3) One pathfinder per location, feature vertices precomputed here
    pathfinders = {
        loc.id: Pathfinder(
            loc.polygon_set(),
            cost=cost,
            heuristic=heuristic,
            lattice_step=model.pathfinder.lattice_step,
            snap_to_lattice=model.pathfinder.snap_to_lattice,
            hooks=hooks,
            name=loc.id,
        )
        for loc in model.locations
    }

    return App(model, hooks, pathfinders)
