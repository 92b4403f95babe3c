import json

import pytest
from pydantic import ValidationError

from walknav.app.build import build
from walknav.config.models import LocationModel, NavModel, SearchModel
from walknav.domain.entities.geometry import Vec2
from walknav.io.config import load_config
from walknav.io.nav_logging import NavLogging
from walknav.runtime.registries import make_cost, make_heuristic, make_search, node_dist
from walknav.search.hooks import NoopHooks


def _cfg(**overrides) -> dict:
    cfg = {
        "name": "test",
        "run_id": "t1",
        "locations": [
            {
                "id": "hall",
                "polygons": ["0,0,100,0,100,100,0,100", [[40, 40], [60, 40], [60, 60], [40, 60]]],
            },
            {"id": "yard", "polygons": ["0,0,50,0,50,50,0,50"]},
        ],
    }
    cfg.update(overrides)
    return cfg


def test_build_and_query():
    app = build(_cfg(), use_logging=False)
    assert isinstance(app.hooks, NoopHooks)
    assert set(app.pathfinders) == {"hall", "yard"}
    assert len(app.pathfinder("hall").feature_vertices) == 4

    path = app.path("hall", (10, 10), (90, 90))
    assert path[0] == Vec2(10.0, 10.0) and path[-1] == Vec2(90.0, 90.0) and len(path) == 3
    assert app.path("yard", (5, 5), (45, 45)) == [Vec2(5.0, 5.0), Vec2(45.0, 45.0)]


def test_unknown_location_raises():
    app = build(_cfg(), use_logging=False)
    with pytest.raises(KeyError):
        app.path("attic", (0, 0), (1, 1))


def test_logging_hooks_by_default():
    app = build(_cfg(log={"level": "WARNING"}))
    assert isinstance(app.hooks, NavLogging)
    assert app.pathfinder("hall")._hooks is app.hooks


def test_pathfinder_settings_flow_through():
    app = build(_cfg(pathfinder={"lattice_step": 0.5, "snap_to_lattice": False}), use_logging=False)
    pf = app.pathfinder("yard")
    assert pf.lattice_step == 0.5 and not pf.snap_to_lattice


# ---------- Config validation


def test_duplicate_location_ids_rejected():
    cfg = _cfg(locations=[{"id": "a"}, {"id": "a"}])
    with pytest.raises(ValidationError):
        NavModel.model_validate(cfg)


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        NavModel.model_validate(_cfg(colour="blue"))


def test_bad_coordinate_string_rejected():
    with pytest.raises(ValidationError):
        LocationModel(id="x", polygons=["0,0,ten,0,10,10"])


def test_lattice_step_must_be_positive():
    with pytest.raises(ValidationError):
        NavModel.model_validate(_cfg(pathfinder={"lattice_step": 0}))


def test_location_polygon_set():
    loc = LocationModel(id="x", polygons=["0,0,10,0,0,10", [[1, 1], [2, 1], [1, 2]]])
    ps = loc.polygon_set()
    assert len(ps) == 2
    assert ps[0][1] == Vec2(10.0, 0.0) and ps[1][2] == Vec2(1.0, 2.0)


def test_load_config(tmp_path):
    p = tmp_path / "nav.json"
    p.write_text(json.dumps(_cfg()), encoding="utf-8")
    model = load_config(p)
    assert model.name == "test" and [loc.id for loc in model.locations] == ["hall", "yard"]


def test_load_config_reports_bad_json_as_validation_error(tmp_path):
    p = tmp_path / "broken.json"
    p.write_text('{"name": "test", "locations": [', encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(p)
    p.write_text(json.dumps(_cfg(locations=[{"id": "x", "polygons": ["0,0,a"]}])), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(str(p))


# ---------- Registries


def test_registries():
    assert make_cost("euclidean") is node_dist
    assert make_heuristic("zero")(Vec2(0.0, 0.0), Vec2(3.0, 4.0)) == 0.0
    assert node_dist(Vec2(0.0, 0.0), Vec2(3.0, 4.0)) == 5.0
    cost, h = make_search(SearchModel(heuristic="zero"))
    assert cost is node_dist and h(Vec2(0.0, 0.0), Vec2(1.0, 1.0)) == 0.0
    with pytest.raises(ValueError):
        make_cost("manhattan")
    with pytest.raises(ValueError):
        make_heuristic("psychic")
