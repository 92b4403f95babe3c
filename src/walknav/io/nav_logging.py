# io/nav_logging.py
import json
import logging
import sys

from walknav.search.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="walknav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


def _xy(p) -> list[float]:
    return [p.x, p.y]


class NavLogging(NoopHooks):
    """
    Structured JSON logs for path queries.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)
        self.queries = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def query_start(self, *, location: str, start, dest):
        self.queries += 1
        if self.debug:
            self._emit("DEBUG", "query_start", location=location, start=_xy(start), dest=_xy(dest))

    def endpoint_clamped(self, *, location: str, which: str, original, clamped):
        self._emit(
            "INFO",
            "endpoint_clamped",
            location=location,
            which=which,
            original=_xy(original),
            clamped=_xy(clamped),
        )

    def graph_built(self, *, location: str, nodes: int, edges: int):
        if self.debug:
            self._emit("DEBUG", "graph_built", location=location, nodes=nodes, edges=edges)

    def query_end(self, *, location: str, waypoints, cost: float, ms: float):
        self._emit(
            "INFO",
            "query_end",
            location=location,
            waypoints=[_xy(p) for p in waypoints],
            cost=round(cost, 3),
            ms=round(ms, 3),
        )

    def no_path(self, *, location: str, start, dest, reason: str):
        self._emit(
            "WARNING", "no_path", location=location, start=_xy(start), dest=_xy(dest), reason=reason
        )
