import math
from collections.abc import Sequence

import numpy as np

from walknav.domain.entities.geometry import Pt, to_vec2

Pixel = tuple[int, int]


def _pixel(p: Pt) -> Pixel:
    v = to_vec2(p)
    return int(round(v.x)), int(round(v.y))


def pixel_line(a: Pt, b: Pt) -> list[Pixel]:
    """
    Integer pixels from a to b inclusive (Bresenham), ordered from a.

    The line is always traced left to right and reversed afterwards when a
    lies right of b, so pixel_line(b, a) is pixel_line(a, b) backwards.
    """
    (x1, y1), (x2, y2) = _pixel(a), _pixel(b)
    reverse = False
    if x1 > x2:
        x1, y1, x2, y2 = x2, y2, x1, y1
        reverse = True
    dx, dy = x2 - x1, abs(y2 - y1)
    sy = 1 if y1 < y2 else -1

    if dx == 0 and dy == 0:
        pts = [(x1, y1)]
    elif dy == 0:
        pts = [(x, y1) for x in range(x1, x2 + 1)]
    elif dx == 0:
        if y1 > y2:
            y1, y2 = y2, y1
            reverse = True
        pts = [(x1, y) for y in range(y1, y2 + 1)]
    elif dx == dy:
        pts = [(x1 + i, y1 + i * sy) for i in range(dx + 1)]
    elif dx > dy:
        # wider than high: one pixel per column
        pts, x, y, e = [], x1, y1, dx
        for _ in range(dx):
            pts.append((x, y))
            x += 1
            e -= 2 * dy
            if e < 0:
                y += sy
                e += 2 * dx
        pts.append((x2, y2))
    else:
        # higher than wide: one pixel per row
        pts, x, y, e = [], x1, y1, dy
        for _ in range(dy):
            pts.append((x, y))
            y += sy
            e -= 2 * dx
            if e < 0:
                x += 1
                e += 2 * dy
        pts.append((x2, y2))

    if reverse:
        pts.reverse()
    return pts


class PixelWalker:
    """
    Frame-by-frame walk along a waypoint list.

    Each update advances `step` pixels along the current leg's pixel line.
    A leg that would be overshot ends exactly on its waypoint, and the next
    update starts on the following leg.
    """

    def __init__(self, waypoints: Sequence[Pt], step: int = 2):
        if step < 1:
            raise ValueError(f"step must be >= 1, got {step}")
        self.waypoints = [_pixel(p) for p in waypoints]
        self.step = step
        self.leg = 0
        self._index = 0
        self._line: list[Pixel] = []
        self.pos: Pixel | None = self.waypoints[0] if self.waypoints else None
        self._start_leg()

    @property
    def done(self) -> bool:
        return self.leg >= len(self.waypoints) - 1

    def _start_leg(self) -> None:
        # skip zero-length legs, they would stall a frame
        while not self.done and self.waypoints[self.leg] == self.waypoints[self.leg + 1]:
            self.leg += 1
        self._index = 0
        self._line = [] if self.done else pixel_line(self.waypoints[self.leg], self.waypoints[self.leg + 1])

    def update(self) -> Pixel | None:
        """Advance one frame and return the new position."""
        if self.done:
            return self.pos
        self._index += self.step
        if self._index >= len(self._line) - 1:
            self.pos = self._line[-1]
            self.leg += 1
            self._start_leg()
        else:
            self.pos = self._line[self._index]
        return self.pos

    def heading(self) -> float | None:
        """Heading of the current leg, None once the walk is over."""
        if self.done:
            return None
        return heading_deg(self.waypoints[self.leg], self.waypoints[self.leg + 1])


def walk_frames(waypoints: Sequence[Pt], step: int = 2) -> np.ndarray:
    """
    Every position a PixelWalker passes through, starting position included.
    Shape (n, 2), integer pixels. Empty waypoints give shape (0, 2).
    """
    if step < 1:
        raise ValueError(f"step must be >= 1, got {step}")
    pixels = [_pixel(p) for p in waypoints]
    if not pixels:
        return np.empty((0, 2), dtype=int)
    frames = [np.array([pixels[0]], dtype=int)]
    for a, b in zip(pixels, pixels[1:]):
        if a == b:
            continue
        line = np.asarray(pixel_line(a, b), dtype=int)
        frames.append(line[step : len(line) - 1 : step])
        frames.append(line[-1:])
    return np.concatenate(frames)


def heading_deg(a: Pt, b: Pt) -> float:
    """Direction of travel from a to b in degrees, y axis pointing down."""
    p, q = to_vec2(a), to_vec2(b)
    return math.degrees(math.atan2(q.y - p.y, q.x - p.x))
