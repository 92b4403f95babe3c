import math
from dataclasses import dataclass

EPSILON = 1e-5


# Core geometry types used by navigation
@dataclass(frozen=True)
class Vec2:
    x: float  # scene pixels
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)})"

    def add(self, w: "Vec2") -> "Vec2":
        return Vec2(self.x + w.x, self.y + w.y)

    def sub(self, w: "Vec2") -> "Vec2":
        return Vec2(self.x - w.x, self.y - w.y)

    def mul(self, s: float) -> "Vec2":
        return Vec2(self.x * s, self.y * s)

    def div(self, s: float) -> "Vec2":
        return Vec2(self.x / s, self.y / s)

    def neg(self) -> "Vec2":
        return self.mul(-1)

    def dot(self, w: "Vec2") -> float:
        return self.x * w.x + self.y * w.y

    def cross_len(self, w: "Vec2") -> float:
        """Z component of the 3D cross product of v and w."""
        return self.x * w.y - self.y * w.x

    def comp_mul(self, w: "Vec2") -> "Vec2":
        return Vec2(self.x * w.x, self.y * w.y)

    def comp_div(self, w: "Vec2") -> "Vec2":
        return Vec2(self.x / w.x, self.y / w.y)

    def sq_len(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.sq_len())

    def sq_dist(self, w: "Vec2") -> float:
        return self.sub(w).sq_len()

    def dist(self, w: "Vec2") -> float:
        return self.sub(w).length()

    def norm(self) -> "Vec2":
        n = self.length()
        return V2_ZERO if n == 0 else self.div(n)

    def reflect(self, n: "Vec2") -> "Vec2":
        """Reflection of v given a normal n."""
        return self.sub(n.mul(2 * self.dot(n)))

    def lerp(self, w: "Vec2", t: float) -> "Vec2":
        return Vec2(lerp(self.x, w.x, t), lerp(self.y, w.y, t))

    def min(self, w: "Vec2") -> "Vec2":
        return Vec2(min(self.x, w.x), min(self.y, w.y))

    def max(self, w: "Vec2") -> "Vec2":
        return Vec2(max(self.x, w.x), max(self.y, w.y))

    def near_eq(self, w: "Vec2") -> bool:
        # not transitive in general
        return near_eq(self.x, w.x, EPSILON) and near_eq(self.y, w.y, EPSILON)


V2_ZERO = Vec2(0.0, 0.0)
V2_UNIT = Vec2(1.0, 1.0)
V2_UNIT_X = Vec2(1.0, 0.0)
V2_UNIT_Y = Vec2(0.0, 1.0)

Pt = Vec2 | tuple[float, float]


def v2(x: float, y: float) -> Vec2:
    return Vec2(float(x), float(y))


def to_vec2(p: Pt) -> Vec2:
    return p if isinstance(p, Vec2) else Vec2(float(p[0]), float(p[1]))


@dataclass(frozen=True)
class LineSeg:
    a: Vec2
    b: Vec2

    def __str__(self) -> str:
        return f"L{self.a}:{self.b}"

    def length(self) -> float:
        return self.a.dist(self.b)

    def middle(self) -> Vec2:
        return self.a.add(self.b).div(2)

    def near_eq(self, m: "LineSeg") -> bool:
        # endpoint order matters
        return self.a.near_eq(m.a) and self.b.near_eq(m.b)

    def closest_pt(self, p: Vec2) -> Vec2:
        """
        Orthogonal projection of p onto the segment, or the nearer endpoint if
        the projection falls outside of it.
        """
        v = self.b.sub(self.a)
        w = p.sub(self.a)
        c1 = w.dot(v)
        if c1 <= 0:
            return self.a
        c2 = v.dot(v)
        if c2 <= c1:
            return self.b
        return self.a.add(v.mul(c1 / c2))

    def crosses(self, m: "LineSeg") -> bool:
        """
        True only if the segment interiors cross. Touching at an endpoint
        or running parallel is not a crossing.
        """
        u = self.a.sub(self.b)
        v = m.a.sub(m.b)
        det = u.cross_len(v)
        if det == 0:
            return False
        w = self.b.sub(m.b)
        n1 = u.cross_len(w)
        n2 = v.cross_len(w)
        if n1 == 0 or n2 == 0:
            return False
        r, s = n1 / det, n2 / det
        return (0 < r < 1) and (0 < s < 1)


@dataclass(frozen=True)
class Line:
    """Infinite line through the two points of seg."""

    seg: LineSeg

    def intersect(self, m: "Line") -> tuple[Vec2, bool]:
        u = self.seg.a.sub(self.seg.b)
        v = m.seg.a.sub(m.seg.b)
        det = u.cross_len(v)
        if det == 0:
            return V2_ZERO, False  # parallel
        r = self.seg.a.cross_len(self.seg.b) / det
        s = m.seg.a.cross_len(m.seg.b) / det
        return v.mul(r).sub(u.mul(s)), True

    def side(self, p: Vec2) -> int:
        """+1 on one side of the line, -1 on the other, 0 on it."""
        ap = p.sub(self.seg.a)
        ab = self.seg.b.sub(self.seg.a)
        return sgn(ap.cross_len(ab))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def near_eq(a: float, b: float, eps: float = EPSILON) -> bool:
    return abs(a - b) <= eps


def sgn(x: float) -> int:
    if x < 0:
        return -1
    if x > 0:
        return 1
    return 0


def deg(rad: float) -> float:
    return math.degrees(rad)


def rad(deg: float) -> float:
    return math.radians(deg)


def _fmt(f: float) -> str:
    return f"{f:g}"
