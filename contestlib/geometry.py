"""Plane geometry on floating-point vectors with an epsilon comparison."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

EPS = 1e-10


def dcmp(x: float) -> int:
    """Return -1, 0 or 1 for the sign of ``x``, treating ``|x| < EPS`` as zero."""
    if abs(x) < EPS:
        return 0
    return -1 if x < 0 else 1


@dataclass(frozen=True, eq=False)
class Vector:
    """A point or direction in the plane.

    ``==`` compares within ``EPS``; ``<`` orders by ``x`` then ``y`` exactly.
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Vector:
        return Vector(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Vector:
        return Vector(self.x / k, self.y / k)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __lt__(self, other: Vector) -> bool:
        return self.x < other.x or (self.x == other.x and self.y < other.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return dcmp(self.x - other.x) == 0 and dcmp(self.y - other.y) == 0

    __hash__ = None  # type: ignore[assignment]


def dot(a: Vector, b: Vector) -> float:
    """Return the dot product."""
    return a.x * b.x + a.y * b.y


def length(a: Vector) -> float:
    """Return the Euclidean length."""
    return math.sqrt(dot(a, a))


def angle(a: Vector, b: Vector | None = None) -> float:
    """Return the polar angle of ``a``, or the angle between ``a`` and ``b`` in ``[0, pi]``."""
    if b is None:
        return math.atan2(a.y, a.x)
    r = dot(a, b) / length(a) / length(b)
    return math.acos(max(-1.0, min(1.0, r)))


def cross(a: Vector, b: Vector) -> float:
    """Return the z component of the cross product."""
    return a.x * b.y - a.y * b.x


def rotate(a: Vector, rad: float, center: Vector | None = None) -> Vector:
    """Rotate ``a`` counter-clockwise by ``rad`` about the origin or ``center``."""
    if center is not None:
        return rotate(a - center, rad) + center
    c, s = math.cos(rad), math.sin(rad)
    return Vector(a.x * c - a.y * s, a.x * s + a.y * c)


def normal(a: Vector) -> Vector:
    """Return the unit vector perpendicular to ``a``, turned to its left."""
    size = length(a)
    if size == 0:
        raise ValueError("the zero vector has no normal")
    return Vector(-a.y / size, a.x / size)


def line_intersection(p: Vector, v: Vector, q: Vector, w: Vector) -> Vector:
    """Intersect the line through ``p`` along ``v`` with the line through ``q`` along ``w``."""
    denom = cross(v, w)
    if denom == 0:
        raise ValueError("the lines are parallel")
    t = cross(w, p - q) / denom
    return p + v * t


@dataclass(frozen=True)
class Line:
    """The line through ``p`` with direction ``v``; lines order by direction angle."""

    p: Vector
    v: Vector
    ang: float = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ang", angle(self.v))

    @staticmethod
    def from_points(a: Vector, b: Vector) -> Line:
        """Return the line from ``a`` towards ``b``."""
        return Line(a, b - a)

    def point(self, t: float) -> Vector:
        """Return ``p + v * t``."""
        return self.p + self.v * t

    def __lt__(self, other: Line) -> bool:
        return self.ang < other.ang


def _intersect(l1: Line, l2: Line) -> Vector:
    return line_intersection(l1.p, l1.v, l2.p, l2.v)


def distance_to_line(p: Vector, a: Vector | Line, b: Vector | None = None) -> float:
    """Distance from ``p`` to the line through ``a`` and ``b``, or to the Line ``a``."""
    if b is None:
        if not isinstance(a, Line):
            raise TypeError("give two points or a Line")
        v1, v2 = a.v, p - a.p
    else:
        v1, v2 = b - a, p - a
    return abs(cross(v1, v2)) / length(v1)


def distance_to_segment(p: Vector, a: Vector, b: Vector) -> float:
    """Distance from ``p`` to the segment ``ab``."""
    if a == b:
        return length(p - a)
    v1, v2, v3 = b - a, p - a, p - b
    if dcmp(dot(v1, v2)) < 0:
        return length(v2)
    if dcmp(dot(v1, v3)) > 0:
        return length(v3)
    return abs(cross(v1, v2)) / length(v1)


def line_projection(p: Vector, a: Vector | Line, b: Vector | None = None) -> Vector:
    """Foot of the perpendicular from ``p`` to the line ``ab`` or the Line ``a``."""
    if b is None:
        if not isinstance(a, Line):
            raise TypeError("give two points or a Line")
        origin, v = a.p, a.v
    else:
        origin, v = a, b - a
    return origin + v * (dot(v, p - origin) / dot(v, v))


def segments_properly_intersect(a1: Vector, a2: Vector, b1: Vector, b2: Vector) -> bool:
    """True when the segments cross at a single point interior to both."""
    c1 = cross(a2 - a1, b1 - a1)
    c2 = cross(a2 - a1, b2 - a1)
    c3 = cross(b2 - b1, a1 - b1)
    c4 = cross(b2 - b1, a2 - b1)
    return dcmp(c1) * dcmp(c2) < 0 and dcmp(c3) * dcmp(c4) < 0


def on_segment(p: Vector, a: Vector, b: Vector) -> bool:
    """True when ``p`` lies strictly inside the segment ``ab``."""
    return dcmp(cross(a - p, b - p)) == 0 and dcmp(dot(a - p, b - p)) < 0


def on_segment_inclusive(p: Vector, a: Vector, b: Vector) -> bool:
    """True when ``p`` lies on the segment ``ab``, endpoints included."""
    return on_segment(p, a, b) or p == a or p == b


def segments_intersect(a1: Vector, a2: Vector, b1: Vector, b2: Vector) -> bool:
    """True when the closed segments share at least one point."""
    if segments_properly_intersect(a1, a2, b1, b2):
        return True
    if a1 == b1 or a1 == b2 or a2 == b1 or a2 == b2:
        return True
    return (
        on_segment(a1, b1, b2)
        or on_segment(a2, b1, b2)
        or on_segment(b1, a1, a2)
        or on_segment(b2, a1, a2)
    )


def on_line(p: Vector, line: Line) -> bool:
    """True when ``p`` lies on ``line``."""
    return dcmp(cross(p - line.p, line.v)) == 0


def on_left(line: Line, p: Vector) -> bool:
    """True when ``p`` lies strictly to the left of ``line``."""
    return dcmp(cross(line.v, p - line.p)) > 0


@dataclass(frozen=True)
class Circle:
    """Circle with centre ``center`` and radius ``r``."""

    center: Vector
    r: float

    def point(self, a: float) -> Vector:
        """Return the point of the circle at polar angle ``a``."""
        return Vector(self.center.x + math.cos(a) * self.r, self.center.y + math.sin(a) * self.r)

    def area(self) -> float:
        """Return the area of the disc."""
        return math.pi * self.r * self.r

    def central_angle(self, a: Vector, b: Vector) -> float:
        """Return the central angle between ``a`` and ``b``, at most ``pi``."""
        a1 = angle(a - self.center)
        a2 = angle(b - self.center)
        if dcmp(a1 - a2) == 0:
            return 0.0
        if a1 > a2:
            a1, a2 = a2, a1
        ans = a2 - a1
        if dcmp(ans - math.pi) >= 0:
            ans = math.pi - abs(ans - math.pi)
        return ans

    def contains(self, p: Vector) -> bool:
        """True when ``p`` is strictly inside the circle."""
        return dcmp(length(p - self.center) - self.r) < 0


def _law_of_cosines(x: float, y: float, z: float) -> float:
    """Angle between sides ``x`` and ``y``, opposite side ``z``."""
    r = (x * x + y * y - z * z) / (2 * x * y)
    return math.acos(max(-1.0, min(1.0, r)))


@dataclass(frozen=True)
class Triangle:
    """Triangle with side lengths and angles.

    Side ``a`` joins the vertices with angles ``angle_a`` and ``angle_b``;
    side ``b`` joins ``angle_b`` and ``angle_c``; side ``c`` joins ``angle_c``
    and ``angle_a``.  ``vertices`` is set, counter-clockwise, when the
    triangle was built from points.
    """

    a: float
    b: float
    c: float
    angle_a: float
    angle_b: float
    angle_c: float
    vertices: tuple[Vector, Vector, Vector] | None = None

    @staticmethod
    def from_points(a: Vector, b: Vector, c: Vector) -> Triangle:
        """Build a triangle from three vertices, reordered counter-clockwise."""
        if cross(b - a, c - a) < 0:
            b, c = c, b
        return Triangle(
            length(b - a),
            length(c - b),
            length(a - c),
            angle(b - a, c - a),
            angle(c - b, a - b),
            angle(a - c, b - c),
            (a, b, c),
        )

    @staticmethod
    def from_sides(a: float, b: float, c: float) -> Triangle:
        """Build a triangle from side lengths, sorted ascending.

        Raises ValueError when the sides violate the triangle inequality.
        """
        a, b, c = sorted((a, b, c))
        if a <= 0:
            raise ValueError("side lengths must be positive")
        if dcmp(c - a - b) > 0:
            raise ValueError("the sides do not form a triangle")
        return Triangle(
            a,
            b,
            c,
            _law_of_cosines(a, c, b),
            _law_of_cosines(b, a, c),
            _law_of_cosines(c, b, a),
        )

    def _points(self) -> tuple[Vector, Vector, Vector]:
        if self.vertices is None:
            raise ValueError("the triangle has no vertices")
        return self.vertices

    def area_by_points(self) -> float:
        """Return the area from the vertices."""
        a, b, c = self._points()
        return abs(cross(a - c, b - c) / 2.0)

    def area_by_sides(self) -> float:
        """Return the area from the side lengths (Heron's formula)."""
        s = (self.a + self.b + self.c) / 2.0
        return math.sqrt(max(0.0, s * (s - self.a) * (s - self.b) * (s - self.c)))

    def incircle_radius(self) -> float:
        """Return the radius of the inscribed circle."""
        ta = math.tan(self.angle_a / 2.0)
        tb = math.tan(self.angle_b / 2.0)
        return self.a / (1.0 + ta / tb) * ta

    def incircle(self) -> Circle:
        """Return the inscribed circle; needs the vertices."""
        a, b, _ = self._points()
        d1 = rotate(b - a, self.angle_a / 2.0)
        d2 = rotate(a - b, -self.angle_b / 2.0)
        return Circle(line_intersection(a, d1, b, d2), self.incircle_radius())


def line_circle_intersection(line: Line, circle: Circle) -> list[Vector]:
    """Return the 0, 1 or 2 points where ``line`` meets ``circle``."""
    a = line.v.x
    b = line.p.x - circle.center.x
    c = line.v.y
    d = line.p.y - circle.center.y
    e = a * a + c * c
    f = 2 * (a * b + c * d)
    g = b * b + d * d - circle.r * circle.r
    delta = f * f - 4 * e * g
    if dcmp(delta) < 0:
        return []
    if dcmp(delta) == 0:
        return [line.point(-f / (2 * e))]
    root = math.sqrt(delta)
    return [line.point((-f - root) / (2 * e)), line.point((-f + root) / (2 * e))]


def circle_intersection(c1: Circle, c2: Circle) -> list[Vector]:
    """Return the 0, 1 or 2 common points of two circles.

    Raises ValueError for identical circles, which share infinitely many.
    """
    d = length(c1.center - c2.center)
    if dcmp(d) == 0:
        if dcmp(c1.r - c2.r) == 0:
            raise ValueError("the circles coincide")
        return []
    if dcmp(c1.r + c2.r - d) < 0:
        return []
    if dcmp(abs(c1.r - c2.r) - d) > 0:
        return []
    a = angle(c2.center - c1.center)
    temp = c1.r / 2.0 / d - c2.r / c1.r * c2.r / d / 2.0 + d / c1.r / 2.0
    if dcmp(temp - 1.0) == 0:
        return [c1.point(a)]
    if dcmp(temp + 1.0) == 0:
        return [c1.point(math.pi + a)]
    da = math.acos(max(-1.0, min(1.0, temp)))
    if dcmp(da) == 0:
        return [c1.point(a)]
    return [c1.point(a - da), c1.point(a + da)]


def point_circle_tangents(p: Vector, circle: Circle) -> list[Vector]:
    """Return the points where tangents from ``p`` touch ``circle``.

    A point on the circle is its own single tangent point; one inside has none.
    """
    u = p - circle.center
    dist = length(u)
    if dcmp(dist - circle.r) < 0:
        return []
    if dcmp(dist - circle.r) == 0:
        return [p]
    rad = math.acos(circle.r / dist)
    base = u / dist * circle.r
    return [circle.center + rotate(base, -rad), circle.center + rotate(base, rad)]


def circle_tangents(a: Circle, b: Circle) -> list[tuple[Vector, Vector]]:
    """Return the common tangents as pairs (touch point on ``a``, touch point on ``b``).

    Raises ValueError for identical circles.
    """
    swapped = a.r < b.r
    if swapped:
        a, b = b, a
    d = length(a.center - b.center)
    rdiff = a.r - b.r
    rsum = a.r + b.r
    if dcmp(d) == 0 and dcmp(rdiff) == 0:
        raise ValueError("the circles coincide")
    if dcmp(d - rdiff) < 0:
        return []
    base = angle(b.center - a.center)
    pairs: list[tuple[Vector, Vector]] = []
    if dcmp(d - rdiff) == 0:
        pairs.append((a.point(base), b.point(base)))
    else:
        ang = math.acos(max(-1.0, min(1.0, rdiff / d)))
        pairs.append((a.point(base + ang), b.point(base + ang)))
        pairs.append((a.point(base - ang), b.point(base - ang)))
        if dcmp(d - rsum) == 0:
            pairs.append((a.point(base), b.point(base + math.pi)))
        elif dcmp(d - rsum) > 0:
            ang = math.acos(rsum / d)
            pairs.append((a.point(base + ang), b.point(math.pi + base + ang)))
            pairs.append((a.point(base - ang), b.point(math.pi + base - ang)))
    if swapped:
        pairs = [(q, p) for p, q in pairs]
    return pairs


def cut_polygon(poly: Sequence[Vector], line: Line) -> list[Vector]:
    """Return the part of the convex polygon ``poly`` on the left of ``line``."""
    out: list[Vector] = []
    pts = list(poly)
    for c, d in zip(pts, pts[1:] + pts[:1]):
        if dcmp(cross(line.v, c - line.p)) >= 0:
            out.append(c)
        if dcmp(cross(line.v, c - d)) != 0:
            ip = line_intersection(line.p, line.v, c, d - c)
            if on_segment(ip, c, d):
                out.append(ip)
    return out


def convex_hull(points: Sequence[Vector]) -> list[Vector]:
    """Return the convex hull counter-clockwise, without collinear points."""
    pts: list[Vector] = []
    for p in sorted(points):
        if not pts or not pts[-1] == p:
            pts.append(p)
    hull: list[Vector] = []
    for p in pts:
        while len(hull) > 1 and dcmp(cross(hull[-1] - hull[-2], p - hull[-2])) <= 0:
            hull.pop()
        hull.append(p)
    k = len(hull)
    for p in reversed(pts[:-1]):
        while len(hull) > k and dcmp(cross(hull[-1] - hull[-2], p - hull[-2])) <= 0:
            hull.pop()
        hull.append(p)
    if len(pts) > 1:
        hull.pop()
    return hull


def halfplane_intersection(lines: Sequence[Line]) -> list[Vector]:
    """Return the polygon where every line's left side overlaps.

    The result must be bounded; an empty or unbounded region gives ``[]``.
    """
    ordered = sorted(lines)
    n = len(ordered)
    if n == 0:
        return []
    p: list[Vector] = [Vector()] * n
    q: list[Line] = [ordered[0]] * n
    first = last = 0
    for line in ordered[1:]:
        while first < last and not on_left(line, p[last - 1]):
            last -= 1
        while first < last and not on_left(line, p[first]):
            first += 1
        last += 1
        q[last] = line
        if dcmp(cross(q[last - 1].v, q[last].v)) < 0:
            return []
        if dcmp(cross(q[last].v, q[last - 1].v)) == 0:
            if dcmp(dot(q[last - 1].v, q[last].v)) < 0:
                return []
            last -= 1
            if on_left(q[last], line.p):
                q[last] = line
        if first < last:
            p[last - 1] = _intersect(q[last - 1], q[last])
    while first < last and not on_left(q[first], p[last - 1]):
        last -= 1
    if last - first <= 1:
        return []
    p[last] = _intersect(q[last], q[first])
    return p[first:last + 1]


def polygon_area(poly: Sequence[Vector]) -> float:
    """Return the signed area; positive for counter-clockwise vertices."""
    pts = list(poly)
    return sum(cross(a, b) for a, b in zip(pts, pts[1:] + pts[:1])) / 2.0


def diameter(points: Sequence[Vector]) -> float:
    """Return the largest distance between two of the points (rotating calipers)."""
    if not points:
        raise ValueError("at least one point is needed")
    p = convex_hull(points)
    n = len(p)
    if n == 1:
        return 0.0
    if n == 2:
        return length(p[1] - p[0])
    p.append(p[0])
    ans = 0.0
    v = 1
    for u in range(n):
        while True:
            diff = cross(p[u + 1] - p[u], p[v + 1] - p[v])
            if dcmp(diff) <= 0:
                ans = max(ans, length(p[u] - p[v]))
                if dcmp(diff) == 0:
                    ans = max(ans, length(p[u] - p[v + 1]))
                break
            v = (v + 1) % n
    return ans


def closest_pair(points: Sequence[Vector]) -> float:
    """Return the smallest distance between two of the points (divide and conquer)."""
    if len(points) < 2:
        raise ValueError("at least two points are needed")
    pts = sorted(points, key=lambda v: (v.x, v.y))

    def solve(left: int, right: int) -> float:
        if left == right:
            return math.inf
        if left + 1 == right:
            return length(pts[right] - pts[left])
        mid = (left + right) // 2
        d = min(solve(left, mid), solve(mid + 1, right))
        mid_x = pts[mid].x
        strip = sorted(
            (q for q in pts[left:right + 1] if abs(mid_x - q.x) <= d), key=lambda v: v.y
        )
        for i, a in enumerate(strip):
            for b in strip[i + 1:]:
                if b.y - a.y >= d:
                    break
                d = min(d, length(a - b))
        return d

    return solve(0, len(pts) - 1)