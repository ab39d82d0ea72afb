"""Plane geometry: segment intersection groups and polygon area."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import combinations

from judgebox.graphs import UnionFind

Vector = tuple[int, int]


def _tokens(text: str) -> Iterator[str]:
    return iter(text.split())


def _take(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


@dataclass(frozen=True)
class Segment:
    """A closed segment from (x1, y1) to (x2, y2); both ends may coincide."""

    x1: int
    y1: int
    x2: int
    y2: int


def _origin(segment: Segment) -> Vector:
    return segment.x1, segment.y1


def _direction(segment: Segment) -> Vector:
    return segment.x2 - segment.x1, segment.y2 - segment.y1


def _cross(u: Vector, v: Vector) -> int:
    return u[0] * v[1] - u[1] * v[0]


def _dot(u: Vector, v: Vector) -> int:
    return u[0] * v[0] + u[1] * v[1]


def _add(u: Vector, v: Vector) -> Vector:
    return u[0] + v[0], u[1] + v[1]


def _sub(u: Vector, v: Vector) -> Vector:
    return u[0] - v[0], u[1] - v[1]


def _scale(c: int, v: Vector) -> Vector:
    return c * v[0], c * v[1]


def _contains_point(segment: Segment, point: Vector) -> bool:
    u = _sub(point, _origin(segment))
    v = _direction(segment)
    rejection = _sub(_scale(_dot(v, v), u), _scale(_dot(v, u), v))
    return _dot(rejection, rejection) == 0 and _dot(_scale(-1, u), _sub(v, u)) <= 0


def segments_intersect(first: Segment, second: Segment) -> bool:
    """Whether two closed segments share at least one point."""
    d1, d2 = _direction(first), _direction(second)
    o1, o2 = _origin(first), _origin(second)
    coef = _cross(d1, d2)
    if coef == 0:
        len1, len2 = _dot(d1, d1), _dot(d2, d2)
        if len1 == 0 and len2 == 0:
            return o1 == o2
        if len1 == 0:
            return _contains_point(second, o1)
        if len2 == 0:
            return _contains_point(first, o2)
        return (
            _contains_point(first, o2)
            or _contains_point(first, _add(o2, d2))
            or _contains_point(second, o1)
            or _contains_point(second, _add(o1, d1))
        )

    low, high = min(0, coef), max(0, coef)
    bias = _cross(d2, _sub(o1, o2))
    if bias < low or high < bias:
        return False
    low, high = min(0, -coef), max(0, -coef)
    bias = _cross(d1, _sub(o2, o1))
    return low <= bias <= high


def group_segments(segments: Sequence[Segment]) -> tuple[int, int]:
    """Number of groups of touching segments and the size of the largest group."""
    forest = UnionFind(len(segments))
    for i, j in combinations(range(len(segments)), 2):
        if segments_intersect(segments[i], segments[j]):
            forest.union(i, j)
    sizes = Counter(forest.find(i) for i in range(len(segments)))
    return len(sizes), max(sizes.values(), default=1)


def run_segments(text: str) -> str:
    tokens = _tokens(text)
    n = _take(tokens)
    segments = [Segment(*(_take(tokens) for _ in range(4))) for _ in range(n)]
    groups, largest = group_segments(segments)
    return f"{groups}\n{largest}\n"


def _doubled_area(points: Sequence[Vector]) -> int:
    if not points:
        raise ValueError("polygon needs at least one point")
    anchor = points[0]
    total = 0
    for i in range(len(points) - 1, 1, -1):
        if points[i - 1] == anchor:
            break
        total += _cross(_sub(points[i], points[i - 1]), _sub(anchor, points[i]))
    return abs(total)


def polygon_area(points: Sequence[Vector]) -> float:
    """Area of the simple polygon with the given vertices in order."""
    return _doubled_area(points) / 2


def run_polygon_area(text: str) -> str:
    tokens = _tokens(text)
    n = _take(tokens)
    points = [(_take(tokens), _take(tokens)) for _ in range(n)]
    doubled = _doubled_area(points)
    return f"{doubled // 2}.{5 if doubled % 2 else 0}\n"