# fractalsketch/state/shapes.py
"""Immutable 2D geometry: points, directed lines and closed polygons.

Coordinates are screen coordinates (y grows downwards), so a positive
rotation angle turns clockwise on screen.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from fractalsketch.errors import DegenerateGeometryError, MalformedShapeError


def radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def adjacent(hypotenuse: float, degrees: float = 30.0) -> float:
    """Side adjacent to `degrees` in a right triangle with this hypotenuse."""
    return math.cos(radians(degrees)) * hypotenuse


def opposite(hypotenuse: float, degrees: float = 30.0) -> float:
    """Side opposite `degrees` in a right triangle with this hypotenuse."""
    return math.sin(radians(degrees)) * hypotenuse


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def round(self) -> "Point":
        return Point(round(self.x), round(self.y))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def rotate_clockwise(self, angle: float, center: "Point") -> "Point":
        """Rotate about `center` by `angle` degrees, clockwise on screen."""
        rad = radians(angle)
        c = math.cos(rad)
        s = math.sin(rad)
        tx = self.x - center.x
        ty = self.y - center.y
        rx = tx * c - ty * s
        ry = tx * s + ty * c
        return Point(rx + center.x, ry + center.y)


def centroid(points: Iterable[Point]) -> Point:
    pts = list(points)
    if not pts:
        return Point(0.0, 0.0)
    n = len(pts)
    return Point(sum(p.x for p in pts) / n, sum(p.y for p in pts) / n)


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def midpoint(self) -> Point:
        return self.point_at(0.5)

    def point_at(self, t: float) -> Point:
        """Point a fraction `t` of the way from start to end."""
        return self.start + (self.end - self.start).scaled(t)

    def angle(self) -> float:
        """Heading of the line in degrees, in [-180, 180).

        0 points right, -90 points up the screen.
        """
        dy = self.start.y - self.end.y
        dx = self.start.x - self.end.x
        if dx == 0 and dy == 0:
            raise DegenerateGeometryError(f"zero-length line at {self.start} has no angle")
        degrees = math.degrees(math.atan2(dy, dx))
        if degrees < 0:
            degrees += 360
        return degrees - 180

    def rotate_clockwise(self, angle: float) -> "Line":
        """Rotate the end point about the start."""
        return Line(self.start, self.end.rotate_clockwise(angle, self.start))

    def rotate_clockwise_around_center(self, angle: float) -> "Line":
        mid = self.midpoint()
        return Line(
            self.start.rotate_clockwise(angle, mid),
            self.end.rotate_clockwise(angle, mid),
        )

    def split(self) -> List["Line"]:
        mid = self.midpoint()
        return [Line(self.start, mid), Line(mid, self.end)]

    def split3(self) -> List["Line"]:
        first_third = self.point_at(1 / 3)
        second_third = self.point_at(2 / 3)
        return [
            Line(self.start, first_third),
            Line(first_third, second_third),
            Line(second_third, self.end),
        ]

    def with_length(self, length: float) -> "Line":
        """Same start and direction, but exactly `length` long."""
        current = self.length()
        if current == 0:
            raise DegenerateGeometryError(f"cannot rescale zero-length line at {self.start}")
        factor = length - current
        end = Point(
            self.end.x + (self.end.x - self.start.x) / current * factor,
            self.end.y + (self.end.y - self.start.y) / current * factor,
        )
        return Line(self.start, end)

    def sides(self) -> List["Line"]:
        # A lone line draws as its own single side.
        return [self]


@dataclass(frozen=True)
class Polygon:
    points: Tuple[Point, ...]

    # Subclasses pin the vertex count; 0 means any count of 3 or more.
    vertex_count = 0

    def __post_init__(self) -> None:
        # Accept lists too, but always store a tuple.
        object.__setattr__(self, "points", tuple(self.points))
        expected = self.vertex_count
        actual = len(self.points)
        if expected and actual != expected:
            raise MalformedShapeError(type(self).__name__, expected, actual)
        if not expected and actual < 3:
            raise MalformedShapeError(type(self).__name__, 3, actual)

    def sides(self) -> List[Line]:
        pts = self.points
        return [Line(pts[i], pts[(i + 1) % len(pts)]) for i in range(len(pts))]

    def midpoints(self) -> List[Point]:
        return [side.midpoint() for side in self.sides()]

    def rotate_clockwise(self, angle: float, center: Point) -> "Polygon":
        return type(self)(tuple(p.rotate_clockwise(angle, center) for p in self.points))


class Triangle(Polygon):
    vertex_count = 3


class Square(Polygon):
    vertex_count = 4

    @classmethod
    def from_corner(cls, corner: Point, size: float) -> "Square":
        """Axis-aligned square, points clockwise from the top-left corner."""
        return cls((
            corner,
            Point(corner.x + size, corner.y),
            Point(corner.x + size, corner.y + size),
            Point(corner.x, corner.y + size),
        ))

    @property
    def corner(self) -> Point:
        return self.points[0]

    @property
    def size(self) -> float:
        return self.sides()[0].length()


def require_points(shape: Polygon, expected: int) -> Sequence[Point]:
    """Vertex list of `shape`, or MalformedShapeError if the count differs."""
    points = getattr(shape, "points", None)
    if points is None:
        raise MalformedShapeError(type(shape).__name__, expected, 0)
    if len(points) != expected:
        raise MalformedShapeError(type(shape).__name__, expected, len(points))
    return points
