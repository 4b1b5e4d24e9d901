"""Subdivision rules: how each fractal turns one parent shape into its children."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from fractalsketch.errors import MalformedShapeError
from fractalsketch.state.shapes import (
    Line,
    Point,
    Polygon,
    Square,
    Triangle,
    adjacent,
    require_points,
)

Shape = Union[Line, Polygon]


@dataclass
class SubdivisionRule:
    name: str
    branching: int = 1

    def children(self, shape: Shape, round_index: int) -> List[Shape]:
        raise NotImplementedError

    def children_per_parent(self, round_index: int) -> int:
        return self.branching

    def line_width(self, round_index: int, base_width: float) -> float:
        """Stroke width for shapes drawn in `round_index`."""
        return base_width


@dataclass
class BranchingTreeRule(SubdivisionRule):
    ratio: float = 0.75
    angle_left: float = 20.0
    angle_right: float = 40.0

    def __init__(self, ratio: float = 0.75, angle_left: float = 20.0, angle_right: float = 40.0) -> None:
        super().__init__(name="Branching tree", branching=2)
        self.ratio = ratio
        self.angle_left = angle_left
        self.angle_right = angle_right

    def children(self, shape: Shape, round_index: int) -> List[Shape]:
        if not isinstance(shape, Line):
            raise MalformedShapeError(type(shape).__name__, 2, len(getattr(shape, "points", ())))
        length = shape.length() * self.ratio
        parent_angle = shape.angle()
        start = shape.end
        # Child drawn pointing straight up, then turned onto the parent's heading.
        upright = Line(start, Point(start.x, start.y - length))
        right = upright.rotate_clockwise(parent_angle + 90 + self.angle_right)
        left = upright.rotate_clockwise(parent_angle + 90 - self.angle_left)
        return [right, left]

    def line_width(self, round_index: int, base_width: float) -> float:
        return max(base_width * self.ratio ** round_index, 1.0)


@dataclass
class SierpinskiTriangleRule(SubdivisionRule):
    def __init__(self) -> None:
        super().__init__(name="Sierpinski triangle", branching=3)

    def children(self, shape: Shape, round_index: int) -> List[Shape]:
        require_points(shape, 3)
        left, top, right = sorted(shape.midpoints(), key=lambda p: p.x)
        side = shape.sides()[0].length() / 2
        height = adjacent(side)

        left_triangle = Triangle((
            left,
            Point(left.x - side, left.y),
            Point(left.x - side / 2, left.y + height),
        ))
        right_triangle = Triangle((
            right,
            Point(right.x + side, right.y),
            Point(right.x + side / 2, right.y + height),
        ))
        upper_triangle = Triangle((
            top,
            Point(top.x - side / 2, top.y - height),
            Point(top.x + side / 2, top.y - height),
        ))
        return [left_triangle, right_triangle, upper_triangle]


@dataclass
class SierpinskiCarpetRule(SubdivisionRule):
    """Each shape is the removed centre square of a 3x3 cell.

    The children are the centre squares of the eight surrounding cells.
    """

    def __init__(self) -> None:
        super().__init__(name="Sierpinski carpet", branching=8)

    def children(self, shape: Shape, round_index: int) -> List[Shape]:
        require_points(shape, 4)
        hole = shape if isinstance(shape, Square) else Square(shape.points)
        size = hole.size
        cell_x = hole.corner.x - size
        cell_y = hole.corner.y - size
        child_size = size / 3
        out: List[Shape] = []
        for row in range(3):
            for col in range(3):
                if row == 1 and col == 1:
                    continue
                corner = Point(cell_x + col * size + child_size, cell_y + row * size + child_size)
                out.append(Square.from_corner(corner, child_size))
        return out


@dataclass
class SnowflakeRule(SubdivisionRule):
    """Koch-style bumps erected on the middle third of each side.

    Round 0 bumps every side of the seed. From round 1 onwards the closing
    side is skipped and every bump also gets a copy rotated about `center`
    by 360 / (sides used).
    """
    center: Point = Point(0.0, 0.0)

    def __init__(self, center: Point) -> None:
        super().__init__(name="Snowflake", branching=3)
        self.center = center

    @staticmethod
    def keeps_bottom_side(round_index: int) -> bool:
        return round_index == 0

    @staticmethod
    def mirrors_children(round_index: int) -> bool:
        return round_index >= 1

    def children(self, shape: Shape, round_index: int) -> List[Shape]:
        require_points(shape, 3)
        sides = shape.sides()
        if not self.keeps_bottom_side(round_index):
            sides = sides[:-1]
        mirror = self.mirrors_children(round_index)
        rotate_angle = 360 / len(sides)

        out: List[Shape] = []
        for side in sides:
            base = side.split3()[1]
            height = adjacent(base.length())
            guide = base.split()[1].rotate_clockwise(-90).with_length(height)
            child = Triangle((base.start, guide.end, base.end))
            out.append(child)
            if mirror:
                out.append(child.rotate_clockwise(rotate_angle, self.center))
        return out

    def children_per_parent(self, round_index: int) -> int:
        sides = 3 if self.keeps_bottom_side(round_index) else 2
        return sides * 2 if self.mirrors_children(round_index) else sides

