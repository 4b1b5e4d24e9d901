"""Fractal catalogue: each entry pairs a seed shape with its subdivision rule."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from fractalsketch.config import FractalConfig, get_fractal_config
from fractalsketch.patterns.rules import (
    BranchingTreeRule,
    Shape,
    SierpinskiCarpetRule,
    SierpinskiTriangleRule,
    SnowflakeRule,
    SubdivisionRule,
)
from fractalsketch.state.shapes import Line, Point, Square, Triangle, adjacent, centroid


@dataclass
class FractalDefinition:
    config: FractalConfig
    rule: SubdivisionRule
    seed: Shape
    # Outlines drawn once before round 0 (counted in the total, never subdivided).
    frame: List[Shape] = field(default_factory=list)


def equilateral_base(side: float, left: float = 0.0, top: float = 0.0) -> Triangle:
    """Upright equilateral triangle: bottom-left, apex, bottom-right."""
    height = adjacent(side)
    return Triangle((
        Point(left, top + height),
        Point(left + side / 2, top),
        Point(left + side, top + height),
    ))


def first_inner(base: Triangle) -> Triangle:
    return Triangle(tuple(base.midpoints()))


def build_tree(cfg: FractalConfig) -> FractalDefinition:
    length = cfg.base_length
    width, height = cfg.canvas_size
    start = Point(width / 2, height)
    end = Point(width / 2, height - length)
    rule = BranchingTreeRule(**cfg.params)
    return FractalDefinition(config=cfg, rule=rule, seed=Line(start, end))


def build_sierpinski_triangle(cfg: FractalConfig) -> FractalDefinition:
    base = equilateral_base(cfg.base_length)
    return FractalDefinition(
        config=cfg,
        rule=SierpinskiTriangleRule(),
        seed=first_inner(base),
        frame=[base],
    )


def build_sierpinski_carpet(cfg: FractalConfig) -> FractalDefinition:
    side = cfg.base_length
    outline = Square.from_corner(Point(0.0, 0.0), side)
    hole = Square.from_corner(Point(side / 3, side / 3), side / 3)
    return FractalDefinition(
        config=cfg,
        rule=SierpinskiCarpetRule(),
        seed=hole,
        frame=[outline],
    )


def build_snowflake(cfg: FractalConfig) -> FractalDefinition:
    side = cfg.base_length
    width, height = cfg.canvas_size
    tri_height = adjacent(side)
    # Centre the seed's centroid in the canvas.
    base = equilateral_base(side, left=width / 2 - side / 2, top=height / 2 - tri_height * 2 / 3)
    rule = SnowflakeRule(center=centroid(base.points))
    return FractalDefinition(config=cfg, rule=rule, seed=base)


BUILDERS: Dict[str, Callable[[FractalConfig], FractalDefinition]] = {
    "tree": build_tree,
    "snowflake": build_snowflake,
    "triangle": build_sierpinski_triangle,
    "carpet": build_sierpinski_carpet,
}

FRACTAL_NAMES = tuple(BUILDERS)


def build_fractal(name: str, cfg: Optional[FractalConfig] = None) -> FractalDefinition:
    try:
        builder = BUILDERS[name]
    except KeyError as exc:
        known = ", ".join(FRACTAL_NAMES)
        raise KeyError(f"Unknown fractal '{name}'. Known fractals: {known}") from exc
    return builder(cfg or get_fractal_config(name))
