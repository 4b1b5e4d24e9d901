"""Tests for the fractal catalogue and shape counting."""
import math

import pytest

from fractalsketch.config import get_fractal_config
from fractalsketch.driver import count_shapes, iter_generations
from fractalsketch.patterns.library import (
    FRACTAL_NAMES,
    build_fractal,
    equilateral_base,
    first_inner,
)
from fractalsketch.patterns.rules import (
    BranchingTreeRule,
    SierpinskiCarpetRule,
    SierpinskiTriangleRule,
    SnowflakeRule,
)
from fractalsketch.state.shapes import Line, Point, Square, Triangle, centroid

from conftest import make_config


class TestCatalogue:
    def test_all_four_fractals_are_known(self):
        assert set(FRACTAL_NAMES) == {"tree", "snowflake", "triangle", "carpet"}

    @pytest.mark.parametrize("name", ["tree", "snowflake", "triangle", "carpet"])
    def test_shipped_configs_build(self, name, fractal_configs):
        definition = build_fractal(name, fractal_configs[name])
        assert definition.config.name == name
        assert definition.seed is not None

    def test_unknown_fractal(self):
        with pytest.raises(KeyError, match="Known fractals"):
            build_fractal("dragon", make_config("dragon"))


class TestSeeds:
    def test_tree_seed_is_vertical_trunk(self, fractal_configs):
        definition = build_fractal("tree", fractal_configs["tree"])
        assert definition.seed == Line(Point(450, 600), Point(450, 450))
        assert isinstance(definition.rule, BranchingTreeRule)
        assert definition.rule.ratio == 0.75
        assert definition.frame == []

    def test_triangle_seed_is_first_inner(self):
        definition = build_fractal("triangle", make_config("triangle", base_length=600))
        h = 600 * math.cos(math.radians(30))
        assert isinstance(definition.rule, SierpinskiTriangleRule)
        assert len(definition.frame) == 1
        base = definition.frame[0]
        assert [(p.x, p.y) for p in base.points] == [
            pytest.approx((0, h)),
            pytest.approx((300, 0)),
            pytest.approx((600, h)),
        ]
        assert [(p.x, p.y) for p in definition.seed.points] == [
            pytest.approx((150, h / 2)),
            pytest.approx((450, h / 2)),
            pytest.approx((300, h)),
        ]

    def test_first_inner_uses_midpoints(self):
        base = equilateral_base(60)
        assert first_inner(base).points == tuple(base.midpoints())

    def test_carpet_seed_is_centre_hole(self):
        definition = build_fractal("carpet", make_config("carpet", base_length=729))
        assert isinstance(definition.rule, SierpinskiCarpetRule)
        assert definition.frame == [Square.from_corner(Point(0, 0), 729)]
        assert definition.seed == Square.from_corner(Point(243, 243), 243)

    def test_snowflake_seed_centred_in_canvas(self):
        cfg = make_config("snowflake", base_length=300, canvas=(2, 2))
        definition = build_fractal("snowflake", cfg)
        assert isinstance(definition.seed, Triangle)
        assert isinstance(definition.rule, SnowflakeRule)
        c = centroid(definition.seed.points)
        assert (c.x, c.y) == pytest.approx((300, 300))
        assert definition.rule.center == c


class TestCounts:
    def test_tree_total_is_full_binary_tree(self):
        definition = build_fractal("tree", make_config("tree", base_length=150, canvas=(6, 4), iterations=13))
        assert count_shapes(definition) == 2 ** 14 - 1

    def test_count_is_repeatable(self):
        cfg = make_config("tree", base_length=150, canvas=(6, 4), iterations=6)
        assert count_shapes(build_fractal("tree", cfg)) == count_shapes(build_fractal("tree", cfg))

    def test_triangle_total_counts_frame(self):
        definition = build_fractal("triangle", make_config("triangle", base_length=600, iterations=3))
        assert count_shapes(definition) == 1 + 1 + 3 + 9 + 27

    def test_carpet_total(self):
        definition = build_fractal("carpet", make_config("carpet", base_length=729, iterations=2))
        assert count_shapes(definition) == 1 + 1 + 8 + 64

    def test_snowflake_total(self):
        definition = build_fractal("snowflake", make_config("snowflake", base_length=300, canvas=(2, 2), iterations=3))
        assert count_shapes(definition) == 1 + 3 + 12 + 48

    def test_generations_are_lazy_per_round(self):
        definition = build_fractal("tree", make_config("tree", base_length=150, canvas=(6, 4), iterations=2))
        rounds = list(iter_generations(definition.rule, definition.seed, 2))
        assert [k for k, _ in rounds] == [0, 1, 2]
        assert [len(shapes) for _, shapes in rounds] == [1, 2, 4]


def test_shipped_tree_config_matches_canopy_constants():
    cfg = get_fractal_config("tree")
    assert cfg.iterations == 13
    assert cfg.line_draw_delay_ms == 15
    assert cfg.canvas_size == (900, 600)
