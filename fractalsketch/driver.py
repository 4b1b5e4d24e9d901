"""Round-by-round fractal generation.

Each round draws every shape of the working set concurrently, waits for all
of them, adds them to the running total and only then replaces the working
set with the shapes' children.
"""
from __future__ import annotations

import asyncio
import enum
import logging
from typing import Iterator, List, Sequence, Tuple

from fractalsketch.errors import FractalError, MalformedShapeError
from fractalsketch.patterns.library import FractalDefinition
from fractalsketch.patterns.rules import Shape, SubdivisionRule
from fractalsketch.render.animator import LineAnimator, RenderContext, StrokeStyle

logger = logging.getLogger(__name__)


class DriverState(enum.Enum):
    IDLE = "idle"
    ROUND = "round"
    DONE = "done"
    FAILED = "failed"


def next_generation(rule: SubdivisionRule, shapes: Sequence[Shape], round_index: int) -> List[Shape]:
    expected = rule.children_per_parent(round_index)
    out: List[Shape] = []
    for shape in shapes:
        children = rule.children(shape, round_index)
        if len(children) != expected:
            raise MalformedShapeError(f"{rule.name} round {round_index}", expected, len(children), what="children")
        out.extend(children)
    return out


def iter_generations(rule: SubdivisionRule, seed: Shape, iterations: int) -> Iterator[Tuple[int, List[Shape]]]:
    """Yield (round_index, working_set) for rounds 0..iterations inclusive.

    Children of a round are only computed when the caller asks for the next
    round, so a renderer can finish drawing before the geometry moves on.
    """
    working: List[Shape] = [seed]
    for round_index in range(iterations + 1):
        yield round_index, working
        if round_index < iterations:
            working = next_generation(rule, working, round_index)


def count_shapes(definition: FractalDefinition) -> int:
    """Total a full run reports, without drawing anything."""
    total = len(definition.frame)
    for _, working in iter_generations(definition.rule, definition.seed, definition.config.iterations):
        total += len(working)
    return total


class GenerationDriver:
    """Idle -> Round(0..iterations) -> Done, owning one render context."""

    def __init__(self, definition: FractalDefinition, animator: LineAnimator, ctx: RenderContext) -> None:
        self.definition = definition
        self.animator = animator
        self.ctx = ctx
        self.state = DriverState.IDLE
        self.round_index = -1
        self.total = 0

    @property
    def iterations(self) -> int:
        return self.definition.config.iterations

    def style_for_round(self, round_index: int) -> StrokeStyle:
        cfg = self.definition.config
        return StrokeStyle(
            color=cfg.stroke_color,
            width=self.definition.rule.line_width(round_index, cfg.line_width),
        )

    async def _draw_round(self, shapes: Sequence[Shape], style: StrokeStyle) -> None:
        await asyncio.gather(*(self.animator.draw_shape(self.ctx, shape, style) for shape in shapes))

    async def run(self) -> int:
        """Draw every round and return the cumulative shape count."""
        if self.state is not DriverState.IDLE:
            raise RuntimeError(f"driver already {self.state.value}; build a new one to run again")
        definition = self.definition
        self.state = DriverState.ROUND
        try:
            if definition.frame:
                await self._draw_round(definition.frame, self.style_for_round(0))
                self.total += len(definition.frame)
                self.ctx.progress(self.total)

            for round_index, working in iter_generations(definition.rule, definition.seed, self.iterations):
                self.round_index = round_index
                logger.debug("%s round %d: drawing %d shapes", definition.rule.name, round_index, len(working))
                await self._draw_round(working, self.style_for_round(round_index))
                self.total += len(working)
                self.ctx.progress(self.total)
        except FractalError:
            self.state = DriverState.FAILED
            logger.exception("%s failed in round %d", definition.rule.name, self.round_index)
            raise
        except BaseException:
            # Cancellation and surface errors end the run too.
            self.state = DriverState.FAILED
            raise

        self.state = DriverState.DONE
        logger.info("%s done: %d shapes over %d rounds", definition.rule.name, self.total, self.iterations + 1)
        return self.total
