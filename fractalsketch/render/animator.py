"""Animated line drawing: lines are revealed one sub-segment at a time."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Tuple

from fractalsketch.render.surface import DrawingSurface
from fractalsketch.state.shapes import Line

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]
Sleep = Callable[[float], Awaitable[None]]


def _ignore_progress(total: int) -> None:
    pass


@dataclass(frozen=True)
class StrokeStyle:
    color: Color = (255, 255, 255)
    width: float = 1.0


@dataclass
class RenderContext:
    """Everything a draw call touches, passed explicitly instead of module state.

    - surface:  where strokes land
    - progress: sink for the cumulative shape count after each round
    """
    surface: DrawingSurface
    progress: Callable[[int], None] = field(default=_ignore_progress)

    def stroke_line(self, line: Line, style: StrokeStyle) -> None:
        # Other shapes' draws interleave with ours, so re-assert the style every time.
        surface = self.surface
        surface.stroke_style = style.color
        surface.line_width = style.width
        surface.begin_path()
        surface.move_to(line.start)
        surface.line_to(line.end)
        surface.stroke()


class LineAnimator:
    """Draws lines as 2**k sub-segments with a fixed pause after each one.

    Longer lines get the deeper bisection so the per-segment pace looks the
    same across line lengths. The end result matches drawing the line in one
    stroke; only the reveal is paced.
    """

    def __init__(
        self,
        delay: float,
        long_line_threshold: float = 20.0,
        long_line_depth: int = 5,
        short_line_depth: int = 3,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.delay = delay
        self.long_line_threshold = long_line_threshold
        self.long_line_depth = long_line_depth
        self.short_line_depth = short_line_depth
        self._sleep = sleep

    def bisection_depth(self, line: Line) -> int:
        if line.length() > self.long_line_threshold:
            return self.long_line_depth
        return self.short_line_depth

    def segment_count(self, line: Line) -> int:
        return 2 ** self.bisection_depth(line)

    def sub_segments(self, line: Line) -> List[Line]:
        """Sub-segments in start-to-end order."""
        parts = [line]
        for _ in range(self.bisection_depth(line)):
            parts = [half for part in parts for half in part.split()]
        return parts

    async def draw_animated(self, ctx: RenderContext, line: Line, style: StrokeStyle) -> None:
        for part in self.sub_segments(line):
            ctx.stroke_line(part, style)
            await self._sleep(self.delay)

    async def draw_shape(self, ctx: RenderContext, shape, style: StrokeStyle) -> None:
        """Draw every side of `shape`, each one finished before the next starts."""
        for side in shape.sides():
            await self.draw_animated(ctx, side, style)
