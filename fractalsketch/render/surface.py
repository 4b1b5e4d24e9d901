# fractalsketch/render/surface.py
"""Drawing surfaces the animator strokes onto.

The animator only ever issues begin/move/line/stroke sequences and sets the
stroke colour and width first, so any object with that shape will do.
"""
from __future__ import annotations

import math
from typing import Any, List, Protocol, Tuple

import pygame

from fractalsketch.state.shapes import Line, Point

Color = Tuple[int, int, int]


class DrawingSurface(Protocol):
    stroke_style: Color
    line_width: float

    def begin_path(self) -> None: ...

    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def arc(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None: ...

    def stroke(self) -> None: ...


class _PathSurface:
    """Shared path bookkeeping: subpaths of points plus pending arcs."""

    def __init__(self) -> None:
        self.stroke_style: Color = (255, 255, 255)
        self.line_width: float = 1.0
        self._subpaths: List[List[Point]] = []
        self._arcs: List[Tuple[Point, float, float, float]] = []

    def begin_path(self) -> None:
        self._subpaths = []
        self._arcs = []

    def move_to(self, point: Point) -> None:
        self._subpaths.append([point])

    def line_to(self, point: Point) -> None:
        if not self._subpaths:
            self._subpaths.append([point])
            return
        self._subpaths[-1].append(point)

    def arc(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        self._arcs.append((center, radius, start_angle, end_angle))

    def _path_lines(self) -> List[Line]:
        lines: List[Line] = []
        for pts in self._subpaths:
            for a, b in zip(pts, pts[1:]):
                lines.append(Line(a, b))
        return lines


class PygameSurface(_PathSurface):
    """Strokes paths onto a pygame.Surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        super().__init__()
        self.surface = surface

    def _pixel_width(self) -> int:
        return max(1, int(round(self.line_width)))

    def stroke(self) -> None:
        width = self._pixel_width()
        for line in self._path_lines():
            pygame.draw.line(
                self.surface,
                self.stroke_style,
                line.start.round().as_tuple(),
                line.end.round().as_tuple(),
                width,
            )
        for center, radius, start_angle, end_angle in self._arcs:
            rect = pygame.Rect(0, 0, int(radius * 2), int(radius * 2))
            rect.center = (int(round(center.x)), int(round(center.y)))
            # pygame measures arcs counter-clockwise, the path API clockwise.
            if abs(end_angle - start_angle) >= 2 * math.pi:
                pygame.draw.circle(self.surface, self.stroke_style, rect.center, int(radius), width)
            else:
                pygame.draw.arc(self.surface, self.stroke_style, rect, -end_angle, -start_angle, width)


class RecordingSurface(_PathSurface):
    """Keeps every stroke in memory instead of drawing it.

    `calls` holds the raw call sequence; `strokes` the stroked lines with the
    style that was active when `stroke()` ran.
    """

    def __init__(self) -> None:
        super().__init__()
        self.calls: List[Tuple[Any, ...]] = []
        self.strokes: List[Tuple[Line, Color, float]] = []

    def begin_path(self) -> None:
        self.calls.append(("begin_path",))
        super().begin_path()

    def move_to(self, point: Point) -> None:
        self.calls.append(("move_to", point))
        super().move_to(point)

    def line_to(self, point: Point) -> None:
        self.calls.append(("line_to", point))
        super().line_to(point)

    def arc(self, center: Point, radius: float, start_angle: float, end_angle: float) -> None:
        self.calls.append(("arc", center, radius, start_angle, end_angle))
        super().arc(center, radius, start_angle, end_angle)

    def stroke(self) -> None:
        self.calls.append(("stroke", self.stroke_style, self.line_width))
        for line in self._path_lines():
            self.strokes.append((line, self.stroke_style, self.line_width))

    def clear(self) -> None:
        self.calls.clear()
        self.strokes.clear()
        super().begin_path()
