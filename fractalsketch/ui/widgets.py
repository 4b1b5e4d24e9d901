# fractalsketch/ui/widgets.py

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame


@dataclass
class WidgetContext:
    """
    Lightweight context passed into widget methods.

    - surface: the surface the widget draws into
    - font:    font shared by text widgets (None when fonts are unavailable)
    - total:   cumulative shape count reported by the driver so far
    - title:   name of the fractal being drawn
    """
    surface: pygame.Surface
    font: Optional[pygame.font.Font]
    total: int = 0
    title: str = ""


class Widget:
    """
    Minimal base class for overlay widgets.

    Keeps a rect, a visibility flag and optional children; subclasses override
    layout / draw.
    """

    def __init__(self) -> None:
        self.rect: pygame.Rect = pygame.Rect(0, 0, 0, 0)
        self.visible: bool = True
        self.children: List[Widget] = []

    def add_child(self, child: "Widget") -> None:
        self.children.append(child)

    def layout(self, ctx: WidgetContext) -> None:
        for child in self.children:
            child.layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        for child in self.children:
            child.draw(ctx)


class LabelWidget(Widget):
    def __init__(self, text: str = "", color: Tuple[int, int, int] = (255, 255, 255)) -> None:
        super().__init__()
        self.text = text
        self.color = color

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible or ctx.font is None or not self.text:
            return
        surf = ctx.font.render(self.text, True, self.color)
        ctx.surface.blit(surf, self.rect.topleft)
        super().draw(ctx)
