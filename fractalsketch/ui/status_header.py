# fractalsketch/ui/status_header.py

from __future__ import annotations

from typing import Tuple

import pygame

from fractalsketch.ui.widgets import LabelWidget, Widget, WidgetContext


def format_total(total: int) -> str:
    return f"Total: {total}"


class StatusHeaderWidget(Widget):
    """Top strip showing the fractal title and the running shape total.

    The strip is cleared before every draw, so it can sit over the animation
    without leaving stale digits behind.
    """

    def __init__(
        self,
        height: int = 32,
        fg: Tuple[int, int, int] = (255, 255, 255),
        bg: Tuple[int, int, int] = (0, 0, 0),
    ) -> None:
        super().__init__()
        self.height = height
        self.bg = bg
        self.total_label = LabelWidget(color=fg)
        self.title_label = LabelWidget(color=fg)
        self.add_child(self.total_label)
        self.add_child(self.title_label)

    def layout(self, ctx: WidgetContext) -> None:
        width = ctx.surface.get_width()
        self.rect = pygame.Rect(0, 0, width, self.height)
        self.total_label.rect = pygame.Rect(8, 8, width // 2, self.height - 8)
        if ctx.font is not None and ctx.title:
            title_w = ctx.font.size(ctx.title)[0]
            self.title_label.rect = pygame.Rect(width - title_w - 8, 8, title_w, self.height - 8)
        super().layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        self.total_label.text = format_total(ctx.total)
        self.title_label.text = ctx.title
        pygame.draw.rect(ctx.surface, self.bg, self.rect)
        super().draw(ctx)
