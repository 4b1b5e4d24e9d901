"""
Engine entry point: owns the pygame window and the asyncio loop.

The generation driver runs as one task; the engine pumps window events and
flips the display between its steps. When a run completes the canvas is
cleared and the fractal starts over (unless restart_on_complete is off).
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Optional

import pygame

from fractalsketch import config
from fractalsketch.driver import GenerationDriver
from fractalsketch.patterns.library import build_fractal
from fractalsketch.render.animator import LineAnimator, RenderContext
from fractalsketch.render.surface import PygameSurface
from fractalsketch.ui.status_header import StatusHeaderWidget
from fractalsketch.ui.widgets import WidgetContext

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, cfg: config.AnimationConfig, fractal_cfg: Optional[config.FractalConfig] = None) -> None:
        pygame.init()
        self.cfg = cfg
        self.fractal_cfg = fractal_cfg or config.get_fractal_config(cfg.fractal)
        self.running = True
        self.total = 0

        width, height = self.fractal_cfg.canvas_size
        pygame.display.set_caption(self.fractal_cfg.title or self.fractal_cfg.name)
        self.screen = pygame.display.set_mode((width, height + cfg.status_height))
        self.canvas = self.screen.subsurface(pygame.Rect(0, cfg.status_height, width, height))
        self.font = pygame.font.SysFont("consolas", 18)
        self.header = StatusHeaderWidget(height=cfg.status_height, fg=cfg.text_color, bg=cfg.background_color)

    def _widget_context(self) -> WidgetContext:
        return WidgetContext(
            surface=self.screen,
            font=self.font,
            total=self.total,
            title=self.fractal_cfg.title,
        )

    def _on_progress(self, total: int) -> None:
        self.total = total
        logger.debug("total shapes drawn: %d", total)

    def _pump_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

    def _present(self) -> None:
        ctx = self._widget_context()
        self.header.layout(ctx)
        self.header.draw(ctx)
        pygame.display.flip()

    def make_driver(self) -> GenerationDriver:
        definition = build_fractal(self.fractal_cfg.name, self.fractal_cfg)
        animator = LineAnimator(
            delay=self.fractal_cfg.line_draw_delay,
            long_line_threshold=self.cfg.long_line_threshold,
            long_line_depth=self.cfg.long_line_depth,
            short_line_depth=self.cfg.short_line_depth,
        )
        ctx = RenderContext(surface=PygameSurface(self.canvas), progress=self._on_progress)
        return GenerationDriver(definition, animator, ctx)

    async def play_once(self) -> bool:
        """Draw the fractal once. Returns False if the window was closed first."""
        self.total = 0
        self.screen.fill(self.cfg.background_color)
        driver = self.make_driver()
        task = asyncio.create_task(driver.run())
        frame_time = 1.0 / max(1, self.cfg.fps)

        while not task.done():
            self._pump_events()
            if not self.running:
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
                return False
            self._present()
            await asyncio.sleep(frame_time)

        # Re-raises whatever stopped the driver.
        task.result()
        self._present()
        return True

    async def _run(self) -> None:
        while self.running:
            completed = await self.play_once()
            if not completed or not self.cfg.restart_on_complete:
                break
            logger.info("restarting %s", self.fractal_cfg.name)

    def run(self) -> None:
        try:
            asyncio.run(self._run())
        finally:
            pygame.quit()
