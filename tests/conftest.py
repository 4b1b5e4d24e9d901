"""
Shared test fixtures for the fractalsketch test suite.
"""

import asyncio
import os

import pytest

# pygame must never try to open a real window or audio device under test.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from fractalsketch.config import FractalConfig, load_fractal_configs
from fractalsketch.render.animator import LineAnimator, RenderContext, StrokeStyle
from fractalsketch.render.surface import RecordingSurface


class SleepRecorder:
    """Stand-in for asyncio.sleep that remembers every delay and still yields."""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)
        await asyncio.sleep(0)


@pytest.fixture
def fractal_configs():
    return load_fractal_configs()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def progress_log():
    return []


@pytest.fixture
def render_ctx(surface, progress_log):
    return RenderContext(surface=surface, progress=progress_log.append)


@pytest.fixture
def sleeper():
    return SleepRecorder()


@pytest.fixture
def animator(sleeper):
    """Animator with the standard pacing thresholds and a recording sleep."""
    return LineAnimator(delay=0.015, sleep=sleeper)


@pytest.fixture
def white():
    return StrokeStyle(color=(255, 255, 255), width=1.0)


def make_config(name, **kwargs):
    """FractalConfig with zero delays so runs finish instantly."""
    kwargs.setdefault("line_draw_delay_ms", 0)
    return FractalConfig(name=name, **kwargs)
