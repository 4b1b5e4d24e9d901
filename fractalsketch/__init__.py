"""Animated fractal sketches drawn one sub-segment at a time."""

__version__ = "0.1.0"
