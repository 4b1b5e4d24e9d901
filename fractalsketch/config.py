from __future__ import annotations

import pathlib
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

import yaml

Color = Tuple[int, int, int]

CONTENT_PATH = pathlib.Path(__file__).resolve().parent / "content" / "fractals.yaml"

default_fractal = "tree"


@dataclass(frozen=True)
class FractalConfig:
    name: str
    title: str = ""
    base_length: float = 300.0
    iterations: int = 5
    line_draw_delay_ms: float = 20.0
    stroke_color: Color = (255, 255, 255)
    line_width: float = 1.0
    canvas: Tuple[float, float] = (1.0, 1.0)  # multiples of base_length
    params: Dict[str, Any] = field(default_factory=dict)

    @property
    def line_draw_delay(self) -> float:
        """Delay between sub-segments, in seconds."""
        return self.line_draw_delay_ms / 1000.0

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return (
            int(round(self.base_length * self.canvas[0])),
            int(round(self.base_length * self.canvas[1])),
        )


@dataclass
class AnimationConfig:
    fractal: str = default_fractal
    fps: int = 60
    background_color: Color = (0, 0, 0)
    text_color: Color = (255, 255, 255)
    restart_on_complete: bool = True
    # animator: lines longer than this get the fine bisection depth
    long_line_threshold: float = 20.0
    long_line_depth: int = 5
    short_line_depth: int = 3
    status_height: int = 32
    log_level: str = "INFO"


def _fractal_from_spec(name: str, spec: Dict[str, Any]) -> FractalConfig:
    kwargs: Dict[str, Any] = {"name": name}
    for key in ("title", "base_length", "iterations", "line_draw_delay_ms", "line_width"):
        if key in spec:
            kwargs[key] = spec[key]
    color_raw = spec.get("stroke_color")
    if color_raw:
        kwargs["stroke_color"] = tuple(color_raw)
    canvas_raw = spec.get("canvas")
    if canvas_raw:
        kwargs["canvas"] = tuple(canvas_raw)
    kwargs["params"] = dict(spec.get("params", {}) or {})
    return FractalConfig(**kwargs)


def load_fractal_configs(path: Optional[pathlib.Path] = None) -> Dict[str, FractalConfig]:
    """Read per-fractal constants from YAML (the shipped content file by default)."""
    path = path or CONTENT_PATH
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return {name: _fractal_from_spec(name, spec or {}) for name, spec in data.items()}


def get_fractal_config(name: str, configs: Optional[Dict[str, FractalConfig]] = None, **overrides: Any) -> FractalConfig:
    configs = configs if configs is not None else load_fractal_configs()
    try:
        cfg = configs[name]
    except KeyError as exc:
        known = ", ".join(sorted(configs))
        raise KeyError(f"Unknown fractal '{name}'. Known fractals: {known}") from exc
    return replace(cfg, **overrides) if overrides else cfg
