import argparse
import logging
from typing import List, Optional

from fractalsketch import config
from fractalsketch.engine import Engine
from fractalsketch.patterns.library import FRACTAL_NAMES


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Animate a fractal one stroke at a time.")
    parser.add_argument("fractal", nargs="?", default=config.default_fractal, choices=FRACTAL_NAMES)
    parser.add_argument("--once", action="store_true", help="stop after one full drawing instead of restarting")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    cfg = config.AnimationConfig(
        fractal=args.fractal,
        restart_on_complete=not args.once,
        log_level=args.log_level.upper(),
    )
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()
