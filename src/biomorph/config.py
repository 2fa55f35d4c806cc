"""Runtime settings and logging setup for the explorer."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .generation import GRID_COLUMNS, GRID_ROWS

# ---------------------------------------------------------------------------
# Configuration constants
# ---------------------------------------------------------------------------

SCREEN_WIDTH = 1220
SCREEN_HEIGHT = 660
FPS = 50
WINDOW_CAPTION = "Biomorphs | Select a shape to breed the next generation"
DEFAULT_SAVE_DIR = "."

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s  %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


@dataclass
class AppConfig:
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    fps: int = FPS
    save_dir: Path = Path(DEFAULT_SAVE_DIR)
    seed: Optional[int] = None
    debug: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="biomorph",
        description="Breed branching biomorphs by picking one shape per generation.",
    )
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT, help="window height in pixels")
    parser.add_argument("--fps", type=int, default=FPS, help="frames drawn per second")
    parser.add_argument(
        "--save-dir",
        type=Path,
        default=Path(DEFAULT_SAVE_DIR),
        help="directory that saved genotypes are written to",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible mutations")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> AppConfig:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width < GRID_COLUMNS or args.height < GRID_ROWS:
        parser.error(f"window must be at least {GRID_COLUMNS}x{GRID_ROWS} pixels")
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return AppConfig(
        width=args.width,
        height=args.height,
        fps=args.fps,
        save_dir=args.save_dir,
        seed=args.seed,
        debug=args.debug,
    )


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
