"""Entry point kept minimal by delegating to Engine.

Loads every image first; the engine loop only starts from the resource
cache's ready callback, so a missing asset stops the game before the window
ever shows a frame.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import pygame

from bugrun.config import FPS
from bugrun.core.engine import Engine
from bugrun.textures.resourcepath import GAME_IMAGE_PATHS
from bugrun.textures.resources import ResourceCache, ResourceLoadFailure


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Dodge the bugs, collect the gems")
    ap.add_argument(
        "--assets",
        default=".",
        help="Directory containing the images/ folder",
    )
    ap.add_argument(
        "--placeholders",
        action="store_true",
        help="Draw simple shapes for any image that is missing",
    )
    ap.add_argument("--seed", type=int, default=None, help="Seed for lane randomness")
    ap.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    ap.add_argument(
        "--timings",
        action="store_true",
        help="Print how long scene setup takes",
    )
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    resources = ResourceCache(args.assets, placeholders=args.placeholders)
    engine = Engine(resources, seed=args.seed, fps=args.fps, log_timings=args.timings)
    resources.on_ready(engine.run)
    try:
        resources.load(GAME_IMAGE_PATHS)
    except ResourceLoadFailure as e:
        print(f"[Main] Startup failed, {e}")
        print("[Main] Pass --placeholders to run without the artwork")
        pygame.quit()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
