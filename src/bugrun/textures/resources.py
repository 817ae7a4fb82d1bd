"""Image loading and caching for the board and its entities.

Keeps a small registry keyed by asset path (e.g. ``images/enemy-bug.png``)
so entities can hold a plain string and look the surface up at draw time:

    cache = ResourceCache(base_dir=".")
    cache.on_ready(engine.run)
    cache.load(GAME_IMAGE_PATHS)
    cache.get(ENEMY_BUG_PATH)

`load()` is all-or-nothing: if any path fails, `ResourceLoadFailure` is raised
and the ready callbacks never fire. With ``placeholders=True`` missing files
are replaced by procedurally drawn surfaces instead.
"""

from __future__ import annotations

import os
import time
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pygame

from bugrun.textures.resourcepath import (
    WATER_BLOCK_PATH,
    STONE_BLOCK_PATH,
    GRASS_BLOCK_PATH,
    ENEMY_BUG_PATH,
    HEART_PATH,
    STAR_PATH,
    GEM_PATHS,
    AVATAR_PATHS,
)

ReadyFn = Callable[[], None]

# Board artwork is 101x171 with a transparent band above each sprite
SPRITE_SIZE: Tuple[int, int] = (101, 171)


class ResourceLoadFailure(Exception):
    """An asset path could not be resolved or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"failed to load {path}: {reason}")
        self.path = path
        self.reason = reason


class ResourceCache:
    """Path-keyed image registry with a one-shot ready signal."""

    def __init__(self, base_dir: str = ".", *, placeholders: bool = False) -> None:
        self.base_dir = base_dir
        self.placeholders = placeholders
        self._images: Dict[str, pygame.Surface] = {}
        self._scaled: Dict[Tuple[str, Tuple[int, int]], pygame.Surface] = {}
        self._ready_callbacks: List[ReadyFn] = []
        self._ready = False

    # ------------------------------------------------------------------
    def load(self, paths: Iterable[str]) -> None:
        start = time.perf_counter()
        added: List[str] = []
        try:
            for path in paths:
                if path in self._images:
                    continue
                self._images[path] = self._load_one(path)
                added.append(path)
        except ResourceLoadFailure:
            # Drop this batch so a failed load leaves nothing half-registered
            for path in added:
                del self._images[path]
            raise
        print(
            f"[Resources] Loaded {len(added)} images in "
            f"{time.perf_counter() - start:.3f}s"
        )
        self._mark_ready()

    def _load_one(self, path: str) -> pygame.Surface:
        full_path = os.path.join(self.base_dir, path)
        if not os.path.exists(full_path):
            if self.placeholders:
                print(f"[Resources] Using placeholder for missing {path}")
                return create_placeholder_image(path)
            raise ResourceLoadFailure(path, "file not found")
        try:
            surface = pygame.image.load(full_path)
        except pygame.error as e:
            raise ResourceLoadFailure(path, str(e)) from e
        # convert_alpha needs a display mode; headless loads keep the raw surface
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        return surface

    def _mark_ready(self) -> None:
        if self._ready:
            return
        self._ready = True
        callbacks, self._ready_callbacks = self._ready_callbacks, []
        for fn in callbacks:
            fn()

    # ------------------------------------------------------------------
    def on_ready(self, fn: ReadyFn) -> None:
        """Run `fn` once every requested image is available.

        If loading already finished, `fn` runs immediately.
        """
        if self._ready:
            fn()
        else:
            self._ready_callbacks.append(fn)

    def is_ready(self) -> bool:
        return self._ready

    def get(self, path: str, size: Optional[Tuple[int, int]] = None) -> pygame.Surface:
        """Return the cached surface for `path`, optionally scaled to `size`.

        Raises KeyError if the path was never loaded.
        """
        surface = self._images[path]
        if size is None or surface.get_size() == tuple(size):
            return surface
        key = (path, (int(size[0]), int(size[1])))
        scaled = self._scaled.get(key)
        if scaled is None:
            scaled = pygame.transform.smoothscale(surface, key[1])
            self._scaled[key] = scaled
        return scaled


# ---------------------------------------------------------------------------
# Placeholder artwork
# ---------------------------------------------------------------------------
_TILE_COLORS = {
    WATER_BLOCK_PATH: (70, 130, 220),
    STONE_BLOCK_PATH: (150, 150, 150),
    GRASS_BLOCK_PATH: (90, 180, 80),
}

_GEM_COLORS = {
    GEM_PATHS["blue"]: (60, 120, 255),
    GEM_PATHS["green"]: (40, 200, 90),
    GEM_PATHS["orange"]: (255, 150, 40),
}

_AVATAR_COLORS = dict(
    zip(AVATAR_PATHS, [(60, 90, 200), (230, 140, 60), (220, 90, 180)])
)


def create_placeholder_image(path: str) -> pygame.Surface:
    """Draw a stand-in 101x171 sprite for `path`.

    Shapes follow the layout of the stock artwork so positions and
    hitboxes line up: tiles fill the lower part, characters sit in the
    middle band.
    """
    w, h = SPRITE_SIZE
    surface = pygame.Surface(SPRITE_SIZE, pygame.SRCALPHA)

    if path in _TILE_COLORS:
        color = _TILE_COLORS[path]
        pygame.draw.rect(surface, color, pygame.Rect(0, 50, w, h - 50))
        shade = tuple(max(0, c - 40) for c in color)
        pygame.draw.rect(surface, shade, pygame.Rect(0, 131, w, h - 131))
    elif path == ENEMY_BUG_PATH:
        pygame.draw.ellipse(surface, (200, 30, 30), pygame.Rect(5, 80, 91, 55))
        pygame.draw.circle(surface, (30, 30, 30), (82, 100), 8)
    elif path == HEART_PATH:
        pygame.draw.circle(surface, (220, 20, 60), (35, 75), 22)
        pygame.draw.circle(surface, (220, 20, 60), (66, 75), 22)
        pygame.draw.polygon(surface, (220, 20, 60), [(14, 84), (87, 84), (50, 130)])
    elif path == STAR_PATH:
        pygame.draw.polygon(
            surface,
            (250, 220, 40),
            [(50, 60), (62, 92), (95, 92), (68, 112), (78, 145),
             (50, 125), (22, 145), (32, 112), (5, 92), (38, 92)],
        )
    elif path in _GEM_COLORS:
        pygame.draw.polygon(
            surface, _GEM_COLORS[path], [(50, 60), (90, 100), (50, 150), (10, 100)]
        )
    elif path in _AVATAR_COLORS:
        color = _AVATAR_COLORS[path]
        pygame.draw.circle(surface, (250, 220, 190), (50, 85), 20)
        pygame.draw.rect(surface, color, pygame.Rect(30, 105, 41, 40))
    else:
        # Unknown asset: checkerboard so it stands out
        tile = 8
        for ty in range(0, h, tile):
            for tx in range(0, w, tile):
                if (tx // tile + ty // tile) % 2 == 0:
                    pygame.draw.rect(surface, (255, 0, 0), pygame.Rect(tx, ty, tile, tile))
    return surface


__all__ = [
    "ResourceCache",
    "ResourceLoadFailure",
    "create_placeholder_image",
    "SPRITE_SIZE",
]
