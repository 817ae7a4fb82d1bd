"""The fixed 6x5 tile board drawn under every frame."""

from __future__ import annotations

from typing import Iterator, Tuple

import pygame

from bugrun.config import NUM_COLS, NUM_ROWS, TILE_HEIGHT, TILE_WIDTH
from bugrun.textures.resourcepath import (
    GRASS_BLOCK_PATH,
    STONE_BLOCK_PATH,
    WATER_BLOCK_PATH,
)

# Top row is water, then three rows of stone, then two of grass
ROW_TILES: Tuple[str, ...] = (
    WATER_BLOCK_PATH,
    STONE_BLOCK_PATH,
    STONE_BLOCK_PATH,
    STONE_BLOCK_PATH,
    GRASS_BLOCK_PATH,
    GRASS_BLOCK_PATH,
)


class Board:
    def __init__(self, rows: Tuple[str, ...] = ROW_TILES, cols: int = NUM_COLS) -> None:
        if len(rows) != NUM_ROWS:
            raise ValueError(f"board needs {NUM_ROWS} rows, got {len(rows)}")
        self.rows = rows
        self.cols = cols

    def tiles(self) -> Iterator[Tuple[str, int, int]]:
        """Yield (asset path, x, y) for every tile, row by row."""
        for row, path in enumerate(self.rows):
            for col in range(self.cols):
                yield path, col * TILE_WIDTH, row * TILE_HEIGHT

    def render(self, surface: pygame.Surface, resources) -> None:
        for path, x, y in self.tiles():
            surface.blit(resources.get(path), (x, y))
