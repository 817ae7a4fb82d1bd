"""Board entities: enemies, hearts, the gem and the player.

Each entity keeps its top-left position, a fixed hitbox size and the asset
path of its sprite. Rendering looks the sprite up in a `ResourceCache` at
draw time so entities stay plain data and can be built without a display.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import pygame

from bugrun.config import (
    ENEMY_SIZE,
    ENEMY_X_LANES,
    ENEMY_Y_LANES,
    GEM_POINTS,
    GEM_SIZE,
    GEM_X_LANES,
    GEM_Y_LANES,
    HEART_ORIGIN,
    HEART_SIZE,
    HEART_SPACING,
    PLAYER_MAX_X,
    PLAYER_MAX_Y,
    PLAYER_MIN_X,
    PLAYER_MIN_Y,
    PLAYER_SIZE,
    PLAYER_SPAWN,
    TILE_HEIGHT,
    TILE_WIDTH,
)
from bugrun.textures.resourcepath import (
    CHAR_BOY_PATH,
    ENEMY_BUG_PATH,
    GEM_PATHS,
    HEART_PATH,
)


@dataclass
class Entity:
    x: float
    y: float
    width: float
    height: float
    sprite: str
    # Sprite placement relative to the hitbox; None keeps the image size
    draw_offset: Tuple[int, int] = (0, 0)
    draw_size: Optional[Tuple[int, int]] = None

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def update(self, dt: float = 0.0) -> None:
        pass

    def render(self, surface: pygame.Surface, resources) -> None:  # pragma: no cover - visual
        image = resources.get(self.sprite, self.draw_size)
        ox, oy = self.draw_offset
        surface.blit(image, (int(self.x) + ox, int(self.y) + oy))


@dataclass
class Enemy(Entity):
    speed: float = 100.0
    x_lanes: Tuple[float, ...] = ENEMY_X_LANES
    y_lanes: Tuple[float, ...] = ENEMY_Y_LANES

    @classmethod
    def create(cls, x: float, y: float, speed: float) -> "Enemy":
        w, h = ENEMY_SIZE
        return cls(x=x, y=y, width=w, height=h, sprite=ENEMY_BUG_PATH, speed=speed)

    def update(self, dt: float = 0.0) -> None:
        self.x += self.speed * dt


@dataclass
class Heart(Entity):
    @classmethod
    def create(cls, index: int) -> "Heart":
        w, h = HEART_SIZE
        ox, oy = HEART_ORIGIN
        return cls(
            x=ox + index * HEART_SPACING,
            y=oy,
            width=w,
            height=h,
            sprite=HEART_PATH,
            draw_size=(w, int(h * 1.7)),
        )


@dataclass
class Gem(Entity):
    color: str = "blue"
    x_lanes: Tuple[float, ...] = GEM_X_LANES
    y_lanes: Tuple[float, ...] = GEM_Y_LANES

    @classmethod
    def create(cls, x: float, y: float, color: str = "blue") -> "Gem":
        w, h = GEM_SIZE
        return cls(
            x=x,
            y=y,
            width=w,
            height=h,
            sprite=GEM_PATHS[color],
            draw_offset=(-20, -10),
            color=color,
        )

    @property
    def points(self) -> int:
        return GEM_POINTS[self.color]

    def recolor(self, color: str) -> None:
        self.color = color
        self.sprite = GEM_PATHS[color]


@dataclass
class Player(Entity):
    spawn: Tuple[float, float] = PLAYER_SPAWN

    @classmethod
    def create(cls, sprite: str = CHAR_BOY_PATH) -> "Player":
        w, h = PLAYER_SIZE
        sx, sy = PLAYER_SPAWN
        return cls(x=sx, y=sy, width=w, height=h, sprite=sprite)

    def reset(self) -> None:
        self.x, self.y = self.spawn

    def handle_input(self, direction: str) -> None:
        """Step one tile in `direction`, staying on the board."""
        if direction == "left":
            self.x = max(PLAYER_MIN_X, self.x - TILE_WIDTH)
        elif direction == "right":
            self.x = min(PLAYER_MAX_X, self.x + TILE_WIDTH)
        elif direction == "up":
            self.y = max(PLAYER_MIN_Y, self.y - TILE_HEIGHT)
        elif direction == "down":
            self.y = min(PLAYER_MAX_Y, self.y + TILE_HEIGHT)

    def reached_water(self) -> bool:
        return self.y < 0


__all__ = ["Entity", "Enemy", "Heart", "Gem", "Player"]
