"""World scene that owns the board, every entity, the game state and input.

The engine only pumps events and calls update()/render(); all gameplay lives
here. Randomness comes from the injected `rng` so a seeded scene replays the
same lanes.
"""

from __future__ import annotations

import random
import time
from typing import List, Optional

import pygame

from bugrun.config import (
    BACKGROUND,
    CROSSING_POINTS,
    ENEMY_COUNT,
    ENEMY_MAX_SPEED,
    ENEMY_MIN_SPEED,
    GEM_POINTS,
    GEM_X_LANES,
    GEM_Y_LANES,
    STAR_SECONDS,
)
from bugrun.core.scene import Scene
from bugrun.textures.resourcepath import STAR_PATH
from bugrun.world.board import Board
from bugrun.world.collision import CollisionDetector, aabb_overlap
from bugrun.world.entities import Enemy, Entity, Gem, Heart, Player
from bugrun.world.game_state import GameState, Phase, ScoreRecord
from bugrun.world.spawner import pick_lane, relocate_gem, respawn_enemies, scatter_enemies
from bugrun.world.world_hud import WorldHUD, avatar_rects

MOVE_KEYS = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
}

AVATAR_KEYS = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2}

PLAY_AGAIN_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)


class WorldScene(Scene):
    def __init__(
        self,
        resources=None,
        rng: Optional[random.Random] = None,
        *,
        enemy_count: int = ENEMY_COUNT,
        log_timings: bool = False,
    ) -> None:
        super().__init__()
        self.resources = resources
        self.log_timings = log_timings
        self.rng = rng or random.Random()

        start_time = time.perf_counter()
        self.board = Board()
        self.state = GameState()
        self.player = Player.create()
        self.enemies: List[Enemy] = []
        for _ in range(enemy_count):
            x, y = pick_lane(self.rng)
            speed = self.rng.uniform(ENEMY_MIN_SPEED, ENEMY_MAX_SPEED)
            self.enemies.append(Enemy.create(x, y, speed))
        gx, gy = pick_lane(self.rng, GEM_X_LANES, GEM_Y_LANES)
        self.gem = Gem.create(gx, gy, self.rng.choice(sorted(GEM_POINTS)))
        # Shown briefly where the player reached the water
        self.star = Entity(x=0, y=0, width=101, height=171, sprite=STAR_PATH)
        self.star_timer = 0.0
        self._hud = WorldHUD(self)
        self.log_timing(
            "Creating world objects", start_time, time.perf_counter(), log=self.log_timings
        )

        print("[Scene] World scene initialized")

    @property
    def hearts(self) -> List[Heart]:
        return self.state.hearts

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------
    def update(self, dt: float) -> None:
        for enemy in self.enemies:
            enemy.update(dt)
        for heart in self.hearts:
            heart.update(dt)
        self.gem.update(dt)
        self.player.update(dt)
        if self.star_timer > 0.0:
            self.star_timer = max(0.0, self.star_timer - dt)

        self.check_collisions()
        respawn_enemies(self.enemies, self.rng)

        if self.state.is_playing():
            self.check_gem_pickup()
            self.check_crossing()

        super().update(dt)

    def check_collisions(self) -> int:
        """Resolve player/enemy overlaps; returns the number of lives lost.

        Enemies are tested in order against the player's current position,
        and the player is sent back to spawn after each hit, so a second
        enemy only counts if it also overlaps the spawn point.
        """
        if not self.state.is_playing():
            return 0
        lost = 0
        for _enemy in CollisionDetector.hits(self.player, self.enemies):
            self.player.reset()
            if self.state.register_hit():
                lost += 1
            if not self.state.is_playing():
                break
        return lost

    def check_gem_pickup(self) -> bool:
        if not aabb_overlap(self.player, self.gem):
            return False
        self.state.collect_gem(self.gem.points)
        relocate_gem(self.gem, self.rng, avoid=self.player)
        return True

    def check_crossing(self) -> bool:
        if not self.player.reached_water():
            return False
        self.star.move_to(self.player.x, self.player.y)
        self.star_timer = STAR_SECONDS
        self.state.add_points(CROSSING_POINTS)
        self.player.reset()
        return True

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------
    def select_avatar(self, index: int) -> bool:
        sprite = self.state.select_avatar(index)
        if sprite is None:
            return False
        self.player.sprite = sprite
        self.player.reset()
        print(f"[Scene] Avatar selected: {sprite}")
        return True

    def play_again(self) -> Optional[ScoreRecord]:
        record = self.state.play_again()
        if record is None:
            return None
        scatter_enemies(self.enemies, self.rng)
        self.player.reset()
        relocate_gem(self.gem, self.rng, avoid=self.player)
        print(
            f"[Scene] Game {record.replay_index} archived: "
            f"{record.gem_count} gems, {record.score} points"
        )
        return record

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def handle_event(self, event) -> None:
        phase = self.state.phase
        if phase is Phase.AVATAR_SELECT:
            self._handle_avatar_event(event)
        elif phase is Phase.PLAYING:
            self._handle_play_event(event)
        elif phase is Phase.GAME_OVER:
            self._handle_game_over_event(event)

    def _handle_avatar_event(self, event) -> None:
        if event.type == pygame.MOUSEBUTTONUP:
            for index, rect in enumerate(avatar_rects()):
                if rect.collidepoint(event.pos):
                    self.select_avatar(index)
                    return
        elif event.type == pygame.KEYUP and event.key in AVATAR_KEYS:
            self.select_avatar(AVATAR_KEYS[event.key])

    def _handle_play_event(self, event) -> None:
        if event.type != pygame.KEYUP or not self.state.input_enabled:
            return
        direction = MOVE_KEYS.get(event.key)
        if direction is not None:
            self.player.handle_input(direction)

    def _handle_game_over_event(self, event) -> None:
        if event.type == pygame.MOUSEBUTTONUP or (
            event.type == pygame.KEYUP and event.key in PLAY_AGAIN_KEYS
        ):
            self.play_again()

    # ------------------------------------------------------------------
    # Render
    # ------------------------------------------------------------------
    def render(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND)
        self.board.render(surface, self.resources)
        for enemy in self.enemies:
            enemy.render(surface, self.resources)
        for heart in self.hearts:
            heart.render(surface, self.resources)
        self.gem.render(surface, self.resources)
        if self.star_timer > 0.0:
            self.star.render(surface, self.resources)
        self.player.render(surface, self.resources)
        self._hud.draw(surface)

    def log_timing(self, message: str, start_time: float, end_time: float, log: bool = False):
        """Logs timing information for WorldScene setup phases."""
        if log:
            print(f"{message} took {end_time - start_time:.6f} seconds")
