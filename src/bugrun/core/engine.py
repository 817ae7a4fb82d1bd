"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window, owns the frame clock, pumps events and runs
  update -> render every frame until the window closes.
- Scene: holds the board, entities and game state (WorldScene).
- ResourceCache: images, loaded once before the loop starts.

The loop is meant to be started from the cache's ready callback:

    cache.on_ready(engine.run)
    cache.load(GAME_IMAGE_PATHS)
"""

from __future__ import annotations

import random
from typing import Optional

import pygame

from bugrun.config import FPS, HEIGHT, TITLE, VSYNC, WIDTH
from bugrun.textures.resources import ResourceCache
from bugrun.world.worldscene import WorldScene


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        resources: Optional[ResourceCache] = None,
        *,
        seed: Optional[int] = None,
        fps: int = FPS,
        log_timings: bool = False,
    ):
        pygame.init()
        pygame.display.set_caption(TITLE)
        try:
            # vsync: 1 to enable, 0 to disable
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT), vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # vsync was requested but unavailable on this system/driver
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.fps = fps

        self.resources = resources or ResourceCache()
        self.rng = random.Random(seed)

        # Active scene (owns entities, state & input)
        self.scene = WorldScene(self.resources, self.rng, log_timings=log_timings)
        self.frames = 0

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            # Forward everything else to the active scene
            self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def update(self, dt: float):
        # Scene owns all gameplay updates
        self.scene.update(dt)

    # ------------------------------------------------------------------
    def render(self):
        self.scene.render(self.screen)
        pygame.display.flip()

    # ------------------------------------------------------------------
    def step(self, dt: float):
        """One tick: update with `dt` seconds, then draw."""
        self.update(dt)
        self.render()
        self.frames += 1

    # ------------------------------------------------------------------
    def run(self):
        if not self.resources.is_ready():
            raise RuntimeError("Engine.run() called before resources finished loading")
        print("[Engine] Starting game loop")
        # Baseline timestamp; the first tick runs with dt = 0
        self.clock.tick()
        dt = 0.0
        running = True
        while running:
            running = self.handle_events()
            if not running:
                break
            self.step(dt)
            # With VSYNC the display paces us; tick() then only measures
            if VSYNC:
                dt = self.clock.tick() / 1000.0
            else:
                dt = self.clock.tick(self.fps) / 1000.0
        print(f"[Engine] Stopped after {self.frames} frames")
        pygame.quit()
