"""World HUD: score line, start (avatar) menu, game-over modal and score history.

This isolates HUD layout and drawing from WorldScene. The avatar portrait
rectangles are exposed so the scene can hit-test mouse clicks against the
same layout that gets drawn.
"""

from __future__ import annotations

from typing import List

import pygame

from bugrun.config import WIDTH, HEIGHT
from bugrun.textures.resourcepath import AVATAR_PATHS
from bugrun.ui.text_renderer import TextRenderer
from bugrun.world.game_state import GameState, Phase

PORTRAIT_SIZE = (101, 171)
# Rows of the history table that fit in the game-over modal
HISTORY_ROWS = 8

TEXT_COLOR = (20, 20, 20)
MODAL_TEXT = (255, 255, 255)
MODAL_BG = (0, 0, 0, 170)


def avatar_rects() -> List[pygame.Rect]:
    """Screen rectangles of the avatar portraits on the start menu."""
    w, h = PORTRAIT_SIZE
    gap = 40
    total = len(AVATAR_PATHS) * w + (len(AVATAR_PATHS) - 1) * gap
    left = (WIDTH - total) // 2
    top = HEIGHT // 2 - h // 2
    return [pygame.Rect(left + i * (w + gap), top, w, h) for i in range(len(AVATAR_PATHS))]


def history_lines(state: GameState, limit: int = HISTORY_ROWS) -> List[str]:
    """Format the most recent score records, oldest first."""
    rows = state.history[-limit:]
    return [f"Game {r.replay_index}   gems {r.gem_count}   points {r.score}" for r in rows]


class WorldHUD:
    def __init__(self, scene) -> None:
        self.scene = scene
        self.text = TextRenderer(size=26)
        self.title = TextRenderer(size=48)

    def draw(self, surface: pygame.Surface) -> None:  # pragma: no cover - visual
        state = self.scene.state
        self.text.draw_text(
            surface,
            f"Score {state.score}   Gems {state.gem_count}   Game {state.replay_index + 1}",
            8,
            HEIGHT - 8,
            TEXT_COLOR,
            key="score",
            align="bottomleft",
        )
        if state.phase is Phase.AVATAR_SELECT:
            self._draw_start(surface)
        elif state.phase is Phase.GAME_OVER:
            self._draw_end(surface, state)

    # ------------------------------------------------------------------
    def _dim(self, surface: pygame.Surface) -> None:  # pragma: no cover - visual
        shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        shade.fill(MODAL_BG)
        surface.blit(shade, (0, 0))

    def _draw_start(self, surface: pygame.Surface) -> None:  # pragma: no cover - visual
        self._dim(surface)
        self.title.draw_text(surface, "Bug Run", WIDTH / 2, 110, MODAL_TEXT, align="center")
        self.text.draw_text(
            surface,
            "Cross the stones, grab gems, dodge the bugs.",
            WIDTH / 2,
            160,
            MODAL_TEXT,
            align="center",
        )
        resources = self.scene.resources
        for i, (path, rect) in enumerate(zip(AVATAR_PATHS, avatar_rects())):
            surface.blit(resources.get(path, rect.size), rect.topleft)
            self.text.draw_text(
                surface, str(i + 1), rect.centerx, rect.bottom + 10, MODAL_TEXT, align="center"
            )
        self.text.draw_text(
            surface,
            "Click a character or press 1-3",
            WIDTH / 2,
            HEIGHT - 110,
            MODAL_TEXT,
            align="center",
        )

    def _draw_end(self, surface: pygame.Surface, state: GameState) -> None:  # pragma: no cover - visual
        self._dim(surface)
        self.title.draw_text(surface, "Game Over", WIDTH / 2, 120, MODAL_TEXT, align="center")
        self.text.draw_text(
            surface,
            f"{state.gem_count} gems, {state.score} points",
            WIDTH / 2,
            170,
            MODAL_TEXT,
            align="center",
        )
        self.text.draw_text(
            surface,
            "Click or press Enter to play again",
            WIDTH / 2,
            210,
            MODAL_TEXT,
            align="center",
        )
        lines = history_lines(state)
        if lines:
            self.text.draw_lines(surface, lines, WIDTH / 2, 270, MODAL_TEXT, align="center")
