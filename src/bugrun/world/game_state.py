"""Lives, score and replay bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from bugrun.config import MAX_LIVES
from bugrun.textures.resourcepath import AVATAR_PATHS
from bugrun.world.entities import Heart


class Phase(Enum):
    AVATAR_SELECT = "avatar_select"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class ScoreRecord:
    replay_index: int
    gem_count: int
    score: int


def full_hearts() -> List[Heart]:
    return [Heart.create(i) for i in range(MAX_LIVES)]


@dataclass
class GameState:
    """Game state machine.

    AVATAR_SELECT -> PLAYING -> GAME_OVER -> (play again) -> PLAYING ...

    The heart list is the single source of truth for remaining lives.
    """

    phase: Phase = Phase.AVATAR_SELECT
    hearts: List[Heart] = field(default_factory=full_hearts)
    gem_count: int = 0
    score: int = 0
    replay_index: int = 0
    history: List[ScoreRecord] = field(default_factory=list)
    input_enabled: bool = False
    avatar: Optional[str] = None

    @property
    def lives(self) -> int:
        return len(self.hearts)

    def is_playing(self) -> bool:
        return self.phase is Phase.PLAYING

    def is_game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    # ------------------------------------------------------------------
    def select_avatar(self, index: int) -> Optional[str]:
        """Pick the player sprite and start the first game.

        Returns the chosen sprite path, or None outside the start menu.
        """
        if not 0 <= index < len(AVATAR_PATHS):
            raise ValueError(f"avatar index out of range: {index}")
        if self.phase is not Phase.AVATAR_SELECT:
            return None
        self.avatar = AVATAR_PATHS[index]
        self.phase = Phase.PLAYING
        self.input_enabled = True
        return self.avatar

    def register_hit(self) -> bool:
        """Take one life. Returns True if a heart was removed."""
        if self.phase is not Phase.PLAYING or not self.hearts:
            return False
        self.hearts.pop()
        if not self.hearts:
            self.phase = Phase.GAME_OVER
            self.input_enabled = False
            print(f"[GameState] Game over: {self.gem_count} gems, {self.score} points")
        return True

    def collect_gem(self, points: int) -> None:
        if self.phase is not Phase.PLAYING:
            return
        self.gem_count += 1
        self.score += points

    def add_points(self, points: int) -> None:
        if self.phase is not Phase.PLAYING:
            return
        self.score += points

    def play_again(self) -> Optional[ScoreRecord]:
        """Archive the finished game and start a new one.

        Only valid from GAME_OVER; otherwise a no-op returning None.
        """
        if self.phase is not Phase.GAME_OVER:
            return None
        self.replay_index += 1
        record = ScoreRecord(self.replay_index, self.gem_count, self.score)
        self.history.append(record)
        self.hearts = full_hearts()
        self.gem_count = 0
        self.score = 0
        self.phase = Phase.PLAYING
        self.input_enabled = True
        return record
