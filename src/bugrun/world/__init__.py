"""World package: re-export common symbols for simpler imports.

Callers can import public types from `bugrun.world` directly, e.g.:

    from bugrun.world import WorldScene, GameState, aabb_overlap
"""

from .entities import Entity, Enemy, Heart, Gem, Player
from .board import Board
from .collision import CollisionDetector, aabb_overlap
from .game_state import GameState, Phase, ScoreRecord
from .spawner import pick_lane, respawn_enemies
from .world_hud import WorldHUD
from .worldscene import WorldScene

__all__ = [
    "Entity",
    "Enemy",
    "Heart",
    "Gem",
    "Player",
    "Board",
    "CollisionDetector",
    "aabb_overlap",
    "GameState",
    "Phase",
    "ScoreRecord",
    "pick_lane",
    "respawn_enemies",
    "WorldHUD",
    "WorldScene",
]
