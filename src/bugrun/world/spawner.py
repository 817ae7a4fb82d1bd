"""Lane picking for enemies and the gem.

All randomness goes through an injected `random.Random` so tests can seed it.
"""

from __future__ import annotations

import random
from itertools import product
from typing import Iterable, Optional, Sequence, Tuple

from bugrun.config import ENEMY_RESPAWN_EDGE, ENEMY_X_LANES, ENEMY_Y_LANES, GEM_POINTS
from bugrun.world.collision import aabb_overlap


def pick_lane(
    rng: random.Random,
    x_lanes: Sequence[float] = ENEMY_X_LANES,
    y_lanes: Sequence[float] = ENEMY_Y_LANES,
) -> Tuple[float, float]:
    """Return an (x, y) pair drawn uniformly from the lane sets."""
    y = rng.choice(y_lanes)
    x = rng.choice(x_lanes)
    return x, y


def respawn_enemies(
    enemies: Iterable, rng: random.Random, edge: float = ENEMY_RESPAWN_EDGE
) -> int:
    """Send every enemy past `edge` back to a random lane.

    Returns how many enemies were moved.
    """
    moved = 0
    for enemy in enemies:
        if enemy.x > edge:
            enemy.x, enemy.y = pick_lane(rng, enemy.x_lanes, enemy.y_lanes)
            moved += 1
    return moved


def scatter_enemies(enemies: Iterable, rng: random.Random) -> None:
    """Re-pick only the x lane of each enemy (used when a new game starts)."""
    for enemy in enemies:
        enemy.x = rng.choice(enemy.x_lanes)


def relocate_gem(gem, rng: random.Random, avoid: Optional[object] = None) -> None:
    """Move the gem to another lane cell, never its current one.

    Cells overlapping `avoid` (the player) are skipped too, so a pickup can
    not respawn the gem under the player's feet.
    """
    start = (gem.x, gem.y)
    candidates = []
    for x, y in product(gem.x_lanes, gem.y_lanes):
        if (x, y) == start:
            continue
        gem.x, gem.y = x, y
        if avoid is not None and aabb_overlap(gem, avoid):
            continue
        candidates.append((x, y))
    gem.x, gem.y = rng.choice(candidates) if candidates else start
    gem.recolor(rng.choice(sorted(GEM_POINTS)))
