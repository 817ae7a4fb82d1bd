"""Axis-aligned bounding-box collision tests.

Expose `aabb_overlap(a, b)` for any two objects with x/y/width/height and
`CollisionDetector.hits(player, enemies)` for the per-frame check.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol


class Box(Protocol):
    x: float
    y: float
    width: float
    height: float


def aabb_overlap(a: Box, b: Box) -> bool:
    """True if the two rectangles overlap on both axes.

    Touching edges do not count as overlap.
    """
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


class CollisionDetector:
    """Player-versus-enemy collision checks."""

    @staticmethod
    def hits(player: Box, enemies: Iterable[Box]) -> Iterator[Box]:
        """Yield each enemy overlapping the player, in order.

        The player is re-read for every enemy, so a caller that moves the
        player between yields sees later enemies tested against the new
        position.
        """
        for enemy in enemies:
            if aabb_overlap(enemy, player):
                yield enemy
