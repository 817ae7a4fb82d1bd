from typing import Callable, List
from dataclasses import dataclass, field

import pygame

UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    # Extra per-frame callbacks run after the scene's own update
    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float):
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    # Scenes own their full draw pass; the engine only flips the display
    def render(self, surface: pygame.Surface) -> None:  # pragma: no cover - visual
        pass
