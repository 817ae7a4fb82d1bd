"""Simple 2D text rendering with pygame fonts.

Draws labels straight onto a target surface. Rendered glyph surfaces are
cached by (text, color) so static labels are only rasterized once, and keyed
slots let dynamic labels (score, gem count) re-render only when they change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame

Color = Tuple[int, int, int]


@dataclass
class _TextSlot:
    surface: pygame.Surface
    last_text: str | None = None


class TextRenderer:
    """2D text renderer using pygame.font.

    - draw_text() can take a `key` to reuse a slot for dynamic text.
    - Without a key, content is cached by (text, color) and reused.
    """

    def __init__(
        self,
        font: Optional[pygame.font.Font] = None,
        size: int = 24,
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = font or pygame.font.Font(None, size)
        self._cache: Dict[Tuple[str, Color], pygame.Surface] = {}
        self._slots: Dict[str, _TextSlot] = {}

    def _render(self, text: str, color: Color, key: Optional[str]) -> pygame.Surface:
        if key is not None:
            slot = self._slots.get(key)
            if slot is None or slot.last_text != text:
                slot = _TextSlot(self.font.render(text, True, color), text)
                self._slots[key] = slot
            return slot.surface
        cache_key = (text, tuple(color))
        surf = self._cache.get(cache_key)
        if surf is None:
            surf = self.font.render(text, True, color)
            self._cache[cache_key] = surf
        return surf

    def draw_text(
        self,
        surface: pygame.Surface,
        text: str,
        x: float,
        y: float,
        color: Color = (255, 255, 255),
        *,
        key: Optional[str] = None,
        align: str = "topleft",
    ) -> Tuple[int, int]:  # returns (w, h)
        """Draw a single line of text at screen coords.

        align: 'topleft' | 'topright' | 'bottomleft' | 'bottomright' | 'center'
        """
        rendered = self._render(text, color, key)
        w, h = rendered.get_size()
        if align == "topright":
            draw_x, draw_y = x - w, y
        elif align == "bottomleft":
            draw_x, draw_y = x, y - h
        elif align == "bottomright":
            draw_x, draw_y = x - w, y - h
        elif align == "center":
            draw_x, draw_y = x - w / 2, y - h / 2
        else:  # topleft
            draw_x, draw_y = x, y
        surface.blit(rendered, (int(draw_x), int(draw_y)))
        return w, h

    def draw_lines(
        self,
        surface: pygame.Surface,
        lines,
        x: float,
        y: float,
        color: Color = (255, 255, 255),
        *,
        line_spacing: float = 1.2,
        align: str = "topleft",
    ) -> int:
        """Draw lines top to bottom starting at y; returns the block height."""
        line_h = self.font.get_height()
        step = int(line_h * line_spacing)
        for i, line in enumerate(lines):
            self.draw_text(surface, line, x, y + i * step, color, align=align)
        return step * len(lines)
