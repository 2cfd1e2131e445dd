"""A clickable rectangle with a hover highlight and centred caption."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

import pygame

LIGHTGRAY = (200, 200, 200)
FONT_SIZE = 20
TEXT_TOP_MARGIN = 15


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


@dataclass
class Button:
    """A filled rectangle that turns light grey while hovered."""

    x: float
    y: float
    width: float
    height: float
    color: tuple[int, int, int]
    text_color: tuple[int, int, int]
    is_hover: bool = field(default=False, init=False)

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def contains(self, point: tuple[float, float]) -> bool:
        """True when the point falls inside the button."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def update_hover(self, mouse_position: tuple[float, float]) -> None:
        """Set the hover state from the mouse position."""
        self.is_hover = self.contains(mouse_position)

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the button body."""
        color = LIGHTGRAY if self.is_hover else self.color
        rect = pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))
        pygame.draw.rect(surface, color, rect)

    def draw_text(self, surface: pygame.Surface, text: str, text_width: int) -> None:
        """Paint the caption, centred horizontally for the given text width."""
        image = _font(FONT_SIZE).render(text, True, self.text_color)
        position = (int(self.x + (self.width - text_width) / 2), int(self.y + TEXT_TOP_MARGIN))
        surface.blit(image, position)