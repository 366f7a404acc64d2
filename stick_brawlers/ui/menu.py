"""
Start Button
============
The single menu of the game: a centered button that starts a match and,
once it is over, shows the result with a replay prompt.
"""

import pygame
from typing import Optional, Tuple

from stick_brawlers.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, START_LABEL,
    WHITE, BUTTON_BG, BUTTON_HOVER
)


class StartButton:
    """
    Clickable status control. Hidden while a match runs.
    """

    def __init__(self, label: str = START_LABEL):
        self.label = label
        self.visible = True
        self.hovered = False

        # Visual settings
        self.center = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
        self.padding_x = 30
        self.padding_y = 15
        self.min_width = 220

        self.font: Optional[pygame.font.Font] = None

    def _init_fonts(self):
        self.font = pygame.font.Font(None, 36)

    def show(self, label: str):
        self.label = label
        self.visible = True

    def hide(self):
        self.visible = False
        self.hovered = False

    @property
    def rect(self) -> pygame.Rect:
        # Rough size without a font: ~14px per glyph at this size
        text_width = len(self.label) * 14
        if self.font is not None:
            text_width = self.font.size(self.label)[0]
        width = max(self.min_width, text_width + 2 * self.padding_x)
        height = 36 + 2 * self.padding_y
        rect = pygame.Rect(0, 0, width, height)
        rect.center = self.center
        return rect

    def contains(self, pos: Tuple[int, int]) -> bool:
        return self.visible and self.rect.collidepoint(pos)

    def update(self, mouse_pos: Tuple[int, int]):
        self.hovered = self.contains(mouse_pos)

    def render(self, surface: pygame.Surface):
        if not self.visible:
            return
        if self.font is None:
            self._init_fonts()

        rect = self.rect
        color = BUTTON_HOVER if self.hovered else BUTTON_BG
        pygame.draw.rect(surface, color, rect, border_radius=6)

        text = self.font.render(self.label, True, WHITE)
        surface.blit(text, text.get_rect(center=rect.center))
