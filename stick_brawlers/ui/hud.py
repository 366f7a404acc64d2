"""
HUD System
==========
Health bars and the match timer.
"""

import pygame
from typing import Optional

from stick_brawlers.config import (
    SCREEN_WIDTH, MAX_HEALTH, MATCH_DURATION,
    WHITE, YELLOW, UI_BORDER, HEALTH_FILL, HEALTH_BG,
    PLAYER_COLOR, OPPONENT_COLOR
)


class HealthBar:
    """
    Fill width is the health as a percentage of the full bar.
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 is_flipped: bool = False):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.is_flipped = is_flipped

        self.value = float(MAX_HEALTH)
        self.max_value = float(MAX_HEALTH)

        # Colors
        self.bg_color = HEALTH_BG
        self.fill_color = HEALTH_FILL
        self.border_color = UI_BORDER

    def set_value(self, value: float, max_value: float = MAX_HEALTH):
        """Set health value"""
        self.max_value = max_value
        self.value = max(0, min(max_value, value))

    @property
    def percent(self) -> float:
        return 100.0 * self.value / self.max_value

    @property
    def fill_width(self) -> int:
        return int(self.width * self.percent / 100.0)

    def render(self, surface: pygame.Surface):
        """Render health bar"""
        pygame.draw.rect(surface, self.bg_color,
                         (self.x, self.y, self.width, self.height))

        fill_width = self.fill_width
        if fill_width > 0:
            # Opponent bar drains toward the center
            fill_x = self.x + self.width - fill_width if self.is_flipped else self.x
            pygame.draw.rect(surface, self.fill_color,
                             (fill_x, self.y, fill_width, self.height))

        pygame.draw.rect(surface, self.border_color,
                         (self.x, self.y, self.width, self.height), 2)


class MatchTimer:
    """
    Seconds remaining, shown as a plain integer.
    """

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.seconds = MATCH_DURATION
        self.font: Optional[pygame.font.Font] = None

    def _init_font(self):
        self.font = pygame.font.Font(None, 48)

    def set_time(self, seconds: int):
        self.seconds = max(0, int(seconds))

    @property
    def is_critical(self) -> bool:
        return self.seconds <= 10

    def render(self, surface: pygame.Surface):
        if self.font is None:
            self._init_font()

        color = YELLOW if self.is_critical else WHITE
        text = self.font.render(str(self.seconds), True, color)
        text_rect = text.get_rect(center=(self.x, self.y))
        surface.blit(text, text_rect)


class HUD:
    """
    Main HUD class combining all elements.
    """

    def __init__(self):
        bar_width = 300
        bar_height = 20
        bar_y = 20

        self.player_health = HealthBar(20, bar_y, bar_width, bar_height, is_flipped=False)
        self.opponent_health = HealthBar(SCREEN_WIDTH - 20 - bar_width, bar_y,
                                         bar_width, bar_height, is_flipped=True)
        self.timer = MatchTimer(SCREEN_WIDTH // 2, bar_y + bar_height // 2)

        self.name_font: Optional[pygame.font.Font] = None

    def _init_fonts(self):
        if self.name_font is None:
            self.name_font = pygame.font.Font(None, 22)

    def set_health(self, is_player: bool, health: int):
        bar = self.player_health if is_player else self.opponent_health
        bar.set_value(health)

    def set_time(self, seconds: int):
        self.timer.set_time(seconds)

    def render(self, surface: pygame.Surface):
        """Render entire HUD"""
        self._init_fonts()

        self.player_health.render(surface)
        self.opponent_health.render(surface)

        name1 = self.name_font.render("PLAYER", True, PLAYER_COLOR)
        name2 = self.name_font.render("CPU", True, OPPONENT_COLOR)
        surface.blit(name1, (self.player_health.x, self.player_health.y + self.player_health.height + 4))
        surface.blit(name2, (self.opponent_health.x + self.opponent_health.width - name2.get_width(),
                             self.opponent_health.y + self.opponent_health.height + 4))

        self.timer.render(surface)
