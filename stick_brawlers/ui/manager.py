"""
UI Manager
==========
pygame side of MatchView: keeps the last drawn frame, the HUD and the
start button, and composes them onto the screen.
"""

import pygame
from typing import Tuple

from stick_brawlers.config import SCREEN_WIDTH, SCREEN_HEIGHT
from stick_brawlers.core.match import MatchView
from stick_brawlers.graphics.renderer import Renderer
from stick_brawlers.ui.hud import HUD
from stick_brawlers.ui.menu import StartButton


class UIManager(MatchView):
    """
    Composes the match visuals onto the screen.
    The world surface only changes when the controller draws a frame, so
    the final pose stays on screen after the match ends.
    """

    def __init__(self, renderer: Renderer = None):
        self.renderer = renderer or Renderer()
        self.world = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        self.renderer.render_arena(self.world)

        self.hud = HUD()
        self.start_button = StartButton()

    # MatchView
    def draw_frame(self, player, opponent):
        self.renderer.render(self.world, player, opponent)

    def set_health(self, is_player: bool, health: int):
        self.hud.set_health(is_player, health)

    def set_time(self, seconds: int):
        self.hud.set_time(seconds)

    def show_status(self, label: str):
        self.start_button.show(label)

    def hide_status(self):
        self.start_button.hide()

    # Input helpers
    def start_clicked(self, pos: Tuple[int, int]) -> bool:
        return self.start_button.contains(pos)

    def update(self, mouse_pos: Tuple[int, int]):
        self.start_button.update(mouse_pos)

    def render(self, surface: pygame.Surface):
        """Compose world, HUD and button"""
        surface.blit(self.world, (0, 0))
        self.hud.render(surface)
        self.start_button.render(surface)
