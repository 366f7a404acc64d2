"""
Main Game Engine for Stick Brawlers
"""

import logging
import random
import pygame
from typing import Optional

from stick_brawlers.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, GAME_TITLE,
    DEBUG_FRAMERATE, WHITE
)
from stick_brawlers.core.scheduler import Scheduler
from stick_brawlers.core.match import MatchController
from stick_brawlers.core.input_handler import InputHandler
from stick_brawlers.ai.policy import OpponentPolicy
from stick_brawlers.ui.manager import UIManager

logger = logging.getLogger(__name__)


class Game:
    """
    pygame shell: window, clock and the host loop.
    Every display refresh advances the scheduler, which runs the match
    frame step and the countdown.
    """

    def __init__(self, seed: Optional[int] = None):
        pygame.init()

        # Display
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)

        # Clock
        self.clock = pygame.time.Clock()
        self.running = True
        self.dt = 0.0  # Delta time in seconds
        self.fps = 0.0

        # Core systems
        self.scheduler = Scheduler()
        self.ui_manager = UIManager()
        self.controller = MatchController(
            self.scheduler,
            view=self.ui_manager,
            policy=OpponentPolicy(rng=random.Random(seed))
        )
        self.input_handler = InputHandler(self.controller)

        # Fighters are visible before the first match
        self.ui_manager.draw_frame(self.controller.player, self.controller.opponent)

    def run(self):
        """Main game loop"""
        logger.info("Game loop started at %d FPS", FPS)
        while self.running:
            self.dt = self.clock.tick(FPS) / 1000.0
            self.fps = self.clock.get_fps()

            # Handle events
            self._handle_events()

            # Check quit
            if self.input_handler.should_quit():
                self.running = False
                continue

            self._update()
            self._render()

            pygame.display.flip()

        self._cleanup()

    def _handle_events(self):
        """Process pygame events"""
        self.input_handler.update()
        for event in pygame.event.get():
            self.input_handler.process_event(event)

    def _update(self):
        """Scheduled match work, then start requests"""
        self.scheduler.advance(self.dt)

        state = self.input_handler.state
        self.ui_manager.update(state.mouse_pos)

        # start() runs the first frame itself
        if not self.controller.running:
            clicked = (state.clicked_at is not None and
                       self.ui_manager.start_clicked(state.clicked_at))
            if clicked or state.start_requested:
                self.controller.start()

    def _render(self):
        """Render current frame"""
        self.ui_manager.render(self.screen)

        if DEBUG_FRAMERATE:
            self._render_fps()

    def _render_fps(self):
        """Render FPS counter"""
        font = pygame.font.Font(None, 24)
        fps_text = font.render(f"FPS: {int(self.fps)}", True, WHITE)
        self.screen.blit(fps_text, (10, SCREEN_HEIGHT - 24))

    def _cleanup(self):
        """Clean up resources"""
        self.scheduler.cancel_all()
        pygame.quit()
        logger.info("Game closed")
