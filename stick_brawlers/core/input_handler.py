"""
Input handling for keyboard and mouse
"""

import pygame
from typing import Dict, Set, Tuple, Optional, TYPE_CHECKING
from dataclasses import dataclass, field

from stick_brawlers.config import KEY_BINDINGS

if TYPE_CHECKING:
    from stick_brawlers.core.match import MatchController


@dataclass
class InputState:
    """Current state of all inputs"""
    keys_pressed: Set[int] = field(default_factory=set)
    mouse_pos: Tuple[int, int] = (0, 0)
    clicked_at: Optional[Tuple[int, int]] = None
    start_requested: bool = False
    quit_requested: bool = False


class InputHandler:
    """
    Turns pygame events into player commands on the match controller.
    Movement, jump and attack only reach the player while a match runs;
    the controller enforces that.
    """

    def __init__(self, controller: 'MatchController',
                 bindings: Optional[Dict[str, int]] = None):
        self.controller = controller
        self.state = InputState()

        # Key bindings (action -> key)
        self.bindings: Dict[str, int] = dict(bindings or KEY_BINDINGS)

    def update(self):
        """
        Reset one-shot flags. Call once per frame before processing events.
        """
        self.state.clicked_at = None
        self.state.start_requested = False

    def process_event(self, event: pygame.event.Event):
        """Process a single pygame event"""
        if event.type == pygame.QUIT:
            self.state.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            self.state.keys_pressed.add(event.key)
            self._on_key_down(event.key)

        elif event.type == pygame.KEYUP:
            self.state.keys_pressed.discard(event.key)
            self._on_key_up(event.key)

        elif event.type == pygame.MOUSEMOTION:
            self.state.mouse_pos = event.pos

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.state.clicked_at = event.pos

    def _on_key_down(self, key: int):
        if key == self.bindings['move_left']:
            self.controller.move_player(-1)
        elif key == self.bindings['move_right']:
            self.controller.move_player(1)
        elif key == self.bindings['jump']:
            self.controller.player_jump()
        elif key == self.bindings['attack']:
            self.controller.player_attack()
        elif key == self.bindings['start']:
            self.state.start_requested = True
        elif key == self.bindings['quit']:
            self.state.quit_requested = True

    def _on_key_up(self, key: int):
        # Releasing either direction stops, even if the other is still held
        if key in (self.bindings['move_left'], self.bindings['move_right']):
            self.controller.stop_player()

    def is_key_pressed(self, key: int) -> bool:
        """Check if key is currently held down"""
        return key in self.state.keys_pressed

    def get_mouse_pos(self) -> Tuple[int, int]:
        return self.state.mouse_pos

    def set_binding(self, action: str, key: int):
        """Change a key binding"""
        self.bindings[action] = key

    def should_quit(self) -> bool:
        """Check if quit was requested"""
        return self.state.quit_requested
