"""
State Machine for match flow management
"""

import logging
from typing import Dict, Optional, Callable

from stick_brawlers.config import GameState

logger = logging.getLogger(__name__)


class StateMachine:
    """
    Manages match states and transitions.
    Exit handler of the old state runs before the enter handler of the new one.
    """

    def __init__(self, initial: GameState = GameState.IDLE):
        self.current_state: GameState = initial
        self.previous_state: Optional[GameState] = None

        # State handlers
        self._enter_handlers: Dict[GameState, Callable] = {}
        self._exit_handlers: Dict[GameState, Callable] = {}

    def register_handlers(
        self,
        state: GameState,
        enter: Optional[Callable] = None,
        exit_handler: Optional[Callable] = None
    ):
        """Register handlers for a state"""
        if enter:
            self._enter_handlers[state] = enter
        if exit_handler:
            self._exit_handlers[state] = exit_handler

    def transition_to(self, new_state: GameState) -> bool:
        """
        Transition to a new state.
        Return False (and do nothing) if already in new_state.
        """
        if new_state == self.current_state:
            return False

        # Exit current state
        if self.current_state in self._exit_handlers:
            self._exit_handlers[self.current_state]()

        # Update state
        self.previous_state = self.current_state
        self.current_state = new_state
        logger.debug("State %s -> %s", self.previous_state.name, new_state.name)

        # Enter new state
        if new_state in self._enter_handlers:
            self._enter_handlers[new_state]()

        return True

    def is_state(self, state: GameState) -> bool:
        """Check if current state matches"""
        return self.current_state == state
