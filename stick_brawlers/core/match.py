"""
Match Controller
================
Owns both fighters, the countdown and the IDLE/RUNNING state machine.
Drives one frame step per scheduler frame and projects state to a MatchView.
"""

import logging
from typing import Optional

from stick_brawlers.config import (
    GameState, MatchOutcome,
    MATCH_DURATION, CLOCK_INTERVAL, PLAY_AGAIN_SUFFIX
)
from stick_brawlers.core.scheduler import Scheduler, TaskHandle
from stick_brawlers.core.state_machine import StateMachine
from stick_brawlers.combat.engine import HitResult
from stick_brawlers.fighters.fighter import Fighter
from stick_brawlers.ai.policy import OpponentPolicy

logger = logging.getLogger(__name__)


class MatchView:
    """
    Where the controller sends everything the player should see.
    The base class ignores it all; the pygame UI overrides each method.
    """

    def draw_frame(self, player: Fighter, opponent: Fighter):
        pass

    def set_health(self, is_player: bool, health: int):
        pass

    def set_time(self, seconds: int):
        pass

    def show_status(self, label: str):
        pass

    def hide_status(self):
        pass


class MatchController:
    """
    One continuous match between the player and the opponent.

    start() resets everything and begins the frame loop plus a one-second
    countdown. The match ends on a KO or when time runs out; the countdown
    is cancelled before the outcome is shown.
    """

    def __init__(self, scheduler: Scheduler,
                 view: Optional[MatchView] = None,
                 policy: Optional[OpponentPolicy] = None,
                 player: Optional[Fighter] = None,
                 opponent: Optional[Fighter] = None,
                 match_duration: int = MATCH_DURATION):
        self.scheduler = scheduler
        self.view = view or MatchView()
        self.policy = policy or OpponentPolicy()

        self.player = player or Fighter.create_player()
        self.opponent = opponent or Fighter.create_opponent()

        # Match state
        self.match_duration = match_duration
        self.remaining_seconds = match_duration
        self.outcome: Optional[MatchOutcome] = None
        self.matches_played = 0

        # Scheduled tasks
        self._clock_handle: Optional[TaskHandle] = None
        self._frame_handle: Optional[TaskHandle] = None

        self.state_machine = StateMachine(GameState.IDLE)
        self.state_machine.register_handlers(
            GameState.RUNNING,
            enter=self._enter_running,
            exit_handler=self._exit_running
        )

    @property
    def running(self) -> bool:
        return self.state_machine.is_state(GameState.RUNNING)

    @property
    def clock_handle(self) -> Optional[TaskHandle]:
        return self._clock_handle

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self) -> bool:
        """
        Begin a new match. Return False if one is already running.
        """
        return self.state_machine.transition_to(GameState.RUNNING)

    def _enter_running(self):
        self.outcome = None
        self.matches_played += 1

        for fighter in (self.player, self.opponent):
            fighter.reset()
            self.view.set_health(fighter.is_player, fighter.health)

        self.remaining_seconds = self.match_duration
        self.view.set_time(self.remaining_seconds)
        self.view.hide_status()

        self._clock_handle = self.scheduler.set_interval(self._tick_clock, CLOCK_INTERVAL)
        logger.info("Match %d started (%ds)", self.matches_played, self.match_duration)

        # First frame runs right away, the rest are scheduled
        self.step()

    def _exit_running(self):
        if self._clock_handle is not None:
            self._clock_handle.cancel()
            self._clock_handle = None
        if self._frame_handle is not None:
            self._frame_handle.cancel()
            self._frame_handle = None

    def end_match(self, outcome: MatchOutcome):
        """Stop the countdown and show the result with a replay prompt"""
        if not self.running:
            return
        self.state_machine.transition_to(GameState.IDLE)
        self.outcome = outcome
        logger.info("Match %d ended: %s (player=%d, opponent=%d, time=%d)",
                    self.matches_played, outcome.name, self.player.health,
                    self.opponent.health, self.remaining_seconds)
        self.view.show_status(outcome.value + PLAY_AGAIN_SUFFIX)

    def check_end(self) -> Optional[MatchOutcome]:
        """
        Return the outcome if the match is over.
        A double KO counts as a loss for the player.
        """
        if self.player.health <= 0:
            return MatchOutcome.PLAYER_LOSS
        if self.opponent.health <= 0:
            return MatchOutcome.PLAYER_WIN
        if self.remaining_seconds <= 0:
            return MatchOutcome.TIME_UP
        return None

    # =========================================================================
    # SCHEDULED TASKS
    # =========================================================================

    def step(self):
        """One frame: physics, draw, AI, end check, then schedule the next"""
        self._frame_handle = None
        if not self.running:
            return

        self.player.update()
        self.opponent.update()

        self.view.draw_frame(self.player, self.opponent)

        if self.policy.should_attack(self.opponent, self.running):
            logger.debug("Opponent attacks")
            self._project_hit(self.opponent.attack(self.player))

        outcome = self.check_end()
        if outcome is not None:
            self.end_match(outcome)
        else:
            self._frame_handle = self.scheduler.request_frame(self.step)

    def _tick_clock(self):
        self.remaining_seconds = max(0, self.remaining_seconds - 1)
        self.view.set_time(self.remaining_seconds)

    def _project_hit(self, result: Optional[HitResult]):
        if result is not None:
            self.view.set_health(result.defender.is_player, result.defender_health)

    # =========================================================================
    # PLAYER COMMANDS
    # =========================================================================

    def move_player(self, direction: int):
        if self.running:
            self.player.move(direction)

    def stop_player(self):
        if self.running:
            self.player.stop()

    def player_jump(self):
        if self.running:
            self.player.jump()

    def player_attack(self) -> Optional[HitResult]:
        if not self.running:
            return None
        result = self.player.attack(self.opponent)
        self._project_hit(result)
        return result
