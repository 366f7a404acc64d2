"""
Core game engine modules
"""

from stick_brawlers.core.scheduler import Scheduler, TaskHandle
from stick_brawlers.core.state_machine import StateMachine
from stick_brawlers.core.match import MatchController, MatchView

__all__ = ['Scheduler', 'TaskHandle', 'StateMachine', 'MatchController', 'MatchView']
