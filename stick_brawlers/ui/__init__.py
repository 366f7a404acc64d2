"""
UI System Module
"""

from stick_brawlers.ui.hud import HUD, HealthBar, MatchTimer
from stick_brawlers.ui.menu import StartButton
from stick_brawlers.ui.manager import UIManager

__all__ = ['HUD', 'HealthBar', 'MatchTimer', 'StartButton', 'UIManager']
