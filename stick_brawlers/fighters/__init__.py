"""
Fighter System Module
"""

from stick_brawlers.fighters.fighter import Fighter
from stick_brawlers.fighters.movement import MovementController

__all__ = ['Fighter', 'MovementController']
