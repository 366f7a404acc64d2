"""
Combat System Module
"""

from stick_brawlers.combat.engine import CombatEngine, HitResult

__all__ = ['CombatEngine', 'HitResult']
