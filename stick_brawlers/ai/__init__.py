"""
AI System Module
"""

from stick_brawlers.ai.policy import OpponentPolicy

__all__ = ['OpponentPolicy']
