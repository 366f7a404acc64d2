"""
Graphics System Module
"""

from stick_brawlers.graphics.renderer import Renderer

__all__ = ['Renderer']
