"""
Stick Brawlers - two stick figures, one keyboard, sixty seconds.
"""

__version__ = "1.0.0"
