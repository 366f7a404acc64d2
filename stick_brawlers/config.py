"""
Stick Brawlers - Configuration & Constants
==========================================
All game settings, colors, and constants in one place.
"""

from enum import Enum, auto

import pygame

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 500
FPS = 60
GAME_TITLE = "STICK BRAWLERS"

# =============================================================================
# COLORS
# =============================================================================

WHITE = (255, 255, 255)
YELLOW = (230, 200, 50)

# Arena
BACKGROUND_COLOR = (17, 17, 17)   # #111
FLOOR_COLOR = (51, 51, 51)        # #333

# Fighters
PLAYER_COLOR = (52, 152, 219)     # #3498db
OPPONENT_COLOR = (231, 76, 60)    # #e74c3c
LIMB_COLOR = WHITE

# UI
UI_BORDER = (100, 100, 120)
HEALTH_FILL = (46, 204, 113)
HEALTH_BG = (60, 20, 20)
BUTTON_BG = (231, 76, 60)
BUTTON_HOVER = (192, 57, 43)

# =============================================================================
# ARENA / PHYSICS
# =============================================================================

GRAVITY = 0.5
FLOOR_Y = SCREEN_HEIGHT - 50  # Floor line, fighters rest half a body above it

# =============================================================================
# FIGHTER SETTINGS
# =============================================================================

FIGHTER_WIDTH = 50
FIGHTER_HEIGHT = 100
FLOOR_REST_Y = FLOOR_Y - FIGHTER_HEIGHT / 2

PLAYER_START_X = 200
OPPONENT_START_X = 600

MAX_HEALTH = 100
MOVE_SPEED = 5
JUMP_VELOCITY = -12
KNOCKBACK_SPEED = 5

# =============================================================================
# COMBAT SETTINGS
# =============================================================================

ATTACK_COOLDOWN_FRAMES = 20
ATTACK_RANGE_X = 60
ATTACK_RANGE_Y = 40
ATTACK_DAMAGE = 10

# =============================================================================
# MATCH SETTINGS
# =============================================================================

MATCH_DURATION = 60  # seconds
CLOCK_INTERVAL = 1.0  # seconds per countdown tick

START_LABEL = "START FIGHT"
PLAY_AGAIN_SUFFIX = " PLAY AGAIN?"

# =============================================================================
# AI SETTINGS
# =============================================================================

OPPONENT_ATTACK_CHANCE = 0.01  # per frame

# =============================================================================
# KEY BINDINGS
# =============================================================================

KEY_BINDINGS = {
    'move_left': pygame.K_LEFT,
    'move_right': pygame.K_RIGHT,
    'jump': pygame.K_UP,
    'attack': pygame.K_SPACE,
    'start': pygame.K_RETURN,
    'quit': pygame.K_ESCAPE,
}

# =============================================================================
# GAME STATE ENUMS
# =============================================================================

class GameState(Enum):
    IDLE = auto()
    RUNNING = auto()


class MatchOutcome(Enum):
    """How a match ended, valued by the on-screen message"""
    PLAYER_LOSS = "YOU LOSE!"
    PLAYER_WIN = "YOU WIN!"
    TIME_UP = "TIME UP!"

# =============================================================================
# DEBUG FLAGS
# =============================================================================

DEBUG_FRAMERATE = False
