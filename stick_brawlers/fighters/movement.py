"""
Movement Controller
===================
Kinematic body of a fighter: gravity, jumping, walking, knockback,
floor collision and arena bounds.
"""

from dataclasses import dataclass
from typing import Tuple

from stick_brawlers.config import (
    GRAVITY, FLOOR_Y, SCREEN_WIDTH,
    FIGHTER_WIDTH, FIGHTER_HEIGHT,
    MOVE_SPEED, JUMP_VELOCITY, KNOCKBACK_SPEED
)


@dataclass
class MovementController:
    """
    Position and velocity of one fighter.
    Velocities are in pixels per frame, y grows downward.
    """
    x: float = 0
    y: float = 0

    # Velocity
    velocity_x: float = 0
    velocity_y: float = 0

    is_jumping: bool = False
    facing_right: bool = True

    # Size
    width: float = FIGHTER_WIDTH
    height: float = FIGHTER_HEIGHT

    @property
    def floor_rest_y(self) -> float:
        """y at which the body's lower extent touches the floor line"""
        return FLOOR_Y - self.height / 2

    @property
    def min_x(self) -> float:
        return self.width / 2

    @property
    def max_x(self) -> float:
        return SCREEN_WIDTH - self.width / 2

    def update(self):
        """Integrate one frame"""
        self.velocity_y += GRAVITY

        self.y += self.velocity_y
        self.x += self.velocity_x

        # Floor collision, no bounce
        if self.y > self.floor_rest_y:
            self.y = self.floor_rest_y
            self.velocity_y = 0
            self.is_jumping = False

        # Clamp to arena; velocity keeps pushing into the wall
        self.x = max(self.min_x, min(self.max_x, self.x))

    def jump(self) -> bool:
        """Launch upward. No double jump."""
        if self.is_jumping:
            return False
        self.velocity_y = JUMP_VELOCITY
        self.is_jumping = True
        return True

    def walk(self, direction: int):
        """Walk left (-1) or right (+1) and face that way"""
        self.velocity_x = direction * MOVE_SPEED
        self.facing_right = direction > 0

    def stop(self):
        self.velocity_x = 0

    def apply_knockback(self, direction: int):
        """Push horizontally; stays in effect until something else sets velocity_x"""
        self.velocity_x = direction * KNOCKBACK_SPEED

    def set_position(self, x: float, y: float):
        """Place the body and kill all motion"""
        self.x = max(self.min_x, min(self.max_x, x))
        self.y = min(y, self.floor_rest_y)
        self.velocity_x = 0
        self.velocity_y = 0
        self.is_jumping = False

    def get_position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def get_distance_to(self, other: 'MovementController') -> Tuple[float, float]:
        """Absolute (dx, dy) to another body"""
        return (abs(self.x - other.x), abs(self.y - other.y))
