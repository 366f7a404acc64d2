"""
Fighter Class
=============
One of the two combatants: kinematic body plus health and attack state.
"""

import logging
from typing import Optional, Dict, Any

from stick_brawlers.config import (
    PLAYER_START_X, OPPONENT_START_X, FLOOR_REST_Y,
    MAX_HEALTH, ATTACK_COOLDOWN_FRAMES
)
from stick_brawlers.combat.engine import CombatEngine, HitResult
from stick_brawlers.fighters.movement import MovementController

logger = logging.getLogger(__name__)


class Fighter:
    """
    Main fighter class.
    Physics lives in MovementController; this class adds health,
    the attack cooldown window and damage handling.
    """

    def __init__(self, x: float, y: float, is_player: bool):
        self.is_player = is_player

        # Spawn point, used by reset()
        self.start_x = x
        self.start_y = y

        self.movement = MovementController(x=x, y=y, facing_right=is_player)

        # Combat state
        self.health = MAX_HEALTH
        self.attacking = False
        self.attack_cooldown = 0

    @classmethod
    def create_player(cls) -> 'Fighter':
        return cls(PLAYER_START_X, FLOOR_REST_Y, is_player=True)

    @classmethod
    def create_opponent(cls) -> 'Fighter':
        return cls(OPPONENT_START_X, FLOOR_REST_Y, is_player=False)

    # Shortcuts into the movement body
    @property
    def x(self) -> float:
        return self.movement.x

    @x.setter
    def x(self, value: float):
        self.movement.x = value

    @property
    def y(self) -> float:
        return self.movement.y

    @y.setter
    def y(self, value: float):
        self.movement.y = value

    @property
    def velocity_x(self) -> float:
        return self.movement.velocity_x

    @velocity_x.setter
    def velocity_x(self, value: float):
        self.movement.velocity_x = value

    @property
    def velocity_y(self) -> float:
        return self.movement.velocity_y

    @velocity_y.setter
    def velocity_y(self, value: float):
        self.movement.velocity_y = value

    @property
    def width(self) -> float:
        return self.movement.width

    @property
    def height(self) -> float:
        return self.movement.height

    @property
    def is_jumping(self) -> bool:
        return self.movement.is_jumping

    @property
    def facing_right(self) -> bool:
        return self.movement.facing_right

    @facing_right.setter
    def facing_right(self, value: bool):
        self.movement.facing_right = value

    @property
    def is_defeated(self) -> bool:
        return self.health <= 0

    def update(self):
        """Physics and cooldown, once per frame"""
        self.movement.update()

        # The attack pose lasts the whole cooldown and ends with it
        if self.attack_cooldown > 0:
            self.attack_cooldown -= 1
        if self.attack_cooldown == 0:
            self.attacking = False

    def jump(self) -> bool:
        return self.movement.jump()

    def move(self, direction: int):
        """Start walking: -1 left, +1 right"""
        self.movement.walk(direction)

    def stop(self):
        self.movement.stop()

    def attack(self, opponent: 'Fighter') -> Optional[HitResult]:
        """
        Start an attack against opponent.
        Does nothing while on cooldown. Hit detection happens once,
        right now, not while the pose is held.
        """
        if self.attack_cooldown != 0:
            return None

        self.attacking = True
        self.attack_cooldown = ATTACK_COOLDOWN_FRAMES
        return CombatEngine.resolve_attack(self, opponent)

    def take_damage(self, amount: int) -> int:
        """
        Lose health and get knocked back.
        The player always flies left and the opponent right,
        whatever side the hit came from.
        """
        self.health = max(0, self.health - amount)
        self.movement.apply_knockback(-1 if self.is_player else 1)
        logger.debug("%s took %d damage, health=%d", self.name, amount, self.health)
        return self.health

    def reset(self):
        """Back to spawn with full health"""
        self.health = MAX_HEALTH
        self.attacking = False
        self.attack_cooldown = 0
        self.movement.set_position(self.start_x, self.start_y)
        self.movement.facing_right = self.is_player

    @property
    def name(self) -> str:
        return "player" if self.is_player else "opponent"

    def get_state_info(self) -> Dict[str, Any]:
        """Snapshot for rendering/debug"""
        return {
            'is_player': self.is_player,
            'health': self.health,
            'x': self.x,
            'y': self.y,
            'velocity_x': self.velocity_x,
            'velocity_y': self.velocity_y,
            'is_jumping': self.is_jumping,
            'facing_right': self.facing_right,
            'attacking': self.attacking,
            'attack_cooldown': self.attack_cooldown,
        }

    def __repr__(self) -> str:
        return f"Fighter({self.name}, x={self.x:.1f}, y={self.y:.1f}, health={self.health})"
