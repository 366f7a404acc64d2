"""
Combat Engine
=============
Decides whether an attack connects and applies the damage.
"""

import logging
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from stick_brawlers.config import ATTACK_RANGE_X, ATTACK_RANGE_Y, ATTACK_DAMAGE

if TYPE_CHECKING:
    from stick_brawlers.fighters.fighter import Fighter

logger = logging.getLogger(__name__)


@dataclass
class HitResult:
    """Outcome of an attack that connected"""
    attacker: 'Fighter'
    defender: 'Fighter'
    damage: int
    defender_health: int

    @property
    def is_ko(self) -> bool:
        return self.defender_health <= 0


class CombatEngine:
    """
    Stateless hit rules.
    The hit area is an axis-aligned box around the attacker's center:
    strictly closer than ATTACK_RANGE_X horizontally and ATTACK_RANGE_Y
    vertically.
    """

    @staticmethod
    def in_range(attacker: 'Fighter', defender: 'Fighter') -> bool:
        return (abs(attacker.x - defender.x) < ATTACK_RANGE_X and
                abs(attacker.y - defender.y) < ATTACK_RANGE_Y)

    @staticmethod
    def resolve_attack(attacker: 'Fighter', defender: 'Fighter',
                       damage: int = ATTACK_DAMAGE) -> Optional[HitResult]:
        """
        Check the hit once and damage the defender on connect.
        Return HitResult, or None on a miss.
        """
        if not CombatEngine.in_range(attacker, defender):
            return None

        health = defender.take_damage(damage)
        logger.debug("%s hit %s for %d", attacker.name, defender.name, damage)

        return HitResult(
            attacker=attacker,
            defender=defender,
            damage=damage,
            defender_health=health
        )
