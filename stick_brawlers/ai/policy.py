"""
Opponent Policy
===============
Local AI for the non-player fighter: a coin flip every frame.
"""

import random
from typing import Optional, TYPE_CHECKING

from stick_brawlers.config import OPPONENT_ATTACK_CHANCE

if TYPE_CHECKING:
    from stick_brawlers.fighters.fighter import Fighter


class OpponentPolicy:
    """
    Attacks with a fixed small probability per frame while the fighter is
    not already in its attack pose. At 60 FPS and 1% that is roughly one
    attack attempt every 100 frames.
    """

    def __init__(self, attack_chance: float = OPPONENT_ATTACK_CHANCE,
                 rng: Optional[random.Random] = None):
        self.attack_chance = attack_chance
        self.rng = rng or random.Random()

    def should_attack(self, fighter: 'Fighter', match_running: bool) -> bool:
        if not match_running or fighter.attacking:
            return False
        return self.rng.random() < self.attack_chance
