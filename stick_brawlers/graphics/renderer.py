"""
Main Renderer
=============
Draws the arena and both stick figures.
"""

import math
import pygame
from typing import Tuple

from stick_brawlers.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FLOOR_Y,
    BACKGROUND_COLOR, FLOOR_COLOR,
    PLAYER_COLOR, OPPONENT_COLOR, LIMB_COLOR
)

HEAD_RADIUS = 15
HEAD_OFFSET = 60
NECK_OFFSET = 45
SHOULDER_OFFSET = 40
ARM_LENGTH = 30
LEG_SPREAD = 20
LEG_LENGTH = 30
LINE_WIDTH = 3


class Renderer:
    """
    Draws one frame of the match onto a surface.
    """

    def __init__(self):
        self._floor_rect = pygame.Rect(0, FLOOR_Y, SCREEN_WIDTH, SCREEN_HEIGHT - FLOOR_Y)

    def render(self, surface: pygame.Surface, player, opponent):
        """Render complete game frame"""
        self.render_arena(surface)
        for fighter in (player, opponent):
            self.render_fighter(surface, fighter)

    def render_arena(self, surface: pygame.Surface):
        surface.fill(BACKGROUND_COLOR)
        pygame.draw.rect(surface, FLOOR_COLOR, self._floor_rect)

    def render_fighter(self, surface: pygame.Surface, fighter):
        """Stick figure anchored at the hips (fighter.x, fighter.y)"""
        x, y = fighter.x, fighter.y
        color = PLAYER_COLOR if fighter.is_player else OPPONENT_COLOR

        # Head
        pygame.draw.circle(surface, color, (round(x), round(y - HEAD_OFFSET)), HEAD_RADIUS)

        # Body
        pygame.draw.line(surface, LIMB_COLOR, (x, y - NECK_OFFSET), (x, y), LINE_WIDTH)

        # Arm, raised while the attack pose is held
        shoulder = (x, y - SHOULDER_OFFSET)
        elbow, hand = self.arm_points(shoulder, self.arm_angle(fighter))
        pygame.draw.lines(surface, LIMB_COLOR, False, [shoulder, elbow, hand], LINE_WIDTH)

        # Legs
        pygame.draw.line(surface, LIMB_COLOR, (x, y), (x - LEG_SPREAD, y + LEG_LENGTH), LINE_WIDTH)
        pygame.draw.line(surface, LIMB_COLOR, (x, y), (x + LEG_SPREAD, y + LEG_LENGTH), LINE_WIDTH)

    @staticmethod
    def arm_angle(fighter) -> float:
        if not fighter.attacking:
            return 0.0
        return -math.pi / 4 if fighter.facing_right else math.pi / 4

    @staticmethod
    def arm_points(shoulder: Tuple[float, float],
                   angle: float) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """Elbow and hand for an arm starting at shoulder"""
        sx, sy = shoulder
        elbow = (sx + ARM_LENGTH * math.cos(angle), sy + ARM_LENGTH * math.sin(angle))
        hand = (sx + ARM_LENGTH * math.cos(angle + math.pi / 4),
                sy + ARM_LENGTH * math.sin(angle + math.pi / 4))
        return elbow, hand
