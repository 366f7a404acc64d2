import math

import pygame
import pytest

from stick_brawlers.config import (
    BACKGROUND_COLOR, FLOOR_COLOR, OPPONENT_COLOR, PLAYER_COLOR,
    SCREEN_HEIGHT, SCREEN_WIDTH, START_LABEL
)
from stick_brawlers.fighters.fighter import Fighter
from stick_brawlers.graphics.renderer import Renderer
from stick_brawlers.ui.hud import HUD, HealthBar, MatchTimer
from stick_brawlers.ui.manager import UIManager
from stick_brawlers.ui.menu import StartButton


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


@pytest.fixture
def surface():
    return pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))


def test_renderer_draws_arena_and_heads(surface):
    player = Fighter.create_player()
    opponent = Fighter.create_opponent()

    Renderer().render(surface, player, opponent)

    assert rgb(surface, (5, 5)) == BACKGROUND_COLOR
    assert rgb(surface, (5, SCREEN_HEIGHT - 5)) == FLOOR_COLOR
    assert rgb(surface, (int(player.x), int(player.y - 60))) == PLAYER_COLOR
    assert rgb(surface, (int(opponent.x), int(opponent.y - 60))) == OPPONENT_COLOR


def test_arm_angle_follows_attack_and_facing():
    fighter = Fighter.create_player()
    assert Renderer.arm_angle(fighter) == 0.0

    fighter.attacking = True
    assert Renderer.arm_angle(fighter) == -math.pi / 4

    fighter.facing_right = False
    assert Renderer.arm_angle(fighter) == math.pi / 4


def test_arm_points_at_rest():
    elbow, hand = Renderer.arm_points((100, 100), 0.0)
    assert elbow == (130, 100)
    assert hand[0] == pytest.approx(100 + 30 * math.cos(math.pi / 4))
    assert hand[1] == pytest.approx(100 + 30 * math.sin(math.pi / 4))


def test_health_bar_percent():
    bar = HealthBar(0, 0, 300, 20)
    assert bar.percent == 100
    bar.set_value(90)
    assert bar.percent == 90
    assert bar.fill_width == 270
    bar.set_value(-10)
    assert bar.fill_width == 0


def test_hud_routes_health_by_side():
    hud = HUD()
    hud.set_health(True, 40)
    hud.set_health(False, 70)
    hud.set_time(42)

    assert hud.player_health.value == 40
    assert hud.opponent_health.value == 70
    assert hud.timer.seconds == 42


def test_timer_never_negative():
    timer = MatchTimer(0, 0)
    timer.set_time(-3)
    assert timer.seconds == 0
    assert timer.is_critical


def test_start_button_visibility():
    button = StartButton()
    assert button.visible
    assert button.label == START_LABEL
    assert button.contains(button.center)

    button.hide()
    assert not button.contains(button.center)

    button.show("YOU WIN! PLAY AGAIN?")
    assert button.visible
    assert button.label == "YOU WIN! PLAY AGAIN?"
    assert not button.contains((0, 0))


def test_ui_manager_is_a_match_view():
    ui = UIManager()
    player = Fighter.create_player()
    opponent = Fighter.create_opponent()

    ui.draw_frame(player, opponent)
    ui.set_health(False, 30)
    ui.set_time(12)
    ui.hide_status()

    assert rgb(ui.world, (int(player.x), int(player.y - 60))) == PLAYER_COLOR
    assert ui.hud.opponent_health.value == 30
    assert ui.hud.timer.seconds == 12
    assert not ui.start_clicked(ui.start_button.center)

    ui.show_status("TIME UP! PLAY AGAIN?")
    assert ui.start_clicked(ui.start_button.center)
