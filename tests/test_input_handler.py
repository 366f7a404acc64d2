import pygame
import pytest

from stick_brawlers.core.input_handler import InputHandler


def key(event_type, k):
    return pygame.event.Event(event_type, key=k)


@pytest.fixture
def handler(controller):
    controller.start()
    return InputHandler(controller)


def test_arrows_move_and_face(handler, controller):
    handler.process_event(key(pygame.KEYDOWN, pygame.K_LEFT))
    assert controller.player.velocity_x == -5
    assert not controller.player.facing_right

    handler.process_event(key(pygame.KEYDOWN, pygame.K_RIGHT))
    assert controller.player.velocity_x == 5
    assert controller.player.facing_right


def test_releasing_either_arrow_stops(handler, controller):
    handler.process_event(key(pygame.KEYDOWN, pygame.K_RIGHT))
    handler.process_event(key(pygame.KEYUP, pygame.K_LEFT))
    assert controller.player.velocity_x == 0


def test_other_key_release_keeps_moving(handler, controller):
    handler.process_event(key(pygame.KEYDOWN, pygame.K_RIGHT))
    handler.process_event(key(pygame.KEYUP, pygame.K_UP))
    assert controller.player.velocity_x == 5


def test_up_jumps_space_attacks(handler, controller):
    handler.process_event(key(pygame.KEYDOWN, pygame.K_UP))
    handler.process_event(key(pygame.KEYDOWN, pygame.K_SPACE))

    assert controller.player.is_jumping
    assert controller.player.attacking
    assert controller.player.attack_cooldown == 20


def test_keys_ignored_when_idle(controller):
    handler = InputHandler(controller)
    handler.process_event(key(pygame.KEYDOWN, pygame.K_LEFT))
    handler.process_event(key(pygame.KEYDOWN, pygame.K_SPACE))

    assert controller.player.velocity_x == 0
    assert controller.player.attack_cooldown == 0


def test_enter_requests_start_for_one_frame(controller):
    handler = InputHandler(controller)
    handler.process_event(key(pygame.KEYDOWN, pygame.K_RETURN))
    assert handler.state.start_requested

    handler.update()
    assert not handler.state.start_requested


def test_quit_by_escape_or_window_close(controller):
    handler = InputHandler(controller)
    handler.process_event(key(pygame.KEYDOWN, pygame.K_ESCAPE))
    assert handler.should_quit()

    handler = InputHandler(controller)
    handler.process_event(pygame.event.Event(pygame.QUIT))
    assert handler.should_quit()


def test_mouse_tracking(controller):
    handler = InputHandler(controller)
    handler.process_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 20)))
    handler.process_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(400, 250), button=1))

    assert handler.get_mouse_pos() == (10, 20)
    assert handler.state.clicked_at == (400, 250)

    handler.update()
    assert handler.state.clicked_at is None


def test_held_keys_tracked(handler):
    handler.process_event(key(pygame.KEYDOWN, pygame.K_LEFT))
    assert handler.is_key_pressed(pygame.K_LEFT)
    handler.process_event(key(pygame.KEYUP, pygame.K_LEFT))
    assert not handler.is_key_pressed(pygame.K_LEFT)


def test_rebinding(handler, controller):
    handler.set_binding('attack', pygame.K_a)
    handler.process_event(key(pygame.KEYDOWN, pygame.K_SPACE))
    assert controller.player.attack_cooldown == 0
    handler.process_event(key(pygame.KEYDOWN, pygame.K_a))
    assert controller.player.attack_cooldown == 20
