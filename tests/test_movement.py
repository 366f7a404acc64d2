import pytest

from stick_brawlers.config import FLOOR_Y, GRAVITY, JUMP_VELOCITY, SCREEN_WIDTH
from stick_brawlers.fighters.movement import MovementController


@pytest.fixture
def body():
    m = MovementController()
    m.set_position(300, m.floor_rest_y)
    return m


def test_floor_rest_and_bounds_follow_size():
    m = MovementController(width=50, height=100)
    assert m.floor_rest_y == FLOOR_Y - 50
    assert m.min_x == 25
    assert m.max_x == SCREEN_WIDTH - 25


def test_gravity_pulls_airborne_body_down():
    m = MovementController(x=300, y=100)
    m.update()
    assert m.velocity_y == GRAVITY
    assert m.y == 100 + GRAVITY


def test_landing_on_floor_zeroes_vertical_velocity(body):
    body.is_jumping = True
    body.velocity_y = 3

    body.update()

    assert body.y == body.floor_rest_y
    assert body.velocity_y == 0
    assert body.is_jumping is False


def test_resting_body_stays_on_floor(body):
    for _ in range(10):
        body.update()
    assert body.y == body.floor_rest_y
    assert body.velocity_y == 0


def test_jump_launches_once(body):
    assert body.jump() is True
    assert body.velocity_y == JUMP_VELOCITY
    assert body.is_jumping

    body.update()
    vy = body.velocity_y

    # No double jump
    assert body.jump() is False
    assert body.velocity_y == vy


def test_jump_arc_lands_back_on_floor(body):
    body.jump()
    frames = 0
    while body.is_jumping and frames < 200:
        body.update()
        frames += 1
        assert body.y <= body.floor_rest_y

    assert not body.is_jumping
    assert body.y == body.floor_rest_y
    # 12 / 0.5 up and the same down
    assert 45 <= frames <= 50


def test_large_negative_velocity_pins_at_left_wall(body):
    body.velocity_x = -1000
    for _ in range(5):
        body.update()
        assert body.x == body.min_x

    # Only position is corrected
    assert body.velocity_x == -1000


def test_right_wall_clamp(body):
    body.velocity_x = 40
    for _ in range(50):
        body.update()
    assert body.x == body.max_x


def test_walk_sets_velocity_and_facing(body):
    body.walk(-1)
    assert body.velocity_x == -5
    assert body.facing_right is False

    body.walk(1)
    assert body.velocity_x == 5
    assert body.facing_right is True

    body.stop()
    assert body.velocity_x == 0
    assert body.facing_right is True


def test_knockback_direction(body):
    body.apply_knockback(-1)
    assert body.velocity_x == -5
    body.apply_knockback(1)
    assert body.velocity_x == 5


def test_set_position_clamps_and_stops(body):
    body.velocity_x = 3
    body.velocity_y = -4
    body.is_jumping = True

    body.set_position(-100, 10_000)

    assert body.get_position() == (body.min_x, body.floor_rest_y)
    assert body.velocity_x == 0
    assert body.velocity_y == 0
    assert body.is_jumping is False


def test_distance_to(body):
    other = MovementController()
    other.set_position(350, other.floor_rest_y - 10)
    assert body.get_distance_to(other) == (50, 10)
