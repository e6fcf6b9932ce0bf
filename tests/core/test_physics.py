"""
Unit tests for the movement and collision system

Tests the per-tick update including:
- Paddle movement and clamping
- Ball launch, resting and drop
- Paddle, brick, wall and ceiling bounces
- Coalesced bounce and win messages
"""

import math
from dataclasses import dataclass

import pytest

from brick_breaker.core.entities import Body, Brick, Vector2D
from brick_breaker.core.physics import GameMessage, MovementSystem, scaled_direction
from brick_breaker.core.state import GameState

DT = 1 / 60
SPEED = 10.0


@dataclass
class ScriptedController:
    """Controller double with fixed readings"""

    direction: float = 0.0
    fire: bool = False

    def dir(self) -> float:
        return self.direction

    def fire_just_pressed(self) -> bool:
        return self.fire

    def back_just_pressed(self) -> bool:
        return False

    def up_just_pressed(self) -> bool:
        return False

    def down_just_pressed(self) -> bool:
        return False


@pytest.fixture
def state():
    """80x80 arena, 10x3 paddle, 2x2 ball, 8x4 bricks, no bricks laid"""
    return GameState(Vector2D(80, 80), Vector2D(10, 3), Vector2D(2, 2), Vector2D(8, 4))


@pytest.fixture
def system():
    return MovementSystem(SPEED)


def tick(system, state, direction=0.0, fire=False, dt=DT):
    messages: list[GameMessage] = []
    system.input(ScriptedController(direction, fire))
    system.update(state, dt, messages)
    return messages


def add_brick(state, x, y, status=4):
    brick = Brick(Body(Vector2D(x, y), Vector2D(8, 4)), status)
    state.bricks.append(brick)
    return brick


def launch_at(state, x, y, vx, vy):
    state.ball.fired = True
    state.ball.body.pos = Vector2D(x, y)
    state.ball.vel = Vector2D(vx, vy)


class TestPaddleMovement:
    """Test paddle integration and clamping"""

    def test_one_tick_right(self, state, system):
        """Test one tick at full speed to the right"""
        state.setup(10, 4)
        tick(system, state, direction=1.0)

        assert state.player.body.pos.x == pytest.approx(35 + 10 / 60)
        assert state.player.vel.x == SPEED

    def test_clamped_left(self, state, system):
        """Test the paddle stops at the left wall"""
        for _ in range(600):
            tick(system, state, direction=-1.0)
        assert state.player.body.pos.x == 0.0

    def test_clamped_right(self, state, system):
        """Test the paddle stops at the right wall"""
        for _ in range(600):
            tick(system, state, direction=1.0)
        assert state.player.body.pos.x == 70.0

    @pytest.mark.parametrize("direction", [-1.0, -0.5, 0.0, 0.3, 1.0])
    def test_paddle_stays_in_bounds(self, state, direction):
        """Test the paddle bound invariant under a fast paddle"""
        fast = MovementSystem(5000.0)
        for _ in range(20):
            tick(fast, state, direction=direction)
            assert 0.0 <= state.player.body.pos.x <= 70.0


class TestLaunch:
    """Test firing the ball"""

    def test_no_launch_on_first_tick_after_setup(self, state, system):
        """Test setup suppresses a launch on the next tick"""
        state.setup(10, 4)

        messages = tick(system, state, fire=True)

        assert messages == []
        assert state.ball.fired is False
        assert state.game_just_started is False

    def test_launch(self, state, system):
        """Test a straight launch"""
        state.setup(10, 4)
        tick(system, state)

        messages = tick(system, state, fire=True)

        assert messages == [GameMessage.FIRE]
        assert state.ball.fired is True
        assert state.ball.vel.x == pytest.approx(0.0)
        assert state.ball.vel.y == pytest.approx(SPEED * 0.5)
        assert state.ball.body.pos.y == pytest.approx(4.0 + SPEED * 0.5 * DT)

    def test_launch_follows_direction(self, state, system):
        """Test the launch angle follows the held direction"""
        state.setup(10, 4)
        tick(system, state)

        tick(system, state, direction=1.0, fire=True)

        expected = SPEED * 0.5 / math.sqrt(2)
        assert state.ball.vel.x == pytest.approx(expected)
        assert state.ball.vel.y == pytest.approx(expected)

    def test_fire_ignored_when_already_fired(self, state, system):
        """Test pressing fire again does not relaunch"""
        add_brick(state, 0, 70)
        launch_at(state, 20, 30, 0, 5)

        messages = tick(system, state, fire=True)

        assert GameMessage.FIRE not in messages
        assert state.ball.vel.to_tuple() == (0, 5)

    def test_resting_ball_follows_paddle(self, state, system):
        """Test the unfired ball is bound to the paddle"""
        state.setup(10, 4)
        tick(system, state, direction=1.0)

        paddle = state.player.body.pos
        assert state.ball.body.pos.x == pytest.approx(paddle.x + 4.0)
        assert state.ball.body.pos.y == pytest.approx(4.0)


class TestBounces:
    """Test collision responses"""

    def test_paddle_bounce_center(self, state, system):
        """Test a centered hit sends the ball straight up"""
        add_brick(state, 0, 70)
        launch_at(state, 39, 3.5, 0, -60)

        messages = tick(system, state)

        assert messages == [GameMessage.BOUNCE]
        assert state.ball.vel.x == pytest.approx(0.0)
        assert state.ball.vel.y == pytest.approx(SPEED * 0.5)

    def test_paddle_bounce_edge(self, state, system):
        """Test a hit on the right end angles the ball right"""
        add_brick(state, 0, 70)
        launch_at(state, 43, 3.5, 0, -60)

        tick(system, state)

        expected = Vector2D(1.0, 2.0).normalize() * (SPEED * 0.5)
        assert state.ball.vel.x == pytest.approx(expected.x)
        assert state.ball.vel.y == pytest.approx(expected.y)

    def test_paddle_bounce_lifts_ball_out(self, state, system):
        """Test a ball deep inside the paddle bounces once and leaves it"""
        add_brick(state, 0, 70)
        launch_at(state, 39.5, 1.0, 0, -6)

        messages = []
        for _ in range(60):
            messages += tick(system, state)

        assert messages.count(GameMessage.BOUNCE) == 1
        assert state.ball.vel.y > 0
        assert state.ball.body.bottom > state.player.body.top

    def test_brick_bounce_from_below(self, state, system):
        """Test a brick hit from below snaps the ball under it and sends it down"""
        brick = add_brick(state, 36, 40)
        launch_at(state, 39, 37.5, 0, 60)

        messages = tick(system, state)

        assert messages == [GameMessage.BOUNCE]
        assert brick.status == 3
        assert state.ball.body.pos.y == 38.0
        assert state.ball.vel.y == -60

    def test_brick_bounce_from_above(self, state, system):
        """Test a brick hit from above snaps the ball on top of it"""
        brick = add_brick(state, 36, 40)
        launch_at(state, 39, 44.5, 0, -60)

        tick(system, state)

        assert brick.status == 3
        assert state.ball.body.pos.y == 44.0
        assert state.ball.vel.y == 60

    def test_two_bricks_one_bounce(self, state, system):
        """Test every touched brick is hit and inverts the ball, with one bounce reported"""
        left = add_brick(state, 32, 40)
        right = add_brick(state, 40, 40)
        launch_at(state, 39, 37.5, 0, 60)

        messages = tick(system, state)

        assert messages == [GameMessage.BOUNCE]
        assert left.status == 3
        assert right.status == 3
        assert state.ball.vel.y == 60
        assert state.ball.body.pos.y == 44.0

    def test_brick_destroyed_after_four_hits(self, state, system):
        """Test a brick survives three hits and is removed by the fourth"""
        add_brick(state, 0, 70)
        target = add_brick(state, 36, 40)
        statuses = []

        for _ in range(4):
            launch_at(state, 39, 37.5, 0, 60)
            tick(system, state)
            statuses.append(target.status)

        assert statuses == [3, 2, 1, 0]
        assert target not in state.bricks
        assert len(state.bricks) == 1

    def test_removal_keeps_other_bricks(self, state, system):
        """Test removing several bricks in one tick removes exactly those"""
        keep = add_brick(state, 0, 70)
        left = add_brick(state, 32, 40, status=1)
        right = add_brick(state, 40, 40, status=1)
        launch_at(state, 39, 37.5, 0, 60)

        tick(system, state)

        assert state.bricks == [keep]
        assert left not in state.bricks
        assert right not in state.bricks

    def test_side_wall(self, state, system):
        """Test the right wall clamps and reflects"""
        add_brick(state, 0, 70)
        launch_at(state, 77.5, 40, 60, 0)

        messages = tick(system, state)

        assert messages == [GameMessage.BOUNCE]
        assert state.ball.body.pos.x == 78.0
        assert state.ball.vel.x == -60

    def test_left_wall(self, state, system):
        """Test the left wall clamps and reflects"""
        add_brick(state, 60, 20)
        launch_at(state, 0.5, 40, -60, 0)

        tick(system, state)

        assert state.ball.body.pos.x == 0.0
        assert state.ball.vel.x == 60

    def test_ceiling(self, state, system):
        """Test the ceiling clamps and reflects"""
        add_brick(state, 60, 20)
        launch_at(state, 10, 77.5, 0, 60)

        messages = tick(system, state)

        assert messages == [GameMessage.BOUNCE]
        assert state.ball.body.pos.y == 78.0
        assert state.ball.vel.y == -60

    def test_no_message_in_free_flight(self, state, system):
        """Test nothing is reported while the ball flies freely"""
        add_brick(state, 0, 70)
        launch_at(state, 20, 30, 3, 4)

        assert tick(system, state) == []


class TestDropAndWin:
    """Test losing the ball and clearing the level"""

    def test_drop(self, state, system):
        """Test the ball falling through the floor"""
        add_brick(state, 0, 70)
        launch_at(state, 20, 0.5, 0, -60)

        messages = tick(system, state)

        assert messages == [GameMessage.DROP]
        assert state.ball.fired is False
        assert state.ball.vel.to_tuple() == (0.0, 0.0)

    def test_drop_suppresses_bounce(self, state, system):
        """Test a wall hit in the dropping tick is not reported"""
        add_brick(state, 60, 70)
        launch_at(state, 0.5, 0.5, -60, -60)

        assert tick(system, state) == [GameMessage.DROP]

    def test_ball_rests_after_drop(self, state, system):
        """Test the tick after a drop puts the ball back on the paddle"""
        add_brick(state, 0, 70)
        launch_at(state, 20, 0.5, 0, -60)
        tick(system, state)

        tick(system, state)

        assert state.ball.body.pos.to_tuple() == pytest.approx((39.0, 4.0))

    def test_win_when_last_brick_destroyed(self, state, system):
        """Test win is emitted once, together with the bounce"""
        add_brick(state, 36, 40, status=1)
        launch_at(state, 39, 37.5, 0, 60)

        messages = tick(system, state)

        assert state.bricks == []
        assert messages.count(GameMessage.WIN) == 1
        assert GameMessage.BOUNCE in messages

    def test_no_win_while_bricks_remain(self, state, system):
        """Test a destroyed brick with others left is not a win"""
        add_brick(state, 0, 70)
        add_brick(state, 36, 40, status=1)
        launch_at(state, 39, 37.5, 0, 60)

        messages = tick(system, state)

        assert GameMessage.WIN not in messages

    def test_no_win_while_resting(self, state, system):
        """Test an empty grid only reports win once the ball is in play"""
        state.setup(0, 0)

        assert tick(system, state) == []
        assert tick(system, state, fire=True) == [GameMessage.FIRE, GameMessage.WIN]


class TestScaledDirection:
    """Test the guarded normalization"""

    def test_scales_to_magnitude(self):
        """Test a direction is normalized then scaled"""
        result = scaled_direction(Vector2D(3, 4), 10, Vector2D(0, 0))
        assert result.to_tuple() == pytest.approx((6, 8))

    def test_zero_direction_keeps_fallback(self):
        """Test a zero-length direction returns the fallback"""
        fallback = Vector2D(1, 2)
        result = scaled_direction(Vector2D(0, 0), 10, fallback)
        assert result.to_tuple() == (1, 2)
        assert result is not fallback
