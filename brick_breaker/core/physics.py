"""
Movement and collision system for Brick Breaker
"""

from enum import Enum

from brick_breaker.core.collision import clamp_inside
from brick_breaker.core.collision import overlap
from brick_breaker.core.collision import paddle_offset
from brick_breaker.core.entities import Vector2D
from brick_breaker.core.interfaces.controller import ControllerProtocol
from brick_breaker.core.state import GameState

# The ball travels at half the paddle speed
BALL_SPEED_FACTOR = 0.5
# Vertical component of the paddle bounce direction before normalization
PADDLE_BOUNCE_LIFT = 2.0


class GameMessage(Enum):
    """Events emitted by the simulation during a tick"""

    FIRE = "fire"
    BOUNCE = "bounce"
    DROP = "drop"
    WIN = "win"


def scaled_direction(direction: Vector2D, magnitude: float, fallback: Vector2D) -> Vector2D:
    """direction normalized to magnitude, or fallback for a zero-length direction"""
    if direction.magnitude() == 0:
        return fallback.copy()
    return direction.normalize() * magnitude


class MovementSystem:
    """Per-tick update of the paddle, the ball and the bricks"""

    def __init__(self, speed: float):
        self.speed = speed
        self.dir = 0.0
        self.fire = False

    @property
    def ball_speed(self) -> float:
        return self.speed * BALL_SPEED_FACTOR

    def input(self, controller: ControllerProtocol) -> None:
        """Samples the controller for the coming update"""
        self.dir = controller.dir()
        self.fire = controller.fire_just_pressed()

    def update(self, state: GameState, dt: float, messages: list[GameMessage]) -> None:
        """Advances the state by dt, appending the tick's events to messages"""
        self._move_player(state, dt)

        ball = state.ball
        if self.fire and not ball.fired and not state.game_just_started:
            ball.vel = scaled_direction(Vector2D(self.dir, 1.0), self.ball_speed, ball.vel)
            ball.fired = True
            messages.append(GameMessage.FIRE)
        elif not ball.fired:
            ball.vel = Vector2D.zero()
            ball.body.pos = state.ball_rest_position()

        ball.body.pos += ball.vel * dt

        if ball.fired:
            self._check_collisions(state, messages)

        state.game_just_started = False

    def _move_player(self, state: GameState, dt: float) -> None:
        player = state.player
        player.vel.x = self.dir * self.speed
        player.body.pos += player.vel * dt

        max_x = state.arena_size.x - player.body.size.x
        if player.body.pos.x < 0.0:
            player.body.pos.x = 0.0
        elif player.body.pos.x > max_x:
            player.body.pos.x = max_x

    def _check_collisions(self, state: GameState, messages: list[GameMessage]) -> None:
        """Resolves paddle, bricks, walls, floor and ceiling, in that order"""
        ball = state.ball
        bounced = False

        if overlap(ball.body, state.player.body):
            direction = Vector2D(paddle_offset(ball.body, state.player.body), PADDLE_BOUNCE_LIFT)
            ball.vel = scaled_direction(direction, self.ball_speed, ball.vel)
            ball.body.pos.y = state.player.body.top
            bounced = True

        if self._hit_bricks(state):
            bounced = True

        hit_side, hit_ceiling = clamp_inside(ball.body, state.arena_size.x, state.arena_size.y)
        if hit_side:
            ball.vel.x = -ball.vel.x
            bounced = True

        dropped = ball.body.bottom < 0.0
        if dropped:
            messages.append(GameMessage.DROP)
            bounced = False
            ball.fired = False
            ball.vel = Vector2D.zero()
        elif hit_ceiling:
            ball.vel.y = -ball.vel.y
            bounced = True

        if not state.bricks:
            messages.append(GameMessage.WIN)
        if bounced:
            messages.append(GameMessage.BOUNCE)

    def _hit_bricks(self, state: GameState) -> bool:
        """
        Bounces the ball off every brick it overlaps at the start of the scan

        Each hit, in brick order, moves the ball out of that brick along Y on
        the side it is travelling away from, then inverts the vertical
        velocity. Destroyed bricks are removed once the scan is over.
        """
        ball = state.ball
        hits = [i for i, brick in enumerate(state.bricks) if overlap(ball.body, brick.body)]
        destroyed = []

        for i in hits:
            brick = state.bricks[i]
            if ball.vel.y > 0:
                ball.body.pos.y = brick.body.bottom - ball.body.size.y
            else:
                ball.body.pos.y = brick.body.top
            ball.vel.y = -ball.vel.y

            if brick.hit():
                destroyed.append(i)

        # Highest index first so earlier removals do not shift pending ones
        for i in reversed(destroyed):
            state.remove_brick(i)

        return bool(hits)
