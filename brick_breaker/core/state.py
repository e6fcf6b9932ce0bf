"""
Game state for Brick Breaker: arena, paddle, ball and bricks
"""

from collections.abc import Iterator

from brick_breaker.core.entities import BRICK_STATUS
from brick_breaker.core.entities import Ball
from brick_breaker.core.entities import Body
from brick_breaker.core.entities import Brick
from brick_breaker.core.entities import Player
from brick_breaker.core.entities import Vector2D

# Gap between the top of the paddle and the resting ball
BALL_REST_GAP = 1.0


class GameState:
    """Complete state of one level, rebuilt in place by setup()"""

    def __init__(
        self,
        arena_size: Vector2D,
        player_size: Vector2D,
        ball_size: Vector2D,
        brick_size: Vector2D,
    ):
        self.arena_size = arena_size.copy()
        self.brick_size = brick_size.copy()
        self.bricks: list[Brick] = []
        self.player = Player(Body(self._player_start(player_size), player_size.copy()))
        self.ball = Ball(Body(Vector2D.zero(), ball_size.copy()))
        self.rest_ball()
        self.game_just_started = False

    def _player_start(self, player_size: Vector2D) -> Vector2D:
        return Vector2D(self.arena_size.x * 0.5 - player_size.x * 0.5, 0.0)

    def ball_rest_position(self) -> Vector2D:
        """Where the unfired ball sits: centered on the paddle, just above it"""
        paddle = self.player.body
        return paddle.pos + Vector2D(
            (paddle.size.x - self.ball.body.size.x) * 0.5,
            paddle.size.y + BALL_REST_GAP,
        )

    def rest_ball(self) -> None:
        """Puts the ball back on the paddle, not fired and without velocity"""
        self.ball.fired = False
        self.ball.vel = Vector2D.zero()
        self.ball.body.pos = self.ball_rest_position()

    def reset_player(self) -> None:
        """Recenters the paddle and stops it"""
        self.player.body.pos = self._player_start(self.player.body.size)
        self.player.vel = Vector2D.zero()

    def setup(self, num_x: int, num_y: int) -> None:
        """
        Starts a new level with a num_x by num_y grid of bricks

        The grid is horizontally centered without gaps, its first row touching
        the top of the arena. A non positive dimension gives an empty grid.
        """
        self.bricks.clear()
        self.reset_player()
        self.rest_ball()

        num_x = max(0, num_x)
        num_y = max(0, num_y)
        start_x = (self.arena_size.x - self.brick_size.x * num_x) * 0.5
        for row in range(num_y):
            y = self.arena_size.y - (row + 1) * self.brick_size.y
            for col in range(num_x):
                pos = Vector2D(start_x + col * self.brick_size.x, y)
                self.bricks.append(Brick(Body(pos, self.brick_size.copy()), BRICK_STATUS))

        self.game_just_started = True

    def remove_brick(self, index: int) -> None:
        """Removes a brick by its current index, shifting the following ones"""
        del self.bricks[index]

    def live_bricks(self) -> Iterator[tuple[Body, int]]:
        """Body and remaining status of each brick, for rendering"""
        for brick in self.bricks:
            yield brick.body, brick.status
