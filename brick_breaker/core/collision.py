"""
Collision detection for Brick Breaker

All bodies are axis-aligned rectangles, so a collision is an AABB overlap.
"""

from brick_breaker.core.entities import Body


def overlap(a: Body, b: Body) -> bool:
    """Open-interval AABB test: touching edges do not overlap"""
    return (
        a.left < b.right
        and a.right > b.left
        and a.bottom < b.top
        and a.top > b.bottom
    )


def paddle_offset(ball: Body, paddle: Body) -> float:
    """
    Horizontal position of the ball on the paddle mapped to [-1, 1]

    -1 is the left end of the paddle, 1 the right end. A ball as wide as the
    paddle has no meaningful offset and maps to 0.
    """
    travel = paddle.size.x - ball.size.x
    if travel == 0:
        return 0.0
    rel = (ball.pos.x - paddle.pos.x) / travel * 2.0 - 1.0
    return max(-1.0, min(1.0, rel))


def clamp_inside(body: Body, width: float, height: float) -> tuple[bool, bool]:
    """
    Pushes a body back inside [0, width] x [0, height] on the sides and the top

    The floor is left open. Returns (hit_side, hit_ceiling).
    """
    hit_side = False
    if body.left < 0.0:
        body.pos.x = 0.0
        hit_side = True
    elif body.right > width:
        body.pos.x = width - body.size.x
        hit_side = True

    hit_ceiling = False
    if body.top > height:
        body.pos.y = height - body.size.y
        hit_ceiling = True

    return hit_side, hit_ceiling
