"""
Unit tests for collision detection

Tests the AABB overlap predicate, the paddle offset mapping and the arena
clamping used by the movement system.
"""

import pytest

from brick_breaker.core.collision import clamp_inside, overlap, paddle_offset
from brick_breaker.core.entities import Body, Vector2D


def make_body(x: float, y: float, w: float, h: float) -> Body:
    return Body(Vector2D(x, y), Vector2D(w, h))


class TestOverlap:
    """Test the open-interval AABB overlap"""

    def test_overlapping_bodies(self):
        """Test partially overlapping rectangles"""
        assert overlap(make_body(0, 0, 4, 4), make_body(2, 2, 4, 4))

    def test_contained_body(self):
        """Test a rectangle inside another one"""
        assert overlap(make_body(0, 0, 10, 10), make_body(4, 4, 2, 2))

    def test_separated_bodies(self):
        """Test rectangles far apart"""
        assert not overlap(make_body(0, 0, 2, 2), make_body(10, 10, 2, 2))

    def test_touching_edges_do_not_overlap(self):
        """Test rectangles sharing an edge are not overlapping"""
        assert not overlap(make_body(0, 0, 2, 2), make_body(2, 0, 2, 2))
        assert not overlap(make_body(0, 0, 2, 2), make_body(0, 2, 2, 2))

    def test_overlap_on_one_axis_only(self):
        """Test rectangles overlapping horizontally but not vertically"""
        assert not overlap(make_body(0, 0, 4, 2), make_body(1, 5, 2, 2))

    @pytest.mark.parametrize(
        "a,b",
        [
            ((0, 0, 4, 4), (2, 2, 4, 4)),
            ((0, 0, 2, 2), (2, 0, 2, 2)),
            ((0, 0, 10, 10), (4, 4, 2, 2)),
            ((5, 5, 1, 1), (0, 0, 2, 2)),
        ],
    )
    def test_overlap_is_symmetric(self, a, b):
        """Test overlap(A, B) == overlap(B, A)"""
        body_a = make_body(*a)
        body_b = make_body(*b)
        assert overlap(body_a, body_b) == overlap(body_b, body_a)


class TestPaddleOffset:
    """Test mapping the ball position on the paddle to [-1, 1]"""

    def test_centered_ball(self):
        """Test a centered ball has no horizontal offset"""
        paddle = make_body(35, 0, 10, 3)
        ball = make_body(39, 2, 2, 2)
        assert paddle_offset(ball, paddle) == 0.0

    def test_ends_of_paddle(self):
        """Test the ball at either end maps to -1 and 1"""
        paddle = make_body(35, 0, 10, 3)
        assert paddle_offset(make_body(35, 2, 2, 2), paddle) == -1.0
        assert paddle_offset(make_body(43, 2, 2, 2), paddle) == 1.0

    def test_offset_is_clamped(self):
        """Test a ball hanging past the paddle end stays within [-1, 1]"""
        paddle = make_body(35, 0, 10, 3)
        assert paddle_offset(make_body(34, 2, 2, 2), paddle) == -1.0
        assert paddle_offset(make_body(44.5, 2, 2, 2), paddle) == 1.0

    def test_ball_as_wide_as_paddle(self):
        """Test the degenerate case does not divide by zero"""
        paddle = make_body(35, 0, 2, 3)
        assert paddle_offset(make_body(36, 2, 2, 2), paddle) == 0.0


class TestClampInside:
    """Test pushing the ball back inside the arena"""

    def test_inside_is_untouched(self):
        """Test a body inside the arena is left alone"""
        body = make_body(10, 10, 2, 2)
        assert clamp_inside(body, 80, 80) == (False, False)
        assert body.pos.to_tuple() == (10, 10)

    def test_left_and_right_walls(self):
        """Test clamping on both side walls"""
        left = make_body(-0.5, 10, 2, 2)
        right = make_body(79, 10, 2, 2)

        assert clamp_inside(left, 80, 80) == (True, False)
        assert clamp_inside(right, 80, 80) == (True, False)
        assert left.pos.x == 0.0
        assert right.pos.x == 78.0

    def test_ceiling(self):
        """Test clamping under the ceiling"""
        body = make_body(10, 79, 2, 2)
        assert clamp_inside(body, 80, 80) == (False, True)
        assert body.pos.y == 78.0

    def test_floor_is_open(self):
        """Test a body below the floor is not pushed back"""
        body = make_body(10, -1, 2, 2)
        assert clamp_inside(body, 80, 80) == (False, False)
        assert body.pos.y == -1
