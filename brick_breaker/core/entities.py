"""
Brick Breaker game entities: paddle, ball, bricks
"""

from dataclasses import dataclass
from dataclasses import field

import numpy as np

# Hit points of a freshly laid brick
BRICK_STATUS = 4


@dataclass
class Vector2D:
    """Simple 2D vector for positions, sizes and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __imul__(self, scalar: float) -> "Vector2D":
        self.x *= scalar
        self.y *= scalar
        return self

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def normalize(self) -> "Vector2D":
        mag = self.magnitude()
        if mag == 0:
            return Vector2D(0, 0)
        return Vector2D(self.x / mag, self.y / mag)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)

    @classmethod
    def zero(cls) -> "Vector2D":
        return cls(0.0, 0.0)


@dataclass
class Body:
    """Axis-aligned rectangle, positioned by its bottom-left corner"""

    pos: Vector2D
    size: Vector2D

    @property
    def left(self) -> float:
        return self.pos.x

    @property
    def right(self) -> float:
        return self.pos.x + self.size.x

    @property
    def bottom(self) -> float:
        return self.pos.y

    @property
    def top(self) -> float:
        return self.pos.y + self.size.y

    @property
    def center_x(self) -> float:
        return self.pos.x + self.size.x / 2


@dataclass
class Player:
    """Player paddle, only its horizontal movement is meaningful"""

    body: Body
    vel: Vector2D = field(default_factory=Vector2D.zero)


@dataclass
class Ball:
    """Game ball, resting on the paddle until fired"""

    body: Body
    vel: Vector2D = field(default_factory=Vector2D.zero)
    fired: bool = False


@dataclass
class Brick:
    """Brick with its remaining hit points"""

    body: Body
    status: int = BRICK_STATUS

    def hit(self) -> bool:
        """Takes one hit point, returns True when the brick is destroyed"""
        self.status -= 1
        return self.status <= 0
