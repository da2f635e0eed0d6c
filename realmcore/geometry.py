"""Two-dimensional vectors and the angle helpers used by the game world."""

from __future__ import annotations

import math
from dataclasses import dataclass

# The game world uses this approximation of pi for every angle conversion.
PI_APPROX = 3.14


@dataclass
class Vector2:
    """A mutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def dot(self, other: Vector2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def abs_dot(self, other: Vector2) -> float:
        """Absolute value of the dot product."""
        return abs(self.dot(other))

    def cross(self, other: Vector2) -> float:
        """Z component of the cross product."""
        return self.x * other.y - other.x * self.y

    def magnitude(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x**2 + self.y**2)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction, or the zero vector."""
        mag = self.magnitude()
        if mag != 0.0:
            return Vector2(self.x / mag, self.y / mag)
        return Vector2(0.0, 0.0)


def radian_to_degree(radian: float) -> float:
    """Convert radians to degrees."""
    return radian * 180.0 / PI_APPROX


def get_sin(yaw: float, distance: float = 1.0) -> float:
    """Sine of a yaw given in degrees, scaled by distance."""
    return distance * math.sin(yaw * PI_APPROX / 180.0)


def get_cos(yaw: float, distance: float = 1.0) -> float:
    """Cosine of a yaw given in degrees, scaled by distance."""
    return distance * math.cos(yaw * PI_APPROX / 180.0)


def calculate_angle(a: Vector2, b: Vector2) -> float:
    """Signed angle in degrees from the +x axis to the direction a -> b."""
    sub = b - a
    forward = Vector2(1.0, 0.0)
    cosine = max(-1.0, min(1.0, sub.normalized().dot(forward)))
    angle = radian_to_degree(math.acos(cosine))
    if forward.cross(sub) > 0:
        return angle
    return -angle