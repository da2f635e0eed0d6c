"""Overlap tests between positioned, rotated shapes."""

from __future__ import annotations

from realmcore.geometry import Vector2
from realmcore.shapes import Circle, Rectangle, Shape, ShapeType


class Collider:
    """A shape placed in the world with a position and a rotation in degrees."""

    def __init__(self, shape: Shape) -> None:
        self.shape = shape
        self.position = Vector2(0.0, 0.0)
        self.rotate = 0.0

    @classmethod
    def circle(cls, radius: float) -> Collider:
        return cls(Circle(radius))

    @classmethod
    def rectangle(cls, width: float, height: float) -> Collider:
        return cls(Rectangle(width, height))

    def set_position(self, x: float, y: float) -> None:
        self.position.x = x
        self.position.y = y

    def reset_circle(self, radius: float) -> None:
        self.shape = Circle(radius)

    def reset_rectangle(self, width: float, height: float) -> None:
        self.shape = Rectangle(width, height)

    def _world_center(self) -> Vector2:
        return self.position + self.shape.center

    def is_trigger(self, other: Collider) -> bool:
        """True when this collider overlaps the other."""
        mine, theirs = self.shape.type, other.shape.type
        if mine is ShapeType.CIRCLE and theirs is ShapeType.CIRCLE:
            dist = (other.position - self.position).magnitude()
            return dist < other.shape.radius + self.shape.radius
        if mine is ShapeType.CIRCLE:
            return _circle_hits_rect(self, other)
        if theirs is ShapeType.CIRCLE:
            return _circle_hits_rect(other, self)
        return _rects_overlap(self, other)


def _circle_hits_rect(circle: Collider, rect: Collider) -> bool:
    # Work in the rectangle's axis-aligned frame and fold into one quadrant.
    delta = circle._world_center() - rect._world_center()
    radius = circle.shape.radius
    half_w = rect.shape.width / 2 + radius
    half_h = rect.shape.height / 2 + radius
    return abs(delta.x) < half_w and abs(delta.y) < half_h


def _rects_overlap(a: Collider, b: Collider) -> bool:
    # Separating axis test over both rectangles' axes.
    dist = a._world_center() - b._world_center()
    axes = [v for c in (a, b) for v in c.shape.vertices(c.rotate)]
    for axis in list(axes):
        normal = axis.normalized()
        extent = sum(v.abs_dot(normal) for v in axes)
        if dist.abs_dot(normal) > extent:
            return False
    return True