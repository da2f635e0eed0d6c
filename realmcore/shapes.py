"""Collision shapes: circles and rectangles."""

from __future__ import annotations

from enum import Enum

from realmcore.geometry import Vector2, get_cos, get_sin


class ShapeType(Enum):
    CIRCLE = 0
    RECTANGLE = 1


class Shape:
    """Base shape with a local center offset."""

    type: ShapeType = ShapeType.CIRCLE

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.center = Vector2(x, y)
        self._vertices: list[Vector2] = []

    def _axes(self, rot: float) -> list[Vector2]:
        """Half-extent axes at the given rotation; a plain shape has none."""
        return []

    def update(self) -> None:
        """Recompute the cached axes for an unrotated shape."""
        self._vertices = self._axes(0.0)

    def vertices(self, rot: float) -> list[Vector2]:
        """Half-extent axes of the shape at the given rotation."""
        return self._vertices


class Circle(Shape):
    """A circle of the given radius."""

    type = ShapeType.CIRCLE

    def __init__(self, radius: float = 0.3, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.radius = radius

    def __repr__(self) -> str:
        return f"Circle(radius={self.radius}, center={self.center})"


class Rectangle(Shape):
    """An oriented rectangle of the given width and height."""

    type = ShapeType.RECTANGLE

    def __init__(self, width: float, height: float, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)
        self.width = width
        self.height = height
        self.update()

    def _axes(self, rot: float) -> list[Vector2]:
        return [
            Vector2(self.width * get_cos(rot) / 2, self.width * get_sin(rot) / 2),
            Vector2(self.height * get_cos(rot - 90) / 2, self.height * get_sin(rot - 90) / 2),
        ]

    def vertices(self, rot: float) -> list[Vector2]:
        """The two half-extent axes, rotated by rot degrees.

        A rectangle is symmetric, so two axes are enough for separation tests.
        """
        self._vertices = self._axes(rot)
        return self._vertices

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width}, height={self.height}, center={self.center})"