"""Map areas: rectangles given by half extents around a center."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class MapType(IntEnum):
    COMMON = 0
    MONSTER = 1
    BOSS = 2


@dataclass
class Rect:
    """Half width x and half height y around (center_x, center_y)."""

    x: int = 0
    y: int = 0
    center_x: int = 0
    center_y: int = 0

    @property
    def start_x(self) -> int:
        return self.center_x - self.x

    @property
    def start_y(self) -> int:
        return self.center_y - self.y

    @property
    def end_x(self) -> int:
        return self.center_x + self.x

    @property
    def end_y(self) -> int:
        return self.center_y + self.y


@dataclass
class MapInfo:
    """A typed map area."""

    rect: Rect = field(default_factory=Rect)
    map_type: MapType = MapType.COMMON

    @classmethod
    def from_extents(
        cls, x: int, y: int, center_x: int, center_y: int, map_type: MapType = MapType.COMMON
    ) -> MapInfo:
        return cls(Rect(x, y, center_x, center_y), map_type)

    def in_rect(self, x: float, y: float) -> bool:
        """Whether the point lies strictly inside the area."""
        r = self.rect
        return r.start_x < x < r.end_x and r.start_y < y < r.end_y

    def clamp(self, x: float, y: float) -> tuple[float, float, bool]:
        """Move the point onto the area's edge if it lies outside.

        Returns the new coordinates and whether anything was changed.
        """
        r = self.rect
        changed = False
        if r.start_x > x:
            x, changed = r.start_x, True
        elif r.end_x < x:
            x, changed = r.end_x, True
        if r.start_y > y:
            y, changed = r.start_y, True
        elif r.end_y < y:
            y, changed = r.end_y, True
        return x, y, changed


class GameMapInfo:
    """A map with its common area and an optional monster area."""

    def __init__(self, x: int, y: int, center_x: int, center_y: int) -> None:
        self.map_info = MapInfo.from_extents(x, y, center_x, center_y, MapType.COMMON)
        self.monster_map_info: MapInfo | None = None
        self.map_code = 0

    def create_monster_map_info(
        self, x: int, y: int, center_x: int, center_y: int, map_type: MapType
    ) -> MapInfo:
        self.monster_map_info = MapInfo.from_extents(x, y, center_x, center_y, map_type)
        return self.monster_map_info