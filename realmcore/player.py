"""A simulated player that wanders randomly inside a bounded map."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from realmcore.geometry import get_cos, get_sin

SPAWN_X_RANGE = (-2500, 2500)
SPAWN_Y_RANGE = (-2000, 2000)
YAW_RANGE = (0, 360)
DEFAULT_SPEED = 400.0

_shared_rng = random.Random()


@dataclass
class Position:
    """Location and heading in degrees."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    yaw: float = 0.0


@dataclass
class MapRange:
    """Bounds of the area a player may move in."""

    start_x: int = SPAWN_X_RANGE[0]
    start_y: int = SPAWN_Y_RANGE[0]
    end_x: int = SPAWN_X_RANGE[1]
    end_y: int = SPAWN_Y_RANGE[1]


@dataclass
class DummyPlayer:
    """A player that takes one random step of fixed length per update."""

    name: str = ""
    position: Position = field(default_factory=Position)
    map_range: MapRange = field(default_factory=MapRange)
    speed: float = DEFAULT_SPEED
    rng: random.Random = field(default=_shared_rng, repr=False, compare=False)

    def start(self) -> None:
        """Place the player at a random spawn point."""
        self.position.x = float(self.rng.randint(*SPAWN_X_RANGE))
        self.position.y = float(self.rng.randint(*SPAWN_Y_RANGE))

    def is_in_map(self) -> bool:
        """Whether the player stands strictly inside the map bounds."""
        bounds, pos = self.map_range, self.position
        if bounds.start_x >= pos.x or bounds.end_x <= pos.x:
            return False
        if bounds.start_y >= pos.y or bounds.end_y <= pos.y:
            return False
        return True

    def update_position(self) -> None:
        """Pick a random heading, step forward, and stop at the map edge."""
        pos, bounds = self.position, self.map_range
        pos.yaw = float(self.rng.randint(*YAW_RANGE))
        pos.x += get_sin(pos.yaw, self.speed)
        pos.y += get_cos(pos.yaw, self.speed)

        if bounds.start_x >= pos.x:
            pos.x = float(bounds.start_x)
        if bounds.end_x <= pos.x:
            pos.x = float(bounds.end_x)
        if bounds.start_y >= pos.y:
            pos.y = float(bounds.start_y)
        if bounds.end_y <= pos.y:
            pos.y = float(bounds.end_y)