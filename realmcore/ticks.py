"""A wrapping tick counter used to pace periodic work."""

from __future__ import annotations


def _truncated_mod(dividend: int, divisor: int) -> int:
    # Remainder takes the sign of the dividend, as integer division truncating toward zero gives.
    remainder = abs(dividend) % abs(divisor)
    return -remainder if dividend < 0 else remainder


class TickCounter:
    """Counts ticks modulo a fixed period."""

    def __init__(self, value: int) -> None:
        if value == 0:
            raise ValueError("tick period must be non-zero")
        self.tick_value = value
        self.tick = 0

    def add(self, value: int = 1) -> int:
        """Advance by value ticks and return the new tick."""
        self.tick = _truncated_mod(self.tick + value, self.tick_value)
        return self.tick

    def reset(self, value: int = -1) -> None:
        """Set the current tick; the default makes the next add() return 0."""
        self.tick = value

    def __repr__(self) -> str:
        return f"TickCounter(tick={self.tick}, period={self.tick_value})"