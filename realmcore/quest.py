"""Room quests: kill a number of monsters to clear the room."""

from __future__ import annotations


class GameRoomQuestInfo:
    """Counts kills; pending kills count only once committed."""

    def __init__(self, dead_monster_size: int) -> None:
        self.sum_count = dead_monster_size
        self.kill_count = 0
        self._pending = 0

    def is_clear(self) -> bool:
        return self.sum_count <= self.kill_count

    def commit_kills(self) -> None:
        """Add pending kills to the total and reset the pending count."""
        self.kill_count += self._pending
        self._pending = 0

    def add_dead_monster(self, value: int = 1) -> None:
        self._pending += value

    def is_killed(self) -> bool:
        """Whether any kills are pending."""
        return self._pending > 0


class GameRoomQuest:
    """The quest attached to a room."""

    def __init__(self, kill_monster_count: int) -> None:
        self.info = GameRoomQuestInfo(kill_monster_count)