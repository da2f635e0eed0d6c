"""Per-monster drop tables: stackable items, equipment and gold."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DropItem:
    """A stack of items dropped by a monster."""

    item_code: int
    count: int


@dataclass
class DropEquipItem:
    """A single piece of equipment dropped by a monster."""

    item_code: int
    count: int = 1


@dataclass
class _DropTable:
    items: list[DropItem] = field(default_factory=list)
    gold: int = 0


class GameDrop:
    """Drop tables keyed by monster code; looking up an unknown monster creates an empty table."""

    def __init__(self) -> None:
        self._drops: dict[int, _DropTable] = {}
        self._equip_drops: dict[int, list[DropEquipItem]] = {}

    def _table(self, monster_code: int) -> _DropTable:
        return self._drops.setdefault(monster_code, _DropTable())

    def add_drop_item(self, monster_code: int, item_code: int, count: int) -> None:
        self._table(monster_code).items.append(DropItem(item_code, count))

    def add_drop_equip_item(self, monster_code: int, item_code: int) -> None:
        self._equip_drops.setdefault(monster_code, []).append(DropEquipItem(item_code))

    def add_gold(self, monster_code: int, gold: int) -> None:
        self._table(monster_code).gold = gold

    def monster_drop_list(self, monster_code: int) -> list[DropItem]:
        return self._table(monster_code).items

    def monster_drop_equip_list(self, monster_code: int) -> list[DropEquipItem]:
        return self._equip_drops.setdefault(monster_code, [])

    def monster_gold(self, monster_code: int) -> int:
        return self._table(monster_code).gold

    def clear(self) -> None:
        """Forget item drops and gold; equipment drop lists are kept."""
        self._drops.clear()