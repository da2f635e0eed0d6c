"""Item definitions for equipment and miscellaneous items, keyed by item code."""

from __future__ import annotations

from dataclasses import dataclass

# Code under which the placeholder for unknown items is stored.
UNKNOWN_CODE = -1


@dataclass
class ItemEquip:
    """Static data of an equipment item."""

    code: int = 0
    type: int = 0
    gold: int = 0
    attack: int = 0
    speed: int = 0


@dataclass
class ItemEtc:
    """Static data of a stackable miscellaneous item."""

    code: int = 0
    type: int = 0
    gold: int = 0
    max_count: int = 0


class GameEquipItem:
    """Catalogue of equipment items; unknown codes map to a placeholder item."""

    def __init__(self) -> None:
        self._items: dict[int, ItemEquip] = {
            UNKNOWN_CODE: ItemEquip(UNKNOWN_CODE, -1, -1, -1, -1)
        }

    def add_item(self, code: int, type: int, gold: int, attack: int, speed: int) -> None:
        """Register an item; a code that is already present is left unchanged."""
        self._items.setdefault(code, ItemEquip(code, type, gold, attack, speed))

    def get_item(self, code: int) -> ItemEquip | None:
        """The item with this code, or the placeholder (None once cleared)."""
        found = self._items.get(code)
        if found is not None:
            return found
        return self._items.get(UNKNOWN_CODE)

    def clear(self) -> None:
        """Remove every item, the placeholder included."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, code: object) -> bool:
        return code in self._items


class GameEtcItem:
    """Catalogue of miscellaneous items; unknown codes map to a placeholder item."""

    def __init__(self) -> None:
        self._items: dict[int, ItemEtc] = {UNKNOWN_CODE: ItemEtc(UNKNOWN_CODE, -1, -1, -1)}

    def add_item(self, code: int, type: int, gold: int, max_count: int) -> None:
        """Register an item; a code that is already present is left unchanged."""
        self._items.setdefault(code, ItemEtc(code, type, gold, max_count))

    def get_item(self, code: int) -> ItemEtc | None:
        """The item with this code, or the placeholder (None once cleared)."""
        found = self._items.get(code)
        if found is not None:
            return found
        return self._items.get(UNKNOWN_CODE)

    def clear(self) -> None:
        """Remove every item, the placeholder included."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, code: object) -> bool:
        return code in self._items