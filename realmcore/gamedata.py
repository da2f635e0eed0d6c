"""Static game data loaded from the JSON configuration."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from realmcore.drops import GameDrop
from realmcore.items import GameEquipItem, GameEtcItem

DEFAULT_CONFIG_PATH = "./config.json"


class ConfigError(ValueError):
    """Raised when the configuration is missing a field or has one of the wrong type."""


@dataclass
class Character:
    """Base stats of a player job or a monster."""

    code: int
    attack: float
    move_speed: float
    hp: int
    exp: int = 0


@dataclass
class ExpLevel:
    """Experience needed to leave a level; zero or less marks the top level."""

    lv: int
    exp: int


def _field(entry: Any, key: str) -> Any:
    if not isinstance(entry, Mapping):
        raise ConfigError(f"expected an object holding {key!r}, got {type(entry).__name__}")
    try:
        return entry[key]
    except KeyError:
        raise ConfigError(f"missing field {key!r}") from None


def _int(entry: Any, key: str) -> int:
    value = _field(entry, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"field {key!r} must be an integer, got {value!r}")
    return value


def _float(entry: Any, key: str) -> float:
    value = _field(entry, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"field {key!r} must be a number, got {value!r}")
    return float(value)


def _list(entry: Any, key: str) -> list[Any]:
    value = _field(entry, key)
    if not isinstance(value, list):
        raise ConfigError(f"field {key!r} must be an array")
    return value


class GameData:
    """Tables of characters, levels, items and drops."""

    def __init__(self) -> None:
        self.players: dict[int, Character] = {}
        self.monsters: dict[int, Character] = {}
        self.levels: dict[int, ExpLevel] = {}
        self.equip_items = GameEquipItem()
        self.etc_items = GameEtcItem()
        self.drops = GameDrop()

    def load_players(self, entries: Iterable[Any]) -> None:
        for unit in entries:
            code = _int(unit, "code")
            self.players.setdefault(
                code,
                Character(code, _float(unit, "attack"), _float(unit, "moveSpeed"), _int(unit, "hp")),
            )

    def load_monsters(self, entries: Iterable[Any]) -> None:
        for unit in entries:
            code = _int(unit, "code")
            self.monsters.setdefault(
                code,
                Character(
                    code,
                    _float(unit, "attack"),
                    _float(unit, "moveSpeed"),
                    _int(unit, "hp"),
                    _int(unit, "exp"),
                ),
            )

    def load_levels(self, entries: Iterable[Any]) -> None:
        for entry in entries:
            lv = _int(entry, "lv")
            self.levels.setdefault(lv, ExpLevel(lv, _int(entry, "exp")))

    def load_equip_items(self, entries: Iterable[Any]) -> None:
        for equip in entries:
            self.equip_items.add_item(
                _int(equip, "code"),
                _int(equip, "type"),
                _int(equip, "gold"),
                _int(equip, "attack"),
                _int(equip, "speed"),
            )

    def load_etc_items(self, entries: Iterable[Any]) -> None:
        for etc in entries:
            self.etc_items.add_item(
                _int(etc, "code"), _int(etc, "type"), _int(etc, "gold"), _int(etc, "maxCnt")
            )

    def load_drops(self, entries: Iterable[Any]) -> None:
        for drop in entries:
            monster_code = _int(drop, "monsterCode")
            for item in _list(drop, "dropEquipList"):
                self.drops.add_drop_equip_item(monster_code, _int(item, "itemCode"))
            gold = _int(drop, "gold")
            for item in _list(drop, "dropList"):
                self.drops.add_drop_item(monster_code, _int(item, "itemCode"), _int(item, "cnt"))
            self.drops.add_gold(monster_code, gold)

    def load(self, config: Mapping[str, Any]) -> GameData:
        """Fill every table from a parsed configuration document."""
        units = _field(config, "units")
        self.load_players(_list(units, "players"))
        self.load_monsters(_list(units, "monsters"))
        self.load_levels(_list(config, "lvs"))
        self.load_equip_items(_list(config, "itemEquip"))
        self.load_etc_items(_list(config, "itemEtc"))
        self.load_drops(_list(config, "dropJson"))
        return self

    def clear(self) -> None:
        self.players.clear()
        self.monsters.clear()
        self.levels.clear()
        self.equip_items.clear()
        self.etc_items.clear()
        self.drops.clear()


def load_config(path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH) -> GameData:
    """Read a JSON configuration file into a new GameData."""
    with open(path, encoding="utf-8") as fh:
        try:
            document = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid JSON in {path}: {exc}") from exc
    return GameData().load(document)