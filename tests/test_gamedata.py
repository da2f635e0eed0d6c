import json

import pytest

from realmcore.drops import DropItem
from realmcore.gamedata import Character, ConfigError, ExpLevel, GameData, load_config


def _config():
    return {
        "units": {
            "players": [{"code": 1, "attack": 10.5, "moveSpeed": 300.0, "hp": 100}],
            "monsters": [{"code": 7, "attack": 4.0, "moveSpeed": 150.0, "hp": 40, "exp": 12}],
            "weapons": [],
            "Skills": [],
        },
        "lvs": [{"lv": 1, "exp": 100}, {"lv": 2, "exp": 0}],
        "itemEquip": [{"code": 11, "type": 1, "gold": 50, "attack": 90, "speed": 0}],
        "itemEtc": [{"code": 21, "type": 3, "gold": 5, "maxCnt": 99}],
        "dropJson": [
            {
                "monsterCode": 7,
                "dropEquipList": [{"itemCode": 11}],
                "gold": 30,
                "dropList": [{"itemCode": 21, "cnt": 2}],
            }
        ],
    }


def test_load_fills_all_tables():
    data = GameData().load(_config())
    assert data.players[1] == Character(1, 10.5, 300.0, 100, 0)
    assert data.monsters[7] == Character(7, 4.0, 150.0, 40, 12)
    assert data.levels[2] == ExpLevel(2, 0)
    assert data.equip_items.get_item(11).attack == 90
    assert data.etc_items.get_item(21).max_count == 99
    assert data.drops.monster_gold(7) == 30
    assert data.drops.monster_drop_list(7) == [DropItem(21, 2)]
    assert [e.item_code for e in data.drops.monster_drop_equip_list(7)] == [11]


def test_integer_numbers_accepted_as_floats():
    data = GameData()
    data.load_players([{"code": 2, "attack": 3, "moveSpeed": 4, "hp": 5}])
    assert data.players[2].attack == 3.0
    assert isinstance(data.players[2].move_speed, float)


def test_duplicate_codes_keep_first():
    data = GameData()
    data.load_levels([{"lv": 1, "exp": 100}, {"lv": 1, "exp": 999}])
    assert data.levels[1].exp == 100


def test_missing_field_raises():
    data = GameData()
    with pytest.raises(ConfigError):
        data.load_monsters([{"code": 7, "attack": 1.0, "moveSpeed": 1.0, "hp": 1}])


def test_wrong_type_raises():
    data = GameData()
    with pytest.raises(ConfigError):
        data.load_levels([{"lv": "one", "exp": 1}])
    with pytest.raises(ConfigError):
        data.load_etc_items([{"code": 1.5, "type": 1, "gold": 1, "maxCnt": 1}])


def test_missing_section_raises():
    config = _config()
    del config["dropJson"]
    with pytest.raises(ConfigError):
        GameData().load(config)


def test_clear_empties_tables():
    data = GameData().load(_config())
    data.clear()
    assert data.players == {}
    assert data.monsters == {}
    assert data.levels == {}
    assert data.equip_items.get_item(11) is None
    assert data.drops.monster_gold(7) == 0


def test_load_config_round_trip(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(_config()), encoding="utf-8")
    data = load_config(path)
    assert data.players == GameData().load(_config()).players
    assert data.etc_items.get_item(21).code == 21


def test_load_config_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.json")