from realmcore.items import GameEquipItem, GameEtcItem, ItemEquip, ItemEtc


def test_equip_add_and_get():
    catalogue = GameEquipItem()
    catalogue.add_item(11, 1, 500, 90, 0)
    assert catalogue.get_item(11) == ItemEquip(11, 1, 500, 90, 0)


def test_equip_unknown_returns_placeholder():
    catalogue = GameEquipItem()
    item = catalogue.get_item(999)
    assert item == ItemEquip(-1, -1, -1, -1, -1)


def test_equip_duplicate_keeps_first():
    catalogue = GameEquipItem()
    catalogue.add_item(5, 1, 10, 20, 30)
    catalogue.add_item(5, 2, 99, 99, 99)
    assert catalogue.get_item(5).gold == 10
    assert len(catalogue) == 2


def test_equip_clear_removes_placeholder():
    catalogue = GameEquipItem()
    catalogue.add_item(5, 1, 10, 20, 30)
    catalogue.clear()
    assert catalogue.get_item(5) is None
    assert catalogue.get_item(-1) is None
    assert len(catalogue) == 0


def test_etc_add_and_get():
    catalogue = GameEtcItem()
    catalogue.add_item(21, 3, 7, 99)
    item = catalogue.get_item(21)
    assert item == ItemEtc(21, 3, 7, 99)
    assert 21 in catalogue


def test_etc_unknown_and_duplicate():
    catalogue = GameEtcItem()
    catalogue.add_item(21, 3, 7, 99)
    catalogue.add_item(21, 4, 8, 1)
    assert catalogue.get_item(21).max_count == 99
    assert catalogue.get_item(42).code == -1


def test_etc_clear():
    catalogue = GameEtcItem()
    catalogue.add_item(21, 3, 7, 99)
    catalogue.clear()
    assert catalogue.get_item(21) is None