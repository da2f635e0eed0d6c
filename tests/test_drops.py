from realmcore.drops import DropEquipItem, DropItem, GameDrop


def test_drop_items_keep_order():
    drops = GameDrop()
    drops.add_drop_item(3, 100, 2)
    drops.add_drop_item(3, 101, 5)
    assert drops.monster_drop_list(3) == [DropItem(100, 2), DropItem(101, 5)]


def test_equip_drops_have_count_one():
    drops = GameDrop()
    drops.add_drop_equip_item(3, 11)
    drops.add_drop_equip_item(3, 12)
    equip = drops.monster_drop_equip_list(3)
    assert [e.item_code for e in equip] == [11, 12]
    assert all(e.count == 1 for e in equip)
    assert equip[0] == DropEquipItem(11)


def test_gold_set_and_overwritten():
    drops = GameDrop()
    drops.add_gold(4, 50)
    assert drops.monster_gold(4) == 50
    drops.add_gold(4, 75)
    assert drops.monster_gold(4) == 75


def test_gold_does_not_disturb_items():
    drops = GameDrop()
    drops.add_drop_item(4, 100, 1)
    drops.add_gold(4, 50)
    assert drops.monster_drop_list(4) == [DropItem(100, 1)]


def test_unknown_monster_is_empty():
    drops = GameDrop()
    assert drops.monster_drop_list(9) == []
    assert drops.monster_drop_equip_list(9) == []
    assert drops.monster_gold(9) == 0


def test_clear_drops_items_and_gold_only():
    drops = GameDrop()
    drops.add_drop_item(1, 100, 1)
    drops.add_gold(1, 30)
    drops.add_drop_equip_item(1, 11)
    drops.clear()
    assert drops.monster_drop_list(1) == []
    assert drops.monster_gold(1) == 0
    assert drops.monster_drop_equip_list(1) == [DropEquipItem(11)]