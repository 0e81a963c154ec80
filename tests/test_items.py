import pytest

from pyrpgini import GameItem, IniReadError, load_items

from conftest import find


def test_heavy_sword(items):
    hs = find(items, "Heavy Sword")
    assert hs == GameItem("Heavy Sword", value=250, weight=15,
                          attack_bonus=10, agility_bonus=-5, defense_bonus=0)


def test_items_keep_file_order(items):
    assert [i.name for i in items][:3] == [
        "Heavy Sword", "Elven Cloak", "Health Potion"]
    assert len(items) == 13


def test_health_potion_defaults(items):
    hp = find(items, "Health Potion")
    assert (hp.value, hp.weight) == (50, 1)
    assert (hp.attack_bonus, hp.agility_bonus, hp.defense_bonus) == (0, 0, 0)


def test_unknown_and_miscased_keys_ignored(items):
    item = find(items, "UnknownPropertiesAreIgnored")
    assert (item.value, item.weight, item.attack_bonus) == (50, 10, 5)
    assert item.agility_bonus == 0
    assert item.defense_bonus == 0


def test_property_order_does_not_matter(items):
    item = find(items, "OutOfOrder")
    assert item == GameItem("OutOfOrder", 30, 2, -1, 1, 2)


def test_repeated_properties_take_last(items):
    item = find(items, "Repeat")
    assert (item.value, item.weight, item.attack_bonus) == (55, 3, 4)
    assert item.agility_bonus == 1


def test_missing_and_empty_fields(items):
    item = find(items, "MissingFields")
    assert item == GameItem("MissingFields", 0, 0, 5, 2, 0)


def test_item_is_immutable(items):
    with pytest.raises(AttributeError):
        items[0].value = 1


def test_empty_file(tmp_path):
    fn = tmp_path / "empty.ini"
    fn.write_text("")
    assert load_items(str(fn)) == []


def test_malformed_number_fails(tmp_path):
    fn = tmp_path / "bad.ini"
    fn.write_text("[Rusty Sword]\nValue=cheap\n")
    with pytest.raises(IniReadError) as info:
        load_items(str(fn))
    assert isinstance(info.value.__cause__, ValueError)


def test_whitespace_around_number_fails(tmp_path):
    fn = tmp_path / "bad.ini"
    fn.write_text("[Rusty Sword]\nValue= 5\n")
    with pytest.raises(IniReadError):
        load_items(str(fn))


def test_missing_file_fails(tmp_path):
    with pytest.raises(IniReadError):
        load_items(str(tmp_path / "missing.ini"))
