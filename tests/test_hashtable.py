import pytest

from gamealgos.hashtable import GameObject, GameObjectTable, main


@pytest.fixture
def table():
    tbl = GameObjectTable()
    tbl.insert(GameObject("Runner number 1", 23))
    tbl.insert(GameObject("Katniss", 54))
    tbl.insert(GameObject("Triss", 45))
    tbl.insert(GameObject("Lyra", 5))
    return tbl


def test_find_existing(table):
    found = table.find("Triss")
    assert found == GameObject("Triss", 45)


def test_find_missing_returns_none(table):
    assert table.find("Arnold") is None


def test_every_inserted_object_is_found(table):
    for name, health in [("Runner number 1", 23), ("Katniss", 54), ("Lyra", 5)]:
        assert table.find(name).health == health


def test_len_counts_all_objects(table):
    assert len(table) == 4


def test_chaining_keeps_all_colliding_objects():
    tbl = GameObjectTable()
    names = [f"unit{i}" for i in range(25)]
    for i, name in enumerate(names):
        tbl.insert(GameObject(name, i))
    assert len(tbl) == 25
    assert any(len(bucket) > 1 for bucket in tbl.buckets)
    for i, name in enumerate(names):
        assert tbl.find(name).health == i


def test_duplicate_name_returns_first_inserted():
    tbl = GameObjectTable()
    tbl.insert(GameObject("Lyra", 5))
    tbl.insert(GameObject("Lyra", 99))
    assert tbl.find("Lyra").health == 5
    assert len(tbl) == 2


def test_same_name_lands_in_same_bucket():
    tbl = GameObjectTable()
    tbl.insert(GameObject("Katniss", 1))
    tbl.insert(GameObject("Katniss", 2))
    occupied = [bucket for bucket in tbl.buckets if bucket]
    assert len(occupied) == 1
    assert [obj.health for obj in occupied[0]] == [1, 2]


def test_format_table_has_one_line_per_bucket(table):
    lines = table.format_table().splitlines()
    assert len(lines) == GameObjectTable.TABLE_SIZE
    for index, line in enumerate(lines):
        assert line.startswith(f"[{index}]: ")


def test_format_table_lists_objects_in_their_bucket(table):
    lines = table.format_table().splitlines()
    for index, bucket in enumerate(table.buckets):
        for obj in bucket:
            assert f"{obj.name} ({obj.health}) " in lines[index]


def test_empty_table_format():
    text = GameObjectTable().format_table()
    assert text.splitlines()[0] == "[0]: "
    assert len(GameObjectTable()) == 0


def test_iteration_yields_all_objects(table):
    assert sorted(obj.name for obj in table) == sorted(
        ["Runner number 1", "Katniss", "Triss", "Lyra"]
    )


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Found: Triss with 45 health." in out
    assert out.rstrip().endswith("Not found.")
    assert "Katniss (54) " in out