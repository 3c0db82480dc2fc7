# tests/test_database.py
import pytest

from isp_crud.database import EntityTable


def filled(n):
    table = EntityTable()
    for i in range(1, n + 1):
        table.append(i, f"row{i}")
    return table


def test_iteration_follows_insertion_order():
    table = filled(4)
    assert list(table) == ["row1", "row2", "row3", "row4"]
    assert len(table) == 4


def test_remove_leaves_other_rows_reachable():
    table = filled(4)
    assert table.remove(2)
    assert 2 not in table
    assert table.get(3) == "row3"
    assert list(table) == ["row1", "row3", "row4"]


def test_compaction_keeps_order_and_lookups():
    table = filled(10)
    for i in (1, 2, 3, 5, 7, 9):
        assert table.remove(i)
    assert list(table) == ["row4", "row6", "row8", "row10"]
    assert table.get(8) == "row8"
    assert table.replace(6, "six")
    assert list(table) == ["row4", "six", "row8", "row10"]
    assert len(table._slots) <= 2 * len(table) + 1


def test_missing_ids():
    table = filled(2)
    assert table.get(5) is None
    assert table.replace(5, "x") is False
    assert table.remove(5) is False
    assert list(table) == ["row1", "row2"]


def test_duplicate_id_rejected():
    table = filled(1)
    with pytest.raises(KeyError):
        table.append(1, "again")
