from __future__ import annotations

from pointwallet.services.balances import UserPointTable
from pointwallet.services.histories import PointHistoryTable
from pointwallet.services.locks import KeyedLocks


def test_unknown_user_reads_default_without_storing():
    table = UserPointTable()
    row = table.select_by_id(7)
    assert row.id == 7
    assert row.point == 0
    assert row.update_millis > 0
    assert 7 not in table._rows


def test_insert_or_update_overwrites_balance():
    table = UserPointTable()
    first = table.insert_or_update(1, 100)
    second = table.insert_or_update(1, 40)
    assert first.point == 100
    assert second.point == 40
    assert second.update_millis >= first.update_millis
    assert table.select_by_id(1) == second


def test_history_ids_are_global_and_lists_keep_insertion_order():
    table = PointHistoryTable()
    a = table.insert(2, 500, "CHARGE", 10)
    b = table.insert(1, 100, "CHARGE", 20)
    c = table.insert(2, 300, "USE", 5)

    assert [a.id, b.id, c.id] == [1, 2, 3]
    rows = table.select_all_by_user_id(2)
    assert [(row.type, row.amount) for row in rows] == [("CHARGE", 500), ("USE", 300)]
    assert table.select_all_by_user_id(99) == []


def test_history_list_is_a_copy():
    table = PointHistoryTable()
    table.insert(1, 100, "CHARGE", 1)
    rows = table.select_all_by_user_id(1)
    rows.clear()
    assert len(table.select_all_by_user_id(1)) == 1


def test_keyed_locks_reuse_lock_per_key():
    locks = KeyedLocks()
    assert locks.get(1) is locks.get(1)
    assert locks.get(1) is not locks.get(2)
    assert len(locks) == 2
