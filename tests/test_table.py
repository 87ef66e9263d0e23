import pytest

from connect4.table import MISSING, TranspositionTable


def test_put_then_get_round_trip():
    table = TranspositionTable(1000)
    table.put(12345, 7)
    assert table.get(12345) == 7


def test_missing_key_returns_sentinel():
    table = TranspositionTable(1000)
    assert table.get(424242) == MISSING
    assert MISSING == 100


def test_negative_values_round_trip():
    table = TranspositionTable(1000)
    table.put(77, -21)
    assert table.get(77) == -21


def test_colliding_key_evicts_previous_entry():
    table = TranspositionTable(1000)
    table.put(5, 3)
    table.put(5 + 1000, 9)
    assert table.get(5) == MISSING
    assert table.get(1005) == 9


def test_overwrite_same_key():
    table = TranspositionTable(50)
    table.put(8, 1)
    table.put(8, -1)
    assert table.get(8) == -1


def test_fresh_table_reports_zero_for_key_zero():
    table = TranspositionTable(10)
    assert table.get(0) == 0


def test_clear_forgets_entries():
    table = TranspositionTable(10)
    table.put(3, 4)
    table.clear()
    assert table.get(3) == MISSING
    assert len(table) == 0


@pytest.mark.parametrize("size", [0, -5])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        TranspositionTable(size)


@pytest.mark.parametrize("value", [-43, -1, 0, 1, 42, 43])
def test_score_range_survives_storage(value):
    table = TranspositionTable(97)
    table.put(1234567890123, value)
    assert table.get(1234567890123) == value