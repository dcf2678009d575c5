import pytest
from decimal import Decimal

from motorph.payroll.brackets import BracketTable, FALLBACK_LAST

ROWS = [
    ('100.00', '200.00', ('1',)),
    ('200.00', '300.00', ('2',)),
    ('300.00', None, ('3',)),
]


def test_lookup_uses_half_open_ranges():
    table = BracketTable(ROWS)
    assert table.lookup('100.00').values == (Decimal('1'),)
    assert table.lookup('199.99').values == (Decimal('1'),)
    assert table.lookup('200.00').values == (Decimal('2'),)


def test_final_row_is_open_ended():
    table = BracketTable(ROWS)
    assert table.lookup(10 ** 9).values == (Decimal('3'),)


def test_below_range_falls_back_to_first_row():
    table = BracketTable(ROWS)
    assert table.lookup('50').values == (Decimal('1'),)


def test_below_range_can_fall_back_to_last_row():
    table = BracketTable(ROWS, fallback=FALLBACK_LAST)
    assert table.lookup('50').values == (Decimal('3'),)


def test_float_input_is_not_binary_noise():
    table = BracketTable(ROWS)
    assert table.lookup(199.99).values == (Decimal('1'),)


@pytest.mark.parametrize('rows', [
    [],
    [('0', '100', ('1',)), ('150', None, ('2',))],     # gap
    [('0', '100', ('1',)), ('50', None, ('2',))],      # overlap
    [('0', None, ('1',)), ('100', None, ('2',))],      # open row before the end
    [('100', '100', ('1',)), ('100', None, ('2',))],   # empty row
])
def test_rejects_malformed_tables(rows):
    with pytest.raises(ValueError):
        BracketTable(rows)


def test_rejects_unknown_fallback():
    with pytest.raises(ValueError):
        BracketTable(ROWS, fallback='middle')
