# motorph/payroll/brackets.py

from decimal import Decimal
from typing import NamedTuple, Optional, Tuple

from motorph.utils.money import to_decimal


class BracketRow(NamedTuple):
    """One [low, high) range of a bracket table. ``high=None`` is open-ended."""
    low: Decimal
    high: Optional[Decimal]
    values: Tuple[Decimal, ...]

    def contains(self, value):
        if value < self.low:
            return False
        return self.high is None or value < self.high


FALLBACK_FIRST = 'first'
FALLBACK_LAST = 'last'


class BracketTable:
    """
    Ordered, read-only table answering "which row applies to this amount".

    Rows must be sorted ascending and contiguous (each row starts where the
    previous one ends); only the final row may be open-ended. A value below
    the lowest bound falls back to the first row unless the table was built
    with ``fallback=FALLBACK_LAST``.
    """

    def __init__(self, rows, fallback=FALLBACK_FIRST):
        rows = tuple(BracketRow(to_decimal(low), None if high is None else to_decimal(high),
                                tuple(to_decimal(v) for v in values))
                     for low, high, values in rows)
        if not rows:
            raise ValueError('A bracket table needs at least one row')
        if fallback not in (FALLBACK_FIRST, FALLBACK_LAST):
            raise ValueError(f'Unknown fallback: {fallback!r}')

        for previous, row in zip(rows, rows[1:]):
            if previous.high is None:
                raise ValueError('Only the final bracket may be open-ended')
            if row.low != previous.high:
                raise ValueError(f'Bracket starting at {row.low} does not follow {previous.high}')
        for row in rows:
            if row.high is not None and row.high <= row.low:
                raise ValueError(f'Bracket {row.low}..{row.high} is empty')

        self._rows = rows
        self._fallback = fallback

    @property
    def rows(self):
        return self._rows

    def __len__(self):
        return len(self._rows)

    def lookup(self, value):
        value = to_decimal(value)
        for row in self._rows:
            if row.contains(value):
                return row
        return self._rows[0] if self._fallback == FALLBACK_FIRST else self._rows[-1]
