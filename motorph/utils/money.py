# motorph/utils/money.py

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

CENTS = Decimal('0.01')
ZERO = Decimal('0.00')


def to_decimal(value):
    """Coerce ints, floats and numeric strings to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    if value is None:
        return ZERO
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f'Not a monetary amount: {value!r}')


def quantize_money(value):
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def format_peso(amount, sign=''):
    return f'{sign}₱{quantize_money(amount):,.2f}'
