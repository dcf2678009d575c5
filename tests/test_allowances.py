import pytest
from decimal import Decimal

from motorph.payroll.allowances import resolve_allowances


@pytest.mark.parametrize('position, phone, clothing', [
    ('Chief Executive Officer', '2000.00', '1000.00'),
    ('CEO', '2000.00', '1000.00'),
    ('HR Manager', '1000.00', '800.00'),
    ('Department Head', '1000.00', '800.00'),
    ('Sales Team Leader', '800.00', '800.00'),
    ('Developer', '500.00', '500.00'),
    ('', '500.00', '500.00'),
])
def test_position_tiers(position, phone, clothing):
    allowances = resolve_allowances(position)
    assert allowances.rice_subsidy == Decimal('1500.00')
    assert allowances.phone_allowance == Decimal(phone)
    assert allowances.clothing_allowance == Decimal(clothing)


def test_first_matching_tier_wins():
    # "chief" outranks "leader" even though both appear
    assert resolve_allowances('Chief Team Leader').phone_allowance == Decimal('2000.00')


def test_matching_ignores_case():
    assert resolve_allowances('payroll MANAGER').phone_allowance == Decimal('1000.00')


def test_missing_position_uses_company_defaults():
    allowances = resolve_allowances(None)
    assert allowances.phone_allowance == Decimal('800.00')
    assert allowances.clothing_allowance == Decimal('800.00')
    assert allowances.total == Decimal('3100.00')


def test_default_tier_total():
    assert resolve_allowances('Accountant').total == Decimal('2500.00')
