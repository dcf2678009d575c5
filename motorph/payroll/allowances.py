# motorph/payroll/allowances.py

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Allowances:
    rice_subsidy: Decimal
    phone_allowance: Decimal
    clothing_allowance: Decimal

    @property
    def total(self):
        return self.rice_subsidy + self.phone_allowance + self.clothing_allowance


# Company defaults, used as-is when an employee has no position on file
DEFAULT_RICE_SUBSIDY = Decimal('1500.00')
DEFAULT_PHONE_ALLOWANCE = Decimal('800.00')
DEFAULT_CLOTHING_ALLOWANCE = Decimal('800.00')

# Per-allowance ceilings
MAX_RICE_SUBSIDY = Decimal('2000.00')
MAX_PHONE_ALLOWANCE = Decimal('3000.00')
MAX_CLOTHING_ALLOWANCE = Decimal('1500.00')

# --- ALLOWANCE TIERS ---
# (tier, position keywords, phone_allowance, clothing_allowance); first match wins
ALLOWANCE_TIERS = [
    ('chief', ('ceo', 'chief'), Decimal('2000.00'), Decimal('1000.00')),
    ('manager', ('manager', 'head'), Decimal('1000.00'), Decimal('800.00')),
    ('leader', ('leader',), Decimal('800.00'), Decimal('800.00')),
]
# Regular employees
DEFAULT_TIER = ('default', (), Decimal('500.00'), Decimal('500.00'))


def match_tier(position):
    title = position.lower()
    for tier in ALLOWANCE_TIERS:
        if any(keyword in title for keyword in tier[1]):
            return tier
    return DEFAULT_TIER


def resolve_allowances(position):
    """Returns the rice, phone and clothing allowances for a position title."""
    if position is None:
        phone, clothing = DEFAULT_PHONE_ALLOWANCE, DEFAULT_CLOTHING_ALLOWANCE
    else:
        _, _, phone, clothing = match_tier(position)

    return Allowances(
        rice_subsidy=min(DEFAULT_RICE_SUBSIDY, MAX_RICE_SUBSIDY),
        phone_allowance=min(phone, MAX_PHONE_ALLOWANCE),
        clothing_allowance=min(clothing, MAX_CLOTHING_ALLOWANCE),
    )
