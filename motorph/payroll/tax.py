# motorph/payroll/tax.py

from decimal import Decimal

from motorph.utils.money import ZERO, to_decimal

MONTHS_PER_YEAR = Decimal('12')

# --- ANNUAL INCOME TAX TABLE ---
# (max_bracket, excess_over, base_tax, tax_rate_percent); max_bracket is inclusive
TAX_TABLE = [
    # 1. 250,000 and below = 0%
    (Decimal('250000.00'), Decimal('0.00'), Decimal('0.00'), 0),
    # 2. 250,000 - 400,000 = 15% of excess over 250,000
    (Decimal('400000.00'), Decimal('250000.00'), Decimal('0.00'), 15),
    # 3. 400,000 - 800,000 = 22,500 + 20% of excess over 400,000
    (Decimal('800000.00'), Decimal('400000.00'), Decimal('22500.00'), 20),
    # 4. 800,000 - 2,000,000 = 102,500 + 25% of excess over 800,000
    (Decimal('2000000.00'), Decimal('800000.00'), Decimal('102500.00'), 25),
    # 5. 2,000,000 - 8,000,000 = 402,500 + 30% of excess over 2,000,000
    (Decimal('8000000.00'), Decimal('2000000.00'), Decimal('402500.00'), 30),
    # 6. Above 8,000,000 = 2,202,500 + 35% of excess over 8,000,000
    (None, Decimal('8000000.00'), Decimal('2202500.00'), 35),
]


def compute_annual_tax(annual_salary):
    """Marginal-band tax on an annual salary."""
    annual_salary = to_decimal(annual_salary)
    if annual_salary <= TAX_TABLE[0][0]:
        return ZERO

    for max_bracket, excess_over, base_tax, tax_rate_percent in TAX_TABLE[1:]:
        if max_bracket is None or annual_salary <= max_bracket:
            excess = annual_salary - excess_over
            return base_tax + (excess * (Decimal(tax_rate_percent) / 100))


def compute_monthly_tax(monthly_salary):
    """Monthly withholding: annualize, apply the bands, spread over twelve months."""
    annual_salary = to_decimal(monthly_salary) * MONTHS_PER_YEAR
    return compute_annual_tax(annual_salary) / MONTHS_PER_YEAR
