# motorph/payroll/contributions.py

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .brackets import BracketTable, FALLBACK_LAST
from motorph.utils.money import ZERO, to_decimal


@dataclass(frozen=True)
class ContributionBreakdown:
    """Employee and employer side of one statutory contribution."""
    name: str
    base: Decimal
    employee_share: Decimal
    employer_share: Decimal
    employee_rate: Optional[Decimal] = None
    employer_rate: Optional[Decimal] = None

    @property
    def total(self):
        return self.employee_share + self.employer_share


class StatutoryContribution:
    """
    A government contribution computed from the monthly basic salary through
    its own bracket table. Subclasses only decide how a matched row turns into
    a breakdown.
    """
    name = None
    table = None

    def row_for(self, monthly_salary):
        return self.table.lookup(monthly_salary)

    def breakdown(self, monthly_salary):
        raise NotImplementedError

    def compute_employee_contribution(self, monthly_salary):
        return max(self.breakdown(monthly_salary).employee_share, ZERO)

    def compute_employer_contribution(self, monthly_salary):
        return max(self.breakdown(monthly_salary).employer_share, ZERO)

    def __repr__(self):
        return f'<{type(self).__name__} {self.name}>'


# --- SSS CONTRIBUTION TABLE ---
# (min_salary, next_bracket_min, (salary_credit, employee_share, employer_share))
SSS_TABLE = BracketTable([
    ('0.00', '5250.00', ('5000.00', '250.00', '500.00')),
    ('5250.00', '5750.00', ('5500.00', '275.00', '550.00')),
    ('5750.00', '6250.00', ('6000.00', '300.00', '600.00')),
    ('6250.00', '6750.00', ('6500.00', '325.00', '650.00')),
    ('6750.00', '7250.00', ('7000.00', '350.00', '700.00')),
    ('7250.00', '7750.00', ('7500.00', '375.00', '750.00')),
    ('7750.00', '8250.00', ('8000.00', '400.00', '800.00')),
    ('8250.00', '8750.00', ('8500.00', '425.00', '850.00')),
    ('8750.00', '9250.00', ('9000.00', '450.00', '900.00')),
    ('9250.00', '9750.00', ('9500.00', '475.00', '950.00')),
    ('9750.00', '10250.00', ('10000.00', '500.00', '1000.00')),
    ('10250.00', '10750.00', ('10500.00', '525.00', '1050.00')),
    ('10750.00', '11250.00', ('11000.00', '550.00', '1100.00')),
    ('11250.00', '11750.00', ('11500.00', '575.00', '1150.00')),
    ('11750.00', '12250.00', ('12000.00', '600.00', '1200.00')),
    ('12250.00', '12750.00', ('12500.00', '625.00', '1250.00')),
    ('12750.00', '13250.00', ('13000.00', '650.00', '1300.00')),
    ('13250.00', '13750.00', ('13500.00', '675.00', '1350.00')),
    ('13750.00', '14250.00', ('14000.00', '700.00', '1400.00')),
    ('14250.00', '14750.00', ('14500.00', '725.00', '1450.00')),
    ('14750.00', '15250.00', ('15000.00', '750.00', '1500.00')),
    ('15250.00', '15750.00', ('15500.00', '775.00', '1550.00')),
    ('15750.00', '16250.00', ('16000.00', '800.00', '1600.00')),
    ('16250.00', '16750.00', ('16500.00', '825.00', '1650.00')),
    ('16750.00', '17250.00', ('17000.00', '850.00', '1700.00')),
    ('17250.00', '17750.00', ('17500.00', '875.00', '1750.00')),
    ('17750.00', '18250.00', ('18000.00', '900.00', '1800.00')),
    ('18250.00', '18750.00', ('18500.00', '925.00', '1850.00')),
    ('18750.00', '19250.00', ('19000.00', '950.00', '1900.00')),
    ('19250.00', '19750.00', ('19500.00', '975.00', '1950.00')),
    ('19750.00', '20250.00', ('20000.00', '1000.00', '2000.00')),
    ('20250.00', '20750.00', ('20500.00', '1025.00', '2050.00')),
    ('20750.00', '21250.00', ('21000.00', '1050.00', '2100.00')),
    ('21250.00', '21750.00', ('21500.00', '1075.00', '2150.00')),
    ('21750.00', '22250.00', ('22000.00', '1100.00', '2200.00')),
    ('22250.00', '22750.00', ('22500.00', '1125.00', '2250.00')),
    ('22750.00', '23250.00', ('23000.00', '1150.00', '2300.00')),
    ('23250.00', '23750.00', ('23500.00', '1175.00', '2350.00')),
    ('23750.00', '24250.00', ('24000.00', '1200.00', '2400.00')),
    ('24250.00', '24750.00', ('24500.00', '1225.00', '2450.00')),
    ('24750.00', '25250.00', ('25000.00', '1250.00', '2500.00')),
    ('25250.00', '25750.00', ('25500.00', '1275.00', '2550.00')),
    ('25750.00', '26250.00', ('26000.00', '1300.00', '2600.00')),
    ('26250.00', '26750.00', ('26500.00', '1325.00', '2650.00')),
    ('26750.00', '27250.00', ('27000.00', '1350.00', '2700.00')),
    ('27250.00', '27750.00', ('27500.00', '1375.00', '2750.00')),
    ('27750.00', '28250.00', ('28000.00', '1400.00', '2800.00')),
    ('28250.00', '28750.00', ('28500.00', '1425.00', '2850.00')),
    ('28750.00', '29250.00', ('29000.00', '1450.00', '2900.00')),
    ('29250.00', '29750.00', ('29500.00', '1475.00', '2950.00')),
    ('29750.00', '30250.00', ('30000.00', '1500.00', '3000.00')),
    ('30250.00', '30750.00', ('30500.00', '1525.00', '3050.00')),
    ('30750.00', '31250.00', ('31000.00', '1550.00', '3100.00')),
    ('31250.00', '31750.00', ('31500.00', '1575.00', '3150.00')),
    ('31750.00', '32250.00', ('32000.00', '1600.00', '3200.00')),
    ('32250.00', '32750.00', ('32500.00', '1625.00', '3250.00')),
    ('32750.00', '33250.00', ('33000.00', '1650.00', '3300.00')),
    ('33250.00', '33750.00', ('33500.00', '1675.00', '3350.00')),
    ('33750.00', '34250.00', ('34000.00', '1700.00', '3400.00')),
    ('34250.00', '34750.00', ('34500.00', '1725.00', '3450.00')),
    ('34750.00', None, ('35000.00', '1750.00', '3500.00')),  # Max contribution
], fallback=FALLBACK_LAST)


class SocialSecurityContribution(StatutoryContribution):
    """SSS: fixed employee/employer shares per monthly salary credit."""
    name = 'SSS'
    table = SSS_TABLE

    def breakdown(self, monthly_salary):
        salary_credit, employee_share, employer_share = self.row_for(monthly_salary).values
        return ContributionBreakdown(self.name, salary_credit, employee_share, employer_share)

    def salary_credit(self, monthly_salary):
        return self.breakdown(monthly_salary).base


# --- PHILHEALTH CONTRIBUTION TABLE ---
# (min_salary, next_bracket_min, (monthly_premium,)); premium is split 50/50
PHILHEALTH_TABLE = BracketTable([
    ('0.00', '10000.01', ('500.00',)),
    ('10000.01', '100000.00', ('2500.00',)),
    ('100000.00', None, ('5000.00',)),
])


class HealthInsuranceContribution(StatutoryContribution):
    """PhilHealth: fixed monthly premium shared equally by employee and employer."""
    name = 'PhilHealth'
    table = PHILHEALTH_TABLE

    def breakdown(self, monthly_salary):
        premium, = self.row_for(monthly_salary).values
        half = premium / 2
        return ContributionBreakdown(self.name, premium, half, premium - half)

    def monthly_premium(self, monthly_salary):
        return self.breakdown(monthly_salary).base


# --- PAG-IBIG (HDMF) CONTRIBUTION TABLE ---
# (min_contributory_salary, next_bracket_min, (employee_rate, employer_rate))
PAGIBIG_TABLE = BracketTable([
    ('1000.00', '1500.01', ('0.01', '0.02')),
    ('1500.01', None, ('0.02', '0.02')),
])
PAGIBIG_MAX_CONTRIBUTORY_SALARY = Decimal('5000.00')


class HousingFundContribution(StatutoryContribution):
    """
    Pag-IBIG: a rate applied to the contributory salary, which is the actual
    salary capped at ``PAGIBIG_MAX_CONTRIBUTORY_SALARY``. Salaries under the
    first bracket use the first bracket's rates.
    """
    name = 'Pag-IBIG'
    table = PAGIBIG_TABLE
    max_contributory_salary = PAGIBIG_MAX_CONTRIBUTORY_SALARY

    def contributory_salary(self, monthly_salary):
        return max(min(to_decimal(monthly_salary), self.max_contributory_salary), ZERO)

    def breakdown(self, monthly_salary):
        base = self.contributory_salary(monthly_salary)
        employee_rate, employer_rate = self.row_for(base).values
        return ContributionBreakdown(
            self.name, base, base * employee_rate, base * employer_rate,
            employee_rate=employee_rate, employer_rate=employer_rate,
        )


SSS = SocialSecurityContribution()
PHILHEALTH = HealthInsuranceContribution()
PAGIBIG = HousingFundContribution()

STATUTORY_CONTRIBUTIONS = (SSS, PHILHEALTH, PAGIBIG)


def calculate_sss(basic_salary):
    """Calculates the employee's share of SSS contribution."""
    return SSS.compute_employee_contribution(basic_salary)


def calculate_philhealth(basic_salary):
    """Calculates the employee's share of PhilHealth contribution."""
    return PHILHEALTH.compute_employee_contribution(basic_salary)


def calculate_pagibig(basic_salary):
    """Calculates the employee's share of Pag-IBIG contribution."""
    return PAGIBIG.compute_employee_contribution(basic_salary)
