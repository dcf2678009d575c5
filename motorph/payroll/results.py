# motorph/payroll/results.py

from dataclasses import dataclass, field, fields
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List

from motorph.utils.money import format_peso, quantize_money


class LineCategory(str, Enum):
    BASIC_PAY = 'Basic Pay'
    ALLOWANCE = 'Allowance'
    DEDUCTION = 'Deduction'
    GOVERNMENT_CONTRIBUTION = 'Government Contribution'
    TAX = 'Tax'


@dataclass(frozen=True)
class PayrollLine:
    """One itemized payslip line. Earnings add to pay, everything else subtracts."""
    label: str
    amount: Decimal
    category: LineCategory
    is_earning: bool = False

    @property
    def formatted_amount(self):
        return format_peso(self.amount, '+' if self.is_earning else '-')

    @property
    def signed_amount(self):
        return self.amount if self.is_earning else -self.amount


# Rounded to centavos when the result is built
MONEY_FIELDS = ('monthly_rate', 'daily_rate', 'total_hours', 'basic_pay')
ALLOWANCE_FIELDS = ('rice_subsidy', 'phone_allowance', 'clothing_allowance')
DEDUCTION_FIELDS = (
    'late_deduction', 'undertime_deduction', 'unpaid_leave_deduction',
    'sss', 'philhealth', 'pagibig', 'tax',
)


@dataclass(frozen=True)
class PayrollResult:
    """A fully itemized paycheck for one employee and one period."""
    employee_id: int
    period_start: date
    period_end: date
    monthly_rate: Decimal
    daily_rate: Decimal
    days_worked: int
    total_hours: Decimal
    basic_pay: Decimal
    rice_subsidy: Decimal
    phone_allowance: Decimal
    clothing_allowance: Decimal
    total_allowances: Decimal
    gross_pay: Decimal
    late_deduction: Decimal
    undertime_deduction: Decimal
    unpaid_leave_deduction: Decimal
    sss: Decimal
    philhealth: Decimal
    pagibig: Decimal
    tax: Decimal
    total_deductions: Decimal
    net_pay: Decimal

    @classmethod
    def build(cls, **values):
        """
        Quantize every line item once (half-up, two decimals), then derive the
        totals from the rounded lines so the payslip always adds up.
        """
        for name in MONEY_FIELDS + ALLOWANCE_FIELDS + DEDUCTION_FIELDS:
            values[name] = quantize_money(values[name])

        values['total_allowances'] = sum((values[name] for name in ALLOWANCE_FIELDS), Decimal('0.00'))
        values['gross_pay'] = values['basic_pay'] + values['total_allowances']
        values['total_deductions'] = sum((values[name] for name in DEDUCTION_FIELDS), Decimal('0.00'))
        values['net_pay'] = values['gross_pay'] - values['total_deductions']
        return cls(**values)

    def line_items(self):
        return (
            PayrollLine('Basic Pay', self.basic_pay, LineCategory.BASIC_PAY, True),
            PayrollLine('Rice Subsidy', self.rice_subsidy, LineCategory.ALLOWANCE, True),
            PayrollLine('Phone Allowance', self.phone_allowance, LineCategory.ALLOWANCE, True),
            PayrollLine('Clothing Allowance', self.clothing_allowance, LineCategory.ALLOWANCE, True),
            PayrollLine('Late Deduction', self.late_deduction, LineCategory.DEDUCTION),
            PayrollLine('Undertime Deduction', self.undertime_deduction, LineCategory.DEDUCTION),
            PayrollLine('Unpaid Leave Deduction', self.unpaid_leave_deduction, LineCategory.DEDUCTION),
            PayrollLine('SSS', self.sss, LineCategory.GOVERNMENT_CONTRIBUTION),
            PayrollLine('PhilHealth', self.philhealth, LineCategory.GOVERNMENT_CONTRIBUTION),
            PayrollLine('Pag-IBIG', self.pagibig, LineCategory.GOVERNMENT_CONTRIBUTION),
            PayrollLine('Withholding Tax', self.tax, LineCategory.TAX),
        )

    def to_dict(self):
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Decimal):
                value = f'{value:.2f}'
            elif isinstance(value, date):
                value = value.isoformat()
            data[f.name] = value
        data['lines'] = [
            {
                'label': line.label,
                'category': line.category.value,
                'amount': f'{line.amount:.2f}',
                'display': line.formatted_amount,
            }
            for line in self.line_items()
        ]
        return data


@dataclass
class BulkPayrollRun:
    """Outcome of calculating one period for many employees."""
    period_start: date
    period_end: date
    results: List[PayrollResult] = field(default_factory=list)
    failures: List[dict] = field(default_factory=list)

    @property
    def total_gross_pay(self):
        return sum((r.gross_pay for r in self.results), Decimal('0.00'))

    @property
    def total_deductions(self):
        return sum((r.total_deductions for r in self.results), Decimal('0.00'))

    @property
    def total_net_pay(self):
        return sum((r.net_pay for r in self.results), Decimal('0.00'))

    def to_dict(self):
        return {
            'period': {'start': self.period_start.isoformat(), 'end': self.period_end.isoformat()},
            'results': [r.to_dict() for r in self.results],
            'failures': self.failures,
            'totals': {
                'gross_pay': f'{self.total_gross_pay:.2f}',
                'total_deductions': f'{self.total_deductions:.2f}',
                'net_pay': f'{self.total_net_pay:.2f}',
            },
        }
