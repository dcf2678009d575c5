# motorph/payroll/settings.py

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from motorph.attendance.calculator import WorkSchedule
from motorph.utils.money import to_decimal
from .leave import UNPAID_LEAVE_TYPE

STANDARD_WORKING_DAYS_PER_MONTH = 22
# Used when an employee has no usable salary on file
DEFAULT_MONTHLY_SALARY = Decimal('25000.00')


def parse_clock(value):
    """Accepts 'HH:MM' (or 'HH:MM:SS') strings and time objects."""
    if isinstance(value, str):
        fmt = '%H:%M:%S' if value.count(':') == 2 else '%H:%M'
        return datetime.strptime(value, fmt).time()
    return value


@dataclass(frozen=True)
class PayrollSettings:
    schedule: WorkSchedule = field(default_factory=WorkSchedule)
    working_days_per_month: int = STANDARD_WORKING_DAYS_PER_MONTH
    default_monthly_salary: Decimal = DEFAULT_MONTHLY_SALARY
    unpaid_leave_type: str = UNPAID_LEAVE_TYPE

    @classmethod
    def from_mapping(cls, config):
        """Build settings from a Flask config (or any mapping) using the PAYROLL_* keys."""
        defaults = cls()
        schedule = WorkSchedule(
            time_in=parse_clock(config.get('PAYROLL_STANDARD_TIME_IN', defaults.schedule.time_in)),
            time_out=parse_clock(config.get('PAYROLL_STANDARD_TIME_OUT', defaults.schedule.time_out)),
            grace_minutes=int(config.get('PAYROLL_GRACE_MINUTES', defaults.schedule.grace_minutes)),
            hours_per_day=int(config.get('PAYROLL_HOURS_PER_DAY', defaults.schedule.hours_per_day)),
        )
        working_days = int(config.get('PAYROLL_WORKING_DAYS_PER_MONTH', defaults.working_days_per_month))
        if working_days <= 0 or schedule.hours_per_day <= 0:
            raise ValueError('PAYROLL_WORKING_DAYS_PER_MONTH and PAYROLL_HOURS_PER_DAY must be positive')
        return cls(
            schedule=schedule,
            working_days_per_month=working_days,
            default_monthly_salary=to_decimal(
                config.get('PAYROLL_DEFAULT_MONTHLY_SALARY', defaults.default_monthly_salary)),
            unpaid_leave_type=config.get('PAYROLL_UNPAID_LEAVE_TYPE', defaults.unpaid_leave_type),
        )
