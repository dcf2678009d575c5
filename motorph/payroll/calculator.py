# motorph/payroll/calculator.py

import logging
from datetime import date, datetime
from decimal import Decimal

from motorph.attendance.calculator import aggregate_attendance
from motorph.utils.money import to_decimal
from .allowances import resolve_allowances
from .contributions import PAGIBIG, PHILHEALTH, SSS
from .errors import EmployeeNotFoundError, InvalidPayrollInputError, PayrollCalculationError
from .leave import compute_unpaid_deduction
from .results import BulkPayrollRun, PayrollResult
from .settings import PayrollSettings
from .tax import compute_monthly_tax

logger = logging.getLogger(__name__)


def validate_period(period_start, period_end, employee_id=None):
    for name, value in (('period_start', period_start), ('period_end', period_end)):
        if value is None:
            raise InvalidPayrollInputError(name, 'Period dates cannot be null', employee_id)
        if not isinstance(value, date) or isinstance(value, datetime):
            raise InvalidPayrollInputError(name, f'{name} must be a date, got {value!r}', employee_id)
    if period_end < period_start:
        raise InvalidPayrollInputError(
            'period_end', 'Period end cannot be before period start', employee_id)


def validate_employee_id(employee_id):
    if isinstance(employee_id, bool) or not isinstance(employee_id, int) or employee_id <= 0:
        raise InvalidPayrollInputError(
            'employee_id', f'Invalid employee ID: {employee_id}', employee_id)


class PayrollCalculator:
    """
    Turns an employee's salary profile, attendance and approved leave for a
    period into an itemized PayrollResult.

    The calculator keeps no state between calls; ``source`` supplies the
    inputs (see motorph.payroll.sources) and ``settings`` the company rules.
    """

    def __init__(self, source, settings=None):
        self.source = source
        self.settings = settings or PayrollSettings()

    def calculate(self, employee_id, period_start, period_end):
        validate_employee_id(employee_id)
        validate_period(period_start, period_end, employee_id)

        try:
            return self._calculate(employee_id, period_start, period_end)
        except PayrollCalculationError:
            raise
        except Exception as e:
            logger.exception('Failed to calculate payroll for employee %s', employee_id)
            raise PayrollCalculationError(
                f'Failed to calculate payroll: {e}', employee_id=employee_id) from e

    def calculate_many(self, employee_ids, period_start, period_end):
        """Calculates every employee independently; one failure does not stop the run."""
        validate_period(period_start, period_end)

        run = BulkPayrollRun(period_start=period_start, period_end=period_end)
        for employee_id in employee_ids:
            try:
                run.results.append(self.calculate(employee_id, period_start, period_end))
            except PayrollCalculationError as e:
                logger.warning('Skipping employee %s in payroll run: %s', employee_id, e.reason)
                run.failures.append(e.to_dict())
        return run

    def _calculate(self, employee_id, period_start, period_end):
        settings = self.settings

        # 1. Salary profile
        profile = self.source.get_salary_profile(employee_id)
        if profile is None:
            raise EmployeeNotFoundError(employee_id)

        monthly_salary = to_decimal(profile.monthly_salary)
        if monthly_salary <= 0:
            monthly_salary = settings.default_monthly_salary
            logger.warning('No basic salary found for employee %s, using default: %s',
                           employee_id, monthly_salary)

        # 2. Rates
        daily_rate = monthly_salary / Decimal(settings.working_days_per_month)

        # 3. Attendance-based earnings and time deductions
        entries = self.source.get_attendance_entries(employee_id, period_start, period_end)
        if entries is None:
            logger.warning('No attendance data returned for employee %s', employee_id)
        attendance = aggregate_attendance(entries, daily_rate, settings.schedule)
        basic_pay = daily_rate * attendance.days_worked
        logger.info('Employee %s worked %d days, %.2f hours',
                    employee_id, attendance.days_worked, attendance.total_hours)

        # 4. Allowances
        allowances = resolve_allowances(profile.position)

        # 5. Unpaid leave
        leaves = self.source.get_approved_leaves(employee_id, period_start, period_end)
        if leaves is None:
            logger.warning('No leave data returned for employee %s', employee_id)
        unpaid_leave_deduction = compute_unpaid_deduction(
            leaves, daily_rate, settings.unpaid_leave_type)

        # 6. Government contributions and tax (salary based, not attendance based)
        sss = SSS.compute_employee_contribution(monthly_salary)
        philhealth = PHILHEALTH.compute_employee_contribution(monthly_salary)
        pagibig = PAGIBIG.compute_employee_contribution(monthly_salary)
        tax = compute_monthly_tax(monthly_salary)

        # 7-9. Totals are derived from the rounded lines by PayrollResult.build
        result = PayrollResult.build(
            employee_id=employee_id,
            period_start=period_start,
            period_end=period_end,
            monthly_rate=monthly_salary,
            daily_rate=daily_rate,
            days_worked=attendance.days_worked,
            total_hours=attendance.total_hours,
            basic_pay=basic_pay,
            rice_subsidy=allowances.rice_subsidy,
            phone_allowance=allowances.phone_allowance,
            clothing_allowance=allowances.clothing_allowance,
            late_deduction=attendance.late_deduction,
            undertime_deduction=attendance.undertime_deduction,
            unpaid_leave_deduction=unpaid_leave_deduction,
            sss=sss,
            philhealth=philhealth,
            pagibig=pagibig,
            tax=tax,
        )

        if result.net_pay < 0:
            logger.warning('Negative net pay for employee %s (%s to %s): %s',
                           employee_id, period_start, period_end, result.net_pay)
        logger.info('Payroll calculated for employee %s: Net Pay = %s', employee_id, result.net_pay)
        return result
