# motorph/payroll/sources.py
"""
Read-only collaborators the payroll engine pulls its inputs from.

Any object with ``get_salary_profile``, ``get_attendance_entries`` and
``get_approved_leaves`` can feed ``PayrollCalculator``; the SQLAlchemy-backed
source below is what the application wires in.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from motorph import db
from motorph.attendance.calculator import AttendanceEntry
from motorph.models.hr import AttendanceRecord, Employee, LeaveRequest
from motorph.utils.money import to_decimal
from .leave import LeaveEntry, STATUS_APPROVED


@dataclass(frozen=True)
class EmployeeSalaryProfile:
    employee_id: int
    monthly_salary: Decimal
    position: Optional[str] = None


class SqlAlchemyPayrollSource:
    """Reads employees, attendance and approved leave from the HR tables."""

    def __init__(self, session=None):
        self.session = session or db.session

    def get_salary_profile(self, employee_id):
        employee = self.session.get(Employee, employee_id)
        if employee is None:
            return None
        return EmployeeSalaryProfile(
            employee_id=employee.id,
            monthly_salary=to_decimal(employee.salary_rate),
            position=employee.position,
        )

    def get_attendance_entries(self, employee_id, start, end):
        records = self.session.query(AttendanceRecord).filter(
            AttendanceRecord.employee_id == employee_id,
            AttendanceRecord.date >= start,
            AttendanceRecord.date <= end
        ).all()
        return [AttendanceEntry(date=r.date, time_in=r.time_in, time_out=r.time_out) for r in records]

    def get_approved_leaves(self, employee_id, start, end):
        leaves = self.session.query(LeaveRequest).filter(
            LeaveRequest.employee_id == employee_id,
            LeaveRequest.status == STATUS_APPROVED,
            LeaveRequest.start_date <= end,
            LeaveRequest.end_date >= start
        ).all()
        return [
            LeaveEntry(leave_type=l.leave_type, start_date=l.start_date, end_date=l.end_date, status=l.status)
            for l in leaves
        ]

    def get_active_employee_ids(self):
        rows = self.session.query(Employee.id).filter_by(status='Active').order_by(Employee.id).all()
        return [row[0] for row in rows]
