# motorph/payroll/leave.py

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from motorph.utils.money import ZERO, to_decimal

logger = logging.getLogger(__name__)

STATUS_APPROVED = 'Approved'
UNPAID_LEAVE_TYPE = 'Unpaid'


@dataclass(frozen=True)
class LeaveEntry:
    """An approved leave as delivered by the leave source."""
    leave_type: str
    start_date: date
    end_date: date
    status: Optional[str] = STATUS_APPROVED

    @property
    def leave_days(self):
        return calculate_leave_days(self.start_date, self.end_date)


def calculate_leave_days(start_date, end_date):
    """Calculates the number of full days between two dates, inclusive."""
    if start_date is None or end_date is None:
        return 0
    # Calculate difference in days and add 1 (to include the start day)
    return max((end_date - start_date).days + 1, 0)


def is_unpaid(leave, unpaid_type=UNPAID_LEAVE_TYPE):
    leave_type = getattr(leave, 'leave_type', None)
    if not isinstance(leave_type, str) or leave_type.strip().lower() != unpaid_type.lower():
        return False
    status = getattr(leave, 'status', STATUS_APPROVED)
    return status is None or (isinstance(status, str) and status.lower() == STATUS_APPROVED.lower())


def compute_unpaid_deduction(approved_leaves, daily_rate, unpaid_type=UNPAID_LEAVE_TYPE):
    """
    Unpaid leave costs one daily rate per calendar day taken. Every other
    leave type is already paid and costs nothing.
    """
    unpaid_days = 0
    for leave in approved_leaves or ():
        if leave is None:
            logger.warning('Skipping empty leave record')
            continue
        if not all(isinstance(getattr(leave, name, None), date) for name in ('start_date', 'end_date')):
            logger.warning('Skipping leave record with malformed dates: %r', leave)
            continue
        if not isinstance(getattr(leave, 'leave_type', None), str):
            logger.warning('Skipping leave record with malformed type: %r', leave)
            continue
        if is_unpaid(leave, unpaid_type):
            unpaid_days += calculate_leave_days(leave.start_date, leave.end_date)

    if not unpaid_days:
        return ZERO
    return unpaid_days * to_decimal(daily_rate)
