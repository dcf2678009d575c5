# motorph/attendance/calculator.py

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional

from motorph.utils.money import ZERO, to_decimal

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = Decimal('60')


@dataclass(frozen=True)
class AttendanceEntry:
    """One day's clock-in/clock-out pair as delivered by the attendance source."""
    date: date
    time_in: Optional[time] = None
    time_out: Optional[time] = None

    @property
    def worked_minutes(self):
        if self.time_in is None or self.time_out is None:
            return 0
        # Entries with time_out before time_in should have been rejected upstream
        return max(minutes_between(self.time_in, self.time_out), 0)

    @property
    def worked_hours(self):
        return Decimal(self.worked_minutes) / MINUTES_PER_HOUR


@dataclass(frozen=True)
class WorkSchedule:
    """The company-wide shift every attendance entry is measured against."""
    time_in: time = time(8, 0)
    time_out: time = time(17, 0)
    grace_minutes: int = 15
    hours_per_day: int = 8

    @property
    def late_threshold(self):
        """Clock-ins strictly after this time are late."""
        return (datetime.combine(date.min, self.time_in) + timedelta(minutes=self.grace_minutes)).time()

    def hourly_rate(self, daily_rate):
        return to_decimal(daily_rate) / Decimal(self.hours_per_day)


DEFAULT_SCHEDULE = WorkSchedule()


@dataclass(frozen=True)
class AttendanceSummary:
    days_worked: int = 0
    total_hours: Decimal = ZERO
    late_minutes: int = 0
    undertime_minutes: int = 0
    late_deduction: Decimal = ZERO
    undertime_deduction: Decimal = ZERO


# --- HELPER: WHOLE MINUTES BETWEEN TWO CLOCK TIMES ---
def minutes_between(start, end):
    """Whole elapsed minutes from start to end; partial minutes are dropped."""
    if isinstance(start, datetime):
        start = start.time()
    if isinstance(end, datetime):
        end = end.time()
    delta = datetime.combine(date.min, end) - datetime.combine(date.min, start)
    seconds = int(delta.total_seconds())
    # Truncate toward zero in both directions
    return seconds // 60 if seconds >= 0 else -((-seconds) // 60)


def _clock(value):
    return value.time() if isinstance(value, datetime) else value


def is_well_formed(entry):
    """An entry needs a date, and its clock values must be times (or missing)."""
    if entry is None or not isinstance(getattr(entry, 'date', None), date):
        return False
    return all(value is None or isinstance(value, (time, datetime))
               for value in (getattr(entry, 'time_in', None), getattr(entry, 'time_out', None)))


def late_minutes_for(entry, schedule=DEFAULT_SCHEDULE):
    """
    Minutes late for one entry. Lateness is decided against the grace-adjusted
    threshold but counted from the standard clock-in time, so a 08:30 arrival
    on an 08:00 shift with 15 minutes grace costs 30 minutes.
    """
    time_in = _clock(entry.time_in)
    if time_in is None or time_in <= schedule.late_threshold:
        return 0
    return minutes_between(schedule.time_in, time_in)


def undertime_minutes_for(entry, schedule=DEFAULT_SCHEDULE):
    time_out = _clock(entry.time_out)
    if time_out is None or time_out >= schedule.time_out:
        return 0
    return minutes_between(time_out, schedule.time_out)


# --- CORE LOGIC: PERIOD AGGREGATION ---
def aggregate_attendance(entries, daily_rate, schedule=DEFAULT_SCHEDULE):
    """
    Fold a period's attendance entries into days worked, hours worked and
    the late/undertime deductions.

    Args:
        entries: iterable of AttendanceEntry (any order).
        daily_rate: the employee's daily rate; hourly rate is daily_rate / hours_per_day.
        schedule: the WorkSchedule the entries are measured against.

    A day counts as worked whenever it has a clock-in, even without a
    clock-out (such a day contributes no hours). Late and undertime are
    independent and may both apply to the same day.
    """
    hourly_rate = schedule.hourly_rate(daily_rate)

    days_worked = 0
    total_hours = ZERO
    total_late_minutes = 0
    total_undertime_minutes = 0
    late_deduction = ZERO
    undertime_deduction = ZERO

    for entry in entries or ():
        if not is_well_formed(entry):
            logger.warning('Skipping malformed attendance entry: %r', entry)
            continue

        if entry.time_in is not None:
            days_worked += 1
            total_hours += entry.worked_hours

        late = late_minutes_for(entry, schedule)
        if late:
            total_late_minutes += late
            late_deduction += Decimal(late) / MINUTES_PER_HOUR * hourly_rate

        short = undertime_minutes_for(entry, schedule)
        if short:
            total_undertime_minutes += short
            undertime_deduction += Decimal(short) / MINUTES_PER_HOUR * hourly_rate

    return AttendanceSummary(
        days_worked=days_worked,
        total_hours=total_hours,
        late_minutes=total_late_minutes,
        undertime_minutes=total_undertime_minutes,
        late_deduction=late_deduction,
        undertime_deduction=undertime_deduction,
    )
