from datetime import date
from decimal import Decimal

from motorph.payroll.leave import LeaveEntry, calculate_leave_days, compute_unpaid_deduction

DAILY_RATE = Decimal('1000')


def leave(leave_type='Unpaid', start=date(2025, 1, 6), end=date(2025, 1, 10), status='Approved'):
    return LeaveEntry(leave_type, start, end, status)


def test_leave_days_are_inclusive():
    assert calculate_leave_days(date(2025, 1, 6), date(2025, 1, 10)) == 5
    assert calculate_leave_days(date(2025, 1, 6), date(2025, 1, 6)) == 1


def test_leave_days_for_missing_or_inverted_dates():
    assert calculate_leave_days(None, date(2025, 1, 6)) == 0
    assert calculate_leave_days(date(2025, 1, 10), date(2025, 1, 6)) == 0


def test_five_day_unpaid_leave():
    assert compute_unpaid_deduction([leave()], DAILY_RATE) == Decimal('5000')


def test_paid_leave_costs_nothing():
    assert compute_unpaid_deduction([leave('Vacation')], DAILY_RATE) == 0
    assert compute_unpaid_deduction([leave('Sick')], DAILY_RATE) == 0


def test_unpaid_tag_is_case_insensitive():
    assert compute_unpaid_deduction([leave('unpaid')], DAILY_RATE) == Decimal('5000')


def test_only_approved_leaves_count():
    assert compute_unpaid_deduction([leave(status='Pending')], DAILY_RATE) == 0
    assert compute_unpaid_deduction([leave(status='Rejected')], DAILY_RATE) == 0


def test_multiple_unpaid_leaves_add_up():
    leaves = [
        leave(),
        leave(start=date(2025, 1, 20), end=date(2025, 1, 21)),
        leave('Vacation', date(2025, 1, 27), date(2025, 1, 31)),
    ]
    assert compute_unpaid_deduction(leaves, DAILY_RATE) == Decimal('7000')


def test_custom_unpaid_tag():
    assert compute_unpaid_deduction([leave('LWOP')], DAILY_RATE, unpaid_type='LWOP') == Decimal('5000')
    assert compute_unpaid_deduction([leave()], DAILY_RATE, unpaid_type='LWOP') == 0


def test_no_leaves():
    assert compute_unpaid_deduction([], DAILY_RATE) == 0
    assert compute_unpaid_deduction(None, DAILY_RATE) == 0
    assert compute_unpaid_deduction([None], DAILY_RATE) == 0


def test_malformed_leave_records_are_skipped():
    leaves = [
        leave(123),
        leave(start='2025-01-06'),
        leave(status=1),
        leave(start=date(2025, 1, 20), end=date(2025, 1, 20)),
    ]
    assert compute_unpaid_deduction(leaves, DAILY_RATE) == Decimal('1000')
