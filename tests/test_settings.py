import pytest
from datetime import time
from decimal import Decimal

from motorph.payroll.calculator import PayrollCalculator
from motorph.payroll.settings import PayrollSettings, parse_clock


def test_defaults():
    settings = PayrollSettings()
    assert settings.schedule.time_in == time(8, 0)
    assert settings.schedule.time_out == time(17, 0)
    assert settings.schedule.late_threshold == time(8, 15)
    assert settings.working_days_per_month == 22
    assert settings.default_monthly_salary == Decimal('25000.00')
    assert settings.unpaid_leave_type == 'Unpaid'


def test_parse_clock():
    assert parse_clock('07:30') == time(7, 30)
    assert parse_clock('07:30:15') == time(7, 30, 15)
    assert parse_clock(time(9, 0)) == time(9, 0)


def test_from_app_config(app):
    settings = PayrollSettings.from_mapping(app.config)
    assert settings == PayrollSettings()


def test_from_mapping_overrides():
    settings = PayrollSettings.from_mapping({
        'PAYROLL_STANDARD_TIME_IN': '09:00',
        'PAYROLL_GRACE_MINUTES': '10',
        'PAYROLL_WORKING_DAYS_PER_MONTH': 20,
        'PAYROLL_DEFAULT_MONTHLY_SALARY': '18000',
        'PAYROLL_UNPAID_LEAVE_TYPE': 'LWOP',
    })
    assert settings.schedule.late_threshold == time(9, 10)
    assert settings.working_days_per_month == 20
    assert settings.default_monthly_salary == Decimal('18000')
    assert settings.unpaid_leave_type == 'LWOP'


@pytest.mark.parametrize('key', ['PAYROLL_WORKING_DAYS_PER_MONTH', 'PAYROLL_HOURS_PER_DAY'])
def test_non_positive_divisors_are_rejected(key):
    with pytest.raises(ValueError):
        PayrollSettings.from_mapping({key: 0})


def test_working_days_drive_daily_rate(fake_source, january):
    settings = PayrollSettings.from_mapping({'PAYROLL_WORKING_DAYS_PER_MONTH': 20})
    result = PayrollCalculator(fake_source, settings).calculate(1, *january)
    assert result.daily_rate == Decimal('1500.00')
    assert result.basic_pay == Decimal('33000.00')
