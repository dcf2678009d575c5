import pytest
from datetime import date, time, timedelta
from decimal import Decimal

from motorph import create_app, db
from motorph.attendance.calculator import AttendanceEntry
from motorph.models.hr import AttendanceRecord, Employee, LeaveRequest
from motorph.payroll.sources import EmployeeSalaryProfile


def workdays(start, count, time_in=time(8, 0), time_out=time(17, 0)):
    """`count` consecutive attendance entries starting at `start`."""
    return [AttendanceEntry(start + timedelta(days=i), time_in, time_out) for i in range(count)]


class FakePayrollSource:
    """In-memory collaborator that records how often it was asked for data."""

    def __init__(self, profiles=None, attendance=None, leaves=None):
        self.profiles = profiles or {}
        self.attendance = attendance or {}
        self.leaves = leaves or {}
        self.calls = {'profile': 0, 'attendance': 0, 'leaves': 0}

    def get_salary_profile(self, employee_id):
        self.calls['profile'] += 1
        return self.profiles.get(employee_id)

    def get_attendance_entries(self, employee_id, start, end):
        self.calls['attendance'] += 1
        return self.attendance.get(employee_id, [])

    def get_approved_leaves(self, employee_id, start, end):
        self.calls['leaves'] += 1
        return self.leaves.get(employee_id, [])


@pytest.fixture
def january():
    return date(2025, 1, 1), date(2025, 1, 31)


@pytest.fixture
def developer():
    return EmployeeSalaryProfile(employee_id=1, monthly_salary=Decimal('30000.00'), position='Developer')


@pytest.fixture
def fake_source(developer, january):
    return FakePayrollSource(
        profiles={1: developer},
        attendance={1: workdays(january[0], 22)},
    )


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    dev = Employee(employee_id_number='10001', first_name='Manuel', last_name='Garcia',
                   position='Developer', salary_rate=Decimal('30000.00'), status='Active')
    boss = Employee(employee_id_number='10002', first_name='Antonio', last_name='Lim',
                    position='Chief Operating Officer', salary_rate=Decimal('60000.00'), status='Active')
    gone = Employee(employee_id_number='10003', first_name='Bianca', last_name='Aquino',
                    position='Team Leader', salary_rate=Decimal('20000.00'), status='Inactive')
    db.session.add_all([dev, boss, gone])
    db.session.flush()

    start = date(2025, 1, 1)
    for i in range(22):
        db.session.add(AttendanceRecord(employee_id=dev.id, date=start + timedelta(days=i),
                                        time_in=time(8, 0), time_out=time(17, 0)))
    # Outside the January period
    db.session.add(AttendanceRecord(employee_id=dev.id, date=date(2025, 2, 3),
                                    time_in=time(8, 0), time_out=time(17, 0)))

    db.session.add_all([
        LeaveRequest(employee_id=boss.id, leave_type='Unpaid', start_date=date(2025, 1, 30),
                     end_date=date(2025, 2, 1), status='Approved'),
        LeaveRequest(employee_id=boss.id, leave_type='Unpaid', start_date=date(2025, 1, 6),
                     end_date=date(2025, 1, 7), status='Pending'),
        LeaveRequest(employee_id=boss.id, leave_type='Vacation', start_date=date(2025, 1, 13),
                     end_date=date(2025, 1, 14), status='Approved'),
    ])
    db.session.commit()
    return {'dev': dev, 'boss': boss, 'gone': gone}
