"""
conftest.py - Shared pytest fixtures for the payroll engine test suite.

Engine fixtures are plain objects built with their defaults. The ``app``
fixture builds the Flask application from ``TestingConfig`` against small
employee and attendance CSV files written to ``tmp_path``.
"""

from datetime import time
from decimal import Decimal

import pytest

from payroll_app import create_app
from payroll_app.attendance.calculator import WorkHoursCalculator
from payroll_app.holidays.calculator import HolidayPayCalculator
from payroll_app.holidays.calendar import HolidayCalendar
from payroll_app.models import AttendanceRecord, Employee
from payroll_app.payroll.processor import PayrollProcessor


EMPLOYEE_HEADER = (
    'Employee #,Last Name,First Name,Birthday,Address,Phone Number,SSS #,Philhealth #,TIN #,'
    'Pag-ibig #,Status,Position,Immediate Supervisor,Basic Salary,Rice Subsidy,Phone Allowance,'
    'Clothing Allowance,Gross Semi-monthly Rate,Hourly Rate'
)
EMPLOYEE_ROWS = [
    '10001,Garcia,Manuel,10/11/1983,Makati City,966-860-270,44-4506057-3,820126853951,'
    '442-605-657-000,691295330870,Regular,Chief Executive Officer,N/A,"22,000","1,500","2,000",'
    '"1,000","11,000",',
    '10002,Lim,Antonio,06/19/1988,Cavite,171-867-411,52-2061274-9,331735646338,683-102-776-000,'
    '663904995411,Regular,Chief Operating Officer,"Garcia, Manuel","60,000","1,500","2,000",'
    '"1,000","30,000",357.14',
    '10003,Aquino,Bianca,08/04/1989,Quezon City,966-889-370,30-8870406-2,177451189665,'
    '971-711-280-000,171519773969,Regular,Chief Finance Officer,"Garcia, Manuel","60,000","1,500",'
    '"2,000","1,000","30,000",357.14',
]

ATTENDANCE_HEADER = 'Employee #,Last Name,First Name,Date,Log In,Log Out,Absence Type'
ATTENDANCE_ROWS = [
    # End-month June 2024 cutoff: 13th to 26th
    '10001,Garcia,Manuel,06/13/2024,8:00,17:00,',
    '10001,Garcia,Manuel,06/14/2024,8:00,19:00,',
    '10001,Garcia,Manuel,06/17/2024,8:00,17:00,',
    '10001,Garcia,Manuel,06/18/2024,8:30,17:00,',
    '10001,Garcia,Manuel,06/19/2024,8:00,16:30,',
    '10001,Garcia,Manuel,06/20/2024,,,Unpaid Leave',
    '10002,Lim,Antonio,06/13/2024,8:00,17:00,',
]


@pytest.fixture
def employee():
    """Basic salary 22,000: daily rate 1,000.00 and hourly rate 125.00."""
    return Employee(
        employee_id='10001',
        last_name='Garcia',
        first_name='Manuel',
        basic_salary=Decimal('22000'),
        rice_subsidy=Decimal('1500'),
        phone_allowance=Decimal('2000'),
        clothing_allowance=Decimal('1000'),
    )


@pytest.fixture
def calendar():
    return HolidayCalendar()


@pytest.fixture
def hours_calculator():
    return WorkHoursCalculator()


@pytest.fixture
def holiday_calculator(calendar):
    return HolidayPayCalculator(calendar)


@pytest.fixture
def processor(calendar):
    return PayrollProcessor(calendar)


@pytest.fixture
def make_record():
    def _make(day, time_in=None, time_out=None, **kwargs):
        return AttendanceRecord(employee_id='10001', date=day, time_in=time_in, time_out=time_out, **kwargs)
    return _make


@pytest.fixture
def full_day():
    return time(8, 0), time(17, 0)


@pytest.fixture
def employee_csv(tmp_path):
    path = tmp_path / 'employees.csv'
    path.write_text('\n'.join([EMPLOYEE_HEADER] + EMPLOYEE_ROWS) + '\n', encoding='utf-8')
    return path


@pytest.fixture
def attendance_csv(tmp_path):
    path = tmp_path / 'attendance.csv'
    path.write_text('\n'.join([ATTENDANCE_HEADER] + ATTENDANCE_ROWS) + '\n', encoding='utf-8')
    return path


@pytest.fixture
def app(employee_csv, attendance_csv):
    app = create_app('testing', overrides={
        'EMPLOYEE_CSV': str(employee_csv),
        'ATTENDANCE_CSV': str(attendance_csv),
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
