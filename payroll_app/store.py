# payroll_app/store.py

import logging
import os

from payroll_app.attendance.loader import load_attendance
from payroll_app.employee.loader import load_employees
from payroll_app.holidays.calendar import HolidayCalendar

logger = logging.getLogger(__name__)


class PayrollStore:
    """In-memory employee, attendance and holiday data for the process lifetime.

    Loaded once by ``init_app`` (or ``load``) and read-only afterwards,
    apart from the explicit ``add_holiday`` administrative call.
    """

    def __init__(self, app=None):
        self.employees = {}
        self.attendance = {}
        self.calendar = HolidayCalendar()
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.load(
            employee_csv=app.config.get('EMPLOYEE_CSV'),
            attendance_csv=app.config.get('ATTENDANCE_CSV'),
            holiday_table=app.config.get('HOLIDAY_TABLE'),
        )
        app.extensions['payroll_store'] = self

    def load(self, employee_csv=None, attendance_csv=None, holiday_table=None):
        self.calendar = HolidayCalendar(holiday_table)
        self.employees = {}
        self.attendance = {}
        if employee_csv and os.path.exists(employee_csv):
            self.employees = load_employees(employee_csv)
        elif employee_csv:
            logger.warning('Employee file not found: %s', employee_csv)
        if attendance_csv and os.path.exists(attendance_csv):
            self.attendance = load_attendance(attendance_csv)
        elif attendance_csv:
            logger.warning('Attendance file not found: %s', attendance_csv)
        return self

    def get_employee(self, employee_id):
        return self.employees.get(str(employee_id).strip()) if employee_id is not None else None

    def all_employees(self):
        return sorted(self.employees.values(), key=lambda e: e.employee_id)

    def records_for(self, employee_id, start=None, end=None):
        """Attendance records of one employee dated within [start, end] inclusive."""
        records = self.attendance.get(str(employee_id).strip(), [])
        return [r for r in records
                if (start is None or r.date >= start) and (end is None or r.date <= end)]

    def add_holiday(self, holiday):
        self.calendar.add_holiday(holiday)
        logger.info('Holiday added: %s on %s (%s)', holiday.name, holiday.date, holiday.type.label)
