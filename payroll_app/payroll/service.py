# payroll_app/payroll/service.py

import logging

from payroll_app.attendance.calculator import WorkHoursCalculator
from payroll_app.attendance.summary import summarize_attendance
from payroll_app.exceptions import DataError, NoAttendanceDataError
from .periods import get_pay_period
from .processor import PayrollProcessor

logger = logging.getLogger(__name__)


class PayrollService:
    """Runs the engine over the loaded employee and attendance data."""

    def __init__(self, store, hours_calculator=None, processor=None):
        self.store = store
        self.hours_calculator = hours_calculator or WorkHoursCalculator()
        self.processor = processor or PayrollProcessor(store.calendar)

    def get_employee(self, employee_id):
        employee = self.store.get_employee(employee_id)
        if employee is None:
            raise DataError(f'Employee {employee_id} not found')
        return employee

    def daily_hours_for(self, employee_id, period):
        records = self.store.records_for(employee_id, period.start_date, period.end_date)
        return [self.hours_calculator.calculate_daily(record) for record in records]

    def run_for_employee(self, employee_id, year, month, period_type):
        employee = self.get_employee(employee_id)
        period = get_pay_period(year, month, period_type)

        daily = self.daily_hours_for(employee.employee_id, period)
        if not daily:
            raise NoAttendanceDataError(
                f'No attendance data for employee {employee.employee_id} in {period.label}'
            )
        summary = summarize_attendance(daily)

        return self.processor.process_payroll(
            employee,
            summary.total_hours,
            summary.overtime_hours,
            summary.late_minutes,
            summary.undertime_minutes,
            summary.is_late_any_day,
            period.period_type,
            period.start_date,
            period.end_date,
            year,
            month,
            summary.has_unpaid_absences,
            unpaid_absence_days=summary.unpaid_absence_days,
            daily_hours=daily,
            paid_leave_days=summary.paid_leave_days,
        )

    def run_for_all(self, year, month, period_type):
        results = []
        for employee in self.store.all_employees():
            try:
                results.append(self.run_for_employee(employee.employee_id, year, month, period_type))
            except NoAttendanceDataError as e:
                logger.info('Skipping %s: %s', employee.employee_id, e)
        return results
