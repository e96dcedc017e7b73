# payroll_app/payroll/processor.py

import logging
from decimal import Decimal

from payroll_app.exceptions import PreconditionError, ValidationError
from payroll_app.holidays.calculator import HolidayPayCalculator, is_rest_day
from payroll_app.models import AbsenceCategory, PayPeriod, PayrollResult, PeriodType, ZERO, to_hours, to_money
from .deductions import calculate_deductions
from .periods import get_payroll_date

logger = logging.getLogger(__name__)

OVERTIME_RATE = Decimal('1.25')  # 25% overtime premium
MINUTES_PER_HOUR = Decimal('60')
SEMI_MONTHLY_DIVISOR = Decimal('2')


def _require_non_negative(value, name):
    if value is None:
        raise ValidationError(f'{name} is required', field=name)
    value = Decimal(value)
    if value < 0:
        raise ValidationError(f'{name} cannot be negative (got {value})', field=name)
    return value


class PayrollProcessor:
    """Computes one employee's pay for one cutoff period.

    The processor only holds read-only collaborators; every running total
    lives in the local scope of ``process_payroll``.
    """

    def __init__(self, calendar, holiday_calculator=None):
        self.calendar = calendar
        self.holiday_calculator = holiday_calculator or HolidayPayCalculator(calendar)

    def process_payroll(self, employee, total_hours, overtime_hours, late_minutes, undertime_minutes,
                        is_late_any_day, period_type, start_date, end_date, year, month,
                        has_unpaid_absences, unpaid_absence_days=0, daily_hours=(), paid_leave_days=0):
        # --- 1. Validate ---
        if employee is None:
            raise PreconditionError('Employee cannot be empty')
        period_type = PeriodType.parse(period_type)
        if start_date is None or end_date is None:
            raise PreconditionError('Pay period dates cannot be empty')
        if end_date < start_date:
            raise PreconditionError(f'End date {end_date} is before start date {start_date}')

        total_hours = _require_non_negative(total_hours, 'total_hours')
        overtime_hours = _require_non_negative(overtime_hours, 'overtime_hours')
        late_minutes = _require_non_negative(late_minutes, 'late_minutes')
        undertime_minutes = _require_non_negative(undertime_minutes, 'undertime_minutes')
        unpaid_absence_days = _require_non_negative(unpaid_absence_days, 'unpaid_absence_days')
        paid_leave_days = _require_non_negative(paid_leave_days, 'paid_leave_days')

        # --- 2. Rates ---
        hourly_rate = employee.hourly_rate
        per_minute_rate = hourly_rate / MINUTES_PER_HOUR
        daily_rate = employee.daily_rate
        if hourly_rate <= 0:
            logger.warning('Employee %s has no usable salary or hourly rate; pay components are 0.',
                           employee.employee_id)

        # --- 3-4. Regular and overtime pay ---
        regular_pay = to_money(hourly_rate * total_hours)
        # Late days already reported 0 overtime for themselves.
        if is_late_any_day and overtime_hours > 0:
            logger.debug('%s was late during the period; %s overtime hours come from on-time days only.',
                         employee.employee_id, overtime_hours)
        overtime_pay = to_money(overtime_hours * hourly_rate * OVERTIME_RATE)

        # Approved leave is paid at the daily rate
        leave_pay = to_money(daily_rate * paid_leave_days)

        # --- 5. Holiday premium ---
        holiday_pay = ZERO
        holiday_days = []
        for day in daily_hours:
            if not start_date <= day.date <= end_date or not self.calendar.is_holiday(day.date):
                continue
            if day.absence is AbsenceCategory.PAID_LEAVE and not day.hours_worked:
                continue  # already paid as leave
            holiday_pay += self.holiday_calculator.calculate_holiday_pay(
                day.date, daily_rate, day.hours_worked, is_rest_day(day.date), day.is_late, day.overtime_hours,
            )
            holiday_days.append(day.date)
        holiday_pay = to_money(holiday_pay)

        # --- 6-7. Time and absence deductions ---
        late_deduction = to_money(late_minutes * per_minute_rate)
        undertime_deduction = to_money(undertime_minutes * per_minute_rate)
        absence_deduction = ZERO
        if has_unpaid_absences and unpaid_absence_days > 0:
            absence_deduction = to_money(daily_rate * unpaid_absence_days)

        # --- 8. Gross ---
        gross_pay = (regular_pay + overtime_pay + holiday_pay + leave_pay
                     - late_deduction - undertime_deduction - absence_deduction)
        if gross_pay < 0:
            logger.warning('Gross pay for %s in %s to %s is negative (%s); deductions exceed earnings. Using 0.',
                           employee.employee_id, start_date, end_date, gross_pay)
            gross_pay = ZERO

        # --- 9-10. Statutory deductions and net ---
        deductions = calculate_deductions(gross_pay, period_type, employee.basic_salary)
        net_pay = gross_pay - deductions.total
        if net_pay < 0:
            logger.warning('Net pay for %s in %s to %s is negative (%s); statutory deductions exceed gross. Using 0.',
                           employee.employee_id, start_date, end_date, net_pay)
            net_pay = ZERO

        period = PayPeriod(
            year=year,
            month=month,
            period_type=period_type,
            start_date=start_date,
            end_date=end_date,
            payroll_date=get_payroll_date(year, month, period_type),
        )
        logger.info('Processed payroll for %s, %s: gross %s, net %s',
                    employee.employee_id, period.label, gross_pay, net_pay)

        return PayrollResult(
            employee_id=employee.employee_id,
            employee_name=employee.full_name,
            period=period,
            hourly_rate=to_money(hourly_rate),
            daily_rate=to_money(daily_rate),
            hours_worked=to_hours(total_hours),
            overtime_hours=to_hours(overtime_hours),
            late_minutes=int(late_minutes),
            undertime_minutes=int(undertime_minutes),
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            holiday_pay=holiday_pay,
            leave_pay=leave_pay,
            late_deduction=late_deduction,
            undertime_deduction=undertime_deduction,
            absence_deduction=absence_deduction,
            gross_pay=gross_pay,
            deductions=deductions,
            net_pay=net_pay,
            allowances=to_money(employee.total_benefits / SEMI_MONTHLY_DIVISOR),
            holiday_days=tuple(holiday_days),
        )
