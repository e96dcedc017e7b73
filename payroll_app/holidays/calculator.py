# payroll_app/holidays/calculator.py

import logging
from decimal import Decimal

from payroll_app.models import HOURS_PER_DAY, ZERO

logger = logging.getLogger(__name__)

# --- HOLIDAY PREMIUM RATES ---
REGULAR_HOLIDAY_UNWORKED_RATE = Decimal('1.00')
REGULAR_HOLIDAY_WORKED_RATE = Decimal('2.00')
SPECIAL_HOLIDAY_WORKED_RATE = Decimal('1.30')
HOLIDAY_OVERTIME_RATE = Decimal('1.30')
NON_LATE_OVERTIME_RATE = Decimal('1.25')
REST_DAY_RATE = Decimal('1.30')

SUNDAY = 6


def is_rest_day(day):
    """Sunday is the designated rest day."""
    return day is not None and day.weekday() == SUNDAY


def _non_negative(value, name):
    value = Decimal(value or 0)
    if value < 0:
        logger.warning('Negative %s (%s) provided for holiday pay calculation. Using 0.', name, value)
        return ZERO
    return value


class HolidayPayCalculator:
    """Holiday premium for a single attendance day."""

    def __init__(self, calendar):
        self.calendar = calendar

    def calculate_holiday_pay(self, day, daily_rate, hours_worked, is_rest_day, is_late, overtime_hours):
        daily_rate = _non_negative(daily_rate, 'daily rate')
        hours_worked = _non_negative(hours_worked, 'hours worked')
        overtime_hours = _non_negative(overtime_hours, 'overtime hours')

        if self.calendar.is_regular_holiday(day):
            pay = self._regular_holiday_pay(daily_rate, hours_worked, is_rest_day, is_late, overtime_hours)
        elif self.calendar.is_special_non_working_holiday(day):
            pay = self._special_holiday_pay(daily_rate, hours_worked, is_late, overtime_hours)
        else:
            return ZERO
        return pay

    @staticmethod
    def _overtime_premium(hourly_rate, is_late, overtime_hours):
        if overtime_hours <= 0:
            return ZERO
        rate = hourly_rate * HOLIDAY_OVERTIME_RATE
        if not is_late:
            rate *= NON_LATE_OVERTIME_RATE
        return overtime_hours * rate

    def _regular_holiday_pay(self, daily_rate, hours_worked, is_rest_day, is_late, overtime_hours):
        if hours_worked == 0:
            return daily_rate * REGULAR_HOLIDAY_UNWORKED_RATE

        hourly_rate = daily_rate / HOURS_PER_DAY
        pay = min(hours_worked, HOURS_PER_DAY) * hourly_rate * REGULAR_HOLIDAY_WORKED_RATE
        pay += self._overtime_premium(hourly_rate, is_late, overtime_hours)
        if is_rest_day:
            pay *= REST_DAY_RATE
        return pay

    def _special_holiday_pay(self, daily_rate, hours_worked, is_late, overtime_hours):
        # No pay for employees who did not report on a special non-working day.
        if hours_worked == 0:
            return ZERO

        hourly_rate = daily_rate / HOURS_PER_DAY
        pay = min(hours_worked, HOURS_PER_DAY) * hourly_rate * SPECIAL_HOLIDAY_WORKED_RATE
        pay += self._overtime_premium(hourly_rate, is_late, overtime_hours)
        return pay
