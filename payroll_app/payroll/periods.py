# payroll_app/payroll/periods.py

import calendar
from datetime import date, datetime, timedelta

import pytz

from payroll_app.exceptions import PreconditionError
from payroll_app.models import PayPeriod, PeriodType

# --- CUTOFF DAYS ---
MID_MONTH_PAY_DAY = 15
MID_MONTH_CUTOFF_START_DAY = 27  # of the previous month
MID_MONTH_CUTOFF_END_DAY = 12
END_MONTH_CUTOFF_START_DAY = 13
END_MONTH_CUTOFF_END_DAY = 26

DEFAULT_TIMEZONE = 'Asia/Manila'


def _check_month(year, month):
    if not isinstance(month, int) or not 1 <= month <= 12:
        raise PreconditionError(f'Invalid month: {month!r}')
    if not isinstance(year, int) or year < 1:
        raise PreconditionError(f'Invalid year: {year!r}')


def _previous_month(year, month):
    if month == 1:
        return year - 1, 12
    return year, month - 1


def _next_month(year, month):
    if month == 12:
        return year + 1, 1
    return year, month + 1


def get_payroll_date(year, month, period_type):
    """15th for the mid-month run, last calendar day for the end-month run."""
    _check_month(year, month)
    period_type = PeriodType.parse(period_type)
    if period_type is PeriodType.MID_MONTH:
        return date(year, month, MID_MONTH_PAY_DAY)
    return date(year, month, calendar.monthrange(year, month)[1])


def get_cutoff_date_range(payroll_date, period_type):
    """Inclusive (start, end) attendance window paid on ``payroll_date``."""
    if payroll_date is None:
        raise PreconditionError('Payroll date cannot be empty')
    period_type = PeriodType.parse(period_type)
    year, month = payroll_date.year, payroll_date.month

    if period_type is PeriodType.MID_MONTH:
        prev_year, prev_month = _previous_month(year, month)
        start = date(prev_year, prev_month, MID_MONTH_CUTOFF_START_DAY)
        end = date(year, month, MID_MONTH_CUTOFF_END_DAY)
    else:
        start = date(year, month, END_MONTH_CUTOFF_START_DAY)
        end = date(year, month, END_MONTH_CUTOFF_END_DAY)
    return start, end


def get_pay_period(year, month, period_type):
    period_type = PeriodType.parse(period_type)
    payroll_date = get_payroll_date(year, month, period_type)
    start, end = get_cutoff_date_range(payroll_date, period_type)
    return PayPeriod(
        year=year,
        month=month,
        period_type=period_type,
        start_date=start,
        end_date=end,
        payroll_date=payroll_date,
    )


def iter_dates(start, end):
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def working_days_in_period(start, end):
    """Weekdays (Mon-Fri) between start and end, inclusive."""
    if start is None or end is None or end < start:
        return 0
    return sum(1 for day in iter_dates(start, end) if day.weekday() < 5)


def today_local(tz_name=DEFAULT_TIMEZONE):
    return datetime.now(pytz.timezone(tz_name)).date()


def current_pay_period(tz_name=DEFAULT_TIMEZONE, today=None):
    """Pay period whose cutoff window contains today's local date."""
    today = today or today_local(tz_name)
    if today.day <= MID_MONTH_CUTOFF_END_DAY:
        return get_pay_period(today.year, today.month, PeriodType.MID_MONTH)
    if today.day <= END_MONTH_CUTOFF_END_DAY:
        return get_pay_period(today.year, today.month, PeriodType.END_MONTH)
    year, month = _next_month(today.year, today.month)
    return get_pay_period(year, month, PeriodType.MID_MONTH)
