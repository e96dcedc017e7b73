# payroll_app/attendance/calculator.py

import logging
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from payroll_app.models import DailyHours, HOURS_PER_DAY, ZERO, to_hours

logger = logging.getLogger(__name__)

# --- STANDARD WORK SCHEDULE ---
STANDARD_START_TIME = time(8, 0)
STANDARD_END_TIME = time(17, 0)
GRACE_MINUTES = 10
LUNCH_MINUTES = 60

# Any date works: only the clock times are compared.
_ANCHOR = date(2000, 1, 1)


def _minutes_between(earlier, later):
    delta = datetime.combine(_ANCHOR, later) - datetime.combine(_ANCHOR, earlier)
    return int(delta.total_seconds() // 60)


def time_to_decimal_hours(minutes):
    return to_hours(Decimal(minutes) / Decimal(60))


class WorkHoursCalculator:
    """Turns one day's time-in/time-out pair into worked, overtime, late and undertime figures.

    Late arrivals forfeit overtime for that day and their hours stop counting
    at the standard end time.
    """

    def __init__(self, start_time=STANDARD_START_TIME, end_time=STANDARD_END_TIME,
                 grace_minutes=GRACE_MINUTES, lunch_minutes=LUNCH_MINUTES):
        self.start_time = start_time
        self.end_time = end_time
        self.grace_minutes = grace_minutes
        self.lunch_minutes = lunch_minutes

    @property
    def grace_period_end(self):
        start = datetime.combine(_ANCHOR, self.start_time)
        return (start + timedelta(minutes=self.grace_minutes)).time()

    def is_late(self, time_in):
        return time_in is not None and time_in > self.grace_period_end

    def calculate_hours_worked(self, time_in, time_out, is_late):
        if time_in is None or time_out is None:
            logger.warning('Missing time-in or time-out (in=%s, out=%s). Counting 0 hours.', time_in, time_out)
            return ZERO

        if is_late:
            end = min(time_out, self.end_time)
            minutes = _minutes_between(time_in, end) - self.lunch_minutes
        else:
            minutes = _minutes_between(time_in, time_out) - self.lunch_minutes

        if minutes < 0:
            if time_out < time_in:
                logger.warning('Time-out %s is before time-in %s. Counting 0 hours.', time_out, time_in)
            return ZERO

        hours = time_to_decimal_hours(minutes)
        return min(hours, HOURS_PER_DAY)

    def calculate_overtime_hours(self, time_out, is_late):
        # Late employees are not eligible for overtime.
        if is_late or time_out is None:
            return ZERO
        if time_out <= self.end_time:
            return ZERO
        return time_to_decimal_hours(_minutes_between(self.end_time, time_out))

    def calculate_late_minutes(self, time_in):
        """Minutes counted from the official start, only once past the grace period."""
        if not self.is_late(time_in):
            return 0
        return _minutes_between(self.start_time, time_in)

    def calculate_undertime_minutes(self, time_out):
        if time_out is None or time_out >= self.end_time:
            return 0
        return _minutes_between(time_out, self.end_time)

    def calculate_daily(self, record):
        if record.is_absent and record.time_in is None and record.time_out is None:
            return DailyHours(date=record.date, absence=record.absence)

        late = self.is_late(record.time_in)
        return DailyHours(
            date=record.date,
            hours_worked=self.calculate_hours_worked(record.time_in, record.time_out, late),
            overtime_hours=self.calculate_overtime_hours(record.time_out, late),
            late_minutes=self.calculate_late_minutes(record.time_in),
            undertime_minutes=self.calculate_undertime_minutes(record.time_out),
            is_late=late,
            absence=record.absence,
        )
