# payroll_app/attendance/summary.py

from functools import reduce
from datetime import timedelta
from itertools import groupby

from payroll_app.models import AbsenceCategory, AttendanceSummary


def _is_paid_leave(day):
    return day.absence is AbsenceCategory.PAID_LEAVE and not day.hours_worked


def _fold(summary, day):
    return AttendanceSummary(
        record_count=summary.record_count + 1,
        total_hours=summary.total_hours + day.hours_worked,
        overtime_hours=summary.overtime_hours + day.overtime_hours,
        late_minutes=summary.late_minutes + day.late_minutes,
        undertime_minutes=summary.undertime_minutes + day.undertime_minutes,
        is_late_any_day=summary.is_late_any_day or day.is_late,
        unpaid_absence_days=summary.unpaid_absence_days + (1 if day.absence is AbsenceCategory.UNPAID else 0),
        paid_leave_days=summary.paid_leave_days + (1 if _is_paid_leave(day) else 0),
    )


def summarize_attendance(daily_hours):
    """Fold per-day rows into one immutable period summary."""
    return reduce(_fold, daily_hours, AttendanceSummary())


def week_start(day):
    return day - timedelta(days=day.weekday())


def weekly_breakdown(daily_hours):
    """Group per-day rows into Monday-based weeks.

    Returns a list of ``(week_start, week_end, AttendanceSummary)`` ordered by week.
    """
    rows = sorted(daily_hours, key=lambda d: d.date)
    weeks = []
    for start, days in groupby(rows, key=lambda d: week_start(d.date)):
        weeks.append((start, start + timedelta(days=6), summarize_attendance(days)))
    return weeks
