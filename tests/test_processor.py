"""
test_processor.py - PayrollProcessor end to end on pre-aggregated totals.

The sample employee earns 22,000 a month: hourly 125.00, daily 1,000.00,
per-minute 125/60.
"""

import logging
from dataclasses import replace
from datetime import date, time
from decimal import Decimal

import pytest

from payroll_app.attendance.summary import summarize_attendance
from payroll_app.exceptions import PreconditionError, ValidationError
from payroll_app.models import AbsenceCategory, DailyHours, Employee, PeriodType

MID_JUNE = (date(2024, 5, 27), date(2024, 6, 12))
END_JUNE = (date(2024, 6, 13), date(2024, 6, 26))


def run(processor, employee, period_type=PeriodType.END_MONTH, total_hours=80, overtime_hours=0,
        late_minutes=0, undertime_minutes=0, is_late_any_day=False, has_unpaid_absences=False,
        unpaid_absence_days=0, daily_hours=(), paid_leave_days=0):
    start, end = MID_JUNE if period_type is PeriodType.MID_MONTH else END_JUNE
    return processor.process_payroll(
        employee, total_hours, overtime_hours, late_minutes, undertime_minutes, is_late_any_day,
        period_type, start, end, 2024, 6, has_unpaid_absences,
        unpaid_absence_days=unpaid_absence_days, daily_hours=daily_hours, paid_leave_days=paid_leave_days,
    )


class TestEarnings:

    def test_regular_and_overtime_pay(self, processor, employee):
        result = run(processor, employee, total_hours=80, overtime_hours=2)
        assert result.hourly_rate == Decimal('125.00')
        assert result.daily_rate == Decimal('1000.00')
        assert result.regular_pay == Decimal('10000.00')
        assert result.overtime_pay == Decimal('312.50')
        assert result.gross_pay == Decimal('10312.50')

    def test_given_hourly_rate_wins_over_salary(self, processor, employee):
        result = run(processor, replace(employee, hourly_rate_given=Decimal('100')), total_hours=10)
        assert result.regular_pay == Decimal('1000.00')

    def test_zero_salary_employee_earns_nothing(self, processor, caplog):
        idle = Employee(employee_id='10099', last_name='Cruz', first_name='Ana', basic_salary=Decimal('0'))
        with caplog.at_level(logging.WARNING, logger='payroll_app'):
            result = run(processor, idle, total_hours=80, overtime_hours=4)
        assert result.gross_pay == 0
        assert 'no usable salary' in caplog.text


class TestTimeDeductions:

    def test_late_and_undertime_are_charged_per_minute(self, processor, employee):
        result = run(processor, employee, total_hours=80, late_minutes=30, undertime_minutes=12,
                     is_late_any_day=True)
        assert result.late_deduction == Decimal('62.50')
        assert result.undertime_deduction == Decimal('25.00')
        assert result.gross_pay == Decimal('9912.50')

    def test_unpaid_absence_days_cost_the_daily_rate(self, processor, employee):
        result = run(processor, employee, total_hours=80, has_unpaid_absences=True, unpaid_absence_days=2)
        assert result.absence_deduction == Decimal('2000.00')
        assert result.gross_pay == Decimal('8000.00')

    def test_absence_days_ignored_without_flag(self, processor, employee):
        result = run(processor, employee, total_hours=80, has_unpaid_absences=False, unpaid_absence_days=2)
        assert result.absence_deduction == 0

    def test_gross_is_floored_at_zero(self, processor, employee, caplog):
        with caplog.at_level(logging.WARNING, logger='payroll_app'):
            result = run(processor, employee, total_hours=0, late_minutes=600)
        assert result.gross_pay == 0
        assert result.net_pay == 0
        assert 'is negative' in caplog.text


class TestHolidayPremium:

    def test_worked_regular_holiday_in_period(self, processor, employee):
        daily = [
            DailyHours(date=date(2024, 6, 11), hours_worked=Decimal('8')),
            DailyHours(date=date(2024, 6, 12), hours_worked=Decimal('8')),
        ]
        result = run(processor, employee, PeriodType.MID_MONTH, total_hours=16, daily_hours=daily)
        assert result.holiday_pay == Decimal('2000.00')
        assert result.holiday_days == (date(2024, 6, 12),)
        assert result.gross_pay == Decimal('4000.00')

    def test_unworked_regular_holiday_pays_daily_rate(self, processor, employee):
        daily = [DailyHours(date=date(2024, 6, 17))]
        result = run(processor, employee, total_hours=0, daily_hours=daily)
        assert result.holiday_pay == Decimal('1000.00')

    def test_holidays_outside_the_period_are_ignored(self, processor, employee):
        daily = [DailyHours(date=date(2024, 6, 12), hours_worked=Decimal('8'))]
        result = run(processor, employee, total_hours=8, daily_hours=daily)
        assert result.holiday_pay == 0
        assert result.holiday_days == ()


class TestStatutoryDeductions:

    def test_mid_month_withholds_contributions(self, processor, employee):
        result = run(processor, employee, PeriodType.MID_MONTH, total_hours=88)
        assert result.gross_pay == Decimal('11000.00')
        assert result.deductions.withholding_tax == 0
        assert result.deductions.total == Decimal('1420.00')
        assert result.net_pay == Decimal('9580.00')

    def test_end_month_withholds_tax(self, processor):
        manager = Employee(employee_id='10002', last_name='Lim', first_name='Antonio',
                           basic_salary=Decimal('90000'))
        result = run(processor, manager, PeriodType.END_MONTH, total_hours=88)
        assert result.gross_pay == Decimal('45000.00')
        assert result.deductions.sss == result.deductions.philhealth == result.deductions.pagibig == 0
        assert result.deductions.withholding_tax == Decimal('5416.75')
        assert result.net_pay == Decimal('39583.25')

    def test_allowances_are_reported_but_not_paid_out(self, processor, employee):
        result = run(processor, employee, total_hours=80)
        assert result.allowances == Decimal('2250.00')
        assert result.net_pay == result.gross_pay - result.deductions.total

    def test_net_is_floored_at_zero_when_contributions_exceed_gross(self, processor, employee, caplog):
        with caplog.at_level(logging.WARNING, logger='payroll_app'):
            result = run(processor, employee, PeriodType.MID_MONTH, total_hours=1, undertime_minutes=420)
        assert result.gross_pay == 0
        assert result.deductions.total == Decimal('1420.00')
        assert result.net_pay == 0
        assert 'Net pay' in caplog.text


class TestPaidLeave:

    def test_leave_days_are_paid_at_the_daily_rate(self, processor, employee):
        result = run(processor, employee, total_hours=8, paid_leave_days=1)
        assert result.leave_pay == Decimal('1000.00')
        assert result.gross_pay == Decimal('2000.00')
        assert result.to_dict()['leave_pay'] == '1000.00'

    def test_sick_leave_earns_more_than_a_no_show(self, processor, employee, hours_calculator, make_record):
        worked = make_record(date(2024, 6, 13), time(8, 0), time(17, 0))
        sick = make_record(date(2024, 6, 14), absence=AbsenceCategory.PAID_LEAVE)
        no_show = make_record(date(2024, 6, 14))

        def gross(records):
            daily = [hours_calculator.calculate_daily(r) for r in records]
            summary = summarize_attendance(daily)
            return run(processor, employee, total_hours=summary.total_hours, daily_hours=daily,
                       paid_leave_days=summary.paid_leave_days).gross_pay

        assert gross([worked, sick]) == Decimal('2000.00')
        assert gross([worked, no_show]) == Decimal('1000.00')

    def test_leave_on_a_regular_holiday_is_paid_once(self, processor, employee):
        daily = [DailyHours(date=date(2024, 6, 17), absence=AbsenceCategory.PAID_LEAVE)]
        result = run(processor, employee, total_hours=0, daily_hours=daily, paid_leave_days=1)
        assert result.leave_pay == Decimal('1000.00')
        assert result.holiday_pay == 0
        assert result.gross_pay == Decimal('1000.00')

    def test_negative_leave_days_are_rejected(self, processor, employee):
        with pytest.raises(ValidationError) as excinfo:
            run(processor, employee, paid_leave_days=-1)
        assert excinfo.value.field == 'paid_leave_days'


class TestValidation:

    def test_missing_employee(self, processor):
        with pytest.raises(PreconditionError):
            run(processor, None)

    def test_invalid_period_type(self, processor, employee):
        with pytest.raises(PreconditionError):
            processor.process_payroll(employee, 80, 0, 0, 0, False, 3, *END_JUNE, 2024, 6, False)

    def test_inverted_period(self, processor, employee):
        with pytest.raises(PreconditionError):
            processor.process_payroll(employee, 80, 0, 0, 0, False, 'end',
                                      date(2024, 6, 26), date(2024, 6, 13), 2024, 6, False)

    @pytest.mark.parametrize('field', ['total_hours', 'overtime_hours', 'late_minutes', 'undertime_minutes'])
    def test_negative_totals_are_rejected(self, processor, employee, field):
        with pytest.raises(ValidationError) as excinfo:
            run(processor, employee, **{field: -1})
        assert excinfo.value.field == field


def test_processor_uses_the_summed_daily_rows(processor, employee, hours_calculator, make_record):
    records = [
        make_record(date(2024, 6, 13), time(8, 0), time(18, 0)),
        make_record(date(2024, 6, 14), time(8, 20), time(17, 0)),
        make_record(date(2024, 6, 17), time(8, 0), time(17, 0)),
    ]
    daily = [hours_calculator.calculate_daily(r) for r in records]
    summary = summarize_attendance(daily)
    result = run(processor, employee, total_hours=summary.total_hours, overtime_hours=summary.overtime_hours,
                 late_minutes=summary.late_minutes, undertime_minutes=summary.undertime_minutes,
                 is_late_any_day=summary.is_late_any_day, daily_hours=daily)

    assert result.hours_worked == sum((d.hours_worked for d in daily), Decimal('0'))
    assert result.overtime_hours == Decimal('1')
    assert result.late_minutes == 20
    # 2024-06-17 is Eid'l Adha: +200% on top of the regular hours
    assert result.holiday_pay == Decimal('2000.00')
