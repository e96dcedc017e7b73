# payroll_app/models.py

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional

from payroll_app.exceptions import PreconditionError

CENTS = Decimal('0.01')
ZERO = Decimal('0.00')

WORKING_DAYS_PER_MONTH = Decimal('22')
HOURS_PER_DAY = Decimal('8')


def to_money(value):
    """Round a monetary amount to centavos."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def to_hours(value):
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


# --- ENUMERATIONS ---

class AbsenceCategory(str, Enum):
    """Closed set of absence variants the engine switches on."""

    NONE = 'none'
    PAID_LEAVE = 'paid_leave'
    UNPAID = 'unpaid'

    @classmethod
    def from_label(cls, label):
        """Map the free-text absence tag of an attendance row onto a category."""
        if label is None:
            return cls.NONE
        text = str(label).strip().lower()
        if not text:
            return cls.NONE
        if 'unpaid' in text or 'unauthoriz' in text or 'unapproved' in text:
            return cls.UNPAID
        return cls.PAID_LEAVE


class HolidayType(str, Enum):
    REGULAR = 'Regular'
    SPECIAL_NON_WORKING = 'SpecialNonWorking'

    @property
    def label(self):
        if self is HolidayType.REGULAR:
            return 'Regular Holiday'
        return 'Special Non-Working Holiday'


class PeriodType(str, Enum):
    """Semi-monthly run: contributions mid-month, withholding tax end-month."""

    MID_MONTH = 'mid'
    END_MONTH = 'end'

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            legacy = {1: cls.MID_MONTH, 2: cls.END_MONTH}
            if value in legacy:
                return legacy[value]
        elif isinstance(value, str):
            text = value.strip().lower()
            if text in ('1', '2'):
                return cls.parse(int(text))
            for member in cls:
                if text in (member.value, member.name.lower()):
                    return member
        raise PreconditionError(f'Invalid pay period type: {value!r}')

    @property
    def label(self):
        return 'Mid-month' if self is PeriodType.MID_MONTH else 'End-month'


# --- MASTER DATA ---

@dataclass(frozen=True)
class Employee:
    employee_id: str
    last_name: str
    first_name: str
    basic_salary: Decimal
    position: str = ''
    status: str = ''
    birthday: str = ''
    address: str = ''
    phone_number: str = ''
    sss_number: str = ''
    philhealth_number: str = ''
    tin_number: str = ''
    pagibig_number: str = ''
    immediate_supervisor: str = ''
    rice_subsidy: Decimal = ZERO
    phone_allowance: Decimal = ZERO
    clothing_allowance: Decimal = ZERO
    gross_semi_monthly_rate: Decimal = ZERO
    hourly_rate_given: Decimal = ZERO

    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'

    @property
    def hourly_rate(self):
        """Given hourly rate, or basic salary spread over 22 eight-hour days."""
        if self.hourly_rate_given and self.hourly_rate_given > 0:
            return Decimal(self.hourly_rate_given)
        if self.basic_salary and self.basic_salary > 0:
            return Decimal(self.basic_salary) / (WORKING_DAYS_PER_MONTH * HOURS_PER_DAY)
        return ZERO

    @property
    def daily_rate(self):
        if not self.basic_salary or self.basic_salary <= 0:
            return ZERO
        return Decimal(self.basic_salary) / WORKING_DAYS_PER_MONTH

    @property
    def total_benefits(self):
        return self.rice_subsidy + self.phone_allowance + self.clothing_allowance

    def to_dict(self):
        return {
            'employee_id': self.employee_id,
            'last_name': self.last_name,
            'first_name': self.first_name,
            'position': self.position,
            'status': self.status,
            'immediate_supervisor': self.immediate_supervisor,
            'basic_salary': str(to_money(self.basic_salary)),
            'hourly_rate': str(to_money(self.hourly_rate)),
            'daily_rate': str(to_money(self.daily_rate)),
            'rice_subsidy': str(to_money(self.rice_subsidy)),
            'phone_allowance': str(to_money(self.phone_allowance)),
            'clothing_allowance': str(to_money(self.clothing_allowance)),
        }


@dataclass(frozen=True)
class AttendanceRecord:
    employee_id: str
    date: date
    time_in: Optional[time] = None
    time_out: Optional[time] = None
    absence: AbsenceCategory = AbsenceCategory.NONE

    @property
    def is_absent(self):
        return self.absence is not AbsenceCategory.NONE

    @property
    def work_duration(self):
        if self.time_in is None or self.time_out is None or self.time_out < self.time_in:
            return timedelta(0)
        return datetime.combine(self.date, self.time_out) - datetime.combine(self.date, self.time_in)


@dataclass(frozen=True)
class Holiday:
    name: str
    date: date
    type: HolidayType

    @property
    def is_regular(self):
        return self.type is HolidayType.REGULAR

    def to_dict(self):
        return {'name': self.name, 'date': self.date.isoformat(), 'type': self.type.value}


# --- PAY PERIOD ---

@dataclass(frozen=True)
class PayPeriod:
    year: int
    month: int
    period_type: PeriodType
    start_date: date
    end_date: date
    payroll_date: date

    def contains(self, day):
        return day is not None and self.start_date <= day <= self.end_date

    def dates(self):
        current = self.start_date
        while current <= self.end_date:
            yield current
            current += timedelta(days=1)

    @property
    def label(self):
        return (f"{self.period_type.label} {self.year}-{self.month:02d} "
                f"({self.start_date:%b %d, %Y} to {self.end_date:%b %d, %Y})")

    def to_dict(self):
        return {
            'year': self.year,
            'month': self.month,
            'period_type': self.period_type.value,
            'start_date': self.start_date.isoformat(),
            'end_date': self.end_date.isoformat(),
            'payroll_date': self.payroll_date.isoformat(),
        }


# --- CALCULATION RESULTS ---

@dataclass(frozen=True)
class DailyHours:
    """Work-hours breakdown of a single attendance day."""

    date: date
    hours_worked: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    late_minutes: int = 0
    undertime_minutes: int = 0
    is_late: bool = False
    absence: AbsenceCategory = AbsenceCategory.NONE

    def to_dict(self):
        return {
            'date': self.date.isoformat(),
            'hours_worked': str(self.hours_worked),
            'overtime_hours': str(self.overtime_hours),
            'late_minutes': self.late_minutes,
            'undertime_minutes': self.undertime_minutes,
            'is_late': self.is_late,
            'absence': self.absence.value,
        }


@dataclass(frozen=True)
class AttendanceSummary:
    record_count: int = 0
    total_hours: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    late_minutes: int = 0
    undertime_minutes: int = 0
    is_late_any_day: bool = False
    unpaid_absence_days: int = 0
    paid_leave_days: int = 0

    @property
    def has_unpaid_absences(self):
        return self.unpaid_absence_days > 0

    def to_dict(self):
        return {
            'record_count': self.record_count,
            'total_hours': str(self.total_hours),
            'overtime_hours': str(self.overtime_hours),
            'late_minutes': self.late_minutes,
            'undertime_minutes': self.undertime_minutes,
            'is_late_any_day': self.is_late_any_day,
            'unpaid_absence_days': self.unpaid_absence_days,
            'paid_leave_days': self.paid_leave_days,
        }


@dataclass(frozen=True)
class DeductionResult:
    sss: Decimal = ZERO
    philhealth: Decimal = ZERO
    pagibig: Decimal = ZERO
    withholding_tax: Decimal = ZERO

    @property
    def total(self):
        return self.sss + self.philhealth + self.pagibig + self.withholding_tax

    def to_dict(self):
        return {
            'sss': str(self.sss),
            'philhealth': str(self.philhealth),
            'pagibig': str(self.pagibig),
            'withholding_tax': str(self.withholding_tax),
            'total': str(self.total),
        }


@dataclass(frozen=True)
class PayrollResult:
    employee_id: str
    employee_name: str
    period: PayPeriod
    hourly_rate: Decimal
    daily_rate: Decimal
    hours_worked: Decimal
    overtime_hours: Decimal
    late_minutes: int
    undertime_minutes: int
    regular_pay: Decimal
    overtime_pay: Decimal
    holiday_pay: Decimal
    leave_pay: Decimal
    late_deduction: Decimal
    undertime_deduction: Decimal
    absence_deduction: Decimal
    gross_pay: Decimal
    deductions: DeductionResult
    net_pay: Decimal
    allowances: Decimal = ZERO
    holiday_days: tuple = field(default_factory=tuple)

    def to_dict(self):
        return {
            'employee_id': self.employee_id,
            'employee_name': self.employee_name,
            'period': self.period.to_dict(),
            'hourly_rate': str(self.hourly_rate),
            'daily_rate': str(self.daily_rate),
            'hours_worked': str(self.hours_worked),
            'overtime_hours': str(self.overtime_hours),
            'late_minutes': self.late_minutes,
            'undertime_minutes': self.undertime_minutes,
            'regular_pay': str(self.regular_pay),
            'overtime_pay': str(self.overtime_pay),
            'holiday_pay': str(self.holiday_pay),
            'leave_pay': str(self.leave_pay),
            'late_deduction': str(self.late_deduction),
            'undertime_deduction': str(self.undertime_deduction),
            'absence_deduction': str(self.absence_deduction),
            'gross_pay': str(self.gross_pay),
            'deductions': self.deductions.to_dict(),
            'net_pay': str(self.net_pay),
            'allowances': str(self.allowances),
            'holiday_days': [d.isoformat() for d in self.holiday_days],
        }
