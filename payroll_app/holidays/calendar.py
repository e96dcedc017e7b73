# payroll_app/holidays/calendar.py

import logging
from datetime import date, datetime

from payroll_app.exceptions import ValidationError
from payroll_app.models import Holiday, HolidayType
from .data import DEFAULT_HOLIDAY_TABLE

logger = logging.getLogger(__name__)


def _coerce_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value).strip(), '%Y-%m-%d').date()


class HolidayCalendar:
    """Lookup structure over one regular and one special non-working holiday list.

    The calendar is built from a table mapping year -> list of
    ``{'name', 'date', 'type'}`` entries. Both lists stay ordered by date and
    never hold the same date twice.
    """

    def __init__(self, table=None):
        self._regular = []
        self._special = []
        source = DEFAULT_HOLIDAY_TABLE if table is None else table
        for year in sorted(source):
            for entry in source[year]:
                self.add_holiday(Holiday(
                    name=entry['name'],
                    date=_coerce_date(entry['date']),
                    type=HolidayType(entry['type']),
                ))
        logger.debug('Holiday calendar loaded: %d regular, %d special',
                     len(self._regular), len(self._special))

    # --- MUTATION (administrative only) ---

    def add_holiday(self, holiday):
        target = self._regular if holiday.type is HolidayType.REGULAR else self._special
        for existing in target:
            if existing.date == holiday.date:
                raise ValidationError(
                    f'{holiday.date} is already listed as {existing.name} ({holiday.type.label})',
                    field='date',
                )
        target.append(holiday)
        target.sort(key=lambda h: h.date)

    # --- LOOKUPS ---

    @staticmethod
    def _find(holidays, day):
        for holiday in holidays:
            if holiday.date == day:
                return holiday
        return None

    def is_regular_holiday(self, day):
        if day is None:
            return False
        return self._find(self._regular, day) is not None

    def is_special_non_working_holiday(self, day):
        if day is None:
            return False
        return self._find(self._special, day) is not None

    def is_holiday(self, day):
        return self.is_regular_holiday(day) or self.is_special_non_working_holiday(day)

    def get_holiday(self, day):
        """Regular entry first, then special; ``None`` when the day is ordinary."""
        if day is None:
            return None
        return self._find(self._regular, day) or self._find(self._special, day)

    def get_holiday_name(self, day):
        holiday = self.get_holiday(day)
        return holiday.name if holiday else None

    def get_holidays_in_range(self, start, end):
        """Every holiday dated within [start, end], ordered by date, regular before special.

        A date listed as both a regular and a special holiday yields both entries.
        """
        if start is None or end is None or end < start:
            return []
        found = [h for h in self._regular + self._special if start <= h.date <= end]
        return sorted(found, key=lambda h: h.date)

    @property
    def supported_years(self):
        return sorted({h.date.year for h in self._regular + self._special})

    def __len__(self):
        return len(self._regular) + len(self._special)
