# payroll_app/attendance/loader.py

import csv
import logging
from datetime import datetime, time

from payroll_app.exceptions import DataError
from payroll_app.models import AbsenceCategory, AttendanceRecord

logger = logging.getLogger(__name__)

DATE_FORMAT = '%m/%d/%Y'
MIN_COLUMNS = 6


def parse_date(value):
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except (AttributeError, ValueError):
        raise DataError(f'Invalid date: {value!r} (expected MM/DD/YYYY)')


def parse_time(value):
    """Parse 'H:MM', 'HH:MM', 'HHMM' or 'HMM'; an empty cell means no punch."""
    if value is None or not value.strip():
        return None
    text = value.strip()
    if ':' not in text:
        if len(text) == 3:
            text = f'0{text[0]}:{text[1:]}'
        elif len(text) == 4:
            text = f'{text[:2]}:{text[2:]}'
    try:
        parsed = datetime.strptime(text, '%H:%M').time()
    except ValueError:
        raise DataError(f'Invalid time: {value!r}')
    return time(parsed.hour, parsed.minute)


def attendance_from_row(row, row_number=None):
    if len(row) < MIN_COLUMNS:
        raise DataError(
            f'Incomplete attendance row: expected at least {MIN_COLUMNS} columns, got {len(row)}',
            row_number=row_number,
        )
    employee_id = row[0].strip()
    if not employee_id:
        raise DataError('Attendance row has no employee id', row_number=row_number)
    try:
        day = parse_date(row[3])
        time_in = parse_time(row[4])
        time_out = parse_time(row[5])
    except DataError as e:
        raise DataError(str(e), row_number=row_number) from e
    absence = AbsenceCategory.from_label(row[6] if len(row) > MIN_COLUMNS else None)
    return AttendanceRecord(
        employee_id=employee_id,
        date=day,
        time_in=time_in,
        time_out=time_out,
        absence=absence,
    )


def load_attendance(path):
    """Read the attendance log into a dict of employee id -> records sorted by date.

    One record per employee and date; later duplicates are skipped.
    """
    by_employee = {}
    seen = set()
    with open(path, newline='', encoding='utf-8-sig') as f:
        reader = csv.reader(f)
        next(reader, None)  # header
        for row_number, row in enumerate(reader, start=2):
            if not any(cell.strip() for cell in row):
                continue
            try:
                record = attendance_from_row(row, row_number)
            except DataError as e:
                logger.warning('Attendance record skipped (line %s): %s', e.row_number, e)
                continue
            key = (record.employee_id, record.date)
            if key in seen:
                logger.warning('Attendance record skipped (line %s): duplicate entry for %s on %s',
                               row_number, record.employee_id, record.date)
                continue
            seen.add(key)
            by_employee.setdefault(record.employee_id, []).append(record)

    for records in by_employee.values():
        records.sort(key=lambda r: r.date)
    logger.info('Loaded %d attendance records from %s', len(seen), path)
    return by_employee
