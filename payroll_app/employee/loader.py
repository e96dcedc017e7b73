# payroll_app/employee/loader.py

import csv
import logging
import re
from decimal import Decimal, InvalidOperation

from payroll_app.exceptions import DataError
from payroll_app.models import Employee, ZERO

logger = logging.getLogger(__name__)

EMPLOYEE_COLUMNS = (
    'employee_id', 'last_name', 'first_name', 'birthday', 'address', 'phone_number',
    'sss_number', 'philhealth_number', 'tin_number', 'pagibig_number', 'status', 'position',
    'immediate_supervisor', 'basic_salary', 'rice_subsidy', 'phone_allowance',
    'clothing_allowance', 'gross_semi_monthly_rate', 'hourly_rate_given',
)
MONEY_COLUMNS = EMPLOYEE_COLUMNS[13:]

CURRENCY_PREFIX = re.compile(r'^(PHP|Php|php|₱|P)\s*')


def parse_amount(value, column='amount'):
    """Parse a currency-formatted cell such as '₱90,000.00' into a Decimal."""
    if value is None:
        return ZERO
    text = CURRENCY_PREFIX.sub('', str(value).strip())
    text = text.replace(',', '').replace(' ', '')
    if not text:
        return ZERO
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise DataError(f'Invalid {column} value: {value!r}')
    if not amount.is_finite():
        raise DataError(f'Invalid {column} value: {value!r}')
    return amount


def employee_from_row(row, row_number=None):
    if len(row) < len(EMPLOYEE_COLUMNS):
        raise DataError(
            f'Incomplete employee row: expected {len(EMPLOYEE_COLUMNS)} columns, got {len(row)}',
            row_number=row_number,
        )
    values = dict(zip(EMPLOYEE_COLUMNS, (cell.strip() for cell in row)))
    if not values['employee_id']:
        raise DataError('Employee row has no employee id', row_number=row_number)
    try:
        for column in MONEY_COLUMNS:
            values[column] = parse_amount(values[column], column)
    except DataError as e:
        raise DataError(str(e), row_number=row_number) from e
    if values['basic_salary'] < 0:
        raise DataError(f"Negative basic salary for employee {values['employee_id']}", row_number=row_number)
    return Employee(**values)


def load_employees(path):
    """Read the employee master file into a dict keyed by employee id.

    Malformed rows are logged and skipped; the first row for an id wins.
    """
    employees = {}
    with open(path, newline='', encoding='utf-8-sig') as f:
        reader = csv.reader(f)
        next(reader, None)  # header
        for row_number, row in enumerate(reader, start=2):
            if not any(cell.strip() for cell in row):
                continue
            try:
                employee = employee_from_row(row, row_number)
            except DataError as e:
                logger.warning('Employee record skipped (line %s): %s', e.row_number, e)
                continue
            if employee.employee_id in employees:
                logger.warning('Employee record skipped (line %s): duplicate id %s',
                               row_number, employee.employee_id)
                continue
            employees[employee.employee_id] = employee
    logger.info('Loaded %d employees from %s', len(employees), path)
    return employees
