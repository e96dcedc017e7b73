# payroll_app/payroll/deductions.py

import logging
from decimal import Decimal

from payroll_app.models import DeductionResult, PeriodType, ZERO, to_money

logger = logging.getLogger(__name__)

# --- SSS CONTRIBUTION TABLE ---
# (bracket_upper_limit_exclusive, employee_share)
# Floor of 135.00 below 3,250; +22.50 for every 500 bracket after that.
SSS_TABLE = [
    (Decimal('3250.00') + Decimal('500.00') * i, Decimal('135.00') + Decimal('22.50') * i)
    for i in range(44)
]
SSS_MAX_CONTRIBUTION = Decimal('1125.00')


def calculate_sss(monthly_salary):
    """Employee share of SSS for the month, from the bracket table."""
    for upper_limit, contribution in SSS_TABLE:
        if monthly_salary < upper_limit:
            return contribution
    return SSS_MAX_CONTRIBUTION


# --- PHILHEALTH CONTRIBUTION TABLE ---
# 3% premium rate, 50/50 split (Employee/Employer)
# Salary Floor: 10,000, Ceiling: 60,000
PHILHEALTH_RATE = Decimal('0.03')
PHILHEALTH_FLOOR = Decimal('10000.00')
PHILHEALTH_CEILING = Decimal('60000.00')


def calculate_philhealth(monthly_salary):
    if monthly_salary <= PHILHEALTH_FLOOR:
        total_premium = PHILHEALTH_FLOOR * PHILHEALTH_RATE
    elif monthly_salary >= PHILHEALTH_CEILING:
        total_premium = PHILHEALTH_CEILING * PHILHEALTH_RATE
    else:
        total_premium = monthly_salary * PHILHEALTH_RATE
    # Employee share is 50%
    return to_money(total_premium / 2)


# --- PAG-IBIG (HDMF) CONTRIBUTION ---
PAGIBIG_LOW_INCOME_LIMIT = Decimal('1500.00')
PAGIBIG_MAX_CONTRIBUTION = Decimal('100.00')


def calculate_pagibig(monthly_salary):
    # 1% if salary is 1,500 or less, 2% otherwise, capped at 100
    if monthly_salary <= PAGIBIG_LOW_INCOME_LIMIT:
        contribution = monthly_salary * Decimal('0.01')
    else:
        contribution = monthly_salary * Decimal('0.02')
    return to_money(min(contribution, PAGIBIG_MAX_CONTRIBUTION))


# --- WITHHOLDING TAX ---
# (bracket_upper_limit, excess_over, base_tax, tax_rate_percent)
TAX_EXEMPT_LIMIT = Decimal('20833.00')
TAX_TABLE = [
    (Decimal('33332.00'), Decimal('20833.00'), Decimal('0.00'), 20),
    (Decimal('66666.00'), Decimal('33333.00'), Decimal('2500.00'), 25),
    (Decimal('166666.00'), Decimal('66667.00'), Decimal('10833.00'), 30),
    (Decimal('666666.00'), Decimal('166667.00'), Decimal('40833.33'), 32),
    (None, Decimal('666667.00'), Decimal('200833.33'), 35),
]


def calculate_withholding_tax(taxable_income):
    """Progressive withholding tax on the taxable income of a pay period."""
    if taxable_income <= TAX_EXEMPT_LIMIT:
        return ZERO

    for bracket in TAX_TABLE:
        upper_limit = bracket[0]
        if upper_limit is None or taxable_income <= upper_limit:
            break
    _, excess_over, base_tax, tax_rate_percent = bracket
    excess = max(taxable_income - excess_over, ZERO)
    tax = base_tax + (excess * (Decimal(str(tax_rate_percent)) / 100))
    return to_money(tax)


# --- MAIN DEDUCTIONS FUNCTION ---

def _non_negative(value, name):
    value = Decimal(value or 0)
    if value < 0:
        logger.warning('Negative %s (%s) provided for statutory deductions. Using 0.', name, value)
        return ZERO
    return value


def calculate_deductions(period_gross, period_type, full_monthly_gross):
    """
    Statutory deductions for one semi-monthly run.

    Contributions (SSS, PhilHealth, Pag-IBIG) are withheld in full on the
    mid-month run and keyed on the full monthly gross. Withholding tax is
    withheld on the end-month run, on the period's own gross.

    Args:
        period_gross: Gross pay of the cutoff period.
        period_type (PeriodType): Mid-month or end-month run.
        full_monthly_gross: Monthly basic salary used for the contribution brackets.

    Returns:
        DeductionResult
    """
    period_type = PeriodType.parse(period_type)
    period_gross = _non_negative(period_gross, 'period gross')
    full_monthly_gross = _non_negative(full_monthly_gross, 'monthly gross')

    if period_type is PeriodType.MID_MONTH:
        return DeductionResult(
            sss=calculate_sss(full_monthly_gross),
            philhealth=calculate_philhealth(full_monthly_gross),
            pagibig=calculate_pagibig(full_monthly_gross),
            withholding_tax=ZERO,
        )

    return DeductionResult(withholding_tax=calculate_withholding_tax(period_gross))
