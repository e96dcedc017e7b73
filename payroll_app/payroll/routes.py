# payroll_app/payroll/routes.py

import json

import click
from flask import current_app, jsonify

from payroll_app.payroll import bp
from payroll_app.payroll.forms import PayPeriodForm, RunPayrollForm
from payroll_app.exceptions import PayrollError
from payroll_app.models import PeriodType, ZERO
from payroll_app.web import bind_form, form_errors, get_service


def _run_totals(results):
    total_gross = sum((r.gross_pay for r in results), ZERO)
    total_deductions = sum((r.deductions.total for r in results), ZERO)
    total_net = sum((r.net_pay for r in results), ZERO)
    return {
        'employees': len(results),
        'total_gross_pay': str(total_gross),
        'total_deductions': str(total_deductions),
        'total_net_pay': str(total_net),
    }


@bp.route('/<employee_id>', methods=['GET', 'POST'])
def employee_payroll(employee_id):
    form = bind_form(PayPeriodForm)
    if not form.validate():
        return form_errors(form)

    result = get_service().run_for_employee(
        employee_id, form.year.data, form.month.data, PeriodType.parse(form.period_type.data)
    )
    return jsonify(result.to_dict())


@bp.route('/run', methods=['GET', 'POST'])
def run_payroll():
    form = bind_form(RunPayrollForm)
    if not form.validate():
        return form_errors(form)

    service = get_service()
    period_type = PeriodType.parse(form.period_type.data)
    if form.employee_id.data:
        results = [service.run_for_employee(form.employee_id.data, form.year.data, form.month.data, period_type)]
    else:
        results = service.run_for_all(form.year.data, form.month.data, period_type)

    current_app.logger.info('Payroll run %s-%02d (%s) processed for %d employees.',
                            form.year.data, form.month.data, period_type.value, len(results))
    return jsonify({
        'summary': _run_totals(results),
        'payslips': [r.to_dict() for r in results],
    })


# --- CLI: flask payroll run ---

@bp.cli.command('run')
@click.option('--year', type=int, required=True)
@click.option('--month', type=click.IntRange(1, 12), required=True)
@click.option('--period', 'period_type', type=click.Choice([p.value for p in PeriodType]), required=True)
@click.option('--employee', 'employee_id', default=None, help='Process a single employee id.')
def run_payroll_command(year, month, period_type, employee_id):
    """Compute payroll from the configured CSV files and print it as JSON."""
    service = get_service()
    try:
        if employee_id:
            results = [service.run_for_employee(employee_id, year, month, period_type)]
        else:
            results = service.run_for_all(year, month, period_type)
    except PayrollError as e:
        raise click.ClickException(str(e))
    payload = {'summary': _run_totals(results), 'payslips': [r.to_dict() for r in results]}
    click.echo(json.dumps(payload, indent=2))
