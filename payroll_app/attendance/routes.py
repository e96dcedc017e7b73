# payroll_app/attendance/routes.py

from flask import jsonify

from payroll_app.attendance import bp
from payroll_app.attendance.summary import summarize_attendance, weekly_breakdown
from payroll_app.payroll.forms import PayPeriodForm
from payroll_app.payroll.periods import get_pay_period
from payroll_app.web import bind_form, form_errors, get_service


@bp.route('/<employee_id>')
def employee_attendance(employee_id):
    """Per-day work-hours breakdown for one cutoff period, with weekly and period totals."""
    form = bind_form(PayPeriodForm)
    if not form.validate():
        return form_errors(form)

    service = get_service()
    employee = service.get_employee(employee_id)
    period = get_pay_period(form.year.data, form.month.data, form.period_type.data)
    daily = service.daily_hours_for(employee.employee_id, period)

    weeks = [
        {'week_start': start.isoformat(), 'week_end': end.isoformat(), 'totals': totals.to_dict()}
        for start, end, totals in weekly_breakdown(daily)
    ]
    return jsonify({
        'employee_id': employee.employee_id,
        'employee_name': employee.full_name,
        'period': period.to_dict(),
        'days': [d.to_dict() for d in daily],
        'weeks': weeks,
        'summary': summarize_attendance(daily).to_dict(),
    })
