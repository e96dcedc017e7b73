# payroll_app/holidays/routes.py

from flask import current_app, jsonify

from payroll_app.holidays import bp
from payroll_app.holidays.forms import HolidayForm, HolidayRangeForm
from payroll_app.models import Holiday, HolidayType
from payroll_app.payroll.periods import current_pay_period
from payroll_app.web import bind_form, form_errors, get_store


@bp.route('/', methods=['GET'])
def list_holidays():
    """Holidays between ``start`` and ``end``.

    A missing bound comes from the cutoff window containing the other bound,
    or containing today when neither is given.
    """
    form = bind_form(HolidayRangeForm)
    if not form.validate():
        return form_errors(form)

    start, end = form.start.data, form.end.data
    if start is None or end is None:
        period = current_pay_period(current_app.config['TIMEZONE'], today=start or end)
        start = start or period.start_date
        end = end or period.end_date

    holidays = get_store().calendar.get_holidays_in_range(start, end)
    return jsonify({
        'start': start.isoformat(),
        'end': end.isoformat(),
        'holidays': [h.to_dict() for h in holidays],
    })


@bp.route('/', methods=['POST'])
def add_holiday():
    form = bind_form(HolidayForm)
    if not form.validate():
        return form_errors(form)

    holiday = Holiday(
        name=form.name.data.strip(),
        date=form.date.data,
        type=HolidayType(form.type.data),
    )
    # Duplicate dates raise ValidationError -> 400
    get_store().add_holiday(holiday)
    return jsonify(holiday.to_dict()), 201
