# payroll_app/payroll/forms.py

from flask_wtf import FlaskForm
from wtforms import IntegerField, SelectField, StringField
from wtforms.validators import DataRequired, NumberRange, Optional

from payroll_app.models import PeriodType

PERIOD_CHOICES = [
    (PeriodType.MID_MONTH.value, 'Mid-month (paid on the 15th)'),
    (PeriodType.END_MONTH.value, 'End-month (paid on the last day)'),
]


class PayPeriodForm(FlaskForm):
    """Year, month and semi-monthly run a payroll request refers to."""
    year = IntegerField('Year', validators=[DataRequired(), NumberRange(min=2000, max=2100)])
    month = IntegerField('Month', validators=[DataRequired(), NumberRange(min=1, max=12)])
    period_type = SelectField('Pay Period', choices=PERIOD_CHOICES, validators=[DataRequired()])


class RunPayrollForm(PayPeriodForm):
    """Payroll run for the whole workforce or a single employee."""
    employee_id = StringField('Employee ID', validators=[Optional()])
