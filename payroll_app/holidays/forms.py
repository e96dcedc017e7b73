# payroll_app/holidays/forms.py

from flask_wtf import FlaskForm
from wtforms import DateField, SelectField, StringField
from wtforms.validators import DataRequired, Length, Optional, ValidationError

from payroll_app.models import HolidayType


class HolidayRangeForm(FlaskForm):
    start = DateField('From', format='%Y-%m-%d', validators=[Optional()])
    end = DateField('To', format='%Y-%m-%d', validators=[Optional()])

    def validate_end(self, field):
        if field.data and self.start.data and field.data < self.start.data:
            raise ValidationError('End date must not be before the start date.')


class HolidayForm(FlaskForm):
    """Administrative addition of a proclaimed holiday."""
    name = StringField('Holiday', validators=[DataRequired(), Length(max=100)])
    date = DateField('Date', format='%Y-%m-%d', validators=[DataRequired()])
    type = SelectField('Type', choices=[(t.value, t.label) for t in HolidayType],
                       validators=[DataRequired()])
