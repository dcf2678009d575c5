# motorph/payroll/forms.py

from flask_wtf import FlaskForm
from wtforms import DateField
from wtforms.validators import DataRequired

class PayrollPeriodForm(FlaskForm):
    """Pay period taken from the query string of the payroll preview endpoints."""
    class Meta:
        csrf = False

    start = DateField('Pay Period Start', format='%Y-%m-%d', validators=[DataRequired()])
    end = DateField('Pay Period End', format='%Y-%m-%d', validators=[DataRequired()])

    def first_error(self):
        for name, errors in self.errors.items():
            return name, errors[0]
        return None, None
