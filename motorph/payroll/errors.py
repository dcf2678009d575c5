# motorph/payroll/errors.py


class PayrollError(Exception):
    """Base class for everything the payroll engine raises."""


class PayrollCalculationError(PayrollError):
    """A payroll could not be produced for an employee."""

    def __init__(self, reason, employee_id=None):
        super().__init__(reason)
        self.reason = reason
        self.employee_id = employee_id

    def to_dict(self):
        return {'error': self.reason, 'employee_id': self.employee_id}


class InvalidPayrollInputError(PayrollCalculationError):
    """Rejected before anything is computed; ``field`` names the bad input."""

    def __init__(self, field, reason, employee_id=None):
        super().__init__(reason, employee_id=employee_id)
        self.field = field

    def to_dict(self):
        data = super().to_dict()
        data['field'] = self.field
        return data


class EmployeeNotFoundError(PayrollCalculationError):

    def __init__(self, employee_id):
        super().__init__(f'Employee not found with ID: {employee_id}', employee_id=employee_id)
