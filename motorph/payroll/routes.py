# motorph/payroll/routes.py

from flask import current_app, jsonify, request
from motorph.payroll import bp
from .calculator import PayrollCalculator
from .errors import EmployeeNotFoundError, InvalidPayrollInputError, PayrollCalculationError
from .forms import PayrollPeriodForm
from .settings import PayrollSettings
from .sources import SqlAlchemyPayrollSource

FIELD_NAMES = {'start': 'period_start', 'end': 'period_end'}


def get_calculator():
    return PayrollCalculator(SqlAlchemyPayrollSource(), PayrollSettings.from_mapping(current_app.config))


def read_period():
    """Returns (start, end), or raises InvalidPayrollInputError for a bad query string."""
    form = PayrollPeriodForm(request.args)
    if not form.validate():
        name, message = form.first_error()
        raise InvalidPayrollInputError(FIELD_NAMES.get(name, name), f'{name}: {message}')
    return form.start.data, form.end.data


@bp.errorhandler(PayrollCalculationError)
def payroll_error(error):
    if isinstance(error, InvalidPayrollInputError):
        status = 400
    elif isinstance(error, EmployeeNotFoundError):
        status = 404
    else:
        status = 500
    current_app.logger.warning('Payroll request failed: %s', error.reason)
    return jsonify(error.to_dict()), status


@bp.route('/employee/<int:employee_id>', methods=['GET'])
def employee_payroll(employee_id):
    period_start, period_end = read_period()
    result = get_calculator().calculate(employee_id, period_start, period_end)
    return jsonify(result.to_dict())


@bp.route('/run', methods=['GET'])
def payroll_run():
    """Preview payroll for every active employee; nothing is saved."""
    period_start, period_end = read_period()
    calculator = get_calculator()
    employee_ids = calculator.source.get_active_employee_ids()

    if not employee_ids:
        current_app.logger.info('No active employees found for %s to %s', period_start, period_end)

    run = calculator.calculate_many(employee_ids, period_start, period_end)
    current_app.logger.info('Payroll preview for %d employees (%d failed)',
                            len(run.results), len(run.failures))
    return jsonify(run.to_dict())
