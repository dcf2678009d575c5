# motorph/payroll/__init__.py

from flask import Blueprint

bp = Blueprint('payroll', __name__, url_prefix='/payroll')

# Registers the blueprint's routes
from . import routes
