# payroll_app/payroll/__init__.py

from flask import Blueprint

bp = Blueprint('payroll', __name__, url_prefix='/payroll', cli_group='payroll')

from . import routes
