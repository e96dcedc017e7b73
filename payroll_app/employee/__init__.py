# payroll_app/employee/__init__.py

from flask import Blueprint

bp = Blueprint('employee', __name__, url_prefix='/employees')
# This line is CRITICAL for discovering routes
from . import routes
