# payroll_app/holidays/__init__.py

from flask import Blueprint

bp = Blueprint('holidays', __name__, url_prefix='/holidays')

from . import routes
