# payroll_app/__init__.py
from datetime import datetime

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import config
from payroll_app.exceptions import DataError, NoAttendanceDataError, PreconditionError, ValidationError
from payroll_app.store import PayrollStore


def _parse_clock(value):
    return datetime.strptime(value, '%H:%M').time()


def build_hours_calculator(app):
    from payroll_app.attendance.calculator import WorkHoursCalculator
    return WorkHoursCalculator(
        start_time=_parse_clock(app.config['WORKDAY_START']),
        end_time=_parse_clock(app.config['WORKDAY_END']),
        grace_minutes=int(app.config['GRACE_MINUTES']),
        lunch_minutes=int(app.config['LUNCH_MINUTES']),
    )


def create_app(config_name='default', overrides=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config[config_name])
    if overrides:
        app.config.update(overrides)

    # Initialize app-specific configuration (logging, etc.)
    config[config_name].init_app(app)

    # One store per app; loaded data is never shared between apps
    store = PayrollStore(app)

    from payroll_app.payroll.service import PayrollService
    app.extensions['payroll_service'] = PayrollService(store, hours_calculator=build_hours_calculator(app))

    # --- Register Blueprints ---
    from .employee import bp as employee_bp
    app.register_blueprint(employee_bp)

    from .attendance import bp as attendance_bp
    app.register_blueprint(attendance_bp)

    from .holidays import bp as holidays_bp
    app.register_blueprint(holidays_bp)

    from .payroll import bp as payroll_bp
    app.register_blueprint(payroll_bp)

    # --- Register Error Handlers ---
    @app.errorhandler(ValidationError)
    def validation_error(error):
        return jsonify({'error': 'validation_error', 'message': str(error), 'field': error.field}), 400

    @app.errorhandler(PreconditionError)
    def precondition_error(error):
        return jsonify({'error': 'precondition_error', 'message': str(error)}), 400

    @app.errorhandler(NoAttendanceDataError)
    def no_data_error(error):
        return jsonify({'error': 'no_data', 'message': str(error)}), 404

    @app.errorhandler(DataError)
    def data_error(error):
        return jsonify({'error': 'data_error', 'message': str(error)}), 404

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'error': error.name.lower().replace(' ', '_'), 'message': error.description}), error.code

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.exception('Unhandled error: %s', error)
        return jsonify({'error': 'internal_error', 'message': 'An unexpected error occurred.'}), 500

    return app
