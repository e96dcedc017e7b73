import os
from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))


def _env_int(name, default):
    value = os.environ.get(name)
    return int(value) if value not in (None, '') else default


class Config:
    """Base configuration class."""
    # SECRET_KEY must be set via environment variable in production
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Flat-file inputs, loaded once at startup
    EMPLOYEE_CSV = os.environ.get('EMPLOYEE_CSV') or os.path.join(basedir, 'data', 'employees.csv')
    ATTENDANCE_CSV = os.environ.get('ATTENDANCE_CSV') or os.path.join(basedir, 'data', 'attendance.csv')
    HOLIDAY_TABLE = None  # None -> built-in proclaimed holidays

    # Work schedule
    TIMEZONE = os.environ.get('TIMEZONE', 'Asia/Manila')
    WORKDAY_START = os.environ.get('WORKDAY_START', '08:00')
    WORKDAY_END = os.environ.get('WORKDAY_END', '17:00')
    GRACE_MINUTES = _env_int('GRACE_MINUTES', 10)
    LUNCH_MINUTES = _env_int('LUNCH_MINUTES', 60)

    # JSON API only
    WTF_CSRF_ENABLED = False

    # Logging
    LOG_TO_STDOUT = os.environ.get('LOG_TO_STDOUT')

    @staticmethod
    def init_app(app):
        """Initialize application-specific configuration."""
        import logging
        from logging import StreamHandler

        if not app.debug and not app.testing:
            formatter = logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            )
            if app.config.get('LOG_TO_STDOUT'):
                handler = StreamHandler()
            else:
                if not os.path.exists('logs'):
                    os.mkdir('logs')
                handler = logging.FileHandler('logs/payroll.log')
            handler.setFormatter(formatter)
            handler.setLevel(logging.INFO)
            app.logger.addHandler(handler)
            app.logger.setLevel(logging.INFO)

            engine_logger = logging.getLogger('payroll_app')
            engine_logger.addHandler(handler)
            engine_logger.setLevel(logging.INFO)
            app.logger.info('Payroll engine startup')


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    EMPLOYEE_CSV = None
    ATTENDANCE_CSV = None


class ProductionConfig(Config):
    DEBUG = False
    # In production, these must be set via environment variables
    # Validation happens in init_app() method

    @staticmethod
    def init_app(app):
        """Initialize production configuration with validation."""
        Config.init_app(app)  # Call parent init_app for logging

        # Validate required environment variables
        if not os.environ.get('SECRET_KEY'):
            raise ValueError("SECRET_KEY environment variable must be set in production!")

        for name in ('EMPLOYEE_CSV', 'ATTENDANCE_CSV'):
            if not os.environ.get(name):
                raise ValueError(f"{name} environment variable must be set in production!")

        # Set production values
        app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY')
        app.config['EMPLOYEE_CSV'] = os.environ.get('EMPLOYEE_CSV')
        app.config['ATTENDANCE_CSV'] = os.environ.get('ATTENDANCE_CSV')


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
