import os
from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))

class Config:
    """Base configuration class."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'payroll.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    MIGRATION_DIR = os.path.join(basedir, 'migrations')

    # Payroll engine
    PAYROLL_STANDARD_TIME_IN = os.environ.get('PAYROLL_STANDARD_TIME_IN', '08:00')
    PAYROLL_STANDARD_TIME_OUT = os.environ.get('PAYROLL_STANDARD_TIME_OUT', '17:00')
    PAYROLL_GRACE_MINUTES = int(os.environ.get('PAYROLL_GRACE_MINUTES', 15))
    PAYROLL_HOURS_PER_DAY = int(os.environ.get('PAYROLL_HOURS_PER_DAY', 8))
    PAYROLL_WORKING_DAYS_PER_MONTH = int(os.environ.get('PAYROLL_WORKING_DAYS_PER_MONTH', 22))
    PAYROLL_DEFAULT_MONTHLY_SALARY = os.environ.get('PAYROLL_DEFAULT_MONTHLY_SALARY', '25000.00')
    PAYROLL_UNPAID_LEAVE_TYPE = os.environ.get('PAYROLL_UNPAID_LEAVE_TYPE', 'Unpaid')

    # Logging
    LOG_TO_STDOUT = os.environ.get('LOG_TO_STDOUT')

    @staticmethod
    def init_app(app):
        """Initialize application-specific configuration."""
        import logging

        if not app.debug and not app.testing:
            if app.config.get('LOG_TO_STDOUT'):
                handler = logging.StreamHandler()
            else:
                if not os.path.exists('logs'):
                    os.mkdir('logs')
                handler = logging.FileHandler('logs/payroll.log')
            handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            ))
            handler.setLevel(logging.INFO)
            app.logger.addHandler(handler)
            app.logger.setLevel(logging.INFO)
            # Engine modules log under the package logger
            logging.getLogger('motorph').addHandler(handler)
            logging.getLogger('motorph').setLevel(logging.INFO)
            app.logger.info('Payroll engine startup')

class DevelopmentConfig(Config):
    DEBUG = True

class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False

class ProductionConfig(Config):
    DEBUG = False

    @staticmethod
    def init_app(app):
        """Initialize production configuration with validation."""
        Config.init_app(app)

        if not os.environ.get('SECRET_KEY'):
            raise ValueError("SECRET_KEY environment variable must be set in production!")

        if not os.environ.get('DATABASE_URL'):
            raise ValueError("DATABASE_URL environment variable must be set in production!")

        app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY')
        app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL')

config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
