# /config.py
import os
import secrets
from datetime import timedelta
import logging
from logging.handlers import RotatingFileHandler
from cachelib import FileSystemCache, SimpleCache

basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    """Base configuration for the hospital records service"""
    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)

    # Session configuration - principals live in the Flask-Session store,
    # the cookie only carries the session id
    SESSION_TYPE = 'cachelib'
    SESSION_FILE_DIR = os.environ.get('SESSION_FILE_DIR') or os.path.join(basedir, 'flask_session')
    SESSION_FILE_THRESHOLD = 500
    SESSION_FILE_MODE = 0o600
    SESSION_PERMANENT = True
    PERMANENT_SESSION_LIFETIME = timedelta(hours=int(os.environ.get('SESSION_LIFETIME_HOURS', 8)))
    SESSION_COOKIE_NAME = 'medrecords_session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = False  # Set to True in production with HTTPS

    # Database
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'data', 'medrecords.sqlite')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # Password hashing
    BCRYPT_LOG_ROUNDS = 12

    # Rate Limiting
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL') or 'memory://'
    SIGNIN_RATE_LIMIT = os.environ.get('SIGNIN_RATE_LIMIT', '10 per minute')
    SIGNUP_RATE_LIMIT = os.environ.get('SIGNUP_RATE_LIMIT', '5 per hour')

    # CORS
    ALLOWED_ORIGINS = os.environ.get('ALLOWED_ORIGINS', 'http://localhost:3000').split(',')

    # Identifier allocation
    IDENTIFIER_MAX_ATTEMPTS = int(os.environ.get('IDENTIFIER_MAX_ATTEMPTS', 10))

    # Accounts
    DEFAULT_PATIENT_PASSWORD = os.environ.get('DEFAULT_PATIENT_PASSWORD', '1111')
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')

    # Logging
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(basedir, 'logs')

    @staticmethod
    def init_app(app):
        """Initialize application-specific configuration"""
        log_dir = app.config['LOG_DIR']
        if not app.testing and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        # Server-side session store; each test app gets its own in-memory one
        if 'SESSION_CACHELIB' not in app.config:
            if app.testing:
                app.config['SESSION_CACHELIB'] = SimpleCache()
            else:
                app.config['SESSION_CACHELIB'] = FileSystemCache(
                    app.config['SESSION_FILE_DIR'],
                    threshold=app.config['SESSION_FILE_THRESHOLD'],
                    mode=app.config['SESSION_FILE_MODE']
                )

        # Configure main application logging
        if not app.debug and not app.testing:
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, 'app.log'), maxBytes=10240000, backupCount=10
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
            ))
            file_handler.setLevel(logging.INFO)
            app.logger.addHandler(file_handler)
            app.logger.setLevel(logging.INFO)
            app.logger.info('Hospital records service startup')

        # Set up the audit logger
        audit_logger = logging.getLogger('MEDRECORDS_AUDIT')
        if not audit_logger.handlers:
            if app.testing:
                audit_logger.addHandler(logging.NullHandler())
            else:
                audit_handler = RotatingFileHandler(
                    os.path.join(log_dir, 'audit.log'), maxBytes=10240000, backupCount=20
                )
                audit_handler.setFormatter(logging.Formatter('%(asctime)s - %(message)s'))
                audit_logger.addHandler(audit_handler)
            audit_logger.setLevel(logging.INFO)
            audit_logger.propagate = False  # Prevent duplicate logs

        app.audit_logger = audit_logger


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DEV_DATABASE_URL') or Config.SQLALCHEMY_DATABASE_URI
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin123')

    @staticmethod
    def init_app(app):
        Config.init_app(app)

        # Development-specific logging (less verbose)
        if not app.logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter(
                '%(asctime)s %(levelname)s: %(message)s'
            ))
            app.logger.addHandler(console_handler)
            app.logger.setLevel(logging.DEBUG)


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    BCRYPT_LOG_ROUNDS = 4
    RATELIMIT_ENABLED = False
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin123'

    @staticmethod
    def init_app(app):
        Config.init_app(app)


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True  # Requires HTTPS

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        app.logger.info('Hospital records production startup')

        if not os.environ.get('SECRET_KEY'):
            app.logger.error('SECRET_KEY not set in production!')
            raise ValueError('SECRET_KEY must be set in production')

        if not os.environ.get('ADMIN_PASSWORD'):
            app.logger.error('ADMIN_PASSWORD not set in production!')
            raise ValueError('ADMIN_PASSWORD must be set in production')


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
