import os
from flask import Flask
from medrecords.extensions import db, bcrypt, migrate, limiter, cors, server_session
from medrecords.utils.error_handlers import register_error_handlers
from medrecords.commands import register_commands
from config import config


def _ensure_sqlite_dir(uri):
    """Creates the parent directory of a file-backed SQLite database."""
    prefix = 'sqlite:///'
    if uri.startswith(prefix) and ':memory:' not in uri:
        db_dir = os.path.dirname(uri[len(prefix):])
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)


def create_app(config_name=None):
    app = Flask(__name__)

    config_name = config_name or os.getenv('FLASK_CONFIG', 'default')
    config_class = config[config_name]
    app.config.from_object(config_class)

    _ensure_sqlite_dir(app.config['SQLALCHEMY_DATABASE_URI'])

    # Initialize extensions
    db.init_app(app)
    bcrypt.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)
    cors.init_app(
        app,
        origins=app.config['ALLOWED_ORIGINS'],
        supports_credentials=True,  # Session cookie must travel with requests
        allow_headers=['Content-Type', 'X-Requested-With'],
        methods=['GET', 'POST', 'DELETE', 'OPTIONS']
    )

    # Initialize app with config (logging, audit logger)
    config_class.init_app(app)
    server_session.init_app(app)

    # Make every model known to SQLAlchemy / Alembic
    from medrecords import models  # noqa: F401

    # Register blueprints
    from medrecords.api import api_bp, portal_bp
    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(portal_bp)

    # Register error handlers and commands
    register_error_handlers(app)
    register_commands(app)

    return app
