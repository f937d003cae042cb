from flask import Flask, jsonify, request
import click
from werkzeug.exceptions import HTTPException
from .extensions import db, migrate, bcrypt, jwt
from .exceptions import ApiError
import logging
import os

logger = logging.getLogger(__name__)


def create_app(config_name=None):
    """Create Flask application factory"""
    app = Flask(__name__)

    # Load configuration; built once here and reached only through app.config
    from vetclinic.config import config, get_config
    config_class = config.get(config_name, config['default']) if config_name else get_config()
    app.config.from_object(config_class)

    # Production refuses to start with a default signing secret
    if hasattr(config_class, 'validate'):
        config_class.validate(app.config)

    # Setup basic logging
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s: %(message)s'
    )

    # Initialize extensions first (before error handlers)
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)
    jwt.init_app(app)

    # Initialize CORS
    from vetclinic.utils.cors import init_cors
    init_cors(app)

    register_error_handlers(app)

    # Setup file logging
    if not app.debug and not app.testing:
        from logging.handlers import RotatingFileHandler

        log_dir = app.config.get('LOG_DIR', 'logs')
        if not os.path.exists(log_dir):
            os.mkdir(log_dir)

        file_handler = RotatingFileHandler(
            os.path.join(log_dir, 'app.log'),
            maxBytes=10240000,
            backupCount=10
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)
        app.logger.setLevel(logging.INFO)
        app.logger.info('Application startup')

    @app.before_request
    def log_request():
        """Log requests in production"""
        if not app.debug and not app.testing:
            logger.info(f"{request.method} {request.path} - {request.remote_addr}")

    # Authorization gate runs after request logging, before every view
    from vetclinic.utils.authorization import init_authorization
    init_authorization(app)

    # Security headers middleware
    @app.after_request
    def set_security_headers(response):
        """Add security headers to all responses"""
        if not app.debug:
            response.headers['X-Content-Type-Options'] = 'nosniff'
            response.headers['X-Frame-Options'] = 'DENY'
            response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
            if request.is_secure:
                response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response

    with app.app_context():
        # Import models to register them with SQLAlchemy
        from . import models  # noqa: F401

        # Register blueprints
        from .routes import users_bp, pets_bp, appointments_bp, medical_records_bp, treatments_bp, health_bp
        app.register_blueprint(health_bp)  # Register health check first
        app.register_blueprint(users_bp)
        app.register_blueprint(pets_bp)
        app.register_blueprint(appointments_bp)
        app.register_blueprint(medical_records_bp)
        app.register_blueprint(treatments_bp)

    register_cli(app)

    return app


def register_error_handlers(app):
    """Render every failure as {'success': False, 'error': ...}"""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            logger.error(f"{request.method} {request.path} failed: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        message = 'Endpoint not found' if error.code == 404 else error.description
        return jsonify({
            'success': False,
            'error': message
        }), error.code

    @app.errorhandler(Exception)
    def handle_exception(e):
        # Never echo internal error text to the client
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        return jsonify({
            'success': False,
            'error': 'Internal server error. Check server logs for details.'
        }), 500


def register_cli(app: Flask) -> None:
    """
    Adds small helper CLI commands:
    - flask create-db: create tables using the configured database
    - flask drop-db: drop all tables (use with caution)
    - flask create-users: create tables plus one default user per role
    """

    @app.cli.command("create-db")
    def create_db_command():
        """Create database tables if they do not exist."""
        db.create_all()
        click.echo("Database tables created.")

    @app.cli.command("drop-db")
    def drop_db_command():
        """Drop all database tables. This is destructive."""
        db.drop_all()
        click.echo("Database tables dropped.")

    @app.cli.command("create-users")
    def create_users_command():
        """Create the default Admin, Doctor and Staff accounts."""
        from vetclinic.seeds import seed_default_users
        created = seed_default_users()
        click.echo(f"Created {len(created)} user(s).")
