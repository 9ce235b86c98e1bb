"""
Portfolio Updates Service - Main Application Entry Point
Application Factory Pattern

This module initializes the Flask application with its configuration, the
subscriber store and notification dispatcher, CORS and error handling. All
actual route handling is delegated to blueprints.
"""

import logging
import os
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from config import get_config
from extensions import cors, init_notifier
from utils.errors import ServiceError

from blueprints.api import api_bp


def create_app(config_name=None, transport=None, **overrides):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        transport: Email transport to use instead of the Resend client (optional)
        **overrides: Config values applied on top of the selected configuration

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    app.config.update(overrides)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    initialize_extensions(app, transport)
    register_blueprints(app)
    register_error_handlers(app)
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio API is running'}, 200

    return app


def parse_origins(value):
    """CORS origins from a comma-separated string or a list; empty means any origin"""
    if not value:
        return '*'
    if isinstance(value, str):
        value = value.split(',')
    origins = [o.strip() for o in value if o and o.strip()]
    if not origins or '*' in origins:
        return '*'
    return origins


def initialize_extensions(app, transport=None):
    """Initialize CORS and the notifier components with the app instance"""
    cors.init_app(app, resources={r'/api/*': {'origins': parse_origins(app.config.get('CORS_ORIGINS'))}})

    notifier = init_notifier(app, transport)
    settings = notifier.settings

    app.logger.info(f"Using FROM_EMAIL: {settings.from_email or '(not set)'}")
    if not settings.resend_api_key:
        app.logger.warning("RESEND_API_KEY not set. /api/notify-project-update will not be able to send emails.")
    if not settings.from_email:
        app.logger.warning("FROM_EMAIL not set. Please configure a verified sender address for Resend.")
    if not settings.admin_configured:
        app.logger.warning("ADMIN_KEY not set. Project update broadcasts will be refused.")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(api_bp)


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(ServiceError)
    def service_error(e):
        if e.status_code >= 500:
            app.logger.error(f"{type(e).__name__}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({'message': e.description}), e.code

    @app.errorhandler(Exception)
    def internal_server_error(e):
        app.logger.exception(f"Server Error: {str(e)}")
        return jsonify({'message': 'Internal server error'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Cache-Control'] = 'no-store'
        return response


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    env = os.environ.get('FLASK_ENV', 'development')
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=app.config['PORT'],
        debug=(env == 'development')
    )
