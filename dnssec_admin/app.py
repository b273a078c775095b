from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix
from datetime import datetime

from dnssec_admin.config import get_config
from dnssec_admin.api.errors import register_error_handlers
from dnssec_admin.api.limiter import configure_limiter
from dnssec_admin.api.routes import api_bp
from dnssec_admin.api.security import init_security
from dnssec_admin.database.config import DatabaseConfig
from dnssec_admin.database.models import db
from dnssec_admin.dnssec.runner import CommandRunner
from dnssec_admin.utils.logging import configure_logging

def create_app(config=None):
    """
    Create and configure the Flask application

    Args:
        config: Configuration object or dictionary

    Returns:
        Flask application instance
    """
    app = Flask(__name__)

    # Fix for running behind proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    app.config.from_object(get_config())

    # Apply any provided configuration override
    if config:
        if isinstance(config, dict):
            app.config.update(config)
        else:
            app.config.from_object(config)

    if not app.config.get('SQLALCHEMY_DATABASE_URI'):
        DatabaseConfig.validate_config()
        app.config['SQLALCHEMY_DATABASE_URI'] = DatabaseConfig.get_database_uri()

    logger = configure_logging(app)

    db.init_app(app)
    init_security(app)
    configure_limiter(app)
    register_error_handlers(app)

    cors_origins = app.config.get('CORS_ORIGINS') or ''
    CORS(app, resources={r"/api/*": {"origins": cors_origins.split(',')}})

    app.register_blueprint(api_bp)

    # Health check endpoint (no authentication required)
    @app.route('/health')
    def health_check():
        runner = CommandRunner.from_config(app.config)
        return jsonify({
            "status": "ok",
            "timestamp": datetime.utcnow().isoformat(),
            "version": app.config.get('VERSION', '1.0.0'),
            "dnssec_utility_configured": runner.configured
        })

    if not CommandRunner.from_config(app.config).configured:
        logger.warning("PDNSSEC_COMMAND is not set, DNSSEC operations are disabled")

    logger.info(f"{app.config.get('APP_NAME')} started")

    return app
