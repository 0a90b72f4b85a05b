# python imports
import logging
import time

# package imports
from flask import Flask
from flask_cors import CORS
from flask_smorest import Api

# app imports
from main.config import settings
from main.logger import setup_logging
from main.errors import handle_error
from main.middleware import RequestLogMiddleware
from main.routes import register_blueprints, create_root_routes
from main.commands import register_commands
from external.catalog import init_catalog

logger = logging.getLogger(__name__)


def configure_app(app, catalog=None, config_overrides=None):
    """Configure Flask application"""
    app.config.from_object(settings)
    if config_overrides:
        app.config.update(config_overrides)

    CORS(app, supports_credentials=True, origins=["*"])

    # Initialize Flask-Smorest API
    api = Api(app)

    # Build or register the in-memory catalog
    init_catalog(app, catalog)

    # Register error handler
    app.register_error_handler(Exception, handle_error)

    return api


def create_app(catalog=None, config_overrides=None):
    """Application factory

    Args:
        catalog: Prebuilt catalog to serve; built from settings when omitted
        config_overrides: Extra Flask config applied after settings
    """
    setup_logging()

    app = Flask(__name__)
    app.wsgi_app = RequestLogMiddleware(app.wsgi_app)

    # Track application start time for health checks
    app.start_time = time.time()

    api = configure_app(app, catalog, config_overrides)

    register_blueprints(app, api)
    create_root_routes(app)
    register_commands(app)

    logger.info("Application initialized")
    return app
