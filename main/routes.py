from importlib import import_module
import logging
from main.config import settings

logger = logging.getLogger(__name__)


def register_blueprints(app, api):
    """Register the blueprint of every app module"""
    modules = ["search", "products", "categories", "health"]
    for module in modules:
        mod = import_module(f"app.{module}.routes")
        bp = getattr(mod, "bp", None) or getattr(mod, f"{module}_bp")

        # Register with Flask-Smorest API instead of directly with app
        api.register_blueprint(bp)
        logger.info(f"Registered blueprint for {module}")


def create_root_routes(app):
    @app.route("/status")
    def status():
        return {"status": "running", "environment": settings.ENV}
