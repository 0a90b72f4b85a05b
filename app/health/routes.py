# package imports
from flask_smorest import Blueprint
from flask.views import MethodView
from flask import current_app
import time
import psutil
import os

# project imports
from external.catalog import get_catalog

bp = Blueprint(
    "health", __name__, description="Health check endpoints", url_prefix="/health"
)


@bp.route("/")
class HealthCheck(MethodView):
    def get(self):
        """Basic health check endpoint"""
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "version": "1.0.0",
            "environment": current_app.config.get("ENV", "development"),
        }


@bp.route("/detailed")
class DetailedHealthCheck(MethodView):
    def get(self):
        """Detailed health check with catalog and system components"""
        health_status = {
            "status": "healthy",
            "timestamp": time.time(),
            "version": "1.0.0",
            "environment": current_app.config.get("ENV", "development"),
            "components": {},
        }

        catalog = get_catalog()
        active = len(catalog.active_products())
        health_status["components"]["catalog"] = {
            "status": "healthy" if active else "empty",
            "total_products": len(catalog),
            "active_products": active,
        }

        # System resources
        health_status["components"]["system"] = {
            "cpu_usage": psutil.cpu_percent(interval=None),
            "memory_usage": psutil.virtual_memory().percent,
            "disk_usage": psutil.disk_usage("/").percent,
            "load_average": os.getloadavg() if hasattr(os, "getloadavg") else None,
        }

        health_status["components"]["application"] = {
            "uptime": time.time() - current_app.start_time
            if hasattr(current_app, "start_time")
            else None,
        }

        return health_status


@bp.route("/live")
class LivenessCheck(MethodView):
    def get(self):
        """Liveness check for container orchestration"""
        return {"alive": True, "timestamp": time.time()}
