import logging
import logging.config
from main.config import settings


def setup_logging():
    """Console and file logging; per-package levels decide what gets through"""
    settings.LOG_DIR.mkdir(exist_ok=True)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
            "file": {
                "class": "logging.FileHandler",
                "filename": settings.LOG_DIR / "qavah.log",
                "formatter": "standard",
            },
        },
        "loggers": {
            "": {
                "handlers": ["console", "file"],
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            "app": {"level": settings.LOG_LEVEL},
            # Per-request search summaries are logged at debug
            "app.search": {"level": settings.SEARCH_LOG_LEVEL},
            "external.catalog": {"level": settings.CATALOG_LOG_LEVEL},
            "werkzeug": {
                "handlers": ["console", "file"],
                "level": "INFO",
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(config)
