"Handles logging configuration for the service"
import logging.config
from typing import Dict, Any

from signup_api.core.config import settings


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Initialize logging configuration"""
    level = (level or settings.LOG_LEVEL).upper()
    formatter = log_format or settings.LOG_FORMAT
    log_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": formatter if formatter in ("default", "json") else "default",
            },
        },
        "root": {"level": level, "handlers": ["console"]},
    }

    #Sets logging configuration across modules
    logging.config.dictConfig(log_config)
