import importlib.util
import logging
import time
from logging.config import dictConfig
from typing import Any, Dict, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from string_analyzer.config import Settings, settings as default_settings

# ---------------------------------------------------
# Colorlog Availability Check
# ---------------------------------------------------
COLORLOG_AVAILABLE = importlib.util.find_spec("colorlog") is not None

LOGGER_NAME = "string_analyzer"


# ---------------------------------------------------
# Logging Configuration
# ---------------------------------------------------
def build_logging_config(settings: Optional[Settings] = None) -> Dict[str, Any]:
    settings = settings or default_settings
    log_level = settings.LOG_LEVEL.upper()

    formatters: Dict[str, Any] = {
        "default": {
            "format": "[%(asctime)s] %(levelname)s [%(name)s] in %(module)s: %(message)s",
        },
    }
    if COLORLOG_AVAILABLE:
        formatters["color"] = {
            "()": "colorlog.ColoredFormatter",
            "format": "%(log_color)s[%(asctime)s] %(levelname)s [%(name)s] in %(module)s: %(message)s",
            "log_colors": {
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "color" if COLORLOG_AVAILABLE else "default",
                "level": settings.CONSOLE_LOG_LEVEL.upper(),
            },
        },
        "loggers": {
            # Our own access line replaces uvicorn's
            "uvicorn.access": {"level": "WARNING"},
            LOGGER_NAME: {
                "level": log_level,
                "handlers": ["console"],
                "propagate": False,
            },
            f"{LOGGER_NAME}.request": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["console"],
        },
    }


# ---------------------------------------------------
# Initialize Logging
# ---------------------------------------------------
def init_logging(settings: Optional[Settings] = None) -> None:
    dictConfig(build_logging_config(settings))


# ---------------------------------------------------
# Request Logging Middleware
# ---------------------------------------------------
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        logger = logging.getLogger(f"{LOGGER_NAME}.request")
        start_time = time.perf_counter()

        response = await call_next(request)

        duration = (time.perf_counter() - start_time) * 1000
        logger.info(
            "%s %s -> %s (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration,
        )
        return response
