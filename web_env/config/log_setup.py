"""Process-wide logging configuration."""

import logging
from logging.config import dictConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def config_configure_logging(level: str = "INFO") -> None:
    """Install one stream handler shared by the application and uvicorn loggers.

    Handler failures are reported by `logging` itself and never raised into
    request handling.

    Args:
        level: Standard library logging level name.

    Returns:
        None: Logging is configured as a side effect.
    """

    logging.raiseExceptions = False
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": LOG_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                "web_env": {"handlers": ["console"], "level": level, "propagate": False},
                "uvicorn": {"handlers": ["console"], "level": level, "propagate": False},
                "uvicorn.error": {"level": level},
            },
        }
    )
