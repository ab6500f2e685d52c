"""Main module entrypoint for local runtime execution.

This module validates startup configuration, configures logging and launches
the FastAPI service.
"""

import logging

import uvicorn

from web_env.bootstrap import bootstrap_create_application
from web_env.config import SettingsLoadError, config_configure_logging, config_load_settings

logger = logging.getLogger("web_env.main")


def main() -> None:
    """Run the HTTP service until an external signal stops it.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when settings are invalid or the socket cannot be bound.
    """

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        config_configure_logging()
        logger.error("%s", error)
        raise SystemExit(1) from error

    config_configure_logging(settings.log_level)
    application = bootstrap_create_application(settings)
    logger.info("listening on %s:%d", settings.application_host, settings.application_port)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_config=None,
        access_log=False,
    )


if __name__ == "__main__":
    main()
