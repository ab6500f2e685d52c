"""FastAPI application factory for the environment report service.

Only three routes exist: `/`, `/health` and `/api`. The generated OpenAPI and
documentation routes are disabled so that every other path is a plain 404.
"""

import logging
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from web_env.config import AppSettings
from web_env.environment import EnvironmentSnapshotPort
from web_env.rendering import EnvironmentPageRenderer

from .routers import api_create_environment_router, api_create_health_router

logger = logging.getLogger(__name__)


def create_api_application(
    settings: AppSettings,
    snapshot_service: EnvironmentSnapshotPort,
    page_renderer: EnvironmentPageRenderer,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        snapshot_service: Environment snapshot service used by page and API routes.
        page_renderer: HTML renderer used by the page route.

    Returns:
        FastAPI: Framework application instance with all routes registered.

    Raises:
        ValueError: Raised when a dependency is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(title="Web Env", docs_url=None, redoc_url=None, openapi_url=None)
    logger.info(
        "environment report application created (publish_to_process_environment=%s)",
        settings.publish_to_process_environment,
    )

    @application.middleware("http")
    async def api_log_request(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Log method and path of every inbound request.

        Args:
            request: Inbound request.
            call_next: Downstream ASGI handler.

        Returns:
            Response: Response produced by the routed handler.
        """

        try:
            logger.info("%s %s", request.method, request.url.path)
        except Exception:  # pylint: disable=broad-exception-caught
            # Request logging never affects the response.
            pass
        return await call_next(request)

    application.include_router(api_create_health_router())
    application.include_router(
        api_create_environment_router(
            snapshot_service=snapshot_service,
            page_renderer=page_renderer,
        )
    )

    return application
