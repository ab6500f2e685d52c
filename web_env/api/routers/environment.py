"""Environment report router composition for the HTML page and JSON API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Response, status
from fastapi.responses import HTMLResponse, JSONResponse

from web_env.environment import EnvironmentResolutionError, EnvironmentSnapshotPort
from web_env.rendering import EnvironmentPageRenderer

logger = logging.getLogger(__name__)


def api_create_environment_router(
    snapshot_service: EnvironmentSnapshotPort,
    page_renderer: EnvironmentPageRenderer,
) -> APIRouter:
    """Create router exposing the environment page and JSON API.

    Args:
        snapshot_service: Environment snapshot service.
        page_renderer: HTML renderer for the page route.

    Returns:
        APIRouter: Router exposing `/` and `/api` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if snapshot_service is None:
        raise ValueError("snapshot_service must not be None")
    if page_renderer is None:
        raise ValueError("page_renderer must not be None")

    router = APIRouter(tags=["environment"])

    @router.get("/", response_class=HTMLResponse)
    def api_environment_page() -> Response:
        """Render a fresh environment snapshot as HTML.

        Returns:
            Response: Rendered HTML page, or a 503 error payload when
            the local network address cannot be resolved.
        """

        try:
            snapshot = snapshot_service.environment_capture()
        except EnvironmentResolutionError as error:
            logger.warning("environment capture failed: %s", error)
            payload = {
                "status": "error",
                "code": error.error_code,
                "message": str(error),
            }
            return JSONResponse(content=payload, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

        return HTMLResponse(content=page_renderer.render_page(snapshot), status_code=status.HTTP_200_OK)

    @router.get("/api")
    def api_environment_variables() -> JSONResponse:
        """Return the current process environment as a JSON object.

        Returns:
            JSONResponse: Variable name to value mapping.
        """

        snapshot = snapshot_service.environment_current()
        return JSONResponse(content=dict(snapshot.variables), status_code=status.HTTP_200_OK)

    return router


__all__ = ["api_create_environment_router"]
