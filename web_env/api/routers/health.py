"""Health endpoint router composition for liveness and readiness probes."""

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from web_env.domain import HEALTH_RESPONSE_BODY


def api_create_health_router() -> APIRouter:
    """Create health-check router.

    Returns:
        APIRouter: Router exposing `/health` endpoint.
    """

    router = APIRouter(tags=["health"])

    @router.get("/health", response_class=PlainTextResponse)
    def api_health_status() -> PlainTextResponse:
        """Return the constant liveness body `OK`.

        Returns:
            PlainTextResponse: Identical bytes on every call.
        """

        return PlainTextResponse(content=HEALTH_RESPONSE_BODY, status_code=status.HTTP_200_OK)

    return router
