"""Health endpoint router composition."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse


def api_create_health_router() -> APIRouter:
    """Create health-check router.

    Returns:
        APIRouter: Router exposing `/api/health` endpoint.

    Raises:
        RuntimeError: This factory does not raise runtime errors.
    """

    router = APIRouter(prefix="/api", tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application liveness."""

        return JSONResponse(content={"ok": True}, status_code=status.HTTP_200_OK)

    return router
