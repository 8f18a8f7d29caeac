"""FastAPI application factory for the importer service."""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from actual_importer.adapters import LedgerClientFactory
from actual_importer.config import AppSettings
from actual_importer.jobs import ImportOrchestratorPort

from .routers import api_create_health_router, api_create_import_router, api_create_ledger_router


def create_api_application(
    settings: AppSettings,
    import_orchestrator: ImportOrchestratorPort,
    ledger_client_factory: LedgerClientFactory,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        import_orchestrator: Orchestrator executing grouped imports.
        ledger_client_factory: Factory creating ledger clients per request.

    Returns:
        FastAPI: Framework application instance with all routers mounted.

    Raises:
        ValueError: Raised when router dependencies are invalid.
    """

    application = FastAPI(title="Actual Importer")

    @application.exception_handler(RequestValidationError)
    async def api_request_validation_handler(_request: Request, error: RequestValidationError) -> JSONResponse:
        """Render payload validation failures in the service error shape."""

        return JSONResponse(
            content={"error": "Invalid request payload.", "details": jsonable_encoder(error.errors())},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    application.include_router(api_create_health_router())
    application.include_router(
        api_create_ledger_router(settings=settings, ledger_client_factory=ledger_client_factory)
    )
    application.include_router(
        api_create_import_router(
            settings=settings,
            import_orchestrator=import_orchestrator,
            ledger_client_factory=ledger_client_factory,
        )
    )

    return application
