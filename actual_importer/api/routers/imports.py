"""Import API router running dry-run previews and live grouped imports."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from actual_importer.adapters import LedgerClientFactory
from actual_importer.config import AppSettings
from actual_importer.jobs import GroupImportError, ImportConfigurationError, ImportOrchestratorPort

from ..schemas import ApiImportRequestPayload, api_resolve_ledger_config, api_serialize_import_result
from .ledger import api_open_ledger_client


def api_create_import_router(
    settings: AppSettings,
    import_orchestrator: ImportOrchestratorPort,
    ledger_client_factory: LedgerClientFactory,
) -> APIRouter:
    """Create import router.

    Args:
        settings: Runtime settings with fallback connection values.
        import_orchestrator: Orchestrator executing grouped imports.
        ledger_client_factory: Factory creating ledger clients for live imports.

    Returns:
        APIRouter: Router exposing `/api/import`.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if import_orchestrator is None:
        raise ValueError("import_orchestrator must not be None")
    if ledger_client_factory is None:
        raise ValueError("ledger_client_factory must not be None")

    router = APIRouter(prefix="/api", tags=["import"])

    @router.post("/import")
    def api_import_run(payload: ApiImportRequestPayload) -> JSONResponse:
        """Run one dry-run or live import.

        Args:
            payload: Rows, mapping, grouping and connection values.

        Returns:
            JSONResponse: Import result, or error payload with 400/502 status.

        Raises:
            RuntimeError: Raised when execution fails unexpectedly.
        """

        import_request = payload.api_to_import_request()
        ledger_client = None
        if not import_request.dry_run:
            ledger_client = api_open_ledger_client(
                settings,
                ledger_client_factory,
                api_resolve_ledger_config(payload.actual_config, settings),
            )

        try:
            import_result = import_orchestrator.job_execute_import(import_request, ledger_client)
        except ImportConfigurationError as error:
            return JSONResponse(content={"error": str(error)}, status_code=status.HTTP_400_BAD_REQUEST)
        except GroupImportError as error:
            return JSONResponse(
                content={"error": str(error), "details": error.detail},
                status_code=status.HTTP_502_BAD_GATEWAY,
            )
        finally:
            if ledger_client is not None:
                ledger_client.adapter_close()

        return JSONResponse(content=api_serialize_import_result(import_result), status_code=status.HTTP_200_OK)

    return router
