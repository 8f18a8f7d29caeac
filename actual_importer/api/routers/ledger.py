"""Ledger lookup router exposing Actual account and budget listings."""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from actual_importer.adapters import LedgerClientError, LedgerClientFactory, LedgerClientPort
from actual_importer.config import AppSettings
from actual_importer.domain import LedgerConnectionConfig

from ..schemas import ApiLedgerConnectionPayload, api_resolve_ledger_config


def api_open_ledger_client(
    settings: AppSettings,
    ledger_client_factory: LedgerClientFactory,
    connection_config: LedgerConnectionConfig,
) -> LedgerClientPort | None:
    """Build a ledger client when a server URL is known or mock mode is active.

    Args:
        settings: Runtime settings providing the mock switch.
        ledger_client_factory: Factory creating clients for a connection config.
        connection_config: Resolved connection values.

    Returns:
        LedgerClientPort | None: Ready client, or None without server URL.

    Raises:
        ValueError: Raised by the factory when connection values are invalid.
    """

    if not settings.mock_actual and not connection_config.server_url:
        return None
    return ledger_client_factory(connection_config)


def api_create_ledger_router(settings: AppSettings, ledger_client_factory: LedgerClientFactory) -> APIRouter:
    """Create router listing Actual accounts and budgets.

    Args:
        settings: Runtime settings with fallback connection values.
        ledger_client_factory: Factory creating ledger clients per request.

    Returns:
        APIRouter: Router exposing `/api/actual/accounts` and `/api/actual/budgets`.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if ledger_client_factory is None:
        raise ValueError("ledger_client_factory must not be None")

    router = APIRouter(prefix="/api/actual", tags=["ledger"])

    @router.post("/accounts")
    def api_ledger_list_accounts(payload: ApiLedgerConnectionPayload | None = None) -> JSONResponse:
        """Return accounts of the configured Actual budget.

        Args:
            payload: Optional per-request connection values.

        Returns:
            JSONResponse: Accounts payload, or error payload with 400/502 status.

        Raises:
            RuntimeError: Raised when execution fails unexpectedly.
        """

        ledger_client = api_open_ledger_client(
            settings,
            ledger_client_factory,
            api_resolve_ledger_config(payload, settings),
        )
        if ledger_client is None:
            return JSONResponse(
                content={"error": "ACTUAL_SERVER_URL is missing."},
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        try:
            accounts = ledger_client.adapter_list_accounts()
        except LedgerClientError as error:
            return JSONResponse(
                content={"error": "Could not fetch accounts from Actual API.", "details": error.detail},
                status_code=status.HTTP_502_BAD_GATEWAY,
            )
        finally:
            ledger_client.adapter_close()

        payload_accounts = [{"id": account.id, "name": account.name} for account in accounts]
        return JSONResponse(content={"accounts": payload_accounts}, status_code=status.HTTP_200_OK)

    @router.post("/budgets")
    def api_ledger_list_budgets(payload: ApiLedgerConnectionPayload | None = None) -> JSONResponse:
        """Return budgets visible to the configured Actual credential.

        Args:
            payload: Optional per-request connection values.

        Returns:
            JSONResponse: Budgets payload, or error payload with 400/502 status.

        Raises:
            RuntimeError: Raised when execution fails unexpectedly.
        """

        ledger_client = api_open_ledger_client(
            settings,
            ledger_client_factory,
            api_resolve_ledger_config(payload, settings),
        )
        if ledger_client is None:
            return JSONResponse(
                content={"error": "ACTUAL_SERVER_URL is missing."},
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        try:
            budgets = ledger_client.adapter_list_budgets()
        except LedgerClientError as error:
            return JSONResponse(
                content={"error": "Could not fetch budget IDs from Actual API.", "details": error.detail},
                status_code=status.HTTP_502_BAD_GATEWAY,
            )
        finally:
            ledger_client.adapter_close()

        payload_budgets = [{"id": budget.id, "name": budget.name} for budget in budgets]
        return JSONResponse(content={"budgets": payload_budgets}, status_code=status.HTTP_200_OK)

    return router
