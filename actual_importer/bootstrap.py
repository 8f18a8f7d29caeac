"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from actual_importer.adapters import (
    ActualHttpLedgerClient,
    LedgerClientFactory,
    LedgerClientPort,
    MockLedgerClient,
)
from actual_importer.api import create_api_application
from actual_importer.config import AppSettings, config_load_settings
from actual_importer.domain import LedgerConnectionConfig
from actual_importer.jobs import ImportJobOrchestrator, ImportOrchestratorConfig


def bootstrap_create_ledger_client_factory(settings: AppSettings) -> LedgerClientFactory:
    """Build the per-request ledger client factory for the configured mode.

    Args:
        settings: Validated runtime settings.

    Returns:
        LedgerClientFactory: Factory returning mock or HTTP clients.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    def bootstrap_create_ledger_client(connection_config: LedgerConnectionConfig) -> LedgerClientPort:
        if settings.mock_actual:
            return MockLedgerClient()
        return ActualHttpLedgerClient(
            config=connection_config,
            request_timeout_seconds=settings.actual_request_timeout_seconds,
        )

    return bootstrap_create_ledger_client


def bootstrap_create_import_orchestrator(settings: AppSettings) -> ImportJobOrchestrator:
    """Build import orchestrator from runtime settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        ImportJobOrchestrator: Configured orchestrator instance.

    Raises:
        ValueError: Raised when orchestration config values are invalid.
    """

    return ImportJobOrchestrator(
        config=ImportOrchestratorConfig(preview_sample_size=settings.import_preview_sample_size),
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional preloaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(
        settings=resolved_settings,
        import_orchestrator=bootstrap_create_import_orchestrator(resolved_settings),
        ledger_client_factory=bootstrap_create_ledger_client_factory(resolved_settings),
    )
