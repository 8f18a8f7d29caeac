"""Typed interfaces and errors for job-layer orchestration responsibilities."""

from __future__ import annotations

from typing import Protocol

from actual_importer.adapters import LedgerClientPort
from actual_importer.domain import ImportRequest, ImportResult


class ImportConfigurationError(ValueError):
    """Raised when live import lacks connection settings or a group account.

    Attributes:
        group_key: Group being processed when the error surfaced, if any.
    """

    def __init__(self, message: str, group_key: str | None = None):
        super().__init__(message)
        self.group_key = group_key


class GroupImportError(RuntimeError):
    """Raised when the ledger call for one group failed and the import was aborted.

    Attributes:
        group_key: Group whose ledger call failed.
        detail: Upstream detail message forwarded to the caller.
    """

    def __init__(self, message: str, group_key: str, detail: str):
        super().__init__(message)
        self.group_key = group_key
        self.detail = detail


class ImportOrchestratorPort(Protocol):
    """Port definition for running one grouped import request."""

    def job_execute_import(
        self,
        request: ImportRequest,
        ledger_client: LedgerClientPort | None = None,
    ) -> ImportResult:
        """Execute one import request.

        Args:
            request: Engine input rows, mapping and grouping options.
            ledger_client: Ledger client used in live mode; unused in dry-run.

        Returns:
            ImportResult: Per-group summaries and totals.

        Raises:
            ImportConfigurationError: Raised when live mode lacks client or account.
            GroupImportError: Raised when one group's ledger call fails.
        """
