"""Job-layer import orchestrator driving grouped, sequential ledger imports."""

from __future__ import annotations

from dataclasses import dataclass

from actual_importer.adapters import LedgerClientError, LedgerClientPort
from actual_importer.domain import GroupResult, ImportRequest, ImportResult, NormalizedTransaction, Row
from actual_importer.logging_setup import get_logger
from actual_importer.mapping import mapping_build_transactions, mapping_count_invalid, mapping_filter_valid

from .grouping import job_group_rows
from .interfaces import GroupImportError, ImportConfigurationError, ImportOrchestratorPort

logger = get_logger(__name__)


@dataclass(frozen=True)
class ImportOrchestratorConfig:
    """Configuration values for import orchestration execution.

    Attributes:
        preview_sample_size: Number of leading transactions kept per group preview.
    """

    preview_sample_size: int = 5


class ImportJobOrchestrator(ImportOrchestratorPort):
    """Concrete orchestrator mapping, validating and importing rows group by group.

    Groups are processed strictly one after another in first-seen order. In
    live mode the first failure aborts the request: later groups are never
    attempted and groups already posted stay posted, with no partial result
    returned to the caller.
    """

    def __init__(self, config: ImportOrchestratorConfig | None = None):
        """Initialize import orchestrator.

        Args:
            config: Optional orchestration configuration.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when config values are invalid.
        """

        resolved_config = config or ImportOrchestratorConfig()
        if resolved_config.preview_sample_size < 0:
            raise ValueError("config.preview_sample_size must be >= 0")
        self._config = resolved_config

    def job_execute_import(
        self,
        request: ImportRequest,
        ledger_client: LedgerClientPort | None = None,
    ) -> ImportResult:
        """Execute one grouped import request.

        Args:
            request: Engine input rows, mapping and grouping options.
            ledger_client: Ledger client used in live mode; None when no server
                URL is configured. Never called in dry-run mode.

        Returns:
            ImportResult: Per-group summaries and totals over processed groups.

        Raises:
            ImportConfigurationError: Raised in live mode when no ledger client is
                available or a group has no mapped account.
            GroupImportError: Raised in live mode when a ledger call fails.
        """

        grouped_rows = job_group_rows(request.rows, request.group_by_column)
        group_results: list[GroupResult] = []
        imported_groups: list[str] = []

        for group_key, group_rows in grouped_rows.items():
            group_result, valid_transactions = self._job_build_group(
                group_key=group_key,
                group_rows=group_rows,
                request=request,
            )
            group_results.append(group_result)
            logger.info(
                "Group %r: %d transactions, %d invalid, account=%s",
                group_key,
                group_result.transaction_count,
                group_result.invalid_count,
                group_result.account_id,
            )

            if request.dry_run:
                continue

            if ledger_client is None:
                self._job_log_abort(group_key, imported_groups, reason="ledger server URL not configured")
                raise ImportConfigurationError("Actual server URL is missing for import.", group_key=group_key)

            if group_result.account_id is None:
                self._job_log_abort(group_key, imported_groups, reason="no account mapped")
                raise ImportConfigurationError(f"No account mapped for group '{group_key}'.", group_key=group_key)

            try:
                ledger_client.adapter_import_transactions(group_result.account_id, valid_transactions)
            except LedgerClientError as error:
                self._job_log_abort(
                    group_key,
                    imported_groups,
                    reason=f"{ledger_client.adapter_source_name()}: {error}",
                )
                raise GroupImportError(
                    f"Import to Actual failed for group '{group_key}'.",
                    group_key=group_key,
                    detail=error.detail,
                ) from error
            imported_groups.append(group_key)
            logger.info(
                "Imported %d transactions for group %r into account=%s via %s",
                len(valid_transactions),
                group_key,
                group_result.account_id,
                ledger_client.adapter_source_name(),
            )

        return ImportResult(
            dry_run=request.dry_run,
            groups=tuple(group_results),
            total_transactions=sum(result.transaction_count for result in group_results),
            total_invalid=sum(result.invalid_count for result in group_results),
        )

    def _job_build_group(
        self,
        group_key: str,
        group_rows: list[Row],
        request: ImportRequest,
    ) -> tuple[GroupResult, list[NormalizedTransaction]]:
        """Normalize one group's rows and summarize them.

        Args:
            group_key: Group key.
            group_rows: Rows belonging to the group.
            request: Import request providing mapping and account mapping.

        Returns:
            tuple[GroupResult, list[NormalizedTransaction]]: Group summary and the transactions eligible for import.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        transactions = mapping_build_transactions(group_rows, request.mapping)
        account_id = request.account_mapping.get(group_key) or None
        group_result = GroupResult(
            group=group_key,
            account_id=account_id,
            transaction_count=len(transactions),
            invalid_count=mapping_count_invalid(transactions),
            preview=tuple(transactions[: self._config.preview_sample_size]),
        )
        return group_result, mapping_filter_valid(transactions)

    def _job_log_abort(self, group_key: str, imported_groups: list[str], reason: str) -> None:
        """Log which groups were already posted when an import aborts."""

        logger.error(
            "Import aborted at group %r (%s); groups already imported: %s",
            group_key,
            reason,
            imported_groups or "none",
        )
