"""Typed interfaces for adapter-layer responsibilities."""

from typing import Callable, Protocol, Sequence

from actual_importer.domain import LedgerAccount, LedgerBudget, LedgerConnectionConfig, NormalizedTransaction


class LedgerClientPort(Protocol):
    """Port definition for listing accounts/budgets and posting transactions."""

    def adapter_source_name(self) -> str:
        """Return adapter source identifier for diagnostics.

        Returns:
            str: Human-readable ledger source identifier.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def adapter_list_accounts(self) -> list[LedgerAccount]:
        """Return accounts of the configured budget in ledger order.

        Returns:
            list[LedgerAccount]: Accounts with non-empty identifiers.

        Raises:
            LedgerUnavailableError: Raised on transport, auth or contract failure.
        """

    def adapter_list_budgets(self) -> list[LedgerBudget]:
        """Return budgets visible to the configured credential.

        Returns:
            list[LedgerBudget]: Budgets with non-empty identifiers.

        Raises:
            LedgerUnavailableError: Raised on transport, auth or contract failure.
        """

    def adapter_import_transactions(
        self,
        account_id: str,
        transactions: Sequence[NormalizedTransaction],
    ) -> None:
        """Post one batch of transactions to a ledger account.

        Args:
            account_id: Destination ledger account identifier.
            transactions: Validated transactions; may be empty.

        Returns:
            None: Completes when the ledger accepted the batch.

        Raises:
            LedgerUnavailableError: Raised on transport or timeout failure.
            LedgerRejectedError: Raised when the ledger refuses the batch.
        """

    def adapter_close(self) -> None:
        """Release transport resources held by the client."""


LedgerClientFactory = Callable[[LedgerConnectionConfig], LedgerClientPort]
