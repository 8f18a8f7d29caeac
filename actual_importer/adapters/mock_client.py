"""In-memory ledger client used when `MOCK_ACTUAL` is enabled."""

from __future__ import annotations

from typing import Sequence

from actual_importer.domain import LedgerAccount, LedgerBudget, NormalizedTransaction
from actual_importer.logging_setup import get_logger

from .interfaces import LedgerClientPort

logger = get_logger(__name__)

MOCK_ACCOUNTS: tuple[LedgerAccount, ...] = (
    LedgerAccount(id="acc-checking", name="Rabo Betaalrekening"),
    LedgerAccount(id="acc-savings", name="Rabo Spaarrekening"),
)
MOCK_BUDGETS: tuple[LedgerBudget, ...] = (
    LedgerBudget(id="budget-main", name="Main Budget"),
    LedgerBudget(id="budget-personal", name="Personal Budget"),
)


class MockLedgerClient(LedgerClientPort):
    """Ledger client returning fixed fixtures and recording imports without I/O.

    Mock mode only replaces the network client. Live imports still require an
    account mapping for every group and fail with the same configuration
    error as against a real server.
    """

    def __init__(self):
        self.imported_batches: list[tuple[str, tuple[NormalizedTransaction, ...]]] = []

    def adapter_source_name(self) -> str:
        return "actual_mock"

    def adapter_list_accounts(self) -> list[LedgerAccount]:
        return list(MOCK_ACCOUNTS)

    def adapter_list_budgets(self) -> list[LedgerBudget]:
        return list(MOCK_BUDGETS)

    def adapter_import_transactions(
        self,
        account_id: str,
        transactions: Sequence[NormalizedTransaction],
    ) -> None:
        logger.info("Mock import of %d transactions into account=%s", len(transactions), account_id)
        self.imported_batches.append((account_id, tuple(transactions)))

    def adapter_close(self) -> None:
        return None
