"""Advisory transaction validation used for reporting and live-import filtering."""

from __future__ import annotations

from typing import Iterable

from actual_importer.domain import NormalizedTransaction


def mapping_transaction_is_valid(transaction: NormalizedTransaction) -> bool:
    """Return whether a transaction has a parsed amount and a non-empty date.

    Args:
        transaction: Normalized transaction candidate.

    Returns:
        bool: True when the transaction can be imported.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return transaction.amount is not None and bool(transaction.date.strip())


def mapping_count_invalid(transactions: Iterable[NormalizedTransaction]) -> int:
    """Count transactions failing validation."""

    return sum(1 for transaction in transactions if not mapping_transaction_is_valid(transaction))


def mapping_filter_valid(transactions: Iterable[NormalizedTransaction]) -> list[NormalizedTransaction]:
    """Return transactions passing validation, preserving order."""

    return [transaction for transaction in transactions if mapping_transaction_is_valid(transaction)]
