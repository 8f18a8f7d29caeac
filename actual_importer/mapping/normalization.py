"""Row-to-transaction normalization combining field mapping and amount parsing."""

from __future__ import annotations

from typing import Iterable

from actual_importer.domain import MappingConfig, NormalizedTransaction, Row

from .amount_parsing import mapping_parse_amount
from .field_mapper import mapping_map_row


def mapping_normalize_row(row: Row, mapping: MappingConfig) -> NormalizedTransaction:
    """Build one normalized transaction from a source row.

    Args:
        row: Source row keyed by column name.
        mapping: Target field rules.

    Returns:
        NormalizedTransaction: Transaction with parsed amount or None amount.

    Raises:
        TypeError: Raised only for rule objects outside the rule union.
    """

    mapped_row = mapping_map_row(row, mapping)
    return NormalizedTransaction(
        date=mapped_row.date,
        payee=mapped_row.payee,
        notes=mapped_row.notes,
        amount=mapping_parse_amount(mapped_row.amount),
    )


def mapping_build_transactions(rows: Iterable[Row], mapping: MappingConfig) -> list[NormalizedTransaction]:
    """Normalize rows into transactions, preserving order and count."""

    return [mapping_normalize_row(row, mapping) for row in rows]
