"""Regression tests for transaction normalization and advisory validation."""

from decimal import Decimal

from actual_importer.domain import DirectRule, MergeRule, NormalizedTransaction, TargetField
from actual_importer.mapping import (
    mapping_build_transactions,
    mapping_count_invalid,
    mapping_filter_valid,
    mapping_transaction_is_valid,
)


def _transaction(date: str, amount: Decimal | None) -> NormalizedTransaction:
    return NormalizedTransaction(date=date, payee="", notes="", amount=amount)


def test_mapping_transaction_is_valid_requires_amount_and_date() -> None:
    """Accept only transactions with parsed amount and non-blank date.

    Returns:
        None: Assertions validate validity rules.

    Raises:
        AssertionError: Raised when validity classification is incorrect.
    """

    assert mapping_transaction_is_valid(_transaction("2024-01-01", Decimal("1")))
    assert mapping_transaction_is_valid(_transaction("2024-01-01", Decimal("0")))
    assert not mapping_transaction_is_valid(_transaction("2024-01-01", None))
    assert not mapping_transaction_is_valid(_transaction("", Decimal("1")))
    assert not mapping_transaction_is_valid(_transaction("   ", Decimal("1")))


def test_mapping_count_and_filter_keep_order() -> None:
    """Count invalid transactions and keep valid ones in input order.

    Returns:
        None: Assertions validate count and filtering.

    Raises:
        AssertionError: Raised when counts or order are incorrect.
    """

    transactions = [
        _transaction("d1", Decimal("1")),
        _transaction("", Decimal("2")),
        _transaction("d3", None),
        _transaction("d4", Decimal("4")),
    ]

    assert mapping_count_invalid(transactions) == 2
    assert [transaction.date for transaction in mapping_filter_valid(transactions)] == ["d1", "d4"]


def test_mapping_build_transactions_maps_and_parses_every_row() -> None:
    """Build one transaction per row with parsed amount and merged notes.

    Returns:
        None: Assertions validate row normalization.

    Raises:
        AssertionError: Raised when transactions are built incorrectly.
    """

    rows = [
        {"Datum": "20240101", "Bedrag": "-1.234,56", "Naam": "Huur", "Omschrijving": "Januari", "Kenmerk": "123"},
        {"Datum": "20240102", "Bedrag": "n.v.t.", "Naam": "Onbekend"},
    ]
    mapping = {
        TargetField.DATE: DirectRule(column="Datum"),
        TargetField.AMOUNT: DirectRule(column="Bedrag"),
        TargetField.PAYEE: DirectRule(column="Naam"),
        TargetField.NOTES: MergeRule(columns=("Omschrijving", "Kenmerk"), separator=" / "),
    }

    transactions = mapping_build_transactions(rows, mapping)

    assert transactions == [
        NormalizedTransaction(date="20240101", payee="Huur", notes="Januari / 123", amount=Decimal("-1234.56")),
        NormalizedTransaction(date="20240102", payee="Onbekend", notes="", amount=None),
    ]
    assert transactions[0].domain_to_payload() == {
        "date": "20240101",
        "payee": "Huur",
        "notes": "Januari / 123",
        "amount": -1234.56,
    }
    assert transactions[1].domain_to_payload()["amount"] is None
