"""Typed domain models shared across runtime layers.

All contracts here are created fresh per import request and never shared
between requests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Final, Mapping, Union

SINGLE_GROUP_KEY: Final[str] = "<all rows>"
EMPTY_GROUP_KEY: Final[str] = "<empty>"

Row = Mapping[str, object]


class TargetField(str, Enum):
    """Closed set of transaction fields that a mapping can populate."""

    DATE = "date"
    AMOUNT = "amount"
    PAYEE = "payee"
    NOTES = "notes"


@dataclass(frozen=True)
class DirectRule:
    """Copy one source column's trimmed text.

    Attributes:
        column: Source column name.
    """

    column: str


@dataclass(frozen=True)
class MergeRule:
    """Join the non-empty trimmed values of several source columns.

    Attributes:
        columns: Source column names in join order.
        separator: Join separator; an empty string joins without separator.
    """

    columns: tuple[str, ...]
    separator: str = " "


MappingRule = Union[DirectRule, MergeRule]
MappingConfig = Mapping[TargetField, MappingRule]


@dataclass(frozen=True)
class MappedRow:
    """Text values for every target field after applying mapping rules."""

    date: str
    amount: str
    payee: str
    notes: str


@dataclass(frozen=True)
class NormalizedTransaction:
    """Transaction candidate built from one mapped row.

    Attributes:
        date: Date text as found in the source, possibly empty.
        payee: Payee text, possibly empty.
        notes: Notes text, possibly empty.
        amount: Parsed signed amount, or None when unparseable.
    """

    date: str
    payee: str
    notes: str
    amount: Decimal | None

    def domain_to_payload(self) -> dict[str, object]:
        """Serialize transaction to a JSON-compatible payload.

        Returns:
            dict[str, object]: Payload with amount as a JSON number or None.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return {
            "date": self.date,
            "payee": self.payee,
            "notes": self.notes,
            "amount": float(self.amount) if self.amount is not None else None,
        }


@dataclass(frozen=True)
class GroupResult:
    """Per-group summary recorded by the import orchestrator.

    Attributes:
        group: Group key.
        account_id: Resolved destination account, or None when unmapped.
        transaction_count: Number of transactions built for the group.
        invalid_count: Number of transactions failing validation.
        preview: Leading transactions of the group.
    """

    group: str
    account_id: str | None
    transaction_count: int
    invalid_count: int
    preview: tuple[NormalizedTransaction, ...]


@dataclass(frozen=True)
class ImportResult:
    """Aggregated outcome of one import request."""

    dry_run: bool
    groups: tuple[GroupResult, ...]
    total_transactions: int
    total_invalid: int


@dataclass(frozen=True)
class ImportRequest:
    """Engine input for one import run.

    Attributes:
        rows: Parsed source rows in file order.
        mapping: Target field rules.
        group_by_column: Optional column used to split rows into groups.
        account_mapping: Group key to destination account identifier.
        dry_run: When True no ledger call is made.
    """

    rows: tuple[Row, ...]
    mapping: MappingConfig
    group_by_column: str | None = None
    account_mapping: Mapping[str, str] = field(default_factory=dict)
    dry_run: bool = True


@dataclass(frozen=True)
class LedgerConnectionConfig:
    """Connection values for the Actual API, resolved at the transport boundary.

    Attributes:
        server_url: Actual API base URL.
        credential: Actual server password.
        budget_id: Target budget identifier.
    """

    server_url: str
    credential: str = field(default="", repr=False)
    budget_id: str = ""


@dataclass(frozen=True)
class LedgerAccount:
    """Account exposed by the ledger service."""

    id: str
    name: str


@dataclass(frozen=True)
class LedgerBudget:
    """Budget exposed by the ledger service."""

    id: str
    name: str
