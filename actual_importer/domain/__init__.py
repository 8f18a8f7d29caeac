"""Domain models used across application layer boundaries."""

from .models import (
    EMPTY_GROUP_KEY,
    SINGLE_GROUP_KEY,
    DirectRule,
    GroupResult,
    ImportRequest,
    ImportResult,
    LedgerAccount,
    LedgerBudget,
    LedgerConnectionConfig,
    MappedRow,
    MappingConfig,
    MappingRule,
    MergeRule,
    NormalizedTransaction,
    Row,
    TargetField,
)

__all__ = [
    "EMPTY_GROUP_KEY",
    "SINGLE_GROUP_KEY",
    "DirectRule",
    "GroupResult",
    "ImportRequest",
    "ImportResult",
    "LedgerAccount",
    "LedgerBudget",
    "LedgerConnectionConfig",
    "MappedRow",
    "MappingConfig",
    "MappingRule",
    "MergeRule",
    "NormalizedTransaction",
    "Row",
    "TargetField",
]
