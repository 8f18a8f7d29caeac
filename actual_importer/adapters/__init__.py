"""Adapter layer package for ledger integration boundaries."""

from .actual_http_client import ActualHttpLedgerClient
from .interfaces import LedgerClientFactory, LedgerClientPort
from .ledger_errors import (
	LedgerClientError,
	LedgerRejectedError,
	LedgerTimeoutError,
	LedgerUnavailableError,
)
from .mock_client import MOCK_ACCOUNTS, MOCK_BUDGETS, MockLedgerClient

__all__ = [
	"ActualHttpLedgerClient",
	"LedgerClientError",
	"LedgerClientFactory",
	"LedgerClientPort",
	"LedgerRejectedError",
	"LedgerTimeoutError",
	"LedgerUnavailableError",
	"MOCK_ACCOUNTS",
	"MOCK_BUDGETS",
	"MockLedgerClient",
]
