"""Project-native typed exceptions for ledger client failures."""

from __future__ import annotations


class LedgerClientError(Exception):
    """Base exception for ledger client failures.

    Attributes:
        detail: Human-readable upstream detail suitable for API error payloads.
    """

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.detail = detail if detail is not None else message


class LedgerUnavailableError(LedgerClientError, ConnectionError):
    """Transport, authentication or response-contract failure talking to the ledger."""


class LedgerTimeoutError(LedgerUnavailableError, TimeoutError):
    """Ledger request exceeded the configured per-call deadline."""


class LedgerRejectedError(LedgerClientError, RuntimeError):
    """Ledger responded but refused the submitted transactions.

    Attributes:
        status_code: HTTP status returned by the ledger, when known.
    """

    def __init__(self, message: str, detail: str | None = None, status_code: int | None = None):
        super().__init__(message=message, detail=detail)
        self.status_code = status_code
