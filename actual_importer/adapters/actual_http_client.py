"""Actual Budget HTTP API client implementation for account listing and imports."""

from __future__ import annotations

from typing import Final, Sequence

import httpx

from actual_importer.domain import LedgerAccount, LedgerBudget, LedgerConnectionConfig, NormalizedTransaction
from actual_importer.logging_setup import get_logger

from .interfaces import LedgerClientPort
from .ledger_errors import LedgerRejectedError, LedgerTimeoutError, LedgerUnavailableError

logger = get_logger(__name__)


def adapter_first_present(payload: dict[str, object], keys: Sequence[str], fallback: str) -> str:
    """Return the first non-None value among keys as text.

    Args:
        payload: Upstream JSON object.
        keys: Candidate keys in priority order.
        fallback: Value used when no key holds a value.

    Returns:
        str: Text value for the first present key, else fallback.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    for key in keys:
        value = payload.get(key)
        if value is not None:
            return str(value)
    return fallback


def adapter_extract_collection(payload: object, key: str, allow_bare_list: bool = False) -> list[object]:
    """Extract a list from the response shapes the Actual API bridge may return.

    Supported shapes are `{key: [...]}`, `{"data": {key: [...]}}` and, when
    `allow_bare_list` is set, a top-level list.

    Args:
        payload: Decoded JSON response body.
        key: Collection key, e.g. `accounts`.
        allow_bare_list: Whether a top-level JSON array is accepted.

    Returns:
        list[object]: Extracted collection, empty when no shape matches.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if allow_bare_list and isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        return []
    direct_value = payload.get(key)
    if isinstance(direct_value, list):
        return direct_value
    data_value = payload.get("data")
    if isinstance(data_value, dict) and isinstance(data_value.get(key), list):
        return data_value[key]
    return []


class ActualHttpLedgerClient(LedgerClientPort):
    """Ledger client talking to an Actual Budget HTTP API bridge."""

    _USER_AGENT: Final[str] = "actual-importer/1.0 (Python/httpx)"
    _UNKNOWN_ACCOUNT_NAME: Final[str] = "Unknown account"
    _UNKNOWN_BUDGET_NAME: Final[str] = "Unknown budget"

    def __init__(
        self,
        config: LedgerConnectionConfig,
        request_timeout_seconds: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize Actual HTTP client.

        Args:
            config: Resolved Actual connection values.
            request_timeout_seconds: Per-call HTTP deadline in seconds.
            transport: Optional httpx transport override.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_server_url = config.server_url.strip()
        if not normalized_server_url:
            raise ValueError("server_url must not be blank")
        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")

        self._base_url = normalized_server_url.rstrip("/")
        self._credential = config.credential
        self._budget_id = config.budget_id
        self._client = httpx.Client(
            timeout=request_timeout_seconds,
            headers={"User-Agent": self._USER_AGENT},
            transport=transport,
        )

    def adapter_source_name(self) -> str:
        """Return stable adapter source label."""

        return "actual_http_api"

    def adapter_list_accounts(self) -> list[LedgerAccount]:
        """Fetch accounts of the configured budget.

        Returns:
            list[LedgerAccount]: Accounts with non-empty identifiers in upstream order.

        Raises:
            LedgerUnavailableError: Raised on transport failure, non-success status or invalid JSON.
        """

        response = self._adapter_post_json(
            path="/api/accounts",
            body={"password": self._credential, "budgetId": self._budget_id},
        )
        self._adapter_raise_unavailable_for_status(response, operation="list accounts")
        payload = self._adapter_decode_json(response, operation="list accounts")

        accounts: list[LedgerAccount] = []
        for item in adapter_extract_collection(payload, "accounts", allow_bare_list=True):
            if not isinstance(item, dict):
                continue
            account = LedgerAccount(
                id=adapter_first_present(item, ("id", "uuid", "accountId"), ""),
                name=adapter_first_present(item, ("name", "accountName"), self._UNKNOWN_ACCOUNT_NAME),
            )
            if account.id:
                accounts.append(account)
        return accounts

    def adapter_list_budgets(self) -> list[LedgerBudget]:
        """Fetch budgets visible to the configured credential.

        Returns:
            list[LedgerBudget]: Budgets with non-empty identifiers in upstream order.

        Raises:
            LedgerUnavailableError: Raised on transport failure, non-success status or invalid JSON.
        """

        response = self._adapter_post_json(path="/api/budgets", body={"password": self._credential})
        self._adapter_raise_unavailable_for_status(response, operation="list budgets")
        payload = self._adapter_decode_json(response, operation="list budgets")

        budgets: list[LedgerBudget] = []
        for item in adapter_extract_collection(payload, "budgets"):
            if not isinstance(item, dict):
                continue
            budget = LedgerBudget(
                id=adapter_first_present(item, ("id", "uuid", "budgetId"), ""),
                name=adapter_first_present(item, ("name", "budgetName"), self._UNKNOWN_BUDGET_NAME),
            )
            if budget.id:
                budgets.append(budget)
        return budgets

    def adapter_import_transactions(
        self,
        account_id: str,
        transactions: Sequence[NormalizedTransaction],
    ) -> None:
        """Post one transaction batch to an Actual account.

        Args:
            account_id: Destination account identifier.
            transactions: Transactions to import; an empty batch is still posted.

        Returns:
            None: Completes when Actual accepted the batch.

        Raises:
            LedgerUnavailableError: Raised on transport failure or timeout.
            LedgerRejectedError: Raised when Actual answers with a non-success status.
        """

        response = self._adapter_post_json(
            path="/api/import-transactions",
            body={
                "password": self._credential,
                "budgetId": self._budget_id,
                "accountId": account_id,
                "transactions": [transaction.domain_to_payload() for transaction in transactions],
            },
        )
        if not response.is_success:
            logger.warning(
                "Actual rejected import for account=%s with HTTP %s",
                account_id,
                response.status_code,
            )
            raise LedgerRejectedError(
                f"Actual API error ({response.status_code})",
                detail=response.text,
                status_code=response.status_code,
            )

    def adapter_close(self) -> None:
        """Close the pooled HTTP client."""

        self._client.close()

    def _adapter_post_json(self, path: str, body: dict[str, object]) -> httpx.Response:
        """Execute one JSON POST and map transport failures.

        Args:
            path: API path starting with `/`.
            body: JSON request body.

        Returns:
            httpx.Response: Raw response with any status code.

        Raises:
            LedgerTimeoutError: Raised when the request exceeds its deadline.
            LedgerUnavailableError: Raised for connection, decoding, redirect or URL failures.
        """

        url = f"{self._base_url}{path}"
        logger.debug("POST %s", url)
        try:
            return self._client.post(url, json=body)
        except httpx.TimeoutException as error:
            logger.warning("Actual request to %s timed out", url)
            raise LedgerTimeoutError("Actual request timed out", detail=str(error) or "timed out") from error
        except (httpx.RequestError, httpx.InvalidURL) as error:
            logger.warning("Actual request to %s failed: %s", url, error)
            raise LedgerUnavailableError("Actual request failed", detail=str(error) or type(error).__name__) from error

    def _adapter_raise_unavailable_for_status(self, response: httpx.Response, operation: str) -> None:
        """Raise when a listing call returned a non-success status.

        Args:
            response: Upstream response.
            operation: Operation label for error messages.

        Returns:
            None: Returns only for success responses.

        Raises:
            LedgerUnavailableError: Raised for non-success HTTP status.
        """

        if response.is_success:
            return
        logger.warning("Actual %s returned HTTP %s", operation, response.status_code)
        raise LedgerUnavailableError(
            f"Actual API error ({response.status_code}) during {operation}",
            detail=f"Actual API error ({response.status_code}): {response.text}",
        )

    def _adapter_decode_json(self, response: httpx.Response, operation: str) -> object:
        """Decode a JSON body and map decode failures.

        Args:
            response: Upstream response.
            operation: Operation label for error messages.

        Returns:
            object: Decoded JSON value.

        Raises:
            LedgerUnavailableError: Raised when the body is not valid JSON.
        """

        try:
            return response.json()
        except ValueError as error:
            raise LedgerUnavailableError(
                f"Actual API returned invalid JSON during {operation}",
                detail=str(error),
            ) from error
