"""Request payload models and response serializers for the HTTP API.

Payloads use the camelCase field names of the browser client; conversion into
engine contracts happens here so the engine never sees transport shapes.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from actual_importer.config import AppSettings
from actual_importer.domain import (
    DirectRule,
    ImportRequest,
    ImportResult,
    LedgerConnectionConfig,
    MappingRule,
    MergeRule,
    TargetField,
)


class _ApiPayloadModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ApiMappingRulePayload(_ApiPayloadModel):
    """One target-field rule; `type` defaults to a direct column reference."""

    type: Literal["direct", "merge"] = "direct"
    column: str | None = None
    columns: list[str] = Field(default_factory=list)
    separator: str | None = None

    def api_to_rule(self) -> MappingRule:
        """Convert payload into a domain rule.

        Returns:
            MappingRule: Direct or merge rule.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        if self.type == "merge":
            return MergeRule(
                columns=tuple(self.columns),
                separator=" " if self.separator is None else self.separator,
            )
        return DirectRule(column=self.column or "")


class ApiMappingPayload(_ApiPayloadModel):
    """Rules per target field; unknown target fields are ignored."""

    date: ApiMappingRulePayload | None = None
    amount: ApiMappingRulePayload | None = None
    payee: ApiMappingRulePayload | None = None
    notes: ApiMappingRulePayload | None = None

    def api_to_mapping_config(self) -> dict[TargetField, MappingRule]:
        """Convert payload into a mapping config without unmapped fields."""

        mapping: dict[TargetField, MappingRule] = {}
        for target_field in TargetField:
            rule_payload = getattr(self, target_field.value)
            if rule_payload is not None:
                mapping[target_field] = rule_payload.api_to_rule()
        return mapping


class ApiLedgerConnectionPayload(_ApiPayloadModel):
    """Optional per-request Actual connection values."""

    server_url: str | None = None
    password: str | None = None
    budget_id: str | None = None


class ApiImportRequestPayload(_ApiPayloadModel):
    """Import request as posted by the browser client."""

    rows: list[dict[str, Any]]
    mapping: ApiMappingPayload
    group_by_column: str | None = None
    account_mapping: dict[str, str | None] = Field(default_factory=dict)
    dry_run: bool = True
    actual_config: ApiLedgerConnectionPayload | None = None

    def api_to_import_request(self) -> ImportRequest:
        """Convert payload into the engine import request.

        Row values are stringified and null cells become empty strings.

        Returns:
            ImportRequest: Engine input contract.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        rows = tuple(
            {str(column): "" if value is None else str(value) for column, value in row.items()}
            for row in self.rows
        )
        return ImportRequest(
            rows=rows,
            mapping=self.mapping.api_to_mapping_config(),
            group_by_column=self.group_by_column,
            account_mapping={key: value for key, value in self.account_mapping.items() if value},
            dry_run=self.dry_run,
        )


def api_resolve_ledger_config(
    payload: ApiLedgerConnectionPayload | None,
    settings: AppSettings,
) -> LedgerConnectionConfig:
    """Resolve connection values from the request, falling back to settings.

    Args:
        payload: Optional per-request connection values.
        settings: Runtime settings holding fallback values.

    Returns:
        LedgerConnectionConfig: Connection values; server URL may be blank.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    resolved_payload = payload or ApiLedgerConnectionPayload()
    return LedgerConnectionConfig(
        server_url=(resolved_payload.server_url or settings.actual_server_url).strip(),
        credential=resolved_payload.password or settings.actual_password,
        budget_id=resolved_payload.budget_id or settings.actual_budget_id,
    )


def api_serialize_import_result(result: ImportResult) -> dict[str, object]:
    """Serialize one import result into the camelCase response payload."""

    return {
        "dryRun": result.dry_run,
        "groups": [
            {
                "group": group_result.group,
                "accountId": group_result.account_id,
                "transactionCount": group_result.transaction_count,
                "invalidCount": group_result.invalid_count,
                "preview": [transaction.domain_to_payload() for transaction in group_result.preview],
            }
            for group_result in result.groups
        ],
        "totalTransactions": result.total_transactions,
        "totalInvalid": result.total_invalid,
    }
