"""Field mapper applying per-target-field rules to one source row.

Missing columns and missing rules degrade to empty strings so a malformed row
never aborts a batch.
"""

from __future__ import annotations

from actual_importer.domain import DirectRule, MappedRow, MappingConfig, MappingRule, MergeRule, Row, TargetField


def mapping_normalize_cell_value(value: object | None) -> str:
    """Normalize one raw cell value to trimmed text.

    Args:
        value: Raw cell value; usually text, tolerated as any JSON scalar.

    Returns:
        str: Trimmed text, or empty string for None.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if value is None:
        return ""
    return str(value).strip()


def mapping_apply_rule(row: Row, rule: MappingRule | None) -> str:
    """Apply one mapping rule to a row.

    Args:
        row: Source row keyed by column name.
        rule: Direct or merge rule, or None when the field is unmapped.

    Returns:
        str: Mapped text value.

    Raises:
        TypeError: Raised when rule is not a known rule variant.
    """

    if rule is None:
        return ""
    if isinstance(rule, DirectRule):
        return mapping_normalize_cell_value(row.get(rule.column))
    if isinstance(rule, MergeRule):
        separator = " " if rule.separator is None else rule.separator
        values = [mapping_normalize_cell_value(row.get(column)) for column in rule.columns]
        return separator.join(value for value in values if value)
    raise TypeError(f"unsupported mapping rule type={type(rule).__name__}")


def mapping_map_row(row: Row, mapping: MappingConfig) -> MappedRow:
    """Map one source row into the four target fields.

    Args:
        row: Source row keyed by column name.
        mapping: Target field rules; absent fields map to empty strings.

    Returns:
        MappedRow: Text values for date, amount, payee and notes.

    Raises:
        TypeError: Raised only for rule objects outside the rule union.
    """

    return MappedRow(
        date=mapping_apply_rule(row, mapping.get(TargetField.DATE)),
        amount=mapping_apply_rule(row, mapping.get(TargetField.AMOUNT)),
        payee=mapping_apply_rule(row, mapping.get(TargetField.PAYEE)),
        notes=mapping_apply_rule(row, mapping.get(TargetField.NOTES)),
    )
