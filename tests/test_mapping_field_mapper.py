"""Regression tests for per-target-field row mapping rules."""

import pytest

from actual_importer.domain import DirectRule, MappedRow, MergeRule, TargetField
from actual_importer.mapping import mapping_apply_rule, mapping_map_row, mapping_normalize_cell_value


def test_mapping_map_row_applies_direct_rules_and_trims_values() -> None:
    """Copy trimmed direct column values into the mapped row.

    Returns:
        None: Assertions validate direct-rule mapping.

    Raises:
        AssertionError: Raised when mapped values are incorrect.
    """

    row = {"Datum": " 01-01-2024 ", "Bedrag": "12,50", "Naam": "  Albert Heijn  "}
    mapping = {
        TargetField.DATE: DirectRule(column="Datum"),
        TargetField.AMOUNT: DirectRule(column="Bedrag"),
        TargetField.PAYEE: DirectRule(column="Naam"),
    }

    assert mapping_map_row(row, mapping) == MappedRow(
        date="01-01-2024",
        amount="12,50",
        payee="Albert Heijn",
        notes="",
    )


def test_mapping_merge_rule_drops_empty_members_and_trims_survivors() -> None:
    """Join only non-empty trimmed values with the configured separator.

    Returns:
        None: Assertions validate merge-rule behavior.

    Raises:
        AssertionError: Raised when merge output is incorrect.
    """

    rule = MergeRule(columns=("a", "b"), separator="-")

    assert mapping_apply_rule({"a": " x ", "b": ""}, rule) == "x"
    assert mapping_apply_rule({"a": " x ", "b": " y"}, rule) == "x-y"
    assert mapping_apply_rule({"b": "y", "a": "x"}, rule) == "x-y"


def test_mapping_merge_rule_honors_default_and_empty_separator() -> None:
    """Use a single space by default and no separator when explicitly empty.

    Returns:
        None: Assertions validate separator handling.

    Raises:
        AssertionError: Raised when separator handling is incorrect.
    """

    row = {"Omschrijving": "Boodschappen", "Mededelingen": "week 1"}

    assert mapping_apply_rule(row, MergeRule(columns=("Omschrijving", "Mededelingen"))) == "Boodschappen week 1"
    assert mapping_apply_rule(row, MergeRule(columns=("Omschrijving", "Mededelingen"), separator="")) == (
        "Boodschappenweek 1"
    )


def test_mapping_merge_rule_without_values_yields_empty_string() -> None:
    """Return empty string when no merged column holds a value.

    Returns:
        None: Assertions validate empty merge behavior.

    Raises:
        AssertionError: Raised when empty merges are not empty strings.
    """

    assert mapping_apply_rule({"a": "  "}, MergeRule(columns=("a", "missing"), separator="|")) == ""
    assert mapping_apply_rule({"a": "x"}, MergeRule(columns=())) == ""


def test_mapping_map_row_degrades_missing_columns_and_rules_to_empty_strings() -> None:
    """Map missing columns and unmapped fields to empty strings without raising.

    Returns:
        None: Assertions validate degradation behavior.

    Raises:
        AssertionError: Raised when missing data is not degraded.
    """

    mapped_row = mapping_map_row({"Other": "value"}, {TargetField.DATE: DirectRule(column="Datum")})

    assert mapped_row == MappedRow(date="", amount="", payee="", notes="")
    assert mapping_map_row({}, {}) == MappedRow(date="", amount="", payee="", notes="")


def test_mapping_normalize_cell_value_stringifies_non_text_values() -> None:
    """Convert None to empty string and other scalars to trimmed text.

    Returns:
        None: Assertions validate cell normalization.

    Raises:
        AssertionError: Raised when normalization is incorrect.
    """

    assert mapping_normalize_cell_value(None) == ""
    assert mapping_normalize_cell_value(12) == "12"
    assert mapping_normalize_cell_value("  a b  ") == "a b"


def test_mapping_apply_rule_rejects_unknown_rule_types() -> None:
    """Raise TypeError for objects outside the direct/merge rule union.

    Returns:
        None: Assertions validate exhaustive rule dispatch.

    Raises:
        AssertionError: Raised when unknown rules are accepted.
    """

    with pytest.raises(TypeError, match="unsupported mapping rule"):
        mapping_apply_rule({"a": "x"}, {"type": "direct", "column": "a"})  # type: ignore[arg-type]
