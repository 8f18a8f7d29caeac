"""Regression tests for locale-formatted amount normalization."""

from decimal import Decimal

from actual_importer.mapping import mapping_parse_amount


def test_mapping_parse_amount_handles_thousands_and_decimal_separators() -> None:
    """Parse `.` thousands and `,` decimal separators into canonical decimals.

    Returns:
        None: Assertions validate canonical parsing.

    Raises:
        AssertionError: Raised when parsed amounts are incorrect.
    """

    assert mapping_parse_amount("1.234,56") == Decimal("1234.56")
    assert mapping_parse_amount("-12,50") == Decimal("-12.50")
    assert mapping_parse_amount("1.000.000") == Decimal("1000000")
    assert mapping_parse_amount(" 42 ") == Decimal("42")


def test_mapping_parse_amount_tolerates_currency_symbols() -> None:
    """Strip currency symbols and whitespace around the numeric part.

    Returns:
        None: Assertions validate symbol stripping.

    Raises:
        AssertionError: Raised when symbols break parsing.
    """

    assert mapping_parse_amount("€ 12,50") == Decimal("12.50")
    assert mapping_parse_amount("EUR -1.234,00") == Decimal("-1234.00")


def test_mapping_parse_amount_distinguishes_zero_from_absent() -> None:
    """Return zero for an explicit zero and None for blank input.

    Returns:
        None: Assertions validate zero versus absent handling.

    Raises:
        AssertionError: Raised when zero and absent values are conflated.
    """

    assert mapping_parse_amount("0,00") == Decimal("0")
    assert mapping_parse_amount("") is None
    assert mapping_parse_amount("   ") is None
    assert mapping_parse_amount(None) is None


def test_mapping_parse_amount_returns_none_for_unparseable_values() -> None:
    """Return None when nothing numeric remains or the literal is malformed.

    Returns:
        None: Assertions validate unparseable handling.

    Raises:
        AssertionError: Raised when invalid values are parsed.
    """

    assert mapping_parse_amount("abc") is None
    assert mapping_parse_amount("€") is None
    assert mapping_parse_amount("-") is None
    assert mapping_parse_amount("--5") is None
    assert mapping_parse_amount("5-3") is None


def test_mapping_parse_amount_converts_only_first_comma() -> None:
    """Treat the first comma as decimal point and strip later commas.

    Returns:
        None: Assertions validate repeated comma handling.

    Raises:
        AssertionError: Raised when comma handling differs.
    """

    assert mapping_parse_amount("1,2,3") == Decimal("1.23")
    assert mapping_parse_amount("12.50") == Decimal("1250")


def test_mapping_parse_amount_returns_none_beyond_float_range() -> None:
    """Return None when the amount cannot be represented as a finite number.

    Returns:
        None: Assertions validate overflow handling.

    Raises:
        AssertionError: Raised when overflowing amounts are accepted.
    """

    assert mapping_parse_amount("1" + "0" * 400) is None
    assert mapping_parse_amount("-1" + "0" * 400 + ",50") is None
    assert mapping_parse_amount("1" + "0" * 300) == Decimal("1" + "0" * 300)
