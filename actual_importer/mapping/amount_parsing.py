"""Amount normalizer for locale-formatted bank export values."""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

_MAPPING_AMOUNT_DISALLOWED_CHARACTERS = re.compile(r"[^\d.-]")


def mapping_parse_amount(value: str | None) -> Decimal | None:
    """Parse one amount written with `.` thousands and `,` decimal separators.

    Dots are removed, the first comma becomes the decimal point and any other
    character except digits, `.` and `-` is stripped, so `"€ -1.234,56"`
    parses to `Decimal("-1234.56")`.

    Args:
        value: Raw amount text.

    Returns:
        Decimal | None: Parsed amount, or None when blank or unparseable.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    text = (value or "").strip()
    if not text:
        return None

    normalized_text = text.replace(".", "").replace(",", ".", 1)
    normalized_text = _MAPPING_AMOUNT_DISALLOWED_CHARACTERS.sub("", normalized_text)
    if not normalized_text:
        return None

    try:
        amount = Decimal(normalized_text)
    except InvalidOperation:
        return None
    if not amount.is_finite() or not math.isfinite(float(amount)):
        return None
    return amount
