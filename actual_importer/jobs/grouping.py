"""Grouping engine partitioning rows by the value of one column."""

from __future__ import annotations

from typing import Sequence

from actual_importer.domain import EMPTY_GROUP_KEY, SINGLE_GROUP_KEY, Row
from actual_importer.mapping import mapping_normalize_cell_value


def job_group_rows(rows: Sequence[Row], group_by_column: str | None = None) -> dict[str, list[Row]]:
    """Partition rows into groups keyed by the grouping column value.

    Keys appear in first-seen order and rows keep their input order inside each
    group. Every input row lands in exactly one group.

    Args:
        rows: Source rows in file order.
        group_by_column: Column whose trimmed value selects the group; blank or
            None places all rows under `SINGLE_GROUP_KEY`.

    Returns:
        dict[str, list[Row]]: Insertion-ordered groups.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if not group_by_column:
        return {SINGLE_GROUP_KEY: list(rows)}

    groups: dict[str, list[Row]] = {}
    for row in rows:
        group_key = mapping_normalize_cell_value(row.get(group_by_column)) or EMPTY_GROUP_KEY
        groups.setdefault(group_key, []).append(row)
    return groups
