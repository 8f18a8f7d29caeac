"""Mapping layer package for row-to-transaction transformation boundaries."""

from .amount_parsing import mapping_parse_amount
from .field_mapper import mapping_apply_rule, mapping_map_row, mapping_normalize_cell_value
from .normalization import mapping_build_transactions, mapping_normalize_row
from .validation import mapping_count_invalid, mapping_filter_valid, mapping_transaction_is_valid

__all__ = [
	"mapping_apply_rule",
	"mapping_build_transactions",
	"mapping_count_invalid",
	"mapping_filter_valid",
	"mapping_map_row",
	"mapping_normalize_cell_value",
	"mapping_normalize_row",
	"mapping_parse_amount",
	"mapping_transaction_is_valid",
]
