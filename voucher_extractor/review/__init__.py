"""Review utilities for editing, filtering, and persisting records."""
from voucher_extractor.review.registry import SourceRegistry
from voucher_extractor.review.store import RecordStore
from voucher_extractor.review.workflow import (
    ALL_TYPES,
    apply_edits,
    clear_records,
    delete_record,
    filter_records,
    original_file,
    records_to_rows,
    summarize_records,
    update_record,
)

__all__ = [
    "ALL_TYPES",
    "RecordStore",
    "SourceRegistry",
    "apply_edits",
    "clear_records",
    "delete_record",
    "filter_records",
    "original_file",
    "records_to_rows",
    "summarize_records",
    "update_record",
]
