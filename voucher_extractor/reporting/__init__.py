"""Spreadsheet export and import for voucher records."""
from voucher_extractor.reporting.sinks import (
    ensure_output_dir,
    excel_bytes,
    push_to_google_sheets,
    read_spreadsheet,
    write_csv,
    write_excel,
)
from voucher_extractor.reporting.templates import (
    TEMPLATE_HEADERS,
    record_to_template_row,
    records_to_template_rows,
    template_row_to_record,
    template_rows_to_records,
)

__all__ = [
    "TEMPLATE_HEADERS",
    "ensure_output_dir",
    "excel_bytes",
    "push_to_google_sheets",
    "read_spreadsheet",
    "record_to_template_row",
    "records_to_template_rows",
    "template_row_to_record",
    "template_rows_to_records",
    "write_csv",
    "write_excel",
]
