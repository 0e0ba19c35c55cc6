"""Extract Sales Order, Credit Note, and RMA vouchers from PDFs into spreadsheets."""
from voucher_extractor.core import (
    InvoiceRecord,
    VoucherType,
    configure_logging,
)
from voucher_extractor.ingestion import (
    DocumentType,
    classify_document,
    extract_client_name_and_phone,
    extract_records,
    extract_shipping_charge,
    load_records,
    parse_invoice_text,
    parse_pdf,
)
from voucher_extractor.processing import import_spreadsheet, run_pipeline
from voucher_extractor.reporting import (
    TEMPLATE_HEADERS,
    records_to_template_rows,
    template_rows_to_records,
    write_csv,
    write_excel,
)
from voucher_extractor.review import (
    RecordStore,
    SourceRegistry,
    apply_edits,
    filter_records,
    summarize_records,
    update_record,
)

__all__ = [
    "TEMPLATE_HEADERS",
    "DocumentType",
    "InvoiceRecord",
    "RecordStore",
    "SourceRegistry",
    "VoucherType",
    "apply_edits",
    "classify_document",
    "configure_logging",
    "extract_client_name_and_phone",
    "extract_records",
    "extract_shipping_charge",
    "filter_records",
    "import_spreadsheet",
    "load_records",
    "parse_invoice_text",
    "parse_pdf",
    "records_to_template_rows",
    "run_pipeline",
    "summarize_records",
    "template_rows_to_records",
    "update_record",
    "write_csv",
    "write_excel",
]
