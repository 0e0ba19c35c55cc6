"""Mapping between InvoiceRecords and the exported spreadsheet columns."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from voucher_extractor.core.models import InvoiceRecord, round_half_up

logger = logging.getLogger(__name__)

TEMPLATE_HEADERS = [
    "Date",
    "Sold By",
    "Client Name",
    "Number",
    "Source",
    "Source NAME",
    "Product Line",
    "Sale Type",
    "Disc Offered %",
    "Voucher Type",
    "Invoice Number",
    "AMOUNT",
]

# Column -> InvoiceRecord attribute, in export order.
COLUMN_FIELDS = dict(
    zip(
        TEMPLATE_HEADERS,
        [
            "date",
            "sold_by",
            "client_name",
            "number",
            "source",
            "source_name",
            "product_line",
            "sale_type",
            "disc_offered",
            "voucher_type",
            "invoice_number",
            "amount",
        ],
    )
)

COLUMN_WIDTHS = [12, 20, 30, 15, 15, 20, 20, 12, 15, 15, 20, 15]


def record_to_template_row(record: InvoiceRecord) -> Dict[str, Any]:
    """Convert an InvoiceRecord into an export row keyed by column title."""

    return {header: getattr(record, field) for header, field in COLUMN_FIELDS.items()}


def records_to_template_rows(records: Iterable[InvoiceRecord]) -> List[Dict[str, Any]]:
    """Convert an iterable of records into export rows."""

    return [record_to_template_row(record) for record in records]


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _cell_amount(value: Any) -> int:
    text = _cell_text(value).replace(",", "").strip()
    if not text:
        return 0
    try:
        return round_half_up(float(text))
    except ValueError:
        return 0


def template_row_to_record(row: Mapping[str, Any], source_file: str) -> InvoiceRecord:
    """Rebuild a record from an exported row with a fresh id.

    Raises ``ValueError`` when the row's voucher type is not one we produce.
    """

    values = {
        field: _cell_text(row.get(header))
        for header, field in COLUMN_FIELDS.items()
        if field != "amount"
    }
    return InvoiceRecord(
        amount=_cell_amount(row.get("AMOUNT")),
        file_name=f"Imported from {source_file}",
        **values,
    )


def template_rows_to_records(rows: Iterable[Mapping[str, Any]], source_file: str) -> List[InvoiceRecord]:
    """Import rows, skipping (and logging) any that cannot become a record."""

    records: List[InvoiceRecord] = []
    for index, row in enumerate(rows, start=2):
        if not any(_cell_text(value).strip() for value in row.values()):
            continue
        try:
            records.append(template_row_to_record(row, source_file))
        except ValueError as exc:
            logger.warning("Skipping row %d of %s: %s", index, source_file, exc)
    return records
