"""Streamlit dashboard to upload voucher PDFs, edit extracted rows, and export them."""
import io
from pathlib import Path
from typing import Any, Dict, List

import streamlit as st

# Allow running via "streamlit run voucher_extractor/ui/dashboard.py" without installing
# the package by ensuring the repository root is on ``sys.path``.
if __package__ in {None, ""}:
    import sys

    sys.path.append(str(Path(__file__).resolve().parents[2]))

from voucher_extractor.core.logging import configure_logging
from voucher_extractor.core.models import EDITABLE_FIELDS, VOUCHER_TYPES, InvoiceRecord
from voucher_extractor.core.utils import store_path
from voucher_extractor.ingestion.invoices import parse_pdf
from voucher_extractor.ingestion.pdf import TextExtractionError
from voucher_extractor.reporting.sinks import excel_bytes, read_spreadsheet
from voucher_extractor.reporting.templates import records_to_template_rows, template_rows_to_records
from voucher_extractor.review.registry import SourceRegistry
from voucher_extractor.review.store import RecordStore
from voucher_extractor.review.workflow import (
    ALL_TYPES,
    clear_records,
    delete_record,
    filter_records,
    original_file,
    summarize_records,
    update_record,
)

TABLE_COLUMNS = {
    "id": "ID",
    "date": "Date",
    "sold_by": "Sold By",
    "client_name": "Client Name",
    "number": "Number",
    "source": "Source",
    "source_name": "Source NAME",
    "product_line": "Product Line",
    "sale_type": "Sale Type",
    "disc_offered": "Disc Offered %",
    "voucher_type": "Voucher Type",
    "invoice_number": "Invoice Number",
    "amount": "AMOUNT",
    "file_name": "File",
}


def _session_store() -> RecordStore:
    if "store" not in st.session_state:
        st.session_state.store = RecordStore(store_path())
    return st.session_state.store


def _session_records() -> List[InvoiceRecord]:
    """Restore the table from the record store once per session."""

    if "records" not in st.session_state:
        st.session_state.records = _session_store().load()
        st.session_state.registry = SourceRegistry()
    return st.session_state.records


def _set_records(records: List[InvoiceRecord]) -> None:
    st.session_state.records = records
    _session_store().save(records)


def _ingest_pdfs(uploads: List[Any]) -> None:
    """Parse each uploaded PDF; one bad file never blocks the rest."""

    registry: SourceRegistry = st.session_state.registry
    new_records: List[InvoiceRecord] = []
    for upload in uploads:
        payload = upload.getvalue()
        try:
            record = parse_pdf(io.BytesIO(payload), file_name=upload.name)
        except TextExtractionError as exc:
            st.error(f"Error processing: {upload.name} ({exc})")
            continue
        if record is None:
            st.error(f"Failed to parse: {upload.name}")
            continue
        registry.register(upload.name, payload)
        new_records.append(record)
        st.toast(f"Parsed: {upload.name}")

    if new_records:
        _set_records(_session_records() + new_records)
        st.success(f"Successfully processed {len(new_records)} file(s)")


def _import_spreadsheet(upload: Any) -> None:
    try:
        rows = read_spreadsheet(io.BytesIO(upload.getvalue()), file_name=upload.name)
    except ValueError as exc:
        st.error(str(exc))
        return
    imported = template_rows_to_records(rows, upload.name)
    _set_records(_session_records() + imported)
    st.success(f"Imported {len(imported)} record(s) from {upload.name}")


def _summary(records: List[InvoiceRecord]) -> None:
    summary = summarize_records(records)
    cols = st.columns(4)
    cols[0].metric("Total Records", summary["total"])
    cols[1].metric("Sales Orders", summary["sales"])
    cols[2].metric("Credit Notes", summary["credit_notes"])
    cols[3].metric("Net Total", f"₹{summary['net_total']:.2f}")


def _table_rows(records: List[InvoiceRecord]) -> List[Dict[str, Any]]:
    return [{label: getattr(record, field) for field, label in TABLE_COLUMNS.items()} for record in records]


def _collect_edits(original: List[InvoiceRecord], edited_rows: List[Dict[str, Any]]) -> None:
    """Apply changed editable cells back onto the session records."""

    records = _session_records()
    changed = False
    for record, row in zip(original, edited_rows):
        updates = {}
        for field in EDITABLE_FIELDS:
            value = row.get(TABLE_COLUMNS[field])
            if value is not None and value != getattr(record, field):
                updates[field] = value
        if updates:
            try:
                records = update_record(records, record.id, updates)
            except ValueError as exc:
                st.error(f"Could not update {record.invoice_number or record.file_name}: {exc}")
                continue
            changed = True
    if changed:
        _set_records(records)
        st.toast("Record updated")


def _render_table(records: List[InvoiceRecord]) -> List[InvoiceRecord]:
    filter_cols = st.columns([3, 1])
    with filter_cols[0]:
        search_text = st.text_input(
            "Search", placeholder="Search by client name, number, invoice number, or sold by..."
        )
    with filter_cols[1]:
        voucher_type = st.selectbox("Voucher type", options=[ALL_TYPES, *VOUCHER_TYPES])

    filtered = filter_records(records, voucher_type=voucher_type, search_text=search_text)
    locked_columns = [label for field, label in TABLE_COLUMNS.items() if field not in EDITABLE_FIELDS]
    edited_rows = st.data_editor(
        _table_rows(filtered),
        hide_index=True,
        num_rows="fixed",
        use_container_width=True,
        key=f"editor_{voucher_type}_{search_text}",
        disabled=locked_columns,
        column_config={"AMOUNT": st.column_config.NumberColumn("AMOUNT", format="%d", step=1)},
    )
    _collect_edits(filtered, edited_rows)
    st.caption(f"Showing {len(filtered)} of {len(records)} records")
    return filter_records(_session_records(), voucher_type=voucher_type, search_text=search_text)


def _render_actions(records: List[InvoiceRecord], filtered: List[InvoiceRecord]) -> None:
    registry: SourceRegistry = st.session_state.registry
    labels = {record.id: f"{record.invoice_number or '-'} ({record.file_name})" for record in records}

    delete_cols = st.columns([3, 1])
    with delete_cols[0]:
        doomed = st.multiselect("Delete records", options=list(labels), format_func=labels.get)
    with delete_cols[1]:
        if st.button("Delete selected", disabled=not doomed):
            remaining = records
            for record_id in doomed:
                remaining = delete_record(remaining, record_id, registry=registry)
            _set_records(remaining)
            st.rerun()

    reopen_cols = st.columns([3, 1])
    with reopen_cols[0]:
        chosen_id = st.selectbox("Original file", options=list(labels), format_func=labels.get)
    chosen = next((record for record in records if record.id == chosen_id), None)
    payload = original_file(chosen, registry) if chosen else None
    with reopen_cols[1]:
        st.download_button(
            "Download original",
            data=payload or b"",
            file_name=chosen.file_name if payload else "original.pdf",
            mime="application/pdf",
            disabled=payload is None,
        )

    export_cols = st.columns(3)
    export_cols[0].download_button(
        "Export All to Excel",
        data=excel_bytes(records_to_template_rows(records)),
        file_name="invoice_data.xlsx",
        disabled=not records,
    )
    export_cols[1].download_button(
        "Export Filtered",
        data=excel_bytes(records_to_template_rows(filtered)),
        file_name="filtered_invoice_data.xlsx",
        disabled=not filtered,
    )
    if export_cols[2].button("Clear all", type="secondary"):
        _set_records(clear_records(registry))
        _session_store().clear()
        st.rerun()


def main() -> None:
    """Launch the PDF to Excel converter."""

    configure_logging()
    st.set_page_config(page_title="PDF to Excel Converter", layout="wide")
    st.title("PDF to Excel Converter")
    st.caption("Extract data from Sales Orders, Credit Notes, and RMA returns")

    records = _session_records()

    upload_cols = st.columns(2)
    with upload_cols[0]:
        pdfs = st.file_uploader("Voucher PDFs", type=["pdf"], accept_multiple_files=True)
        if pdfs and st.button("Process PDFs", type="primary"):
            _ingest_pdfs(pdfs)
    with upload_cols[1]:
        sheet = st.file_uploader("Import exported spreadsheet", type=["xlsx", "csv"])
        if sheet and st.button("Import rows"):
            _import_spreadsheet(sheet)

    records = _session_records()
    if not records:
        st.info("Upload PDFs or import a spreadsheet to get started.")
        return

    _summary(records)
    st.markdown("### Records preview")
    filtered = _render_table(records)
    _render_actions(_session_records(), filtered)


if __name__ == "__main__":
    main()
