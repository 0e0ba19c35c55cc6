"""Review helpers used by the Streamlit dashboard and other surfaces."""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional

from voucher_extractor.core.models import EDITABLE_FIELDS, InvoiceRecord, VoucherType, round_half_up
from voucher_extractor.review.registry import SourceRegistry

ALL_TYPES = "All"


def _coerce_amount(value: Any) -> int:
    if isinstance(value, str):
        value = value.replace(",", "").strip() or 0
    return round_half_up(float(value))


def apply_edits(record: InvoiceRecord, updates: Dict[str, Any]) -> InvoiceRecord:
    """Return a record with user-provided field updates applied.

    Only editable fields may change; ``None`` values leave a field untouched.
    """

    updated_fields = {key: value for key, value in updates.items() if value is not None}
    locked = sorted(set(updated_fields) - set(EDITABLE_FIELDS))
    if locked:
        raise ValueError(f"Fields cannot be edited: {', '.join(locked)}")
    if "amount" in updated_fields:
        updated_fields["amount"] = _coerce_amount(updated_fields["amount"])
    return replace(record, **updated_fields)


def update_record(
    records: Iterable[InvoiceRecord], record_id: str, updates: Dict[str, Any]
) -> List[InvoiceRecord]:
    """Patch the record with ``record_id``; other records pass through."""

    return [apply_edits(record, updates) if record.id == record_id else record for record in records]


def delete_record(
    records: Iterable[InvoiceRecord],
    record_id: str,
    registry: Optional[SourceRegistry] = None,
) -> List[InvoiceRecord]:
    """Drop a record and release its original file from ``registry``."""

    remaining: List[InvoiceRecord] = []
    for record in records:
        if record.id == record_id:
            if registry is not None:
                registry.release(record.file_name)
            continue
        remaining.append(record)
    return remaining


def clear_records(registry: Optional[SourceRegistry] = None) -> List[InvoiceRecord]:
    """Drop every record and release every registered file."""

    if registry is not None:
        registry.clear()
    return []


def original_file(record: InvoiceRecord, registry: SourceRegistry) -> Optional[bytes]:
    """Bytes of the PDF a record was extracted from, or ``None`` for imported rows."""

    if not record.file_name or record.file_name not in registry:
        return None
    return registry.read_bytes(record.file_name)


def _matches_search(record: InvoiceRecord, search_text: str) -> bool:
    needle = search_text.lower()
    return (
        needle in record.client_name.lower()
        or needle in record.number
        or needle in record.date
        or needle in record.invoice_number.lower()
        or needle in record.sold_by.lower()
    )


def filter_records(
    records: Iterable[InvoiceRecord], voucher_type: str = ALL_TYPES, search_text: str = ""
) -> List[InvoiceRecord]:
    """Filter by voucher type (``"All"`` keeps every type) and free-text search."""

    return [
        record
        for record in records
        if (voucher_type == ALL_TYPES or record.voucher_type == voucher_type)
        and (not search_text or _matches_search(record, search_text))
    ]


def summarize_records(records: Iterable[InvoiceRecord]) -> Dict[str, Any]:
    """Return counts per voucher type and the Sales minus Credit Note total."""

    records = list(records)
    counts = {member.value: 0 for member in VoucherType}
    totals = {member.value: 0 for member in VoucherType}
    for record in records:
        counts[record.voucher_type] += 1
        totals[record.voucher_type] += record.amount

    return {
        "total": len(records),
        "sales": counts[VoucherType.SALES.value],
        "credit_notes": counts[VoucherType.CREDIT_NOTE.value],
        "rma": counts[VoucherType.RMA.value],
        "net_total": totals[VoucherType.SALES.value] - totals[VoucherType.CREDIT_NOTE.value],
    }


def records_to_rows(records: Iterable[InvoiceRecord]) -> List[Dict[str, Any]]:
    """Convert records to dictionaries for tabular rendering."""

    def _sanitize(value: Any) -> Any:
        if isinstance(value, str):
            return " ".join(value.split())
        return value

    return [{key: _sanitize(value) for key, value in record.to_dict().items()} for record in records]
