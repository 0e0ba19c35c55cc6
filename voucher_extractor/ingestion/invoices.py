"""Turn the text of a Sales Order, Credit Note, or RMA into an InvoiceRecord."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from voucher_extractor.core.models import DEFAULT_PRODUCT_LINE, InvoiceRecord, round_half_up
from voucher_extractor.ingestion.charges import extract_shipping_charge
from voucher_extractor.ingestion.classifier import DocumentType, classify_document
from voucher_extractor.ingestion.common import normalize_text
from voucher_extractor.ingestion.contacts import extract_client_name_and_phone
from voucher_extractor.ingestion.pdf import PdfSource, read_pdf_text
from voucher_extractor.ingestion.profiles import PROFILES, DocumentProfile, extract_discount, first_match

logger = logging.getLogger(__name__)


def build_record(profile: DocumentProfile, text: str, file_name: str) -> InvoiceRecord:
    """Apply a profile to normalized text; missing fields fall back to defaults."""

    contact = extract_client_name_and_phone(text)
    discount = extract_discount(text)
    base_amount = profile.base_amount(text, discount)
    shipping_charge = extract_shipping_charge(text)
    settled = round(base_amount - shipping_charge, 2)

    return InvoiceRecord(
        voucher_type=profile.voucher_type,
        date=first_match(text, profile.date),
        client_name=contact.name,
        number=contact.phone,
        product_line=DEFAULT_PRODUCT_LINE,
        disc_offered=discount.label,
        invoice_number=profile.invoice_number(text),
        amount=round_half_up(settled),
        file_name=file_name,
    )


def parse_invoice_text(text: str, file_name: str = "") -> Optional[InvoiceRecord]:
    """Classify raw document text and extract a record, or ``None`` if unknown."""

    normalized = normalize_text(text)
    document_type = classify_document(normalized)
    if document_type is DocumentType.UNRECOGNIZED:
        logger.warning("No voucher markers found in %s", file_name or "document")
        return None

    record = build_record(PROFILES[document_type], normalized, file_name)
    logger.debug("Parsed %s as %s (%s)", file_name, record.voucher_type, record.invoice_number)
    return record


def parse_pdf(source: PdfSource, file_name: str | None = None) -> Optional[InvoiceRecord]:
    """Read a PDF's text layer and extract its record.

    Raises ``TextExtractionError`` when the file cannot be read.
    """

    if file_name is None:
        file_name = Path(source).name if isinstance(source, (str, Path)) else getattr(source, "name", "")
    return parse_invoice_text(read_pdf_text(source), file_name)
