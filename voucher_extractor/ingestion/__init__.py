"""Voucher ingestion: PDF text, classification, and field extraction."""
from voucher_extractor.ingestion.charges import extract_shipping_charge
from voucher_extractor.ingestion.classifier import DocumentType, classify_document
from voucher_extractor.ingestion.common import clean_amount, normalize_text
from voucher_extractor.ingestion.contacts import ClientContact, extract_client_name_and_phone
from voucher_extractor.ingestion.invoices import build_record, parse_invoice_text, parse_pdf
from voucher_extractor.ingestion.loader import extract_records, load_pdf_files, load_records
from voucher_extractor.ingestion.pdf import TextExtractionError, read_pdf_text

__all__ = [
    "ClientContact",
    "DocumentType",
    "TextExtractionError",
    "build_record",
    "classify_document",
    "clean_amount",
    "extract_client_name_and_phone",
    "extract_records",
    "extract_shipping_charge",
    "load_pdf_files",
    "load_records",
    "normalize_text",
    "parse_invoice_text",
    "parse_pdf",
    "read_pdf_text",
]
