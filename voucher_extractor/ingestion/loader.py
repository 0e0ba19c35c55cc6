"""Batch loaders that turn many PDFs into records without stopping on failures."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from voucher_extractor.core.models import InvoiceRecord
from voucher_extractor.ingestion.invoices import parse_invoice_text
from voucher_extractor.ingestion.pdf import read_pdf_text

logger = logging.getLogger(__name__)

Document = Tuple[str, str]


def extract_records(documents: Iterable[Document]) -> Tuple[List[InvoiceRecord], List[str]]:
    """Parse ``(file_name, text)`` pairs, collecting an alert per unusable file."""

    records: List[InvoiceRecord] = []
    alerts: List[str] = []

    for file_name, text in documents:
        try:
            record = parse_invoice_text(text, file_name)
        except Exception:
            logger.exception("Failed to extract %s", file_name)
            alerts.append(f"Failed to parse {file_name}")
            continue
        if record is None:
            alerts.append(f"Failed to parse {file_name}: unrecognized document")
            continue
        records.append(record)

    return records, alerts


def _pdf_paths(input_dir: Path) -> List[Path]:
    return sorted(path for path in input_dir.glob("*") if path.suffix.lower() == ".pdf")


def load_pdf_files(paths: Iterable[Path]) -> Tuple[List[InvoiceRecord], List[str]]:
    """Read and parse each PDF in order; unreadable files become alerts."""

    read_alerts: List[str] = []

    def _documents() -> Iterator[Document]:
        for path in paths:
            try:
                text = read_pdf_text(path)
            except Exception:
                logger.exception("Failed to read PDF %s", path)
                read_alerts.append(f"Failed to read {path.name}")
                continue
            yield path.name, text

    records, parse_alerts = extract_records(_documents())
    return records, read_alerts + parse_alerts


def load_records(input_dir: Path) -> Tuple[List[InvoiceRecord], List[str]]:
    """Parse every ``*.pdf`` directly under ``input_dir``."""

    logger.info("Loading PDFs from %s", input_dir)
    records, alerts = load_pdf_files(_pdf_paths(input_dir))
    logger.info("Loaded %d records (%d alerts)", len(records), len(alerts))
    return records, alerts
