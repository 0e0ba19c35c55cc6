"""Text-layer extraction for PDF vouchers using pdfplumber."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Union

import pdfplumber

logger = logging.getLogger(__name__)

PdfSource = Union[str, Path, BinaryIO]


class TextExtractionError(Exception):
    """Raised when a PDF cannot be opened or has no readable text layer."""


def read_pdf_text(source: PdfSource) -> str:
    """Return the text of every page joined by newlines.

    ``source`` may be a path or a binary file object (for example a Streamlit
    upload). Scanned PDFs without a text layer come back as an empty string;
    callers treat that like any other unrecognized document.
    """

    try:
        with pdfplumber.open(source) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as exc:
        raise TextExtractionError(f"Could not read text from {_label(source)}: {exc}") from exc

    logger.debug("Read %d page(s) from %s", len(pages), _label(source))
    return "\n".join(pages)


def _label(source: PdfSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", "<stream>")
