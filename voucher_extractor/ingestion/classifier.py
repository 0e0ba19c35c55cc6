"""Pick the voucher family a PDF belongs to from its marker strings."""
from __future__ import annotations

from enum import Enum
from typing import Sequence, Tuple


class DocumentType(str, Enum):
    SALES = "Sales"
    CREDIT_NOTE = "CreditNote"
    RMA = "RMA"
    UNRECOGNIZED = "Unrecognized"


# Checked in order: return and credit documents also quote Sales markers
# such as the original Invoice#.
DOCUMENT_MARKERS: Sequence[Tuple[DocumentType, Tuple[str, ...]]] = (
    (DocumentType.RMA, ("SALES RETURN", "RMA#", "RMA-")),
    (DocumentType.CREDIT_NOTE, ("CREDIT NOTE", "CN-")),
    (DocumentType.SALES, ("Tax Invoice", "Invoice#", "Sales Order", "Sales Order#")),
)


def classify_document(text: str) -> DocumentType:
    """Return the first document type whose markers appear in ``text``."""

    for document_type, markers in DOCUMENT_MARKERS:
        if any(marker in text for marker in markers):
            return document_type
    return DocumentType.UNRECOGNIZED
