"""Per-voucher extraction profiles built from ordered regex attempts.

Each field is located by a tuple of attempts, pure functions from normalized
text to an optional string. The first attempt that yields a value wins and a
field with no match falls back to an empty string. Profiles only differ in
their attempts and in how the pre-shipping amount is derived; discount,
shipping and rounding are shared.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from voucher_extractor.core.models import VoucherType
from voucher_extractor.ingestion.classifier import DocumentType
from voucher_extractor.ingestion.common import NUMBER_PATTERN, clean_amount

FieldAttempt = Callable[[str], Optional[str]]

DATE = r"(\d{2}/\d{2}/\d{4})"


def search(pattern: str, transform: Callable[[str], str] | None = None) -> FieldAttempt:
    """Build an attempt returning the first capture group of ``pattern``."""

    compiled = re.compile(pattern)

    def attempt(text: str) -> Optional[str]:
        match = compiled.search(text)
        if not match:
            return None
        value = match.group(1)
        return transform(value) if transform else value

    return attempt


def first_match(text: str, attempts: Tuple[FieldAttempt, ...]) -> str:
    """Run ``attempts`` in order and return the first non-empty value."""

    for attempt in attempts:
        value = attempt(text)
        if value:
            return value
    return ""


@dataclass(frozen=True)
class Discount:
    label: str
    percent: float


_DISCOUNT = re.compile(r"Discount\((\d+\.?\d*)%\)")


def extract_discount(text: str) -> Discount:
    """Read ``Discount(NN%)``; the label keeps the document's own digits."""

    match = _DISCOUNT.search(text)
    if not match:
        return Discount("0%", 0.0)
    return Discount(f"{match.group(1)}%", float(match.group(1)))


def apply_discount(amount: float, discount: Discount) -> float:
    return round(amount * (1 - discount.percent / 100), 2)


SUB_TOTAL = search(rf"Sub Total\s+({NUMBER_PATTERN})")
TOTAL = search(rf"Total\s+({NUMBER_PATTERN})")
INVOICE_NO = search(r"Invoice#\s*:\s*(\S+)")


def discounted_sub_total(text: str, discount: Discount) -> float:
    return apply_discount(clean_amount(SUB_TOTAL(text)), discount)


def return_amount(text: str, discount: Discount) -> float:
    """RMA amounts: the sub total as billed, else the discounted grand total."""

    sub_total = SUB_TOTAL(text)
    if sub_total:
        return clean_amount(sub_total)
    total = TOTAL(text)
    if total:
        return apply_discount(clean_amount(total), discount)
    return 0.0


@dataclass(frozen=True)
class DocumentProfile:
    """Field patterns and amount rule for one voucher family.

    ``reference_number`` is joined to ``primary_number`` as
    ``"<primary> / <reference>"``; profiles without reference attempts use
    the primary number alone.
    """

    voucher_type: VoucherType
    date: Tuple[FieldAttempt, ...]
    primary_number: Tuple[FieldAttempt, ...]
    reference_number: Tuple[FieldAttempt, ...]
    base_amount: Callable[[str, Discount], float]

    def invoice_number(self, text: str) -> str:
        primary = first_match(text, self.primary_number)
        if not self.reference_number:
            return primary
        return f"{primary} / {first_match(text, self.reference_number)}"


SALES_PROFILE = DocumentProfile(
    voucher_type=VoucherType.SALES,
    date=(
        search(rf"Invoice Date\s*:\s*{DATE}"),
        search(rf"Order Date\s*:\s*{DATE}"),
    ),
    primary_number=(
        search(r"P\.O\.#\s*:\s*(\S+)"),
        search(r"Sales Order#\s*:\s*(\S+)"),
    ),
    reference_number=(INVOICE_NO,),
    base_amount=discounted_sub_total,
)

CREDIT_NOTE_PROFILE = DocumentProfile(
    voucher_type=VoucherType.CREDIT_NOTE,
    date=(search(rf"Credit Date\s*:\s*{DATE}"),),
    primary_number=(search(r"#\s*:\s*(\S+)", lambda value: value.replace("/JGT", "", 1)),),
    reference_number=(INVOICE_NO,),
    base_amount=discounted_sub_total,
)

RMA_PROFILE = DocumentProfile(
    voucher_type=VoucherType.RMA,
    date=(search(rf"Date\s*:\s*{DATE}"),),
    primary_number=(search(r"RMA#\s*(RMA-\d+)"),),
    reference_number=(),
    base_amount=return_amount,
)

PROFILES: Dict[DocumentType, DocumentProfile] = {
    DocumentType.SALES: SALES_PROFILE,
    DocumentType.CREDIT_NOTE: CREDIT_NOTE_PROFILE,
    DocumentType.RMA: RMA_PROFILE,
}
