"""Shipping-charge lookup shared by every voucher profile."""
from __future__ import annotations

import re

from voucher_extractor.ingestion.common import NUMBER_PATTERN, clean_amount, normalize_text

SHIPPING_LABEL = "shipping charge"
FRAGMENT_LENGTH = 200

# The charge is billed on the same line as its SAC tax code: "SAC: 9965 50.00".
_SAC_AMOUNT = re.compile(rf"SAC[: ]\s*\d+\s+({NUMBER_PATTERN})", re.IGNORECASE)
_ANY_AMOUNT = re.compile(NUMBER_PATTERN)


def extract_shipping_charge(text: str) -> float:
    """Return the shipping charge billed on the document, or 0 when absent."""

    clean = normalize_text(text)
    index = clean.lower().find(SHIPPING_LABEL)
    if index == -1:
        return 0.0

    fragment = clean[index:index + FRAGMENT_LENGTH]

    match = _SAC_AMOUNT.search(fragment)
    if match:
        return clean_amount(match.group(1))

    numbers = _ANY_AMOUNT.findall(fragment)
    if numbers:
        return clean_amount(numbers[-1])
    return 0.0
