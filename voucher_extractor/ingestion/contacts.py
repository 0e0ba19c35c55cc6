"""Carve the client name and phone number out of the Bill To / Ship To block."""
from __future__ import annotations

import re
from typing import List, NamedTuple

from voucher_extractor.ingestion.common import normalize_text

BLOCK_LABELS = ("bill to", "ship to")
BLOCK_LENGTH = 200
MAX_NAME_TOKENS = 3

ADDRESS_WORDS = frozenset(
    {
        "opposite",
        "road",
        "sector",
        "nagar",
        "lane",
        "street",
        "plot",
        "colony",
        "jaipur",
        "rajasthan",
        "india",
    }
)

_LAYOUT_WORDS = re.compile(r"\b(?:ship|to)\b", re.IGNORECASE)
_PHONE = re.compile(r"\d{10}")
_HONORIFIC = re.compile(r"^(mrs|mr|ms|shri|smt)\b\.?", re.IGNORECASE)


class ClientContact(NamedTuple):
    name: str
    phone: str


def _address_block(text: str) -> str | None:
    lowered = text.lower()
    for label in BLOCK_LABELS:
        index = lowered.find(label)
        if index != -1:
            start = index + len(label)
            return text[start:start + BLOCK_LENGTH]
    return None


def extract_client_name_and_phone(text: str) -> ClientContact:
    """Return the best-effort client name and 10-digit phone for a document.

    The name is everything after an optional honorific up to the first
    address-looking token (a number or a common street/city word), capped at
    three words and uppercased. Either value may be empty.
    """

    block = _address_block(normalize_text(text))
    if block is None:
        return ClientContact("", "")

    block = _LAYOUT_WORDS.sub("", block).strip()

    phone = ""
    phone_match = _PHONE.search(block)
    if phone_match:
        phone = phone_match.group(0)
        block = block.replace(phone, "", 1).strip()

    block = re.sub(r"[()]", " ", block).strip()

    prefix = ""
    honorific = _HONORIFIC.match(block)
    if honorific:
        prefix = honorific.group(1).upper() + "."
        block = block[honorific.end():].strip()

    name_parts: List[str] = []
    for token in block.split():
        if token[0].isdigit() or token.lower() in ADDRESS_WORDS:
            break
        name_parts.append(token)
        if len(name_parts) >= MAX_NAME_TOKENS:
            break

    name = " ".join(name_parts)
    if prefix:
        name = f"{prefix} {name}"
    return ClientContact(name.upper(), phone)
