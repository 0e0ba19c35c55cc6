"""Data models for invoice records extracted from PDF vouchers."""
from __future__ import annotations

import math
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict


class VoucherType(str, Enum):
    """Business document category attached to every record."""

    SALES = "Sales"
    CREDIT_NOTE = "CN"
    RMA = "RMA"


VOUCHER_TYPES = tuple(member.value for member in VoucherType)

EDITABLE_FIELDS = (
    "sold_by",
    "client_name",
    "number",
    "source",
    "source_name",
    "product_line",
    "sale_type",
    "disc_offered",
    "invoice_number",
    "amount",
)

DEFAULT_PRODUCT_LINE = "TILES"


def new_record_id() -> str:
    return uuid.uuid4().hex


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up."""

    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class InvoiceRecord:
    """A single voucher row as shown in the review table and exports."""

    voucher_type: str
    date: str = ""
    client_name: str = ""
    number: str = ""
    product_line: str = DEFAULT_PRODUCT_LINE
    disc_offered: str = "0%"
    invoice_number: str = ""
    amount: int = 0
    sold_by: str = ""
    source: str = ""
    source_name: str = ""
    sale_type: str = ""
    file_name: str = ""
    id: str = field(default_factory=new_record_id)

    def __post_init__(self) -> None:
        voucher_type = self.voucher_type
        if isinstance(voucher_type, VoucherType):
            voucher_type = voucher_type.value
            object.__setattr__(self, "voucher_type", voucher_type)
        if voucher_type not in VOUCHER_TYPES:
            raise ValueError(f"Unknown voucher type {voucher_type!r}")
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"amount must be an integer, got {self.amount!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dictionary representation for JSON persistence."""

        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InvoiceRecord":
        """Rebuild a record from ``to_dict`` output, ignoring unknown keys."""

        known = {name for name in cls.__dataclass_fields__}
        return cls(**{key: value for key, value in data.items() if key in known})
