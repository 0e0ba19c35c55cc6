"""Core building blocks for the voucher_extractor package."""
from voucher_extractor.core.logging import configure_logging
from voucher_extractor.core.models import (
    EDITABLE_FIELDS,
    VOUCHER_TYPES,
    InvoiceRecord,
    VoucherType,
    round_half_up,
)
from voucher_extractor.core.utils import get_config_value, load_env_file, store_path

__all__ = [
    "configure_logging",
    "EDITABLE_FIELDS",
    "VOUCHER_TYPES",
    "InvoiceRecord",
    "VoucherType",
    "round_half_up",
    "get_config_value",
    "load_env_file",
    "store_path",
]
