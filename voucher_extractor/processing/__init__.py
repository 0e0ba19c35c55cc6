"""Batch processing entry points."""
from voucher_extractor.processing.pipeline import auto_sheets_target, import_spreadsheet, run_pipeline

__all__ = ["auto_sheets_target", "import_spreadsheet", "run_pipeline"]
