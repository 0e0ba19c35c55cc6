"""Pipeline orchestration: PDFs in, spreadsheet rows out."""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from voucher_extractor.core.models import InvoiceRecord
from voucher_extractor.core.utils import load_env_file
from voucher_extractor.ingestion.loader import load_records
from voucher_extractor.reporting.sinks import push_to_google_sheets, read_spreadsheet, write_csv, write_excel
from voucher_extractor.reporting.templates import records_to_template_rows, template_rows_to_records
from voucher_extractor.review.workflow import ALL_TYPES, filter_records

DEFAULT_SERVICE_ACCOUNT_PATHS = [
    Path("secrets/service_account.json"),
    Path("credentials/service_account.json"),
]
DEFAULT_SHEETS_ENV_FILE = Path("secrets/sheets.env")
_SHEETS_ENV_LOADED = False


logger = logging.getLogger(__name__)


def _ensure_sheets_env() -> None:
    """Populate Google Sheets env vars from secrets/sheets.env."""

    global _SHEETS_ENV_LOADED
    if _SHEETS_ENV_LOADED:
        return
    _SHEETS_ENV_LOADED = True

    env_path = Path(os.getenv("GOOGLE_SHEETS_ENV_FILE", DEFAULT_SHEETS_ENV_FILE))
    load_env_file(env_path)


def _default_service_account_path() -> Optional[Path]:
    for candidate in DEFAULT_SERVICE_ACCOUNT_PATHS:
        if candidate.exists():
            return candidate
    return None


def _resolve_sheets_target(
    spreadsheet_id: Optional[str],
    worksheet_title: str,
    explicit_account_path: Optional[Path],
) -> Dict[str, Any]:
    _ensure_sheets_env()
    if not spreadsheet_id:
        raise ValueError("spreadsheet_id is required when sink='sheets'")

    account_path = explicit_account_path or _default_service_account_path()
    if not account_path:
        raise ValueError(
            "Provide --service-account pointing to your Google credentials or place a file at "
            f"{DEFAULT_SERVICE_ACCOUNT_PATHS[0]}"
        )

    return {
        "spreadsheet_id": spreadsheet_id,
        "worksheet_title": worksheet_title,
        "service_account_path": account_path,
    }


def auto_sheets_target() -> Optional[Dict[str, Any]]:
    _ensure_sheets_env()
    if os.getenv("GOOGLE_SHEETS_AUTO_SYNC", "0") != "1":
        return None

    spreadsheet_id = os.getenv("GOOGLE_SHEETS_SPREADSHEET_ID")
    if not spreadsheet_id:
        logger.warning("Auto Sheets sync is enabled but GOOGLE_SHEETS_SPREADSHEET_ID is missing.")
        return None

    worksheet = os.getenv("GOOGLE_SHEETS_WORKSHEET", "Sheet1")
    account_env = os.getenv("GOOGLE_SHEETS_SERVICE_ACCOUNT")
    account_path = Path(account_env) if account_env else _default_service_account_path()
    if not account_path:
        logger.warning("Auto Sheets sync is enabled but no service account JSON was found.")
        return None

    return {
        "spreadsheet_id": spreadsheet_id,
        "worksheet_title": worksheet,
        "service_account_path": account_path,
    }


def import_spreadsheet(path: Path) -> List[InvoiceRecord]:
    """Load records from a previously exported ``.xlsx`` or ``.csv`` file."""

    rows = read_spreadsheet(path)
    records = template_rows_to_records(rows, path.name)
    logger.info("Imported %d records from %s", len(records), path)
    return records


def run_pipeline(
    input_dir: Path,
    output_path: Path,
    sink: str = "csv",
    spreadsheet_id: str | None = None,
    worksheet_title: str = "Sheet1",
    service_account_path: Path | None = None,
    excel_path: Path | None = None,
    import_paths: Sequence[Path] = (),
    voucher_type: str = ALL_TYPES,
    search_text: str = "",
) -> Path:
    """Extract every PDF in ``input_dir``, write the CSV, then run the sink."""

    logger.info("Pipeline starting for input dir %s", input_dir)
    records: List[InvoiceRecord] = []
    for import_path in import_paths:
        records.extend(import_spreadsheet(import_path))

    extracted, alerts = load_records(input_dir)
    if alerts:
        logger.warning("Encountered %d ingestion alerts during loading", len(alerts))
        for alert in alerts:
            logger.warning("Alert: %s", alert)
    records.extend(extracted)

    if not records:
        message = (
            f"No records found under {input_dir}. "
            "Verify the directory exists and includes Sales Order, Credit Note, or RMA PDFs."
        )
        logger.error(message)
        raise ValueError(message)
    logger.info("Collected %d records", len(records))

    selected = filter_records(records, voucher_type=voucher_type, search_text=search_text)
    if len(selected) != len(records):
        logger.info("Filters kept %d of %d records", len(selected), len(records))

    rows = records_to_template_rows(selected)
    write_csv(rows, output_path)
    logger.info("Wrote CSV output to %s", output_path)

    if sink == "excel":
        excel_target = excel_path or output_path.with_suffix(".xlsx")
        write_excel(rows, excel_target)
        logger.info("Wrote Excel output to %s", excel_target)
    elif sink == "sheets":
        sheets_target = _resolve_sheets_target(
            spreadsheet_id=spreadsheet_id,
            worksheet_title=worksheet_title,
            explicit_account_path=service_account_path,
        )
        _push_rows_to_sheets(rows, sheets_target)
    else:
        _maybe_auto_sync(rows)
    return output_path


def _push_rows_to_sheets(rows: Iterable[Dict[str, Any]], target: Dict[str, Any]) -> None:
    push_to_google_sheets(
        rows,
        spreadsheet_id=target["spreadsheet_id"],
        worksheet_title=target["worksheet_title"],
        service_account_path=target["service_account_path"],
    )


def _maybe_auto_sync(rows: List[Dict[str, Any]]) -> None:
    target = auto_sheets_target()
    if not target:
        return
    _push_rows_to_sheets(rows, target)
    logger.info(
        "Pushed %d rows to Google Sheets document %s (worksheet %s)",
        len(rows),
        target["spreadsheet_id"],
        target["worksheet_title"],
    )
