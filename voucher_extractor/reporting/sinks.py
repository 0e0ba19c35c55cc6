"""Spreadsheet sinks and sources for exported voucher rows."""
from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterable, List, Union
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException

from voucher_extractor.reporting.templates import COLUMN_WIDTHS, TEMPLATE_HEADERS

SHEET_TITLE = "Invoice Data"


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write export rows to a CSV file with the fixed column order."""

    rows = list(rows)
    ensure_output_dir(output_path)

    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=TEMPLATE_HEADERS)
        writer.writeheader()
        writer.writerows(rows)


def _build_workbook(rows: List[Dict[str, Any]]) -> Workbook:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.append(TEMPLATE_HEADERS)
    for row in rows:
        sheet.append([row.get(header, "") for header in TEMPLATE_HEADERS])
    for index, width in enumerate(COLUMN_WIDTHS, start=1):
        sheet.column_dimensions[get_column_letter(index)].width = width
    return workbook


def write_excel(rows: Iterable[Dict[str, Any]], output: Union[Path, BinaryIO]) -> None:
    """Write export rows to an Excel workbook on disk or into a binary buffer."""

    workbook = _build_workbook(list(rows))
    if isinstance(output, Path):
        ensure_output_dir(output)
    workbook.save(output)


def excel_bytes(rows: Iterable[Dict[str, Any]]) -> bytes:
    """Return the workbook as bytes, for download buttons."""

    buffer = io.BytesIO()
    write_excel(rows, buffer)
    return buffer.getvalue()


def push_to_google_sheets(
    rows: Iterable[Dict[str, Any]],
    spreadsheet_id: str,
    worksheet_title: str = "Sheet1",
    service_account_path: Path | None = None,
) -> None:
    """Upload rows to a Google Sheets worksheet using a service account."""

    rows = list(rows)
    if not rows:
        return

    try:
        import gspread
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise ImportError("gspread is required for Google Sheets sinks") from exc

    client = (
        gspread.service_account(filename=str(service_account_path))
        if service_account_path
        else gspread.service_account()
    )
    worksheet = client.open_by_key(spreadsheet_id).worksheet(worksheet_title)
    worksheet.clear()
    worksheet.append_rows(
        [TEMPLATE_HEADERS] + [[row.get(h, "") for h in TEMPLATE_HEADERS] for row in rows]
    )


def read_spreadsheet(source: Union[Path, BinaryIO], file_name: str | None = None) -> List[Dict[str, Any]]:
    """Read rows from the first sheet of an ``.xlsx`` file or from a ``.csv``.

    Raises ``ValueError`` when the file cannot be parsed.
    """

    name = file_name or (source.name if isinstance(source, Path) else getattr(source, "name", ""))
    try:
        if str(name).lower().endswith(".csv"):
            return _read_csv(source)
        return _read_xlsx(source)
    except (BadZipFile, InvalidFileException, OSError, KeyError, ValueError, UnicodeDecodeError) as exc:
        raise ValueError(
            f"Failed to parse {name or 'spreadsheet'}. Please ensure it matches the export format."
        ) from exc


def _read_csv(source: Union[Path, BinaryIO]) -> List[Dict[str, Any]]:
    if isinstance(source, Path):
        with source.open(newline="", encoding="utf-8-sig") as handle:
            return list(csv.DictReader(handle))
    text = source.read().decode("utf-8-sig")
    return list(csv.DictReader(io.StringIO(text)))


def _read_xlsx(source: Union[Path, BinaryIO]) -> List[Dict[str, Any]]:
    workbook = load_workbook(source, read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(values_only=True)
        header_row = next(rows, None)
        if not header_row:
            return []
        headers = [str(cell).strip() if cell is not None else "" for cell in header_row]
        return [dict(zip(headers, values)) for values in rows]
    finally:
        workbook.close()
