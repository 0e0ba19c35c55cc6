"""Command line entry point for converting voucher PDFs into spreadsheets."""
import argparse
from pathlib import Path

from voucher_extractor.core.logging import configure_logging
from voucher_extractor.core.models import VOUCHER_TYPES
from voucher_extractor.processing.pipeline import run_pipeline
from voucher_extractor.review.workflow import ALL_TYPES


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(description="Extract Sales, CN, and RMA vouchers from PDFs")
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=Path("pdfs"),
        help="Folder containing the voucher PDFs",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("output/invoice_data.csv"),
        help="CSV file to write extracted records to",
    )
    parser.add_argument(
        "--sink",
        choices=["csv", "sheets", "excel"],
        default="csv",
        help="Where to forward extracted rows after writing the CSV",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        default=Path("output/invoice_data.xlsx"),
        help="Excel file to write when --sink=excel",
    )
    parser.add_argument(
        "--import",
        dest="import_paths",
        type=Path,
        action="append",
        default=[],
        help="Previously exported .xlsx/.csv to merge in (repeatable)",
    )
    parser.add_argument(
        "--voucher-type",
        choices=[ALL_TYPES, *VOUCHER_TYPES],
        default=ALL_TYPES,
        help="Only export records of this voucher type",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Only export records matching this client, number, date, or invoice text",
    )
    parser.add_argument(
        "--spreadsheet-id",
        help="Google Sheets spreadsheet ID for the sheets sink",
    )
    parser.add_argument(
        "--worksheet",
        default="Sheet1",
        help="Worksheet title inside the Google Sheets document",
    )
    parser.add_argument(
        "--service-account",
        type=Path,
        help="Path to a Google service account JSON key used for Sheets pushes",
    )
    return parser


def main() -> None:
    """Entrypoint for running the pipeline from the command line."""

    configure_logging()
    args = build_parser().parse_args()
    output_path = run_pipeline(
        args.input_dir,
        args.output,
        sink=args.sink,
        spreadsheet_id=args.spreadsheet_id,
        worksheet_title=args.worksheet,
        service_account_path=args.service_account,
        excel_path=args.excel_output,
        import_paths=args.import_paths,
        voucher_type=args.voucher_type,
        search_text=args.search,
    )
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
