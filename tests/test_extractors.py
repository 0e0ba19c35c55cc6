"""Tests for classifying voucher text and extracting record fields."""
import pytest

from voucher_extractor.core.models import InvoiceRecord
from voucher_extractor.ingestion import (
    DocumentType,
    classify_document,
    extract_client_name_and_phone,
    extract_shipping_charge,
    normalize_text,
    parse_invoice_text,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Tax Invoice Invoice# : INV-1", DocumentType.SALES),
        ("Sales Order# : SO-00012", DocumentType.SALES),
        ("CREDIT NOTE Invoice# : INV-1", DocumentType.CREDIT_NOTE),
        ("Credit CN-00045 against Tax Invoice", DocumentType.CREDIT_NOTE),
        ("RMA# RMA-00169 Invoice# : INV-1 CREDIT NOTE", DocumentType.RMA),
        ("SALES RETURN for Sales Order SO-1", DocumentType.RMA),
        ("Purchase receipt", DocumentType.UNRECOGNIZED),
    ],
)
def test_classify_document_priority(text, expected):
    assert classify_document(text) is expected


def test_classify_document_is_case_sensitive():
    assert classify_document("credit note tax invoice") is DocumentType.UNRECOGNIZED


def test_normalize_text_collapses_whitespace():
    assert normalize_text("  Sub\tTotal \n\n 1,000 ") == "Sub Total 1,000"


def test_parse_sales_order(sales_text):
    record = parse_invoice_text(sales_text, "sales.pdf")

    assert isinstance(record, InvoiceRecord)
    assert record.voucher_type == "Sales"
    assert record.date == "05/03/2024"
    assert record.invoice_number == "PO123 / INV55"
    assert record.client_name == "MR. RAMESH KUMAR SHARMA"
    assert record.number == "9876543210"
    assert record.product_line == "TILES"
    assert record.disc_offered == "10%"
    assert record.amount == 900
    assert record.file_name == "sales.pdf"
    assert record.sold_by == record.source == record.source_name == record.sale_type == ""


def test_parse_sales_order_subtracts_shipping(sales_with_shipping_text):
    record = parse_invoice_text(sales_with_shipping_text, "sales.pdf")
    assert record.amount == 850


def test_sales_order_falls_back_to_order_date_and_sales_order_number():
    text = "Sales Order Sales Order# : SO-00012 Order Date : 01/02/2024 Sub Total 300"
    record = parse_invoice_text(text)

    assert record.date == "01/02/2024"
    assert record.invoice_number == "SO-00012 / "
    assert record.disc_offered == "0%"
    assert record.amount == 300


def test_sales_order_missing_fields_default_to_empty():
    record = parse_invoice_text("Tax Invoice")

    assert record.date == ""
    assert record.invoice_number == " / "
    assert record.client_name == ""
    assert record.number == ""
    assert record.amount == 0


def test_parse_credit_note(credit_note_text):
    record = parse_invoice_text(credit_note_text, "cn.pdf")

    assert record.voucher_type == "CN"
    assert record.date == "12/04/2024"
    assert record.invoice_number == "CN-00045 / INV-00981"
    assert record.client_name == "SMT. KAVITA DEVI"
    assert record.number == "9812345678"
    assert record.disc_offered == "12%"
    assert record.amount == 2200


def test_parse_rma(rma_text):
    record = parse_invoice_text(rma_text, "rma.pdf")

    assert record.voucher_type == "RMA"
    assert record.date == "20/05/2024"
    assert record.invoice_number == "RMA-00169"
    assert record.client_name == "SHRI. MOHAN LAL"
    assert record.number == "9001122334"
    assert record.amount == 500


def test_rma_ignores_discount_on_sub_total():
    record = parse_invoice_text("RMA# RMA-00170 Sub Total 500 Discount(10%)")
    assert record.amount == 500
    assert record.disc_offered == "10%"


def test_rma_discounts_grand_total_without_sub_total():
    record = parse_invoice_text("SALES RETURN RMA# RMA-00171 Discount(5%) Total 1,000.00")
    assert record.amount == 950


def test_unrecognized_text_yields_no_record(caplog):
    caplog.set_level("WARNING")
    assert parse_invoice_text("Quarterly newsletter", "news.pdf") is None
    assert "news.pdf" in caplog.text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Tax Invoice Sub Total 1,234.56 Discount(7.5%)", 1142),
        ("Tax Invoice Sub Total 100.50", 101),
        ("Tax Invoice Sub Total 99.49", 99),
        ("Tax Invoice Sub Total 40 Shipping Charge SAC: 9965 50.00", -10),
    ],
)
def test_amount_is_rounded_to_an_integer(text, expected):
    record = parse_invoice_text(text)
    assert isinstance(record.amount, int)
    assert record.amount == expected


def test_client_name_without_address_block():
    assert extract_client_name_and_phone("Tax Invoice INV-1") == ("", "")


def test_client_name_falls_back_to_ship_to():
    contact = extract_client_name_and_phone("Ship To Anil Kumar 9876501234 Lane 4")
    assert contact.name == "ANIL KUMAR"
    assert contact.phone == "9876501234"


def test_client_name_strips_layout_words():
    contact = extract_client_name_and_phone("Bill To Ship To Anil Kumar 9876501234")
    assert contact.name == "ANIL KUMAR"


def test_client_name_caps_at_three_tokens():
    contact = extract_client_name_and_phone("Bill To Ram Prasad Verma Traders Limited")
    assert contact.name == "RAM PRASAD VERMA"
    assert len(contact.name.split()) == 3


def test_client_name_stops_at_digit_token():
    contact = extract_client_name_and_phone("Bill To Sunita 42B Malviya")
    assert contact.name == "SUNITA"


def test_client_name_handles_mrs_and_names_starting_with_mr():
    assert extract_client_name_and_phone("Bill To Mrs. Anita Gupta").name == "MRS. ANITA GUPTA"
    assert extract_client_name_and_phone("Bill To Mrinal Sen 9876543210").name == "MRINAL SEN"


def test_client_name_without_phone():
    contact = extract_client_name_and_phone("Bill To ms priya jain road 5")
    assert contact == ("MS. PRIYA JAIN", "")


def test_shipping_charge_absent_is_zero():
    assert extract_shipping_charge("Tax Invoice Sub Total 1000") == 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Shipping Charge SAC: 996511 1,250.00 18% 225.00", 1250.0),
        ("shipping charge sac 9965 80", 80.0),
        ("Shipping charge 150.00", 150.0),
        ("Shipping Charge 18% 120.00", 120.0),
        ("Shipping Charge (free)", 0.0),
    ],
)
def test_shipping_charge_patterns(text, expected):
    assert extract_shipping_charge(text) == expected
