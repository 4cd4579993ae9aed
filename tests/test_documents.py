"""Tests for receipt and invoice generation."""

from datetime import datetime, UTC

from conftest import FakeLedgerClient, make_charge, make_payout, make_transaction
from stripeledger.documents.storage import document_dir, safe_filename, save_document
from stripeledger.domain.documents import DocumentService
from stripeledger.domain.entities import Invoice


def _invoice(invoice_id, pdf):
    return Invoice(
        id=invoice_id,
        number=f"NUM-{invoice_id}",
        status="paid",
        currency="usd",
        amount_due=1000,
        amount_paid=1000,
        created=datetime(2024, 3, 7, tzinfo=UTC),
        customer_email="jane@example.com",
        invoice_pdf=pdf,
    )


def test_create_and_save_receipts_writes_one_pdf_per_charge(app_config, period):
    ledger = FakeLedgerClient(
        [
            make_charge(txn_id="a"),
            make_charge(txn_id="b"),
            make_payout(),
            make_transaction("charge", status="pending"),
        ]
    )

    paths = DocumentService(ledger, app_config).create_and_save_receipts("acme", period)

    assert [path.name for path in paths] == ["2024-03-05_ch_a.pdf", "2024-03-05_ch_b.pdf"]
    for path in paths:
        assert path.parent == app_config.output_dir / "acme" / "2024-03" / "receipts"
        assert path.read_bytes().startswith(b"%PDF")
    assert ledger.periods == [period]


def test_save_payout_receipts_lists_payout_transactions(app_config, period):
    ledger = FakeLedgerClient(
        [make_payout(txn_id="p1", amount=-5000, net=-4950, fee=50)],
        payout_transactions={"po_p1": [make_charge(txn_id="c1"), make_charge(txn_id="c2")]},
    )

    paths = DocumentService(ledger, app_config).save_payout_receipts("acme", period)

    assert len(paths) == 1
    assert paths[0].name == "2024-03-13_50.00usd_po_p1.pdf"
    assert paths[0].read_bytes().startswith(b"%PDF")


def test_download_invoices_skips_invoices_without_pdf(app_config, period):
    ledger = FakeLedgerClient(
        invoices=[_invoice("in_1", "https://files.example/in_1.pdf"), _invoice("in_2", None)],
        pdfs={"in_1": b"%PDF-1.7 invoice"},
    )

    paths = DocumentService(ledger, app_config).download_invoices("acme", period)

    assert [path.name for path in paths] == ["2024-03-07_NUM-in_1.pdf"]
    assert paths[0].read_bytes() == b"%PDF-1.7 invoice"
    assert paths[0].parent.name == "invoices"


def test_receipts_fall_back_to_account_name_as_issuer(app_config):
    assert app_config.issuer_name("acme") == "Acme Ltd"


def test_safe_filename():
    assert safe_filename("Acme Shop/EU") == "Acme_Shop_EU"
    assert safe_filename("...") == "document"


def test_save_document_overwrites(tmp_path, period):
    directory = document_dir(tmp_path, "acme", period, "receipts")

    save_document(directory, "a.pdf", b"one")
    path = save_document(directory, "a.pdf", b"two")

    assert path.read_bytes() == b"two"
