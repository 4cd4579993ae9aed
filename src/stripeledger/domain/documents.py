"""Receipt and invoice document generation."""

import logging
from pathlib import Path
from typing import Optional

from stripeledger.config import AppConfig
from stripeledger.documents.pdf import render_charge_receipt, render_payout_receipt
from stripeledger.documents.storage import document_dir, save_document
from stripeledger.domain.entities import LedgerReport, Period
from stripeledger.domain.report import ProgressWrapper, ReportService
from stripeledger.ledger.base import LedgerClient
from stripeledger.utils.amounts import to_major_units

logger = logging.getLogger(__name__)

RECEIPTS_DIR = "receipts"
PAYOUTS_DIR = "payouts"
INVOICES_DIR = "invoices"


class DocumentService:
    """Service for producing receipts, payout receipts and invoices on disk."""

    def __init__(self, ledger: LedgerClient, config: AppConfig, report_service: Optional[ReportService] = None):
        """Initialize document service.

        Args:
            ledger: Ledger client for the selected account
            config: Output location and issuer details
            report_service: Report service, defaults to one over ``ledger``
        """
        self.ledger = ledger
        self.config = config
        self.report_service = report_service or ReportService(ledger)

    def create_and_save_receipts(
        self,
        account: str,
        period: Period,
        report: Optional[LedgerReport] = None,
        progress: Optional[ProgressWrapper] = None,
    ) -> list[Path]:
        """Write one PDF receipt per charge in the period.

        Args:
            account: Account name, used for the output path and as issuer fallback
            period: Reporting period
            report: Already classified report for the period, fetched if omitted
            progress: Optional progress wrapper for the transaction stream

        Returns:
            Paths of the written receipts
        """
        if report is None:
            report = self.report_service.build_report(period, progress=progress)

        directory = document_dir(self.config.output_dir, account, period, RECEIPTS_DIR)
        issuer = self.config.issuer_name(account)
        written = []
        for charge in report.charges:
            content = render_charge_receipt(charge, issuer, self.config.business_address)
            filename = f"{charge.created:%Y-%m-%d}_{charge.source_id or charge.transaction_id}.pdf"
            written.append(save_document(directory, filename, content))

        logger.info("Created %d receipt(s) in %s", len(written), directory)
        return written

    def save_payout_receipts(
        self,
        account: str,
        period: Period,
        report: Optional[LedgerReport] = None,
        progress: Optional[ProgressWrapper] = None,
    ) -> list[Path]:
        """Write one PDF per payout listing the transactions it settled."""
        if report is None:
            report = self.report_service.build_report(period, progress=progress)

        directory = document_dir(self.config.output_dir, account, period, PAYOUTS_DIR)
        issuer = self.config.issuer_name(account)
        written = []
        for payout in report.payouts:
            if payout.source_id is None:
                logger.warning("Payout transaction %s has no payout object, skipping", payout.transaction_id)
                continue
            contents = self.report_service.build_payout_report(payout.source_id)
            content = render_payout_receipt(payout, contents, issuer, self.config.business_address)
            arrival = payout.arrival_date or payout.created
            amount = to_major_units(-payout.amount, payout.currency)
            filename = f"{arrival:%Y-%m-%d}_{amount}{payout.currency}_{payout.source_id}.pdf"
            written.append(save_document(directory, filename, content))

        logger.info("Created %d payout receipt(s) in %s", len(written), directory)
        return written

    def download_invoices(self, account: str, period: Period) -> list[Path]:
        """Download every Stripe-rendered invoice PDF created in the period."""
        directory = document_dir(self.config.output_dir, account, period, INVOICES_DIR)
        written = []
        for invoice in self.ledger.list_invoices(period):
            if not invoice.invoice_pdf:
                logger.info("Invoice %s (%s) has no PDF, skipping", invoice.id, invoice.status)
                continue
            content = self.ledger.download_invoice_pdf(invoice)
            filename = f"{invoice.created:%Y-%m-%d}_{invoice.number or invoice.id}.pdf"
            written.append(save_document(directory, filename, content))

        logger.info("Downloaded %d invoice(s) to %s", len(written), directory)
        return written
