"""Stripe implementation of the ledger client."""

import logging
from typing import Any, Iterator

import requests
import stripe

from stripeledger.domain.entities import BalanceTransaction, Invoice, Period
from stripeledger.domain.errors import DocumentError, LedgerError
from stripeledger.ledger.base import LedgerClient
from stripeledger.ledger.mappers import balance_transaction_to_domain, invoice_to_domain

logger = logging.getLogger(__name__)

STRIPE_API_VERSION = "2023-08-16"
PAGE_SIZE = 100


class StripeLedgerClient(LedgerClient):
    """Ledger client backed by the Stripe SDK.

    The secret is passed per request rather than through the SDK's global
    ``stripe.api_key``, so several clients can coexist in one process.
    """

    def __init__(
        self,
        secret: str,
        api_version: str = STRIPE_API_VERSION,
        debug: bool = False,
        download_timeout: float = 30.0,
    ):
        """Initialize Stripe ledger client.

        Args:
            secret: Stripe secret or restricted API key
            api_version: Stripe API version to pin requests to
            debug: Log every outbound list request
            download_timeout: Timeout in seconds for invoice PDF downloads
        """
        self.secret = secret
        self.api_version = api_version
        self.debug = debug
        self.download_timeout = download_timeout

    def _request_options(self) -> dict[str, Any]:
        return {"api_key": self.secret, "stripe_version": self.api_version}

    def _log_request(self, resource: str, params: dict[str, Any]) -> None:
        if self.debug:
            logger.debug("stripe.request GET /v1/%s %s", resource, params)

    def _paginate(self, resource: str, lister, params: dict[str, Any]) -> Iterator[Any]:
        """Yield every object of a list call, following pagination cursors."""
        self._log_request(resource, params)
        try:
            page = lister(**params, **self._request_options())
            for obj in page.auto_paging_iter():
                yield obj
        except stripe.StripeError as e:
            raise LedgerError(f"Stripe request to {resource} failed: {e}") from e

    def list_balance_transactions(self, period: Period) -> Iterator[BalanceTransaction]:
        params = {
            "created": {"gte": period.start_timestamp, "lt": period.end_timestamp},
            "expand": ["data.source"],
            "limit": PAGE_SIZE,
        }
        for obj in self._paginate("balance_transactions", stripe.BalanceTransaction.list, params):
            yield balance_transaction_to_domain(obj)

    def list_payout_transactions(self, payout_id: str) -> Iterator[BalanceTransaction]:
        params = {
            "payout": payout_id,
            "expand": ["data.source"],
            "limit": PAGE_SIZE,
        }
        for obj in self._paginate("balance_transactions", stripe.BalanceTransaction.list, params):
            yield balance_transaction_to_domain(obj)

    def list_invoices(self, period: Period) -> Iterator[Invoice]:
        params = {
            "created": {"gte": period.start_timestamp, "lt": period.end_timestamp},
            "limit": PAGE_SIZE,
        }
        for obj in self._paginate("invoices", stripe.Invoice.list, params):
            yield invoice_to_domain(obj)

    def download_invoice_pdf(self, invoice: Invoice) -> bytes:
        if not invoice.invoice_pdf:
            raise DocumentError(f"Invoice {invoice.id} has no PDF")
        if self.debug:
            logger.debug("Downloading invoice PDF %s", invoice.invoice_pdf)
        try:
            response = requests.get(invoice.invoice_pdf, timeout=self.download_timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise LedgerError(f"Failed to download invoice {invoice.id}: {e}") from e
        return response.content
