"""Abstract ledger client interface."""

from abc import ABC, abstractmethod
from typing import Iterator

from stripeledger.domain.entities import BalanceTransaction, Invoice, Period


class LedgerClient(ABC):
    """Abstract read-only interface to a payment processor ledger."""

    @abstractmethod
    def list_balance_transactions(self, period: Period) -> Iterator[BalanceTransaction]:
        """Yield balance transactions created in [period.start, period.end).

        Pagination is followed transparently; transactions come back in the
        order the upstream ledger returns them. Each call starts a new listing.
        """
        pass

    @abstractmethod
    def list_payout_transactions(self, payout_id: str) -> Iterator[BalanceTransaction]:
        """Yield balance transactions settled by a payout."""
        pass

    @abstractmethod
    def list_invoices(self, period: Period) -> Iterator[Invoice]:
        """Yield invoices created in [period.start, period.end)."""
        pass

    @abstractmethod
    def download_invoice_pdf(self, invoice: Invoice) -> bytes:
        """Return the rendered PDF of an invoice."""
        pass
