"""Ledger report domain service."""

from typing import Callable, Iterable, Optional

from stripeledger.domain.classifier import LedgerClassifier
from stripeledger.domain.entities import BalanceTransaction, LedgerReport, Period
from stripeledger.ledger.base import LedgerClient

ProgressWrapper = Callable[[Iterable[BalanceTransaction]], Iterable[BalanceTransaction]]


class ReportService:
    """Service for building ledger reports for a period."""

    def __init__(self, ledger: LedgerClient, classifier: Optional[LedgerClassifier] = None):
        """Initialize report service.

        Args:
            ledger: Ledger client for the selected account
            classifier: Classifier to use, defaults to LedgerClassifier()
        """
        self.ledger = ledger
        self.classifier = classifier or LedgerClassifier()

    def build_report(self, period: Period, progress: Optional[ProgressWrapper] = None) -> LedgerReport:
        """Stream the period's balance transactions through the classifier.

        Args:
            period: Reporting period
            progress: Optional wrapper around the transaction stream, used by
                the CLI to display progress

        Returns:
            LedgerReport for the period

        Raises:
            LedgerError: If the ledger API fails
        """
        transactions: Iterable[BalanceTransaction] = self.ledger.list_balance_transactions(period)
        if progress is not None:
            transactions = progress(transactions)
        return self.classifier.classify(transactions)

    def build_payout_report(self, payout_id: str) -> LedgerReport:
        """Classify the balance transactions settled by one payout."""
        return self.classifier.classify(self.ledger.list_payout_transactions(payout_id))
