"""Balance transaction classification and aggregation."""

import logging
from datetime import datetime, UTC
from typing import Iterable, Optional

from stripeledger.domain.entities import (
    KNOWN_TRANSACTION_TYPES,
    BalanceTransaction,
    ChargeRecord,
    ChargeSource,
    Disposition,
    FeeKind,
    FeeLineItem,
    LedgerReport,
    PayoutRecord,
    PayoutSource,
    SkippedTransaction,
)

logger = logging.getLogger(__name__)


def from_timestamp(value: Optional[int]) -> Optional[datetime]:
    """Convert epoch seconds to an aware UTC datetime."""
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=UTC)


class LedgerClassifier:
    """Service for classifying balance transactions into a ledger report.

    The ledger records money movement from the platform's perspective, so
    payouts and standalone Stripe fees arrive as negative amounts. They are
    sign-flipped here so totals read as conventional gross/net/fee figures.
    """

    def __init__(self, known_types: Iterable[str] = KNOWN_TRANSACTION_TYPES):
        """Initialize classifier.

        Args:
            known_types: Transaction types that are classified; anything
                else is logged and skipped
        """
        self.known_types = frozenset(known_types)

    def classify(self, transactions: Iterable[BalanceTransaction]) -> LedgerReport:
        """Classify a sequence of balance transactions.

        Args:
            transactions: Balance transactions in ledger order

        Returns:
            LedgerReport with totals, fee buckets and classified records
        """
        report = LedgerReport()
        for transaction in transactions:
            self.classify_transaction(report, transaction)
        return report

    def classify_transaction(
        self, report: LedgerReport, transaction: BalanceTransaction
    ) -> Disposition:
        """Apply a single transaction to a report and return its disposition."""
        if transaction.status == "pending":
            report.totals.pending_transactions += 1
            report.skipped.append(SkippedTransaction(transaction, Disposition.PENDING))
            return Disposition.PENDING

        if transaction.status != "available":
            logger.warning("Skipping transaction with status %r: %r", transaction.status, transaction)
            report.skipped.append(SkippedTransaction(transaction, Disposition.UNKNOWN_STATUS))
            return Disposition.UNKNOWN_STATUS

        if transaction.type not in self.known_types:
            logger.warning(
                "Unknown transaction type: %s, id: %s", transaction.type, transaction.id
            )
            report.skipped.append(SkippedTransaction(transaction, Disposition.UNKNOWN_TYPE))
            return Disposition.UNKNOWN_TYPE

        if transaction.type == "stripe_fee":
            self.apply_stripe_fee(report, transaction)
        elif transaction.type == "payout":
            self.apply_payout(report, transaction)
        elif transaction.type == "charge":
            self.apply_charge(report, transaction)

        report.transactions.append(transaction)
        return Disposition.CLASSIFIED

    def apply_stripe_fee(self, report: LedgerReport, transaction: BalanceTransaction) -> None:
        """Book a standalone Stripe fee as a positive cost."""
        report.totals.stripe_fees += -transaction.amount

    def apply_payout(self, report: LedgerReport, transaction: BalanceTransaction) -> None:
        """Book a payout and record when it reaches the bank."""
        totals = report.totals
        totals.payouts_gross += -transaction.amount
        totals.payouts_net += -transaction.net
        # Payout amounts are negative, but their fees are expected positive
        totals.payouts_fees += transaction.fee

        arrival = None
        if isinstance(transaction.source, PayoutSource):
            arrival = transaction.source.available_on
            if arrival is None:
                arrival = transaction.source.arrival_date

        report.payouts.append(
            PayoutRecord(
                transaction_id=transaction.id,
                source_id=transaction.source_id,
                amount=transaction.amount,
                fee=transaction.fee,
                currency=transaction.currency,
                status=transaction.status,
                created=from_timestamp(transaction.created),
                available_on=from_timestamp(transaction.available_on),
                arrival_date=from_timestamp(arrival),
            )
        )

    def apply_charge(self, report: LedgerReport, transaction: BalanceTransaction) -> None:
        """Book a charge and split its fee breakdown into fee buckets."""
        totals = report.totals
        created = from_timestamp(transaction.created)
        available_on = from_timestamp(transaction.available_on)

        for detail in transaction.fee_details:
            kind = FeeKind.from_tag(detail.type)
            if not FeeKind.is_known_tag(detail.type):
                logger.warning(
                    "Unknown fee type %r on transaction %s, booking it as %s",
                    detail.type,
                    transaction.id,
                    kind.value,
                )
            totals.add_charge_fee(kind, detail.amount)
            report.fees[kind].append(
                FeeLineItem(
                    transaction_id=transaction.id,
                    charge_id=transaction.source_id,
                    kind=kind,
                    amount=detail.amount,
                    currency=detail.currency,
                    description=detail.description,
                    created=created,
                    available_on=available_on,
                )
            )

        source = transaction.source if isinstance(transaction.source, ChargeSource) else None
        report.charges.append(
            ChargeRecord(
                transaction_id=transaction.id,
                source_id=transaction.source_id,
                amount=transaction.amount,
                fee=transaction.fee,
                net=transaction.net,
                currency=transaction.currency,
                created=created,
                available_on=available_on,
                metadata=dict(source.metadata) if source else {},
                payment_method=source.payment_method_details if source else None,
                billing_details=source.billing_details if source else None,
                description=source.description if source else transaction.description,
                receipt_email=source.receipt_email if source else None,
            )
        )

        totals.charge_fees += transaction.fee
        totals.charge_gross += transaction.amount
        totals.charge_net += transaction.net
