"""Domain model entities for stripeledger.

These are pure data classes representing ledger concepts, independent of the
Stripe SDK objects they are built from. This keeps the classification logic
stable when the upstream API shape changes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


KNOWN_TRANSACTION_TYPES = ("charge", "payout", "stripe_fee")


@dataclass(frozen=True)
class Period:
    """Half-open reporting interval [start, end)."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(f"Period end {self.end} must be after start {self.start}")

    @property
    def start_timestamp(self) -> int:
        return int(self.start.timestamp())

    @property
    def end_timestamp(self) -> int:
        return int(self.end.timestamp())

    @property
    def slug(self) -> str:
        """Month key used in output paths, e.g. ``2024-03``."""
        return self.start.strftime("%Y-%m")


class FeeKind(str, Enum):
    """Closed set of fee buckets a charge fee-detail can land in."""

    TAX = "tax"
    STRIPE_FEE = "stripe_fee"
    APPLICATION_FEE = "application_fee"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "FeeKind":
        """Map a fee-detail type tag to its bucket.

        Anything other than ``stripe_fee`` or ``application_fee`` is booked
        as tax, including tags Stripe may add in the future.
        """
        if tag == cls.STRIPE_FEE.value:
            return cls.STRIPE_FEE
        if tag == cls.APPLICATION_FEE.value:
            return cls.APPLICATION_FEE
        return cls.TAX

    @classmethod
    def is_known_tag(cls, tag: Optional[str]) -> bool:
        return tag in {kind.value for kind in cls}


class Disposition(str, Enum):
    """What the classifier did with a transaction."""

    PENDING = "pending"
    UNKNOWN_STATUS = "unknown_status"
    UNKNOWN_TYPE = "unknown_type"
    CLASSIFIED = "classified"


@dataclass(frozen=True)
class FeeDetail:
    """One deduction inside a charge's fee breakdown."""

    type: str
    amount: int
    currency: str
    description: Optional[str] = None


@dataclass(frozen=True)
class PayoutSource:
    """Expanded payout object attached to a payout balance transaction."""

    id: str
    available_on: Optional[int] = None
    arrival_date: Optional[int] = None
    status: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class ChargeSource:
    """Expanded charge object attached to a charge balance transaction."""

    id: str
    metadata: dict[str, Any] = field(default_factory=dict)
    payment_method_details: Optional[dict[str, Any]] = None
    billing_details: Optional[dict[str, Any]] = None
    description: Optional[str] = None
    receipt_email: Optional[str] = None


@dataclass(frozen=True)
class BalanceTransaction:
    """Ledger entry as returned by the balance transactions API."""

    id: str
    type: str
    status: str
    amount: int
    net: int
    fee: int
    currency: str
    created: int
    available_on: int
    source: PayoutSource | ChargeSource | None = None
    fee_details: tuple[FeeDetail, ...] = ()
    description: Optional[str] = None

    @property
    def source_id(self) -> Optional[str]:
        return self.source.id if self.source is not None else None


@dataclass(frozen=True)
class PayoutRecord:
    """Classified payout."""

    transaction_id: str
    source_id: Optional[str]
    amount: int
    fee: int
    currency: str
    status: str
    created: datetime
    available_on: datetime
    arrival_date: Optional[datetime]


@dataclass(frozen=True)
class ChargeRecord:
    """Classified charge."""

    transaction_id: str
    source_id: Optional[str]
    amount: int
    fee: int
    net: int
    currency: str
    created: datetime
    available_on: datetime
    metadata: dict[str, Any]
    payment_method: Optional[dict[str, Any]]
    billing_details: Optional[dict[str, Any]]
    description: Optional[str] = None
    receipt_email: Optional[str] = None


@dataclass(frozen=True)
class FeeLineItem:
    """One fee-detail line of a charge, booked into a fee bucket."""

    transaction_id: str
    charge_id: Optional[str]
    kind: FeeKind
    amount: int
    currency: str
    description: Optional[str]
    created: datetime
    available_on: datetime


@dataclass
class Totals:
    """Running totals in minor currency units."""

    pending_transactions: int = 0
    payouts_gross: int = 0
    payouts_net: int = 0
    payouts_fees: int = 0
    stripe_fees: int = 0
    charge_gross: int = 0
    charge_net: int = 0
    charge_fees: int = 0
    charge_stripe_fees: int = 0
    charge_application_fees: int = 0
    charge_tax_fees: int = 0

    def add_charge_fee(self, kind: FeeKind, amount: int) -> None:
        if kind is FeeKind.STRIPE_FEE:
            self.charge_stripe_fees += amount
        elif kind is FeeKind.APPLICATION_FEE:
            self.charge_application_fees += amount
        elif kind is FeeKind.TAX:
            self.charge_tax_fees += amount
        else:
            raise ValueError(f"Unhandled fee kind: {kind!r}")


@dataclass(frozen=True)
class SkippedTransaction:
    """Transaction left out of the totals, with the reason."""

    transaction: BalanceTransaction
    disposition: Disposition


@dataclass
class LedgerReport:
    """Result of one classification pass."""

    totals: Totals = field(default_factory=Totals)
    fees: dict[FeeKind, list[FeeLineItem]] = field(
        default_factory=lambda: {kind: [] for kind in FeeKind}
    )
    payouts: list[PayoutRecord] = field(default_factory=list)
    charges: list[ChargeRecord] = field(default_factory=list)
    transactions: list[BalanceTransaction] = field(default_factory=list)
    skipped: list[SkippedTransaction] = field(default_factory=list)

    def currencies(self) -> set[str]:
        """Currencies seen across classified records."""
        found = {record.currency for record in self.charges}
        found.update(record.currency for record in self.payouts)
        found.update(txn.currency for txn in self.transactions)
        return {currency.lower() for currency in found if currency}


@dataclass(frozen=True)
class Invoice:
    """Stripe-generated invoice."""

    id: str
    number: Optional[str]
    status: Optional[str]
    currency: str
    amount_due: int
    amount_paid: int
    created: datetime
    customer_email: Optional[str]
    invoice_pdf: Optional[str]
