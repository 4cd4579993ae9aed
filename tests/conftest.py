"""Shared pytest fixtures for stripeledger tests."""

from datetime import datetime, UTC
from typing import Iterator, Optional

import pytest

from stripeledger.config import AppConfig
from stripeledger.domain.credentials import Credentials
from stripeledger.domain.entities import (
    BalanceTransaction,
    ChargeSource,
    FeeDetail,
    Invoice,
    PayoutSource,
    Period,
)
from stripeledger.ledger.base import LedgerClient

# 2024-03-05 12:00:00 UTC
CREATED = 1709640000
AVAILABLE_ON = 1710201600


def make_charge(
    txn_id: str = "txn_charge",
    amount: int = 1000,
    fee: int = 30,
    net: Optional[int] = None,
    fee_details: Optional[list[FeeDetail]] = None,
    currency: str = "usd",
    status: str = "available",
    source: Optional[ChargeSource] = None,
) -> BalanceTransaction:
    """Build an available charge balance transaction."""
    if fee_details is None:
        fee_details = [FeeDetail(type="stripe_fee", amount=fee, currency=currency, description="Stripe processing fees")]
    return BalanceTransaction(
        id=txn_id,
        type="charge",
        status=status,
        amount=amount,
        net=amount - fee if net is None else net,
        fee=fee,
        currency=currency,
        created=CREATED,
        available_on=AVAILABLE_ON,
        source=source or ChargeSource(
            id=f"ch_{txn_id}",
            metadata={"order": "1234"},
            payment_method_details={"type": "card", "card": {"brand": "visa", "last4": "4242"}},
            billing_details={"name": "Jane Doe", "email": "jane@example.com", "address": {"country": "US"}},
            description="Widget",
        ),
        fee_details=tuple(fee_details),
    )


def make_payout(
    txn_id: str = "txn_payout",
    amount: int = -5000,
    net: int = -4950,
    fee: int = 50,
    arrival: Optional[int] = 1710288000,
    status: str = "available",
) -> BalanceTransaction:
    """Build a payout balance transaction."""
    return BalanceTransaction(
        id=txn_id,
        type="payout",
        status=status,
        amount=amount,
        net=net,
        fee=fee,
        currency="usd",
        created=CREATED,
        available_on=AVAILABLE_ON,
        source=PayoutSource(id=f"po_{txn_id}", available_on=arrival),
    )


def make_transaction(
    txn_type: str,
    status: str = "available",
    amount: int = -100,
    txn_id: str = "txn_other",
) -> BalanceTransaction:
    """Build a balance transaction without a source."""
    return BalanceTransaction(
        id=txn_id,
        type=txn_type,
        status=status,
        amount=amount,
        net=amount,
        fee=0,
        currency="usd",
        created=CREATED,
        available_on=AVAILABLE_ON,
    )


class FakeLedgerClient(LedgerClient):
    """In-memory ledger used in place of Stripe."""

    def __init__(self, transactions=(), payout_transactions=None, invoices=(), pdfs=None):
        self.transactions = list(transactions)
        self.payout_transactions = payout_transactions or {}
        self.invoices = list(invoices)
        self.pdfs = pdfs or {}
        self.periods: list[Period] = []

    def list_balance_transactions(self, period: Period) -> Iterator[BalanceTransaction]:
        self.periods.append(period)
        yield from self.transactions

    def list_payout_transactions(self, payout_id: str) -> Iterator[BalanceTransaction]:
        yield from self.payout_transactions.get(payout_id, ())

    def list_invoices(self, period: Period) -> Iterator[Invoice]:
        yield from self.invoices

    def download_invoice_pdf(self, invoice: Invoice) -> bytes:
        return self.pdfs.get(invoice.id, b"%PDF-1.4 fake")


@pytest.fixture
def period():
    """March 2024 in UTC."""
    return Period(
        start=datetime(2024, 3, 1, tzinfo=UTC),
        end=datetime(2024, 4, 1, tzinfo=UTC),
    )


@pytest.fixture
def fake_ledger():
    """Empty fake ledger; tests fill in transactions."""
    return FakeLedgerClient()


@pytest.fixture
def app_config(tmp_path):
    """Configuration writing documents into a temporary directory."""
    return AppConfig(
        output_dir=tmp_path / "out",
        business_name="Acme Ltd",
        business_address=("1 Main St", "Springfield"),
    )


@pytest.fixture
def credentials():
    """Credentials for two accounts."""
    return Credentials({"acme": "sk_test_acme", "other": "sk_test_other"})


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_obj(credentials, app_config, fake_ledger):
    """Context object injecting fakes into the CLI."""
    calls = []

    def factory(creds, account, debug=False):
        calls.append(account)
        return fake_ledger

    return {
        "environ": {},
        "credentials": credentials,
        "config": app_config,
        "ledger_factory": factory,
        "factory_calls": calls,
    }
