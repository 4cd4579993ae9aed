"""Ledger access layer for stripeledger."""

from stripeledger.ledger.base import LedgerClient
from stripeledger.ledger.factories import create_stripe_ledger

__all__ = ["LedgerClient", "create_stripe_ledger"]
