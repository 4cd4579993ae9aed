"""Ledger client factory functions."""

from typing import Optional

from stripeledger.domain.credentials import Credentials, SecretResolver, resolve_secret
from stripeledger.ledger.secrets import OnePasswordResolver
from stripeledger.ledger.stripe_client import StripeLedgerClient


def create_stripe_ledger(
    credentials: Credentials,
    account: str,
    debug: bool = False,
    resolver: Optional[SecretResolver] = None,
) -> StripeLedgerClient:
    """Create a Stripe ledger client for a named account.

    Args:
        credentials: Discovered credentials
        account: Account name to connect as
        debug: Log outbound ledger requests
        resolver: Secret resolver for ``op://`` references, defaults to the
            1Password CLI

    Returns:
        StripeLedgerClient instance

    Raises:
        ConfigurationError: If the account is unknown
        SecretResolutionError: If the secret reference cannot be resolved
    """
    token = credentials.get_account(account)
    secret = resolve_secret(token, resolver or OnePasswordResolver())
    return StripeLedgerClient(secret, debug=debug)
