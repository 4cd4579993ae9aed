"""Credential discovery and secret resolution."""

from types import MappingProxyType
from typing import Mapping, Optional, Protocol

from stripeledger.domain.errors import (
    ConfigurationError,
    account_not_found,
    no_credentials_found,
)

CREDENTIAL_PREFIX = "STRIPE_TOKEN_"
SECRET_REFERENCE_SCHEME = "op://"


class SecretResolver(Protocol):
    """Collaborator that turns a secret-store reference into a secret."""

    def resolve(self, reference: str) -> str:
        ...


class Credentials(Mapping[str, str]):
    """Read-only mapping of account name to secret or secret reference."""

    def __init__(self, values: Optional[Mapping[str, str]] = None, prefix: str = CREDENTIAL_PREFIX):
        self._values = MappingProxyType(dict(values or {}))
        self.prefix = prefix

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        # Never print secrets
        return f"Credentials(accounts={self.accounts()!r})"

    def accounts(self) -> list[str]:
        """Account names in display order."""
        return sorted(self._values)

    def require_any(self) -> None:
        """Raise if no credential was discovered."""
        if not self._values:
            raise ConfigurationError(no_credentials_found(self.prefix))

    def get_account(self, account: str) -> str:
        """Return the raw credential for an account name.

        Raises:
            ConfigurationError: If the account is unknown
        """
        key = account.strip().lower()
        if key not in self._values:
            raise ConfigurationError(account_not_found(account, self.accounts()))
        return self._values[key]


def discover_credentials(environ: Mapping[str, str], prefix: str = CREDENTIAL_PREFIX) -> Credentials:
    """Build credentials from an environment snapshot.

    Every variable named ``<prefix><NAME>`` with a non-empty value becomes the
    credential for account ``name`` (lowercased). An environment without
    matches yields empty credentials; callers decide how to report that.

    Args:
        environ: Environment variables, usually a copy of os.environ
        prefix: Variable name prefix

    Returns:
        Credentials mapping
    """
    found: dict[str, str] = {}
    for key, value in environ.items():
        if not key.startswith(prefix):
            continue
        account = key[len(prefix):].lower()
        if not account or not value:
            continue
        found[account] = value
    return Credentials(found, prefix=prefix)


def is_secret_reference(value: str) -> bool:
    """Return True if value points into the secret store instead of being a secret."""
    return value.startswith(SECRET_REFERENCE_SCHEME)


def resolve_secret(value: str, resolver: Optional[SecretResolver]) -> str:
    """Return a usable secret, resolving secret-store references first.

    Raises:
        SecretResolutionError: If the reference cannot be resolved
        ConfigurationError: If a reference is given but no resolver is available
    """
    if not is_secret_reference(value):
        return value
    if resolver is None:
        raise ConfigurationError(f"No secret resolver available for reference '{value}'")
    return resolver.resolve(value)
