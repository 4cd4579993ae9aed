"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ConfigurationError(DomainError):
    """Missing or invalid local configuration, such as absent credentials."""


class SecretResolutionError(DomainError):
    """A secret-store reference could not be resolved to a secret."""


class LedgerError(DomainError):
    """Transport or authentication failure reported by the ledger API."""


class DocumentError(DomainError):
    """A receipt or invoice document could not be produced or saved."""


def no_credentials_found(prefix: str) -> str:
    """Return message for an environment without any credentials."""
    return (
        f"No stripe credentials found, please make sure you set them in .env as {prefix}[name]\n"
        "If you're using 1password, make sure the credential has a value."
    )


def account_not_found(account: str, available: list[str]) -> str:
    """Return message for an unknown account name."""
    if not available:
        return f"Account '{account}' not found"
    return f"Account '{account}' not found. Available accounts: {', '.join(available)}"


def secret_reference_failed(reference: str, detail: str) -> str:
    """Return message for a secret reference that failed to resolve."""
    return f"Failed to resolve secret reference '{reference}': {detail}"
