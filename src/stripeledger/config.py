"""Application configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

OUTPUT_DIR_ENV = "STRIPE_LEDGER_OUTPUT_DIR"
BUSINESS_NAME_ENV = "STRIPE_LEDGER_BUSINESS_NAME"
BUSINESS_ADDRESS_ENV = "STRIPE_LEDGER_BUSINESS_ADDRESS"
DEBUG_ENV = "STRIPE_LEDGER_DEBUG"

DEFAULT_OUTPUT_DIR = "stripe-documents"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppConfig:
    """Static configuration handed to the document generators."""

    output_dir: Path
    business_name: str = ""
    business_address: tuple[str, ...] = ()
    debug: bool = False

    def issuer_name(self, account: str) -> str:
        """Name printed on documents, falling back to the account name."""
        return self.business_name or account


def _split_address(value: str) -> tuple[str, ...]:
    lines = value.replace(";", "\n").replace("\\n", "\n").splitlines()
    return tuple(line.strip() for line in lines if line.strip())


def is_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def load_config(
    environ: Mapping[str, str],
    output_dir: Optional[str] = None,
    debug: Optional[bool] = None,
) -> AppConfig:
    """Build configuration from an environment snapshot.

    Args:
        environ: Environment variables
        output_dir: Overrides STRIPE_LEDGER_OUTPUT_DIR when given
        debug: Overrides STRIPE_LEDGER_DEBUG when given

    Returns:
        AppConfig instance
    """
    if output_dir is None:
        output_dir = environ.get(OUTPUT_DIR_ENV) or DEFAULT_OUTPUT_DIR
    if debug is None:
        debug = is_truthy(environ.get(DEBUG_ENV))

    return AppConfig(
        output_dir=Path(output_dir).expanduser(),
        business_name=environ.get(BUSINESS_NAME_ENV, "").strip(),
        business_address=_split_address(environ.get(BUSINESS_ADDRESS_ENV, "")),
        debug=debug,
    )
