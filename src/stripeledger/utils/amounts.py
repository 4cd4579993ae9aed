"""Amount formatting utilities."""

from decimal import Decimal

# Currencies Stripe charges in whole units
ZERO_DECIMAL_CURRENCIES = frozenset(
    {
        "bif", "clp", "djf", "gnf", "jpy", "kmf", "krw", "mga", "pyg",
        "rwf", "ugx", "vnd", "vuv", "xaf", "xof", "xpf",
    }
)


def minor_unit_exponent(currency: str) -> int:
    """Number of decimal places for a currency's minor unit."""
    return 0 if currency.lower() in ZERO_DECIMAL_CURRENCIES else 2


def to_major_units(amount: int, currency: str) -> Decimal:
    """Convert an integer minor-unit amount to a Decimal in major units.

    Args:
        amount: Amount in minor units (e.g. cents)
        currency: ISO currency code

    Returns:
        Decimal amount, e.g. 1050 usd -> Decimal("10.50")
    """
    exponent = minor_unit_exponent(currency)
    return Decimal(amount).scaleb(-exponent).quantize(Decimal(1).scaleb(-exponent))


def format_amount(amount: int, currency: str) -> str:
    """Format a minor-unit amount for display, e.g. ``-1,234.56 USD``."""
    exponent = minor_unit_exponent(currency)
    value = to_major_units(amount, currency)
    return f"{value:,.{exponent}f} {currency.upper()}"
