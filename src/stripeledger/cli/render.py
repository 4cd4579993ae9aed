"""Terminal rendering of ledger reports."""

from typing import Optional

from stripeledger.domain.entities import FeeKind, LedgerReport, Period
from stripeledger.utils.amounts import format_amount
from stripeledger.utils.periods import format_period

WIDTH = 80

TOTAL_ROWS = (
    ("Pending transactions", "pending_transactions", False),
    ("Payouts gross", "payouts_gross", True),
    ("Payouts net", "payouts_net", True),
    ("Payouts fees", "payouts_fees", True),
    ("Stripe fees", "stripe_fees", True),
    ("Charges gross", "charge_gross", True),
    ("Charges net", "charge_net", True),
    ("Charges fees", "charge_fees", True),
    ("  Stripe fees", "charge_stripe_fees", True),
    ("  Application fees", "charge_application_fees", True),
    ("  Taxes", "charge_tax_fees", True),
)

FEE_TITLES = {
    FeeKind.TAX: "Taxes",
    FeeKind.STRIPE_FEE: "Stripe Fees",
    FeeKind.APPLICATION_FEE: "Application Fees",
}


def _money_formatter(report: LedgerReport):
    currencies = report.currencies()
    if len(currencies) == 1:
        currency = currencies.pop()
        return lambda amount: format_amount(amount, currency)
    # Mixed or unknown currency: show the raw minor units
    return lambda amount: f"{amount:,}"


def render_report(
    report: LedgerReport,
    account: Optional[str] = None,
    period: Optional[Period] = None,
) -> list[str]:
    """Format a ledger report as terminal lines."""
    money = _money_formatter(report)
    lines = []

    title = "Ledger Report"
    if account:
        title = f"{title}: {account}"
    if period is not None:
        title = f"{title} - {format_period(period)}"
    lines.append(title)
    lines.append("=" * WIDTH)

    for kind in FeeKind:
        items = report.fees[kind]
        lines.append(f"{FEE_TITLES[kind]} ({len(items)})")
        lines.append("-" * WIDTH)
        if not items:
            lines.append("    none")
        for item in items:
            description = item.description or ""
            label = f"{item.created:%Y-%m-%d}  {item.charge_id or item.transaction_id}  {description}"
            lines.append(f"    {label:<54.54} {format_amount(item.amount, item.currency):>20}")
        lines.append("")

    lines.append("Totals")
    lines.append("-" * WIDTH)
    for label, attr, is_money in TOTAL_ROWS:
        value = getattr(report.totals, attr)
        value_str = money(value) if is_money else str(value)
        lines.append(f"{label:<50} {value_str:>29}")
    lines.append("-" * WIDTH)

    lines.append(
        f"Classified: {len(report.transactions)} | "
        f"Charges: {len(report.charges)} | Payouts: {len(report.payouts)} | "
        f"Skipped: {len(report.skipped)}"
    )
    return lines
