"""PDF rendering for charge and payout receipts."""

import io
from typing import Any, Optional, Sequence

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas

from stripeledger.domain.entities import ChargeRecord, LedgerReport, PayoutRecord
from stripeledger.utils.amounts import format_amount

LINE_HEIGHT = 0.6 * cm


class _Page:
    """Minimal cursor over a reportlab canvas that breaks pages as needed."""

    def __init__(self, c: canvas.Canvas):
        self.c = c
        self.width, self.height = A4
        self.y = self.height - 2.5 * cm

    def ensure_space(self, lines: int = 1) -> None:
        if self.y - lines * LINE_HEIGHT < 2 * cm:
            self.c.showPage()
            self.y = self.height - 2.5 * cm

    def text(self, value: str, font: str = "Helvetica", size: int = 11, x: float = 2 * cm) -> None:
        self.ensure_space()
        self.c.setFont(font, size)
        self.c.drawString(x, self.y, value[:110])
        self.y -= LINE_HEIGHT

    def row(self, left: str, right: str, font: str = "Helvetica", size: int = 11) -> None:
        self.ensure_space()
        self.c.setFont(font, size)
        self.c.drawString(2 * cm, self.y, left[:80])
        self.c.drawRightString(self.width - 2 * cm, self.y, right)
        self.y -= LINE_HEIGHT

    def gap(self, lines: float = 1) -> None:
        self.y -= lines * LINE_HEIGHT

    def rule(self) -> None:
        self.ensure_space()
        self.c.line(2 * cm, self.y + 0.2 * cm, self.width - 2 * cm, self.y + 0.2 * cm)
        self.gap(0.5)


def _header(page: _Page, title: str, issuer: str, address: Sequence[str]) -> None:
    page.text(issuer, font="Helvetica-Bold", size=16)
    for line in address:
        page.text(line, size=10)
    page.gap()
    page.text(title, font="Helvetica-Bold", size=20)
    page.gap(0.5)


def _billing_lines(billing_details: Optional[dict[str, Any]], receipt_email: Optional[str]) -> list[str]:
    details = billing_details or {}
    lines = []
    if details.get("name"):
        lines.append(details["name"])
    email = details.get("email") or receipt_email
    if email:
        lines.append(email)
    address = details.get("address") or {}
    for key in ("line1", "line2"):
        if address.get(key):
            lines.append(address[key])
    locality = " ".join(
        part for part in (address.get("postal_code"), address.get("city"), address.get("state")) if part
    )
    if locality:
        lines.append(locality)
    if address.get("country"):
        lines.append(address["country"])
    return lines


def _payment_method_line(payment_method: Optional[dict[str, Any]]) -> Optional[str]:
    if not payment_method:
        return None
    method_type = payment_method.get("type")
    details = (payment_method.get(method_type) if method_type else None) or {}
    brand = details.get("brand")
    last4 = details.get("last4")
    if brand and last4:
        return f"{brand.title()} ending in {last4}"
    return method_type


def render_charge_receipt(
    charge: ChargeRecord,
    issuer: str,
    address: Sequence[str] = (),
) -> bytes:
    """Render a receipt for one charge and return the PDF bytes."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f"Receipt {charge.source_id or charge.transaction_id}")
    page = _Page(c)

    _header(page, "Receipt", issuer, address)
    page.row("Receipt number", charge.source_id or charge.transaction_id)
    page.row("Date paid", charge.created.strftime("%Y-%m-%d"))
    payment_line = _payment_method_line(charge.payment_method)
    if payment_line:
        page.row("Payment method", payment_line)
    page.gap()

    billed_to = _billing_lines(charge.billing_details, charge.receipt_email)
    if billed_to:
        page.text("Billed to", font="Helvetica-Bold")
        for line in billed_to:
            page.text(line, size=10)
        page.gap()

    page.rule()
    page.row(charge.description or "Payment", format_amount(charge.amount, charge.currency))
    page.rule()
    page.row("Amount paid", format_amount(charge.amount, charge.currency), font="Helvetica-Bold")

    if charge.metadata:
        page.gap()
        page.text("Details", font="Helvetica-Bold")
        for key, value in sorted(charge.metadata.items()):
            page.text(f"{key}: {value}", size=10)

    c.showPage()
    c.save()
    buf.seek(0)
    return buf.read()


def render_payout_receipt(
    payout: PayoutRecord,
    contents: LedgerReport,
    issuer: str,
    address: Sequence[str] = (),
) -> bytes:
    """Render a payout summary listing the transactions it settled."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f"Payout {payout.source_id or payout.transaction_id}")
    page = _Page(c)

    _header(page, "Payout Receipt", issuer, address)
    page.row("Payout", payout.source_id or payout.transaction_id)
    page.row("Created", payout.created.strftime("%Y-%m-%d"))
    if payout.arrival_date is not None:
        page.row("Arrival date", payout.arrival_date.strftime("%Y-%m-%d"))
    page.row("Amount", format_amount(-payout.amount, payout.currency), font="Helvetica-Bold")
    if payout.fee:
        page.row("Payout fee", format_amount(payout.fee, payout.currency))
    page.gap()

    totals = contents.totals
    page.text("Transactions", font="Helvetica-Bold", size=13)
    page.rule()
    for charge in contents.charges:
        label = f"{charge.created:%Y-%m-%d}  {charge.source_id or charge.transaction_id}"
        if charge.description:
            label = f"{label}  {charge.description}"
        page.row(label, format_amount(charge.amount, charge.currency), size=10)
        if charge.fee:
            page.row("    fees", format_amount(-charge.fee, charge.currency), size=9)
    page.rule()

    currency = payout.currency
    page.row("Charges gross", format_amount(totals.charge_gross, currency))
    page.row("Stripe fees", format_amount(-totals.charge_stripe_fees, currency))
    if totals.charge_application_fees:
        page.row("Application fees", format_amount(-totals.charge_application_fees, currency))
    if totals.charge_tax_fees:
        page.row("Taxes", format_amount(-totals.charge_tax_fees, currency))
    if totals.stripe_fees:
        page.row("Other Stripe fees", format_amount(-totals.stripe_fees, currency))
    page.row("Charges net", format_amount(totals.charge_net, currency), font="Helvetica-Bold")

    c.showPage()
    c.save()
    buf.seek(0)
    return buf.read()
