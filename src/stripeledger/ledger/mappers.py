"""Mapper functions to convert Stripe API objects to domain entities.

This layer isolates the conversion logic, making it easy to change when the
Stripe API version or SDK object model changes. Stripe objects are mappings,
so plain dicts work equally well here (tests rely on that).
"""

from datetime import datetime, UTC
from typing import Any, Mapping, Optional

from stripeledger.domain import entities as domain


def to_plain(value: Any) -> Any:
    """Recursively convert SDK objects into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


def _source_id(source: Any) -> Optional[str]:
    if source is None:
        return None
    if isinstance(source, str):
        return source
    return source.get("id")


def payout_source_to_domain(source: Any) -> Optional[domain.PayoutSource]:
    """Convert an expanded (or bare ID) payout source."""
    source_id = _source_id(source)
    if source_id is None:
        return None
    if isinstance(source, str):
        return domain.PayoutSource(id=source_id)
    return domain.PayoutSource(
        id=source_id,
        available_on=source.get("available_on"),
        arrival_date=source.get("arrival_date"),
        status=source.get("status"),
        description=source.get("description"),
    )


def charge_source_to_domain(source: Any) -> Optional[domain.ChargeSource]:
    """Convert an expanded (or bare ID) charge source."""
    source_id = _source_id(source)
    if source_id is None:
        return None
    if isinstance(source, str):
        return domain.ChargeSource(id=source_id)
    return domain.ChargeSource(
        id=source_id,
        metadata=to_plain(source.get("metadata") or {}),
        payment_method_details=to_plain(source.get("payment_method_details")),
        billing_details=to_plain(source.get("billing_details")),
        description=source.get("description"),
        receipt_email=source.get("receipt_email"),
    )


def fee_detail_to_domain(detail: Mapping[str, Any]) -> domain.FeeDetail:
    """Convert one entry of a balance transaction's fee_details."""
    return domain.FeeDetail(
        type=detail.get("type"),
        amount=int(detail.get("amount") or 0),
        currency=detail.get("currency"),
        description=detail.get("description"),
    )


def balance_transaction_to_domain(obj: Mapping[str, Any]) -> domain.BalanceTransaction:
    """Convert a Stripe balance transaction to a domain BalanceTransaction.

    The nested source is typed by the transaction's own type: payouts get a
    PayoutSource, charges a ChargeSource, everything else no source.
    """
    txn_type = obj.get("type")
    raw_source = obj.get("source")
    if txn_type == "payout":
        source = payout_source_to_domain(raw_source)
    elif txn_type == "charge":
        source = charge_source_to_domain(raw_source)
    else:
        source = None

    return domain.BalanceTransaction(
        id=obj["id"],
        type=txn_type,
        status=obj.get("status"),
        amount=int(obj.get("amount") or 0),
        net=int(obj.get("net") or 0),
        fee=int(obj.get("fee") or 0),
        currency=obj.get("currency"),
        created=obj.get("created"),
        available_on=obj.get("available_on"),
        source=source,
        fee_details=tuple(
            fee_detail_to_domain(detail) for detail in obj.get("fee_details") or ()
        ),
        description=obj.get("description"),
    )


def invoice_to_domain(obj: Mapping[str, Any]) -> domain.Invoice:
    """Convert a Stripe invoice to a domain Invoice."""
    return domain.Invoice(
        id=obj["id"],
        number=obj.get("number"),
        status=obj.get("status"),
        currency=obj.get("currency"),
        amount_due=int(obj.get("amount_due") or 0),
        amount_paid=int(obj.get("amount_paid") or 0),
        created=datetime.fromtimestamp(obj.get("created") or 0, tz=UTC),
        customer_email=obj.get("customer_email"),
        invoice_pdf=obj.get("invoice_pdf"),
    )
