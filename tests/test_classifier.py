"""Tests for balance transaction classification."""

import logging

from conftest import make_charge, make_payout, make_transaction
from stripeledger.domain.classifier import LedgerClassifier
from stripeledger.domain.entities import Disposition, FeeDetail, FeeKind, LedgerReport, Totals


def _classify(*transactions) -> LedgerReport:
    return LedgerClassifier().classify(transactions)


def _nonzero_totals(totals: Totals) -> dict[str, int]:
    return {name: value for name, value in vars(totals).items() if value}


def test_single_charge_scenario():
    """One available charge with a Stripe fee."""
    report = _classify(make_charge(amount=1000, fee=30, net=970))

    totals = report.totals
    assert totals.charge_gross == 1000
    assert totals.charge_net == 970
    assert totals.charge_fees == 30
    assert totals.charge_stripe_fees == 30
    assert totals.charge_tax_fees == 0
    assert totals.charge_application_fees == 0

    assert len(report.charges) == 1
    assert report.charges[0].amount == 1000
    assert report.fees[FeeKind.TAX] == []
    assert report.fees[FeeKind.APPLICATION_FEE] == []
    assert len(report.fees[FeeKind.STRIPE_FEE]) == 1


def test_single_payout_scenario():
    """Payout amounts are sign-flipped, the fee is kept as-is."""
    report = _classify(make_payout(amount=-5000, net=-4950, fee=50))

    assert report.totals.payouts_gross == 5000
    assert report.totals.payouts_net == 4950
    assert report.totals.payouts_fees == 50
    assert len(report.payouts) == 1
    assert report.payouts[0].amount == -5000


def test_single_pending_scenario():
    report = _classify(make_transaction("charge", status="pending"))

    assert report.totals.pending_transactions == 1
    assert _nonzero_totals(report.totals) == {"pending_transactions": 1}
    assert report.transactions == []
    assert report.skipped[0].disposition == Disposition.PENDING


def test_pending_only_increments_pending_count():
    report = _classify(
        make_charge(status="pending"),
        make_payout(status="pending"),
        make_transaction("stripe_fee", status="pending"),
    )

    assert _nonzero_totals(report.totals) == {"pending_transactions": 3}
    assert report.charges == []
    assert report.payouts == []


def test_unknown_status_is_skipped_and_logged(caplog):
    txn = make_charge(status="in_transit")

    with caplog.at_level(logging.WARNING):
        report = _classify(txn)

    assert _nonzero_totals(report.totals) == {}
    assert report.transactions == []
    assert report.skipped[0].disposition == Disposition.UNKNOWN_STATUS
    assert "in_transit" in caplog.text


def test_unknown_type_is_skipped_and_logged(caplog):
    txn = make_transaction("refund", txn_id="txn_refund")

    with caplog.at_level(logging.WARNING):
        report = _classify(txn)

    assert _nonzero_totals(report.totals) == {}
    assert report.transactions == []
    assert report.skipped[0].disposition == Disposition.UNKNOWN_TYPE
    assert "Unknown transaction type: refund, id: txn_refund" in caplog.text


def test_stripe_fee_adds_negated_amount():
    report = _classify(
        make_transaction("stripe_fee", amount=-250, txn_id="txn_fee1"),
        make_transaction("stripe_fee", amount=-50, txn_id="txn_fee2"),
    )

    assert report.totals.stripe_fees == 300
    assert [txn.id for txn in report.transactions] == ["txn_fee1", "txn_fee2"]


def test_payout_arrival_date_comes_from_payout_object():
    report = _classify(make_payout(arrival=1710288000))

    payout = report.payouts[0]
    assert int(payout.arrival_date.timestamp()) == 1710288000
    assert int(payout.available_on.timestamp()) != 1710288000
    assert payout.source_id == "po_txn_payout"


def test_charge_fee_details_split_across_buckets():
    details = [
        FeeDetail(type="stripe_fee", amount=59, currency="usd", description="Stripe processing fees"),
        FeeDetail(type="application_fee", amount=100, currency="usd", description="Platform fee"),
        FeeDetail(type="tax", amount=12, currency="usd", description="VAT"),
    ]
    report = _classify(make_charge(amount=2000, fee=171, fee_details=details))

    totals = report.totals
    assert totals.charge_stripe_fees == 59
    assert totals.charge_application_fees == 100
    assert totals.charge_tax_fees == 12
    assert totals.charge_fees == 171
    assert sum(len(items) for items in report.fees.values()) == len(details)
    assert (
        totals.charge_stripe_fees + totals.charge_application_fees + totals.charge_tax_fees
        == sum(detail.amount for detail in details)
    )


def test_unknown_fee_tag_is_booked_as_tax(caplog):
    details = [FeeDetail(type="withheld_tax", amount=7, currency="usd")]

    with caplog.at_level(logging.WARNING):
        report = _classify(make_charge(fee=7, fee_details=details))

    assert report.totals.charge_tax_fees == 7
    assert report.fees[FeeKind.TAX][0].amount == 7
    assert report.fees[FeeKind.TAX][0].kind == FeeKind.TAX
    assert "withheld_tax" in caplog.text


def test_charge_record_copies_source_details():
    report = _classify(make_charge())

    charge = report.charges[0]
    assert charge.source_id == "ch_txn_charge"
    assert charge.metadata == {"order": "1234"}
    assert charge.payment_method["card"]["last4"] == "4242"
    assert charge.billing_details["name"] == "Jane Doe"


def test_bucket_items_match_totals():
    report = _classify(
        make_charge(txn_id="a", fee=30),
        make_charge(txn_id="b", fee=45),
        make_charge(
            txn_id="c",
            fee=20,
            fee_details=[
                FeeDetail(type="stripe_fee", amount=10, currency="usd"),
                FeeDetail(type="tax", amount=10, currency="usd"),
            ],
        ),
    )

    assert sum(item.amount for item in report.fees[FeeKind.STRIPE_FEE]) == report.totals.charge_stripe_fees
    assert sum(item.amount for item in report.fees[FeeKind.TAX]) == report.totals.charge_tax_fees
    assert report.totals.charge_stripe_fees == 85


def test_every_transaction_gets_one_disposition():
    transactions = [
        make_charge(txn_id="c1"),
        make_payout(txn_id="p1"),
        make_transaction("stripe_fee", txn_id="f1"),
        make_transaction("charge", status="pending", txn_id="pending"),
        make_transaction("charge", status="unknown", txn_id="weird"),
        make_transaction("adjustment", txn_id="adj"),
    ]
    classifier = LedgerClassifier()
    report = LedgerReport()

    dispositions = [classifier.classify_transaction(report, txn) for txn in transactions]

    assert dispositions == [
        Disposition.CLASSIFIED,
        Disposition.CLASSIFIED,
        Disposition.CLASSIFIED,
        Disposition.PENDING,
        Disposition.UNKNOWN_STATUS,
        Disposition.UNKNOWN_TYPE,
    ]
    assert len(report.transactions) + len(report.skipped) == len(transactions)
    assert [txn.id for txn in report.transactions] == ["c1", "p1", "f1"]


def test_classification_is_repeatable():
    transactions = [
        make_charge(txn_id="c1"),
        make_payout(txn_id="p1"),
        make_transaction("stripe_fee", txn_id="f1"),
        make_transaction("charge", status="pending", txn_id="pending"),
    ]
    classifier = LedgerClassifier()

    first = classifier.classify(transactions)
    second = classifier.classify(transactions)

    assert first.totals == second.totals
    assert first.charges == second.charges
    assert first.payouts == second.payouts
    assert first.fees == second.fees
