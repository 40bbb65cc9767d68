from datetime import datetime, timezone

import pytest

from walletview.core.exceptions import InvalidTransactionError
from walletview.modules.transactions import (
    Direction,
    PeerTransferRecord,
    TopUpRecord,
    TransactionSource,
    normalize,
    normalize_all,
)

VIEWER = 7
OTHER = 42
WHEN = datetime(2026, 6, 1, 9, 30, tzinfo=timezone.utc)


def topup(**overrides):
    fields = dict(id=1, start_time=WHEN, amount=50000, status="Success", provider="HDFC Bank")
    fields.update(overrides)
    return TopUpRecord(**fields)


def transfer(**overrides):
    fields = dict(
        id=1,
        timestamp=WHEN,
        amount=10000,
        from_user_id=OTHER,
        to_user_id=VIEWER,
        from_user_name="Ravi Kumar",
        to_user_name="Asha Rao",
    )
    fields.update(overrides)
    return PeerTransferRecord(**fields)


@pytest.mark.parametrize("status", ["Success", "Processing", "Failure", "weird"])
def test_topup_is_always_credit_with_status_passed_through(status):
    txn = normalize(topup(status=status), VIEWER)
    assert txn.direction is Direction.CREDIT
    assert txn.status == status
    assert txn.activity_label == "Money Added"
    assert txn.source is TransactionSource.TOPUP


def test_topup_uses_provider_as_counterparty():
    assert normalize(topup(provider="PhonePe"), VIEWER).counterparty_label == "PhonePe"


@pytest.mark.parametrize("provider", [None, ""])
def test_topup_without_provider_falls_back_to_upi(provider):
    assert normalize(topup(provider=provider), VIEWER).counterparty_label == "UPI"


def test_topup_fallback_label_is_configurable():
    txn = normalize(topup(provider=None), VIEWER, default_provider="Net Banking")
    assert txn.counterparty_label == "Net Banking"


def test_received_transfer_is_credit_from_sender():
    txn = normalize(transfer(), VIEWER)
    assert txn.direction is Direction.CREDIT
    assert txn.activity_label == "Received from"
    assert txn.counterparty_label == "Ravi Kumar"
    assert txn.status == "success"
    assert txn.source is TransactionSource.TRANSFER


def test_sent_transfer_is_debit_to_recipient():
    txn = normalize(transfer(from_user_id=VIEWER, to_user_id=OTHER, from_user_name="Asha Rao", to_user_name="Ravi Kumar"), VIEWER)
    assert txn.direction is Direction.DEBIT
    assert txn.activity_label == "Sent to"
    assert txn.counterparty_label == "Ravi Kumar"
    assert txn.status == "success"


def test_transfer_counterparty_falls_back_to_user_id():
    received = normalize(transfer(from_user_name=None), VIEWER)
    sent = normalize(transfer(from_user_id=VIEWER, to_user_id=OTHER, to_user_name=""), VIEWER)
    assert received.counterparty_label == str(OTHER)
    assert sent.counterparty_label == str(OTHER)


def test_naive_timestamps_are_treated_as_utc():
    naive = datetime(2026, 6, 1, 9, 30)
    assert normalize(topup(start_time=naive), VIEWER).time == WHEN
    assert normalize(transfer(timestamp=naive), VIEWER).time == WHEN


def test_normalize_all_keeps_one_output_per_record():
    records = [topup(id=1), topup(id=2), transfer(id=1), transfer(id=2, from_user_id=VIEWER, to_user_id=OTHER)]
    unified = normalize_all(records, VIEWER)
    assert len(unified) == len(records)
    assert [txn.source_id for txn in unified] == [1, 2, 1, 2]


def test_unsupported_record_type_raises():
    with pytest.raises(TypeError):
        normalize(object(), VIEWER)


@pytest.mark.parametrize("record", [topup(amount=-500), transfer(amount=-1)])
def test_negative_amount_is_rejected(record):
    with pytest.raises(InvalidTransactionError):
        normalize(record, VIEWER)


def test_zero_amount_is_allowed():
    assert normalize(topup(amount=0), VIEWER).amount == 0
