import pytest

from walletview.modules.transactions import Direction
from walletview.presentation import (
    PROVIDER_ICONS,
    STATUS_STYLES,
    StatusBucket,
    classify_status,
    provider_icon,
    transaction_icon,
)
from walletview.presentation.providers import FALLBACK_PROVIDER_ICON


@pytest.mark.parametrize(
    "status, bucket",
    [
        ("success", StatusBucket.SETTLED),
        ("Completed", StatusBucket.SETTLED),
        ("PROCESSING", StatusBucket.PENDING),
        ("pending", StatusBucket.PENDING),
        ("Failed", StatusBucket.FAILED),
        ("declined", StatusBucket.FAILED),
        ("Failure", StatusBucket.UNKNOWN),
        ("", StatusBucket.UNKNOWN),
        (None, StatusBucket.UNKNOWN),
    ],
)
def test_classify_status(status, bucket):
    assert classify_status(status) is bucket


def test_each_bucket_has_a_distinct_icon_and_color():
    assert set(STATUS_STYLES) == set(StatusBucket)
    assert len({style.icon for style in STATUS_STYLES.values()}) == len(StatusBucket)
    assert len({style.color for style in STATUS_STYLES.values()}) == len(StatusBucket)


def test_transaction_icon_prefers_status_over_direction():
    assert transaction_icon(Direction.CREDIT, "pending") == STATUS_STYLES[StatusBucket.PENDING].icon
    assert transaction_icon(Direction.DEBIT, "declined") == STATUS_STYLES[StatusBucket.FAILED].icon
    assert transaction_icon(Direction.CREDIT, "success") == "↙"
    assert transaction_icon(Direction.DEBIT, "success") == "↗"
    assert transaction_icon(Direction.DEBIT, "unheard-of") == "↗"


@pytest.mark.parametrize("provider", sorted(PROVIDER_ICONS))
def test_known_providers_have_their_icon(provider):
    assert provider_icon(provider) == PROVIDER_ICONS[provider]


@pytest.mark.parametrize("provider", ["hdfc bank", "Some Credit Union", "", None])
def test_unknown_providers_fall_back(provider):
    assert provider_icon(provider) == FALLBACK_PROVIDER_ICON


def test_provider_table_can_be_swapped():
    assert provider_icon("Mint", icons={"Mint": "🌿"}) == "🌿"
    assert provider_icon("UPI", icons={}) == FALLBACK_PROVIDER_ICON
