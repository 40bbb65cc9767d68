"""Display glyphs for payment providers and counterparties."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

FALLBACK_PROVIDER_ICON = "💳"

# Exact, case-sensitive names as stored on top-up rows.
PROVIDER_ICONS: Mapping[str, str] = MappingProxyType({
    "HDFC Bank": "🏦",
    "State Bank": "🏛️",
    "ICICI Bank": "🏪",
    "Axis Bank": "🏢",
    "Kotak Bank": "🏬",
    "PayTM": "💳",
    "PhonePe": "📱",
    "Google Pay": "💰",
    "UPI": "💸",
})


def provider_icon(provider: str | None, icons: Mapping[str, str] = PROVIDER_ICONS) -> str:
    if provider is None:
        return FALLBACK_PROVIDER_ICON
    return icons.get(provider, FALLBACK_PROVIDER_ICON)


__all__ = ["FALLBACK_PROVIDER_ICON", "PROVIDER_ICONS", "provider_icon"]
