"""Refund window policy tiers."""

from __future__ import annotations

from datetime import datetime

from ...models.domain import Source

# Signups strictly before this instant are on the old terms of service.
TOS_CUTOFF = datetime(2020, 1, 2)

REFUND_WINDOW_HOURS: dict[tuple[Source, bool], int] = {
    (Source.PHONE, True): 4,
    (Source.PHONE, False): 8,
    (Source.WEB_APP, True): 8,
    (Source.WEB_APP, False): 16,
}


def is_old_tos(signup_at: datetime, cutoff: datetime = TOS_CUTOFF) -> bool:
    return signup_at < cutoff


def refund_window_hours(source: Source, signup_at: datetime, cutoff: datetime = TOS_CUTOFF) -> int:
    """Return the allowed refund window in hours for a source and signup instant."""

    return REFUND_WINDOW_HOURS[(source, is_old_tos(signup_at, cutoff))]
