from __future__ import annotations

"""
Engagement suggestion rules.

Guards are evaluated in a fixed order and the first match wins:

1. FRIEND contacts are always IGNORE_FRIEND, whatever their score.
2. score > 120, range < 25 km and closing > 100 m/s -> INTERCEPT.
3. score > 80 and range < 50 km -> ELEVATED_MONITOR.
4. everything else -> MONITOR.

The friend override has to short-circuit before any numeric check.
"""

from .config import (
    ELEVATED_RANGE_KM,
    ELEVATED_SCORE,
    INTERCEPT_CLOSING_MPS,
    INTERCEPT_RANGE_KM,
    INTERCEPT_SCORE,
)
from .pipeline_types import IFF, Contact, Suggestion


def classify(contact: Contact, score: float) -> Suggestion:
    if contact.iff is IFF.FRIEND:
        return Suggestion.IGNORE_FRIEND
    if (
        score > INTERCEPT_SCORE
        and contact.range_km < INTERCEPT_RANGE_KM
        and contact.closing_mps > INTERCEPT_CLOSING_MPS
    ):
        return Suggestion.INTERCEPT
    if score > ELEVATED_SCORE and contact.range_km < ELEVATED_RANGE_KM:
        return Suggestion.ELEVATED_MONITOR
    return Suggestion.MONITOR
