"""Typed containers shared across pipeline modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class IFF(Enum):
    """Identification-friend-or-foe status of a contact."""

    FRIEND = "friend"
    FOE = "foe"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.name


class Suggestion(Enum):
    """Engagement suggestion derived from a contact and its score."""

    IGNORE_FRIEND = "IGNORE (FRIEND)"
    INTERCEPT = "INTERCEPT"
    ELEVATED_MONITOR = "ELEVATED MONITOR"
    MONITOR = "MONITOR"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Contact:
    """One sensed track, as parsed from a single input row."""

    id: str
    iff: IFF
    range_km: float
    closing_mps: float     # positive = approaching
    altitude_m: float
    rcs_m2: float


@dataclass(frozen=True)
class RejectedRow:
    line_no: int
    raw: str
    reason: str


@dataclass
class ParseResult:
    """Contacts in input order plus every row that was discarded."""

    contacts: List[Contact] = field(default_factory=list)
    rejects: List[RejectedRow] = field(default_factory=list)


@dataclass(frozen=True)
class RankedEntry:
    contact: Contact
    score: float


@dataclass(frozen=True)
class TriageResult:
    """Final ranked row: 1-based rank, contact, score and suggestion."""

    rank: int
    contact: Contact
    score: float
    suggestion: Suggestion
