from __future__ import annotations

"""
Core triage pipeline: contacts -> scored -> ranked -> classified.

Pure over its inputs; all I/O lives in ``ingest`` and ``report``.
"""

from typing import Iterable, List

from .config import DEFAULT_WEIGHTS, ScoreWeights
from .pipeline_types import Contact, TriageResult
from .rank import rank_contacts
from .suggest import classify


def triage(
    contacts: Iterable[Contact],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> List[TriageResult]:
    """Return one TriageResult per contact, highest threat first, ranks from 1."""
    ranked = rank_contacts(contacts, weights)
    return [
        TriageResult(
            rank=i,
            contact=entry.contact,
            score=entry.score,
            suggestion=classify(entry.contact, entry.score),
        )
        for i, entry in enumerate(ranked, start=1)
    ]
