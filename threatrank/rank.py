# threatrank/rank.py
from __future__ import annotations

from typing import Iterable, List, Sequence

from loguru import logger

from .config import DEFAULT_WEIGHTS, ScoreWeights
from .pipeline_types import Contact, RankedEntry
from .scoring import score


def score_contacts(
    contacts: Iterable[Contact],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> List[RankedEntry]:
    return [RankedEntry(contact=c, score=score(c, weights)) for c in contacts]


def rank_entries(entries: Sequence[RankedEntry]) -> List[RankedEntry]:
    """
    Sort by descending score.

    No secondary key: equal scores keep whatever relative order the
    (stable) sort leaves them in, which is input order.
    """
    ranked = sorted(entries, key=lambda e: -e.score)
    if ranked:
        logger.debug(
            "Ranked {} contacts; top={} score={:.1f}",
            len(ranked),
            ranked[0].contact.id,
            ranked[0].score,
        )
    return ranked


def rank_contacts(
    contacts: Iterable[Contact],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> List[RankedEntry]:
    return rank_entries(score_contacts(contacts, weights))
