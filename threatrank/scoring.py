# threatrank/scoring.py
from __future__ import annotations

import math
from dataclasses import dataclass

from . import config
from .config import DEFAULT_WEIGHTS, ScoreWeights
from .pipeline_types import IFF, Contact


@dataclass(frozen=True)
class ScoreBreakdown:
    """The five weighted terms behind a contact's threat score."""

    range: float
    closing: float
    rcs: float
    altitude: float
    iff: float

    @property
    def total(self) -> float:
        # Fixed summation order; score() relies on it.
        return self.range + self.closing + self.rcs + self.altitude + self.iff


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def range_term(range_km: float) -> float:
    """Inverse range, capped when the contact is nearly on top of us."""
    if range_km > config.MIN_RANGE_KM:
        return 1.0 / range_km
    return config.INV_RANGE_CAP


def closing_term(closing_mps: float) -> float:
    """Receding contacts contribute 0; 400 m/s and faster saturate at 100."""
    norm = clamp(closing_mps / config.CLOSING_SATURATION_MPS, 0.0, 1.0)
    return norm * config.CLOSING_SCALE


def rcs_term(rcs_m2: float) -> float:
    """
    Log-compressed radar cross-section.

    0.01..100 m^2 maps onto 0..100; values outside that band extrapolate
    linearly instead of being clamped.
    """
    rcs_log = math.log10(max(config.RCS_FLOOR_M2, rcs_m2))
    return (rcs_log + config.RCS_LOG_OFFSET) * config.RCS_SCALE


def altitude_term(altitude_m: float) -> float:
    alt = clamp(altitude_m, 0.0, config.ALTITUDE_CEILING_M)
    return (config.ALTITUDE_CEILING_M - alt) / config.ALTITUDE_DIVISOR


def iff_term(iff: IFF, weights: ScoreWeights) -> float:
    if iff is IFF.FRIEND:
        return weights.w_iff_friend
    if iff is IFF.FOE:
        return weights.w_iff_foe
    return weights.w_iff_unknown


def score_breakdown(contact: Contact, weights: ScoreWeights = DEFAULT_WEIGHTS) -> ScoreBreakdown:
    return ScoreBreakdown(
        range=weights.w_range_inv * range_term(contact.range_km),
        closing=weights.w_closing * closing_term(contact.closing_mps),
        rcs=weights.w_rcs * rcs_term(contact.rcs_m2),
        altitude=weights.w_alt_low * altitude_term(contact.altitude_m),
        iff=iff_term(contact.iff, weights),
    )


def score(contact: Contact, weights: ScoreWeights = DEFAULT_WEIGHTS) -> float:
    """
    Heuristic threat score; larger means higher priority.

    Pure and deterministic. The result is not clamped, but each term is
    bounded (or nearly so) by its own normalisation.
    """
    return score_breakdown(contact, weights).total
