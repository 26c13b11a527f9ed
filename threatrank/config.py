from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict


# ---------------------------
# Paths
# ---------------------------

# Resolved against the working directory, not the install location.
DEFAULT_INPUT_PATH = Path("data") / "contacts.csv"


# ---------------------------
# Input schema
# ---------------------------

MIN_COLUMNS = 6
COMMENT_PREFIX = "#"
DELIMITER = ","

HEADER_RANGE_TOKEN = "range_km"
HEADER_CLOSING_TOKEN = "closing_mps"

# Per-field fallbacks for unparsable numbers. Range falls back to
# "effectively infinitely far", not zero.
RANGE_FALLBACK_KM = 1e9
CLOSING_FALLBACK_MPS = 0.0
ALTITUDE_FALLBACK_M = 0.0
RCS_FALLBACK_M2 = 1.0


# ---------------------------
# Scoring normalisation
# ---------------------------

MIN_RANGE_KM = 0.05          # below this the inverse-range term is capped
INV_RANGE_CAP = 20.0

CLOSING_SATURATION_MPS = 400.0
CLOSING_SCALE = 100.0

RCS_FLOOR_M2 = 0.01          # log10 floor, avoids log(0)
RCS_LOG_OFFSET = 2.0         # maps log10 band [-2, 2] -> [0, 4]
RCS_SCALE = 25.0             # ... -> [0, 100]

ALTITUDE_CEILING_M = 20000.0
ALTITUDE_DIVISOR = 200.0     # (20000 - alt) / 200 -> [0, 100]


# ---------------------------
# Suggestion thresholds
# ---------------------------

INTERCEPT_SCORE = 120.0
INTERCEPT_RANGE_KM = 25.0
INTERCEPT_CLOSING_MPS = 100.0

ELEVATED_SCORE = 80.0
ELEVATED_RANGE_KM = 50.0


# ---------------------------
# Logging / observability
# ---------------------------

LOG_LEVEL = os.getenv("THREATRANK_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "<level>{level}</level>: {message}"
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


# ---------------------------
# Pydantic models shared around the app
# ---------------------------

class ScoreWeights(BaseModel):
    """
    Coefficients for the five additive scoring terms.

    Frozen so one instance can be shared by every call in a run.
    """

    model_config = ConfigDict(frozen=True)

    w_range_inv: float = 60.0     # closer = higher risk
    w_closing: float = 0.25       # approaching faster = higher risk
    w_rcs: float = 0.4            # bigger target = higher risk
    w_alt_low: float = 0.004      # lower altitude slightly more concerning
    w_iff_friend: float = -40.0
    w_iff_foe: float = 30.0
    w_iff_unknown: float = 15.0


DEFAULT_WEIGHTS = ScoreWeights()
