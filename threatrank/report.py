# threatrank/report.py
from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import pandas as pd
from loguru import logger

from .config import DEFAULT_WEIGHTS, ScoreWeights
from .pipeline_types import TriageResult
from .scoring import score_breakdown

# ---------- fixed-width console table ----------

# (header, width); the last column is unpadded
TABLE_COLUMNS: List[Tuple[str, int]] = [
    ("RANK", 10),
    ("ID", 12),
    ("IFF", 10),
    ("RANGE(km)", 12),
    ("CLOSING(m/s)", 14),
    ("ALT(m)", 12),
    ("RCS(m^2)", 10),
    ("SCORE", 12),
    ("SUGGESTION", 11),
]

RULE_WIDTH = sum(width for _, width in TABLE_COLUMNS)


def _join_cells(cells: Sequence[str]) -> str:
    padded = [f"{cell:<{width}}" for cell, (_, width) in zip(cells[:-1], TABLE_COLUMNS)]
    return "".join(padded) + cells[-1]


def format_row(result: TriageResult) -> str:
    c = result.contact
    return _join_cells(
        [
            str(result.rank),
            c.id,
            c.iff.label,
            f"{c.range_km:.1f}",
            f"{c.closing_mps:.0f}",
            f"{c.altitude_m:.0f}",
            f"{c.rcs_m2:.2f}",
            f"{result.score:.1f}",
            result.suggestion.label,
        ]
    )


def render_table(results: Sequence[TriageResult]) -> str:
    lines = [
        _join_cells([name for name, _ in TABLE_COLUMNS]),
        "-" * RULE_WIDTH,
    ]
    lines.extend(format_row(r) for r in results)
    return "\n".join(lines) + "\n"


# ---------- tabular export ----------

FRAME_COLUMNS = [
    "rank",
    "id",
    "iff",
    "range_km",
    "closing_mps",
    "altitude_m",
    "rcs_m2",
    "score",
    "range_term",
    "closing_term",
    "rcs_term",
    "altitude_term",
    "iff_term",
    "suggestion",
]


def ranking_frame(
    results: Sequence[TriageResult],
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> pd.DataFrame:
    """
    One row per ranked contact, including the five weighted score terms
    so any score can be explained after the fact.
    """
    rows = []
    for r in results:
        c = r.contact
        parts = score_breakdown(c, weights)
        rows.append(
            {
                "rank": r.rank,
                "id": c.id,
                "iff": c.iff.label,
                "range_km": c.range_km,
                "closing_mps": c.closing_mps,
                "altitude_m": c.altitude_m,
                "rcs_m2": c.rcs_m2,
                "score": r.score,
                "range_term": parts.range,
                "closing_term": parts.closing,
                "rcs_term": parts.rcs,
                "altitude_term": parts.altitude,
                "iff_term": parts.iff,
                "suggestion": r.suggestion.name,
            }
        )
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def write_ranking_csv(
    results: Sequence[TriageResult],
    path: Path,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> None:
    """Write the ranking to CSV (UTF-8, header row, no index)."""
    df = ranking_frame(results, weights)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, encoding="utf-8")
    logger.info("Wrote {} ranked contacts to {}", len(df), path)
