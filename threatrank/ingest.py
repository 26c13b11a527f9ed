from __future__ import annotations

"""
Contact ingest: delimited text lines -> validated Contact records.

Input rows look like::

    id, iff, range_km, closing_mps, altitude_m, rcs_m2

Parsing is tolerant per row. Structurally broken rows (too few columns,
unrecognised IFF token) are dropped and reported; unparsable numbers fall
back to a per-field default. Only failing to read the source at all is
fatal, and that is left to the caller.
"""

import math
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from loguru import logger

from .config import (
    ALTITUDE_FALLBACK_M,
    CLOSING_FALLBACK_MPS,
    COMMENT_PREFIX,
    DELIMITER,
    HEADER_CLOSING_TOKEN,
    HEADER_RANGE_TOKEN,
    MIN_COLUMNS,
    RANGE_FALLBACK_KM,
    RCS_FALLBACK_M2,
)
from .pipeline_types import IFF, Contact, ParseResult, RejectedRow


# ---------------------------
# Token tables
# ---------------------------

IFF_TOKENS: Dict[str, IFF] = {
    "FRIEND": IFF.FRIEND,
    "F": IFF.FRIEND,
    "FOE": IFF.FOE,
    "HOSTILE": IFF.FOE,
    "H": IFF.FOE,
    "UNKNOWN": IFF.UNKNOWN,
    "U": IFF.UNKNOWN,
}

_LEADING_FLOAT_RE = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

REASON_TOO_FEW_COLUMNS = "malformed row"
REASON_BAD_IFF = "invalid IFF"


# ---------------------------
# Field parsing helpers
# ---------------------------

def parse_iff(token: str) -> Optional[IFF]:
    """
    Map an IFF token to its enum member, case-insensitively.

    Returns None for anything outside the known token table; callers
    must discard the row rather than guess.
    """
    return IFF_TOKENS.get(token.strip().upper())


def parse_float_field(text: str, default: float) -> float:
    """
    Parse a numeric column, substituting ``default`` on failure.

    Like ``strtod``, the leading number is used and any trailing text is
    ignored ("10km" -> 10.0). No leading number, or a value that is not
    finite (e.g. "1e999"), gives ``default``.
    """
    m = _LEADING_FLOAT_RE.match(text)
    if m is None:
        return default
    value = float(m.group(0))
    if not math.isfinite(value):
        return default
    return value


def split_columns(line: str) -> List[str]:
    """
    Split a row on the delimiter and trim each column.

    A single trailing empty token is dropped, so "a,b," has two columns.
    """
    parts = line.split(DELIMITER)
    if parts and parts[-1] == "":
        parts.pop()
    return [col.strip() for col in parts]


def looks_like_header(cols: List[str]) -> bool:
    """True if the first candidate row should be treated as a header."""
    if len(cols) < MIN_COLUMNS:
        return True
    return (
        parse_iff(cols[1]) is None
        or cols[2] == HEADER_RANGE_TOKEN
        or cols[3] == HEADER_CLOSING_TOKEN
    )


def contact_from_columns(cols: List[str]) -> Optional[Contact]:
    """Build a Contact from split columns, or None if the IFF is unknown."""
    iff = parse_iff(cols[1])
    if iff is None:
        return None
    return Contact(
        id=cols[0],
        iff=iff,
        range_km=parse_float_field(cols[2], RANGE_FALLBACK_KM),
        closing_mps=parse_float_field(cols[3], CLOSING_FALLBACK_MPS),
        altitude_m=parse_float_field(cols[4], ALTITUDE_FALLBACK_M),
        rcs_m2=parse_float_field(cols[5], RCS_FALLBACK_M2),
    )


# ---------------------------
# Public API
# ---------------------------

def parse_lines(lines: Iterable[str]) -> ParseResult:
    """
    Parse raw text lines into contacts, preserving input order.

    * blank lines and ``#`` comments are skipped silently
    * the first remaining line is checked once for a header and skipped
      if it looks like one
    * rows with fewer than six columns or an unknown IFF token are
      recorded as rejects and logged; parsing carries on
    """
    result = ParseResult()
    header_checked = False

    for line_no, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        cols = split_columns(line)

        if not header_checked:
            header_checked = True
            if looks_like_header(cols):
                logger.debug("Skipping header row {}: {}", line_no, line)
                continue

        if len(cols) < MIN_COLUMNS:
            _reject(result, line_no, line, REASON_TOO_FEW_COLUMNS)
            continue

        contact = contact_from_columns(cols)
        if contact is None:
            _reject(result, line_no, line, REASON_BAD_IFF)
            continue

        result.contacts.append(contact)

    logger.info(
        "Parsed {} contacts ({} rows rejected)",
        len(result.contacts),
        len(result.rejects),
    )
    return result


def load_contacts(path: Path) -> ParseResult:
    """
    Read a contact file and parse it.

    Raises FileNotFoundError for a missing path; other read errors
    (permissions, bad encoding) propagate unchanged.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Failed to open contact file: {path}")

    logger.info("Loading contacts from {}", path)
    with path.open("r", encoding="utf-8") as f:
        lines = f.read().splitlines()
    return parse_lines(lines)


def _reject(result: ParseResult, line_no: int, line: str, reason: str) -> None:
    logger.bind(diagnostic=True).warning("Skipping {} at line {}: {}", reason, line_no, line)
    result.rejects.append(RejectedRow(line_no=line_no, raw=line, reason=reason))
