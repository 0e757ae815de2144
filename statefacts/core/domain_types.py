"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - StateCode is always the canonical 2-letter uppercase form
    - NON_CONTIGUOUS_CODES holds exactly the two states outside the lower 48
    - All valid filters and field names encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StateCode = NewType("StateCode", str)


# ─── Constants ───────────────────────────────────────────────────

NON_CONTIGUOUS_CODES: frozenset[str] = frozenset({"AK", "HI"})


# ─── Enums ───────────────────────────────────────────────────────

class Contiguity(str, Enum):
    """List filter — maps to the `contig` query parameter."""
    ALL = "all"
    CONTIGUOUS = "contiguous"
    NON_CONTIGUOUS = "non_contiguous"


class StateField(str, Enum):
    """Single-field lookups exposed by the API."""
    CAPITAL = "capital"
    NICKNAME = "nickname"
    POPULATION = "population"
    ADMISSION = "admission"


def parse_contiguity(raw: str | None) -> Contiguity:
    """Map `contig=true|false` to a filter. Anything else means no filter."""
    if raw == "true":
        return Contiguity.CONTIGUOUS
    if raw == "false":
        return Contiguity.NON_CONTIGUOUS
    return Contiguity.ALL
