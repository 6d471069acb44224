"""Domain Types — rich types for assignments, substitution names and results.

Invariants:
    - AssignmentSet preserves input line order (dict insertion order)
    - SubstitutionName is the closed catalog of built-in strategies
    - All valid states encoded as Enums — no raw string matching in strategies

Design Decisions:
    - Type aliases over wrapper classes: an AssignmentSet is a plain dict,
      JSON-serializable as-is
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import Callable


# ─── Value Types ─────────────────────────────────────────────────

AssignmentSet = dict[str, bool]
Result = bool | int | dict[str, bool | str]
Strategy = Callable[[AssignmentSet], Result]


# ─── Enums ───────────────────────────────────────────────────────

class SubstitutionName(str, Enum):
    """Built-in substitution strategies, in registration order."""
    BASE = "base"
    NEGATE = "negate"
    COUNT = "count"
    ALL = "all"
    ANY = "any"
    CLASSIFY = "classify"
    CLASSIFY_CUSTOM2 = "classify_custom2"


class HValue(str, Enum):
    """Classification label produced by the classify strategies."""
    M = "M"
    P = "P"
    T = "T"


# Canonical lowercase literals; matching is case-insensitive
BOOLEAN_LITERALS: dict[str, bool] = {"true": True, "false": False}
