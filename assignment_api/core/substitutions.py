"""Substitution Strategies — pure functions from an AssignmentSet to a Result.

Invariants:
    - Every strategy is total: valid input yields a Result or a typed
      SubstitutionNotApplicableError, never an arbitrary exception
    - Strategies never mutate their input; mappings are returned as new dicts
    - Classification tables are immutable and rows within a table are distinct,
      so at most one label matches

Design Decisions:
    - Override tables derived from the base table ({**base, ...}): a custom
      substitution only lists the rows it changes
    - Classification reads the fixed variables A, B, C; other variables are ignored
"""

from types import MappingProxyType

from assignment_api.core.domain_types import AssignmentSet, HValue, Result
from assignment_api.core.errors import ErrorContext, SubstitutionNotApplicableError


CLASSIFY_VARIABLES: tuple[str, ...] = ("A", "B", "C")

BASE_H_TABLE = MappingProxyType({
    HValue.M: (True, True, False),
    HValue.P: (True, True, True),
    HValue.T: (False, True, True),
})

CUSTOM2_H_TABLE = MappingProxyType({
    **BASE_H_TABLE,
    HValue.T: (True, True, False),
    HValue.M: (True, False, True),
})


# === Simple strategies ========================================================

def base(assignments: AssignmentSet) -> Result:
    """Identity: the assignment set unchanged, in input order."""
    return dict(assignments)


def negate(assignments: AssignmentSet) -> Result:
    return {name: not value for name, value in assignments.items()}


def count(assignments: AssignmentSet) -> Result:
    """Number of variables assigned true."""
    return sum(1 for value in assignments.values() if value)


def all_true(assignments: AssignmentSet) -> Result:
    return all(assignments.values())


def any_true(assignments: AssignmentSet) -> Result:
    return any(assignments.values())


# === Classification ===========================================================

def classify(assignments: AssignmentSet) -> Result:
    return {"H": _classify_h(assignments, BASE_H_TABLE, "classify").value}


def classify_custom2(assignments: AssignmentSet) -> Result:
    return {
        "H": _classify_h(assignments, CUSTOM2_H_TABLE, "classify_custom2").value,
    }


def _classify_h(
    assignments: AssignmentSet,
    table: MappingProxyType,
    substitution: str,
) -> HValue:
    """Match (A, B, C) against the table rows. Raises when nothing applies."""
    missing = [name for name in CLASSIFY_VARIABLES if name not in assignments]
    if missing:
        raise SubstitutionNotApplicableError(
            f"Substitution '{substitution}' requires variables "
            f"{', '.join(CLASSIFY_VARIABLES)}; missing: {', '.join(missing)}",
            "Substitution.MissingVariable",
            ErrorContext(variable_name=missing[0], substitution=substitution),
        )

    key = tuple(assignments[name] for name in CLASSIFY_VARIABLES)
    for label, expected in table.items():
        if expected == key:
            return label

    raise SubstitutionNotApplicableError(
        f"Substitution '{substitution}' has no H value for "
        f"(A, B, C) = ({', '.join(str(v).lower() for v in key)})",
        "Substitution.NoMatch",
        ErrorContext(substitution=substitution),
    )
