"""Assignment Schemas — Pydantic models for the assignment endpoint.

Invariants:
    - AssignmentRequest.input: text, may be empty (empty input is a valid, empty set)
    - AssignmentRequest.substitution: any string, passed to the registry untouched
      (no length rule, no stripping: "" and " base" are unknown substitutions)
    - Extra request fields rejected

Design Decisions:
    - No field constraints beyond type: parse and lookup errors keep their own
      codes instead of collapsing into VALIDATION_ERROR
    - Input length cap enforced in the route from settings, not in the model:
      the limit is configuration, the model is a pure shape
"""

from pydantic import BaseModel, ConfigDict


class AssignmentRequest(BaseModel):
    """Raw assignment text plus the substitution to apply."""
    model_config = ConfigDict(extra="forbid")

    input: str
    substitution: str


class AssignmentResponse(BaseModel):
    """Evaluation result plus its line rendering."""
    substitution: str
    result: bool | int | dict[str, bool | str]
    text: str


class SubstitutionCatalog(BaseModel):
    substitutions: list[str]
