"""Assignment Route — POST /api/assignment evaluates a substitution over assignment text.

Invariants:
    - Request shape validated by Pydantic before reaching the handler
    - Input longer than settings.max_input_length rejected with 413 before parsing
    - Domain errors propagate to the global AssignmentError handler (never caught here)
    - The Evaluator is injected via Depends: tests override get_evaluator

Design Decisions:
    - Response carries both the structured result and its line rendering,
      so the HTML page can show either
    - Oversized input raised as InputTooLongError: every error response shares
      the top-level {"error": ...} envelope
"""

import logging

from fastapi import APIRouter, Depends

from assignment_api.config import Settings, get_settings
from assignment_api.core.errors import InputTooLongError
from assignment_api.core.evaluate import Evaluator, get_default_evaluator
from assignment_api.core.format_result import format_result
from assignment_api.schemas.assignment import (
    AssignmentRequest, AssignmentResponse, SubstitutionCatalog,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["assignment"])


def get_evaluator() -> Evaluator:
    return get_default_evaluator()


@router.post("/assignment", response_model=AssignmentResponse)
async def evaluate_assignment(
    body: AssignmentRequest,
    evaluator: Evaluator = Depends(get_evaluator),
    settings: Settings = Depends(get_settings),
):
    """Parse body.input and apply body.substitution to it."""
    if len(body.input) > settings.max_input_length:
        raise InputTooLongError(len(body.input), settings.max_input_length)
    result = evaluator.evaluate(body.input, body.substitution)
    logger.info(
        "Substitution applied",
        extra={"substitution": body.substitution},
    )
    return AssignmentResponse(
        substitution=body.substitution,
        result=result,
        text=format_result(result),
    )


@router.get("/substitutions", response_model=SubstitutionCatalog)
async def list_substitutions(evaluator: Evaluator = Depends(get_evaluator)):
    """Available substitution names, in catalog order."""
    return SubstitutionCatalog(substitutions=evaluator.registry.names())
