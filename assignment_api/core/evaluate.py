"""Evaluator — parse, resolve, apply. The single entry point the shell calls.

Invariants:
    - Steps run in order: parse input, resolve substitution, apply strategy
    - Parse errors surface before lookup errors (bad input + bad name -> ParseError)
    - Every failure is an EvaluationError subclass; nothing is retried
    - The Evaluator holds only the read-only registry: safe to share across requests

Design Decisions:
    - Registry injected through the constructor: the default catalog is one
      instance built on first use, alternates are built by tests
"""

from functools import lru_cache

from assignment_api.core.domain_types import Result
from assignment_api.core.parse_assignments import parse_assignments
from assignment_api.core.registry import SubstitutionRegistry, build_default_registry


class Evaluator:
    """Applies a named substitution from its registry to raw assignment text."""

    def __init__(self, registry: SubstitutionRegistry):
        self._registry = registry

    @property
    def registry(self) -> SubstitutionRegistry:
        return self._registry

    def evaluate(self, raw_input: str, substitution_name: str) -> Result:
        assignments = parse_assignments(raw_input)
        strategy = self._registry.resolve(substitution_name)
        return strategy(assignments)


@lru_cache
def get_default_evaluator() -> Evaluator:
    return Evaluator(build_default_registry())


def evaluate(raw_input: str, substitution_name: str) -> Result:
    """Evaluate against the built-in catalog."""
    return get_default_evaluator().evaluate(raw_input, substitution_name)
