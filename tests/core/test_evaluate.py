"""Evaluator — tests for parse -> resolve -> apply.

Tests cover:
    - evaluate(..., "base") returns the parsed set unchanged
    - Parse errors surface as EvaluationError and win over lookup errors
    - Unknown substitution names raise UnknownSubstitutionError
    - Evaluator works with an injected registry
    - Default evaluator is built once
"""

import pytest

from assignment_api.core.errors import (
    EvaluationError, InvalidBooleanError, MalformedLineError,
    SubstitutionNotApplicableError, UnknownSubstitutionError,
)
from assignment_api.core.evaluate import Evaluator, evaluate, get_default_evaluator
from assignment_api.core.registry import SubstitutionRegistry


def test_base_returns_parsed_set_unchanged():
    assert evaluate("A: true\nB: false", "base") == {"A": True, "B": False}


def test_supplemented_strategies_dispatch():
    text = "A: true\nB: true\nC: false"
    assert evaluate(text, "count") == 2
    assert evaluate(text, "all") is False
    assert evaluate(text, "any") is True
    assert evaluate(text, "negate") == {"A": False, "B": False, "C": True}
    assert evaluate(text, "classify") == {"H": "M"}
    assert evaluate(text, "classify_custom2") == {"H": "T"}


def test_unknown_substitution():
    with pytest.raises(UnknownSubstitutionError) as exc_info:
        evaluate("A: true", "nonexistent")
    assert isinstance(exc_info.value, EvaluationError)


def test_parse_error_is_an_evaluation_error():
    with pytest.raises(EvaluationError) as exc_info:
        evaluate("A: maybe", "base")
    assert isinstance(exc_info.value, InvalidBooleanError)


def test_parse_error_reported_before_unknown_substitution():
    with pytest.raises(MalformedLineError):
        evaluate("A true", "nonexistent")


def test_strategy_error_is_an_evaluation_error():
    with pytest.raises(EvaluationError) as exc_info:
        evaluate("A: true", "classify")
    assert isinstance(exc_info.value, SubstitutionNotApplicableError)


def test_evaluator_uses_injected_registry():
    evaluator = Evaluator(SubstitutionRegistry([("first", lambda a: next(iter(a)))]))
    assert evaluator.evaluate("X: true\nY: false", "first") == "X"
    with pytest.raises(UnknownSubstitutionError):
        evaluator.evaluate("X: true", "base")


def test_repeated_evaluation_is_deterministic():
    first = evaluate("A: true\nB: false", "negate")
    second = evaluate("A: true\nB: false", "negate")
    assert first == second


def test_default_evaluator_is_cached():
    assert get_default_evaluator() is get_default_evaluator()
