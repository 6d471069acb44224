"""Error Hierarchy — tests for codes, statuses and the REST envelope."""

from assignment_api.core.errors import (
    AssignmentError, DuplicateNameError, EvaluationError, InputTooLongError,
    InvalidBooleanError, MalformedLineError, ParseError,
    SubstitutionNotApplicableError, UnknownSubstitutionError,
)


def test_parse_errors_are_400_validation():
    for err in (
        MalformedLineError(1, "A true"),
        InvalidBooleanError(1, "A", "maybe"),
        DuplicateNameError(2, "A"),
    ):
        assert isinstance(err, ParseError)
        assert isinstance(err, EvaluationError)
        assert err.http_status == 400
        assert err.category.value == "validation"


def test_discriminant_codes():
    assert MalformedLineError(1, "x").code == "Parse.MalformedLine"
    assert InvalidBooleanError(1, "A", "x").code == "Parse.InvalidBoolean"
    assert DuplicateNameError(1, "A").code == "Parse.DuplicateName"
    assert UnknownSubstitutionError("x", ["base"]).code == "UnknownSubstitution"


def test_to_response_envelope():
    response = InvalidBooleanError(3, "A", "maybe").to_response()
    error = response["error"]
    assert error["code"] == "Parse.InvalidBoolean"
    assert error["severity"] == "error"
    assert error["context"]["line_number"] == 3
    assert error["context"]["variable_name"] == "A"
    assert error["context"]["value"] == "maybe"
    assert "maybe" in error["message"]


def test_unknown_substitution_copies_available_list():
    available = ["base"]
    err = UnknownSubstitutionError("x", available)
    available.append("later")
    assert err.context.available == ["base"]


def test_not_applicable_is_422():
    err = SubstitutionNotApplicableError("nope", "Substitution.NoMatch")
    assert isinstance(err, AssignmentError)
    assert err.http_status == 422
    assert err.category.value == "business_rule"


def test_input_too_long_is_413_outside_evaluation_errors():
    err = InputTooLongError(12, 10)
    assert isinstance(err, AssignmentError)
    assert not isinstance(err, EvaluationError)
    assert err.http_status == 413
    assert err.to_response()["error"]["code"] == "INPUT_TOO_LONG"
    assert "12" in err.message and "10" in err.message
