"""Error Hierarchy — typed, categorized exceptions for every parse and evaluation failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Codes are the public discriminants: Parse.MalformedLine, Parse.InvalidBoolean,
      Parse.DuplicateName, UnknownSubstitution, Substitution.MissingVariable,
      Substitution.NoMatch
    - ParseError IS an EvaluationError: callers catching EvaluationError see both
    - InputTooLongError is NOT an EvaluationError: the shell rejects it before evaluate()
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with AssignmentError base: the app-level handler catches all
      and maps http_status without a per-code lookup table
    - ErrorContext as dataclass: rich context without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where in the input (or the catalog) the failure was detected."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    line_number: int | None = None
    variable_name: str | None = None
    value: str | None = None
    substitution: str | None = None
    available: list[str] | None = None


class AssignmentError(Exception):
    """Base exception for all assignment service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "line_number": self.context.line_number,
                    "variable_name": self.context.variable_name,
                    "value": self.context.value,
                    "substitution": self.context.substitution,
                    "available": self.context.available,
                },
            }
        }


class EvaluationError(AssignmentError):
    """Any failure of evaluate(): parsing, lookup, or strategy application."""


# ─── Parse Errors (400) ─────────────────────────────────────────

class ParseError(EvaluationError):
    """Input text is not a valid assignment set."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class MalformedLineError(ParseError):
    """Non-blank line does not have the `<name>: <value>` shape."""
    def __init__(self, line_number: int, line: str):
        super().__init__(
            f"Line {line_number} is not of the form '<name>: <value>': {line.strip()!r}",
            "Parse.MalformedLine",
            ErrorContext(line_number=line_number, value=line.strip()),
        )


class InvalidBooleanError(ParseError):
    """Value token is not a recognized boolean literal."""
    def __init__(self, line_number: int, name: str, value: str):
        super().__init__(
            f"Line {line_number}: value {value!r} for '{name}' is not 'true' or 'false'",
            "Parse.InvalidBoolean",
            ErrorContext(line_number=line_number, variable_name=name, value=value),
        )


class DuplicateNameError(ParseError):
    """Same variable name assigned twice in one input."""
    def __init__(self, line_number: int, name: str):
        super().__init__(
            f"Line {line_number}: variable '{name}' is already assigned",
            "Parse.DuplicateName",
            ErrorContext(line_number=line_number, variable_name=name),
        )


# ─── Lookup / Strategy Errors ───────────────────────────────────

class UnknownSubstitutionError(EvaluationError):
    """Requested substitution name is not in the registry."""
    def __init__(self, name: str, available: list[str]):
        super().__init__(
            f"Unknown substitution '{name}'. Available: {', '.join(available)}",
            "UnknownSubstitution", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR,
            ErrorContext(substitution=name, available=list(available)),
            404,
        )
        self.name = name


class SubstitutionNotApplicableError(EvaluationError):
    """Strategy cannot produce a result for this (valid) assignment set."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 422,
        )


# ─── Request Errors ─────────────────────────────────────────────

class InputTooLongError(AssignmentError):
    """Input text exceeds the configured size limit. Raised before parsing."""
    def __init__(self, length: int, limit: int):
        super().__init__(
            f"Input is {length} characters; the limit is {limit}",
            "INPUT_TOO_LONG", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ErrorContext(), 413,
        )
        self.length = length
        self.limit = limit
