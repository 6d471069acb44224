"""Assignment Parser — line-oriented `<name>: <value>` text to an ordered AssignmentSet.

Invariants:
    - Pure: same text in, same AssignmentSet (or same error) out
    - Line split on the FIRST colon; name and value trimmed; blank lines skipped
    - Only LF and CRLF end a line; form feeds, U+2028 and other Unicode
      separators stay inside the line
    - Boolean literals matched case-insensitively, stored as bool
    - Duplicate names rejected (never last-wins)
    - parse_assignments(format_assignments(s)) == s for every AssignmentSet s

Design Decisions:
    - Hand-written line scanner over a YAML parser: YAML accepts far more than
      `name: bool` (nesting, anchors, yes/no) and hides which line failed
    - Line numbers are 1-based and count blank lines, so they match the editor
"""

import re

from assignment_api.core.domain_types import AssignmentSet, BOOLEAN_LITERALS
from assignment_api.core.errors import (
    DuplicateNameError, InvalidBooleanError, MalformedLineError,
)

_LINE_BREAK = re.compile(r"\r?\n")


def parse_assignments(text: str) -> AssignmentSet:
    """Parse assignment text. Raises a ParseError subclass on the first bad line."""
    assignments: AssignmentSet = {}
    for line_number, line in enumerate(_LINE_BREAK.split(text), start=1):
        if not line.strip():
            continue
        name, value = _split_line(line_number, line)
        if name in assignments:
            raise DuplicateNameError(line_number, name)
        assignments[name] = _parse_boolean(line_number, name, value)
    return assignments


def format_assignments(assignments: AssignmentSet) -> str:
    """Render an AssignmentSet back to canonical `name: value` lines."""
    return "".join(
        f"{name}: {format_boolean(value)}\n" for name, value in assignments.items()
    )


def format_boolean(value: bool) -> str:
    return "true" if value else "false"


def _split_line(line_number: int, line: str) -> tuple[str, str]:
    name, sep, value = line.partition(":")
    name, value = name.strip(), value.strip()
    if not sep or not name or not value or _has_whitespace(name):
        raise MalformedLineError(line_number, line)
    return name, value


def _parse_boolean(line_number: int, name: str, value: str) -> bool:
    literal = value.lower()
    if literal not in BOOLEAN_LITERALS:
        raise InvalidBooleanError(line_number, name, value)
    return BOOLEAN_LITERALS[literal]


def _has_whitespace(name: str) -> bool:
    return any(ch.isspace() for ch in name)
