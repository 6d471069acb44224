"""Result Formatting — renders any Result in the `name: value` line format.

Invariants:
    - Mapping results render one `name: value` line per entry, input order kept
    - Booleans always render lowercase (true/false), matching the input literals
    - Scalar results render as a single line

Design Decisions:
    - Same line format as the input: a `base` result can be pasted back as input
"""

from assignment_api.core.domain_types import Result
from assignment_api.core.parse_assignments import format_boolean


def format_result(result: Result) -> str:
    if isinstance(result, dict):
        return "".join(
            f"{name}: {_format_value(value)}\n" for name, value in result.items()
        )
    return f"{_format_value(result)}\n"


def _format_value(value: bool | int | str) -> str:
    if isinstance(value, bool):
        return format_boolean(value)
    return str(value)
