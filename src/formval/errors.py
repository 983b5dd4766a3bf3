"""Exception types for formval.

Two failure channels exist and must not be conflated:

- A well-formed value that fails a rule is reported by the predicate
  returning ``False``.
- A malformed call (missing argument, wrong type, empty token list) raises
  ``InvalidArgumentError``. This is a programmer error and propagates.
"""

from __future__ import annotations

from typing import Any


def error_message(param: str, expected: str) -> str:
    """Build the message used for a missing or wrongly typed parameter.

    Args:
        param: Name of the offending parameter(s).
        expected: Human-readable name of the required type.

    Returns:
        The formatted message.
    """
    return (
        f"Missing parameter, or parameter {param} is not the correct type "
        f"(requires {expected})"
    )


class FormvalError(Exception):
    """Base exception for all formval errors.

    Attributes:
        context: Structured information about the failure.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class InvalidArgumentError(FormvalError, TypeError):
    """Raised when a predicate is called with a missing or wrongly typed argument."""

    def __init__(self, param: str, expected_type: str) -> None:
        self.param = param
        self.expected_type = expected_type
        super().__init__(
            error_message(param, expected_type),
            context={"param": param, "expected_type": expected_type},
        )
