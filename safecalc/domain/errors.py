"""
Error types shared by every safecalc operation.

Hierarchy:
    CalcError (base)
    ├── InvalidArgument (precondition violated)
    └── ParseFailure (malformed textual input)
"""

from __future__ import annotations

from typing import Any


class CalcError(Exception):
    """Base error for all calculation failures."""

    code = "CALC_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        return {"error": self.code, "message": self.message}


class InvalidArgument(CalcError):
    """An input precondition was violated."""

    code = "INVALID_ARGUMENT"

    def __init__(self, message: str, argument: str | None = None) -> None:
        self.argument = argument
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.argument:
            result["argument"] = self.argument
        return result


class ParseFailure(CalcError):
    """Text could not be parsed as a number."""

    code = "PARSE_FAILURE"

    def __init__(self, text: str | None, reason: str = "not a valid integer") -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r}: {reason}")
