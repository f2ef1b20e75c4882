"""
Parsing component.

Pure functions converting text to numbers. Only plain decimal literals
are accepted: no underscores, no non-ASCII digits, no nan/inf.
"""

from __future__ import annotations

import math
import re

from safecalc.domain.errors import ParseFailure

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _clean(text: str | None) -> str:
    if not isinstance(text, str):
        raise ParseFailure(text, "expected text")
    stripped = text.strip()
    if not stripped:
        raise ParseFailure(text, "input is empty")
    return stripped


def parse_int(text: str | None) -> int:
    """
    Parse a line of text as a decimal integer.

    Surrounding whitespace is ignored; an optional sign is allowed.

    Raises:
        ParseFailure: if the text is empty or not an integer literal.
    """
    stripped = _clean(text)
    if not INT_PATTERN.fullmatch(stripped):
        raise ParseFailure(text, "not a valid integer")
    return int(stripped)


def parse_number(text: str | None) -> int | float:
    """
    Parse a line of text as an int or a finite float.

    Integer literals come back as int so integer-only operations can use them.
    """
    stripped = _clean(text)
    if INT_PATTERN.fullmatch(stripped):
        return int(stripped)
    if not FLOAT_PATTERN.fullmatch(stripped):
        raise ParseFailure(text, "not a valid number")
    value = float(stripped)
    if math.isinf(value):
        raise ParseFailure(text, "number is out of range")
    return value
