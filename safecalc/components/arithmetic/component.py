"""
Arithmetic component.

Pure validate-then-compute functions. Each one checks its precondition
and raises InvalidArgument before doing any arithmetic; none of them
returns a sentinel value or corrects its input.
"""

from __future__ import annotations

import math
from typing import Any

from safecalc.domain.errors import InvalidArgument

from .models import (
    ArithmeticInput,
    ArithmeticOutput,
    CharAtInput,
    CharAtOutput,
    CircleAreaInput,
    CircleAreaOutput,
    DifferenceInput,
    DifferenceOutput,
    DivideInput,
    DivideOutput,
    PercentInput,
    PercentOutput,
    Real,
    SqrtInput,
    SqrtOutput,
)

# --- Argument checks ---


def _require_int(value: Any, name: str) -> int:
    # bool is an int subclass but never a meaningful operand here
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(
            f"{name} must be an integer, got {type(value).__name__}", argument=name
        )
    return value


def _require_real(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(
            f"{name} must be a number, got {type(value).__name__}", argument=name
        )
    try:
        number = float(value)
    except OverflowError:
        raise InvalidArgument(f"{name} is too large", argument=name) from None
    if math.isnan(number):
        raise InvalidArgument(f"{name} must not be NaN", argument=name)
    if math.isinf(number):
        raise InvalidArgument(f"{name} must be finite", argument=name)
    return number


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (floor division rounds down)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# --- Pure Functions ---


def safe_percent(part: int, whole: int) -> int:
    """
    Percentage of whole that part represents.

    Computes (part * 100) / whole with integer truncation toward zero.

    Raises:
        InvalidArgument: if whole is zero or either argument is not an int.
    """
    part = _require_int(part, "part")
    whole = _require_int(whole, "whole")
    if whole == 0:
        raise InvalidArgument("whole must be non-zero", argument="whole")
    return _truncating_div(part * 100, whole)


def difference(a: int, b: int) -> int:
    """
    Non-negative difference a - b.

    a == b is allowed and yields 0.

    Raises:
        InvalidArgument: if a < b.
    """
    a = _require_int(a, "a")
    b = _require_int(b, "b")
    if a < b:
        raise InvalidArgument("a must be >= b", argument="a")
    return a - b


def safe_divide(dividend: int, divisor: int) -> int:
    """Integer quotient truncated toward zero; divisor must be non-zero."""
    dividend = _require_int(dividend, "dividend")
    divisor = _require_int(divisor, "divisor")
    if divisor == 0:
        raise InvalidArgument("divisor must be non-zero", argument="divisor")
    return _truncating_div(dividend, divisor)


def safe_sqrt(x: Real) -> float:
    """Square root of a non-negative number."""
    x = _require_real(x, "x")
    if x < 0:
        raise InvalidArgument("x must be non-negative", argument="x")
    return math.sqrt(x)


def circle_area(radius: Real) -> float:
    """Area of a circle; radius 0 is a valid degenerate circle."""
    radius = _require_real(radius, "radius")
    if radius < 0:
        raise InvalidArgument("radius must be non-negative", argument="radius")
    area = math.pi * radius * radius
    if math.isinf(area):
        raise InvalidArgument("result is out of range", argument="radius")
    return area


def char_at(text: str, index: int) -> str:
    """
    Character at a zero-based index.

    Negative indices are rejected rather than counted from the end.
    """
    if not isinstance(text, str):
        raise InvalidArgument(
            f"text must be a string, got {type(text).__name__}", argument="text"
        )
    index = _require_int(index, "index")
    if index < 0 or index >= len(text):
        raise InvalidArgument(
            f"index {index} out of range for length {len(text)}", argument="index"
        )
    return text[index]


# --- Run Function (Atomic Component Pattern) ---


def run(input_data: ArithmeticInput) -> ArithmeticOutput:
    """
    Run an arithmetic operation based on input type.

    Args:
        input_data: One of the operation input dataclasses.

    Returns:
        The matching output dataclass.

    Raises:
        InvalidArgument: if the operation's precondition is violated.
        TypeError: if input_data is not a known input type.
    """
    if isinstance(input_data, PercentInput):
        return PercentOutput(percent=safe_percent(input_data.part, input_data.whole))

    if isinstance(input_data, DifferenceInput):
        return DifferenceOutput(difference=difference(input_data.a, input_data.b))

    if isinstance(input_data, DivideInput):
        return DivideOutput(quotient=safe_divide(input_data.dividend, input_data.divisor))

    if isinstance(input_data, SqrtInput):
        return SqrtOutput(root=safe_sqrt(input_data.x))

    if isinstance(input_data, CircleAreaInput):
        return CircleAreaOutput(area=circle_area(input_data.radius))

    if isinstance(input_data, CharAtInput):
        return CharAtOutput(char=char_at(input_data.text, input_data.index))

    raise TypeError(f"Unknown input type: {type(input_data)}")
