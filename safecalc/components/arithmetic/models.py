"""
Arithmetic component input/output models.

One frozen Input/Output pair per operation so callers can drive any of
them through the single run() entry point.
"""

from __future__ import annotations

from dataclasses import dataclass

Real = int | float

# --- Percent ---


@dataclass(frozen=True)
class PercentInput:
    """Input for safe_percent."""

    part: int
    whole: int


@dataclass(frozen=True)
class PercentOutput:
    """Percentage of whole represented by part, truncated."""

    percent: int


# --- Difference ---


@dataclass(frozen=True)
class DifferenceInput:
    """Input for difference (requires a >= b)."""

    a: int
    b: int


@dataclass(frozen=True)
class DifferenceOutput:
    """Non-negative difference a - b."""

    difference: int


# --- Division ---


@dataclass(frozen=True)
class DivideInput:
    """Input for safe_divide."""

    dividend: int
    divisor: int


@dataclass(frozen=True)
class DivideOutput:
    """Quotient truncated toward zero."""

    quotient: int


# --- Square root ---


@dataclass(frozen=True)
class SqrtInput:
    """Input for safe_sqrt."""

    x: Real


@dataclass(frozen=True)
class SqrtOutput:
    root: float


# --- Circle area ---


@dataclass(frozen=True)
class CircleAreaInput:
    """Input for circle_area."""

    radius: Real


@dataclass(frozen=True)
class CircleAreaOutput:
    area: float


# --- Character lookup ---


@dataclass(frozen=True)
class CharAtInput:
    """Input for char_at."""

    text: str
    index: int


@dataclass(frozen=True)
class CharAtOutput:
    char: str


ArithmeticInput = (
    PercentInput | DifferenceInput | DivideInput | SqrtInput | CircleAreaInput | CharAtInput
)
ArithmeticOutput = (
    PercentOutput
    | DifferenceOutput
    | DivideOutput
    | SqrtOutput
    | CircleAreaOutput
    | CharAtOutput
)
