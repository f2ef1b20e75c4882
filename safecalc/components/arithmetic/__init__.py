"""
Arithmetic component.

Public API for the validated arithmetic operations.
"""

from .component import (
    char_at,
    circle_area,
    difference,
    run,
    safe_divide,
    safe_percent,
    safe_sqrt,
)
from .models import (
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
    SqrtInput,
    SqrtOutput,
)

__all__ = [
    # Functions
    "char_at",
    "circle_area",
    "difference",
    "run",
    "safe_divide",
    "safe_percent",
    "safe_sqrt",
    # Models
    "CharAtInput",
    "CharAtOutput",
    "CircleAreaInput",
    "CircleAreaOutput",
    "DifferenceInput",
    "DifferenceOutput",
    "DivideInput",
    "DivideOutput",
    "PercentInput",
    "PercentOutput",
    "SqrtInput",
    "SqrtOutput",
]
