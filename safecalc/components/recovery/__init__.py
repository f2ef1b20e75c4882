"""
Recovery component.

Public API for substituting defaults and re-prompting after failures.
"""

from .component import DEFAULT_MAX_ATTEMPTS, or_default, prompt_int
from .ports import ConsolePort

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "or_default",
    "prompt_int",
    "ConsolePort",
]
