"""
Recovery component.

Caller-side strategies for handling a failed operation: substitute a
default value, or re-prompt for input. The operations themselves never
recover; these helpers wrap them from the outside.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from safecalc.components.parsing import parse_int
from safecalc.domain.errors import CalcError, ParseFailure

from .ports import ConsolePort

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3


def or_default(fn: Callable[..., T], *args: Any, default: T) -> T:
    """
    Call fn(*args), returning default if it raises a CalcError.

    Any other exception propagates unchanged.
    """
    try:
        return fn(*args)
    except CalcError as e:
        logger.warning("%s failed (%s); using default %r", fn.__name__, e.message, default)
        return default


def prompt_int(
    prompt: str,
    *,
    console: ConsolePort,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> int:
    """
    Prompt until the user enters a valid integer.

    Args:
        prompt: Text written before each read.
        console: Console port used for reading and writing.
        max_attempts: Number of reads allowed before giving up.

    Returns:
        The parsed integer.

    Raises:
        ValueError: if max_attempts is less than 1.
        ParseFailure: at end of input, or after max_attempts bad lines.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    attempt = 0
    while True:
        attempt += 1
        console.write(prompt)
        line = console.read_line()
        if line is None:
            raise ParseFailure(None, "end of input")
        try:
            return parse_int(line)
        except ParseFailure as e:
            console.write(f"{e.message}\n")
            logger.debug("Attempt %d/%d rejected: %r", attempt, max_attempts, line)
            if attempt >= max_attempts:
                raise
