"""
Recovery component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class ConsolePort(Protocol):
    """Port for line-oriented console I/O."""

    def read_line(self) -> str | None:
        """Read one line without its newline; None at end of input."""
        ...

    def write(self, message: str) -> None:
        """Write a message (no newline added)."""
        ...
