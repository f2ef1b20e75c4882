"""
Console adapter backed by text streams (stdin/stdout by default).
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from safecalc.components.recovery import ConsolePort


@dataclass
class StreamConsoleAdapter:
    """
    ConsolePort over a pair of text streams.

    Streams are resolved lazily so tests that swap sys.stdin/sys.stdout
    (e.g. pytest's capsys) see their replacements.
    """

    stdin: TextIO | None = None
    stdout: TextIO | None = None
    _eof: bool = field(default=False, init=False)

    def read_line(self) -> str | None:
        if self._eof:
            return None
        line = (self.stdin or sys.stdin).readline()
        if line == "":
            self._eof = True
            return None
        return line.rstrip("\r\n")

    def write(self, message: str) -> None:
        out = self.stdout or sys.stdout
        out.write(message)
        out.flush()


# Verify protocol compliance at module load time
def _verify_protocol_compliance() -> None:
    """Verify StreamConsoleAdapter satisfies ConsolePort."""
    _: ConsolePort = StreamConsoleAdapter()


_verify_protocol_compliance()
