"""
Tests for the stream-backed console adapter.
"""

import io

from safecalc.adapters.console import StreamConsoleAdapter
from safecalc.components.recovery import prompt_int


class TestStreamConsoleAdapter:
    """Tests for StreamConsoleAdapter."""

    def test_reads_lines_without_newline(self) -> None:
        console = StreamConsoleAdapter(stdin=io.StringIO("12\r\nabc\n"), stdout=io.StringIO())
        assert console.read_line() == "12"
        assert console.read_line() == "abc"

    def test_none_at_end_of_input(self) -> None:
        console = StreamConsoleAdapter(stdin=io.StringIO("last"), stdout=io.StringIO())
        assert console.read_line() == "last"
        assert console.read_line() is None
        assert console.read_line() is None

    def test_write(self) -> None:
        out = io.StringIO()
        StreamConsoleAdapter(stdin=io.StringIO(), stdout=out).write("part: ")
        assert out.getvalue() == "part: "

    def test_drives_prompt_int(self) -> None:
        out = io.StringIO()
        console = StreamConsoleAdapter(stdin=io.StringIO("x\n9\n"), stdout=out)
        assert prompt_int("n: ", console=console) == 9
        assert out.getvalue().startswith("n: Cannot parse 'x'")
