"""
Unit tests for the error taxonomy.
"""

from safecalc.domain.errors import CalcError, InvalidArgument, ParseFailure


class TestInvalidArgument:
    """Tests for InvalidArgument."""

    def test_is_calc_error(self) -> None:
        assert issubclass(InvalidArgument, CalcError)

    def test_str_is_message(self) -> None:
        assert str(InvalidArgument("whole must be non-zero")) == "whole must be non-zero"

    def test_to_dict_includes_argument(self) -> None:
        err = InvalidArgument("whole must be non-zero", argument="whole")
        assert err.to_dict() == {
            "error": "INVALID_ARGUMENT",
            "message": "whole must be non-zero",
            "argument": "whole",
        }

    def test_to_dict_without_argument(self) -> None:
        assert "argument" not in InvalidArgument("bad").to_dict()


class TestParseFailure:
    """Tests for ParseFailure."""

    def test_message_quotes_text(self) -> None:
        err = ParseFailure("12abc")
        assert err.text == "12abc"
        assert err.message == "Cannot parse '12abc': not a valid integer"

    def test_to_dict(self) -> None:
        assert ParseFailure("x", "not a valid number").to_dict() == {
            "error": "PARSE_FAILURE",
            "message": "Cannot parse 'x': not a valid number",
        }
