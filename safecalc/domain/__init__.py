from safecalc.domain.errors import CalcError, InvalidArgument, ParseFailure

__all__ = ["CalcError", "InvalidArgument", "ParseFailure"]
