"""
Calculation routes.

Query parameters arrive as raw strings and go through the parsing
component, so malformed numbers surface as ParseFailure (HTTP 400)
rather than framework validation errors.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from safecalc.components.arithmetic import (
    char_at,
    circle_area,
    difference,
    safe_divide,
    safe_percent,
    safe_sqrt,
)
from safecalc.components.parsing import parse_int, parse_number

logger = logging.getLogger(__name__)

router = APIRouter()


class CalcResponse(BaseModel):
    """Successful calculation result."""

    operation: str
    result: Any


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    message: str


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {400: {"model": ErrorResponse}}


def _respond(operation: str, result: Any) -> CalcResponse:
    logger.debug("%s -> %r", operation, result)
    return CalcResponse(operation=operation, result=result)


@router.get("/percent", response_model=CalcResponse, responses=ERROR_RESPONSES)
def get_percent(part: str, whole: str) -> CalcResponse:
    """Percentage of whole that part represents, truncated toward zero."""
    return _respond("percent", safe_percent(parse_int(part), parse_int(whole)))


@router.get("/difference", response_model=CalcResponse, responses=ERROR_RESPONSES)
def get_difference(a: str, b: str) -> CalcResponse:
    """a - b, rejected when a < b."""
    return _respond("difference", difference(parse_int(a), parse_int(b)))


@router.get("/divide", response_model=CalcResponse, responses=ERROR_RESPONSES)
def get_divide(dividend: str, divisor: str) -> CalcResponse:
    return _respond("divide", safe_divide(parse_int(dividend), parse_int(divisor)))


@router.get("/sqrt", response_model=CalcResponse, responses=ERROR_RESPONSES)
def get_sqrt(x: str) -> CalcResponse:
    return _respond("sqrt", safe_sqrt(parse_number(x)))


@router.get("/area", response_model=CalcResponse, responses=ERROR_RESPONSES)
def get_area(radius: str) -> CalcResponse:
    return _respond("area", circle_area(parse_number(radius)))


@router.get("/char", response_model=CalcResponse, responses=ERROR_RESPONSES)
def get_char(text: str, index: str) -> CalcResponse:
    return _respond("char", char_at(text, parse_int(index)))
