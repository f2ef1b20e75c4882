"""
Parsing component.

Turns one line of user text into a number or raises ParseFailure.
"""

from .component import parse_int, parse_number

__all__ = ["parse_int", "parse_number"]
