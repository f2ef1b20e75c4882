"""
safecalc - validated arithmetic for the runtime-errors lesson.

Every operation checks its precondition first and raises instead of
returning a sentinel value.
"""

__version__ = "0.1.0"
