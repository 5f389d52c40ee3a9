"""Domain models and types for periodfmt.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Date arithmetic and pattern formatting kept apart from the CLI
"""

from periodfmt.domain.models import Pattern, Period, parse_period
from periodfmt.domain.pattern import CompiledPattern, PatternError, UnsupportedFieldError, compile_pattern, format_date

__all__ = [
    "Pattern",
    "Period",
    "parse_period",
    "CompiledPattern",
    "PatternError",
    "UnsupportedFieldError",
    "compile_pattern",
    "format_date",
]
