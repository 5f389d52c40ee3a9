"""Domain type definitions for periodfmt.

- Pattern: Formatter pattern text (e.g., "yyyy-MM-dd")
- Period: Length of time as independent months and days
"""

import re
from dataclasses import dataclass
from typing import NewType

# Pattern text as written by the user, before validation
Pattern = NewType("Pattern", str)

_PERIOD_RE = re.compile(
    r"([-+]?)P"
    r"(?:([-+]?[0-9]+)Y)?"
    r"(?:([-+]?[0-9]+)M)?"
    r"(?:([-+]?[0-9]+)W)?"
    r"(?:([-+]?[0-9]+)D)?",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Period:
    """Immutable length of time.

    Months and days are kept apart: a period of 3 months and 1 day is never
    converted to a number of days.
    """

    months: int = 0
    days: int = 0

    @classmethod
    def of_months(cls, months: int) -> "Period":
        return cls(months=months)

    @classmethod
    def of_days(cls, days: int) -> "Period":
        return cls(days=days)

    def plus_months(self, months: int) -> "Period":
        return Period(self.months + months, self.days)

    def plus_days(self, days: int) -> "Period":
        return Period(self.months, self.days + days)

    def negated(self) -> "Period":
        return Period(-self.months, -self.days)

    def is_zero(self) -> bool:
        return self.months == 0 and self.days == 0

    def __str__(self) -> str:
        if self.is_zero():
            return "P0D"
        text = "P"
        if self.months:
            text += f"{self.months}M"
        if self.days:
            text += f"{self.days}D"
        return text


def parse_period(text: str) -> Period:
    """Parse an ISO-8601 period such as "P3M1D".

    Years are folded into months and weeks into days, since a Period only
    carries those two fields.

    Args:
        text: Period text in PnYnMnWnD form.

    Returns:
        Parsed Period.

    Raises:
        ValueError: If the text is not a valid period.
    """
    match = _PERIOD_RE.fullmatch(text.strip())
    if match is None or not any(match.group(i) for i in range(2, 6)):
        raise ValueError(f"Invalid period: {text!r}")

    sign = -1 if match.group(1) == "-" else 1
    years, months, weeks, days = (int(match.group(i) or 0) for i in range(2, 6))

    return Period(
        months=sign * (years * 12 + months),
        days=sign * (weeks * 7 + days),
    )
