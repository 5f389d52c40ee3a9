"""Pattern-based date formatting.

A pattern is compiled once, which validates every letter in it, and the
compiled form then renders any number of dates:

- Unquoted ASCII letters are field specifiers; a run of the same letter is
  one field and its length selects the width or text style.
- Text in single quotes is literal, and '' is a literal quote.
- Any other character is literal, except the reserved characters # { }
  and the optional-section brackets [ ].

Only date fields are rendered. Letters for time, zone, and week-based fields
are recognized but cannot be applied to a calendar date. The pad
modifier p is recognized and rejected. Names are English.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from periodfmt.domain.models import Pattern

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

QUARTER_ORDINALS = ("1st", "2nd", "3rd", "4th")

# Letters that format only time-of-day or zone values: letter -> (maximum run length, field)
TIME_FIELDS = {
    "a": (1, "AmPmOfDay"),
    "B": (5, "DayPeriod"),
    "h": (2, "ClockHourOfAmPm"),
    "K": (2, "HourOfAmPm"),
    "k": (2, "ClockHourOfDay"),
    "H": (2, "HourOfDay"),
    "m": (2, "MinuteOfHour"),
    "s": (2, "SecondOfMinute"),
    "S": (19, "NanoOfSecond"),
    "A": (19, "MilliOfDay"),
    "n": (19, "NanoOfSecond"),
    "N": (19, "NanoOfDay"),
    "V": (2, "ZoneId"),
    "v": (4, "ZoneId"),
    "z": (4, "ZoneName"),
    "Z": (5, "OffsetSeconds"),
    "O": (4, "OffsetSeconds"),
    "X": (5, "OffsetSeconds"),
    "x": (5, "OffsetSeconds"),
}

# Recognized date letters that this formatter does not implement
UNIMPLEMENTED_FIELDS = frozenset("YwWecFg")

# Pad modifier, which changes the width of the field after it
PAD_MODIFIER = "p"

RESERVED_CHARS = frozenset("#{}")
OPTIONAL_SECTION_CHARS = frozenset("[]")


class PatternError(ValueError):
    """Pattern text is not valid."""


class UnsupportedFieldError(ValueError):
    """Pattern uses a field that a calendar date does not have."""


@dataclass(frozen=True)
class Literal:
    """Literal text copied to the output."""

    text: str


@dataclass(frozen=True)
class Field:
    """Field specifier: a run of one pattern letter."""

    letter: str
    count: int


@dataclass(frozen=True)
class CompiledPattern:
    """Immutable validated pattern."""

    pattern: Pattern
    parts: tuple[Literal | Field, ...]

    def format(self, value: date) -> str:
        return format_date(self, value)


def _number(value: int, count: int) -> str:
    return f"{value:0{count}d}"


def _year(value: date, count: int) -> str:
    if count == 2:
        return f"{value.year % 100:02d}"
    return _number(value.year, count)


def _month(value: date, count: int) -> str:
    if count <= 2:
        return _number(value.month, count)
    name = MONTH_NAMES[value.month - 1]
    if count == 3:
        return name[:3]
    if count == 4:
        return name
    return name[0]


def _day_of_week(value: date, count: int) -> str:
    name = DAY_NAMES[value.weekday()]
    if count <= 3:
        return name[:3]
    if count == 4:
        return name
    return name[0]


def _quarter(value: date, count: int) -> str:
    quarter = (value.month - 1) // 3 + 1
    if count <= 2:
        return _number(quarter, count)
    if count == 3:
        return f"Q{quarter}"
    if count == 4:
        return f"{QUARTER_ORDINALS[quarter - 1]} quarter"
    return str(quarter)


def _era(value: date, count: int) -> str:
    # Python dates start at year 1, so every date is in the common era
    if count <= 3:
        return "AD"
    if count == 4:
        return "Anno Domini"
    return "A"


# letter -> (maximum run length, renderer)
DATE_FIELDS: dict[str, tuple[int, Callable[[date, int], str]]] = {
    "G": (5, _era),
    "y": (19, _year),
    "u": (19, _year),
    "M": (5, _month),
    "L": (5, _month),
    "d": (2, lambda value, count: _number(value.day, count)),
    "D": (3, lambda value, count: _number(value.timetuple().tm_yday, count)),
    "E": (5, _day_of_week),
    "Q": (5, _quarter),
    "q": (5, _quarter),
}


def _check_letter(letter: str, count: int) -> None:
    """Validate a field letter and its run length.

    Raises:
        PatternError: If the letter is unknown, unimplemented, or repeated too often.
    """
    if letter in DATE_FIELDS:
        limit = DATE_FIELDS[letter][0]
    elif letter in TIME_FIELDS:
        limit = TIME_FIELDS[letter][0]
    elif letter in UNIMPLEMENTED_FIELDS:
        raise PatternError(f"Unsupported pattern letter: {letter}")
    elif letter == PAD_MODIFIER:
        raise PatternError("Pad modifier 'p' is not supported")
    else:
        raise PatternError(f"Unknown pattern letter: {letter}")

    if count > limit:
        raise PatternError(f"Too many pattern letters: {letter}")


def _read_quoted(pattern: str, start: int) -> tuple[str, int]:
    """Read a quoted literal beginning at the opening quote.

    Returns:
        Tuple of (literal_text, index_after_closing_quote).
    """
    pos = start + 1
    while pos < len(pattern):
        if pattern[pos] == "'":
            if pos + 1 < len(pattern) and pattern[pos + 1] == "'":
                pos += 2
                continue
            break
        pos += 1
    else:
        raise PatternError(f"Pattern ends with an incomplete string literal: {pattern}")

    text = pattern[start + 1 : pos]
    if not text:
        return "'", pos + 1
    return text.replace("''", "'"), pos + 1


def compile_pattern(pattern: str) -> CompiledPattern:
    """Validate a pattern and compile it into literal and field parts.

    Args:
        pattern: Pattern text, e.g. "yyyy-MM-dd" or "'week' d".

    Returns:
        Compiled pattern ready for formatting.

    Raises:
        PatternError: If the pattern contains an unknown letter, too many
            letters for a field, a reserved character, an optional section,
            or an unterminated quote.
    """
    parts: list[Literal | Field] = []
    literal = ""
    i = 0

    while i < len(pattern):
        char = pattern[i]

        if char.isascii() and char.isalpha():
            end = i
            while end < len(pattern) and pattern[end] == char:
                end += 1
            count = end - i
            _check_letter(char, count)
            if literal:
                parts.append(Literal(literal))
                literal = ""
            parts.append(Field(char, count))
            i = end
        elif char == "'":
            text, i = _read_quoted(pattern, i)
            literal += text
        elif char in RESERVED_CHARS:
            raise PatternError(f"Pattern includes reserved character: '{char}'")
        elif char in OPTIONAL_SECTION_CHARS:
            raise PatternError(f"Optional sections are not supported: '{char}'")
        else:
            literal += char
            i += 1

    if literal:
        parts.append(Literal(literal))

    return CompiledPattern(Pattern(pattern), tuple(parts))


def format_date(compiled: CompiledPattern, value: date) -> str:
    """Render a date with a compiled pattern.

    Raises:
        UnsupportedFieldError: If the pattern has a time or zone field.
    """
    output = []
    for part in compiled.parts:
        if isinstance(part, Literal):
            output.append(part.text)
        elif part.letter in TIME_FIELDS:
            raise UnsupportedFieldError(f"Unsupported field: {TIME_FIELDS[part.letter][1]}")
        else:
            render = DATE_FIELDS[part.letter][1]
            output.append(render(value, part.count))
    return "".join(output)
