"""
Calendar validation and century handling.

Short form numbers (YYMMDD) carry no century. It is inferred from the
separator: '-' means the person is under 100, '+' means 100 or older.
Long form numbers carry the century and the separator is inferred instead.
"""

from datetime import MAXYEAR, MINYEAR, date, datetime

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Coordination numbers add this to the day of month
COORDINATION_OFFSET = 60


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Check that (year, month, day) exists in the proleptic Gregorian calendar."""
    if not MINYEAR <= year <= MAXYEAR:
        return False
    if month < 1 or month > 12:
        return False
    days = DAYS_IN_MONTH[month - 1]
    if month == 2 and is_leap_year(year):
        days = 29
    return 1 <= day <= days


def is_valid_coordination_date(year: int, month: int, day: int) -> bool:
    """Check a date whose day carries the coordination offset."""
    if not COORDINATION_OFFSET < day <= COORDINATION_OFFSET + 31:
        return False
    return is_valid_date(year, month, day - COORDINATION_OFFSET)


def infer_century(year: str, separator: str, now: datetime) -> str:
    """
    Infer the century of a two-digit year.

    With '-' (or no separator) the result is the most recent year not after
    now that ends in the given digits. With '+' the same is done relative to
    a date 100 years earlier.

    Returns:
        Two-digit century string
    """
    base_year = now.year - 100 if separator == "+" else now.year
    full_year = base_year - ((base_year - int(year)) % 100)
    return f"{full_year // 100:02d}"


def infer_separator(full_year: int, now: datetime) -> str:
    """Separator for a person born in full_year: '+' from the 100th year on."""
    if now.year - full_year < 100:
        return "-"
    return "+"


def has_short_form(full_year: int, now: datetime) -> bool:
    """
    Check that a birth year can be written as YYMMDD with a separator.

    '-' covers the last 100 years up to now, '+' the 100 before that.
    Years after the current one would read back a century too early.
    """
    return 0 <= now.year - full_year < 200


def age_on(birth_date: date, today: date) -> int:
    """
    Whole years between birth_date and today.

    Negative when birth_date lies in the future.
    """
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years
