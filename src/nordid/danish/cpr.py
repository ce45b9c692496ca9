"""
Danish CPR number parsing and validation.

Format: DDMMYY-NNNC or DDMMYYNNNC
- DDMMYY: birth date
- 7th digit: together with the year, gives the century
- C: last digit, odd for men, even for women

The modulus 11 check was abandoned in 2007, so only the date is checked.
"""

import re
from datetime import date, datetime

from nordid.dates import age_on, is_valid_date
from nordid.errors import DateInvalidError, MalformedInputError
from nordid.models import ParsedFields, ParsedNumber, Scheme

CPR_PATTERN = re.compile(
    r"^(?P<day>[0-9]{2})(?P<month>[0-9]{2})(?P<year>[0-9]{2})"
    r"-?(?P<serial>[0-9]{3})(?P<check>[0-9])$"
)

MAX_AGE = 120


def resolve_century(century_digit: int, year: int) -> str:
    """
    Century of a CPR number per the CPR register table.

    - 7th digit 0-3: 1900-1999
    - 7th digit 4 or 9: 2000-2036 for year 00-36, else 1937-1999
    - 7th digit 5-8: 2000-2057 for year 00-57, else 1858-1899

    Rows 5-8 are sometimes quoted the other way round; that reading would
    place every 58-99 birth year in the future.
    """
    if century_digit <= 3:
        return "19"
    if century_digit in (4, 9):
        return "20" if year <= 36 else "19"
    return "20" if year <= 57 else "18"


def parse_cpr(text: str, now: datetime) -> ParsedNumber:
    """
    Parse a Danish CPR number.

    The canonical separator is '-', which only the short format shows.
    """
    match = CPR_PATTERN.match(text)
    if not match:
        raise MalformedInputError(
            "Does not match CPR number format", scheme=Scheme.DANISH_CPR_NUMBER
        )

    year = match.group("year")
    serial = match.group("serial")
    return ParsedNumber(
        ParsedFields(
            century=resolve_century(int(serial[0]), int(year)),
            year=year,
            month=match.group("month"),
            day=match.group("day"),
            separator="-",
            serial=serial,
            check=match.group("check"),
        )
    )


def validate_cpr(fields: ParsedFields, now: datetime) -> None:
    """
    Check the birth date exists and is plausible.

    The birth year may lie at most one year ahead and the implied age may
    not exceed 120.
    """
    year, month, day = int(fields.full_year), int(fields.month), int(fields.day)
    if not is_valid_date(year, month, day):
        raise DateInvalidError(
            "Invalid birth date for CPR number", scheme=Scheme.DANISH_CPR_NUMBER
        )
    if year > now.year + 1:
        raise DateInvalidError(
            "CPR birth year lies in the future", scheme=Scheme.DANISH_CPR_NUMBER
        )
    if age_on(date(year, month, day), now.date()) > MAX_AGE:
        raise DateInvalidError(
            f"CPR number implies an age above {MAX_AGE}",
            scheme=Scheme.DANISH_CPR_NUMBER,
        )
