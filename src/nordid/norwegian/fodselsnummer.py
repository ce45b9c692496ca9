"""
Norwegian fødselsnummer (birth number) parsing and validation.

Format: DDMMYYIIIKK (11 digits, no separator)
- DDMMYY: birth date
- III: individual number, which also encodes the century
- KK: two modulus 11 check digits

The last digit of the individual number is odd for men, even for women.
"""

import re
from datetime import datetime
from typing import Optional

from nordid.checksums import norwegian_check_digits
from nordid.dates import is_valid_date
from nordid.errors import ChecksumMismatchError, DateInvalidError, MalformedInputError
from nordid.models import ParsedFields, ParsedNumber, Scheme

FODSELSNUMMER_PATTERN = re.compile(
    r"^(?P<day>[0-9]{2})(?P<month>[0-9]{2})(?P<year>[0-9]{2})"
    r"(?P<serial>[0-9]{3})(?P<check>[0-9]{2})$"
)


def resolve_century(individual_number: int, year: int) -> Optional[str]:
    """
    Century of a birth number from its individual number and year.

    - 000-499: 1900-1999
    - 500-749 with year 54-99: 1854-1899
    - 900-999 with year 40-99: 1940-1999
    - 500-999 with year 00-39: 2000-2039

    Returns None for combinations that are not issued.
    """
    if individual_number <= 499:
        return "19"
    if individual_number <= 749 and year >= 54:
        return "18"
    if individual_number >= 900 and year >= 40:
        return "19"
    if year <= 39:
        return "20"
    return None


def parse_fodselsnummer(text: str, now: datetime) -> ParsedNumber:
    """
    Parse a Norwegian birth number.

    Raises:
        MalformedInputError: if the text is not 11 digits
        DateInvalidError: if the century cannot be determined
    """
    match = FODSELSNUMMER_PATTERN.match(text)
    if not match:
        raise MalformedInputError(
            "Does not match birth number format", scheme=Scheme.NORWEGIAN_BIRTH_NUMBER
        )

    century = resolve_century(int(match.group("serial")), int(match.group("year")))
    if century is None:
        raise DateInvalidError(
            "Individual number does not map to a century",
            scheme=Scheme.NORWEGIAN_BIRTH_NUMBER,
        )

    return ParsedNumber(
        ParsedFields(
            century=century,
            year=match.group("year"),
            month=match.group("month"),
            day=match.group("day"),
            separator="",
            serial=match.group("serial"),
            check=match.group("check"),
        )
    )


def validate_fodselsnummer(fields: ParsedFields, now: datetime) -> None:
    """Check both check digits, then the birth date."""
    expected = norwegian_check_digits(
        fields.day + fields.month + fields.year + fields.serial
    )
    if expected is None:
        raise ChecksumMismatchError(
            "No valid check digits exist for this birth number",
            scheme=Scheme.NORWEGIAN_BIRTH_NUMBER,
        )
    if expected != fields.check:
        raise ChecksumMismatchError(
            "Invalid check digits for birth number",
            scheme=Scheme.NORWEGIAN_BIRTH_NUMBER,
        )

    if not is_valid_date(int(fields.full_year), int(fields.month), int(fields.day)):
        raise DateInvalidError(
            "Invalid birth date for birth number", scheme=Scheme.NORWEGIAN_BIRTH_NUMBER
        )
