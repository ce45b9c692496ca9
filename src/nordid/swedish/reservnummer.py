"""
Swedish regional reserve numbers (reservnummer) used in healthcare.

- VGR (Västra Götalandsregionen): YYYYMMDD-LNNC where L is K (female),
  M (male) or X (unknown). The letter is worth 5, 7 or 8 in the Luhn
  checksum, and the two digits after it must agree with it: even for K,
  odd for M, 80-89 for X.
- SLL (Stockholms läns landsting): 99CCYYNNNNNC. No birth date is encoded;
  the Luhn checksum runs over CCYYNNNNN.
- RVB (Region Västerbotten): YYYYMMDD-LNNC with no checksum. The digit
  after the letter is 6 or 9 for people born before 2000, otherwise 2.
"""

import re
from datetime import datetime

from nordid.checksums import luhn_checksum
from nordid.errors import ChecksumMismatchError, DateInvalidError, MalformedInputError
from nordid.models import ParsedFields, ParsedNumber, Scheme
from nordid.swedish.personnummer import (
    match_personnummer,
    split_reserve_letter,
    verify_birth_date,
    verify_luhn,
)

VGR_LETTER_DIGITS = {"K": "5", "M": "7", "X": "8"}
VGR_UNKNOWN_SEX_RANGE = range(80, 90)

SLL_PATTERN = re.compile(
    r"^99(?P<century>[0-9]{2})(?P<year>[0-9]{2})"
    r"(?P<serial>[0-9]{5})(?P<check>[0-9])$"
)
SLL_EARLIEST_YEAR = 1870

RVB_DIGITS_BEFORE_2000 = ("6", "9")
RVB_DIGITS_FROM_2000 = ("2",)


def vgr_letter_for(serial_digits: int) -> str:
    """Letter a VGR reserve number must carry for the digits after it."""
    if serial_digits in VGR_UNKNOWN_SEX_RANGE:
        return "X"
    return "K" if serial_digits % 2 == 0 else "M"


def parse_vgr_reserve_number(text: str, now: datetime) -> ParsedNumber:
    """Parse a VGR reserve number, e.g. 20121212-M714."""
    split = split_reserve_letter(text)
    if split.letter not in VGR_LETTER_DIGITS:
        raise MalformedInputError(
            "VGR reserve numbers need K, M or X", scheme=Scheme.VGR_RESERVE_NUMBER
        )
    fields = match_personnummer(split.substitute(VGR_LETTER_DIGITS[split.letter]), now)

    expected = vgr_letter_for(int(fields.serial[1:3]))
    if split.letter != expected:
        raise MalformedInputError(
            f"VGR letter {split.letter} does not match birth number, expected {expected}",
            scheme=Scheme.VGR_RESERVE_NUMBER,
        )
    return ParsedNumber(fields, split.letter)


def validate_vgr_reserve_number(fields: ParsedFields, now: datetime) -> None:
    verify_luhn(fields, Scheme.VGR_RESERVE_NUMBER)
    verify_birth_date(fields, Scheme.VGR_RESERVE_NUMBER, now)


def parse_sll_reserve_number(text: str, now: datetime) -> ParsedNumber:
    """
    Parse an SLL reserve number.

    Month and day are fixed to 01 since the number encodes no birth date.
    """
    match = SLL_PATTERN.match(text)
    if not match:
        raise MalformedInputError(
            "Does not match SLL reserve number format",
            scheme=Scheme.SLL_RESERVE_NUMBER,
        )
    return ParsedNumber(
        ParsedFields(
            century=match.group("century"),
            year=match.group("year"),
            month="01",
            day="01",
            separator="",
            serial=match.group("serial"),
            check=match.group("check"),
        )
    )


def validate_sll_reserve_number(fields: ParsedFields, now: datetime) -> None:
    """Check the Luhn digit over CCYYNNNNN and the plausible year range."""
    expected = luhn_checksum(fields.century + fields.year + fields.serial)
    if expected != int(fields.check):
        raise ChecksumMismatchError(
            "Invalid checksum for SLL reserve number", scheme=Scheme.SLL_RESERVE_NUMBER
        )

    full_year = int(fields.full_year)
    if not SLL_EARLIEST_YEAR < full_year <= now.year + 1:
        raise DateInvalidError(
            f"SLL reserve number year {full_year} out of range",
            scheme=Scheme.SLL_RESERVE_NUMBER,
        )


def parse_rvb_reserve_number(text: str, now: datetime) -> ParsedNumber:
    """Parse an RVB reserve number, e.g. 20100101-T205."""
    split = split_reserve_letter(text)
    if split.letter is None:
        raise MalformedInputError(
            "RVB reserve numbers need a reserve letter", scheme=Scheme.RVB_RESERVE_NUMBER
        )
    return ParsedNumber(match_personnummer(split.substitute("1"), now), split.letter)


def validate_rvb_reserve_number(fields: ParsedFields, now: datetime) -> None:
    """Check the birth date and the digit after the letter. No checksum."""
    verify_birth_date(fields, Scheme.RVB_RESERVE_NUMBER, now)

    if int(fields.full_year) < 2000:
        allowed = RVB_DIGITS_BEFORE_2000
    else:
        allowed = RVB_DIGITS_FROM_2000
    if fields.serial[1] not in allowed:
        raise MalformedInputError(
            f"RVB reserve number needs {' or '.join(allowed)} after the letter",
            scheme=Scheme.RVB_RESERVE_NUMBER,
        )
