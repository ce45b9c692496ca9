"""
Swedish personnummer (personal identity number) parsing and validation.

Format: YYMMDD-NNNC or YYYYMMDDNNNC
- First 6/8 digits: birth date
- NNN: birth number (last digit odd for male, even for female)
- C: Luhn checksum over YYMMDDNNN

Separator: '-' for people under 100, '+' from the year they turn 100.
Coordination numbers (samordningsnummer) add 60 to the day.

Interim numbers and T-numbers replace the first birth number digit with a
letter, which counts as 1 in the checksum.
"""

import re
from datetime import datetime
from typing import NamedTuple, Optional

from nordid.checksums import luhn_checksum
from nordid.dates import (
    has_short_form,
    infer_century,
    infer_separator,
    is_valid_coordination_date,
    is_valid_date,
)
from nordid.errors import ChecksumMismatchError, DateInvalidError, MalformedInputError
from nordid.models import ParsedFields, ParsedNumber, Scheme

PERSONNUMMER_PATTERN = re.compile(
    r"^(?P<century>[0-9]{2})?(?P<year>[0-9]{2})(?P<month>[0-9]{2})(?P<day>[0-9]{2})"
    r"(?P<sep>[-+ ]?)(?P<serial>(?!000)[0-9]{3})(?P<check>[0-9])$"
)

SEPARATORS = re.compile(r"[-+ ]")

# Letters that may stand in for the first birth number digit
RESERVE_LETTERS = frozenset("TRSUWXJKLMND")
INTERIM_LETTERS = frozenset("TRSUWXJKLMN")


class ReserveSplit(NamedTuple):
    """Input split into its text and an optional reserve letter."""

    text: str
    letter: Optional[str] = None
    position: Optional[int] = None

    def substitute(self, digit: str) -> str:
        """Copy of the text with the letter replaced by digit."""
        if self.letter is None:
            return self.text
        return self.text[: self.position] + digit + self.text[self.position + 1 :]


def split_reserve_letter(text: str) -> ReserveSplit:
    """
    Locate a reserve letter in a personnummer-shaped string.

    The letter must be the first character of the birth number, i.e. the
    7th character of the 10-digit form or the 9th of the 12-digit form.

    Raises:
        MalformedInputError: more than one letter, an unknown letter, or a
            letter in any other position
    """
    letters = [(i, ch) for i, ch in enumerate(text) if ch.isascii() and ch.isalpha()]
    if not letters:
        return ReserveSplit(text)
    if len(letters) > 1:
        raise MalformedInputError("More than one letter in identification number")

    position, letter = letters[0]
    if letter not in RESERVE_LETTERS:
        raise MalformedInputError(f"Letter {letter!r} is not a reserve letter")

    compact = SEPARATORS.sub("", text)
    compact_position = position - len(SEPARATORS.findall(text[:position]))
    if len(compact) not in (10, 12) or compact_position != len(compact) - 4:
        raise MalformedInputError("Reserve letter in a disallowed position")

    return ReserveSplit(text, letter, position)


def match_personnummer(text: str, now: datetime) -> ParsedFields:
    """
    Split a digit-only personnummer into fields.

    A missing century is inferred from the separator. When the century is
    present the separator is inferred from the age instead, so both forms
    of the same number give equal fields.

    Raises:
        MalformedInputError: if the text does not have personnummer shape
    """
    match = PERSONNUMMER_PATTERN.match(text)
    if not match:
        raise MalformedInputError(
            "Does not match personnummer format",
            scheme=Scheme.PERSONAL_IDENTITY_NUMBER,
        )

    century = match.group("century")
    year = match.group("year")
    if century is None:
        separator = "+" if match.group("sep") == "+" else "-"
        century = infer_century(year, separator, now)
    else:
        separator = infer_separator(int(century + year), now)

    return ParsedFields(
        century=century,
        year=year,
        month=match.group("month"),
        day=match.group("day"),
        separator=separator,
        serial=match.group("serial"),
        check=match.group("check"),
    )


def verify_luhn(fields: ParsedFields, scheme: Scheme) -> None:
    """Check the Luhn digit over YYMMDDNNN."""
    expected = luhn_checksum(fields.year + fields.month + fields.day + fields.serial)
    if expected != int(fields.check):
        raise ChecksumMismatchError(f"Invalid checksum for {scheme.value}", scheme=scheme)


def verify_birth_date(
    fields: ParsedFields, scheme: Scheme, now: datetime, allow_coordination: bool = False
) -> None:
    """
    Check the birth date as given, or shifted by 60 days when allowed.

    The birth year must also have a short form, so that both forms of the
    number parse to the same fields.
    """
    year, month, day = int(fields.full_year), int(fields.month), int(fields.day)
    if not has_short_form(year, now):
        raise DateInvalidError(
            f"Birth year {year} out of range for {scheme.value}", scheme=scheme
        )
    if is_valid_date(year, month, day):
        return
    if allow_coordination and is_valid_coordination_date(year, month, day):
        return
    raise DateInvalidError(f"Invalid birth date for {scheme.value}", scheme=scheme)


def parse_personnummer(text: str, now: datetime) -> ParsedNumber:
    """Parse a plain personal identity or coordination number."""
    split = split_reserve_letter(text)
    if split.letter is not None:
        raise MalformedInputError(
            "Personal identity numbers contain no letters",
            scheme=Scheme.PERSONAL_IDENTITY_NUMBER,
        )
    return ParsedNumber(match_personnummer(text, now))


def validate_personnummer(fields: ParsedFields, now: datetime) -> None:
    """
    Validate a personal identity or coordination number.

    Whether coordination numbers are acceptable is an options question,
    answered by the caller after validation.
    """
    verify_luhn(fields, Scheme.PERSONAL_IDENTITY_NUMBER)
    verify_birth_date(
        fields, Scheme.PERSONAL_IDENTITY_NUMBER, now, allow_coordination=True
    )


def parse_interim_number(text: str, now: datetime) -> ParsedNumber:
    """Parse an interim number, e.g. 900101-T015."""
    split = split_reserve_letter(text)
    if split.letter is None or split.letter not in INTERIM_LETTERS:
        raise MalformedInputError(
            "Interim numbers need an interim letter", scheme=Scheme.INTERIM_NUMBER
        )
    return ParsedNumber(match_personnummer(split.substitute("1"), now), split.letter)


def validate_interim_number(fields: ParsedFields, now: datetime) -> None:
    verify_luhn(fields, Scheme.INTERIM_NUMBER)
    verify_birth_date(
        fields, Scheme.INTERIM_NUMBER, now, allow_coordination=True
    )


def parse_t_number(text: str, now: datetime) -> ParsedNumber:
    """Parse a T-number: any reserve letter, counted as 1."""
    split = split_reserve_letter(text)
    if split.letter is None:
        raise MalformedInputError("T-numbers need a reserve letter", scheme=Scheme.T_NUMBER)
    return ParsedNumber(match_personnummer(split.substitute("1"), now), split.letter)


def validate_t_number(fields: ParsedFields, now: datetime) -> None:
    verify_luhn(fields, Scheme.T_NUMBER)
    verify_birth_date(fields, Scheme.T_NUMBER, now)
