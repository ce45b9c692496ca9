"""
Core value types shared by every numbering scheme.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class Scheme(str, Enum):
    """Numbering schemes recognised by the parser."""

    PERSONAL_IDENTITY_NUMBER = "PERSONAL_IDENTITY_NUMBER"
    INTERIM_NUMBER = "INTERIM_NUMBER"
    T_NUMBER = "T_NUMBER"
    VGR_RESERVE_NUMBER = "VGR_RESERVE_NUMBER"
    SLL_RESERVE_NUMBER = "SLL_RESERVE_NUMBER"
    RVB_RESERVE_NUMBER = "RVB_RESERVE_NUMBER"
    NORWEGIAN_BIRTH_NUMBER = "NORWEGIAN_BIRTH_NUMBER"
    DANISH_CPR_NUMBER = "DANISH_CPR_NUMBER"


RESERVE_SCHEMES = frozenset(
    {
        Scheme.T_NUMBER,
        Scheme.VGR_RESERVE_NUMBER,
        Scheme.SLL_RESERVE_NUMBER,
        Scheme.RVB_RESERVE_NUMBER,
    }
)


class Sex(str, Enum):
    """Sex encoded in a number."""

    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "U"  # VGR reserve numbers marked X


@dataclass(frozen=True)
class ParsedFields:
    """
    Structured fields of a parsed number.

    All fields are zero-padded digit strings. The serial never holds a
    letter: reserve letters are swapped for digits before the fields are
    built and kept alongside in ParsedNumber.
    """

    century: str
    year: str
    month: str
    day: str
    separator: str  # '-', '+' or '' for schemes without one
    serial: str  # 3 digits (5 for SLL reserve numbers)
    check: str  # 1 digit (2 for Norwegian birth numbers)

    @property
    def full_year(self) -> str:
        return self.century + self.year

    @property
    def real_day(self) -> str:
        """Day of month with the coordination offset removed."""
        day = int(self.day)
        if day > 60:
            day -= 60
        return f"{day:02d}"


class ParsedNumber(NamedTuple):
    """Output of a scheme parser."""

    fields: ParsedFields
    reserve_character: Optional[str] = None
