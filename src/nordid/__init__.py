"""
nordid - Nordic personal identification numbers

Parses, validates, classifies and formats:
- Swedish personal identity numbers, coordination numbers and interim numbers
- Swedish reserve numbers: T-numbers, VGR, SLL and RVB
- Norwegian birth numbers (fødselsnummer)
- Danish CPR numbers
"""

from nordid.clock import Clock, FixedClock, SystemClock
from nordid.errors import (
    ChecksumMismatchError,
    DateInvalidError,
    IdentityNumberError,
    MalformedInputError,
    SchemeDisabledError,
    TypeMismatchError,
)
from nordid.formatter import format_number
from nordid.identity import IdentificationNumber, age, is_valid, parse
from nordid.models import ParsedFields, Scheme, Sex
from nordid.options import Options

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "parse",
    "is_valid",
    "format_number",
    "age",
    "IdentificationNumber",
    "ParsedFields",
    "Scheme",
    "Sex",
    "Options",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
    # Errors
    "IdentityNumberError",
    "MalformedInputError",
    "ChecksumMismatchError",
    "DateInvalidError",
    "SchemeDisabledError",
    "TypeMismatchError",
]
