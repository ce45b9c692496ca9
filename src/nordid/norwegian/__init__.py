"""Norwegian birth numbers (fødselsnummer)."""

from nordid.norwegian.fodselsnummer import (
    parse_fodselsnummer,
    resolve_century,
    validate_fodselsnummer,
)

__all__ = [
    "parse_fodselsnummer",
    "resolve_century",
    "validate_fodselsnummer",
]
