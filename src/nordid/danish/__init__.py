"""Danish CPR numbers."""

from nordid.danish.cpr import parse_cpr, resolve_century, validate_cpr

__all__ = [
    "parse_cpr",
    "resolve_century",
    "validate_cpr",
]
