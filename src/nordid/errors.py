"""
Errors raised while parsing Nordic identification numbers.

Every error is a ValueError so callers can treat a bad number like any
other bad value. TypeMismatchError is additionally a TypeError since it
signals a contract violation rather than a data problem.
"""

from typing import Optional

from nordid.models import Scheme


class IdentityNumberError(ValueError):
    """Base exception for identification number errors."""

    # Higher rank wins when several schemes fail for the same input
    rank = 0

    def __init__(
        self,
        message: str = "Invalid identification number",
        scheme: Optional[Scheme] = None,
        code: int = 400,
    ):
        self.message = message
        self.scheme = scheme
        self.code = code
        super().__init__(message)


class MalformedInputError(IdentityNumberError):
    """Input does not match the grammar of the scheme."""

    pass


class ChecksumMismatchError(IdentityNumberError):
    """Grammar matched but the check digit(s) disagree."""

    rank = 1


class DateInvalidError(IdentityNumberError):
    """The encoded birth date does not exist or is implausible."""

    rank = 1


class SchemeDisabledError(IdentityNumberError):
    """The number is valid under a scheme that the options turn off."""

    rank = 2


class TypeMismatchError(IdentityNumberError, TypeError):
    """Input is neither a string nor an integer."""

    pass
