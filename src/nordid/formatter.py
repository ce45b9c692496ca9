"""
Rendering of classified numbers in their canonical formats.

Short format:
- Swedish: YYMMDD-NNNC (or + from age 100)
- Danish: DDMMYY-NNNC

Long format:
- Swedish: YYYYMMDDNNNC
- Danish: DDMMYYNNNC

Norwegian birth numbers (DDMMYYIIIKK) and SLL reserve numbers
(99CCYYNNNNNC) read the same in both formats.
"""

from typing import TYPE_CHECKING, Optional

from nordid.models import Scheme

if TYPE_CHECKING:
    from nordid.identity import IdentificationNumber


def restore_reserve_character(serial: str, reserve_character: Optional[str]) -> str:
    """Put a reserve letter back in the first birth number position."""
    if reserve_character is None:
        return serial
    return reserve_character + serial[1:]


def format_number(number: "IdentificationNumber", long_format: bool = False) -> str:
    """
    Format an identification number.

    Args:
        number: A parsed and validated number
        long_format: Long format instead of short

    Returns:
        The formatted number
    """
    fields = number.fields
    serial = restore_reserve_character(fields.serial, number.reserve_character)

    if number.scheme is Scheme.NORWEGIAN_BIRTH_NUMBER:
        return f"{fields.day}{fields.month}{fields.year}{serial}{fields.check}"

    if number.scheme is Scheme.SLL_RESERVE_NUMBER:
        return f"99{fields.century}{fields.year}{serial}{fields.check}"

    if number.scheme is Scheme.DANISH_CPR_NUMBER:
        separator = "" if long_format else fields.separator
        return f"{fields.day}{fields.month}{fields.year}{separator}{serial}{fields.check}"

    if long_format:
        return f"{fields.full_year}{fields.month}{fields.day}{serial}{fields.check}"
    return f"{fields.year}{fields.month}{fields.day}{fields.separator}{serial}{fields.check}"
