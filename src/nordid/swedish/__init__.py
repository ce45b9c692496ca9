"""Swedish personal identity, coordination, interim and reserve numbers."""

from nordid.swedish.personnummer import (
    INTERIM_LETTERS,
    RESERVE_LETTERS,
    ReserveSplit,
    match_personnummer,
    parse_interim_number,
    parse_personnummer,
    parse_t_number,
    split_reserve_letter,
    validate_interim_number,
    validate_personnummer,
    validate_t_number,
)
from nordid.swedish.reservnummer import (
    VGR_LETTER_DIGITS,
    parse_rvb_reserve_number,
    parse_sll_reserve_number,
    parse_vgr_reserve_number,
    validate_rvb_reserve_number,
    validate_sll_reserve_number,
    validate_vgr_reserve_number,
    vgr_letter_for,
)

__all__ = [
    # Personnummer
    "INTERIM_LETTERS",
    "RESERVE_LETTERS",
    "ReserveSplit",
    "match_personnummer",
    "parse_personnummer",
    "validate_personnummer",
    "parse_interim_number",
    "validate_interim_number",
    "parse_t_number",
    "validate_t_number",
    "split_reserve_letter",
    # Reservnummer
    "VGR_LETTER_DIGITS",
    "vgr_letter_for",
    "parse_vgr_reserve_number",
    "validate_vgr_reserve_number",
    "parse_sll_reserve_number",
    "validate_sll_reserve_number",
    "parse_rvb_reserve_number",
    "validate_rvb_reserve_number",
]
