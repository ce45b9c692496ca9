"""
Format classification: decide which schemes to try for a raw string.

Decision order, first match wins:
1. Danish CPR, when the input has CPR shape, reads as a plausible Danish
   birth date and does not read as a valid Swedish number. A Swedish
   reading with a real birth date and a bad checksum still wins when it
   gives the younger person
2. Norwegian birth number, for exactly 11 digits
3. SLL reserve number, for 12 characters starting with 99
4. The Swedish personnummer family, tried in order: plain number,
   interim number, T-number, VGR, RVB

The Danish/Swedish decision in step 1 is best effort. A 10-digit string
can be both a valid personnummer and a plausible CPR number; the Swedish
reading wins because it carries a checksum. A mistyped personnummer is
kept Swedish when its age is more plausible than the CPR reading.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from nordid.danish.cpr import CPR_PATTERN, parse_cpr, validate_cpr
from nordid.dates import age_on, has_short_form, is_valid_date
from nordid.errors import IdentityNumberError
from nordid.models import ParsedFields, ParsedNumber, Scheme
from nordid.norwegian.fodselsnummer import (
    FODSELSNUMMER_PATTERN,
    parse_fodselsnummer,
    validate_fodselsnummer,
)
from nordid.options import Options
from nordid.swedish.personnummer import (
    parse_interim_number,
    parse_personnummer,
    parse_t_number,
    split_reserve_letter,
    validate_interim_number,
    validate_personnummer,
    validate_t_number,
)
from nordid.swedish.reservnummer import (
    parse_rvb_reserve_number,
    parse_sll_reserve_number,
    parse_vgr_reserve_number,
    validate_rvb_reserve_number,
    validate_sll_reserve_number,
    validate_vgr_reserve_number,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemeHandler:
    """Parser and validator pair for one scheme."""

    scheme: Scheme
    parse: Callable[[str, datetime], ParsedNumber]
    validate: Callable[[ParsedFields, datetime], None]

    def run(self, text: str, now: datetime) -> ParsedNumber:
        """Parse and validate, raising the first failure."""
        parsed = self.parse(text, now)
        self.validate(parsed.fields, now)
        return parsed


PERSONAL_IDENTITY_NUMBER = SchemeHandler(
    Scheme.PERSONAL_IDENTITY_NUMBER, parse_personnummer, validate_personnummer
)
INTERIM_NUMBER = SchemeHandler(
    Scheme.INTERIM_NUMBER, parse_interim_number, validate_interim_number
)
T_NUMBER = SchemeHandler(Scheme.T_NUMBER, parse_t_number, validate_t_number)
VGR_RESERVE_NUMBER = SchemeHandler(
    Scheme.VGR_RESERVE_NUMBER, parse_vgr_reserve_number, validate_vgr_reserve_number
)
SLL_RESERVE_NUMBER = SchemeHandler(
    Scheme.SLL_RESERVE_NUMBER, parse_sll_reserve_number, validate_sll_reserve_number
)
RVB_RESERVE_NUMBER = SchemeHandler(
    Scheme.RVB_RESERVE_NUMBER, parse_rvb_reserve_number, validate_rvb_reserve_number
)
NORWEGIAN_BIRTH_NUMBER = SchemeHandler(
    Scheme.NORWEGIAN_BIRTH_NUMBER, parse_fodselsnummer, validate_fodselsnummer
)
DANISH_CPR_NUMBER = SchemeHandler(Scheme.DANISH_CPR_NUMBER, parse_cpr, validate_cpr)

PERSONNUMMER_FAMILY = (
    PERSONAL_IDENTITY_NUMBER,
    INTERIM_NUMBER,
    T_NUMBER,
    VGR_RESERVE_NUMBER,
    RVB_RESERVE_NUMBER,
)


def reads_as_personnummer(text: str, now: datetime, options: Options) -> bool:
    """Check whether text is an acceptable plain personnummer."""
    try:
        parsed = PERSONAL_IDENTITY_NUMBER.run(text, now)
    except IdentityNumberError:
        return False
    coordination = int(parsed.fields.day) > 60
    return options.allows(Scheme.PERSONAL_IDENTITY_NUMBER, coordination=coordination)


def reads_as_cpr(text: str, now: datetime) -> bool:
    """Check whether text is a date-plausible CPR number."""
    if not CPR_PATTERN.match(text):
        return False
    try:
        DANISH_CPR_NUMBER.run(text, now)
    except IdentityNumberError:
        return False
    return True


def personnummer_birth_date(text: str, now: datetime) -> Optional[date]:
    """
    Birth date of the plain personnummer reading, checksum ignored.

    None unless the reading has a real, direct birth date.
    """
    try:
        fields = parse_personnummer(text, now).fields
    except IdentityNumberError:
        return None
    year, month, day = int(fields.full_year), int(fields.month), int(fields.day)
    if not (is_valid_date(year, month, day) and has_short_form(year, now)):
        return None
    return date(year, month, day)


def prefers_cpr(text: str, now: datetime, options: Options) -> bool:
    """
    Decide between the Danish and Swedish readings of a CPR-shaped string.

    A valid personnummer always wins. A personnummer reading that only
    fails its checksum is compared by age with the CPR reading, and the
    younger person wins, CPR on a tie.
    """
    if reads_as_personnummer(text, now, options):
        return False
    swedish_birth = personnummer_birth_date(text, now)
    if swedish_birth is None:
        return True
    fields = parse_cpr(text, now).fields
    danish_birth = date(int(fields.full_year), int(fields.month), int(fields.day))
    today = now.date()
    danish_age, swedish_age = age_on(danish_birth, today), age_on(swedish_birth, today)
    logger.debug(f"CPR reading aged {danish_age}, personnummer reading aged {swedish_age}")
    return danish_age <= swedish_age


def classify(text: str, options: Options, now: datetime) -> list[SchemeHandler]:
    """
    Candidate schemes for text, highest confidence first.

    Raises:
        MalformedInputError: when a reserve letter sits in a position no
            scheme allows; no scheme is tried in that case
    """
    if (
        options.allow_danish_cpr_number
        and reads_as_cpr(text, now)
        and prefers_cpr(text, now, options)
    ):
        logger.debug("Classified as Danish CPR number")
        return [DANISH_CPR_NUMBER]

    if options.allow_norwegian_birth_number and FODSELSNUMMER_PATTERN.match(text):
        logger.debug("Classified as Norwegian birth number")
        return [NORWEGIAN_BIRTH_NUMBER]

    if options.allow_sll_reserve_number and len(text) == 12 and text.startswith("99"):
        logger.debug("Classified as SLL reserve number")
        return [SLL_RESERVE_NUMBER]

    split_reserve_letter(text)
    logger.debug("Classified as Swedish personnummer family")
    return list(PERSONNUMMER_FAMILY)
