"""
Identification number values and the resolution pipeline.

parse() classifies the raw string, then tries each candidate scheme in
order. The first scheme that parses, validates and is enabled in the
options wins. If none does, the most informative failure is raised.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Union

from nordid.classifier import classify
from nordid.clock import Clock, SystemClock
from nordid.dates import age_on
from nordid.errors import (
    IdentityNumberError,
    MalformedInputError,
    SchemeDisabledError,
    TypeMismatchError,
)
from nordid.formatter import format_number
from nordid.models import RESERVE_SCHEMES, ParsedFields, Scheme, Sex
from nordid.options import Options

logger = logging.getLogger(__name__)

OptionsLike = Union[Options, Mapping[str, Any], None]

# Reported by get_age() for numbers without a birth date
NO_AGE = -1


@dataclass(frozen=True)
class IdentificationNumber:
    """
    A validated identification number.

    Only built by parse(). Sex, age and coordination status are derived
    from the fields on demand.
    """

    fields: ParsedFields
    scheme: Scheme
    reserve_character: Optional[str] = None

    @property
    def century(self) -> str:
        return self.fields.century

    @property
    def year(self) -> str:
        return self.fields.year

    @property
    def full_year(self) -> str:
        return self.fields.full_year

    @property
    def month(self) -> str:
        return self.fields.month

    @property
    def day(self) -> str:
        return self.fields.day

    @property
    def real_day(self) -> str:
        return self.fields.real_day

    @property
    def separator(self) -> str:
        return self.fields.separator

    @property
    def serial(self) -> str:
        return self.fields.serial

    @property
    def check(self) -> str:
        return self.fields.check

    @property
    def sex(self) -> Sex:
        """
        Sex encoded in the number.

        Danish CPR numbers use the last digit, all other schemes the last
        birth number digit: odd for male, even for female. VGR reserve
        numbers marked X have unknown sex.
        """
        if self.scheme is Scheme.VGR_RESERVE_NUMBER and self.reserve_character == "X":
            return Sex.UNKNOWN
        if self.scheme is Scheme.DANISH_CPR_NUMBER:
            digit = int(self.fields.check)
        else:
            digit = int(self.fields.serial[-1])
        return Sex.MALE if digit % 2 == 1 else Sex.FEMALE

    def is_male(self) -> bool:
        return self.sex is Sex.MALE

    def is_female(self) -> bool:
        return self.sex is Sex.FEMALE

    def is_coordination_number(self) -> bool:
        """Check for a samordningsnummer (day of month + 60)."""
        return (
            self.scheme in (Scheme.PERSONAL_IDENTITY_NUMBER, Scheme.INTERIM_NUMBER)
            and int(self.fields.day) > 60
        )

    def is_personal_identity_number(self) -> bool:
        return (
            self.scheme is Scheme.PERSONAL_IDENTITY_NUMBER
            and not self.is_coordination_number()
        )

    def is_interim_number(self) -> bool:
        return self.scheme is Scheme.INTERIM_NUMBER

    def is_reserve_number(self) -> bool:
        return self.scheme in RESERVE_SCHEMES

    def is_t_number(self) -> bool:
        return self.scheme is Scheme.T_NUMBER

    def is_vgr_reserve_number(self) -> bool:
        return self.scheme is Scheme.VGR_RESERVE_NUMBER

    def is_sll_reserve_number(self) -> bool:
        return self.scheme is Scheme.SLL_RESERVE_NUMBER

    def is_rvb_reserve_number(self) -> bool:
        return self.scheme is Scheme.RVB_RESERVE_NUMBER

    def is_norwegian_birth_number(self) -> bool:
        return self.scheme is Scheme.NORWEGIAN_BIRTH_NUMBER

    def is_danish_cpr_number(self) -> bool:
        return self.scheme is Scheme.DANISH_CPR_NUMBER

    def get_date(self) -> Optional[date]:
        """Birth date, or None for SLL reserve numbers which encode none."""
        if self.scheme is Scheme.SLL_RESERVE_NUMBER:
            return None
        return date(int(self.full_year), int(self.month), int(self.real_day))

    def get_age(self, clock: Optional[Clock] = None) -> int:
        """
        Age in whole years.

        Negative for birth dates in the future, NO_AGE for SLL reserve
        numbers.
        """
        birth_date = self.get_date()
        if birth_date is None:
            return NO_AGE
        today = (clock or SystemClock()).now().date()
        return age_on(birth_date, today)

    def format(self, long_format: bool = False) -> str:
        return format_number(self, long_format)

    def __str__(self) -> str:
        return self.format()


def coerce_input(raw: Any) -> str:
    """
    Turn caller input into a string.

    Integers are accepted since short personnummer are often stored as such.

    Raises:
        TypeMismatchError: for anything but str and int (bool included)
    """
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        raise TypeMismatchError(
            f"Identification number must be str or int, got {type(raw).__name__}"
        )
    return str(raw).strip()


def _more_informative(
    current: Optional[IdentityNumberError], new: IdentityNumberError
) -> IdentityNumberError:
    if current is None or new.rank >= current.rank:
        return new
    return current


def parse(
    raw: Any, options: OptionsLike = None, clock: Optional[Clock] = None
) -> IdentificationNumber:
    """
    Parse and validate an identification number.

    Args:
        raw: The number as a string (or int)
        options: Options, or a mapping of option names to booleans
        clock: Source of the current time, for century inference

    Returns:
        The classified IdentificationNumber

    Raises:
        IdentityNumberError: a subclass describing why no scheme accepted
            the input
    """
    text = coerce_input(raw)
    options = Options.coerce(options)
    now = (clock or SystemClock()).now()

    failure: Optional[IdentityNumberError] = None
    for handler in classify(text, options, now):
        try:
            parsed = handler.run(text, now)
        except IdentityNumberError as e:
            logger.debug(f"{handler.scheme.value} rejected: {e.message}")
            failure = _more_informative(failure, e)
            continue

        number = IdentificationNumber(
            fields=parsed.fields,
            scheme=handler.scheme,
            reserve_character=parsed.reserve_character,
        )
        coordination = number.is_coordination_number()
        if not options.allows(handler.scheme, coordination=coordination):
            kind = "coordination number" if coordination else handler.scheme.value
            logger.debug(f"{kind} disabled by options")
            failure = _more_informative(
                failure,
                SchemeDisabledError(f"{kind} not allowed", scheme=handler.scheme),
            )
            continue

        logger.debug(f"Accepted as {handler.scheme.value}")
        return number

    raise failure or MalformedInputError("Invalid identification number")


def is_valid(raw: Any, options: OptionsLike = None, clock: Optional[Clock] = None) -> bool:
    """Check whether raw parses. Never raises."""
    try:
        parse(raw, options, clock)
    except IdentityNumberError:
        return False
    return True


def age(number: IdentificationNumber, clock: Optional[Clock] = None) -> int:
    """Age of the person behind number, see IdentificationNumber.get_age."""
    return number.get_age(clock)
