"""
Unit tests for Danish CPR numbers.
"""

from datetime import date, datetime

import pytest

from nordid import DateInvalidError, MalformedInputError, Scheme, is_valid, parse
from nordid.danish import parse_cpr, resolve_century, validate_cpr


class TestResolveCentury:
    """Tests for the 7th digit century table."""

    @pytest.mark.parametrize(
        "digit,year,century",
        [
            (0, 99, "19"),
            (3, 10, "19"),
            (4, 36, "20"),
            (4, 37, "19"),
            (9, 20, "20"),
            (9, 80, "19"),
            (5, 57, "20"),
            (8, 58, "18"),
        ],
    )
    def test_table(self, digit, year, century):
        """Test each row of the table."""
        assert resolve_century(digit, year) == century


class TestParse:
    """Tests for CPR parsing and validation."""

    def test_twentieth_century(self, clock_2024):
        """Test a CPR number from 1990."""
        result = parse("010190-1234", clock=clock_2024)
        assert result.scheme is Scheme.DANISH_CPR_NUMBER
        assert result.is_danish_cpr_number()
        assert result.century == "19"
        assert result.get_date() == date(1990, 1, 1)
        assert result.get_age(clock_2024) == 34

    def test_twenty_first_century(self, clock_2024):
        """Test digit 4 with year 20."""
        result = parse("010120-4567", clock=clock_2024)
        assert result.century == "20"
        assert result.full_year == "2020"

    def test_without_dash(self, clock_2024):
        """Test the dash is optional."""
        assert parse("0101901234", clock=clock_2024).is_danish_cpr_number()

    def test_sex_from_last_digit(self, clock_2024):
        """Test that the last digit gives the sex."""
        assert parse("010190-1234", clock=clock_2024).is_female()
        assert parse("010120-4567", clock=clock_2024).is_male()

    def test_format(self, clock_2024):
        """Test that only the short format shows the dash."""
        result = parse("0101901234", clock=clock_2024)
        assert result.format() == "010190-1234"
        assert result.format(long_format=True) == "0101901234"
        assert parse(result.format(), clock=clock_2024) == result

    def test_no_checksum(self, clock_2024):
        """Test that any last digit is accepted."""
        for check in range(10):
            assert is_valid(f"010190-123{check}", clock=clock_2024)

    def test_future_year(self):
        """Test a birth year more than a year ahead."""
        now = datetime(2024, 6, 1)
        fields = parse_cpr("010130-4000", now).fields
        with pytest.raises(DateInvalidError):
            validate_cpr(fields, now)

    def test_too_old(self):
        """Test an implied age above 120."""
        now = datetime(2024, 6, 1)
        fields = parse_cpr("010101-1234", now).fields
        with pytest.raises(DateInvalidError):
            validate_cpr(fields, now)

    def test_implausible_not_accepted(self, clock_2024):
        """Test that implausible CPR numbers are not valid."""
        assert not is_valid("010130-4000", clock=clock_2024)
        assert not is_valid("010101-1234", clock=clock_2024)

    def test_disabled(self, clock_2024):
        """Test that CPR numbers can be turned off."""
        assert not is_valid("010190-1234", {"allowDanishCprNumber": False}, clock=clock_2024)

    def test_non_ascii_digits_rejected(self, clock_2024):
        """Test Arabic-Indic and fullwidth digits."""
        for number in ("٠١٠١٩٠-١٢٣٤", "０１０１９０１２３４"):
            with pytest.raises(MalformedInputError):
                parse(number, clock=clock_2024)
