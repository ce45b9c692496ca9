"""
Unit tests for Norwegian birth numbers.
"""

from datetime import date, datetime

import pytest

from nordid import (
    ChecksumMismatchError,
    DateInvalidError,
    MalformedInputError,
    Scheme,
    is_valid,
    parse,
)
from nordid.norwegian import parse_fodselsnummer, resolve_century


class TestResolveCentury:
    """Tests for the individual number century table."""

    @pytest.mark.parametrize(
        "individual,year,century",
        [
            (137, 62, "19"),
            (499, 10, "19"),
            (600, 60, "18"),
            (749, 54, "18"),
            (950, 45, "19"),
            (704, 3, "20"),
            (500, 39, "20"),
        ],
    )
    def test_table(self, individual, year, century):
        """Test each row of the table."""
        assert resolve_century(individual, year) == century

    @pytest.mark.parametrize("individual,year", [(800, 50), (600, 45), (750, 99)])
    def test_not_issued(self, individual, year):
        """Test combinations that map to no century."""
        assert resolve_century(individual, year) is None


class TestParse:
    """Tests for birth number parsing."""

    def test_valid(self, clock_2024):
        """Test a known valid birth number."""
        result = parse("03016213704", clock=clock_2024)
        assert result.scheme is Scheme.NORWEGIAN_BIRTH_NUMBER
        assert result.is_norwegian_birth_number()
        assert result.century == "19"
        assert result.get_date() == date(1962, 1, 3)
        assert result.get_age(clock_2024) == 62
        assert result.is_male()

    def test_twenty_first_century(self, clock_2024):
        """Test individual number 500 with year 05."""
        result = parse("01010550048", clock=clock_2024)
        assert result.full_year == "2005"
        assert result.is_female()

    def test_format(self, clock_2024):
        """Test that both formats are the plain 11 digits."""
        result = parse("03016213704", clock=clock_2024)
        assert result.format() == "03016213704"
        assert result.format(long_format=True) == "03016213704"
        assert parse(result.format(), clock=clock_2024) == result

    def test_wrong_check_digits(self, clock_2024):
        """Test a wrong second check digit."""
        with pytest.raises(ChecksumMismatchError):
            parse("03016213705", clock=clock_2024)

    def test_no_valid_check_digits(self, clock_2024):
        """Test that a check value of 10 rejects the number."""
        with pytest.raises(ChecksumMismatchError):
            parse("01010100300", clock=clock_2024)

    def test_century_not_issued(self):
        """Test an individual number outside the table."""
        with pytest.raises(DateInvalidError):
            parse_fodselsnummer("01015080000", datetime(2024, 6, 1))

    def test_wrong_shape(self):
        """Test input that is not 11 digits."""
        with pytest.raises(MalformedInputError):
            parse_fodselsnummer("0301621370", datetime(2024, 6, 1))

    def test_disabled(self, clock_2024):
        """Test that birth numbers can be turned off."""
        assert not is_valid(
            "03016213704", {"allowNorwegianBirthNumber": False}, clock=clock_2024
        )

    def test_non_ascii_digits_rejected(self):
        """Test fullwidth digits in an otherwise valid number."""
        with pytest.raises(MalformedInputError):
            parse_fodselsnummer("０３０１６２１３７０４", datetime(2024, 6, 1))
