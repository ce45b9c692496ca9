"""
Unit tests for format classification.
"""

from datetime import date, datetime

import pytest

from nordid import ChecksumMismatchError, MalformedInputError, Options, Scheme, parse
from nordid.clock import FixedClock
from nordid.classifier import (
    PERSONNUMMER_FAMILY,
    classify,
    personnummer_birth_date,
    prefers_cpr,
    reads_as_cpr,
)

NOW = datetime(2024, 6, 1)


def schemes(text, options=None):
    return [handler.scheme for handler in classify(text, options or Options(), NOW)]


class TestClassify:
    """Tests for candidate scheme selection."""

    def test_danish(self):
        """Test a CPR number that is not a valid personnummer."""
        assert schemes("010190-1234") == [Scheme.DANISH_CPR_NUMBER]

    def test_swedish_wins_over_danish(self):
        """Test a number valid as both: the checksummed reading wins."""
        assert reads_as_cpr("101010-1010", NOW)
        assert schemes("101010-1010")[0] is Scheme.PERSONAL_IDENTITY_NUMBER

    def test_implausible_danish_date(self):
        """Test that a day above 31 is never Danish."""
        assert schemes("640327-3813")[0] is Scheme.PERSONAL_IDENTITY_NUMBER

    def test_danish_disabled(self):
        """Test that disabled CPR numbers go to the Swedish family."""
        options = Options(allow_danish_cpr_number=False)
        assert schemes("010190-1234", options)[0] is Scheme.PERSONAL_IDENTITY_NUMBER

    def test_norwegian(self):
        """Test 11 digits."""
        assert schemes("03016213704") == [Scheme.NORWEGIAN_BIRTH_NUMBER]

    def test_sll(self):
        """Test 12 digits starting with 99."""
        assert schemes("992004920019") == [Scheme.SLL_RESERVE_NUMBER]

    def test_family_order(self):
        """Test the order of the Swedish family."""
        assert schemes("20121212M714") == [
            Scheme.PERSONAL_IDENTITY_NUMBER,
            Scheme.INTERIM_NUMBER,
            Scheme.T_NUMBER,
            Scheme.VGR_RESERVE_NUMBER,
            Scheme.RVB_RESERVE_NUMBER,
        ]
        assert len(PERSONNUMMER_FAMILY) == 5

    def test_misplaced_letter(self):
        """Test that a misplaced letter stops classification."""
        with pytest.raises(MalformedInputError):
            classify("9001T1-0015", Options(), NOW)


class TestDanishOrSwedish:
    """Tests for the age comparison between CPR and personnummer readings."""

    def test_mistyped_personnummer_stays_swedish(self):
        """Test a bad check digit on a 2010 birth date, CPR reading from 1910."""
        assert reads_as_cpr("1010101011", NOW)
        assert personnummer_birth_date("1010101011", NOW) == date(2010, 10, 10)
        assert not prefers_cpr("1010101011", NOW, Options())
        assert schemes("1010101011")[0] is Scheme.PERSONAL_IDENTITY_NUMBER

    def test_mistyped_personnummer_reports_checksum(self):
        """Test that parse reports the failed check digit."""
        with pytest.raises(ChecksumMismatchError):
            parse("1010101011", clock=FixedClock(NOW))

    def test_younger_cpr_reading_wins(self):
        """Test a CPR number from 2020 whose Swedish reading is from 2001."""
        assert personnummer_birth_date("010120-4567", NOW) == date(2001, 1, 20)
        assert prefers_cpr("010120-4567", NOW, Options())

    def test_no_swedish_birth_date(self):
        """Test that a coordination-day reading does not count as a birth date."""
        assert personnummer_birth_date("010190-1234", NOW) is None
        assert prefers_cpr("010190-1234", NOW, Options())
