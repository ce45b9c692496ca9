"""
Unit tests for check digit algorithms.
"""

from nordid.checksums import (
    NORWEGIAN_FIRST_WEIGHTS,
    luhn_checksum,
    mod11_check_digit,
    norwegian_check_digits,
)


class TestLuhnChecksum:
    """Tests for Luhn checksum calculation."""

    def test_known_checksums(self):
        """Test with known valid checksums."""
        assert luhn_checksum("811218987") == 6
        assert luhn_checksum("640327381") == 3

    def test_all_zeros(self):
        """Test checksum of all zeros."""
        assert luhn_checksum("000000000") == 0

    def test_sum_already_multiple_of_ten(self):
        """Test that a sum divisible by 10 gives 0, not 10."""
        # 1*2 + 0 + 1*2 + 0 + 1*2 + 0 + 1*2 + 0 + 1*2 = 10
        assert luhn_checksum("101010101") == 0

    def test_sll_input(self):
        """Test checksum over century, year and serial."""
        assert luhn_checksum("200492001") == 9


class TestMod11:
    """Tests for the weighted modulus 11 check value."""

    def test_divisible_gives_zero(self):
        """Test that a remainder of 0 gives 0."""
        assert mod11_check_digit("0", (1,)) == 0

    def test_remainder_ten_gives_one(self):
        """Test that a remainder of 10 is a legitimate check digit 1."""
        assert mod11_check_digit("1", (10,)) == 1

    def test_remainder_one_gives_ten(self):
        """Test that a remainder of 1 yields the impossible value 10."""
        assert mod11_check_digit("1", (1,)) == 10

    def test_only_overlap_is_summed(self):
        """Test that extra weights are ignored."""
        assert mod11_check_digit("03", NORWEGIAN_FIRST_WEIGHTS) == mod11_check_digit(
            "03", (3, 7)
        )


class TestNorwegianCheckDigits:
    """Tests for the Norwegian two-digit check."""

    def test_known_number(self):
        """Test with a known valid birth number."""
        assert norwegian_check_digits("030162137") == "04"

    def test_twenty_first_century_number(self):
        """Test with a number born in 2005."""
        assert norwegian_check_digits("010105500") == "48"

    def test_no_valid_check_digit(self):
        """Test that a first check value of 10 yields None."""
        assert norwegian_check_digits("010101003") is None
