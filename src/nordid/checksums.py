"""
Check digit algorithms.

- Luhn (modulus 10), used by Swedish numbers
- Weighted modulus 11, used twice by Norwegian birth numbers
"""

from typing import Optional, Sequence

NORWEGIAN_FIRST_WEIGHTS = (3, 7, 6, 1, 8, 9, 4, 5, 2)
NORWEGIAN_SECOND_WEIGHTS = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)


def luhn_checksum(digits: str) -> int:
    """
    Calculate Luhn checksum digit.

    The Luhn algorithm:
    1. Double every digit at an even index, counting from the left
    2. If doubling results in > 9, subtract 9
    3. Sum all digits
    4. Checksum is (10 - (sum % 10)) % 10
    """
    total = 0
    for i, digit in enumerate(digits):
        d = int(digit)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (10 - (total % 10)) % 10


def mod11_check_digit(digits: str, weights: Sequence[int]) -> int:
    """
    Calculate a weighted modulus 11 check value.

    Only the overlap of digits and weights is summed. The result is
    0 when the weighted sum is divisible by 11, otherwise 11 minus the
    remainder. A result of 10 means no single check digit exists.
    """
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % 11
    if remainder == 0:
        return 0
    return 11 - remainder


def norwegian_check_digits(digits: str) -> Optional[str]:
    """
    Compute the two check digits for the first nine digits of a
    Norwegian birth number.

    Returns None when either weighted sum yields 10.
    """
    first = mod11_check_digit(digits, NORWEGIAN_FIRST_WEIGHTS)
    if first == 10:
        return None
    second = mod11_check_digit(digits + str(first), NORWEGIAN_SECOND_WEIGHTS)
    if second == 10:
        return None
    return f"{first}{second}"
