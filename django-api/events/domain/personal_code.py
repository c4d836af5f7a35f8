"""Estonian personal identification code (isikukood) checksum."""

FIRST_PASS_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_PASS_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)

PERSONAL_CODE_LENGTH = 11
_ASCII_DIGITS = frozenset("0123456789")


def _weighted_remainder(digits: list[int], weights: tuple[int, ...]) -> int:
    return sum(d * w for d, w in zip(digits, weights)) % 11


def is_valid_personal_code(value: str | None) -> bool:
    """Return True if value is an 11-digit code with a matching check digit.

    The check digit is the weighted sum of the first ten digits modulo 11.
    A remainder of 10 triggers a second pass with shifted weights; a second
    remainder of 10 never matches a single digit, so the code is invalid.
    """
    if not value or len(value) != PERSONAL_CODE_LENGTH:
        return False
    if not set(value) <= _ASCII_DIGITS:
        return False

    digits = [int(ch) for ch in value]
    check = _weighted_remainder(digits[:10], FIRST_PASS_WEIGHTS)
    if check == 10:
        check = _weighted_remainder(digits[:10], SECOND_PASS_WEIGHTS)
    return check == digits[10]
