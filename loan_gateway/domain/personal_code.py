"""Estonian personal ID code (isikukood) format and checksum validation"""

from loan_gateway.domain.exceptions import InvalidPersonalCodeError
from loan_gateway.domain.identity import get_birth_date

PERSONAL_CODE_LENGTH = 11

_FIRST_PASS_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
_SECOND_PASS_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


def calculate_check_digit(digits: str) -> int:
    """
    Compute the check digit from the first 10 digits of a personal code.

    Weighted sum mod 11 with the first weight set; a remainder of 10 is retried
    with the second set, and a second 10 yields 0.
    """
    for weights in (_FIRST_PASS_WEIGHTS, _SECOND_PASS_WEIGHTS):
        remainder = sum(int(d) * w for d, w in zip(digits[:10], weights)) % 11
        if remainder != 10:
            return remainder
    return 0


def is_valid_personal_code(personal_code) -> bool:
    """Check length, digits, encoded birth date and check digit"""
    if not isinstance(personal_code, str):
        return False
    if len(personal_code) != PERSONAL_CODE_LENGTH or not (personal_code.isascii() and personal_code.isdigit()):
        return False

    try:
        get_birth_date(personal_code)
    except InvalidPersonalCodeError:
        return False

    return calculate_check_digit(personal_code) == int(personal_code[-1])


def mask_personal_code(personal_code) -> str:
    """Hide everything except the segment digits, for logs"""
    if not isinstance(personal_code, str) or len(personal_code) <= 4:
        return "****"
    return "*" * (len(personal_code) - 4) + personal_code[-4:]
