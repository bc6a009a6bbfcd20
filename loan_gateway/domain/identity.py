"""Birth date, age and age eligibility derived from the personal code"""

from datetime import date

from loan_gateway.domain.exceptions import AgeRestrictionError, InvalidPersonalCodeError
from loan_gateway.domain.models import AgeRestriction
from loan_gateway.utils.date_utils import full_years_between

# First digit encodes century of birth (and gender)
CENTURY_BY_DIGIT = {
    1: 1800, 2: 1800,
    3: 1900, 4: 1900,
    5: 2000, 6: 2000,
    7: 2100, 8: 2100,
}


def get_birth_date(personal_code: str) -> date:
    """
    Decode the birth date from a personal code.

    Century comes from the first digit (1-2: 1800s, 3-4: 1900s, 5-6: 2000s,
    7-8: 2100s), followed by YYMMDD.

    Raises:
        InvalidPersonalCodeError: On an unmapped century digit or impossible date
    """
    century_digit = int(personal_code[0])
    century = CENTURY_BY_DIGIT.get(century_digit)
    if century is None:
        raise InvalidPersonalCodeError(
            f"Personal ID code has unsupported century digit {century_digit}"
        )

    year = century + int(personal_code[1:3])
    month = int(personal_code[3:5])
    day = int(personal_code[5:7])
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidPersonalCodeError(f"Personal ID code has an invalid birth date: {e}") from e


def get_customer_age(personal_code: str, today: date) -> int:
    return full_years_between(get_birth_date(personal_code), today)


def verify_age(
    personal_code: str,
    loan_period: int,
    age_restriction: AgeRestriction,
    today: date,
) -> None:
    """
    Reject applicants below the minimum age, or whose requested period would run
    past the life-expectancy horizon. Compared in months.

    Raises:
        AgeRestrictionError: If either age rule fails
    """
    age = get_customer_age(personal_code, today)

    if age < age_restriction.minimum_age:
        raise AgeRestrictionError(f"You must be above the age of {age_restriction.minimum_age}")

    if age * 12 > age_restriction.life_expectancy * 12 - loan_period:
        raise AgeRestrictionError(
            f"You are above the age of {age_restriction.life_expectancy - loan_period // 12}"
        )
