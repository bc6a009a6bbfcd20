"""Date manipulation utilities"""

from datetime import date


def full_years_between(start: date, end: date) -> int:
    """
    Whole calendar years from start to end; an anniversary not yet reached does not count.

    A 29 February start only completes a year on 1 March in non-leap years.
    """
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
