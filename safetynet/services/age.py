# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Age logic — pure computation, no side effects.
"""

from datetime import date
from typing import Callable

Clock = Callable[[], date]


def calculate_age(birthdate: date, today: date) -> int:
    """
    Whole years elapsed between birthdate and today.
    The age increments on the birthday itself; a birthdate after today is 0.
    """
    if birthdate > today:
        return 0
    had_birthday = (today.month, today.day) >= (birthdate.month, birthdate.day)
    return today.year - birthdate.year - (0 if had_birthday else 1)


def is_child(age: int, limit: int = 18) -> bool:
    return age <= limit
