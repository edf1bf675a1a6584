"""
Character class checks.

Classes are plain ASCII ranges so results do not depend on the locale:
anything outside A-Z, a-z and 0-9 (including non-ASCII letters and
whitespace) counts as a special character.
"""

import re
from typing import Mapping

from .base_validator import count_matches, get_int_parameter

UPPER_CASE_PATTERN = re.compile(r"[A-Z]")
LOWER_CASE_PATTERN = re.compile(r"[a-z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
SPECIAL_CHARACTER_PATTERN = re.compile(r"[^A-Za-z0-9]")

DEFAULT_MIN_COUNT = 1


def _has_at_least(pattern: re.Pattern, password: str, parameters: Mapping[str, int]) -> bool:
    min_count = get_int_parameter(parameters, "min_count", DEFAULT_MIN_COUNT)
    return count_matches(pattern, password) >= min_count


def check_upper_case(password: str, parameters: Mapping[str, int]) -> bool:
    return _has_at_least(UPPER_CASE_PATTERN, password, parameters)


def check_lower_case(password: str, parameters: Mapping[str, int]) -> bool:
    return _has_at_least(LOWER_CASE_PATTERN, password, parameters)


def check_digit(password: str, parameters: Mapping[str, int]) -> bool:
    return _has_at_least(DIGIT_PATTERN, password, parameters)


def check_special_character(password: str, parameters: Mapping[str, int]) -> bool:
    return _has_at_least(SPECIAL_CHARACTER_PATTERN, password, parameters)
