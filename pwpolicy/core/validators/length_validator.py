"""
Length check - password must have at least ``min_length`` characters.
"""

from typing import Mapping

from .base_validator import get_int_parameter

DEFAULT_MIN_LENGTH = 10


def check_length(password: str, parameters: Mapping[str, int]) -> bool:
    min_length = get_int_parameter(parameters, "min_length", DEFAULT_MIN_LENGTH)
    return len(password) >= min_length
