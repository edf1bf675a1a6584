"""
Base definitions shared by all password rule checks.

A check is a plain function taking the candidate password and the rule
parameters and returning whether the rule is fulfilled.
"""

import re
from typing import Callable, Mapping

RuleCheck = Callable[[str, Mapping[str, int]], bool]


def count_matches(pattern: re.Pattern, password: str) -> int:
    """Count the characters of ``password`` matched by a single-character pattern."""
    return len(pattern.findall(password))


def get_int_parameter(parameters: Mapping[str, int], name: str, default: int) -> int:
    """
    Read a non-negative integer parameter.

    Args:
        parameters: Rule parameters
        name: Parameter name
        default: Value used when the parameter is absent

    Returns:
        The parameter value

    Raises:
        ValueError: If the value is not a non-negative integer
    """
    value = parameters.get(name, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Parameter '{name}' must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Parameter '{name}' must not be negative, got {value}")
    return value
