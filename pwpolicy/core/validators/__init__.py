"""
Password rule checks.

Provides the length and character class predicates and the registry that
maps rule types to them.
"""

from .base_validator import RuleCheck, get_int_parameter
from .character_validator import (
    check_digit,
    check_lower_case,
    check_special_character,
    check_upper_case,
)
from .length_validator import DEFAULT_MIN_LENGTH, check_length

CHECK_REGISTRY: dict[str, RuleCheck] = {
    "length": check_length,
    "upper_case": check_upper_case,
    "lower_case": check_lower_case,
    "digit": check_digit,
    "special_character": check_special_character,
}

PLACEHOLDERS: dict[str, str] = {
    "length": "PASSWORD_POLICY_LENGTH",
    "upper_case": "PASSWORD_POLICY_UPPER_CASE",
    "lower_case": "PASSWORD_POLICY_LOWER_CASE",
    "digit": "PASSWORD_POLICY_DIGIT",
    "special_character": "PASSWORD_POLICY_SPECIAL_CHARACTER",
}

# Name of the single integer parameter each rule type accepts
PARAMETER_NAMES: dict[str, str] = {
    "length": "min_length",
    "upper_case": "min_count",
    "lower_case": "min_count",
    "digit": "min_count",
    "special_character": "min_count",
}


def get_check(rule_type: str) -> RuleCheck:
    """
    Look up the check function for a rule type.

    Raises:
        ValueError: If the rule type is not registered
    """
    check = CHECK_REGISTRY.get(rule_type)
    if check is None:
        raise ValueError(f"Unknown rule type: {rule_type}")
    return check


__all__ = [
    "CHECK_REGISTRY",
    "DEFAULT_MIN_LENGTH",
    "PARAMETER_NAMES",
    "PLACEHOLDERS",
    "RuleCheck",
    "check_digit",
    "check_length",
    "check_lower_case",
    "check_special_character",
    "check_upper_case",
    "get_check",
    "get_int_parameter",
]
