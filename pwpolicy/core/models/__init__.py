"""
Password policy data models.

Provides pydantic models for rules and evaluation results.
"""

from .password_policy_result import PasswordPolicyResult
from .password_policy_rule import (
    PasswordPolicyRule,
    RuleType,
    build_rule,
    digit_rule,
    length_rule,
    lower_case_rule,
    special_character_rule,
    upper_case_rule,
)

__all__ = [
    "PasswordPolicyResult",
    "PasswordPolicyRule",
    "RuleType",
    "build_rule",
    "digit_rule",
    "length_rule",
    "lower_case_rule",
    "special_character_rule",
    "upper_case_rule",
]
