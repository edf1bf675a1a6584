"""
The default password policy.

Enforces a minimum length of 10 characters, at least one upper case, one
lower case, one digit and one special character.
"""

from pwpolicy.core.models import (
    digit_rule,
    length_rule,
    lower_case_rule,
    special_character_rule,
    upper_case_rule,
)
from pwpolicy.core.validators import DEFAULT_MIN_LENGTH

from .password_policy import PasswordPolicy


def default_password_policy() -> PasswordPolicy:
    return PasswordPolicy([
        length_rule(DEFAULT_MIN_LENGTH),
        upper_case_rule(),
        lower_case_rule(),
        digit_rule(),
        special_character_rule(),
    ])
