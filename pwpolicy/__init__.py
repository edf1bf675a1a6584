"""
pwpolicy - validate passwords against composable policy rules.
"""

from pwpolicy.core.models import PasswordPolicyResult, PasswordPolicyRule
from pwpolicy.core.rules import PasswordPolicy, PolicyBuilder, PolicyConfigLoader, default_password_policy
from pwpolicy.service import PasswordPolicyConfiguration, PasswordPolicyService
from pwpolicy.utils.validation import NullValueError

__version__ = "0.1.0"

__all__ = [
    "NullValueError",
    "PasswordPolicy",
    "PasswordPolicyConfiguration",
    "PasswordPolicyResult",
    "PasswordPolicyRule",
    "PasswordPolicyService",
    "PolicyBuilder",
    "PolicyConfigLoader",
    "default_password_policy",
]
