"""
Password policy service and the configuration holder it reads from.
"""

from .policy_configuration import PasswordPolicyConfiguration
from .policy_service import PasswordPolicyService

__all__ = [
    "PasswordPolicyConfiguration",
    "PasswordPolicyService",
]
