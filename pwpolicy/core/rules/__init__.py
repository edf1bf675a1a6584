"""
Password policies, the default policy and policy configuration.
"""

from .default_policy import default_password_policy
from .password_policy import PasswordPolicy
from .rule_config import PolicyBuilder, PolicyConfigLoader

__all__ = [
    "PasswordPolicy",
    "PolicyBuilder",
    "PolicyConfigLoader",
    "default_password_policy",
]
