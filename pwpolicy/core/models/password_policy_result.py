"""
PasswordPolicyResult model representing the outcome of checking a password (ephemeral).
"""

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .password_policy_rule import PasswordPolicyRule


class PasswordPolicyResult(BaseModel):
    """
    Outcome of evaluating a password against a policy.

    Note: results are built fresh for each evaluation and never persisted.

    Attributes:
        fulfilled_rules: Rules the password satisfied, in policy order
        violated_rules: Rules the password failed, in policy order
    """

    model_config = ConfigDict(frozen=True)

    fulfilled_rules: Tuple[PasswordPolicyRule, ...] = Field(default_factory=tuple)
    violated_rules: Tuple[PasswordPolicyRule, ...] = Field(default_factory=tuple)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return len(self.violated_rules) == 0

    def to_summary(self) -> dict[str, Any]:
        """
        JSON-friendly view of the result for message layers and the CLI.

        Returns:
            Dictionary with the validity flag and placeholder/parameter
            pairs for fulfilled and violated rules
        """
        return {
            "valid": self.is_valid,
            "fulfilled": [_describe(rule) for rule in self.fulfilled_rules],
            "violated": [_describe(rule) for rule in self.violated_rules],
        }


def _describe(rule: PasswordPolicyRule) -> dict[str, Any]:
    return {"placeholder": rule.placeholder, "parameter": rule.parameter}
