"""
Password policy: an ordered set of rules evaluated against a password.

The policy applies every rule in order (no short circuit) so callers get a
complete fulfilled/violated breakdown from one pass.
"""

from typing import Any, Iterable, Tuple

from pwpolicy.core.models import PasswordPolicyResult, PasswordPolicyRule
from pwpolicy.observability.logger import get_logger
from pwpolicy.observability.metrics import (
    evaluation_duration_seconds,
    record_policy_evaluation,
    track_duration,
)

logger = get_logger(__name__)


class PasswordPolicy:
    """
    Ordered, immutable collection of password rules.

    A policy without rules is valid and accepts every password.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[PasswordPolicyRule] = ()):
        """
        Initialize the policy.

        Args:
            rules: Rules in evaluation and reporting order
        """
        rules = tuple(rules)
        for rule in rules:
            if not isinstance(rule, PasswordPolicyRule):
                raise TypeError(f"Policy rules must be PasswordPolicyRule, got {type(rule).__name__}")
        object.__setattr__(self, "_rules", rules)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def rules(self) -> Tuple[PasswordPolicyRule, ...]:
        return self._rules

    def evaluate(self, password: str) -> PasswordPolicyResult:
        """
        Evaluate a password against all rules.

        Args:
            password: The candidate password (must not be None)

        Returns:
            PasswordPolicyResult with rules partitioned in policy order
        """
        fulfilled = []
        violated = []

        with track_duration(evaluation_duration_seconds):
            for rule in self._rules:
                if rule.is_fulfilled(password):
                    fulfilled.append(rule)
                else:
                    violated.append(rule)

        result = PasswordPolicyResult(fulfilled_rules=fulfilled, violated_rules=violated)

        record_policy_evaluation(result.is_valid, [rule.placeholder for rule in violated])
        logger.debug(
            "Password evaluated against policy",
            extra={
                "total_rules": len(self._rules),
                "fulfilled_rules": len(fulfilled),
                "violated_rules": len(violated),
                "valid": result.is_valid,
            },
        )
        return result

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of the policy's rules.

        Returns:
            Dictionary with the rule count and counts by rule type
        """
        counts: dict[str, int] = {}
        for rule in self._rules:
            counts[rule.rule_type] = counts.get(rule.rule_type, 0) + 1
        return {
            "total_rules": len(self._rules),
            "rules_by_type": counts,
        }

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PasswordPolicy):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        placeholders = ", ".join(rule.placeholder for rule in self._rules)
        return f"{self.__class__.__name__}(rules=[{placeholders}])"
