"""
Entry point for checking passwords against password policies.
"""

from pwpolicy.core.models import PasswordPolicyResult
from pwpolicy.core.rules import PasswordPolicy
from pwpolicy.observability.logger import get_logger
from pwpolicy.observability.metrics import argument_errors_total, increment_counter
from pwpolicy.utils.validation import NullValueError, ensure_not_null

from .policy_configuration import PasswordPolicyConfiguration

logger = get_logger(__name__)


class PasswordPolicyService:
    """
    Checks candidate passwords against an explicit policy or the configured
    default policy.

    The service keeps no state of its own; the default policy is read from
    the injected configuration on every call.
    """

    def __init__(self, configuration: PasswordPolicyConfiguration):
        self.configuration = configuration

    def check_password_against_policy(
        self, policy: PasswordPolicy | None, password: str | None
    ) -> PasswordPolicyResult:
        """
        Check a password against the given policy.

        Args:
            policy: Policy to evaluate
            password: Candidate password

        Returns:
            PasswordPolicyResult with fulfilled and violated rules

        Raises:
            NullValueError: If policy or password is None
        """
        _require(policy, "policy")
        _require(password, "password")
        return policy.evaluate(password)

    def check_password(self, password: str | None) -> PasswordPolicyResult | None:
        """
        Check a password against the configured default policy.

        Args:
            password: Candidate password

        Returns:
            PasswordPolicyResult, or None when the policy is disabled or no
            policy is configured

        Raises:
            NullValueError: If password is None
        """
        _require(password, "password")

        policy = self.configuration.active_policy()
        if policy is None:
            logger.info("No active password policy; password not checked")
            return None

        return self.check_password_against_policy(policy, password)

    def get_password_policy(self) -> PasswordPolicy | None:
        """Return the configured default policy (None if none is configured)."""
        return self.configuration.get_password_policy()


def _require(value, name: str) -> None:
    try:
        ensure_not_null(value, name)
    except NullValueError:
        increment_counter(argument_errors_total, argument=name)
        logger.warning(f"Rejected password check: {name} is null", extra={"argument": name})
        raise
