"""
Holder for the configured default password policy.

The surrounding application owns this object and passes it to the
service. Replacing the policy is a single reference swap, so readers see
either the old or the new policy and never a partial one.
"""

from pwpolicy.config import PolicySettings
from pwpolicy.core.rules import PasswordPolicy, PolicyConfigLoader, default_password_policy
from pwpolicy.observability.logger import get_logger, log_operation

logger = get_logger(__name__)


class PasswordPolicyConfiguration:
    """
    Configured default password policy plus its enable flag.

    Setters return ``self`` so configuration can be chained:

        config = PasswordPolicyConfiguration() \\
            .set_password_policy(default_password_policy()) \\
            .set_enable_password_policy(True)
    """

    def __init__(self, policy: PasswordPolicy | None = None, enabled: bool = False):
        self._policy = policy
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    def get_password_policy(self) -> PasswordPolicy | None:
        return self._policy

    def set_password_policy(self, policy: PasswordPolicy | None) -> "PasswordPolicyConfiguration":
        self._policy = policy
        return self

    def set_enable_password_policy(self, enabled: bool) -> "PasswordPolicyConfiguration":
        self._enabled = enabled
        return self

    def initialize(self) -> "PasswordPolicyConfiguration":
        """Install the default policy when enabled without an explicit policy."""
        if self._enabled and self._policy is None:
            logger.info("Password policy enabled without a policy; using the default policy")
            self._policy = default_password_policy()
        return self

    def active_policy(self) -> PasswordPolicy | None:
        """
        The policy to enforce, if any.

        Returns:
            The configured policy when enabled, otherwise None
        """
        # Read the reference once so a concurrent swap can't be seen half-way
        policy = self._policy
        if not self._enabled:
            return None
        return policy

    @classmethod
    def from_settings(cls, settings: PolicySettings) -> "PasswordPolicyConfiguration":
        """
        Build a configuration from settings.

        Args:
            settings: Runtime settings; ``policy_file`` is loaded with
                PolicyConfigLoader, otherwise the default policy is used

        Raises:
            FileNotFoundError: If the policy file does not exist
            ValueError: If the policy file is invalid
        """
        policy = None
        if settings.policy_file is not None:
            with log_operation("Loading password policy", logger=logger, path=str(settings.policy_file)):
                policy = PolicyConfigLoader(settings.policy_file).load_policy()

        return cls(policy=policy, enabled=settings.enabled).initialize()
