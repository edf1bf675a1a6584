"""
Runtime settings for pwpolicy.

Settings come from environment variables, optionally seeded from a .env
file via python-dotenv.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}


class PolicySettings(BaseModel):
    """
    Settings controlling the configured default password policy.

    Attributes:
        enabled: Whether the default policy is enforced (PASSWORD_POLICY_ENABLED)
        policy_file: Optional YAML policy file (PASSWORD_POLICY_FILE); the
            built-in default policy is used when unset
        log_level: Log level (LOG_LEVEL)
        log_format: "json" or "text" (LOG_FORMAT)
    """

    enabled: bool = True
    policy_file: Path | None = None
    log_level: str = "INFO"
    log_format: str = Field("json", pattern="^(json|text)$")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "PolicySettings":
        """
        Build settings from the environment.

        Args:
            env_file: Optional .env file loaded before reading variables;
                values already present in the environment win

        Returns:
            PolicySettings instance
        """
        if env_file is not None:
            load_dotenv(env_file, override=False)

        policy_file = os.getenv("PASSWORD_POLICY_FILE") or None
        return cls(
            enabled=os.getenv("PASSWORD_POLICY_ENABLED", "true").strip().lower() in _TRUE_VALUES,
            policy_file=policy_file,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "json"),
        )
