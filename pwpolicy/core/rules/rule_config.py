"""
Policy configuration management.

Loads password policies from YAML files and provides a fluent builder for
assembling policies in code.
"""

from pathlib import Path
from typing import Any

import yaml

from pwpolicy.core.models import (
    PasswordPolicyRule,
    build_rule,
    digit_rule,
    length_rule,
    lower_case_rule,
    special_character_rule,
    upper_case_rule,
)

from .password_policy import PasswordPolicy


class PolicyConfigLoader:
    """
    Loads a password policy from a YAML configuration file.

    Expected YAML format:
    ```yaml
    rules:
      - type: length
        params:
          min_length: 12
      - type: upper_case
      - type: digit
        params:
          min_count: 2
      - type: special_character
        enabled: false
    ```

    Rules keep the order they are listed in; disabled rules are skipped.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the policy config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.is_file():
            raise FileNotFoundError(f"Policy configuration file not found: {config_path}")

    def load_rules(self) -> list[PasswordPolicyRule]:
        """
        Load and parse the rules listed in the YAML file.

        Returns:
            Enabled rules in file order

        Raises:
            ValueError: If YAML is invalid or a rule definition is malformed
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "rules" not in config:
            raise ValueError("Configuration file must contain 'rules' section")

        rule_defs = config["rules"] or []
        if not isinstance(rule_defs, list):
            raise ValueError("'rules' must be a list")

        rules = []
        for idx, rule_def in enumerate(rule_defs):
            rule = self._parse_rule(rule_def, idx)
            if rule is not None:
                rules.append(rule)
        return rules

    def load_policy(self) -> PasswordPolicy:
        """Load the file as a PasswordPolicy."""
        return PasswordPolicy(self.load_rules())

    def _parse_rule(self, rule_def: Any, idx: int) -> PasswordPolicyRule | None:
        """
        Parse a single rule definition.

        Args:
            rule_def: The rule definition from YAML
            idx: Position of the rule in the list (for error messages)

        Returns:
            The parsed rule, or None if the rule is disabled

        Raises:
            ValueError: If rule definition is invalid
        """
        if not isinstance(rule_def, dict):
            raise ValueError(f"Rule #{idx} must be a mapping")

        if "type" not in rule_def:
            raise ValueError(f"Rule #{idx} is missing 'type'")

        if not isinstance(rule_def["type"], str):
            raise ValueError(f"Rule #{idx} 'type' must be a string")

        if not rule_def.get("enabled", True):
            return None

        parameters = rule_def.get("params", rule_def.get("parameters")) or {}
        if not isinstance(parameters, dict):
            raise ValueError(f"Parameters of rule #{idx} must be a mapping")

        try:
            return build_rule(rule_def["type"], parameters)
        except ValueError as e:
            raise ValueError(f"Invalid rule #{idx} ({rule_def['type']}): {e}") from e


class PolicyBuilder:
    """
    Programmatically build a password policy.

    Usage:
        policy = PolicyBuilder().add_length(12).add_digit(min_count=2).build()
    """

    def __init__(self):
        """Initialize empty rule list."""
        self.rules: list[PasswordPolicyRule] = []

    def add_rule(self, rule: PasswordPolicyRule) -> "PolicyBuilder":
        self.rules.append(rule)
        return self

    def add_length(self, min_length: int = 10) -> "PolicyBuilder":
        """Add a minimum length rule."""
        return self.add_rule(length_rule(min_length))

    def add_upper_case(self, min_count: int = 1) -> "PolicyBuilder":
        """Add an upper case letter rule."""
        return self.add_rule(upper_case_rule(min_count))

    def add_lower_case(self, min_count: int = 1) -> "PolicyBuilder":
        """Add a lower case letter rule."""
        return self.add_rule(lower_case_rule(min_count))

    def add_digit(self, min_count: int = 1) -> "PolicyBuilder":
        """Add a digit rule."""
        return self.add_rule(digit_rule(min_count))

    def add_special_character(self, min_count: int = 1) -> "PolicyBuilder":
        """Add a special character rule."""
        return self.add_rule(special_character_rule(min_count))

    def build(self) -> PasswordPolicy:
        """Build and return the policy."""
        return PasswordPolicy(self.rules)
