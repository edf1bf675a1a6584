"""
PasswordPolicyRule model representing a single password requirement.
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from pwpolicy.core.validators import (
    DEFAULT_MIN_LENGTH,
    PARAMETER_NAMES,
    PLACEHOLDERS,
    get_check,
    get_int_parameter,
)

RuleType = Literal["length", "upper_case", "lower_case", "digit", "special_character"]


class PasswordPolicyRule(BaseModel):
    """
    A single testable password property.

    Rules are immutable values; the check itself lives in the validators
    registry and is looked up by ``rule_type``.

    Attributes:
        rule_type: Rule kind: "length", "upper_case", "lower_case", "digit", "special_character"
        placeholder: Token used by message/i18n layers ("PASSWORD_POLICY_LENGTH")
        parameters: Rule parameters (e.g., {"min_length": 10} or {"min_count": 1})
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "rule_type": "length",
                "placeholder": "PASSWORD_POLICY_LENGTH",
                "parameters": {"min_length": 10},
            }
        },
    )

    rule_type: RuleType
    placeholder: str = Field(..., min_length=1)
    parameters: Dict[str, StrictInt] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def fill_placeholder(cls, data: Any) -> Any:
        """Default the placeholder to the fixed token of the rule type."""
        if isinstance(data, dict) and not data.get("placeholder"):
            rule_type = data.get("rule_type")
            if rule_type in PLACEHOLDERS:
                data = {**data, "placeholder": PLACEHOLDERS[rule_type]}
        return data

    @model_validator(mode="after")
    def check_parameters(self) -> "PasswordPolicyRule":
        """Only the parameter of the rule type is accepted, and it must be a non-negative int."""
        expected = PARAMETER_NAMES[self.rule_type]
        unknown = set(self.parameters) - {expected}
        if unknown:
            raise ValueError(
                f"Unknown parameters for rule '{self.rule_type}': {sorted(unknown)}"
            )
        if expected in self.parameters:
            get_int_parameter(self.parameters, expected, 0)
        return self

    def __hash__(self) -> int:
        return hash((self.rule_type, self.placeholder, tuple(sorted(self.parameters.items()))))

    @property
    def parameter(self) -> int:
        """The effective value of the rule's single parameter."""
        name = PARAMETER_NAMES[self.rule_type]
        default = DEFAULT_MIN_LENGTH if self.rule_type == "length" else 1
        return self.parameters.get(name, default)

    def is_fulfilled(self, password: str) -> bool:
        """Return True if ``password`` satisfies this rule."""
        return get_check(self.rule_type)(password, self.parameters)


def build_rule(rule_type: str, parameters: Dict[str, int] | None = None) -> PasswordPolicyRule:
    """
    Build a rule from its type name and parameters.

    Raises:
        ValueError: If the rule type is unknown or parameters are invalid
    """
    if not isinstance(rule_type, str) or rule_type not in PARAMETER_NAMES:
        raise ValueError(f"Unknown rule type: {rule_type}")
    return PasswordPolicyRule(rule_type=rule_type, parameters=parameters or {})


def length_rule(min_length: int = DEFAULT_MIN_LENGTH) -> PasswordPolicyRule:
    return build_rule("length", {"min_length": min_length})


def upper_case_rule(min_count: int = 1) -> PasswordPolicyRule:
    return build_rule("upper_case", {"min_count": min_count})


def lower_case_rule(min_count: int = 1) -> PasswordPolicyRule:
    return build_rule("lower_case", {"min_count": min_count})


def digit_rule(min_count: int = 1) -> PasswordPolicyRule:
    return build_rule("digit", {"min_count": min_count})


def special_character_rule(min_count: int = 1) -> PasswordPolicyRule:
    return build_rule("special_character", {"min_count": min_count})
