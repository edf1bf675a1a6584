"""
Unit tests for PasswordPolicy evaluation and the default policy.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pwpolicy.core.models import (
    digit_rule,
    length_rule,
    lower_case_rule,
    special_character_rule,
    upper_case_rule,
)
from pwpolicy.core.rules import PasswordPolicy, default_password_policy
from pwpolicy.observability.metrics import REGISTRY

pytestmark = pytest.mark.unit

rule_strategy = st.one_of(
    st.integers(min_value=0, max_value=20).map(length_rule),
    st.integers(min_value=0, max_value=3).map(upper_case_rule),
    st.integers(min_value=0, max_value=3).map(lower_case_rule),
    st.integers(min_value=0, max_value=3).map(digit_rule),
    st.integers(min_value=0, max_value=3).map(special_character_rule),
)
policy_strategy = st.lists(rule_strategy, max_size=8).map(PasswordPolicy)


class TestDefaultPolicy:
    """Tests for the default policy"""

    def test_rule_order(self, policy):
        assert [rule.placeholder for rule in policy.rules] == [
            "PASSWORD_POLICY_LENGTH",
            "PASSWORD_POLICY_UPPER_CASE",
            "PASSWORD_POLICY_LOWER_CASE",
            "PASSWORD_POLICY_DIGIT",
            "PASSWORD_POLICY_SPECIAL_CHARACTER",
        ]
        assert policy.rules[0].parameter == 10

    def test_good_password(self, policy):
        result = policy.evaluate("LongPas$w0rd")

        assert len(result.violated_rules) == 0
        assert len(result.fulfilled_rules) == 5
        assert result.is_valid is True

    @pytest.mark.parametrize("password, placeholder", [
        ("LONGPAS$W0RD", "PASSWORD_POLICY_LOWER_CASE"),
        ("longpas$w0rd", "PASSWORD_POLICY_UPPER_CASE"),
        ("LongPassw0rd", "PASSWORD_POLICY_SPECIAL_CHARACTER"),
        ("LongPas$word", "PASSWORD_POLICY_DIGIT"),
        ("Pas$w0rd", "PASSWORD_POLICY_LENGTH"),
    ])
    def test_single_violation(self, policy, password, placeholder):
        result = policy.evaluate(password)

        assert len(result.violated_rules) == 1
        assert len(result.fulfilled_rules) == 4
        assert result.is_valid is False
        assert result.violated_rules[0].placeholder == placeholder

    def test_empty_password_violates_everything(self, policy):
        result = policy.evaluate("")

        assert result.fulfilled_rules == ()
        assert list(result.violated_rules) == list(policy.rules)

    def test_policies_are_independent_instances(self):
        assert default_password_policy() == default_password_policy()
        assert default_password_policy() is not default_password_policy()


class TestPasswordPolicy:
    """Tests for PasswordPolicy"""

    def test_empty_policy_accepts_anything(self):
        result = PasswordPolicy().evaluate("")

        assert result.is_valid is True
        assert result.fulfilled_rules == ()
        assert result.violated_rules == ()

    def test_no_short_circuit(self):
        policy = PasswordPolicy([length_rule(20), digit_rule(), upper_case_rule()])
        result = policy.evaluate("abc")

        assert len(result.violated_rules) == 3

    def test_order_preserved_within_partitions(self):
        rules = [digit_rule(), length_rule(3), upper_case_rule(), lower_case_rule()]
        result = PasswordPolicy(rules).evaluate("abcd")

        assert list(result.violated_rules) == [rules[0], rules[2]]
        assert list(result.fulfilled_rules) == [rules[1], rules[3]]

    def test_policy_is_immutable(self, policy):
        with pytest.raises(AttributeError):
            policy.rules = ()

        with pytest.raises(AttributeError):
            policy.extra = 1

    def test_rules_must_be_rule_models(self):
        with pytest.raises(TypeError):
            PasswordPolicy(["length"])

    def test_get_rule_summary(self, policy):
        summary = PasswordPolicy([digit_rule(), digit_rule(2), length_rule()]).get_rule_summary()

        assert summary == {
            "total_rules": 3,
            "rules_by_type": {"digit": 2, "length": 1},
        }

    def test_repr_lists_placeholders(self):
        assert repr(PasswordPolicy([digit_rule()])) == "PasswordPolicy(rules=[PASSWORD_POLICY_DIGIT])"

    def test_evaluation_recorded_in_metrics(self, policy):
        def sample(name, labels):
            return REGISTRY.get_sample_value(name, labels) or 0.0

        valid_before = sample("pwpolicy_password_checks_total", {"result": "valid"})
        invalid_before = sample("pwpolicy_password_checks_total", {"result": "invalid"})
        digit_before = sample("pwpolicy_rule_violations_total", {"placeholder": "PASSWORD_POLICY_DIGIT"})

        policy.evaluate("LongPas$w0rd")
        policy.evaluate("LongPas$word")

        assert sample("pwpolicy_password_checks_total", {"result": "valid"}) == valid_before + 1
        assert sample("pwpolicy_password_checks_total", {"result": "invalid"}) == invalid_before + 1
        assert sample(
            "pwpolicy_rule_violations_total", {"placeholder": "PASSWORD_POLICY_DIGIT"}
        ) == digit_before + 1


class TestPolicyProperties:
    """Property-based tests for evaluation invariants"""

    @given(policy_strategy, st.text())
    def test_every_rule_in_exactly_one_partition(self, policy, password):
        result = policy.evaluate(password)

        assert len(result.fulfilled_rules) + len(result.violated_rules) == len(policy.rules)
        partitioned = [id(r) for r in result.fulfilled_rules] + [id(r) for r in result.violated_rules]
        assert sorted(partitioned) == sorted(id(r) for r in policy.rules)

    @given(policy_strategy, st.text())
    def test_validity_matches_violations(self, policy, password):
        result = policy.evaluate(password)
        assert result.is_valid == (len(result.violated_rules) == 0)

    @given(policy_strategy, st.text())
    def test_partitions_keep_policy_order(self, policy, password):
        result = policy.evaluate(password)
        positions = {id(rule): i for i, rule in enumerate(policy.rules)}

        for partition in (result.fulfilled_rules, result.violated_rules):
            indexes = [positions[id(rule)] for rule in partition]
            assert indexes == sorted(indexes)

    @given(policy_strategy, st.text())
    def test_evaluation_is_idempotent(self, policy, password):
        assert policy.evaluate(password) == policy.evaluate(password)
