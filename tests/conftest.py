"""
Pytest configuration and fixtures for pwpolicy tests

This module provides shared fixtures for unit and integration tests.
"""
import pytest

from pwpolicy.core.rules import default_password_policy
from pwpolicy.service import PasswordPolicyConfiguration, PasswordPolicyService


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that exercise a single module"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that drive the CLI or load files"
    )


# =======================
# POLICY FIXTURES
# =======================

@pytest.fixture
def policy():
    """Default policy: length 10, upper, lower, digit and special character"""
    return default_password_policy()


@pytest.fixture
def configuration():
    """
    Configuration with the default policy installed and enabled
    """
    return PasswordPolicyConfiguration() \
        .set_password_policy(default_password_policy()) \
        .set_enable_password_policy(True)


@pytest.fixture
def service(configuration) -> PasswordPolicyService:
    return PasswordPolicyService(configuration)


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def write_policy_file(tmp_path):
    """
    Write YAML content to a policy file in a temporary directory

    Returns:
        Function taking YAML text and returning the file path
    """
    def _write(content: str, name: str = "policy.yaml"):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def clean_env(monkeypatch):
    """Remove pwpolicy environment variables for the duration of a test"""
    for name in ("PASSWORD_POLICY_ENABLED", "PASSWORD_POLICY_FILE", "LOG_LEVEL", "LOG_FORMAT"):
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
