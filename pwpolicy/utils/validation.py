"""
Argument validation utilities for the password policy service.
"""

from typing import Any


class NullValueError(ValueError):
    """Raised when a required argument is None."""
    pass


def ensure_not_null(value: Any, field_name: str) -> Any:
    """
    Ensure a required argument was supplied.

    Args:
        value: The argument value
        field_name: Name of the argument (for error messages)

    Returns:
        The value unchanged

    Raises:
        NullValueError: If value is None

    Examples:
        >>> ensure_not_null("secret", "password")
        'secret'
        >>> ensure_not_null(None, "password")  # doctest: +SKIP
        NullValueError: password is null
    """
    if value is None:
        raise NullValueError(f"{field_name} is null")
    return value
