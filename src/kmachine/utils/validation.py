"""Validation utilities for kmachine."""

import re


def validate_host_name(name: str) -> bool:
    """Validate a host reference follows docker-machine naming rules.

    Host names must:
    - Start with an alphanumeric character
    - Contain only alphanumeric characters, hyphens and dots

    Args:
        name: Host name to validate

    Returns:
        True if valid

    Raises:
        ValueError: If name is invalid
    """
    if not name:
        raise ValueError("Host name cannot be empty")

    if not re.match(r"^[a-zA-Z0-9][a-zA-Z0-9\-.]*$", name):
        raise ValueError(
            f"Invalid host name: '{name}'. Host names must start with an alphanumeric "
            "character and contain only alphanumerics, hyphens and dots"
        )

    return True
