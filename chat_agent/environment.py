"""Environment validation and API key management."""

import os
from dataclasses import dataclass


class MissingEnvironmentVariableError(Exception):
    """Raised when required environment variables are missing."""

    pass


@dataclass(frozen=True)
class ApiKeys:
    """Container for validated API keys."""

    openrouter_api_key: str


REQUIRED_VARIABLES = ("OPENROUTER_API_KEY",)


def validate_environment() -> ApiKeys:
    """
    Validate that all required environment variables are set.

    Returns:
        ApiKeys dataclass with validated API keys

    Raises:
        MissingEnvironmentVariableError: If any required environment variable is missing
    """
    missing_vars = [name for name in REQUIRED_VARIABLES if not os.getenv(name)]

    if missing_vars:
        raise MissingEnvironmentVariableError(
            f"Required environment variable(s) missing: {', '.join(missing_vars)}"
        )

    return ApiKeys(openrouter_api_key=os.environ["OPENROUTER_API_KEY"])
