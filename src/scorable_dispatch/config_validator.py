"""
Configuration validation utilities.

Parses environment values into typed settings and fails loudly on bad input.
"""
import logging
import os
from typing import Optional
from .exceptions import ConfigurationError


TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.
    
    Blank values are treated as unset.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_bool_env(key: str, default: bool = False) -> bool:
    """
    Get boolean environment variable.
    
    :param key: Environment variable name
    :param default: Value used when the variable is not set
    :return: Parsed boolean
    :raises: ConfigurationError if the value is not a recognised boolean
    """
    value = get_optional_env(key)
    if value is None:
        return default
    
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    
    raise ConfigurationError(
        f"{key} must be a boolean, got {value!r}.\n"
        f"Use one of: {sorted(TRUE_VALUES | FALSE_VALUES)}"
    )


def get_positive_float_env(key: str) -> Optional[float]:
    """
    Get optional positive number from the environment.
    
    :param key: Environment variable name
    :return: Parsed float or None if not set
    :raises: ConfigurationError if the value is not a positive number
    """
    value = get_optional_env(key)
    if value is None:
        return None
    
    try:
        number = float(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number, got {value!r}.") from None
    
    if number <= 0:
        raise ConfigurationError(f"{key} must be greater than zero, got {number}.")
    
    return number


def validate_log_level(level: str, key: str) -> str:
    """
    Validate a logging level name.
    
    :param level: Level name (case-insensitive)
    :param key: Name of the setting (for error messages)
    :return: Upper-cased level name
    :raises: ConfigurationError if the level is unknown
    """
    normalized = level.upper()
    if normalized not in LOG_LEVELS:
        raise ConfigurationError(
            f"{key} must be one of {sorted(LOG_LEVELS)}, got {level!r}."
        )
    return normalized


def level_number(level: str) -> int:
    """Convert a validated level name to the logging module's number."""
    return getattr(logging, validate_log_level(level, "log_level"))
