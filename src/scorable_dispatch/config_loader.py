"""
Configuration loader with validation.

Builds DispatchConfig from environment variables (and a local .env file).
"""
from dotenv import load_dotenv
from .config import DispatchConfig
from .config_validator import (
    get_bool_env,
    get_optional_env,
    get_positive_float_env,
    validate_log_level,
)


def load_config_from_env(dotenv_path=None) -> DispatchConfig:
    """
    Load configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        app = RegexDispatchApp(config, candidates)
    
    :param dotenv_path: Optional explicit path to a .env file
    :return: Validated DispatchConfig instance
    :raises: ConfigurationError if a value is invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv(dotenv_path)
    
    return DispatchConfig(
        ignore_case=get_bool_env("DISPATCH_IGNORE_CASE", default=False),
        multiline=get_bool_env("DISPATCH_MULTILINE", default=False),
        prepare_timeout=get_positive_float_env("DISPATCH_PREPARE_TIMEOUT"),
        log_level=validate_log_level(
            get_optional_env("DISPATCH_LOG_LEVEL", default="WARNING"),
            "DISPATCH_LOG_LEVEL",
        ),
    )
