"""
Configuration management for git-semver.

Settings come from CLI arguments, environment variables (a .env file is
loaded first) and defaults, in that order of precedence.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from .git import DEFAULT_GIT_TIMEOUT

# Load environment variables from .env file
load_dotenv()

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def get_config_value(cli_args, field_name: str, env_key: str, default, value_type: type = str):
    """
    Get configuration value with proper precedence: CLI args > env vars > defaults.

    Args:
        cli_args: CLI arguments object or None
        field_name: Name of the CLI argument field
        env_key: Environment variable key
        default: Default value if neither CLI nor env var is set
        value_type: Type to convert an env value to (str or float)

    Returns:
        The configuration value converted to the specified type
    """
    cli_value = getattr(cli_args, field_name, None) if cli_args else None
    if cli_value is not None:
        return cli_value

    env_value = os.environ.get(env_key, '')
    if not env_value:
        return default

    try:
        return value_type(env_value)
    except (ValueError, TypeError):
        logger.warning(f"Ignoring invalid {env_key}={env_value!r}, using default {default!r}")
        return default


@dataclass
class Config:
    """Settings for reading versions from git."""

    git_path: str
    git_timeout: float
    repo_dir: Optional[str]
    log_level: str


def load_config(cli_args=None) -> Optional[Config]:
    """
    Load and validate configuration from CLI arguments and environment variables.

    Args:
        cli_args: Parsed CLI arguments or None

    Returns:
        Config: Validated configuration, or None if validation failed
    """
    git_path = get_config_value(cli_args, 'git_path', 'GIT_SEMVER_GIT_PATH', 'git')
    git_timeout = get_config_value(cli_args, 'git_timeout', 'GIT_SEMVER_GIT_TIMEOUT', DEFAULT_GIT_TIMEOUT, float)
    repo_dir = get_config_value(cli_args, 'repo_dir', 'GIT_SEMVER_REPO_DIR', None)
    log_level = get_config_value(cli_args, 'log_level', 'LOG_LEVEL', 'INFO').upper()

    validation_errors = []

    if log_level not in VALID_LOG_LEVELS:
        validation_errors.append(f'LOG_LEVEL must be one of {VALID_LOG_LEVELS} (got: {log_level})')

    if git_timeout <= 0:
        validation_errors.append(f'GIT_SEMVER_GIT_TIMEOUT must be greater than 0 (got: {git_timeout})')

    if repo_dir and not os.path.isdir(repo_dir):
        validation_errors.append(f'GIT_SEMVER_REPO_DIR ({repo_dir}) does not exist or is not a directory')

    if validation_errors:
        logger.error('❌ Configuration Error:')
        for i, error_msg in enumerate(validation_errors, 1):
            logger.error(f'   {i}. {error_msg}')
        return None

    config = Config(
        git_path=git_path,
        git_timeout=git_timeout,
        repo_dir=repo_dir,
        log_level=log_level,
    )
    logger.debug(f'Loaded configuration: {config}')
    return config
