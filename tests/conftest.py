"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest

from git_semver.semver import parse_version

CONFIG_ENV_KEYS = (
    'GIT_SEMVER_GIT_PATH',
    'GIT_SEMVER_GIT_TIMEOUT',
    'GIT_SEMVER_REPO_DIR',
    'LOG_LEVEL',
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove git-semver settings from the environment."""
    for key in CONFIG_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def full_tag():
    """The tag used in most examples: v0.9.8-760-gabcd1234."""
    return parse_version("v0.9.8-760-gabcd1234")


@pytest.fixture
def full_record():
    """The 16-byte record of full_tag."""
    return bytes([0, 0, 9, 0, 8, 0, 248, 2, 0x34, 0x12, 0xcd, 0xab, 0x01, 0, 0, 0])
