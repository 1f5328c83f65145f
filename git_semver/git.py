"""
Read the current version from a git checkout.

Runs ``git describe --tags`` and hands its output to the parser. The command
runner is injectable so callers (and tests) can supply the describe string
without a git binary.
"""

import subprocess
from typing import Callable, Optional

from loguru import logger

from .errors import EncodingError, ToolInvocationError
from .semver import VersionTag, parse_version

DEFAULT_GIT_TIMEOUT = 5

DescribeRunner = Callable[[], str]


def describe_tags(repo_dir: Optional[str] = None, git_path: str = 'git',
                  timeout: float = DEFAULT_GIT_TIMEOUT) -> str:
    """
    Run ``git describe --tags`` and return its output.

    Args:
        repo_dir: Directory to run git in (current directory if None)
        git_path: git executable name or path
        timeout: Seconds to wait for git

    Returns:
        str: Raw describe output, trailing newline included

    Raises:
        ToolInvocationError: If git cannot be run, times out or exits non-zero
        EncodingError: If the output is not valid UTF-8
    """
    cmd = [git_path, 'describe', '--tags']
    logger.debug(f"Running {' '.join(cmd)} in {repo_dir or 'current directory'}")

    try:
        result = subprocess.run(cmd, capture_output=True, timeout=timeout, cwd=repo_dir)
    except subprocess.TimeoutExpired as e:
        raise ToolInvocationError(f"git describe timed out after {timeout}s") from e
    except OSError as e:
        raise ToolInvocationError(f"failed to execute {git_path}: {e}") from e

    if result.returncode != 0:
        stderr = result.stderr.decode('utf-8', errors='replace').strip()
        raise ToolInvocationError(
            f"git describe exited with code {result.returncode}: {stderr or 'no output'}",
            returncode=result.returncode,
            stderr=stderr,
        )

    try:
        output = result.stdout.decode('utf-8')
    except UnicodeDecodeError as e:
        raise EncodingError(f"git describe output is not valid UTF-8: {e}") from e

    logger.debug(f"git describe returned: {output.strip()}")
    return output


def from_git(runner: Optional[DescribeRunner] = None) -> VersionTag:
    """
    Get the version of the current checkout.

    Args:
        runner: Callable returning the describe string; defaults to
            ``describe_tags()`` in the current directory

    Returns:
        VersionTag: Parsed version

    Raises:
        AcquisitionError: If the describe string could not be obtained
        MalformedVersion: If it could not be parsed
    """
    if runner is None:
        runner = describe_tags
    return parse_version(runner())
