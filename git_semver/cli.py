"""
Command-line interface for git-semver.

Parses a describe string (given, read from git, or decoded from a hex
record) and prints its canonical form, optionally with its binary record or
its ordering against another version.
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger
from rich.console import Console

from .codec import decode, encode
from .config import Config, load_config
from .errors import SemVerError
from .git import describe_tags, from_git
from .logging_config import setup_logging
from .semver import VersionTag, compare, parse_version
from .utils import format_record_hex, parse_record_hex

# Results go to stdout, log messages to stderr
console = Console(soft_wrap=True)
error_console = Console(stderr=True)

COMPARE_SYMBOLS = {-1: '<', 0: '=', 1: '>'}


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='git-semver',
        description='Parse, compare and encode "git describe --tags" versions'
    )

    # Input
    parser.add_argument('revision', nargs='?', help='Describe string (e.g., v0.9.8-760-gabcd1234)')
    parser.add_argument('--from-git', action='store_true', help='Read the version with "git describe --tags"')
    parser.add_argument('--decode', metavar='HEX', help='Decode a 16-byte version record given as hex')

    # Output
    parser.add_argument('--encode', action='store_true', help='Also print the 16-byte version record as hex')
    parser.add_argument('--compare', metavar='OTHER', help='Compare against another describe string')

    # Git
    parser.add_argument('--git-path', help='git executable (default: git)')
    parser.add_argument('--git-timeout', type=float, help='Seconds to wait for git (default: 5)')
    parser.add_argument('--repo-dir', help='Repository to describe (default: current directory)')

    # Logging
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'debug', 'info', 'warning', 'error', 'critical'], help='Logging level (default: INFO)')

    args = parser.parse_args(argv)

    sources = [args.revision is not None, args.from_git, args.decode is not None]
    if sum(sources) != 1:
        parser.error('give exactly one of REVISION, --from-git or --decode')

    return args


def resolve_tag(args: argparse.Namespace, config: Config) -> VersionTag:
    """Build the input version from whichever source was requested."""
    if args.decode is not None:
        return decode(parse_record_hex(args.decode))

    if args.from_git:
        return from_git(lambda: describe_tags(
            repo_dir=config.repo_dir,
            git_path=config.git_path,
            timeout=config.git_timeout,
        ))

    return parse_version(args.revision)


def print_result(tag: VersionTag, show_record: bool = False, other: Optional[VersionTag] = None) -> None:
    """Print the canonical form, then the record and comparison if requested."""
    console.print(str(tag), markup=False, highlight=False)

    if show_record:
        console.print(format_record_hex(encode(tag)), markup=False, highlight=False)

    if other is not None:
        symbol = COMPARE_SYMBOLS[compare(tag, other)]
        console.print(f'{tag} {symbol} {other}', markup=False, highlight=False)
        console.print(f'identical: {"yes" if tag == other else "no"}', markup=False, highlight=False)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    setup_logging(console=error_console)

    args = parse_arguments(argv)

    if args.log_level:
        setup_logging(args.log_level.upper(), console=error_console)

    config = load_config(args)
    if config is None:
        return 1

    # Apply the level from LOG_LEVEL / .env when no flag was given
    setup_logging(config.log_level, console=error_console)

    try:
        tag = resolve_tag(args, config)
        other = parse_version(args.compare) if args.compare is not None else None
    except (SemVerError, ValueError) as e:
        logger.error(f'❌ {e}')
        return 1

    logger.debug(f'Resolved version: {tag!r}')
    print_result(tag, show_record=args.encode, other=other)
    return 0


if __name__ == '__main__':
    sys.exit(main())
