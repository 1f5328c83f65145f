"""
Tests for CLI functionality.
"""

from unittest.mock import patch

import pytest

from git_semver.cli import main, parse_arguments
from git_semver.errors import EncodingError, ToolInvocationError

FULL_HEX = '000009000800f8023412cdab01000000'


class TestArgumentParsing:
    """Test command-line argument parsing."""

    def test_parse_arguments_revision(self):
        """Test a positional revision."""
        args = parse_arguments(['v0.9.8-760-gabcd1234', '--encode'])
        assert args.revision == 'v0.9.8-760-gabcd1234'
        assert args.encode is True
        assert args.from_git is False

    def test_parse_arguments_git_options(self):
        """Test git options."""
        args = parse_arguments(['--from-git', '--git-path', '/usr/bin/git', '--git-timeout', '2', '--repo-dir', '/src'])
        assert args.from_git is True
        assert args.git_path == '/usr/bin/git'
        assert args.git_timeout == 2.0
        assert args.repo_dir == '/src'

    def test_parse_arguments_help(self):
        """Test help argument."""
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(['--help'])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("argv", [
        [],
        ['v1.0.0', '--from-git'],
        ['v1.0.0', '--decode', FULL_HEX],
        ['--from-git', '--decode', FULL_HEX],
    ])
    def test_parse_arguments_needs_one_source(self, argv):
        """Test that exactly one input source is required."""
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(argv)
        assert exc_info.value.code == 2


@pytest.mark.usefixtures('clean_env')
class TestMain:
    """Test the main entry point."""

    def test_main_prints_canonical_form(self, capsys):
        """Test printing the canonical form."""
        assert main(['v0.9.8-760']) == 0
        assert capsys.readouterr().out == 'v0.9.8-760\n'

    def test_main_encode(self, capsys):
        """Test printing the record."""
        assert main(['v0.9.8-760-gabcd1234', '--encode']) == 0
        assert capsys.readouterr().out.splitlines() == ['v0.9.8-760-gabcd1234', FULL_HEX]

    def test_main_decode(self, capsys):
        """Test decoding a hex record."""
        assert main(['--decode', FULL_HEX]) == 0
        assert capsys.readouterr().out == 'v0.9.8-760-gabcd1234\n'

    def test_main_compare_less(self, capsys):
        """Test comparing two versions."""
        assert main(['v0.9.8-760-gabcd1234', '--compare', 'v0.9.9-2']) == 0
        assert capsys.readouterr().out.splitlines() == [
            'v0.9.8-760-gabcd1234',
            'v0.9.8-760-gabcd1234 < v0.9.9-2',
            'identical: no',
        ]

    def test_main_compare_commit_only_difference(self, capsys):
        """Test that a commit-only difference orders as '=' but is not identical."""
        assert main(['v0.9.8-760-gabcd1234', '--compare', 'v0.9.8-760-g1234']) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == 'v0.9.8-760-gabcd1234 = v0.9.8-760-g1234'
        assert lines[2] == 'identical: no'

    def test_main_compare_identical(self, capsys):
        """Test comparing a version with itself."""
        assert main(['v1.0.0', '--compare', 'v1.0.0-0']) == 0
        assert capsys.readouterr().out.splitlines()[1:] == ['v1.0.0-0 = v1.0.0-0', 'identical: yes']

    @patch('git_semver.cli.describe_tags')
    def test_main_from_git(self, mock_describe, capsys):
        """Test reading the version from git with configured options."""
        mock_describe.return_value = 'v1.2.3-4-g5\n'

        assert main(['--from-git', '--git-path', '/usr/bin/git', '--git-timeout', '3']) == 0

        assert capsys.readouterr().out == 'v1.2.3-4-g5\n'
        mock_describe.assert_called_once_with(repo_dir=None, git_path='/usr/bin/git', timeout=3.0)

    @pytest.mark.parametrize("error", [
        ToolInvocationError("failed to execute git"),
        EncodingError("git describe output is not valid UTF-8"),
    ])
    @patch('git_semver.cli.describe_tags')
    def test_main_from_git_failure(self, mock_describe, error, capsys):
        """Test that git failures exit with 1."""
        mock_describe.side_effect = error

        assert main(['--from-git']) == 1
        assert capsys.readouterr().out == ''

    @pytest.mark.parametrize("argv", [
        ['v1.2'],
        ['v1.2.3-4-abc'],
        ['v1.2.3', '--compare', 'v1'],
        ['--decode', 'zz'],
        ['--decode', '00' * 8],
    ])
    def test_main_bad_input(self, argv, capsys):
        """Test that bad input exits with 1 and prints nothing."""
        assert main(argv) == 1
        assert capsys.readouterr().out == ''

    def test_main_log_level_from_env(self, monkeypatch, capsys):
        """Test that LOG_LEVEL from the environment enables debug output."""
        monkeypatch.setenv('LOG_LEVEL', 'DEBUG')

        assert main(['v1.0.0']) == 0

        captured = capsys.readouterr()
        assert captured.out == 'v1.0.0-0\n'
        assert 'Resolved version' in captured.err

    def test_main_default_log_level_hides_debug(self, capsys):
        """Test that debug output is off by default."""
        assert main(['v1.0.0']) == 0
        assert 'Resolved version' not in capsys.readouterr().err

    def test_main_log_level_critical(self, capsys):
        """Test that CRITICAL is accepted and silences errors."""
        assert main(['v1.2', '--log-level', 'critical']) == 1
        assert capsys.readouterr().err == ''

    def test_main_invalid_config(self, capsys):
        """Test that configuration errors exit with 1."""
        assert main(['v1.0.0', '--git-timeout', '0']) == 1
        assert capsys.readouterr().out == ''
