"""
Tests for the command-line interface.
"""

import pytest
import os
import json
from unittest.mock import Mock, patch

from trackbook import __version__
from trackbook.cli import main, parse_arguments

FFMPEG_OUTPUT = "Input #0, mp3, from 'x.mp3':\n  Duration: 00:01:04.20, start: 0.0, bitrate: 128 kb/s\n"


@pytest.fixture
def project(isolated_environment, make_book_dir):
    make_book_dir('N_Math1A', ['10111.mp3', '11111.mp3', '11112.mp3'])
    make_book_dir('N_Math2B', ['21111.mp3'])
    with open('trackbook.json', 'w', encoding='utf-8') as f:
        json.dump({"books": ["N_Math1A", "N_Math2B"]}, f)
    return isolated_environment


class TestParseArguments:
    """Test cases for argument parsing."""

    def test_defaults(self):
        """Test defaults."""
        args = parse_arguments([])

        assert args.config is None
        assert args.quiet is False

    def test_version(self, capsys):
        """Test --version prints the version."""
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(['--version'])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:
    """Test cases for the main entry point."""

    @patch('trackbook.core.prober.subprocess.run')
    def test_full_build(self, mock_run, project, capsys):
        """Test a complete build writes every file and the cache."""
        mock_run.return_value = Mock(returncode=1, stdout=FFMPEG_OUTPUT)

        with pytest.raises(SystemExit) as exc_info:
            main(['--quiet'])

        assert exc_info.value.code == 0
        for name in ('N_Math1A.txt', 'N_Math1A.html', 'N_Math2B.txt', 'N_Math2B.html', 'index.html'):
            assert os.path.exists(name)

        with open('N_Math1A.txt', encoding='utf-8') as f:
            assert f.read() == (
                "1-1 (02:10 / 02:10)\n\n"
                "  * 11111  (01:05 / 02:10)\n"
                "  * 11112  (01:05 / 02:10)"
            )

        with open('durations.json', encoding='utf-8') as f:
            assert len(json.load(f)) == 4
        assert mock_run.call_count == 4

    @patch('trackbook.core.prober.subprocess.run')
    def test_rebuild_uses_cache(self, mock_run, project):
        """Test a second run does not invoke ffmpeg."""
        mock_run.return_value = Mock(returncode=1, stdout=FFMPEG_OUTPUT)

        with pytest.raises(SystemExit):
            main(['--quiet'])
        mock_run.reset_mock()
        with pytest.raises(SystemExit) as exc_info:
            main(['--quiet'])

        assert exc_info.value.code == 0
        mock_run.assert_not_called()

    @patch('trackbook.core.prober.subprocess.run')
    def test_probe_failure_exits_non_zero(self, mock_run, project, capsys):
        """Test a probe failure stops the build with exit code 1."""
        mock_run.return_value = Mock(returncode=1, stdout="11111.mp3: Invalid data found")

        with pytest.raises(SystemExit) as exc_info:
            main(['--quiet'])

        assert exc_info.value.code == 1
        assert "Invalid data found" in capsys.readouterr().err
        assert not os.path.exists('N_Math1A.txt')
        assert not os.path.exists('index.html')

    def test_bad_name_exits_non_zero(self, project, make_book_dir, capsys):
        """Test a malformed track name stops the build."""
        make_book_dir('N_Math1A', ['bogus.mp3'])

        with patch('trackbook.core.prober.subprocess.run') as mock_run:
            mock_run.return_value = Mock(returncode=1, stdout=FFMPEG_OUTPUT)
            with pytest.raises(SystemExit) as exc_info:
                main(['--quiet'])

        assert exc_info.value.code == 1
        assert "bogus" in capsys.readouterr().err

    def test_corrupt_cache_exits_before_building(self, project, capsys):
        """Test a corrupt cache file fails at startup."""
        with open('durations.json', 'w', encoding='utf-8') as f:
            f.write('{oops')

        with patch('trackbook.core.prober.subprocess.run') as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                main(['--quiet'])
            mock_run.assert_not_called()

        assert exc_info.value.code == 1
        assert "CACHE001" in capsys.readouterr().err

    def test_missing_book_directory(self, isolated_environment, capsys):
        """Test the default book list fails when the directories are absent."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--quiet'])

        assert exc_info.value.code == 1
        assert "N_Math1A" in capsys.readouterr().err

    @patch('trackbook.cli.setup_logging')
    @patch('trackbook.core.prober.subprocess.run')
    def test_summary_output(self, mock_run, mock_logging, project, capsys):
        """Test the summary lists each book."""
        mock_run.return_value = Mock(returncode=1, stdout=FFMPEG_OUTPUT)

        with pytest.raises(SystemExit):
            main([])

        out = capsys.readouterr().out
        assert "N_Math1A: 02:10 (1 chapters, 2 tracks)" in out
        assert "N_Math2B: 01:05 (1 chapters, 1 tracks)" in out
