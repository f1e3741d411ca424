"""Tests for the command-line driver."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from vcsbackends.__main__ import main


@pytest.fixture(autouse=True)
def no_config(tmp_path, monkeypatch):
    """Point the config lookup at a file that does not exist."""
    monkeypatch.setenv("VCSBACKENDS_CONFIG", str(tmp_path / "absent.yaml"))
    yield
    # main() attaches handlers bound to the captured streams of this test
    logger = logging.getLogger("vcsbackends")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def mock_run():
    """Mock subprocess.run."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(returncode=0, stdout=b"", stderr=b"")
        yield mock


class TestMain:
    """Tests for main()."""

    def test_no_arguments(self, capsys):
        assert main([]) == 2
        assert "Usage" in capsys.readouterr().err

    def test_unknown_command(self, capsys):
        assert main(["fetch", "git", "/tmp/x"]) == 2

    def test_clone_shallow(self, mock_run, tmp_path):
        local = tmp_path / "example.com" / "repo"

        assert main(["clone", "github", "https://example.com/repo", str(local), "--shallow"]) == 0

        cmd = mock_run.call_args[0][0]
        assert cmd == ["git", "clone", "--depth", "1", "https://example.com/repo", str(local)]
        assert local.parent.is_dir()

    def test_update(self, mock_run, tmp_path):
        assert main(["update", "hg", str(tmp_path)]) == 0

        assert mock_run.call_args[0][0] == ["hg", "pull", "--update"]
        assert mock_run.call_args[1]["cwd"] == str(tmp_path)

    def test_unknown_backend(self, mock_run, capsys, tmp_path):
        assert main(["clone", "nonexistent-vcs", "https://example.com/r", str(tmp_path / "r")]) == 1

        assert "nonexistent-vcs" in capsys.readouterr().err
        mock_run.assert_not_called()

    def test_tool_failure(self, mock_run, capsys, tmp_path):
        mock_run.return_value = MagicMock(returncode=1, stdout=b"", stderr=b"abort: no repository")

        assert main(["update", "mercurial", str(tmp_path)]) == 1
        assert "abort: no repository" in capsys.readouterr().err

    def test_cvs_unsupported(self, mock_run, capsys, tmp_path):
        assert main(["update", "cvs", str(tmp_path)]) == 1
        assert "not supported" in capsys.readouterr().err
        mock_run.assert_not_called()

    def test_configured_executable(self, mock_run, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("executables:\n  darcs: /opt/darcs/bin/darcs\n")
        monkeypatch.setenv("VCSBACKENDS_CONFIG", str(config_file))

        assert main(["update", "darcs", str(tmp_path)]) == 0
        assert mock_run.call_args[0][0] == ["/opt/darcs/bin/darcs", "pull"]

    def test_list(self, capsys):
        assert main(["list"]) == 0

        output = capsys.readouterr().out
        assert "git, github" in output
        assert "fossil" in output
