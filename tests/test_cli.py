"""Tests for the mygit entrypoint."""

from unittest.mock import patch

import pytest

from mygit.cli import main
from mygit.lib.config import MygitConfig
from mygit.lib.prompts import NonInteractiveError


@pytest.fixture(autouse=True)
def default_config():
    with patch("mygit.cli.load_config", return_value=MygitConfig()), \
            patch("mygit.cli.setup_logging"):
        yield


class TestMain:

    @patch("mygit.cli.run_session")
    @patch("mygit.git.is_work_tree", return_value=False)
    def test_not_a_repository(self, mock_repo, mock_run, capsys):
        assert main([]) == 1
        mock_run.assert_not_called()
        assert "not a git repository" in capsys.readouterr().out

    @patch("mygit.cli.run_session", return_value=0)
    @patch("mygit.git.is_work_tree", return_value=True)
    def test_runs_session_in_cwd(self, mock_repo, mock_run, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main([]) == 0
        session = mock_run.call_args[0][0]
        assert session.repo.resolve() == tmp_path.resolve()
        assert session.config == MygitConfig()

    @patch("mygit.cli.run_session", side_effect=NonInteractiveError())
    @patch("mygit.git.is_work_tree", return_value=True)
    def test_non_interactive_exits_one(self, mock_repo, mock_run, capsys):
        assert main([]) == 1
        assert "interactive terminal" in capsys.readouterr().out

    def test_rejects_unknown_flags(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--force"])
        assert exc_info.value.code == 2

    @patch("mygit.cli.run_session", side_effect=KeyboardInterrupt)
    @patch("mygit.git.is_work_tree", return_value=True)
    def test_interrupt_during_git_exits_cleanly(self, mock_repo, mock_run, capsys):
        assert main([]) == 130
        assert "Cancelled" in capsys.readouterr().out
