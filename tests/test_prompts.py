"""Tests for the interactive prompt helpers."""

from unittest.mock import MagicMock, patch

import pytest

from mygit.lib.prompts import (
    NonInteractiveError,
    PromptAborted,
    non_blank,
    pause,
    prompt_bool,
    prompt_choice,
    prompt_text,
)


class TestNonInteractive:

    def test_raises_when_stdin_not_tty(self):
        stdin = MagicMock()
        stdin.isatty.return_value = False
        with patch("mygit.lib.prompts.sys.stdin", stdin), \
                patch("builtins.input") as mock_input:
            with pytest.raises(NonInteractiveError):
                prompt_text("Commit message")
            mock_input.assert_not_called()

    def test_pause_also_requires_tty(self):
        stdin = MagicMock()
        stdin.isatty.return_value = False
        with patch("mygit.lib.prompts.sys.stdin", stdin):
            with pytest.raises(NonInteractiveError):
                pause()


class TestPromptText:

    @patch("builtins.input", return_value="  fix typo  ")
    def test_strips_answer(self, mock_input, tty):
        assert prompt_text("Commit message") == "fix typo"

    @patch("builtins.input", return_value="")
    def test_empty_uses_default(self, mock_input, tty):
        assert prompt_text("Branch", default="main") == "main"
        assert "[main]" in mock_input.call_args[0][0]

    @patch("builtins.input", side_effect=["   ", "", "real message"])
    def test_validation_reasks(self, mock_input, tty, capsys):
        value = prompt_text("Commit message", validate=non_blank("Commit message"))
        assert value == "real message"
        assert mock_input.call_count == 3
        assert "Commit message cannot be empty" in capsys.readouterr().out

    @patch("builtins.input", side_effect=EOFError)
    def test_eof_aborts(self, mock_input, tty):
        with pytest.raises(PromptAborted):
            prompt_text("Remote URL")

    @patch("builtins.input", side_effect=KeyboardInterrupt)
    def test_ctrl_c_aborts(self, mock_input, tty):
        with pytest.raises(PromptAborted):
            prompt_text("Remote URL")


class TestNonBlank:

    def test_accepts_text(self):
        assert non_blank("Name")("origin") is None

    def test_rejects_whitespace(self):
        assert non_blank("Name")("   ") == "Name cannot be empty"


class TestPromptChoice:

    CHOICES = [("main", "main (current)"), ("dev", "dev")]

    @patch("builtins.input", return_value="2")
    def test_selects_by_number(self, mock_input, tty):
        assert prompt_choice("Branch", self.CHOICES) == "dev"

    @patch("builtins.input", return_value="")
    def test_enter_selects_default(self, mock_input, tty, capsys):
        assert prompt_choice("Branch", self.CHOICES, default="main") == "main"
        out = capsys.readouterr().out
        assert "*1. main (current)" in out
        assert " 2. dev" in out

    @patch("builtins.input", side_effect=["", "x", "5", "1"])
    def test_reasks_on_invalid_input(self, mock_input, tty, capsys):
        assert prompt_choice("Branch", self.CHOICES) == "main"
        assert mock_input.call_count == 4
        out = capsys.readouterr().out
        assert "valid number" in out
        assert "between 1 and 2" in out

    @patch("builtins.input", return_value="1")
    def test_returns_non_string_values(self, mock_input, tty):
        sentinel = object()
        assert prompt_choice("Pick", [(sentinel, "thing")]) is sentinel


class TestPromptBool:

    @patch("builtins.input", return_value="")
    def test_default_false(self, mock_input, tty):
        assert prompt_bool("Merge?") is False
        assert "[y/N]" in mock_input.call_args[0][0]

    @patch("builtins.input", return_value="")
    def test_default_true(self, mock_input, tty):
        assert prompt_bool("Continue?", default=True) is True

    @patch("builtins.input", return_value="Yes")
    def test_yes(self, mock_input, tty):
        assert prompt_bool("Delete?") is True

    @patch("builtins.input", return_value="nope")
    def test_anything_else_is_no(self, mock_input, tty):
        assert prompt_bool("Delete?", default=True) is False
