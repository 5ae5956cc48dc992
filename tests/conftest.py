"""Shared fixtures for mygit tests."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from mygit.lib.config import MygitConfig
from mygit.session import Session


@pytest.fixture
def session():
    return Session(repo=Path("/repo"), config=MygitConfig())


@pytest.fixture
def tty():
    """Pretend stdin is an interactive terminal."""
    stdin = MagicMock()
    stdin.isatty.return_value = True
    with patch("mygit.lib.prompts.sys.stdin", stdin):
        yield stdin
