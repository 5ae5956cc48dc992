"""Git commit operations."""

from pathlib import Path

from mygit.git.runner import run_git, GitResult


def stage_all(worktree: Path) -> GitResult:
    """Stage all changes (new, modified, deleted)."""
    return run_git(["add", "-A"], worktree)


def commit(worktree: Path, message: str) -> GitResult:
    """Create a commit with the given message."""
    return run_git(["commit", "-m", message], worktree)
