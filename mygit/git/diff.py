"""Git diff operations."""

from pathlib import Path

from mygit.git.runner import run_git


def get_conflicted_files(worktree: Path) -> list[str]:
    """Get list of files with unresolved conflicts."""
    result = run_git(["diff", "--name-only", "--diff-filter=U"], worktree)
    return [f.strip() for f in result.stdout.splitlines() if f.strip()]
