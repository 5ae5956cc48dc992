"""Git branch operations."""

from dataclasses import dataclass, field
from pathlib import Path

from mygit.git.runner import run_git, GitResult


@dataclass
class BranchSummary:
    """Local branches and the one currently checked out."""
    all: list[str] = field(default_factory=list)
    current: str | None = None


def get_current_branch(worktree: Path) -> str | None:
    """Get the current branch name, or None if detached HEAD."""
    result = run_git(["branch", "--show-current"], worktree)
    if result.success:
        return result.stdout.strip() or None
    return None


def list_local_branches(worktree: Path) -> tuple[BranchSummary | None, GitResult]:
    """
    List local branches.

    Returns:
        (summary, result) - summary is None when git failed
    """
    result = run_git(
        ["for-each-ref", "--format=%(HEAD)%(refname:short)", "refs/heads"],
        worktree,
    )
    if not result.success:
        return None, result

    summary = BranchSummary()
    for line in result.stdout.splitlines():
        if len(line) < 2:
            continue
        # %(HEAD) is "*" for the checked-out branch, " " otherwise
        name = line[1:]
        summary.all.append(name)
        if line[0] == "*":
            summary.current = name
    return summary, result


def checkout_branch(worktree: Path, branch: str) -> GitResult:
    """Checkout a branch."""
    return run_git(["checkout", branch], worktree)


def merge_branch(worktree: Path, branch: str) -> GitResult:
    """Merge branch into the current branch."""
    return run_git(["merge", branch], worktree, timeout=None)
