"""Git remote operations."""

import re
from dataclasses import dataclass
from pathlib import Path

from mygit.git.runner import run_git, GitResult

# "origin\tgit@host:repo.git (fetch)", partial clones append " [blob:none]"
REMOTE_LINE = re.compile(r'^(\S+)\t(.*) \((fetch|push)\)(?: \[[^\]]*\])?$')

SHORTSTAT = re.compile(
    r'(\d+) files? changed'
    r'(?:, (\d+) insertions?\(\+\))?'
    r'(?:, (\d+) deletions?\(-\))?'
)


@dataclass
class Remote:
    """A configured remote."""
    name: str
    fetch_url: str = ""
    push_url: str = ""


@dataclass
class PullSummary:
    """Outcome of a pull, parsed from `git pull --stat` output."""
    changes: int = 0
    insertions: int = 0
    deletions: int = 0
    up_to_date: bool = False


def list_remotes(repo: Path) -> tuple[list[Remote] | None, GitResult]:
    """
    List configured remotes in the order git reports them.

    Returns:
        (remotes, result) - remotes is None when git failed
    """
    result = run_git(["remote", "-v"], repo)
    if not result.success:
        return None, result

    remotes: dict[str, Remote] = {}
    for line in result.stdout.splitlines():
        match = REMOTE_LINE.match(line)
        if not match:
            continue
        name, url, kind = match.groups()
        remote = remotes.setdefault(name, Remote(name=name))
        if kind == "fetch":
            remote.fetch_url = url
        else:
            remote.push_url = url
    return list(remotes.values()), result


def default_remote(remotes: list[Remote], preferred: str = "origin") -> str | None:
    """Pick the preferred remote if configured, else the first one."""
    for remote in remotes:
        if remote.name == preferred:
            return remote.name
    return remotes[0].name if remotes else None


def add_remote(repo: Path, name: str, url: str) -> GitResult:
    """Add a new remote."""
    return run_git(["remote", "add", name, url], repo)


def set_remote_url(repo: Path, name: str, url: str) -> GitResult:
    """Change the URL of an existing remote."""
    return run_git(["remote", "set-url", name, url], repo)


def remove_remote(repo: Path, name: str) -> GitResult:
    """Remove a remote and its remote-tracking branches."""
    return run_git(["remote", "remove", name], repo)


def pull(repo: Path) -> GitResult:
    """Pull the current branch from its configured upstream."""
    # No timeout: git may be waiting on a credential prompt
    return run_git(["pull", "--stat"], repo, timeout=None)


def push(worktree: Path, remote: str, branch: str) -> GitResult:
    """Push branch to remote."""
    return run_git(["push", remote, branch], worktree, timeout=None)


def parse_pull_summary(output: str) -> PullSummary:
    """Extract the change summary from pull output."""
    summary = PullSummary()
    if "Already up to date" in output or "Already up-to-date" in output:
        summary.up_to_date = True
        return summary

    match = SHORTSTAT.search(output)
    if match:
        summary.changes = int(match.group(1))
        summary.insertions = int(match.group(2) or 0)
        summary.deletions = int(match.group(3) or 0)
    return summary
