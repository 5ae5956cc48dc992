"""Git status operations."""

from dataclasses import dataclass, field
from pathlib import Path

from mygit.git.runner import run_git, GitResult


@dataclass
class StatusSummary:
    """Parsed `git status --porcelain=v2 --branch` output."""
    current: str | None = None  # None when HEAD is detached
    tracking: str | None = None
    ahead: int = 0
    behind: int = 0
    modified: list[str] = field(default_factory=list)
    untracked: list[str] = field(default_factory=list)
    staged: list[str] = field(default_factory=list)
    conflicted: list[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not (self.modified or self.staged or self.untracked or self.conflicted)


def is_work_tree(path: Path) -> bool:
    """Check whether path is inside a git working tree."""
    result = run_git(["rev-parse", "--is-inside-work-tree"], path)
    return result.success and result.stdout.strip() == "true"


def get_status(worktree: Path) -> tuple[StatusSummary | None, GitResult]:
    """
    Get branch and file status of the working tree.

    Returns:
        (summary, result) - summary is None when git failed
    """
    result = run_git(["status", "--porcelain=v2", "--branch", "-z"], worktree)
    if not result.success:
        return None, result
    return parse_status(result.stdout), result


def parse_status(output: str) -> StatusSummary:
    """Parse NUL-separated porcelain v2 status output.

    Entry formats:
        "# branch.head <name>"          header lines
        "1 XY sub mH mI mW hH hI path"  ordinary change
        "2 XY ... Xscore path\\0orig"   rename/copy, original path in next entry
        "u XY ... path"                 unmerged
        "? path"                        untracked
    """
    summary = StatusSummary()
    entries = output.split('\0')
    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1
        if not entry:
            continue

        kind = entry[0]
        if kind == '#':
            _parse_header(summary, entry)
        elif kind == '?':
            summary.untracked.append(entry[2:])
        elif kind == 'u':
            summary.conflicted.append(entry.split(' ', 10)[-1])
        elif kind in ('1', '2'):
            fields = entry.split(' ', 9 if kind == '2' else 8)
            xy = fields[1]
            path = fields[-1]
            if kind == '2':
                i += 1  # skip original path
            if xy[0] != '.':
                summary.staged.append(path)
            if xy[1] != '.':
                summary.modified.append(path)

    return summary


def _parse_header(summary: StatusSummary, entry: str) -> None:
    parts = entry.split(' ')
    if len(parts) < 3:
        return
    key, values = parts[1], parts[2:]
    if key == "branch.head":
        summary.current = None if values[0] == "(detached)" else values[0]
    elif key == "branch.upstream":
        summary.tracking = values[0]
    elif key == "branch.ab" and len(values) == 2:
        try:
            summary.ahead = int(values[0].lstrip('+'))
            summary.behind = int(values[1].lstrip('-'))
        except ValueError:
            pass
