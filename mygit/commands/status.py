"""
Status - Show branch, tracking and working tree state.
"""

from mygit import git
from mygit.lib import output


def cmd_status(session) -> None:
    """Print branch, upstream, ahead/behind and changed file lists."""
    status, result = git.get_status(session.repo)
    if status is None:
        output.report_failure("Status", result)
        return

    output.success(f"Branch:   {status.current or 'detached HEAD'}")
    output.info(f"Tracking: {status.tracking or 'none'}")
    output.warn(f"Ahead: {status.ahead}, behind: {status.behind}")

    if status.is_clean:
        output.success("Working tree clean")
        return

    if status.staged:
        output.file_list("Staged", status.staged, "green")
    if status.modified:
        output.file_list("Modified", status.modified, "red")
    if status.untracked:
        output.file_list("Untracked", status.untracked, "yellow")
    if status.conflicted:
        output.file_list("Conflicted", status.conflicted, "bold red")
