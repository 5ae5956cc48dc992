"""
Pull - Update the current branch from its upstream.
"""

from mygit import git
from mygit.lib import output


def show_pull_summary(result: git.GitResult) -> None:
    summary = git.parse_pull_summary(result.stdout)
    if summary.up_to_date:
        output.info("Already up to date")
    elif summary.changes:
        output.warn(
            f"{summary.changes} file(s) changed, "
            f"{summary.insertions} insertion(s), {summary.deletions} deletion(s)"
        )


def cmd_pull(session) -> bool:
    """Pull from the configured upstream. Returns True on success."""
    result = git.pull(session.repo)
    if not result.success:
        output.report_failure("Pull", result)
        return False

    output.success("Pull complete")
    show_pull_summary(result)
    return True
