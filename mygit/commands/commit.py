"""
Commit & sync - Stage everything, commit, pull, then push.

A failed pull stops the sequence so unreconciled history is never pushed.
"""

import logging

from mygit import git
from mygit.commands.pull import show_pull_summary
from mygit.lib import output, prompts

logger = logging.getLogger(__name__)


def cmd_commit_sync(session) -> None:
    repo = session.repo

    status, result = git.get_status(repo)
    if status is None:
        output.report_failure("Status", result)
        return

    if status.is_clean:
        output.warn("Nothing to commit, working tree clean")
        return

    message = prompts.prompt_text("Commit message", validate=prompts.non_blank("Commit message"))

    result = git.stage_all(repo)
    if not result.success:
        output.report_failure("Staging", result)
        return

    result = git.commit(repo, message)
    if not result.success:
        output.report_failure("Commit", result)
        return
    output.success("Committed")

    branch = status.current
    if not branch:
        output.warn("HEAD is detached, skipping pull and push")
        return

    result = git.pull(repo)
    if not result.success:
        output.report_failure("Pull", result)
        output.warn("Push skipped until the pull succeeds")
        return
    output.success("Synced with remote")
    show_pull_summary(result)

    remotes, result = git.list_remotes(repo)
    if remotes is None:
        output.report_failure("Listing remotes", result)
        return

    remote = git.default_remote(remotes, session.config.default_remote)
    if remote is None:
        output.warn("No remotes configured, skipping push")
        return

    logger.info(f"Pushing {branch} to {remote}")
    result = git.push(repo, remote, branch)
    if not result.success:
        output.report_failure("Push", result)
        return
    output.success(f"Pushed to {remote}/{branch}")
