"""
Push - Push a branch to a chosen remote.
"""

from mygit import git
from mygit.lib import output, prompts


def cmd_push(session) -> None:
    repo = session.repo

    remotes, result = git.list_remotes(repo)
    if remotes is None:
        output.report_failure("Listing remotes", result)
        return
    if not remotes:
        output.warn("No remotes configured")
        return

    remote = prompts.prompt_choice(
        "Select remote:",
        [(r.name, f"{r.name}  {r.push_url or r.fetch_url}") for r in remotes],
        default=git.default_remote(remotes, session.config.default_remote),
    )
    branch = prompts.prompt_text(
        "Branch to push",
        default=git.get_current_branch(repo) or "",
        validate=prompts.non_blank("Branch"),
    )

    result = git.push(repo, remote, branch)
    if not result.success:
        output.report_failure("Push", result)
        return
    output.success(f"Pushed {branch} to {remote}")
