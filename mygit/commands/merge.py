"""
Merge - Merge another local branch into the current one.
"""

from mygit import git
from mygit.lib import output, prompts


def cmd_merge(session) -> None:
    repo = session.repo

    branches, result = git.list_local_branches(repo)
    if branches is None:
        output.report_failure("Listing branches", result)
        return

    current = branches.current
    candidates = [name for name in branches.all if name != current]
    if not candidates:
        output.warn("No other branches to merge")
        return

    source = prompts.prompt_choice(
        "Select branch to merge:",
        [(name, name) for name in candidates],
    )
    into = current or "HEAD"
    if not prompts.prompt_bool(f"Merge '{source}' into '{into}'?", default=False):
        output.info("Merge cancelled")
        return

    result = git.merge_branch(repo, source)
    if not result.success:
        output.report_failure("Merge", result)
        conflicts = git.get_conflicted_files(repo)
        if conflicts:
            output.file_list("Conflicted", conflicts, "bold red")
            output.detail("Resolve the conflicts and commit, or run 'git merge --abort'")
        return
    output.success(f"Merged '{source}' into '{into}'")
