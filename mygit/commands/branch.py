"""
Branch management - List local branches and switch between them.
"""

from mygit import git
from mygit.lib import output, prompts


def branch_choices(branches: git.BranchSummary) -> list[tuple[str, str]]:
    """Menu entries for local branches, current one marked."""
    return [
        (name, f"{name} (current)" if name == branches.current else name)
        for name in branches.all
    ]


def cmd_branch(session) -> None:
    branches, result = git.list_local_branches(session.repo)
    if branches is None:
        output.report_failure("Listing branches", result)
        return
    if not branches.all:
        output.warn("No local branches yet")
        return

    target = prompts.prompt_choice(
        "Select branch to switch to:",
        branch_choices(branches),
        default=branches.current,
    )
    if target == branches.current:
        output.info(f"Already on '{target}'")
        return

    result = git.checkout_branch(session.repo, target)
    if not result.success:
        output.report_failure("Checkout", result)
        return
    output.success(f"Switched to branch '{target}'")
