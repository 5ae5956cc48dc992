"""
Remote management - List, add, update and delete remotes.
"""

from enum import Enum

from mygit import git
from mygit.lib import output, prompts


class RemoteAction(Enum):
    ADD = "Add a remote"
    UPDATE = "Change a remote URL"
    DELETE = "Delete a remote"
    BACK = "Back"


def show_remotes(remotes: list[git.Remote]) -> None:
    if not remotes:
        output.warn("No remotes configured")
        return
    output.info("Remotes:")
    for remote in remotes:
        output.plain(f"  {remote.name}  {remote.fetch_url} (fetch)")
        if remote.push_url and remote.push_url != remote.fetch_url:
            output.plain(f"  {remote.name}  {remote.push_url} (push)")


def _choose_remote(message: str, remotes: list[git.Remote]) -> git.Remote:
    name = prompts.prompt_choice(
        message,
        [(r.name, f"{r.name}  {r.fetch_url}") for r in remotes],
    )
    return next(r for r in remotes if r.name == name)


def add_remote(session, remotes: list[git.Remote]) -> None:
    name = prompts.prompt_text(
        "Remote name",
        default=session.config.default_remote,
        validate=prompts.non_blank("Remote name"),
    )
    url = prompts.prompt_text("Remote URL", validate=prompts.non_blank("Remote URL"))

    result = git.add_remote(session.repo, name, url)
    if not result.success:
        output.report_failure("Adding remote", result)
        return
    output.success(f"Added remote '{name}' -> {url}")


def update_remote(session, remotes: list[git.Remote]) -> None:
    if not remotes:
        output.warn("No remotes to update")
        return

    remote = _choose_remote("Select remote to update:", remotes)
    url = prompts.prompt_text(
        "New URL",
        default=remote.fetch_url,
        validate=prompts.non_blank("Remote URL"),
    )

    result = git.set_remote_url(session.repo, remote.name, url)
    if not result.success:
        output.report_failure("Updating remote", result)
        return
    output.success(f"Remote '{remote.name}' now points to {url}")


def delete_remote(session, remotes: list[git.Remote]) -> None:
    if not remotes:
        output.warn("No remotes to delete")
        return

    remote = _choose_remote("Select remote to delete:", remotes)
    if not prompts.prompt_bool(f"Delete remote '{remote.name}'?", default=False):
        output.info("Delete cancelled")
        return

    result = git.remove_remote(session.repo, remote.name)
    if not result.success:
        output.report_failure("Deleting remote", result)
        return
    output.success(f"Deleted remote '{remote.name}'")


SUBCOMMANDS = {
    RemoteAction.ADD: add_remote,
    RemoteAction.UPDATE: update_remote,
    RemoteAction.DELETE: delete_remote,
}


def cmd_remote(session) -> None:
    remotes, result = git.list_remotes(session.repo)
    if remotes is None:
        output.report_failure("Listing remotes", result)
        return
    show_remotes(remotes)

    choice = prompts.prompt_choice(
        "Remote management:",
        [(action, action.value) for action in RemoteAction],
        default=RemoteAction.BACK,
    )
    handler = SUBCOMMANDS.get(choice)
    if handler is None:
        return
    handler(session, remotes)
