"""
Interactive session loop.

Shows the action menu, dispatches to the chosen handler and pauses for
acknowledgement, until the user exits.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from mygit import git
from mygit.commands import branch, commit, merge, pull, push, remote, status
from mygit.lib import output, prompts
from mygit.lib.config import MygitConfig

logger = logging.getLogger(__name__)


class Action(Enum):
    """Main menu entries, in display order."""
    STATUS = "Show status"
    COMMIT_SYNC = "Commit & sync (add, commit, pull, push)"
    PULL = "Pull"
    PUSH = "Push"
    BRANCH = "Switch branch"
    MERGE = "Merge a branch"
    REMOTE = "Manage remotes"
    EXIT = "Exit"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class Session:
    """The repository being operated on, built once at startup."""
    repo: Path
    config: MygitConfig = field(default_factory=MygitConfig)


HANDLERS = {
    Action.STATUS: status.cmd_status,
    Action.COMMIT_SYNC: commit.cmd_commit_sync,
    Action.PULL: pull.cmd_pull,
    Action.PUSH: push.cmd_push,
    Action.BRANCH: branch.cmd_branch,
    Action.MERGE: merge.cmd_merge,
    Action.REMOTE: remote.cmd_remote,
}


def show_current_branch(session: Session) -> None:
    """Print the current branch, omitting the line if unknown."""
    name = git.get_current_branch(session.repo)
    if name:
        output.info(f"Current branch: {name}")


def choose_action() -> Action:
    return prompts.prompt_choice(
        "What would you like to do?",
        [(action, action.label) for action in Action],
    )


def dispatch(session: Session, action: Action) -> None:
    """Run one handler. Aborted prompts are reported, not propagated."""
    handler = HANDLERS[action]
    logger.debug(f"Dispatching {action.name}")
    try:
        handler(session)
    except prompts.PromptAborted:
        output.warn("Cancelled")


def run_session(session: Session) -> int:
    """Loop over the menu until the user exits. Returns the exit code.

    NonInteractiveError propagates to the caller.
    """
    while True:
        output.plain()
        show_current_branch(session)
        try:
            action = choose_action()
        except prompts.PromptAborted:
            action = Action.EXIT

        if action is Action.EXIT:
            output.plain("Bye from mygit")
            return 0

        dispatch(session, action)
        try:
            prompts.pause()
        except prompts.PromptAborted:
            pass
