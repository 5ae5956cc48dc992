"""Git operations for mygit.

Every stateful action is delegated to the git binary through run_git().

Return type conventions:
- Functions returning GitResult: Caller must check .success before using output.
  Examples: stage_all(), commit(), pull(), push()
- Functions returning (parsed, GitResult): parsed is None when git failed.
  Examples: get_status(), list_local_branches(), list_remotes()
- Functions returning bool or a plain value: False/None/[] on failure.
  Examples: is_work_tree(), get_current_branch(), get_conflicted_files()
"""

from mygit.git.runner import (
    GitResult,
    run_git,
)
from mygit.git.status import (
    StatusSummary,
    is_work_tree,
    get_status,
    parse_status,
)
from mygit.git.diff import (
    get_conflicted_files,
)
from mygit.git.branch import (
    BranchSummary,
    get_current_branch,
    list_local_branches,
    checkout_branch,
    merge_branch,
)
from mygit.git.commit import (
    stage_all,
    commit,
)
from mygit.git.remote import (
    Remote,
    PullSummary,
    list_remotes,
    default_remote,
    add_remote,
    set_remote_url,
    remove_remote,
    pull,
    push,
    parse_pull_summary,
)

__all__ = [
    # runner
    "GitResult",
    "run_git",
    # status
    "StatusSummary",
    "is_work_tree",
    "get_status",
    "parse_status",
    # diff
    "get_conflicted_files",
    # branch
    "BranchSummary",
    "get_current_branch",
    "list_local_branches",
    "checkout_branch",
    "merge_branch",
    # commit
    "stage_all",
    "commit",
    # remote
    "Remote",
    "PullSummary",
    "list_remotes",
    "default_remote",
    "add_remote",
    "set_remote_url",
    "remove_remote",
    "pull",
    "push",
    "parse_pull_summary",
]
