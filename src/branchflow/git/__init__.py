"""Git probes and branch naming conventions."""

from branchflow.git.branch import (
    branch_exists,
    derive_title_from_first_commit,
    get_current_branch,
    get_uncommitted_changes,
    get_untracked_files,
    list_branches_matching,
)
from branchflow.git.naming import (
    ensure_title_has_ticket_prefix,
    extract_ticket,
    merge_target_for,
    pull_request_body,
    qualified_branch_name,
    release_title,
    release_tracker_link,
    stable_branch_name,
    unqualified_branch_name,
)

__all__ = [
    # Probes
    "get_current_branch",
    "list_branches_matching",
    "branch_exists",
    "derive_title_from_first_commit",
    "get_uncommitted_changes",
    "get_untracked_files",
    # Naming
    "merge_target_for",
    "qualified_branch_name",
    "extract_ticket",
    "ensure_title_has_ticket_prefix",
    "pull_request_body",
    "release_title",
    "release_tracker_link",
    "stable_branch_name",
    "unqualified_branch_name",
]
