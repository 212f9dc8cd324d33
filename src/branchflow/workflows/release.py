"""Release workflows: post-release promote, release PR, stable release PR."""

import sys
from datetime import date

from branchflow.git.branch import get_current_branch, get_uncommitted_changes, get_untracked_files
from branchflow.git.naming import release_title, release_tracker_link, stable_branch_name
from branchflow.models.core import ReleaseTarget, WorkflowConfig
from branchflow.models.state import RunConfig
from branchflow.plans.workflows import post_release_plan, release_pr_plan, stable_release_pr_plan
from branchflow.ui.output import GRAY, NC, error, warn
from branchflow.ui.prompt import (
    Ask,
    ask_text,
    resolve_required_text,
    resolve_text,
    resolve_yes_no,
)
from branchflow.workflows.common import execute

STASH_HINT = (
    "Your local changes are still stashed. "
    "Run `git stash pop` once the repository is sorted out."
)
MAX_LISTED_FILES = 10


def _warn_dirty(files: list[str]) -> None:
    warn(f"Working tree has {len(files)} uncommitted or untracked files:")
    for path in files[:MAX_LISTED_FILES]:
        print(f"  {GRAY}{path}{NC}")
    if len(files) > MAX_LISTED_FILES:
        print(f"  {GRAY}... and {len(files) - MAX_LISTED_FILES} more{NC}")


def post_release(config: WorkflowConfig, run_config: RunConfig, ask: Ask = ask_text) -> None:
    cwd = config.project_path
    original = get_current_branch(cwd)
    changed = get_uncommitted_changes(cwd)
    untracked = get_untracked_files(cwd)

    unknown = changed is None or untracked is None
    if unknown:
        warn("Could not read the working tree status, it may have local changes.")
    elif changed or untracked:
        _warn_dirty(changed + untracked)

    stash = False
    if unknown or changed or untracked:
        stash = resolve_yes_no("Stash them and continue? (Y/N): ", ask=ask)
        if not stash:
            error("Aborted: commit or stash your changes first.")
            sys.exit(1)

    execute(
        post_release_plan(original, stash, config),
        config,
        run_config,
        failure_hint=STASH_HINT if stash else "",
    )


def _release_pr_text(target: ReleaseTarget, config: WorkflowConfig, ask: Ask) -> tuple[str, str]:
    """(title, body) for a release PR; blank title is synthesized from today's date."""
    title = resolve_text("Enter the PR title (Leave blank to generate): ", ask)
    release_id = resolve_required_text("Enter the release ID: ", ask)
    if not title:
        title = release_title(target.environment, release_id, date.today())
    body = f"Release: {release_tracker_link(release_id, config)}"
    return title, body


def create_release_pr(config: WorkflowConfig, run_config: RunConfig, ask: Ask = ask_text) -> None:
    title, body = _release_pr_text(config.release_pr, config, ask)
    execute(release_pr_plan(title, body, config), config, run_config)


def create_stable_release_pr(
    config: WorkflowConfig, run_config: RunConfig, ask: Ask = ask_text
) -> None:
    branch = resolve_text("Enter the stable branch name (Leave blank to generate): ", ask)
    generated = not branch
    if generated:
        branch = stable_branch_name(date.today())
        if not resolve_yes_no(f"Use branch name {branch}? (Y/N): ", ask=ask):
            error("Aborted: no branch name confirmed.")
            sys.exit(1)

    title, body = _release_pr_text(config.stable_release_pr, config, ask)
    execute(stable_release_pr_plan(branch, generated, title, body, config), config, run_config)
