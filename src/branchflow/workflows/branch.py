"""Day-to-day branch workflows: working branch, pull request, push/sync."""

import sys

from branchflow.git.branch import branch_exists, derive_title_from_first_commit
from branchflow.git.naming import (
    ensure_title_has_ticket_prefix,
    extract_ticket,
    merge_target_for,
    qualified_branch_name,
    unqualified_branch_name,
)
from branchflow.models.core import MergeTarget, WorkflowConfig
from branchflow.models.state import PullRequestRequest, RunConfig, SyncRequest
from branchflow.plans.workflows import pull_request_plan, sync_plan, working_branch_plan
from branchflow.ui.output import error, log, warn
from branchflow.ui.prompt import (
    Ask,
    ask_text,
    resolve_branch_name,
    resolve_choice,
    resolve_required_text,
    resolve_text,
    resolve_yes_no,
)
from branchflow.workflows.common import execute

PUSH_CHOICES = {
    "d": [MergeTarget.DEVELOP],
    "s": [MergeTarget.STAGING],
    "a": [MergeTarget.DEVELOP, MergeTarget.STAGING],
    "m": [MergeTarget.MASTER],
}


def create_working_branch(
    config: WorkflowConfig, run_config: RunConfig, ask: Ask = ask_text
) -> None:
    branch = resolve_required_text("Enter the branch name: ", ask)
    merge_with = resolve_text("Enter the branch to merge with (can be blank): ", ask)
    execute(working_branch_plan(branch, merge_with, config), config, run_config)


def resolve_pr_title(title: str, head: str, base: str, config: WorkflowConfig) -> str:
    """Explicit title > first commit subject in base..head, then ticket-prefix it."""
    if not title:
        title = derive_title_from_first_commit(head, base, config.project_path)
        if title:
            log(f"Using first commit message as title: {title}")
        else:
            warn(f"No commits found in {base}..{head}, title will be empty")
    return ensure_title_has_ticket_prefix(title, head, config)


def create_pull_request(
    config: WorkflowConfig, run_config: RunConfig, ask: Ask = ask_text
) -> None:
    typed = resolve_branch_name(config, ask=ask)
    target = merge_target_for(
        resolve_choice("Merge to (D: develop, S: staging, M: master): ", ["d", "s", "m"], ask)
    )
    title = resolve_text("Enter the PR title (Leave blank to use first commit message): ", ask)
    draft = resolve_yes_no("Create a draft PR? (Y/N): ", ask=ask)
    dry_run = resolve_yes_no("Dry run? (Y/N): ", ask=ask)

    branch = unqualified_branch_name(typed, target)
    head = qualified_branch_name(branch, target)
    request = PullRequestRequest(
        branch=branch,
        target=target,
        title=resolve_pr_title(title, head, target.base, config),
        ticket=extract_ticket(head, config),
        draft=draft,
        dry_run=dry_run,
        return_to=typed,
    )
    execute(pull_request_plan(request, config), config, run_config)


def git_workflow(config: WorkflowConfig, run_config: RunConfig, ask: Ask = ask_text) -> None:
    branch = resolve_branch_name(config, ask=ask)
    force = resolve_yes_no("Do you want to force push? (Y/N): ", ask=ask)
    push_to = resolve_choice(
        "Push to (D: develop, S: staging, A: both, M: master): ", list(PUSH_CHOICES), ask
    )
    request = SyncRequest(branch=branch, force=force, targets=list(PUSH_CHOICES[push_to]))
    for target in request.targets:
        # Pushing dev/foo to develop would otherwise create dev/dev/foo
        if unqualified_branch_name(branch, target) != branch.strip():
            error(
                f"{branch} is already a {target.base} integration branch. "
                "Run git-workflow from the working branch instead."
            )
            sys.exit(1)
    if push_to != "m":
        request.delete_if_exists = resolve_yes_no("Delete branch if exists? (Y/N): ", ask=ask)
        if not request.delete_if_exists:
            request.sync_existing = resolve_yes_no(
                "Merge the latest base into an existing branch? (Y/N): ", ask=ask
            )

    plan = sync_plan(request, lambda name: branch_exists(name, config.project_path), config)
    execute(plan, config, run_config)
