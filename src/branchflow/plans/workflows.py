"""Command plans for each workflow.

Everything here is pure: probe results (branch existence) are passed in as
callables, so plans can be inspected without touching a repository.
"""

from typing import Callable

from branchflow.git.naming import pull_request_body, qualified_branch_name
from branchflow.models.core import MergeTarget, WorkflowConfig
from branchflow.models.plan import Command, CommandPlan
from branchflow.models.state import PullRequestRequest, SyncRequest
from branchflow.plans.builder import PlanBuilder, gh, git

FORCE_FLAG = "--force-with-lease"
STASH_MESSAGE = "branchflow: post-release autostash"
DELETE_MISSING_NOTE = "Branch not found, nothing to delete"

# Order in which downstream integration branches are processed
DOWNSTREAM_TARGETS = (MergeTarget.DEVELOP, MergeTarget.STAGING)


def _push(remote: str, ref: str, force: bool = False) -> Command:
    return git("push", remote, ref, *([FORCE_FLAG] if force else []))


def working_branch_plan(branch: str, merge_with: str, config: WorkflowConfig) -> CommandPlan:
    """master -> new branch, optionally merging another branch in."""
    master = MergeTarget.MASTER.base
    merge_with = merge_with.strip()
    return (
        PlanBuilder()
        .add(git("checkout", master))
        .add(git("pull", config.remote, master))
        .add(git("checkout", "-b", branch.strip()))
        .step_if(merge_with, lambda: git("merge", merge_with))
        .build()
    )


def pull_request_plan(request: PullRequestRequest, config: WorkflowConfig) -> CommandPlan:
    """Push the qualified branch, open the PR, then return to the typed branch."""
    base = request.target.base
    head = qualified_branch_name(request.branch, request.target)
    return (
        PlanBuilder()
        .add(git("checkout", head))
        .add(git("push", config.remote, head))
        .add(
            gh(
                "pr", "create",
                "--title", request.title,
                "--body", pull_request_body(request.ticket),
                "--label", base,
                "--base", base,
                "--head", head,
                *(["--draft"] if request.draft else []),
                *(["--dry-run"] if request.dry_run else []),
            )
        )
        .add(git("checkout", request.return_to or request.branch.strip()))
        .build()
    )


def integration_branch_steps(
    target: MergeTarget,
    request: SyncRequest,
    exists: bool,
    config: WorkflowConfig,
) -> list[Command]:
    """Refresh base, (re)create or update {prefix}/{branch}, merge the branch in, push."""
    base = target.base
    integration = qualified_branch_name(request.branch, target)
    delete = exists and request.delete_if_exists
    reuse = exists and not request.delete_if_exists
    plan = (
        PlanBuilder()
        .add(git("checkout", base))
        .add(git("pull", config.remote, base))
        .step_if(
            delete,
            lambda: git(
                "branch", "-D", integration, best_effort=True, failure_note=DELETE_MISSING_NOTE
            ),
        )
        .step_if(not reuse, lambda: git("checkout", "-b", integration))
        .step_if(reuse, lambda: git("checkout", integration))
        .step_if(reuse and request.sync_existing, lambda: git("merge", base, "--no-edit"))
        .add(git("merge", request.branch, "--no-edit"))
        .add(_push(config.remote, integration, request.force))
        .build()
    )
    return list(plan)


def sync_plan(
    request: SyncRequest,
    branch_exists: Callable[[str], bool],
    config: WorkflowConfig,
) -> CommandPlan:
    """Push a branch and propagate it into the selected integration branches.

    `branch_exists` is consulted once per selected downstream target, at build time.
    """
    to_master = MergeTarget.MASTER in request.targets
    downstream = [t for t in DOWNSTREAM_TARGETS if t in request.targets]
    master = MergeTarget.MASTER.base

    builder = (
        PlanBuilder()
        .add(git("checkout", request.branch))
        .add(_push(config.remote, request.branch, request.force))
        .step_if(
            to_master,
            lambda: [
                git("pull", config.remote, master, "--no-rebase", "--no-edit"),
                _push(config.remote, request.branch, request.force),
            ],
        )
    )
    for target in downstream:
        exists = branch_exists(qualified_branch_name(request.branch, target))
        builder.extend(integration_branch_steps(target, request, exists, config))
    return builder.step_if(downstream, lambda: git("checkout", request.branch)).build()


def promote_steps(config: WorkflowConfig) -> list[Command]:
    """release -> master -> staging -> develop, pulling and pushing each."""
    remote = config.remote
    release = config.release_pr.base
    chain = [
        (release, MergeTarget.MASTER.base),
        (MergeTarget.MASTER.base, MergeTarget.STAGING.base),
        (MergeTarget.STAGING.base, MergeTarget.DEVELOP.base),
    ]
    steps = [git("checkout", release), git("pull", remote, release)]
    for source, dest in chain:
        steps += [
            git("checkout", dest),
            git("pull", remote, dest),
            git("merge", source, "--no-edit"),
            git("push", remote, dest),
        ]
    return steps


def post_release_plan(original_branch: str, stash: bool, config: WorkflowConfig) -> CommandPlan:
    """Promote release through every long-lived branch, then return home.

    When `stash` is set the plan stashes first and pops last. A failure in
    between halts the plan before the pop, leaving the stash for manual recovery.
    """
    stable = config.stable_release_pr.base
    return (
        PlanBuilder()
        .step_if(stash, lambda: [git("add", "-A"), git("stash", "push", "-m", STASH_MESSAGE)])
        .extend(promote_steps(config))
        .add(git("checkout", stable))
        .add(git("pull", config.remote, stable))
        .step_if(original_branch, lambda: git("checkout", original_branch))
        .step_if(stash, lambda: git("stash", "pop"))
        .build()
    )


def release_pr_plan(title: str, body: str, config: WorkflowConfig) -> CommandPlan:
    target = config.release_pr
    return (
        PlanBuilder()
        .add(
            gh(
                "pr", "create",
                "--title", title,
                "--body", body,
                "--base", target.base,
                "--head", target.head,
            )
        )
        .build()
    )


def stable_release_pr_plan(
    branch: str, generated: bool, title: str, body: str, config: WorkflowConfig
) -> CommandPlan:
    """Push the stable branch (cut from the release source when generated) and open its PR."""
    target = config.stable_release_pr
    ref = f"{target.head}:refs/heads/{branch}" if generated else branch
    return (
        PlanBuilder()
        .add(git("push", config.remote, ref))
        .add(
            gh(
                "pr", "create",
                "--title", title,
                "--body", body,
                "--base", target.base,
                "--head", branch,
            )
        )
        .build()
    )
