"""Command plan building."""

from branchflow.plans.builder import PlanBuilder, gh, git
from branchflow.plans.workflows import (
    post_release_plan,
    pull_request_plan,
    release_pr_plan,
    stable_release_pr_plan,
    sync_plan,
    working_branch_plan,
)

__all__ = [
    "PlanBuilder",
    "git",
    "gh",
    "working_branch_plan",
    "pull_request_plan",
    "sync_plan",
    "post_release_plan",
    "release_pr_plan",
    "stable_release_pr_plan",
]
