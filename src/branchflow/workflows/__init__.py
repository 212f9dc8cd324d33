"""Workflow entry points: prompts -> naming -> plan -> executor."""

from branchflow.workflows.branch import create_pull_request, create_working_branch, git_workflow
from branchflow.workflows.release import (
    create_release_pr,
    create_stable_release_pr,
    post_release,
)

__all__ = [
    "create_working_branch",
    "create_pull_request",
    "git_workflow",
    "post_release",
    "create_release_pr",
    "create_stable_release_pr",
]
