"""Data models for branchflow."""

from branchflow.models.core import MergeTarget, ReleaseTarget, ReleaseTicket, WorkflowConfig
from branchflow.models.plan import Command, CommandPlan, ExecutionResult, StepState
from branchflow.models.state import PullRequestRequest, RunConfig, SyncRequest

__all__ = [
    # Core
    "MergeTarget",
    "ReleaseTarget",
    "ReleaseTicket",
    "WorkflowConfig",
    # Plan
    "Command",
    "CommandPlan",
    "ExecutionResult",
    "StepState",
    # State
    "PullRequestRequest",
    "RunConfig",
    "SyncRequest",
]
