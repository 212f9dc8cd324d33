"""Per-invocation request models passed from prompts to plan builders."""

from dataclasses import dataclass, field
from typing import Optional

from branchflow.models.core import MergeTarget, ReleaseTicket


@dataclass
class RunConfig:
    """CLI arguments bundled together."""

    command: str
    dry_run: bool = False
    debug: bool = False


@dataclass
class PullRequestRequest:
    """Resolved answers for the create-PR workflow."""

    branch: str  # as typed, before prefixing
    target: MergeTarget
    title: str
    ticket: Optional[ReleaseTicket] = None
    draft: bool = False
    dry_run: bool = False
    return_to: str = ""  # branch to check out afterwards; defaults to `branch`


@dataclass
class SyncRequest:
    """Resolved answers for the push/sync workflow."""

    branch: str
    force: bool
    targets: list[MergeTarget] = field(default_factory=list)
    delete_if_exists: bool = False
    sync_existing: bool = False
