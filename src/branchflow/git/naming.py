"""Branch naming and ticket conventions.

Pure functions: no subprocess calls. Branch prefixes come from MergeTarget,
ticket prefixes and URL templates from WorkflowConfig.
"""

import re
from datetime import date
from typing import Optional

from branchflow.models.core import MergeTarget, ReleaseTicket, WorkflowConfig


def merge_target_for(choice: str) -> MergeTarget:
    """Map a single-letter choice (d/s/m) to its MergeTarget."""
    key = choice.strip().lower()
    for target in MergeTarget:
        if target.choice == key:
            return target
    raise ValueError(f"Unknown merge target: {choice!r}")


def qualified_branch_name(raw: str, target: MergeTarget) -> str:
    """Prepend the target's branch prefix, e.g. 'SWWB-1-x' -> 'dev/SWWB-1-x'.

    Callers qualify exactly once; the function does not detect an existing prefix.
    """
    raw = raw.strip()
    return f"{target.prefix}/{raw}" if target.prefix else raw


def prefix_pattern(config: WorkflowConfig) -> re.Pattern:
    return re.compile("(" + "|".join(re.escape(p) for p in config.ticket_prefixes) + ")")


def ticket_pattern(config: WorkflowConfig) -> re.Pattern:
    return re.compile(prefix_pattern(config).pattern + r"-\d+")


def extract_ticket(branch: str, config: WorkflowConfig) -> Optional[ReleaseTicket]:
    """First ticket token in a branch name as a linkable ReleaseTicket."""
    match = ticket_pattern(config).search(branch)
    if not match:
        return None
    issue_id = match.group(0)
    url = config.ticket_url.format(ticket=issue_id)
    return ReleaseTicket(issue_id=issue_id, link=f"[{issue_id}]({url})")


def ensure_title_has_ticket_prefix(title: str, branch: str, config: WorkflowConfig) -> str:
    """Prefix the title with the branch's ticket token unless it already names one.

    An empty title yields a bare "FDT-55-"; callers decide what to do with that.
    """
    if prefix_pattern(config).search(title):
        return title
    token = ticket_pattern(config).search(branch) or prefix_pattern(config).search(branch)
    if not token:
        return title
    return f"{token.group(0)}-{title}"


def pull_request_body(ticket: Optional[ReleaseTicket]) -> str:
    return ticket.link if ticket else ""


def release_title(environment: str, release_id: str, today: date) -> str:
    return f"Release {environment} - {today.isoformat()} - v{release_id}"


def release_tracker_link(release_id: str, config: WorkflowConfig) -> str:
    url = config.release_url.format(release_id=release_id)
    return f"[v{release_id}]({url})"


def stable_branch_name(today: date) -> str:
    return f"stable-{today.isoformat()}"


def unqualified_branch_name(name: str, target: MergeTarget) -> str:
    """Strip the target's prefix if the name already carries it, so qualifying stays single."""
    name = name.strip()
    if target.prefix and name.startswith(f"{target.prefix}/"):
        return name[len(target.prefix) + 1 :]
    return name
