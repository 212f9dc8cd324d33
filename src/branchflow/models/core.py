"""Core domain models: merge targets, tickets, and workflow config."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class MergeTarget(Enum):
    """Where a piece of work is headed.

    Each member carries (choice letter, branch prefix, base branch). Master-bound
    work lives on unprefixed branches.
    """

    DEVELOP = ("d", "dev", "develop")
    STAGING = ("s", "stg", "staging")
    MASTER = ("m", "", "master")

    def __init__(self, choice: str, prefix: str, base: str) -> None:
        self.choice = choice
        self.prefix = prefix
        self.base = base


@dataclass(frozen=True)
class ReleaseTicket:
    """Issue tracker reference found in a branch name."""

    issue_id: str
    link: str  # markdown: [ID](url)


@dataclass(frozen=True)
class ReleaseTarget:
    """Branches and label used by one of the release PR workflows."""

    head: str
    base: str
    environment: str


@dataclass(frozen=True)
class WorkflowConfig:
    """Immutable settings shared by every workflow for one process."""

    project_path: Path
    remote: str
    ticket_prefixes: tuple[str, ...]
    ticket_url: str
    release_url: str
    release_pr: ReleaseTarget
    stable_release_pr: ReleaseTarget
