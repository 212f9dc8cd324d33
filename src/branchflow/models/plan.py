"""Command plan and execution result models."""

import shlex
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional


class StepState(Enum):
    """Lifecycle of a single planned command. FAILED ends the whole plan."""

    PENDING = auto()
    RUNNING = auto()
    SUCCEEDED = auto()
    FAILED = auto()


@dataclass(frozen=True)
class Command:
    """One external invocation as an argument vector (never a shell string)."""

    argv: tuple[str, ...]
    best_effort: bool = False  # failure is reported but does not stop the plan
    failure_note: str = ""

    def display(self) -> str:
        return shlex.join(self.argv)


@dataclass(frozen=True)
class CommandPlan:
    """Ordered, immutable list of commands for one workflow run."""

    commands: tuple[Command, ...] = ()

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __getitem__(self, index: int) -> Command:
        return self.commands[index]

    def argvs(self) -> list[list[str]]:
        return [list(c.argv) for c in self.commands]


@dataclass
class ExecutionResult:
    """Captured outcome of running one command."""

    command: Command
    stdout: str = ""
    stderr: str = ""
    returncode: Optional[int] = None
    state: StepState = StepState.PENDING

    @property
    def ok(self) -> bool:
        return self.returncode == 0
