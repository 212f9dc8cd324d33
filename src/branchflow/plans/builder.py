"""Declarative command plan builder.

Steps are appended in call order; conditional steps are given as a
(condition, factory) pair so the factory only runs when the step applies.
"""

from typing import Callable, Iterable, Union

from branchflow.models.plan import Command, CommandPlan

StepFactory = Callable[[], Union[Command, Iterable[Command]]]


def git(*args: str, **kwargs) -> Command:
    return Command(argv=("git", *args), **kwargs)


def gh(*args: str, **kwargs) -> Command:
    return Command(argv=("gh", *args), **kwargs)


class PlanBuilder:
    def __init__(self) -> None:
        self._commands: list[Command] = []
        self._built = False

    def _append(self, command: Command) -> None:
        if self._built:
            raise RuntimeError("Plan already built")
        self._commands.append(command)

    def add(self, command: Command) -> "PlanBuilder":
        self._append(command)
        return self

    def step(self, *argv: str, best_effort: bool = False, failure_note: str = "") -> "PlanBuilder":
        return self.add(
            Command(argv=tuple(argv), best_effort=best_effort, failure_note=failure_note)
        )

    def extend(self, commands: Iterable[Command]) -> "PlanBuilder":
        for command in commands:
            self._append(command)
        return self

    def step_if(self, condition: object, factory: StepFactory) -> "PlanBuilder":
        if condition:
            produced = factory()
            if isinstance(produced, Command):
                self._append(produced)
            else:
                self.extend(produced)
        return self

    def build(self) -> CommandPlan:
        self._built = True
        return CommandPlan(tuple(self._commands))
