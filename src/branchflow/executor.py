"""Sequential, fail-fast execution of a command plan."""

import subprocess
import sys
from pathlib import Path
from typing import Callable

from branchflow.models.plan import CommandPlan, ExecutionResult, StepState
from branchflow.ui.output import GRAY, NC, command_output, error, log, warn

Runner = Callable[..., subprocess.CompletedProcess]


def describe_plan(plan: CommandPlan) -> str:
    """Numbered listing of a plan, one command per line."""
    width = len(str(len(plan)))
    lines = []
    for i, command in enumerate(plan, 1):
        note = f"  {GRAY}(allowed to fail){NC}" if command.best_effort else ""
        lines.append(f"  {i:>{width}}. {command.display()}{note}")
    return "\n".join(lines)


def run_command(result: ExecutionResult, cwd: Path, runner: Runner) -> ExecutionResult:
    """Run one command to completion and record its outcome on `result`."""
    result.state = StepState.RUNNING
    try:
        completed = runner(list(result.command.argv), capture_output=True, text=True, cwd=cwd)
    except FileNotFoundError as e:
        result.returncode = 127
        result.stderr = str(e)
    else:
        result.returncode = completed.returncode
        result.stdout = completed.stdout or ""
        result.stderr = completed.stderr or ""
    result.state = StepState.SUCCEEDED if result.ok else StepState.FAILED
    return result


def run_plan(
    plan: CommandPlan,
    cwd: Path,
    runner: Runner = subprocess.run,
    failure_hint: str = "",
) -> list[ExecutionResult]:
    """Run every command in order. The first non-best-effort failure exits with code 1.

    Commands already applied are left as they are; nothing is rolled back.
    """
    results: list[ExecutionResult] = []
    for command in plan:
        log(f"Executing: {command.display()}")
        result = run_command(ExecutionResult(command=command), cwd, runner)
        results.append(result)

        if result.ok:
            command_output(result.stdout)
            continue
        if command.best_effort:
            warn(command.failure_note or f"Ignoring failure of: {command.display()}")
            continue

        error(f"Command failed: {command.display()}")
        command_output(result.stderr, stream=sys.stderr)
        if failure_hint:
            warn(failure_hint)
        sys.exit(1)
    return results
