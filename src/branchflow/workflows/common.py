"""Shared tail of every workflow: log, show or run the plan, report."""

import time

from branchflow.executor import describe_plan, run_plan
from branchflow.models.core import WorkflowConfig
from branchflow.models.plan import CommandPlan
from branchflow.models.state import RunConfig
from branchflow.ui.output import NC, YELLOW, log, success
from branchflow.utils.debug import debug_log
from branchflow.utils.formatting import fmt_duration


def execute(
    plan: CommandPlan,
    config: WorkflowConfig,
    run_config: RunConfig,
    failure_hint: str = "",
) -> None:
    debug_log(
        run_config,
        f"{run_config.command} plan",
        {"cwd": str(config.project_path), "commands": plan.argvs()},
    )
    if run_config.dry_run:
        log(f"{YELLOW}DRY RUN{NC} - {len(plan)} planned commands in {config.project_path}:")
        print(describe_plan(plan))
        return

    start = time.time()
    run_plan(plan, config.project_path, failure_hint=failure_hint)
    success(f"Done! ({fmt_duration(time.time() - start)})")
