"""CLI entry point and argument parsing."""

import argparse
import sys
from importlib.metadata import version as get_version
from typing import Callable, Optional

try:
    __version__ = get_version("branchflow")
except Exception:
    __version__ = "dev"

from branchflow.config import ConfigError, get_config_loaded_sources, load_workflow_config
from branchflow.models.core import WorkflowConfig
from branchflow.models.state import RunConfig
from branchflow.ui.output import NC, YELLOW, error, log
from branchflow.utils.debug import DEBUG_LOG
from branchflow.workflows import (
    create_pull_request,
    create_release_pr,
    create_stable_release_pr,
    create_working_branch,
    git_workflow,
    post_release,
)

Workflow = Callable[[WorkflowConfig, RunConfig], None]

# name -> (handler, legacy alias, help)
COMMANDS: dict[str, tuple[Workflow, Optional[str], str]] = {
    "create-working-branch": (
        create_working_branch,
        "wisdombase_create_working_branch",
        "Create a working branch from an up-to-date master",
    ),
    "create-pr": (
        create_pull_request,
        "wisdombase_create_pull_request",
        "Push a branch and open a pull request against develop, staging or master",
    ),
    "git-workflow": (
        git_workflow,
        "wisdombase_git_workflow",
        "Push a branch and merge it into its dev/ and stg/ integration branches",
    ),
    "post-release": (
        post_release,
        "wisdombase_post_release",
        "Promote release into master, staging and develop",
    ),
    "create-release-pr": (
        create_release_pr,
        None,
        "Open the release pull request",
    ),
    "create-stable-release-pr": (
        create_stable_release_pr,
        None,
        "Push a stable-<date> branch and open its pull request",
    ),
}

ALIASES = {alias: name for name, (_, alias, _) in COMMANDS.items() if alias}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="branchflow",
        description="Interactive branch, pull request and release workflows for one repository.",
        epilog="""
Every command asks for its inputs interactively, prints the git/gh commands it
runs, and stops at the first command that fails.

Config (later overrides earlier):
  bundled defaults < ~/.config/branchflow/config.yaml < .branchflow/config.yaml
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the planned commands without executing them",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Log every plan to {DEBUG_LOG}",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for name, (_, alias, help_text) in COMMANDS.items():
        subparsers.add_parser(name, aliases=[alias] if alias else [], help=help_text)
    return parser


def parse_args(argv: Optional[list[str]] = None) -> RunConfig:
    args = build_parser().parse_args(argv)
    return RunConfig(
        command=ALIASES.get(args.command, args.command),
        dry_run=args.dry_run,
        debug=args.debug,
    )


def log_config(config: WorkflowConfig, run_config: RunConfig) -> None:
    """Log where commands will run and which config files were applied."""
    log(f"Project: {config.project_path}")
    overrides = [s for s in get_config_loaded_sources() if s != "defaults"]
    if overrides:
        log(f"Config overrides: {', '.join(overrides)}")
    if run_config.dry_run:
        log(f"{YELLOW}DRY RUN MODE - no commands will be executed{NC}")
    if run_config.debug:
        log(f"Debug logging to {DEBUG_LOG}")


def main(argv: Optional[list[str]] = None) -> None:
    run_config = parse_args(argv)
    try:
        config = load_workflow_config()
    except (ConfigError, FileNotFoundError) as e:
        error(f"Config error: {e}")
        sys.exit(1)

    if not config.project_path.is_dir():
        error(f"Project path does not exist: {config.project_path}")
        sys.exit(1)

    log_config(config, run_config)
    handler, _, _ = COMMANDS[run_config.command]
    handler(config, run_config)


if __name__ == "__main__":
    main()
