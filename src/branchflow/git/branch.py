"""Read-only git probes run directly in the project directory.

These feed plan decisions (current branch, existence checks, first commit
subject, dirty tree) and never appear in a plan themselves.
"""

import subprocess
from pathlib import Path
from typing import Optional


def _git(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    return subprocess.run(["git", *args], capture_output=True, text=True, cwd=cwd)


def _lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def get_current_branch(cwd: Path) -> str:
    """Get current git branch name ("" when detached or on failure)."""
    result = _git(["branch", "--show-current"], cwd)
    return result.stdout.strip() if result.returncode == 0 else ""


def list_branches_matching(pattern: str, cwd: Path) -> list[str]:
    """List local branches matching a pattern (e.g., 'dev/SWWB-1-*')."""
    result = _git(["branch", "--list", pattern], cwd)
    if result.returncode != 0:
        return []
    # Strip * for current, + for worktree
    return sorted(b.strip().lstrip("*+ ") for b in _lines(result.stdout))


def branch_exists(name: str, cwd: Path) -> bool:
    return name in list_branches_matching(name, cwd)


def derive_title_from_first_commit(branch: str, base: str, cwd: Path) -> str:
    """First line of the earliest non-merge commit message in base..branch, or ""."""
    # %s would fold a multi-line first paragraph into one line
    result = _git(["log", "--no-merges", "--reverse", "--format=%B", f"{base}..{branch}"], cwd)
    if result.returncode != 0:
        return ""
    lines = _lines(result.stdout)
    return lines[0].strip() if lines else ""


def get_uncommitted_changes(cwd: Path) -> Optional[list[str]]:
    """Tracked files with staged or unstaged modifications (None if git status failed)."""
    result = _git(["status", "--porcelain", "--untracked-files=no"], cwd)
    if result.returncode != 0:
        return None
    # Format: "XY filename" or "XY old -> new"
    return [line[2:].lstrip().split(" -> ")[-1] for line in _lines(result.stdout)]


def get_untracked_files(cwd: Path) -> Optional[list[str]]:
    result = _git(["ls-files", "--others", "--exclude-standard"], cwd)
    if result.returncode != 0:
        return None
    return [line.strip() for line in _lines(result.stdout)]
