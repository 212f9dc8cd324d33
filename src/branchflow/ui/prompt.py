"""Interactive prompts with re-ask-until-valid loops.

Validation (is_valid_choice, parse_yes_no) is pure; the resolve_* loops own
the I/O and take the prompt function as a parameter so tests can script answers.
"""

import sys
from typing import Callable, Iterable, Optional

from branchflow.git.branch import get_current_branch
from branchflow.models.core import WorkflowConfig

Ask = Callable[[str], str]


def ask_text(question: str) -> str:
    """Read one line from the terminal. EOF or Ctrl-C aborts the process."""
    try:
        return input(question)
    except (EOFError, KeyboardInterrupt):
        print()
        sys.exit(1)


def is_valid_choice(answer: str, allowed: Iterable[str]) -> bool:
    return answer.strip().lower() in {a.lower() for a in allowed}


def parse_yes_no(answer: str, allow_empty_as_no: bool = False) -> Optional[bool]:
    """'y' -> True, 'n' -> False, '' -> False if allowed, else None (invalid)."""
    answer = answer.strip().lower()
    if answer == "y":
        return True
    if answer == "n":
        return False
    if answer == "" and allow_empty_as_no:
        return False
    return None


def resolve_text(question: str, ask: Ask = ask_text) -> str:
    return ask(question).strip()


def resolve_required_text(question: str, ask: Ask = ask_text) -> str:
    answer = ""
    while not answer:
        answer = ask(question).strip()
    return answer


def resolve_choice(question: str, allowed: Iterable[str], ask: Ask = ask_text) -> str:
    """Ask until the lower-cased answer is one of `allowed`."""
    allowed = [a.lower() for a in allowed]
    while True:
        answer = ask(question)
        if is_valid_choice(answer, allowed):
            return answer.strip().lower()


def resolve_yes_no(question: str, allow_empty_as_no: bool = False, ask: Ask = ask_text) -> bool:
    while True:
        parsed = parse_yes_no(ask(question), allow_empty_as_no)
        if parsed is not None:
            return parsed


def resolve_branch_name(
    config: WorkflowConfig,
    question: str = "Enter the branch name (blank for current branch): ",
    ask: Ask = ask_text,
) -> str:
    """Trimmed branch name; blank falls back to the checked-out branch."""
    name = ask(question).strip()
    if name:
        return name
    return get_current_branch(config.project_path)
