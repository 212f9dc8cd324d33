"""UI components for terminal prompts and output."""

from branchflow.ui.output import (
    BLUE,
    GRAY,
    GREEN,
    MAGENTA,
    NC,
    RED,
    YELLOW,
    command_output,
    error,
    log,
    success,
    warn,
)
from branchflow.ui.prompt import (
    ask_text,
    is_valid_choice,
    parse_yes_no,
    resolve_branch_name,
    resolve_choice,
    resolve_required_text,
    resolve_text,
    resolve_yes_no,
)

__all__ = [
    # Colors
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "GRAY",
    "MAGENTA",
    "NC",
    # Output
    "log",
    "success",
    "warn",
    "error",
    "command_output",
    # Prompts
    "ask_text",
    "is_valid_choice",
    "parse_yes_no",
    "resolve_branch_name",
    "resolve_choice",
    "resolve_required_text",
    "resolve_text",
    "resolve_yes_no",
]
