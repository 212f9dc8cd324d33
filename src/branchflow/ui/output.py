"""Terminal output helpers with colors."""

import sys

# Colors
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
GRAY = "\033[90m"
MAGENTA = "\033[0;35m"
NC = "\033[0m"

TAG = "[branchflow]"


def log(msg: str) -> None:
    print(f"{BLUE}{TAG}{NC} {msg}")


def success(msg: str) -> None:
    print(f"{GREEN}{TAG}{NC} {msg}")


def warn(msg: str) -> None:
    print(f"{YELLOW}{TAG}{NC} {msg}")


def error(msg: str) -> None:
    print(f"{RED}{TAG}{NC} {msg}", file=sys.stderr)


def command_output(text: str, stream=None) -> None:
    """Echo captured tool output as-is, skipping empty captures."""
    text = text.rstrip("\n")
    if text:
        print(text, file=stream or sys.stdout)
