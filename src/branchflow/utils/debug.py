"""Debug logging utilities."""

import json
import time
from pathlib import Path

from branchflow.models.state import RunConfig
from branchflow.ui.output import GRAY, MAGENTA, NC

DEBUG_LOG = Path(".branchflow/debug.log")


def debug_log(config_or_debug: RunConfig | bool, label: str, data) -> None:
    """Append a labelled block to the debug log if debug mode is enabled."""
    enabled = config_or_debug.debug if isinstance(config_or_debug, RunConfig) else config_or_debug
    if not enabled:
        return

    DEBUG_LOG.parent.mkdir(exist_ok=True)
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    with open(DEBUG_LOG, "a") as f:
        f.write(f"\n{'=' * 60}\n[{timestamp}] {label}\n{'=' * 60}\n")
        if isinstance(data, str):
            f.write(data)
        else:
            f.write(json.dumps(data, indent=2, default=str))
        f.write("\n")
    print(f"{MAGENTA}[debug]{NC} {label}  {GRAY}-> {DEBUG_LOG}{NC}")
