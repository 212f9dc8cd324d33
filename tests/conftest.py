"""Shared test fixtures."""

from pathlib import Path

import pytest

from branchflow.models.core import ReleaseTarget, WorkflowConfig
from branchflow.models.state import RunConfig


@pytest.fixture
def workflow_config(tmp_path) -> WorkflowConfig:
    return WorkflowConfig(
        project_path=Path(tmp_path),
        remote="origin",
        ticket_prefixes=("SWWB", "FDT"),
        ticket_url="https://share-wis.atlassian.net/browse/{ticket}",
        release_url="https://share-wis.atlassian.net/projects/SWWB/versions/{release_id}",
        release_pr=ReleaseTarget(head="staging", base="release", environment="Production"),
        stable_release_pr=ReleaseTarget(head="release", base="stable", environment="Stable"),
    )


@pytest.fixture
def run_config():
    return RunConfig(command="create-pr")


@pytest.fixture
def answers():
    """Build a scripted prompt function: answers("a", "b") returns "a" then "b".

    The questions asked are recorded on the returned function as `.asked`.
    """

    def factory(*replies: str):
        queue = list(replies)
        asked: list[str] = []

        def ask(question: str) -> str:
            asked.append(question)
            if not queue:
                raise AssertionError(f"Unexpected prompt: {question}")
            return queue.pop(0)

        ask.asked = asked  # type: ignore[attr-defined]
        ask.remaining = queue  # type: ignore[attr-defined]
        return ask

    return factory


@pytest.fixture
def reset_config_cache():
    import branchflow.config.settings as settings

    settings._config = None
    settings._loaded_sources = []
    yield
    settings._config = None
    settings._loaded_sources = []
