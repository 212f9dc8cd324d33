"""Tests for the workflow entry points (prompts -> plan -> executor)."""

import pytest
import time_machine

from branchflow.models.state import RunConfig
from branchflow.workflows import (
    create_pull_request,
    create_release_pr,
    create_stable_release_pr,
    create_working_branch,
    git_workflow,
    post_release,
)


@pytest.fixture
def run_plan(mocker):
    """Capture plans instead of executing them."""
    return mocker.patch("branchflow.workflows.common.run_plan", return_value=[])


def _executed(run_plan):
    plan = run_plan.call_args[0][0]
    return [" ".join(c.argv) for c in plan]


class TestCreateWorkingBranch:
    def test_plan(self, workflow_config, run_config, answers, run_plan):
        create_working_branch(workflow_config, run_config, ask=answers("", " SWWB-9-x ", "FDT-1"))
        assert _executed(run_plan) == [
            "git checkout master",
            "git pull origin master",
            "git checkout -b SWWB-9-x",
            "git merge FDT-1",
        ]
        assert run_plan.call_args[0][1] == workflow_config.project_path


class TestCreatePullRequest:
    def test_explicit_title_gets_ticket(
        self, workflow_config, run_config, answers, run_plan, mocker
    ):
        derive = mocker.patch("branchflow.workflows.branch.derive_title_from_first_commit")
        ask = answers("FDT-55-login", "x", "d", "fix login", "z", "n", "y")
        create_pull_request(workflow_config, run_config, ask=ask)

        derive.assert_not_called()
        plan = run_plan.call_args[0][0]
        gh = plan[2].argv
        assert gh[gh.index("--title") + 1] == "FDT-55-fix login"
        assert gh[gh.index("--body") + 1] == (
            "[FDT-55](https://share-wis.atlassian.net/browse/FDT-55)"
        )
        assert gh[gh.index("--head") + 1] == "dev/FDT-55-login"
        assert "--dry-run" in gh and "--draft" not in gh
        assert plan[-1].argv == ("git", "checkout", "FDT-55-login")

    def test_blank_title_uses_first_commit(
        self, workflow_config, run_config, answers, run_plan, mocker
    ):
        derive = mocker.patch(
            "branchflow.workflows.branch.derive_title_from_first_commit",
            return_value="Add search box",
        )
        create_pull_request(workflow_config, run_config, ask=answers("SWWB-3-s", "s", "", "y", "n"))

        derive.assert_called_once_with("stg/SWWB-3-s", "staging", workflow_config.project_path)
        gh = run_plan.call_args[0][0][2].argv
        assert gh[gh.index("--title") + 1] == "SWWB-3-Add search box"
        assert gh[gh.index("--label") + 1] == "staging"
        assert "--draft" in gh

    def test_current_branch_already_prefixed(
        self, workflow_config, run_config, answers, run_plan, mocker
    ):
        mocker.patch("branchflow.ui.prompt.get_current_branch", return_value="dev/FDT-2-x")
        create_pull_request(workflow_config, run_config, ask=answers("", "d", "title", "n", "n"))

        plan = run_plan.call_args[0][0]
        assert plan[0].argv == ("git", "checkout", "dev/FDT-2-x")
        assert plan[-1].argv == ("git", "checkout", "dev/FDT-2-x")

    def test_no_ticket_no_commits(self, workflow_config, run_config, answers, run_plan, mocker):
        mocker.patch(
            "branchflow.workflows.branch.derive_title_from_first_commit", return_value=""
        )
        create_pull_request(workflow_config, run_config, ask=answers("cleanup", "m", "", "n", "n"))
        gh = run_plan.call_args[0][0][2].argv
        assert gh[gh.index("--title") + 1] == ""
        assert gh[gh.index("--body") + 1] == ""
        assert gh[gh.index("--base") + 1] == "master"


class TestGitWorkflow:
    def test_both_targets(self, workflow_config, run_config, answers, run_plan, mocker):
        exists = mocker.patch("branchflow.workflows.branch.branch_exists", return_value=False)
        create = answers("FDT-1-x", "y", "a", "n", "n")
        git_workflow(workflow_config, run_config, ask=create)

        cmds = _executed(run_plan)
        assert "git checkout -b dev/FDT-1-x" in cmds
        assert "git checkout -b stg/FDT-1-x" in cmds
        assert cmds[1] == "git push origin FDT-1-x --force-with-lease"
        assert [c.args[0] for c in exists.call_args_list] == ["dev/FDT-1-x", "stg/FDT-1-x"]

    def test_delete_skips_sync_question(
        self, workflow_config, run_config, answers, run_plan, mocker
    ):
        mocker.patch("branchflow.workflows.branch.branch_exists", return_value=True)
        ask = answers("b", "n", "d", "y")
        git_workflow(workflow_config, run_config, ask=ask)
        assert ask.remaining == []
        assert "git branch -D dev/b" in _executed(run_plan)

    def test_master_asks_nothing_else(self, workflow_config, run_config, answers, run_plan):
        ask = answers("b", "n", "m")
        git_workflow(workflow_config, run_config, ask=ask)
        assert len(ask.asked) == 3
        assert _executed(run_plan)[-1] == "git push origin b"

    def test_prefixed_current_branch_rejected(
        self, workflow_config, run_config, answers, run_plan, mocker, capsys
    ):
        mocker.patch("branchflow.ui.prompt.get_current_branch", return_value="dev/foo")
        exists = mocker.patch("branchflow.workflows.branch.branch_exists")
        ask = answers("", "n", "a")
        with pytest.raises(SystemExit) as exc:
            git_workflow(workflow_config, run_config, ask=ask)
        assert exc.value.code == 1
        assert ask.remaining == []
        exists.assert_not_called()
        run_plan.assert_not_called()
        assert "dev/foo is already a develop integration branch" in capsys.readouterr().err

    def test_other_prefix_allowed_to_master(self, workflow_config, run_config, answers, run_plan):
        git_workflow(workflow_config, run_config, ask=answers("dev/foo", "n", "m"))
        assert _executed(run_plan)[0] == "git checkout dev/foo"


class TestPostRelease:
    @pytest.fixture
    def git_state(self, mocker):
        mocker.patch("branchflow.workflows.release.get_current_branch", return_value="FDT-4-x")
        changed = mocker.patch(
            "branchflow.workflows.release.get_uncommitted_changes", return_value=[]
        )
        untracked = mocker.patch(
            "branchflow.workflows.release.get_untracked_files", return_value=[]
        )
        return changed, untracked

    def test_clean_tree_no_prompt(self, workflow_config, answers, run_plan, git_state):
        post_release(workflow_config, RunConfig(command="post-release"), ask=answers())
        cmds = _executed(run_plan)
        assert cmds[0] == "git checkout release"
        assert cmds[-1] == "git checkout FDT-4-x"
        assert run_plan.call_args[1]["failure_hint"] == ""

    def test_dirty_declined_aborts(self, workflow_config, answers, run_plan, git_state, capsys):
        git_state[0].return_value = ["app.py"]
        with pytest.raises(SystemExit) as exc:
            post_release(workflow_config, RunConfig(command="post-release"), ask=answers("n"))
        assert exc.value.code == 1
        run_plan.assert_not_called()
        assert "Aborted" in capsys.readouterr().err

    def test_untracked_accepted_stashes(self, workflow_config, answers, run_plan, git_state):
        git_state[1].return_value = ["notes.txt"]
        post_release(workflow_config, RunConfig(command="post-release"), ask=answers("x", "y"))
        cmds = _executed(run_plan)
        assert cmds[:2] == ["git add -A", "git stash push -m branchflow: post-release autostash"]
        assert cmds[-1] == "git stash pop"
        assert len(cmds) == 2 + 14 + 3 + 1
        assert "git stash pop" in run_plan.call_args[1]["failure_hint"]

    def test_unreadable_status_still_asks(
        self, workflow_config, answers, run_plan, git_state, capsys
    ):
        git_state[0].return_value = None
        ask = answers("y")
        post_release(workflow_config, RunConfig(command="post-release"), ask=ask)
        assert ask.asked == ["Stash them and continue? (Y/N): "]
        assert _executed(run_plan)[0] == "git add -A"
        assert "Could not read the working tree status" in capsys.readouterr().out

    def test_unreadable_status_declined_aborts(self, workflow_config, answers, run_plan, git_state):
        git_state[1].return_value = None
        with pytest.raises(SystemExit):
            post_release(workflow_config, RunConfig(command="post-release"), ask=answers("n"))
        run_plan.assert_not_called()


class TestReleasePullRequests:
    @time_machine.travel("2026-10-19 12:00:00", tick=False)
    def test_release_pr_generated_title(self, workflow_config, answers, run_plan):
        create_release_pr(
            workflow_config, RunConfig(command="create-release-pr"), ask=answers("", "", "88")
        )
        gh = run_plan.call_args[0][0][0].argv
        assert gh[gh.index("--title") + 1] == "Release Production - 2026-10-19 - v88"
        assert gh[gh.index("--body") + 1] == (
            "Release: [v88](https://share-wis.atlassian.net/projects/SWWB/versions/88)"
        )

    def test_release_pr_explicit_title(self, workflow_config, answers, run_plan):
        create_release_pr(
            workflow_config, RunConfig(command="create-release-pr"), ask=answers("Big one", "9")
        )
        gh = run_plan.call_args[0][0][0].argv
        assert gh[gh.index("--title") + 1] == "Big one"

    @time_machine.travel("2026-10-19 12:00:00", tick=False)
    def test_stable_generated_confirmed(self, workflow_config, answers, run_plan):
        ask = answers("", "y", "", "5")
        create_stable_release_pr(
            workflow_config, RunConfig(command="create-stable-release-pr"), ask=ask
        )
        assert "stable-2026-10-19" in ask.asked[1]
        plan = run_plan.call_args[0][0]
        assert plan[0].argv == ("git", "push", "origin", "release:refs/heads/stable-2026-10-19")
        gh = plan[1].argv
        assert gh[gh.index("--title") + 1] == "Release Stable - 2026-10-19 - v5"

    def test_stable_generated_declined_aborts(self, workflow_config, answers, run_plan, mocker):
        plan_builder = mocker.patch("branchflow.workflows.release.stable_release_pr_plan")
        ask = answers("", "n")
        with pytest.raises(SystemExit) as exc:
            create_stable_release_pr(
                workflow_config, RunConfig(command="create-stable-release-pr"), ask=ask
            )
        assert exc.value.code == 1
        assert len(ask.asked) == 2
        plan_builder.assert_not_called()
        run_plan.assert_not_called()

    def test_stable_supplied_branch_skips_confirmation(self, workflow_config, answers, run_plan):
        ask = answers("stable-hotfix", "title", "3")
        create_stable_release_pr(
            workflow_config, RunConfig(command="create-stable-release-pr"), ask=ask
        )
        assert run_plan.call_args[0][0][0].argv == ("git", "push", "origin", "stable-hotfix")


class TestDryRun:
    def test_prints_plan_without_running(self, workflow_config, answers, run_plan, capsys):
        config = RunConfig(command="create-working-branch", dry_run=True)
        create_working_branch(workflow_config, config, ask=answers("b", ""))
        run_plan.assert_not_called()
        out = capsys.readouterr().out
        assert "DRY RUN" in out
        assert "3. git checkout -b b" in out
