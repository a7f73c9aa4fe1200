from pathlib import Path
from types import SimpleNamespace

import pytest

import gotter.commands.remote as remote_cmd
from gotter.errors import NoOriginFoundError
from tests.gotter.helpers import REMOTE_LISTING, FakeRunner, make_settings


def test_update_remote_prefers_flag_over_config(tmp_path: Path) -> None:
    runner = FakeRunner(outputs={("git", "remote", "-v"): REMOTE_LISTING})
    remote_cmd.update_remote(
        SimpleNamespace(reference="github.com/org/repo", ssh_user="deploy"),
        settings=make_settings(tmp_path, ssh_user="me"),
        runner=runner,
    )
    assert runner.argvs[-1][-1] == "deploy@github.com:org/repo.git"


def test_update_remote_falls_back_to_configured_user(tmp_path: Path) -> None:
    runner = FakeRunner(outputs={("git", "remote", "-v"): REMOTE_LISTING})
    remote_cmd.update_remote(
        SimpleNamespace(reference="github.com/org/repo", ssh_user=None),
        settings=make_settings(tmp_path, ssh_user="me"),
        runner=runner,
    )
    assert runner.argvs[-1][-1] == "me@github.com:org/repo.git"


def test_update_remote_uses_configured_git(tmp_path: Path) -> None:
    runner = FakeRunner(outputs={("/opt/git", "remote", "-v"): REMOTE_LISTING})
    remote_cmd.update_remote(
        SimpleNamespace(reference="github.com/org/repo"),
        settings=make_settings(tmp_path, git_path="/opt/git"),
        runner=runner,
    )
    assert [argv[0] for argv in runner.argvs] == ["/opt/git", "/opt/git"]


def test_update_remote_without_origin_fails(tmp_path: Path) -> None:
    runner = FakeRunner()
    with pytest.raises(NoOriginFoundError):
        remote_cmd.update_remote(
            SimpleNamespace(reference="github.com/org/repo"),
            settings=make_settings(tmp_path),
            runner=runner,
        )
    assert len(runner.requests) == 1
