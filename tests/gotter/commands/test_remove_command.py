from pathlib import Path
from types import SimpleNamespace

import pytest

import gotter.commands.remove as remove_cmd
from gotter.errors import IoFailedError
from tests.gotter.helpers import make_settings


def test_remove_project_deletes_link_and_folder(tmp_path: Path) -> None:
    settings = make_settings(tmp_path)
    root_path = tmp_path / "go" / "src" / "github.com" / "org" / "repo"
    root_path.mkdir(parents=True)
    (root_path / "main.go").write_text("package main\n", encoding="utf-8")
    (tmp_path / "workspace" / "repo").symlink_to(root_path)

    remove_cmd.remove_project(
        SimpleNamespace(reference="github.com/org/repo"), settings=settings
    )

    assert not (tmp_path / "workspace" / "repo").is_symlink()
    assert not root_path.exists()
    assert (tmp_path / "go" / "src" / "github.com" / "org").is_dir()


def test_remove_project_keeps_folder_when_link_removal_fails(tmp_path: Path) -> None:
    settings = make_settings(tmp_path)
    root_path = tmp_path / "go" / "src" / "github.com" / "org" / "repo"
    root_path.mkdir(parents=True)

    with pytest.raises(IoFailedError):
        remove_cmd.remove_project(
            SimpleNamespace(reference="github.com/org/repo"), settings=settings
        )

    assert root_path.is_dir()
