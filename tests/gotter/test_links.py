import os
from pathlib import Path
from unittest.mock import patch

import pytest

import gotter.links as links
from gotter.errors import AlreadyLinkedError, IoFailedError, PathOccupiedError
from gotter.links import LinkState
from gotter.paths import ResolvedLocations


@pytest.fixture
def layout(tmp_path: Path) -> tuple[Path, Path]:
    root_path = tmp_path / "go" / "src" / "example.org" / "o" / "p"
    root_path.mkdir(parents=True)
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return root_path, workspace / "p"


class TestInspectLink:
    def test_absent(self, layout: tuple[Path, Path]) -> None:
        root_path, workspace_path = layout
        assert links.inspect_link(root_path, workspace_path) is LinkState.ABSENT

    def test_linked(self, layout: tuple[Path, Path]) -> None:
        root_path, workspace_path = layout
        workspace_path.symlink_to(root_path)
        assert links.inspect_link(root_path, workspace_path) is LinkState.LINKED

    def test_linked_elsewhere(self, layout: tuple[Path, Path], tmp_path: Path) -> None:
        root_path, workspace_path = layout
        workspace_path.symlink_to(tmp_path)
        assert (
            links.inspect_link(root_path, workspace_path) is LinkState.LINKED_ELSEWHERE
        )

    def test_dangling_symlink_counts_as_link(
        self, layout: tuple[Path, Path], tmp_path: Path
    ) -> None:
        root_path, workspace_path = layout
        workspace_path.symlink_to(tmp_path / "gone")
        assert (
            links.inspect_link(root_path, workspace_path) is LinkState.LINKED_ELSEWHERE
        )

    def test_occupied(self, layout: tuple[Path, Path]) -> None:
        root_path, workspace_path = layout
        workspace_path.mkdir()
        assert links.inspect_link(root_path, workspace_path) is LinkState.OCCUPIED

    def test_other(self, layout: tuple[Path, Path]) -> None:
        root_path, workspace_path = layout
        os.mkfifo(workspace_path)
        assert links.inspect_link(root_path, workspace_path) is LinkState.OTHER


class TestEnsureLink:
    def test_creates_link_when_absent(self, layout: tuple[Path, Path]) -> None:
        root_path, workspace_path = layout
        state = links.ensure_link(root_path, workspace_path)
        assert state is LinkState.ABSENT
        assert workspace_path.is_symlink()
        assert Path(os.readlink(workspace_path)) == root_path

    def test_existing_link_without_flags_fails(
        self, layout: tuple[Path, Path]
    ) -> None:
        root_path, workspace_path = layout
        workspace_path.symlink_to(root_path)
        with pytest.raises(AlreadyLinkedError) as excinfo:
            links.ensure_link(root_path, workspace_path)
        assert excinfo.value.current_target == str(root_path)
        assert excinfo.value.code == "already_linked"
        assert Path(os.readlink(workspace_path)) == root_path

    def test_existing_link_elsewhere_without_flags_fails(
        self, layout: tuple[Path, Path], tmp_path: Path
    ) -> None:
        root_path, workspace_path = layout
        workspace_path.symlink_to(tmp_path)
        with pytest.raises(AlreadyLinkedError):
            links.ensure_link(root_path, workspace_path)
        assert Path(os.readlink(workspace_path)) == tmp_path

    @pytest.mark.parametrize(
        ("update", "force"), [(True, False), (False, True), (True, True)]
    )
    def test_replaces_link_with_update_or_force(
        self, layout: tuple[Path, Path], tmp_path: Path, update: bool, force: bool
    ) -> None:
        root_path, workspace_path = layout
        workspace_path.symlink_to(tmp_path)
        state = links.ensure_link(
            root_path, workspace_path, update=update, force=force
        )
        assert state is LinkState.LINKED_ELSEWHERE
        assert Path(os.readlink(workspace_path)) == root_path

    def test_replacing_link_leaves_no_temporary_entries(
        self, layout: tuple[Path, Path], tmp_path: Path
    ) -> None:
        root_path, workspace_path = layout
        workspace_path.symlink_to(tmp_path)
        links.ensure_link(root_path, workspace_path, update=True)
        assert [entry.name for entry in workspace_path.parent.iterdir()] == ["p"]

    def test_directory_without_force_is_untouched(
        self, layout: tuple[Path, Path]
    ) -> None:
        root_path, workspace_path = layout
        workspace_path.mkdir()
        (workspace_path / "notes.txt").write_text("keep", encoding="utf-8")
        with pytest.raises(PathOccupiedError):
            links.ensure_link(root_path, workspace_path)
        assert (workspace_path / "notes.txt").read_text(encoding="utf-8") == "keep"

    def test_update_never_removes_a_directory(
        self, layout: tuple[Path, Path]
    ) -> None:
        root_path, workspace_path = layout
        workspace_path.mkdir()
        with pytest.raises(PathOccupiedError):
            links.ensure_link(root_path, workspace_path, update=True)
        assert workspace_path.is_dir()
        assert not workspace_path.is_symlink()

    def test_update_never_removes_a_file(self, layout: tuple[Path, Path]) -> None:
        root_path, workspace_path = layout
        workspace_path.write_text("data", encoding="utf-8")
        with pytest.raises(PathOccupiedError):
            links.ensure_link(root_path, workspace_path, update=True)
        assert workspace_path.read_text(encoding="utf-8") == "data"

    def test_force_replaces_non_empty_directory(
        self, layout: tuple[Path, Path]
    ) -> None:
        root_path, workspace_path = layout
        workspace_path.mkdir()
        (workspace_path / "notes.txt").write_text("gone", encoding="utf-8")
        state = links.ensure_link(root_path, workspace_path, force=True)
        assert state is LinkState.OCCUPIED
        assert workspace_path.is_symlink()
        assert Path(os.readlink(workspace_path)) == root_path

    def test_force_replaces_file(self, layout: tuple[Path, Path]) -> None:
        root_path, workspace_path = layout
        workspace_path.write_text("data", encoding="utf-8")
        links.ensure_link(root_path, workspace_path, force=True)
        assert Path(os.readlink(workspace_path)) == root_path

    def test_creation_failure_surfaces_io_error(self, tmp_path: Path) -> None:
        root_path = tmp_path / "go" / "src" / "example.org" / "o" / "p"
        workspace_path = tmp_path / "missing-workspace" / "p"
        with pytest.raises(IoFailedError) as excinfo:
            links.ensure_link(root_path, workspace_path)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_rename_failure_cleans_up_temporary_link(
        self, layout: tuple[Path, Path], tmp_path: Path
    ) -> None:
        root_path, workspace_path = layout
        workspace_path.symlink_to(tmp_path)
        with (
            patch("gotter.links.os.replace", side_effect=PermissionError("denied")),
            pytest.raises(IoFailedError),
        ):
            links.ensure_link(root_path, workspace_path, force=True)
        assert [entry.name for entry in workspace_path.parent.iterdir()] == ["p"]
        assert Path(os.readlink(workspace_path)) == tmp_path


class TestRemoveLink:
    def test_removes_symlink_only(self, layout: tuple[Path, Path]) -> None:
        root_path, workspace_path = layout
        workspace_path.symlink_to(root_path)
        links.remove_link(workspace_path)
        assert not workspace_path.is_symlink()
        assert root_path.is_dir()

    def test_missing_link_fails(self, layout: tuple[Path, Path]) -> None:
        _root_path, workspace_path = layout
        with pytest.raises(IoFailedError):
            links.remove_link(workspace_path)

    def test_directory_is_not_removed(self, layout: tuple[Path, Path]) -> None:
        _root_path, workspace_path = layout
        workspace_path.mkdir()
        with pytest.raises(IoFailedError):
            links.remove_link(workspace_path)
        assert workspace_path.is_dir()


class TestRemoveProject:
    def test_removes_link_then_root(self, layout: tuple[Path, Path]) -> None:
        root_path, workspace_path = layout
        (root_path / "main.go").write_text("package main\n", encoding="utf-8")
        workspace_path.symlink_to(root_path)
        links.remove_project(
            ResolvedLocations(root_path, workspace_path, "git@example.org:o/p.git")
        )
        assert not workspace_path.is_symlink()
        assert not root_path.exists()

    def test_link_failure_keeps_root(self, layout: tuple[Path, Path]) -> None:
        root_path, workspace_path = layout
        with (
            patch("gotter.links.remove_root") as remove_root,
            pytest.raises(IoFailedError),
        ):
            links.remove_project(
                ResolvedLocations(root_path, workspace_path, "git@example.org:o/p.git")
            )
        remove_root.assert_not_called()
        assert root_path.is_dir()

    def test_missing_root_is_not_an_error(self, tmp_path: Path) -> None:
        links.remove_root(tmp_path / "never-created")
