"""Implementation for the ``gotter new`` command.

``gotter new`` creates the project folder under the toolchain root,
initializes a git repository with an SSH ``origin`` and links it into the
workspace.
"""

from __future__ import annotations

from .. import exec as exec_util
from .. import git, log
from ..errors import InvalidReferenceError, IoFailedError
from ..models import GotterConfig
from . import link as link_cmd
from .resolve import resolve_reference


def new_project(
    args: object,
    *,
    settings: GotterConfig,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Create, initialize and link a brand-new project.

    Args:
        args: CLI argument object with ``reference`` and optional ``ssh_user``.
        settings: Runtime configuration.

    Example:
        $ gotter new github.com/owner/greenfield
    """
    log.info("Creating new project")
    pkgpath, locations = resolve_reference(args, settings)
    if locations.ssh_url is None:
        raise InvalidReferenceError(f"no repository path in reference: {pkgpath}")
    try:
        locations.root_path.mkdir(parents=True)
    except OSError as exc:
        raise IoFailedError(f"failed to create project folder: {exc}") from exc
    log.debug(f" ----> created project folder {locations.root_path}")

    log.info("Initializing git repo")
    git.git_init(locations.root_path, git_path=settings.git_path, runner=runner)

    log.info("Adding remote origin")
    git.git_remote_add_origin(
        locations.root_path,
        locations.ssh_url,
        git_path=settings.git_path,
        runner=runner,
    )

    link_cmd.link_project(args, settings=settings)
    log.success(f"Created new project {pkgpath}")
