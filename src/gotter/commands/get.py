"""Implementation for the ``gotter get`` command."""

from __future__ import annotations

from .. import exec as exec_util
from ..models import GotterConfig
from . import clone as clone_cmd
from . import link as link_cmd
from . import remote as remote_cmd


def get_project(
    args: object,
    *,
    settings: GotterConfig,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Clone a package, link it into the workspace and switch origin to SSH.

    Stops at the first failing step.

    Args:
        args: CLI argument object with ``reference``, ``update``,
            ``download_only``, ``force``, ``no_ssh`` and ``ssh_user``.
        settings: Runtime configuration.
    """
    clone_cmd.clone_project(args, settings=settings, runner=runner)
    link_cmd.link_project(args, settings=settings)
    if not bool(getattr(args, "no_ssh", False)):
        remote_cmd.update_remote(args, settings=settings, runner=runner)
