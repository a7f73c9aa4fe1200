"""Command-line entry point for gotter.

Every command raises ``GotterError`` on failure; ``_dispatch`` is the only
place that turns one into an error message and a failing exit status.
"""

from types import SimpleNamespace
from typing import Annotated, Callable, Optional

import typer

from . import __version__
from . import log as gotter_log
from .commands.clone import clone_project as clone_cmd
from .commands.get import get_project as get_cmd
from .commands.link import link_project as link_cmd
from .commands.link import unlink_project as unlink_cmd
from .commands.new import new_project as new_cmd
from .commands.remote import update_remote as update_remote_cmd
from .commands.remove import remove_project as remove_cmd
from .config import load_config
from .errors import GotterError

app = typer.Typer(
    name="gotter",
    help="Utility to unify and manage Go projects into a single workspace.",
    no_args_is_help=True,
    add_completion=False,
)

LINK_REMOVE_ACTION = "rm"

ReferenceArg = Annotated[
    str, typer.Argument(help="Repository reference (import path or URL).")
]
UpdateOpt = Annotated[
    bool, typer.Option("--update", "-u", help="Update existing code or link.")
]
DownloadOnlyOpt = Annotated[
    bool,
    typer.Option(
        "--download-only",
        "-d",
        help="Only download the code, don't install it with the go toolchain.",
    ),
]
ForceOpt = Annotated[
    bool,
    typer.Option("--force", "-f", help="Force updating and linking (irreversible)."),
]
SshUserOpt = Annotated[
    Optional[str],
    typer.Option(
        "--ssh-user", "--user", help="User for the SSH url (default: git)."
    ),
]


def _fail(exc: GotterError) -> None:
    gotter_log.error(f"error: {exc}")
    if exc.recovery_hint:
        gotter_log.error(f" ----> {exc.recovery_hint}")
    gotter_log.error("Status: FAILED")
    raise typer.Exit(code=1)


def _dispatch(command: Callable[..., None], args: SimpleNamespace) -> None:
    try:
        settings = load_config()
        command(args, settings=settings)
    except GotterError as exc:
        _fail(exc)


def _validate_log_level(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized not in gotter_log.LEVEL_NAMES:
        raise typer.BadParameter(
            f"expected one of: {', '.join(gotter_log.LEVEL_NAMES)}"
        )
    return normalized


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Enable verbose logging (-vv for debug output).",
        ),
    ] = 0,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            callback=_validate_log_level,
            help="Log level (trace|debug|info|success|warning|error).",
        ),
    ] = None,
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable colorized output.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Unify and manage Go projects into a single workspace."""
    level = log_level or gotter_log.level_for_verbosity(verbose)
    if level is not None:
        gotter_log.set_level(level)
    if no_color:
        gotter_log.set_no_color(True)


@app.command("get")
def get(
    reference: ReferenceArg,
    update: UpdateOpt = False,
    download_only: DownloadOnlyOpt = False,
    force: ForceOpt = False,
    no_ssh: Annotated[
        bool,
        typer.Option("--no-ssh", help="Do not update the remote origin to use SSH."),
    ] = False,
    ssh_user: SshUserOpt = None,
) -> None:
    """'go get' a repo, link it to your workspace and switch origin to SSH."""
    args = SimpleNamespace(
        reference=reference,
        update=update,
        download_only=download_only,
        force=force,
        no_ssh=no_ssh,
        ssh_user=ssh_user,
    )
    _dispatch(get_cmd, args)


@app.command("clone")
def clone(
    reference: ReferenceArg,
    update: UpdateOpt = False,
    download_only: DownloadOnlyOpt = False,
) -> None:
    """Clone the repo into your GOPATH."""
    args = SimpleNamespace(
        reference=reference, update=update, download_only=download_only
    )
    _dispatch(clone_cmd, args)


@app.command("link")
def link(
    reference: Annotated[
        str,
        typer.Argument(help="Repository reference, or 'rm' to remove a link."),
    ],
    target: Annotated[
        Optional[str],
        typer.Argument(help="Reference whose link to remove (with 'rm')."),
    ] = None,
    update: UpdateOpt = False,
    force: ForceOpt = False,
) -> None:
    """Create a link from GOPATH/project to WORKSPACE/project.

    ``gotter link rm <reference>`` removes the workspace link instead.
    """
    if reference == LINK_REMOVE_ACTION:
        if target is None:
            raise typer.BadParameter("missing reference to remove")
        _dispatch(unlink_cmd, SimpleNamespace(reference=target))
        return
    if target is not None:
        raise typer.BadParameter(f"unexpected extra argument: {target}")
    args = SimpleNamespace(reference=reference, update=update, force=force)
    _dispatch(link_cmd, args)


@app.command("update-remote")
def update_remote(
    reference: ReferenceArg,
    ssh_user: SshUserOpt = None,
) -> None:
    """Update the git remote origin url to use SSH."""
    _dispatch(
        update_remote_cmd, SimpleNamespace(reference=reference, ssh_user=ssh_user)
    )


@app.command("rm")
def remove(reference: ReferenceArg) -> None:
    """Remove both the link and the original project folder."""
    _dispatch(remove_cmd, SimpleNamespace(reference=reference))


@app.command("new")
def new(
    reference: ReferenceArg,
    ssh_user: SshUserOpt = None,
) -> None:
    """Create a new project with a GOPATH folder, git repo and workspace link."""
    args = SimpleNamespace(
        reference=reference, ssh_user=ssh_user, update=False, force=False
    )
    _dispatch(new_cmd, args)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
