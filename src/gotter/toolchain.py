"""Go toolchain invocation."""

from __future__ import annotations

from typing import IO

from . import exec as exec_util


def go_get_command(
    import_path: str,
    *,
    update: bool = False,
    download_only: bool = False,
    go_path: str | None = None,
) -> list[str]:
    """Build the ``go get`` command line for an import path.

    Example:
        >>> go_get_command("github.com/o/p", update=True, download_only=True)
        ['go', 'get', '-u', '-d', 'github.com/o/p']
    """
    cmd = [(go_path or "").strip() or "go", "get"]
    if update:
        cmd.append("-u")
    if download_only:
        cmd.append("-d")
    cmd.append(import_path)
    return cmd


def go_get(
    import_path: str,
    *,
    update: bool = False,
    download_only: bool = False,
    go_path: str | None = None,
    sink: IO[bytes] | None = None,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Fetch a package into the toolchain root, streaming the tool's output."""
    exec_util.stream_command(
        go_get_command(
            import_path, update=update, download_only=download_only, go_path=go_path
        ),
        sink=sink,
        runner=runner,
    )
