"""Subprocess helpers for running the go and git executables."""

from __future__ import annotations

import subprocess
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Callable, Generic, Mapping, Protocol, TypeVar

from . import log
from .errors import DependencyMissingError, ExternalCommandFailedError, IoFailedError

ParsedT = TypeVar("ParsedT")


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request."""

    argv: tuple[str, ...]
    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    capture_output: bool = True
    text: bool = True


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    """Runtime command-execution interface.

    ``run`` captures output; ``stream`` forwards stdout to ``sink`` while the
    child runs. Both return ``None`` when the executable is missing.
    """

    def run(self, request: CommandRequest) -> CommandResult | None: ...

    def stream(
        self, request: CommandRequest, sink: IO[bytes]
    ) -> CommandResult | None: ...


def _copy_stream(
    source: IO[bytes], sink: IO[bytes], failures: list[Exception]
) -> None:
    chunks = iter(lambda: source.read1(4096), b"")
    try:
        for chunk in chunks:
            sink.write(chunk)
            sink.flush()
    except (OSError, ValueError) as exc:
        failures.append(exc)
        # Keep draining so the child never blocks on a full pipe.
        for _chunk in chunks:
            pass


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess."""

    def run(self, request: CommandRequest) -> CommandResult | None:
        run_kwargs: dict[str, object] = {
            "cwd": request.cwd,
            "env": request.env,
            "check": False,
        }
        if request.capture_output:
            run_kwargs["capture_output"] = True
            run_kwargs["text"] = request.text
        try:
            completed = subprocess.run(list(request.argv), **run_kwargs)
        except FileNotFoundError:
            return None

        stdout = completed.stdout if isinstance(completed.stdout, str) else ""
        stderr = completed.stderr if isinstance(completed.stderr, str) else ""
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=stdout,
            stderr=stderr,
        )

    def stream(
        self, request: CommandRequest, sink: IO[bytes]
    ) -> CommandResult | None:
        try:
            process = subprocess.Popen(
                list(request.argv),
                cwd=request.cwd,
                env=request.env,
                stdout=subprocess.PIPE,
            )
        except FileNotFoundError:
            return None
        assert process.stdout is not None
        failures: list[Exception] = []
        copier = threading.Thread(
            target=_copy_stream, args=(process.stdout, sink, failures), daemon=True
        )
        copier.start()
        returncode = process.wait()
        copier.join()
        process.stdout.close()
        if failures:
            command_text = " ".join(request.argv)
            raise IoFailedError(
                f"failed to forward output of {command_text}: {failures[0]}"
            ) from failures[0]
        return CommandResult(
            argv=request.argv, returncode=returncode, stdout="", stderr=""
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


@dataclass(frozen=True)
class CommandSpec(Generic[ParsedT]):
    """Typed command spec with a parser for command output."""

    request: CommandRequest
    parser: Callable[[CommandResult], ParsedT]


def _command_failure_detail(request: CommandRequest, result: CommandResult) -> str:
    output = (result.stderr or result.stdout or "").strip()
    command_text = " ".join(request.argv)
    if output:
        return f"command failed: {command_text}\n{output}"
    return f"command failed: {command_text}"


def _check(request: CommandRequest, result: CommandResult | None) -> CommandResult:
    if result is None:
        raise DependencyMissingError(request.argv[0] if request.argv else "")
    if result.returncode != 0:
        raise ExternalCommandFailedError(
            _command_failure_detail(request, result), returncode=result.returncode
        )
    return result


def run_typed(
    spec: CommandSpec[ParsedT], *, runner: CommandRunner | None = None
) -> ParsedT:
    """Execute a command and parse its successful output into a typed value.

    Raises:
        DependencyMissingError: The executable was not found.
        ExternalCommandFailedError: The command exited non-zero.
    """
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    log.debug(f" ----> running: {' '.join(spec.request.argv)}")
    result = _check(spec.request, active_runner.run(spec.request))
    return spec.parser(result)


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    runner: CommandRunner | None = None,
) -> None:
    """Run a command quietly and raise on failure.

    Args:
        cmd: Command and arguments to execute.
        cwd: Optional working directory.

    Returns:
        None.
    """
    run_typed(
        CommandSpec(
            request=CommandRequest(argv=tuple(cmd), cwd=cwd),
            parser=lambda _result: None,
        ),
        runner=runner,
    )


def capture_command(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    runner: CommandRunner | None = None,
) -> str:
    """Run a command and return its standard output."""
    return run_typed(
        CommandSpec(
            request=CommandRequest(argv=tuple(cmd), cwd=cwd),
            parser=lambda result: result.stdout,
        ),
        runner=runner,
    )


def stream_command(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    sink: IO[bytes] | None = None,
    runner: CommandRunner | None = None,
) -> None:
    """Run a command, forwarding its stdout live, and raise on failure.

    The copy runs on a background thread that is joined before this returns,
    so all output has been written once the call completes.
    """
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    request = CommandRequest(
        argv=tuple(cmd), cwd=cwd, capture_output=False, text=False
    )
    log.debug(f" ----> running: {' '.join(cmd)}")
    target = sink if sink is not None else sys.stdout.buffer
    _check(request, active_runner.stream(request, target))
