# ruff: noqa: E402

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from gotter.exec import CommandRequest, CommandResult
from gotter.models import GotterConfig

REMOTE_LISTING = (
    "origin\thttps://github.com/org/repo (fetch)\n"
    "origin\thttps://github.com/org/repo (push)\n"
)


def make_settings(tmp: Path, **overrides: str) -> GotterConfig:
    root_dir = tmp / "go"
    workspace_dir = tmp / "workspace"
    root_dir.mkdir(parents=True, exist_ok=True)
    workspace_dir.mkdir(parents=True, exist_ok=True)
    data: dict[str, str] = {
        "root_dir": str(root_dir),
        "workspace_dir": str(workspace_dir),
    }
    data.update(overrides)
    return GotterConfig(**data)


@dataclass
class FakeRunner:
    """Command runner that records requests and replays canned results."""

    outputs: dict[tuple[str, ...], str] = field(default_factory=dict)
    failures: dict[tuple[str, ...], int] = field(default_factory=dict)
    missing: set[str] = field(default_factory=set)
    requests: list[CommandRequest] = field(default_factory=list)
    streamed: bytes = b""

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [request.argv for request in self.requests]

    def _result(self, request: CommandRequest) -> CommandResult | None:
        self.requests.append(request)
        if request.argv[0] in self.missing:
            return None
        returncode = self.failures.get(request.argv, 0)
        return CommandResult(
            argv=request.argv,
            returncode=returncode,
            stdout=self.outputs.get(request.argv, ""),
            stderr="boom" if returncode else "",
        )

    def run(self, request: CommandRequest) -> CommandResult | None:
        return self._result(request)

    def stream(
        self, request: CommandRequest, sink: IO[bytes]
    ) -> CommandResult | None:
        result = self._result(request)
        if result is not None and self.streamed:
            sink.write(self.streamed)
        return result
