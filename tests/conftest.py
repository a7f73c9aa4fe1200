# ruff: noqa: E402

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import gotter.log as gotter_log


@pytest.fixture(autouse=True)
def _isolated_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GOTTER_LOG_LEVEL", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setattr(gotter_log, "_configured_level", None)
    monkeypatch.setattr(gotter_log, "_no_color", None)
