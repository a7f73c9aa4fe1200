import pytest

import gotter.log as gotter_log


def test_default_level_is_warning() -> None:
    assert gotter_log.configured_level() is gotter_log.LogLevel.WARNING
    assert not gotter_log.is_enabled(gotter_log.LogLevel.INFO)


def test_environment_sets_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOTTER_LOG_LEVEL", "debug")
    assert gotter_log.configured_level() is gotter_log.LogLevel.DEBUG


def test_unknown_level_falls_back_to_default() -> None:
    gotter_log.set_level("loud")
    assert gotter_log.configured_level() is gotter_log.LogLevel.WARNING


def test_info_is_written_to_stdout_when_enabled(
    capsys: pytest.CaptureFixture[str],
) -> None:
    gotter_log.set_level("info")
    gotter_log.info("Getting package: example.org/o/p")
    gotter_log.debug("hidden")
    captured = capsys.readouterr()
    assert "Getting package: example.org/o/p" in captured.out
    assert "hidden" not in captured.out


def test_warnings_go_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    gotter_log.warning("[WARNING]: Link already exists!")
    captured = capsys.readouterr()
    assert "Link already exists" in captured.err
    assert captured.out == ""
