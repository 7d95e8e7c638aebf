"""Tests for the command-line interface."""

import logging

import pytest

from line_partitioner import cli, config

REAL_CONFIGURE_LOGGING = cli.configure_logging


@pytest.fixture(autouse=True)
def isolated_cli(monkeypatch) -> None:
    # basicConfig would bind handlers to pytest's captured stderr.
    monkeypatch.setattr(cli, "configure_logging", lambda level=logging.INFO: None)
    for name in (config.LP_WORKERS_ENV, config.LP_LOOKAHEAD_ENV, config.LP_MAX_LOOKAHEAD_ENV):
        monkeypatch.delenv(name, raising=False)


def test_prints_partitions(scenario_path, capsys) -> None:
    assert cli.main([str(scenario_path), "--workers", "4"]) == 0
    assert capsys.readouterr().out == "0,29\n29,37\n66,28\n94,6\n"


def test_workers_from_environment(scenario_path, capsys, monkeypatch) -> None:
    monkeypatch.setenv(config.LP_WORKERS_ENV, "1")
    assert cli.main([str(scenario_path)]) == 0
    assert capsys.readouterr().out == "0,100\n"


def test_inspect_and_verify(scenario_path, capsys, caplog) -> None:
    caplog.set_level(logging.INFO, logger="line_partitioner")

    code = cli.main([str(scenario_path), "--workers", "4", "--inspect", "--verify"])

    assert code == 0
    assert "First line of partition=3 is b'julie'" in caplog.text
    assert capsys.readouterr().out.count("\n") == 4


def test_missing_file_fails(tmp_path, capsys, caplog) -> None:
    assert cli.main([str(tmp_path / "missing.txt"), "--workers", "2"]) == 1
    assert capsys.readouterr().out == ""
    assert "missing.txt" in caplog.text


def test_exhausted_lookahead_fails(scenario_path, caplog) -> None:
    args = [str(scenario_path), "--workers", "4", "--lookahead", "2", "--max-lookahead", "4"]
    assert cli.main(args) == 1
    assert "no newline within 4 bytes" in caplog.text


@pytest.mark.parametrize(
    "extra",
    [
        ["--workers", "0"],
        ["--lookahead", "0"],
        ["--lookahead", "10", "--max-lookahead", "5"],
        ["--log-level", "TRACE"],
    ],
)
def test_invalid_arguments_exit(scenario_path, extra) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(scenario_path), *extra])
    assert exc_info.value.code == 2


def test_invalid_environment_exits(scenario_path, monkeypatch) -> None:
    monkeypatch.setenv(config.LP_LOOKAHEAD_ENV, "zero")
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(scenario_path), "--workers", "2"])
    assert exc_info.value.code == 2


def test_log_level_configures_stderr(scenario_path, capsys, monkeypatch) -> None:
    """Test that --log-level sets up root logging on stderr."""
    root = logging.getLogger()
    old_level = root.level
    old_handlers = root.handlers[:]
    root.handlers.clear()
    monkeypatch.setattr(cli, "configure_logging", REAL_CONFIGURE_LOGGING)

    try:
        code = cli.main([str(scenario_path), "--workers", "4", "--log-level", "DEBUG"])
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        root.handlers.extend(old_handlers)
        root.setLevel(old_level)

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "0,29\n29,37\n66,28\n94,6\n"
    assert "INFO: total file size: 100" in captured.err
    assert "DEBUG: adding skip=4 for partition=0" in captured.err
