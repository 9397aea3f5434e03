import logging
import subprocess

import pytest

from dirpick.launch import LaunchError, editor_command, open_location, resolve
from dirpick.selector import Candidate

CANDS = [Candidate("a", "/x"), Candidate("bb", "/yy")]


def test_resolve_exact_name():
    assert resolve(CANDS, "bb") == Candidate("bb", "/yy")


def test_resolve_no_match():
    assert resolve(CANDS, "") is None
    assert resolve(CANDS, "b") is None
    assert resolve([], "a") is None


def test_editor_command_precedence(monkeypatch):
    monkeypatch.setenv("VISUAL", "code --wait")
    monkeypatch.setenv("EDITOR", "nano")
    assert editor_command("nvim -p") == ["nvim", "-p"]
    assert editor_command() == ["code", "--wait"]
    monkeypatch.delenv("VISUAL")
    assert editor_command() == ["nano"]
    monkeypatch.delenv("EDITOR")
    assert editor_command() == ["vi"]


def test_open_location_runs_editor():
    calls = []

    def fake_run(cmd, check):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 0)

    assert open_location("/x", editor="code -n", run=fake_run) == 0
    assert calls == [["code", "-n", "/x"]]


def test_open_location_returns_status():
    rc = open_location("/x", editor="ed", run=lambda cmd, check: subprocess.CompletedProcess(cmd, 3))
    assert rc == 3


def test_open_location_missing_editor():
    def missing(cmd, check):
        raise FileNotFoundError(cmd[0])

    with pytest.raises(LaunchError):
        open_location("/x", editor="no-such-editor", run=missing)


def test_open_location_blank_editor(monkeypatch):
    with pytest.raises(LaunchError):
        open_location("/x", editor="   ")


def test_open_location_logs_lazily(caplog):
    caplog.set_level(logging.INFO, logger="dirpick.launch")
    open_location("/x", editor="ed", run=lambda cmd, check: subprocess.CompletedProcess(cmd, 3))
    opening, failed = caplog.records
    assert opening.msg == "Opening %s with %s"
    assert opening.args == ("/x", "ed")
    assert failed.getMessage() == "ed exited with status 3"
