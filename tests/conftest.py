"""Shared fixtures: a recording tmux runner and an isolated pins file."""

from __future__ import annotations

import pytest

import hartoon
from hartoon import PinStore, Tmux


class FakeRunner:
    """Stands in for CommandRunner and records every argv it is given.

    ``sessions`` is the live tmux session list; a ``new-session`` run
    synchronously adds to it, like tmux would.  ``exec_fails`` makes
    ``exec`` report that the program could not start.
    """

    def __init__(self, sessions=None, current="", server=True, exec_fails=False):
        self.sessions = list(sessions or [])
        self.current = current
        self.server = server
        self.exec_fails = exec_fails
        self.ran = []
        self.spawned = []
        self.execed = []

    def run(self, argv, timeout=2):
        argv = list(argv)
        self.ran.append(argv)
        if argv[0] == "pgrep":
            return "4242\n" if self.server else ""
        if argv[:2] == ["tmux", "list-sessions"]:
            return "".join(s + "\n" for s in self.sessions)
        if argv[:2] == ["tmux", "display-message"]:
            return self.current + "\n" if self.current else ""
        if argv[:2] == ["tmux", "new-session"]:
            self.sessions.append(argv[-1])
        return ""

    def spawn(self, argv):
        self.spawned.append(list(argv))

    def exec(self, argv):
        self.execed.append(list(argv))
        if self.exec_fails:
            return False


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep theme reads/writes out of the real config directory."""
    monkeypatch.setattr(hartoon, "THEME_FILE", tmp_path / "config" / "theme.txt")
    monkeypatch.delenv("HARTOON_PINS_FILE", raising=False)
    monkeypatch.delenv("HARTOON_DEBUG", raising=False)


@pytest.fixture
def store(tmp_path):
    return PinStore(tmp_path / "tmux_sessions.txt")


@pytest.fixture
def runner():
    return FakeRunner(sessions=["work", "blog"], current="work")


@pytest.fixture
def tmux_in(runner):
    """Tmux as seen from inside a tmux client."""
    return Tmux(runner, env={"TMUX": "/tmp/tmux-1000/default,1234,0"})


@pytest.fixture
def tmux_out(runner):
    """Tmux as seen from a plain terminal."""
    return Tmux(runner, env={})
