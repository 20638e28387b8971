from pathlib import Path
import sys

if str(Path(__file__).resolve().parents[1]) not in sys.path:
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import subprocess

import pytest

from app import server


def test_build_command_adds_port() -> None:
    command = server.build_command("ui.py", 8600)

    assert command[1:] == ["-m", "streamlit", "run", "ui.py", "--server.port", "8600"]


def test_failed_dashboard_exits_non_zero(monkeypatch) -> None:
    def _fail(command, check):
        raise subprocess.CalledProcessError(2, command)

    monkeypatch.setattr(server.subprocess, "run", _fail)

    with pytest.raises(SystemExit) as excinfo:
        server.run_streamlit()

    assert excinfo.value.code == 1


def test_missing_streamlit_exits_non_zero(monkeypatch) -> None:
    def _missing(command, check):
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(server.subprocess, "run", _missing)

    with pytest.raises(SystemExit) as excinfo:
        server.run_streamlit()

    assert excinfo.value.code == 1
