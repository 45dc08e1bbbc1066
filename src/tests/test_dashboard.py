"""
Tests for the dashboard launcher.
"""

import subprocess
import sys

import pytest

from gendergap.constants import EDUCATION_PATH, INDICATORS_PATH
from gendergap.visualization import dashboard


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Working directory holding both input CSVs."""
    monkeypatch.chdir(tmp_path)
    for path in (INDICATORS_PATH, EDUCATION_PATH):
        target = tmp_path / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("placeholder\n", encoding="utf-8")
    return tmp_path


def test_streamlit_command_uses_current_interpreter():
    command = dashboard.streamlit_command("app.py")

    assert command[:5] == [sys.executable, "-m", "streamlit", "run", "app.py"]
    assert command[-2:] == ["--browser.gatherUsageStats", "false"]


def test_missing_data_files_lists_absent_paths(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "present.csv").write_text("a\n", encoding="utf-8")

    assert dashboard.missing_data_files(["present.csv", "absent.csv"]) == ["absent.csv"]


def test_launch_exits_without_data(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    calls = []
    monkeypatch.setattr(subprocess, "run", lambda *a, **kw: calls.append(a))

    with pytest.raises(SystemExit) as excinfo:
        dashboard.launch_dashboard()

    assert excinfo.value.code == 1
    assert calls == []
    assert INDICATORS_PATH in capsys.readouterr().out


def test_launch_runs_streamlit(data_dir, monkeypatch):
    calls = []

    def fake_run(command, check):
        calls.append((command, check))

    monkeypatch.setattr(subprocess, "run", fake_run)

    dashboard.launch_dashboard()

    assert calls == [(dashboard.streamlit_command(), True)]


def test_launch_reports_streamlit_failure(data_dir, monkeypatch, capsys):
    def failing_run(command, check):
        raise subprocess.CalledProcessError(2, command)

    monkeypatch.setattr(subprocess, "run", failing_run)

    with pytest.raises(SystemExit) as excinfo:
        dashboard.launch_dashboard()

    assert excinfo.value.code == 1
    assert "status 2" in capsys.readouterr().out
