"""Tests for the pygame host when pygame is unavailable."""

import importlib
import sys

import main


def _import_without_pygame(monkeypatch):
    monkeypatch.setitem(sys.modules, "pygame", None)
    # Registered so the pygame-less copy is dropped again after the test
    monkeypatch.setitem(sys.modules, "sim.visualizer", None)
    del sys.modules["sim.visualizer"]
    return importlib.import_module("sim.visualizer")


def test_visualizer_imports_without_pygame(monkeypatch):
    visualizer = _import_without_pygame(monkeypatch)
    assert visualizer.pygame is None


def test_run_visualizer_reports_missing_pygame(monkeypatch, capsys):
    visualizer = _import_without_pygame(monkeypatch)
    assert visualizer.run_visualizer() is None
    out = capsys.readouterr().out
    assert "ERROR: pygame is not installed. Run: pip install pygame" in out


def test_play_command_without_pygame(monkeypatch, capsys):
    """The play command prints the error and skips the final score line."""
    _import_without_pygame(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["main.py", "play"])
    main.cmd_play()
    out = capsys.readouterr().out
    assert "pygame is not installed" in out
    assert "Final score" not in out
