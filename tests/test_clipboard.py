from __future__ import annotations

import sys
from pathlib import Path

import pytest

pytest.importorskip("PySide6")

from sorteador.cli import run
from sorteador.contracts import ClipboardUnavailableError
from sorteador.ui.clipboard import QtClipboardAdapter, display_available


@pytest.fixture
def headless(monkeypatch):
    from PySide6.QtGui import QGuiApplication

    if QGuiApplication.instance() is not None:
        pytest.skip("a Qt application already exists in this process")
    monkeypatch.setattr(sys, "platform", "linux")
    for name in ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM"):
        monkeypatch.delenv(name, raising=False)


def test_display_detection(monkeypatch, headless):
    assert not display_available()
    monkeypatch.setenv("WAYLAND_DISPLAY", "wayland-0")
    assert display_available()


def test_headless_clipboard_write_is_reported(headless):
    with pytest.raises(ClipboardUnavailableError):
        QtClipboardAdapter().write_text("Time Azul x Time Vermelho\n")


def test_cli_copy_without_display_still_prints_roster(tmp_path: Path, capsys, headless):
    names = tmp_path / "names.txt"
    names.write_text("\n".join(f"Jogador {i}" for i in range(14)), encoding="utf-8")
    code = run(["--format", "society", "--names-file", str(names), "--seed", "1", "--copy"])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.startswith("Time Azul x Time Vermelho\n")
    assert "Copy unavailable" in captured.err
