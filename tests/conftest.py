"""Shared fixtures.

Qt runs on the offscreen platform so the adapter tests work without a display.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """A QApplication for widget/painter tests (skipped without PySide6)."""
    pytest.importorskip("PySide6")
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])


@pytest.fixture
def rcu_env(tmp_path, monkeypatch):
    """Isolated settings home + CWD, with RCU_* env vars blanked (restored after)."""
    monkeypatch.setenv("RCU_HOME", str(tmp_path / "home"))
    for key in (
        "RCU_LOG_LEVEL",
        "RCU_LOG_DIR",
        "RCU_IMAGE_FORMAT",
        "RCU_COLOR_MULTIPLE",
        "RCU_FRACTION_DIGITS",
    ):
        monkeypatch.setenv(key, "")
    monkeypatch.chdir(tmp_path)
    return tmp_path
