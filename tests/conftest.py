# Shared fixtures. Forces the Qt offscreen platform before any QApplication is
# created and provides a `qapp` fixture when pytest-qt is not installed (its
# own fixture wins otherwise).

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:  # If pytest-qt present, do nothing (its qapp fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover

    @pytest.fixture(scope="session")
    def qapp():  # type: ignore
        widgets = pytest.importorskip("PyQt6.QtWidgets")
        return widgets.QApplication.instance() or widgets.QApplication(sys.argv)


@pytest.fixture
def engine_settings(monkeypatch):
    """Patch ``config.settings`` knobs for one test: ``engine_settings(NO_VALUE_LAST=False)``."""
    from config import settings

    def apply(**overrides):
        for name, value in overrides.items():
            monkeypatch.setattr(settings, name, value)
        return settings

    return apply
