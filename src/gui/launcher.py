"""Dedicated launcher module for `python -m gui` or external callers.

Configures logging from ``config.settings`` and shows the demo user table.
"""

from __future__ import annotations

import logging
import sys

from config import settings


def main():  # pragma: no cover - runtime
    from PyQt6.QtWidgets import QApplication
    from gui.views.table_view import UserTableView
    from table_engine import use_host_collation

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    use_host_collation()
    app = QApplication.instance() or QApplication(sys.argv)
    win = UserTableView()
    win.setWindowTitle("Table Engine Example")
    win.resize(900, 320)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover
    main()
