"""
Globe Viewer - Main Entry Point

Opens the main window and mounts the globe into its ``#globe`` container.
"""
import logging
import sys

from PySide6 import QtWidgets

from app.desktop.bootstrap import init_globe
from app.desktop.main_window import MainWindow


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow()
    viewer = init_globe(window, "#globe")
    window.show()

    print("Globe Viewer started.")
    print("Controls: Left Click and drag to rotate the globe.")
    code = app.exec()
    viewer.teardown()
    return code


if __name__ == "__main__":
    sys.exit(main())
