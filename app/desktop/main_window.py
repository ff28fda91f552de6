"""
Globe Viewer - Main Window

PySide6 main window carrying the ``#globe`` container the viewer mounts into.
"""

from PySide6 import QtWidgets

CONTAINER_NAME = "globe"


class MainWindow(QtWidgets.QMainWindow):
    """
    Main application window.

    The central widget is an empty container named ``globe``; the viewer
    fills it with its render surface.
    """

    def __init__(self, title="Globe Viewer", size=(1200, 800)):
        super().__init__()
        self.setWindowTitle(title)
        self.resize(*size)

        self.container = QtWidgets.QWidget()
        self.container.setObjectName(CONTAINER_NAME)
        layout = QtWidgets.QVBoxLayout(self.container)
        layout.setContentsMargins(0, 0, 0, 0)
        self.setCentralWidget(self.container)
