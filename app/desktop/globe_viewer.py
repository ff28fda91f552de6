"""
Globe Viewer widget controller.

Mounts a rendercanvas QRenderWidget into a container widget and renders the
pygfx globe scene on it. Owns the render loop, the pointer drag interaction
and the debounced window-resize rebuild.
"""

import logging

import pygfx as gfx
from PySide6 import QtCore, QtWidgets
from rendercanvas.qt import QRenderWidget

from core.config import GlobeConfig
from core.errors import GlobeError
from core.frame_loop import FrameLoop
from core.scene import build_scene
from core.state import DragState
from core.textures import TextureLoader

LOGGER = logging.getLogger(__name__)

POINTER_EVENTS = ("pointer_down", "pointer_move", "pointer_up")
PRIMARY_BUTTON = 1


def default_canvas_factory(parent):
    return QRenderWidget(parent)


def default_renderer_factory(canvas):
    return gfx.WgpuRenderer(canvas)


class GlobeViewer(QtCore.QObject):
    """
    Rotating, draggable globe mounted inside a container widget.

    ``init()`` builds everything and mounts the render surface;
    ``teardown()`` undoes it and leaves the container empty. A window resize
    rebuilds the whole viewer once the window has stopped resizing for
    ``config.resize_debounce_ms``.
    """

    # Emitted after init() has mounted the surface
    initialized = QtCore.Signal()

    # Emitted after a resize-triggered rebuild
    rebuilt = QtCore.Signal()

    def __init__(
        self,
        container: QtWidgets.QWidget,
        config: GlobeConfig = None,
        canvas_factory=None,
        renderer_factory=None,
        parent=None,
    ):
        super().__init__(parent)
        self.container = container
        self.config = config or GlobeConfig()
        self._canvas_factory = canvas_factory or default_canvas_factory
        self._renderer_factory = renderer_factory or default_renderer_factory

        # Per-lifetime resources, set by init() and dropped by teardown()
        self.width = None
        self.height = None
        self.canvas = None
        self.renderer = None
        self.globe = None
        self._loader = None
        self._loop = None
        self._window = None

        self.drag = DragState()

        # One persistent timer: every resize restarts it
        self._resize_timer = QtCore.QTimer(self)
        self._resize_timer.setSingleShot(True)
        self._resize_timer.setInterval(self.config.resize_debounce_ms)
        self._resize_timer.timeout.connect(self._on_resize_settled)

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def rotation(self):
        return self.globe.rotation if self.globe else None

    @property
    def scene(self):
        return self.globe.scene if self.globe else None

    @property
    def surface(self):
        return self.canvas

    @property
    def is_running(self) -> bool:
        return self._loop is not None and self._loop.running

    @property
    def is_dragging(self) -> bool:
        return self.drag.active

    @property
    def frames(self) -> int:
        return self._loop.frames if self._loop else 0

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def init(self):
        """Build the scene, mount the surface, start rendering and listen for input."""
        if self.globe is not None:
            raise GlobeError("GlobeViewer is already initialized")

        self._window = self.container.window()
        size = self._window.size()
        self.width = size.width()
        self.height = size.height()
        aspect = self.width / self.height if self.height > 0 else 1.0

        self._loader = TextureLoader()
        self.globe = build_scene(self.config, aspect, self._loader)

        self.canvas = self._canvas_factory(self.container)
        self._mount(self.canvas)
        self.renderer = self._renderer_factory(self.canvas)

        self._loop = FrameLoop(self.canvas.request_draw, self._render_frame)
        self._loop.start()

        self._add_pointer_handlers(self.canvas)
        self._window.installEventFilter(self)

        LOGGER.info("Globe initialized (%dx%d)", self.width, self.height)
        self.initialized.emit()

    def teardown(self):
        """Stop rendering, drop listeners and clear the container."""
        self._resize_timer.stop()
        if self._loop is not None:
            self._loop.stop()
        if self._window is not None:
            self._window.removeEventFilter(self)
        if self.canvas is not None:
            self._remove_pointer_handlers(self.canvas)
        if self._loader is not None:
            self._loader.shutdown()

        self._clear_container()

        self.width = None
        self.height = None
        self.canvas = None
        self.renderer = None
        self.globe = None
        self._loader = None
        self._loop = None
        self._window = None
        self.drag = DragState()
        LOGGER.debug("Globe torn down")

    def _mount(self, canvas):
        layout = self.container.layout()
        if layout is None:
            layout = QtWidgets.QVBoxLayout(self.container)
            layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(canvas)

    def _clear_container(self):
        layout = self.container.layout()
        if layout is None:
            return
        while layout.count():
            item = layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()

    def container_is_empty(self) -> bool:
        layout = self.container.layout()
        return layout is None or layout.count() == 0

    # ─────────────────────────────────────────────────────────────────────────
    # Render loop
    # ─────────────────────────────────────────────────────────────────────────

    def _render_frame(self):
        self._loader.apply_ready()
        self.globe.rotation.advance_autonomous(self.config.yaw_step)
        self.globe.sync_land()
        self.renderer.render(self.globe.scene, self.globe.camera)

    # ─────────────────────────────────────────────────────────────────────────
    # Pointer Event Handling
    # ─────────────────────────────────────────────────────────────────────────

    def _add_pointer_handlers(self, canvas):
        canvas.add_event_handler(self._on_pointer_down, "pointer_down")
        canvas.add_event_handler(self._on_pointer_move, "pointer_move")
        canvas.add_event_handler(self._on_pointer_up, "pointer_up")

    def _remove_pointer_handlers(self, canvas):
        canvas.remove_event_handler(self._on_pointer_down, "pointer_down")
        canvas.remove_event_handler(self._on_pointer_move, "pointer_move")
        canvas.remove_event_handler(self._on_pointer_up, "pointer_up")

    def _on_pointer_down(self, event):
        if event.get("button") != PRIMARY_BUTTON:
            return
        self.drag.press(event["x"], event["y"])

    def _on_pointer_move(self, event):
        delta = self.drag.move(event["x"], event["y"])
        if delta is None or self.globe is None:
            return
        self.globe.rotation.apply_drag(delta[0], delta[1], self.config.drag_sensitivity)
        self.globe.sync_land()

    def _on_pointer_up(self, event):
        self.drag.release()
        if self.globe is not None:
            self.globe.rotation.release()
            self.globe.sync_land()

    # ─────────────────────────────────────────────────────────────────────────
    # Window resize
    # ─────────────────────────────────────────────────────────────────────────

    def eventFilter(self, obj, event):
        if obj is self._window and event.type() == QtCore.QEvent.Type.Resize:
            # The first resize on show has no previous size; nothing to rebuild for
            if event.oldSize().isValid():
                self._resize_timer.start()
        return False

    def _on_resize_settled(self):
        LOGGER.info("Window resize settled; rebuilding globe")
        self.teardown()
        if self.container_is_empty():
            self.init()
            self.rebuilt.emit()
