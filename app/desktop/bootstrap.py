"""
Globe bootstrap.

Resolves the mount container from a selector and starts a GlobeViewer in it.
Selectors are ``#objectName`` or a bare Qt class name.
"""

import logging
import re

from PySide6 import QtWidgets

from core.errors import InvalidSelectorError
from .globe_viewer import GlobeViewer

LOGGER = logging.getLogger(__name__)

_SELECTOR = re.compile(r"^(#)?([A-Za-z_][\w-]*)$")


def find_container(root: QtWidgets.QWidget, selector: str):
    """Return the first widget under ``root`` (root included) matching ``selector``, or None."""
    match = _SELECTOR.match(selector.strip()) if isinstance(selector, str) else None
    if match is None:
        raise InvalidSelectorError(selector)
    by_name, name = match.groups()

    def matches(widget):
        if by_name:
            return widget.objectName() == name
        return widget.metaObject().className() == name

    if matches(root):
        return root
    for widget in root.findChildren(QtWidgets.QWidget):
        if matches(widget):
            return widget
    return None


def init_globe(root: QtWidgets.QWidget, selector: str = "#globe", config=None, **factories):
    """
    Mount a globe into the widget matching ``selector``.

    Raises InvalidSelectorError when nothing matches or setup fails; in that
    case nothing stays mounted.
    """
    viewer = None
    try:
        container = find_container(root, selector)
        if container is None:
            raise InvalidSelectorError(selector)
        viewer = GlobeViewer(container, config, **factories)
        viewer.init()
    except InvalidSelectorError:
        LOGGER.error("No container matches selector %r", selector)
        raise
    except Exception as exc:
        LOGGER.exception("Globe setup failed for selector %r", selector)
        if viewer is not None:
            viewer.teardown()
        raise InvalidSelectorError(selector) from exc
    return viewer
