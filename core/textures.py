"""
Fire-and-forget texture loading.

Images are decoded on a worker thread so the first frames render before any
texture is ready. Finished loads are picked up by ``apply_ready()``, which the
render loop calls once per frame on the GUI thread; that is the only place a
material's ``map`` is touched.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List

import numpy as np
import pygfx as gfx
from PIL import Image, ImageOps

from core.config import resolve_asset

LOGGER = logging.getLogger(__name__)


def read_image(path: Path) -> np.ndarray:
    """
    Decode an image file into an RGBA uint8 array of shape (height, width, 4).

    Rows are flipped so the image top lands at v=1, which pygfx spheres map
    to the north pole.
    """
    with Image.open(path) as img:
        flipped = ImageOps.flip(img.convert("RGBA"))
    return np.ascontiguousarray(np.asarray(flipped, dtype=np.uint8))


@dataclass
class TextureRequest:
    path: Path
    material: gfx.Material
    future: Future


class TextureLoader:
    def __init__(self):
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="globe-texture")
        self._pending: List[TextureRequest] = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request(self, path, material: gfx.Material) -> TextureRequest:
        """Start loading ``path``; the texture lands on ``material.map`` later."""
        path = resolve_asset(path)
        request = TextureRequest(path, material, self._executor.submit(read_image, path))
        self._pending.append(request)
        LOGGER.debug("Texture requested: %s", path)
        return request

    def apply_ready(self) -> int:
        """Attach every finished texture to its material. Returns how many were applied."""
        if not self._pending:
            return 0
        applied = 0
        still_pending = []
        for request in self._pending:
            if not request.future.done():
                still_pending.append(request)
                continue
            if request.future.cancelled():
                continue
            try:
                data = request.future.result()
            except Exception as exc:
                LOGGER.warning("Failed to load texture %s: %s", request.path, exc)
                continue
            request.material.map = gfx.Texture(data, dim=2)
            applied += 1
            LOGGER.debug("Texture applied: %s (%dx%d)", request.path, data.shape[1], data.shape[0])
        self._pending = still_pending
        return applied

    def shutdown(self) -> None:
        self._pending.clear()
        self._executor.shutdown(wait=False, cancel_futures=True)
