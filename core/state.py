from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class LandRotation:
    """
    Yaw/pitch of the land shell.

    Two sources move it: the render loop (``advance_autonomous``) and the
    user's drag (``apply_drag``). Both run on the GUI thread.
    """
    yaw: float = 0.0
    pitch: float = 0.0

    def advance_autonomous(self, step: float) -> None:
        self.yaw += step

    def apply_drag(self, dx: float, dy: float, sensitivity: float) -> None:
        self.yaw += dx / sensitivity
        self.pitch += dy / sensitivity

    def release(self) -> None:
        """End of a drag: the tilt snaps back, the spin is kept."""
        self.pitch = 0.0

    def as_euler(self) -> Tuple[float, float, float]:
        """Euler angles in XYZ order."""
        return (self.pitch, self.yaw, 0.0)


@dataclass
class DragState:
    """
    Pointer drag tracking.
    Independent of UI or Rendering backend.
    """
    active: bool = False
    last_x: float = 0.0
    last_y: float = 0.0

    def press(self, x: float, y: float) -> None:
        self.active = True
        self.last_x = x
        self.last_y = y

    def move(self, x: float, y: float) -> Optional[Tuple[float, float]]:
        """Return the delta since the last position, or None when not dragging."""
        if not self.active:
            return None
        dx = x - self.last_x
        dy = y - self.last_y
        self.last_x = x
        self.last_y = y
        return dx, dy

    def release(self) -> None:
        self.active = False
