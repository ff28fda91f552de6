from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class GlobeConfig:
    """
    Visual and interaction constants for the globe.

    The rotation step, drag sensitivity and debounce period are empirical
    values; keep them as tunables.
    """
    # Globe
    radius: float = 0.5
    segments: int = 32
    land_offset: float = 0.006
    sphere_color: str = "#682CE8"

    # Background shell
    background_radius: float = 90.0
    background_segments: int = 64

    # Textures (relative paths resolve against the project root)
    land_texture: str = "assets/images/land.png"
    background_texture: str = "assets/images/bg.png"

    # Camera
    fov: float = 45.0
    near: float = 0.01
    far: float = 1000.0
    camera_position: Tuple[float, float, float] = (-0.2, 0.8, 1.0)
    camera_tilt: float = -15.0  # degrees about X

    # Lights
    ambient_color: str = "#333333"
    light_color: str = "#ffffff"
    light_intensity: float = 0.5

    # Motion
    initial_yaw: float = 0.0
    yaw_step: float = 0.0005  # radians per frame
    drag_sensitivity: float = 1500.0

    # Window resize quiet period
    resize_debounce_ms: int = 1000

    def replace(self, **overrides) -> "GlobeConfig":
        """Return a copy with the given fields overridden."""
        return replace(self, **overrides)

    @property
    def land_radius(self) -> float:
        return self.radius + self.land_offset


def resolve_asset(path) -> Path:
    """Resolve a texture path; relative paths are taken from the project root."""
    path = Path(path)
    if path.is_absolute():
        return path
    return PROJECT_ROOT / path
