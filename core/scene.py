"""
Globe scene construction.

Builds the pygfx objects for one viewer lifetime: camera, lights, the colored
globe, the textured land shell and the inverted background sphere. Nothing in
here touches Qt, so a scene can be built and inspected without a window.
"""

import logging
import math
from dataclasses import dataclass, field

import pygfx as gfx
import pylinalg as la

from core.config import GlobeConfig
from core.state import LandRotation
from core.textures import TextureLoader

LOGGER = logging.getLogger(__name__)


def create_camera(config: GlobeConfig, aspect: float) -> gfx.PerspectiveCamera:
    camera = gfx.PerspectiveCamera(config.fov, aspect, depth_range=(config.near, config.far))
    camera.local.position = config.camera_position
    camera.local.rotation = la.quat_from_euler((math.radians(config.camera_tilt), 0.0, 0.0), order="XYZ")
    return camera


def create_lights(config: GlobeConfig):
    """Return (ambient, directional)."""
    ambient = gfx.AmbientLight(config.ambient_color)
    light = gfx.DirectionalLight(config.light_color, intensity=config.light_intensity)
    light.local.position = (0.0, 1.0, 0.0)
    light.look_at((0.0, 0.0, 0.0))
    return ambient, light


def create_sphere(config: GlobeConfig) -> gfx.Mesh:
    return gfx.Mesh(
        gfx.sphere_geometry(config.radius, config.segments, config.segments),
        gfx.MeshPhongMaterial(color=config.sphere_color),
    )


def create_land(config: GlobeConfig, loader: TextureLoader) -> gfx.Mesh:
    # The land image carries alpha; oceans show the globe color through it.
    material = gfx.MeshPhongMaterial()
    loader.request(config.land_texture, material)
    return gfx.Mesh(
        gfx.sphere_geometry(config.land_radius, config.segments, config.segments),
        material,
    )


def create_background(config: GlobeConfig, loader: TextureLoader) -> gfx.Mesh:
    material = gfx.MeshBasicMaterial(side="back")
    loader.request(config.background_texture, material)
    return gfx.Mesh(
        gfx.sphere_geometry(
            config.background_radius, config.background_segments, config.background_segments
        ),
        material,
    )


@dataclass
class GlobeScene:
    """Everything one viewer lifetime renders."""
    scene: gfx.Scene
    camera: gfx.PerspectiveCamera
    ambient: gfx.AmbientLight
    light: gfx.DirectionalLight
    sphere: gfx.Mesh
    land: gfx.Mesh
    background: gfx.Mesh
    rotation: LandRotation = field(default_factory=LandRotation)

    def sync_land(self) -> None:
        """Write the rotation state into the land mesh transform."""
        self.land.local.rotation = la.quat_from_euler(self.rotation.as_euler(), order="XYZ")


def build_scene(config: GlobeConfig, aspect: float, loader: TextureLoader) -> GlobeScene:
    camera = create_camera(config, aspect)
    ambient, light = create_lights(config)
    sphere = create_sphere(config)
    land = create_land(config, loader)
    background = create_background(config, loader)

    scene = gfx.Scene()
    scene.add(ambient, light, sphere, land, background)

    globe = GlobeScene(
        scene=scene,
        camera=camera,
        ambient=ambient,
        light=light,
        sphere=sphere,
        land=land,
        background=background,
        rotation=LandRotation(yaw=config.initial_yaw),
    )
    globe.sync_land()
    LOGGER.debug("Scene built (aspect %.3f)", aspect)
    return globe
