"""Orbit camera: input intentions, spherical position and view orientation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from .states import Screen

INITIAL_CAMERA_TRANSLATION = (-2.5, 4.5, 9.0)
ORIGIN = (0.0, 0.0, 0.0)
UP = (0.0, 1.0, 0.0)
MAX_LATITUDE = 80.0
ACTIVE_SCREEN = Screen.GAMEPLAY


class CameraActions(Enum):
    """Player actions that drive the camera, with the input each is bound to."""

    ZOOM = "mouse_scroll_y"
    PAN_ACTIVATE = "mouse_button_middle"
    PAN = "mouse_move"


@dataclass
class CameraSettings:
    """Speeds and zoom limits of the camera."""

    zoom_speed: float = 0.0
    zoom_min: float = 0.0
    zoom_max: float = 0.0
    pan_speed: float = 0.0

    def __post_init__(self) -> None:
        if self.zoom_min > self.zoom_max:
            raise ValueError("zoom_min must not exceed zoom_max")


@dataclass
class CameraMovementIntentions:
    """The movement the player asked for during the current frame."""

    zoom: float = 0.0
    pan: tuple[float, float] = (0.0, 0.0)


@dataclass
class CameraPosition:
    """Camera position on a sphere around the origin, angles in degrees."""

    longitude: float = 0.0
    """East to west."""
    latitude: float = 0.0
    """North to south."""
    distance: float = 5.0

    def as_vec3(self) -> np.ndarray:
        """Return the cartesian position."""
        lat = math.radians(self.latitude)
        lon = math.radians(self.longitude)
        return np.array(
            [
                self.distance * math.cos(lat) * math.cos(lon),
                self.distance * math.sin(lat),
                self.distance * math.cos(lat) * math.sin(lon),
            ]
        )


def _try_normalize(vector: np.ndarray) -> Optional[np.ndarray]:
    length = float(np.linalg.norm(vector))
    if length == 0.0 or not math.isfinite(length):
        return None
    return vector / length


def _any_orthonormal(v: np.ndarray) -> np.ndarray:
    x, y, z = v
    sign = math.copysign(1.0, z)
    a = -1.0 / (sign + z)
    b = x * y * a
    return np.array([b, sign + y * y * a, -y])


def look_at(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Return the rotation whose columns are right, up and back for a view from ``eye``.

    The camera looks along the negative third column. Degenerate inputs fall
    back to looking down negative Z with Y up.
    """
    direction = np.asarray(target, dtype=float) - np.asarray(eye, dtype=float)
    forward = _try_normalize(direction)
    back = -forward if forward is not None else np.array([0.0, 0.0, 1.0])
    up_dir = _try_normalize(np.asarray(up, dtype=float))
    if up_dir is None:
        up_dir = np.array(UP)
    right = _try_normalize(np.cross(up_dir, back))
    if right is None:
        right = _any_orthonormal(up_dir)
    true_up = np.cross(back, right)
    return np.column_stack([right, true_up, back])


@dataclass
class CameraController:
    """Turns recorded input into the camera's orbit position and orientation."""

    settings: CameraSettings = field(default_factory=CameraSettings)
    intentions: CameraMovementIntentions = field(default_factory=CameraMovementIntentions)
    position: CameraPosition = field(default_factory=CameraPosition)
    translation: np.ndarray = field(
        default_factory=lambda: np.array(INITIAL_CAMERA_TRANSLATION)
    )
    rotation: np.ndarray = field(
        default_factory=lambda: look_at(INITIAL_CAMERA_TRANSLATION, ORIGIN, UP)
    )

    def record_intentions(
        self, zoom: float, pan: Sequence[float], pan_active: bool
    ) -> CameraMovementIntentions:
        """Store this frame's zoom and, while panning is held, the mouse motion."""
        self.intentions.pan = (
            (float(pan[0]), float(pan[1])) if pan_active else (0.0, 0.0)
        )
        self.intentions.zoom = float(zoom)
        return self.intentions

    def apply_intentions(self, delta_secs: float) -> np.ndarray:
        """Move the camera by the recorded intentions and return its translation."""
        s = self.settings
        pos = self.position
        pan_x, pan_y = self.intentions.pan

        pos.distance += self.intentions.zoom * s.zoom_speed * delta_secs
        pos.distance = min(max(pos.distance, s.zoom_min), s.zoom_max)

        pos.longitude += pan_x * s.pan_speed * delta_secs
        if pos.longitude < -180.0:
            pos.longitude += 360.0
        elif pos.longitude > 180.0:
            pos.longitude -= 360.0

        pos.latitude = min(
            max(pos.latitude + pan_y * s.pan_speed * delta_secs, -MAX_LATITUDE),
            MAX_LATITUDE,
        )

        self.translation = pos.as_vec3()
        self.rotation = look_at(self.translation, ORIGIN, UP)
        return self.translation

    def reset(self) -> None:
        """Put the camera back at its starting view."""
        self.translation = np.array(INITIAL_CAMERA_TRANSLATION)
        self.rotation = look_at(INITIAL_CAMERA_TRANSLATION, ORIGIN, UP)