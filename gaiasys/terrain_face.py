"""One of the six faces of a cube-sphere planet and its triangle mesh."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .planet_settings import MIN_RESOLUTION, PlanetSettings

Vec3 = tuple[float, float, float]


@dataclass
class Mesh:
    """An indexed triangle list with positions, texture coordinates and normals."""

    positions: np.ndarray
    indices: np.ndarray
    uvs: np.ndarray
    normals: np.ndarray

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3


def compute_normals(positions: np.ndarray, indices: np.ndarray) -> np.ndarray:
    """Return smooth per-vertex normals: area-weighted face normals, normalized."""
    positions = np.asarray(positions, dtype=float)
    flat = np.asarray(indices, dtype=np.int64)
    if flat.size % 3:
        raise ValueError("index count must be a multiple of three")
    triangles = flat.reshape(-1, 3)
    a, b, c = (positions[triangles[:, k]] for k in range(3))
    face_normals = np.cross(b - a, c - a)
    normals = np.zeros_like(positions)
    for corner in range(3):
        np.add.at(normals, triangles[:, corner], face_normals)
    lengths = np.linalg.norm(normals, axis=1, keepdims=True)
    return np.divide(normals, lengths, out=np.zeros_like(normals), where=lengths > 0)


@dataclass(frozen=True)
class TerrainFace:
    """A cube face pointing along ``local_up``, spanned by two tangent axes."""

    local_up: Vec3
    axis_a: Vec3 = field(init=False)
    axis_b: Vec3 = field(init=False)

    def __post_init__(self) -> None:
        x, y, z = (float(c) for c in self.local_up)
        axis_a = (y, z, x)
        axis_b = tuple(float(c) for c in np.cross((x, y, z), axis_a))
        object.__setattr__(self, "local_up", (x, y, z))
        object.__setattr__(self, "axis_a", axis_a)
        object.__setattr__(self, "axis_b", axis_b)

    def to_mesh(self, settings: PlanetSettings) -> Mesh:
        """Build this face's mesh on the planet described by ``settings``."""
        resolution = settings.resolution
        if resolution < MIN_RESOLUTION:
            raise ValueError(f"resolution must be at least {MIN_RESOLUTION}")

        ys, xs = np.divmod(np.arange(resolution * resolution), resolution)
        percent = np.stack([xs, ys], axis=1) / (resolution - 1)

        up, axis_a, axis_b = (np.array(v) for v in (self.local_up, self.axis_a, self.axis_b))
        on_cube = (
            up
            + ((percent[:, 0:1] - 0.5) * 2.0) * axis_a
            + ((percent[:, 1:2] - 0.5) * 2.0) * axis_b
        )
        on_sphere = on_cube / np.linalg.norm(on_cube, axis=1, keepdims=True)
        positions = settings.calculate_point_on_planet(on_sphere)

        cells = resolution - 1
        cell_y, cell_x = np.divmod(np.arange(cells * cells), cells)
        base = cell_x + cell_y * resolution
        indices = np.stack(
            [
                base,
                base + resolution + 1,
                base + resolution,
                base,
                base + 1,
                base + resolution + 1,
            ],
            axis=1,
        ).reshape(-1).astype(np.uint32)

        return Mesh(
            positions=positions,
            indices=indices,
            uvs=percent,
            normals=compute_normals(positions, indices),
        )