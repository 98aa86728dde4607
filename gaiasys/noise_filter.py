"""Gradient noise and layered noise filters used to shape planet terrain."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Union

import numpy as np

ArrayLike = Union[np.ndarray, tuple, list]

_STRETCH = -1.0 / 6.0
_SQUISH = 1.0 / 3.0
_NORM = 1.0 / 14.0

_GRADIENTS = np.array(
    [
        (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
        (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
        (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
    ],
    dtype=float,
)

# Lattice offsets contributing in each region of the stretched unit cube.
_LOW_REGION = ((0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1))
_HIGH_REGION = ((1, 1, 0), (1, 0, 1), (0, 1, 1), (1, 1, 1))
_MIDDLE_REGION = ((1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 1, 0), (1, 0, 1), (0, 1, 1))


class OpenSimplex:
    """Seeded 3D OpenSimplex noise with values in the range -1 to 1."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        values = list(range(256))
        random.Random(seed).shuffle(values)
        self._perm = np.array(values, dtype=np.int64)

    def __repr__(self) -> str:
        return f"OpenSimplex(seed={self.seed!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OpenSimplex):
            return NotImplemented
        return self.seed == other.seed

    def __hash__(self) -> int:
        return hash(("OpenSimplex", self.seed))

    def _hash(self, vertex: np.ndarray) -> np.ndarray:
        idx = vertex.astype(np.int64) & 0xFF
        perm = self._perm
        return perm[perm[perm[idx[..., 0]] ^ idx[..., 1]] ^ idx[..., 2]]

    def get(self, point: ArrayLike) -> Union[float, np.ndarray]:
        """Sample the noise at one point ``(x, y, z)`` or at an array of points."""
        p = np.asarray(point, dtype=float)
        if p.shape[-1:] != (3,):
            raise ValueError("points must have three coordinates")

        stretched = p + p.sum(axis=-1, keepdims=True) * _STRETCH
        stretched_floor = np.floor(stretched)
        squish_offset = stretched_floor.sum(axis=-1, keepdims=True) * _SQUISH
        rel_pos = p - (stretched_floor + squish_offset)
        region_sum = (stretched - stretched_floor).sum(axis=-1)

        low = region_sum <= 1.0
        high = region_sum >= 2.0
        middle = ~(low | high)

        value = np.zeros(region_sum.shape)
        for offsets, mask in ((_LOW_REGION, low), (_HIGH_REGION, high), (_MIDDLE_REGION, middle)):
            if not np.any(mask):
                continue
            for offset in offsets:
                off = np.array(offset, dtype=float)
                vertex = stretched_floor + off
                dpos = rel_pos - _SQUISH * off.sum() - off
                attn = 2.0 - (dpos * dpos).sum(axis=-1)
                gradient = _GRADIENTS[self._hash(vertex) % len(_GRADIENTS)]
                contribution = np.where(
                    attn > 0.0, attn**4 * (gradient * dpos).sum(axis=-1), 0.0
                )
                value += np.where(mask, contribution, 0.0)

        result = np.clip(value * _NORM, -1.0, 1.0)
        return float(result) if result.ndim == 0 else result


@dataclass
class NoiseSettings:
    """Parameters of a layered noise filter."""

    number_of_layers: int
    strength: float
    base_roughness: float
    roughness: float
    persistence: float
    center: tuple[float, float, float] = (0.0, 0.0, 0.0)
    min_value: float = 0.0
    use_first_layer_as_mask: bool = False

    def __post_init__(self) -> None:
        if self.number_of_layers < 0:
            raise ValueError("number_of_layers must not be negative")


@dataclass
class NoiseFilter:
    """Sums several octaves of noise into a terrain elevation."""

    noise: OpenSimplex
    settings: NoiseSettings

    def evaluate(self, point_on_unit_sphere: ArrayLike) -> Union[float, np.ndarray]:
        """Return the elevation at one point or at an array of points."""
        s = self.settings
        point = np.asarray(point_on_unit_sphere, dtype=float)
        center = np.asarray(s.center, dtype=float)
        value = np.zeros(point.shape[:-1])
        frequency = s.base_roughness
        amplitude = 1.0
        for _ in range(s.number_of_layers):
            noise_value = np.asarray(self.noise.get(point * frequency + center))
            value = value + (noise_value + 1.0) / 2.0 * amplitude
            frequency *= s.roughness
            amplitude *= s.persistence
        value = np.maximum(0.0, value - s.min_value) * s.strength
        return float(value) if value.ndim == 0 else value