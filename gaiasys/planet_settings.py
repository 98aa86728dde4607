"""Settings describing how a planet's surface is generated."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import numpy as np

from .noise_filter import NoiseFilter
from .palette import Color

BLUE = Color(0.0, 0.0, 1.0)
MIN_RESOLUTION = 2
MAX_RESOLUTION = 255


@dataclass
class PlanetSettings:
    """Mesh resolution, color, radius and noise layers of a planet."""

    resolution: int = 100
    color: Color = BLUE
    radius: float = 1.0
    noise_filters: list[NoiseFilter] = field(default_factory=list)

    def calculate_point_on_planet(
        self, point_on_unit_sphere: Union[np.ndarray, tuple, list]
    ) -> np.ndarray:
        """Lift points on the unit sphere onto the planet's surface."""
        point = np.asarray(point_on_unit_sphere, dtype=float)
        elevation = np.zeros(point.shape[:-1])
        first_layer_value = elevation
        if self.noise_filters:
            first_layer_value = np.asarray(self.noise_filters[0].evaluate(point))
            elevation = first_layer_value
        for noise_filter in self.noise_filters[1:]:
            mask = first_layer_value if noise_filter.settings.use_first_layer_as_mask else 1.0
            elevation = elevation + np.asarray(noise_filter.evaluate(point)) * mask
        return point * self.radius * (1.0 + elevation)[..., np.newaxis]

    def with_layer(self, layer: NoiseFilter) -> PlanetSettings:
        """Append a noise layer and return these settings."""
        self.noise_filters.append(layer)
        return self