"""Planet assembly: terrain faces, the geothermal overlay and its toggle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .noise_filter import NoiseFilter, NoiseSettings, OpenSimplex
from .palette import Color
from .planet_settings import BLUE, PlanetSettings
from .terrain_face import Mesh, TerrainFace

FACE_DIRECTIONS = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
    (-1.0, 0.0, 0.0),
    (0.0, -1.0, 0.0),
    (0.0, 0.0, -1.0),
)

TOGGLE_GEOTHERMAL_KEY = "g"
GEOTHERMAL_SHADER = "shaders/geothermal.wgsl"
THERMAL_GRADIENT_TEXTURE = "textures/thermal_gradient.png"
LIGHT_POSITION = (10.0, 0.0, 2.0)


class Visibility(Enum):
    """Whether an object is drawn, or follows its parent."""

    INHERITED = "inherited"
    HIDDEN = "hidden"
    VISIBLE = "visible"


@dataclass
class PlanetState:
    """Player-controlled display state of the planet."""

    geothermal_overlay: bool = False

    def toggle_geothermal_overlay(self) -> bool:
        """Flip the overlay flag and return its new value."""
        self.geothermal_overlay = not self.geothermal_overlay
        return self.geothermal_overlay


@dataclass(frozen=True)
class GeothermalMaterial:
    """Material that colors the overlay through a thermal gradient texture."""

    radius: float
    gradient_texture: str = THERMAL_GRADIENT_TEXTURE
    vertex_shader: str = GEOTHERMAL_SHADER
    fragment_shader: str = GEOTHERMAL_SHADER


@dataclass
class Planet:
    """The planet's terrain faces and the geothermal overlay drawn over them."""

    color: Color
    terrain: list[tuple[TerrainFace, Mesh]] = field(default_factory=list)
    geothermal: list[tuple[TerrainFace, Mesh, GeothermalMaterial]] = field(default_factory=list)
    visibility: Visibility = Visibility.INHERITED
    geothermal_visibility: Visibility = Visibility.HIDDEN
    light_position: tuple[float, float, float] = LIGHT_POSITION

    def set_geothermal_overlay(self, enabled: bool) -> None:
        """Show either the overlay or the terrain, hiding the other."""
        if enabled:
            self.visibility = Visibility.HIDDEN
            self.geothermal_visibility = Visibility.INHERITED
        else:
            self.visibility = Visibility.INHERITED
            self.geothermal_visibility = Visibility.HIDDEN


def default_planet_settings() -> PlanetSettings:
    """Return the settings of the planet shown during gameplay."""
    return (
        PlanetSettings(resolution=100, color=BLUE, radius=2.0)
        .with_layer(
            NoiseFilter(
                noise=OpenSimplex(0),
                settings=NoiseSettings(
                    number_of_layers=5,
                    strength=0.2,
                    base_roughness=0.71,
                    roughness=1.81,
                    persistence=0.54,
                    center=(0.0, 0.0, 0.0),
                    min_value=1.1,
                    use_first_layer_as_mask=False,
                ),
            )
        )
        .with_layer(
            NoiseFilter(
                noise=OpenSimplex(0),
                settings=NoiseSettings(
                    number_of_layers=5,
                    strength=10.0,
                    base_roughness=1.08,
                    roughness=2.34,
                    persistence=0.53,
                    center=(0.0, 0.0, 0.0),
                    min_value=1.2,
                    use_first_layer_as_mask=True,
                ),
            )
        )
    )


def geothermal_settings(radius: float) -> PlanetSettings:
    """Return the settings of the geothermal overlay for a planet of ``radius``."""
    return PlanetSettings(radius=radius).with_layer(
        NoiseFilter(
            noise=OpenSimplex(0),
            settings=NoiseSettings(
                number_of_layers=1,
                strength=1.0,
                base_roughness=2.0,
                roughness=1.0,
                persistence=0.0,
                center=(0.0, 0.0, 0.0),
                min_value=0.0,
                use_first_layer_as_mask=False,
            ),
        )
    )


def spawn_planet(settings: PlanetSettings) -> Planet:
    """Build the six terrain faces and the hidden geothermal overlay."""
    planet = Planet(color=settings.color)
    for direction in FACE_DIRECTIONS:
        face = TerrainFace(direction)
        planet.terrain.append((face, face.to_mesh(settings)))

    overlay_settings = geothermal_settings(settings.radius)
    for direction in FACE_DIRECTIONS:
        face = TerrainFace(direction)
        material = GeothermalMaterial(radius=overlay_settings.radius)
        planet.geothermal.append((face, face.to_mesh(overlay_settings), material))
    return planet