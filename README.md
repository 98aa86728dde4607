# gaiasys

`gaiasys` holds the logic of a small planet-simulation game, with no
rendering attached. It builds a procedurally generated planet out of six
terrain faces shaped by layered simplex noise. It also has an orbit camera
with zoom and pan, a toggle for a geothermal overlay, and the screens the
game moves through: splash, loading, title, credits and gameplay, with an
optional tutorial mode.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Running

```
gaiasys
```

This runs the game loop headless, with no input, and prints the screen
each time it changes. Options:

- `--frames N`: number of frames to run (default 600)
- `--fps F`: frames per second, which sets the frame time (default 60; must be positive)
- `--release`: turn off dev tools (logging of screen changes and the debug UI toggle)

The loop stops early if the Exit button on the title screen has been pressed.

## Using the library

Generate the gameplay planet and switch to its geothermal overlay:

```python
from gaiasys.planet import default_planet_settings, spawn_planet

planet = spawn_planet(default_planet_settings())
face, mesh = planet.terrain[0]
print(mesh.positions.shape, mesh.triangle_count)
planet.set_geothermal_overlay(True)
```

Noise layers and planet settings can also be put together by hand:

```python
from gaiasys.noise_filter import NoiseFilter, NoiseSettings, OpenSimplex
from gaiasys.planet_settings import PlanetSettings
from gaiasys.terrain_face import TerrainFace

settings = PlanetSettings(resolution=10, radius=2.0).with_layer(
    NoiseFilter(
        OpenSimplex(0),
        NoiseSettings(
            number_of_layers=3,
            strength=0.2,
            base_roughness=1.0,
            roughness=2.0,
            persistence=0.5,
        ),
    )
)
mesh = TerrainFace((0.0, 1.0, 0.0)).to_mesh(settings)
```

`TerrainFace.to_mesh` needs a resolution of at least 2. `Mesh` holds
`positions`, `indices`, `uvs` and `normals` as numpy arrays.

The camera turns recorded input into an orbit around the origin:

```python
from gaiasys.camera import CameraController, CameraSettings

camera = CameraController(CameraSettings(zoom_speed=10.0, zoom_min=1.0, zoom_max=100.0, pan_speed=5.0))
camera.record_intentions(zoom=1.0, pan=(3.0, 0.0), pan_active=True)
translation = camera.apply_intentions(1 / 60)
```

The whole application advances one frame at a time:

```python
from gaiasys.app import App, FrameInput

app = App()
screen = app.update(1 / 60, FrameInput())
```

`App.press_button` presses a button on the current screen by its label, for
example `"Start Game"` on the title screen; it raises `LookupError` if no
such button is shown.

## Modules

- `gaiasys.states`: `Screen`, `AppSet` and `AudioCategory`
- `gaiasys.palette`: `Color` and the UI colours
- `gaiasys.asset_tracking`: `ResourceHandles`, which waits for assets to load and then inserts them
- `gaiasys.widgets`: UI node descriptions (`button`, `header`, `label`, `ui_root`) and `InteractionPalette`
- `gaiasys.noise_filter`: `OpenSimplex` noise, `NoiseSettings` and `NoiseFilter`
- `gaiasys.planet_settings`: `PlanetSettings`
- `gaiasys.terrain_face`: `TerrainFace`, `Mesh` and `compute_normals`
- `gaiasys.planet`: `Planet`, `PlanetState`, `GeothermalMaterial`, `spawn_planet`
- `gaiasys.camera`: `CameraController` and `look_at`
- `gaiasys.splash`: the fading splash screen and its timer
- `gaiasys.screens`: `ScreenStates` and the loading, title and credits screens
- `gaiasys.tutorial`: `wait_input` and `observe_input` for tutorial steps
- `gaiasys.app`: `App`, `FrameInput` and the `main` entry point

## What it does not do

There is no window, no drawing, no shader and no sound output: screens are
trees of `Node` descriptions, meshes are arrays, and sounds are recorded as
asset paths in `App.sounds`. There is no dialogue engine for the tutorial;
`wait_input` creates the observer a dialogue step would wait on, and `App`
only checks an observer that has been set on `App.input_observer`.

## Tests

```
pytest
```