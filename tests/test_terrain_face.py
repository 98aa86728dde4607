import numpy as np
import pytest

from gaiasys.noise_filter import NoiseFilter, NoiseSettings, OpenSimplex
from gaiasys.planet_settings import PlanetSettings
from gaiasys.terrain_face import TerrainFace, compute_normals

DIRECTIONS = [(1, 0, 0), (0, 1, 0), (0, 0, 1), (-1, 0, 0), (0, -1, 0), (0, 0, -1)]


def test_axes_for_up_face():
    face = TerrainFace((0.0, 1.0, 0.0))
    assert face.axis_a == (1.0, 0.0, 0.0)
    assert face.axis_b == (0.0, 0.0, -1.0)


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_axes_orthonormal(direction):
    face = TerrainFace(direction)
    vectors = np.array([face.local_up, face.axis_a, face.axis_b])
    assert np.allclose(vectors @ vectors.T, np.eye(3))


def test_mesh_layout():
    resolution = 4
    mesh = TerrainFace((0, 0, 1)).to_mesh(PlanetSettings(resolution=resolution))
    assert mesh.positions.shape == (resolution * resolution, 3)
    assert mesh.uvs.shape == (resolution * resolution, 2)
    assert len(mesh.indices) == 6 * (resolution - 1) ** 2
    assert mesh.triangle_count == 2 * (resolution - 1) ** 2
    assert mesh.indices.dtype == np.uint32
    assert mesh.indices.max() < resolution * resolution
    first = [0, resolution + 1, resolution, 0, 1, resolution + 1]
    assert mesh.indices[:6].tolist() == first
    assert mesh.uvs[0].tolist() == [0.0, 0.0]
    assert mesh.uvs[-1].tolist() == [1.0, 1.0]


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_positions_on_sphere_of_radius(direction):
    mesh = TerrainFace(direction).to_mesh(PlanetSettings(resolution=5, radius=2.0))
    assert np.allclose(np.linalg.norm(mesh.positions, axis=1), 2.0)


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_normals_unit_and_outward(direction):
    mesh = TerrainFace(direction).to_mesh(PlanetSettings(resolution=6))
    assert np.allclose(np.linalg.norm(mesh.normals, axis=1), 1.0)
    assert np.all((mesh.normals * mesh.positions).sum(axis=1) > 0.5)


def test_face_centre_lies_on_local_up():
    face = TerrainFace((-1, 0, 0))
    mesh = face.to_mesh(PlanetSettings(resolution=5))
    assert np.allclose(mesh.positions[12], face.local_up)


def test_noise_pushes_surface_out():
    layer = NoiseFilter(
        OpenSimplex(0),
        NoiseSettings(number_of_layers=2, strength=0.5, base_roughness=1.0, roughness=2.0, persistence=0.5),
    )
    mesh = TerrainFace((0, 1, 0)).to_mesh(PlanetSettings(resolution=8).with_layer(layer))
    assert mesh.positions.shape == (64, 3)
    lengths = np.linalg.norm(mesh.positions, axis=1)
    assert lengths.min() >= 1.0 - 1e-9


def test_resolution_too_small():
    with pytest.raises(ValueError):
        TerrainFace((1, 0, 0)).to_mesh(PlanetSettings(resolution=1))


def test_compute_normals_single_triangle():
    positions = np.array([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)])
    normals = compute_normals(positions, np.array([0, 1, 2]))
    assert np.allclose(normals, [(0.0, 0.0, 1.0)] * 3)


def test_compute_normals_unused_vertex_is_zero():
    positions = np.array([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (5.0, 5.0, 5.0)])
    normals = compute_normals(positions, [0, 2, 1])
    assert np.allclose(normals[3], 0.0)
    assert np.allclose(normals[0], -np.cross(positions[1], positions[2]))


def test_compute_normals_rejects_partial_triangle():
    with pytest.raises(ValueError):
        compute_normals(np.zeros((3, 3)), [0, 1])