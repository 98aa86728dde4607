import numpy as np
import pytest

from gaiasys.noise_filter import NoiseFilter, NoiseSettings, OpenSimplex


@pytest.fixture
def points():
    return np.random.default_rng(7).uniform(-10.0, 10.0, size=(400, 3))


def _filter(**overrides):
    values = dict(
        number_of_layers=3,
        strength=1.0,
        base_roughness=1.0,
        roughness=2.0,
        persistence=0.5,
        center=(0.0, 0.0, 0.0),
        min_value=0.0,
        use_first_layer_as_mask=False,
    )
    values.update(overrides)
    return NoiseFilter(noise=OpenSimplex(0), settings=NoiseSettings(**values))


def test_noise_is_deterministic(points):
    first = OpenSimplex(3).get(points)
    second = OpenSimplex(3).get(points)
    assert first.shape == (400,)
    assert first.tolist() == second.tolist()


def test_seeds_give_different_noise(points):
    assert not np.allclose(OpenSimplex(0).get(points), OpenSimplex(1).get(points))


def test_noise_in_range_and_not_flat(points):
    values = OpenSimplex(0).get(points)
    assert values.shape == (400,)
    assert np.all(values >= -1.0) and np.all(values <= 1.0)
    assert np.ptp(values) > 0.1


def test_noise_zero_at_origin():
    assert OpenSimplex(0).get((0.0, 0.0, 0.0)) == 0.0


def test_scalar_matches_vectorised(points):
    noise = OpenSimplex(5)
    batch = noise.get(points[:20])
    singles = [noise.get(tuple(p)) for p in points[:20]]
    assert isinstance(singles[0], float)
    assert np.allclose(batch, singles)


def test_noise_rejects_wrong_dimension():
    with pytest.raises(ValueError):
        OpenSimplex(0).get((1.0, 2.0))


def test_evaluate_non_negative(points):
    unit = points / np.linalg.norm(points, axis=1, keepdims=True)
    values = _filter(min_value=0.5).evaluate(unit)
    assert values.shape == (400,)
    assert values.min() >= 0.0


def test_evaluate_high_min_value_is_zero(points):
    unit = points / np.linalg.norm(points, axis=1, keepdims=True)
    values = _filter(min_value=100.0).evaluate(unit)
    assert values.shape == (400,)
    assert values.min() == 0.0
    assert values.max() == 0.0


def test_strength_scales_linearly(points):
    unit = points / np.linalg.norm(points, axis=1, keepdims=True)
    base = _filter(strength=1.0).evaluate(unit)
    tripled = _filter(strength=3.0).evaluate(unit)
    assert np.allclose(tripled, base * 3.0)


def test_zero_persistence_ignores_later_layers(points):
    unit = points / np.linalg.norm(points, axis=1, keepdims=True)
    one = _filter(number_of_layers=1, persistence=0.0).evaluate(unit)
    many = _filter(number_of_layers=5, persistence=0.0).evaluate(unit)
    assert np.allclose(one, many)


def test_no_layers_gives_no_elevation():
    assert _filter(number_of_layers=0).evaluate((1.0, 0.0, 0.0)) == 0.0


def test_negative_layers_rejected():
    with pytest.raises(ValueError):
        NoiseSettings(number_of_layers=-1, strength=1.0, base_roughness=1.0, roughness=1.0, persistence=1.0)