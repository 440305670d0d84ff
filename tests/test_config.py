import pytest

from spring_cloth import ConfigurationError, SimConfig, Vector3


def test_defaults():
    config = SimConfig()
    assert config.num_particles == 100
    assert config.gravity_vector == Vector3(0.0, -9.81, 0.0)
    assert config.wind_vector == Vector3.zero()
    assert config.pin == "top-corners"


def test_vectors_are_normalized_to_float_tuples():
    config = SimConfig(gravity=[0, -1, 0], wind=(1, 2, 3))
    assert config.gravity == (0.0, -1.0, 0.0)
    assert config.wind == (1.0, 2.0, 3.0)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"cols": 0},
        {"rows": -1},
        {"spacing": 0.0},
        {"stiffness": -1.0},
        {"dt": 0.0},
        {"mass": 0.0},
        {"mass": -1.0},
        {"steps": -5},
        {"pin": "middle"},
        {"gravity": (0.0, -9.81)},
    ],
)
def test_invalid_config(kwargs):
    with pytest.raises(ConfigurationError):
        SimConfig(**kwargs)


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)
