import pytest

from spring_cloth import ConfigurationError, Particle, SpringConstraint, Vector3


def make_particles(*positions, pinned=()):
    return [Particle(Vector3(*pos), pinned=i in pinned) for i, pos in enumerate(positions)]


def test_zero_force_at_rest_length():
    particles = make_particles((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
    spring = SpringConstraint(0, 1, 1.0, 100.0)
    assert spring.force(particles) == Vector3.zero()
    spring.apply_force(particles)
    assert particles[0].acceleration == Vector3.zero()
    assert particles[1].acceleration == Vector3.zero()


def test_stretched_spring_pulls_endpoints_together():
    particles = make_particles((0.0, 0.0, 0.0), (2.0, 0.0, 0.0))
    SpringConstraint(0, 1, 1.0, 10.0).apply_force(particles)
    assert particles[0].acceleration == Vector3(10.0, 0.0, 0.0)
    assert particles[1].acceleration == Vector3(-10.0, 0.0, 0.0)


def test_compressed_spring_pushes_endpoints_apart():
    particles = make_particles((0.0, 0.0, 0.0), (0.0, 0.5, 0.0))
    SpringConstraint(0, 1, 1.0, 4.0).apply_force(particles)
    assert particles[0].acceleration == Vector3(0.0, -2.0, 0.0)
    assert particles[1].acceleration == Vector3(0.0, 2.0, 0.0)


def test_forces_are_exact_negations():
    particles = make_particles((0.1, -0.3, 0.7), (1.9, 0.4, -2.2))
    SpringConstraint(0, 1, 1.3, 37.5).apply_force(particles)
    assert particles[0].acceleration == -particles[1].acceleration


def test_coincident_endpoints_give_zero_force():
    particles = make_particles((1.0, 1.0, 1.0), (1.0, 1.0, 1.0))
    SpringConstraint(0, 1, 1.0, 100.0).apply_force(particles)
    assert particles[0].acceleration == Vector3.zero()
    assert particles[1].acceleration == Vector3.zero()


def test_pinned_endpoint_receives_nothing():
    particles = make_particles((0.0, 0.0, 0.0), (3.0, 0.0, 0.0), pinned=(0,))
    SpringConstraint(0, 1, 1.0, 1.0).apply_force(particles)
    assert particles[0].acceleration == Vector3.zero()
    assert particles[1].acceleration == Vector3(-2.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "a, b, rest, k",
    [(0, 0, 1.0, 1.0), (-1, 2, 1.0, 1.0), (0, 1, 0.0, 1.0), (0, 1, 1.0, -0.5)],
)
def test_invalid_springs_rejected(a, b, rest, k):
    with pytest.raises(ConfigurationError):
        SpringConstraint(a, b, rest, k)


def test_pair():
    assert SpringConstraint(3, 7, 1.0, 1.0).pair == (3, 7)
