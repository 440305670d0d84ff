import pytest

from spring_cloth import Particle, Vector3


def test_apply_force_accumulates():
    p = Particle(Vector3(0.0, 0.0, 0.0))
    p.apply_force(Vector3(1.0, 0.0, 0.0))
    p.apply_force(Vector3(0.0, 2.0, 0.0))
    assert p.acceleration == Vector3(1.0, 2.0, 0.0)


def test_pinned_particle_discards_forces():
    p = Particle(Vector3(1.0, 2.0, 3.0), pinned=True)
    p.apply_force(Vector3(10.0, 10.0, 10.0))
    assert p.acceleration == Vector3.zero()


def test_integrate_is_semi_implicit_euler():
    p = Particle(Vector3(0.0, 0.0, 0.0))
    p.velocity = Vector3(1.0, 0.0, 0.0)
    p.apply_force(Vector3(0.0, -2.0, 0.0))
    p.integrate(0.5, 2.0)
    # velocity updated first, then position from the new velocity
    assert p.velocity == Vector3(1.0, -0.5, 0.0)
    assert p.position == Vector3(0.5, -0.25, 0.0)
    assert p.acceleration == Vector3.zero()


def test_integrate_pinned_is_frozen():
    p = Particle(Vector3(1.0, 2.0, 3.0), pinned=True)
    p.integrate(0.1, 1.0)
    assert p.position == Vector3(1.0, 2.0, 3.0)
    assert p.velocity == Vector3.zero()
    assert p.acceleration == Vector3.zero()


def test_particle_repr_mentions_pin():
    assert "pinned=True" in repr(Particle(Vector3(), pinned=True))


@pytest.mark.parametrize("dt", [0.01, 0.1])
def test_free_fall_single_step(dt):
    p = Particle(Vector3(0.0, 0.0, 0.0))
    p.apply_force(Vector3(0.0, -9.81, 0.0))
    p.integrate(dt, 1.0)
    assert p.velocity.y == pytest.approx(-9.81 * dt)
    assert p.position.y == pytest.approx(-9.81 * dt * dt)
