import math

import pytest

from world.particles import ParticleSystem


def test_spawn_creates_full_batch_at_origin(rng):
    ps = ParticleSystem(rng, batch_size=50, duration=0.5, speed_min=0.2, speed_max=0.7)
    assert ps.is_empty()

    ps.spawn(0.5, -0.2)

    assert len(ps) == 50
    assert not ps.is_empty()
    for p in ps.particles:
        assert (p.position.x, p.position.y) == (0.5, -0.2)
        assert 0.0 < p.lifetime <= 0.5
        assert 0.2 - 1e-9 <= p.velocity.length() < 0.7 + 1e-9


def test_spawn_discards_previous_batch(rng):
    ps = ParticleSystem(rng, batch_size=10)
    ps.spawn(0.0, 0.0)
    first = ps.particles
    ps.spawn(1.0, 1.0)
    assert len(ps) == 10
    assert not any(p is q for p in first for q in ps.particles)
    assert all(p.position.x == 1.0 for p in ps.particles)


def test_advance_integrates_before_pruning(rng):
    ps = ParticleSystem(rng, batch_size=40, duration=0.5)
    ps.spawn(0.0, 0.0)
    before = [(p, p.velocity.x, p.velocity.y) for p in ps.particles]

    ps.advance(0.25)

    for p, vx, vy in before:
        # expired particles still received this frame's motion
        assert p.position.x == pytest.approx(vx * 0.25)
        assert p.position.y == pytest.approx(vy * 0.25)
    assert all(p.lifetime > 0.0 for p in ps.particles)
    live = {id(p) for p in ps.particles}
    expired = [p for p, _, _ in before if p.lifetime <= 0.0]
    assert all(id(p) not in live for p in expired)


def test_every_particle_gone_once_its_lifetime_elapses(rng):
    ps = ParticleSystem(rng, batch_size=30, duration=0.5)
    ps.spawn(0.0, 0.0)
    initial = {id(p): p.lifetime for p in ps.particles}
    elapsed = 0.0
    while not ps.is_empty():
        ps.advance(0.016)
        elapsed += 0.016
        live = {id(p) for p in ps.particles}
        for pid, lifetime in initial.items():
            if elapsed >= lifetime + 1e-9:
                assert pid not in live
        assert all(p.lifetime > 0.0 for p in ps.particles)
    assert elapsed <= 0.5 + 0.016


def test_alpha_is_fraction_of_duration(rng):
    ps = ParticleSystem(rng, batch_size=5, duration=0.5)
    ps.spawn(0.0, 0.0)
    for p in ps.particles:
        assert ps.alpha_of(p) == pytest.approx(p.lifetime / 0.5)


def test_clear_and_empty_advance(rng):
    ps = ParticleSystem(rng, batch_size=5)
    ps.advance(0.1)
    assert ps.is_empty()
    ps.spawn(0.0, 0.0)
    ps.clear()
    assert ps.is_empty()
    assert len(ps) == 0


def test_angles_cover_full_circle(rng):
    ps = ParticleSystem(rng, batch_size=400)
    ps.spawn(0.0, 0.0)
    quadrants = {
        (math.copysign(1, p.velocity.x), math.copysign(1, p.velocity.y))
        for p in ps.particles
    }
    assert len(quadrants) == 4
