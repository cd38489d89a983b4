import numpy as np
import pytest

from spring_network.core.model import ConstructionError, DegenerateSpringError, Mass, Spring


def test_free_and_anchored_masses() -> None:
    free = Mass.free(1.0, -2.0, mass=3.0)
    anchor = Mass.anchored(0.5, 0.5)

    assert not free.fixed
    assert free.mass == 3.0
    np.testing.assert_array_equal(free.position, np.array([1.0, -2.0]))
    np.testing.assert_array_equal(free.velocity, np.zeros(2))
    assert anchor.fixed
    assert anchor.mass == 0.0
    np.testing.assert_array_equal(anchor.velocity, np.zeros(2))


@pytest.mark.parametrize("value", [0.0, -1.0, float("nan"), float("inf")])
def test_free_mass_rejects_non_positive_mass(value: float) -> None:
    with pytest.raises(ConstructionError):
        Mass.free(0.0, 0.0, mass=value)


def test_mass_rejects_wrong_dimension() -> None:
    with pytest.raises(ValueError):
        Mass(mass=1.0, position=np.array([0.0, 0.0, 0.0]))


def test_format_state_matches_record_layout() -> None:
    mass = Mass.free(0.0, -3.0, mass=3.0, velocity=[0.25, -1.5])

    assert mass.format_state() == "0 -3 0.25 -1.5\n"
    assert str(mass) == mass.format_state()


def test_spring_force_pulls_second_endpoint_back_when_stretched() -> None:
    first = Mass.anchored(0.0, 0.0)
    second = Mass.free(0.0, -3.0, mass=3.0)
    spring = Spring(k=3.0, rest_length=2.0)

    np.testing.assert_allclose(spring.force(first, second), np.array([0.0, 3.0]))


def test_spring_force_pushes_when_compressed() -> None:
    first = Mass.anchored(0.0, 0.0)
    second = Mass.free(1.0, 0.0, mass=1.0)
    spring = Spring(k=2.0, rest_length=3.0)

    np.testing.assert_allclose(spring.force(first, second), np.array([4.0, 0.0]))


def test_spring_at_rest_length_has_zero_force() -> None:
    first = Mass.anchored(0.0, 0.0)
    second = Mass.free(3.0, 4.0, mass=1.0)
    spring = Spring(k=10.0, rest_length=5.0)

    np.testing.assert_array_equal(spring.force(first, second), np.zeros(2))
    assert spring.potential_energy(first, second) == 0.0


def test_coincident_endpoints_raise() -> None:
    first = Mass.anchored(1.0, 1.0)
    second = Mass.free(1.0, 1.0, mass=1.0)

    with pytest.raises(DegenerateSpringError):
        Spring(k=1.0, rest_length=1.0).force(first, second)


def test_wired_returns_copy_with_endpoints() -> None:
    spring = Spring(k=1.0, rest_length=2.0)
    wired = spring.wired(3, 4)

    assert not spring.is_wired
    assert wired.is_wired
    assert (wired.mass1, wired.mass2) == (3, 4)
    assert (wired.k, wired.rest_length) == (1.0, 2.0)


@pytest.mark.parametrize(
    "position, velocity",
    [
        ((0.0, float("nan")), None),
        ((float("inf"), 0.0), None),
        ((0.0, 0.0), [float("nan"), 0.0]),
        ((0.0, 0.0), [0.0, float("-inf")]),
    ],
)
def test_free_mass_rejects_non_finite_state(position: tuple[float, float], velocity: list[float] | None) -> None:
    with pytest.raises(ConstructionError):
        Mass.free(position[0], position[1], mass=3.0, velocity=velocity)


def test_anchored_mass_rejects_non_finite_position() -> None:
    with pytest.raises(ConstructionError):
        Mass.anchored(float("nan"), 0.0)
