import numpy as np
import pytest

import bgkpy as bk

PRIM = np.array([[1.0, 0.01],
                 [0.1, -0.2],
                 [0.0, 0.1],
                 [-0.1, 0.3],
                 [1.0, 0.01]])
MR = 100.0
LD = 0.1
RL = 0.5


def test_cross_matrix():
    B = np.array([0.3, -1.0, 2.0])
    U = np.array([1.0, 0.5, -0.2])
    assert np.allclose(bk.cross_matrix(B) @ U, np.cross(U, B))


def test_em_system_shape():
    A, b = bk.em_coefficients(PRIM, np.zeros(3), np.zeros(3), MR, LD, RL, 0.01)
    assert A.shape == (9, 9)
    assert b.shape == (9,)


def test_em_system_of_neutral_gas_at_rest():
    prim = np.copy(PRIM)
    prim[1:4] = 0.0
    x = bk.solve_em(prim, np.zeros(3), np.zeros(3), MR, LD, RL, 0.01)
    assert np.allclose(x, 0.0)


def test_em_solution_satisfies_update_equations():
    E = np.array([0.1, -0.2, 0.05])
    B = np.array([0.0, 0.3, 1.0])
    dt = 0.02
    x = bk.solve_em(PRIM, E, B, MR, LD, RL, dt)
    force = bk.lorentz_force(x, PRIM, E, B, MR, RL)
    assert force.shape == (3, 2)
    # the new velocities are the old ones, accelerated by the force
    assert np.allclose(x[3:6], PRIM[1:4, 0] + dt * force[:, 0])
    assert np.allclose(x[6:9], PRIM[1:4, 1] + dt * force[:, 1])
    # Ampere's law, with the averaged current
    ni = PRIM[0, 0]
    ne = PRIM[0, 1] * MR
    current = 0.5 * (ni * (x[3:6] + PRIM[1:4, 0])
                     - ne * (x[6:9] + PRIM[1:4, 1]))
    assert np.allclose(x[0:3], E - dt / (LD**2 * RL) * current)


def test_lorentz_force_of_pure_electric_field():
    E = np.array([1.0, 0.0, 0.0])
    x = np.concatenate([E, np.zeros(6)])
    prim = np.copy(PRIM)
    prim[1:4] = 0.0
    force = bk.lorentz_force(x, prim, E, np.zeros(3), MR, RL)
    assert np.allclose(force[:, 0], E / RL)
    assert np.allclose(force[:, 1], -E * MR / RL)


@pytest.mark.parametrize("a", [0.0, 1.0, -2.0])
def test_integer_shift(a):
    f = np.arange(10, dtype=float) + 1.0
    du = 0.5
    dt = 0.5
    shifted = bk.shift_pdf(f, a, du, dt)
    nodes = int(abs(a) * dt / du)
    if a >= 0:
        assert np.allclose(shifted[nodes:], f[:f.size - nodes])
        assert np.allclose(shifted[:nodes], 0.0)
    else:
        assert np.allclose(shifted[:f.size - nodes], f[nodes:])
        assert np.allclose(shifted[f.size - nodes:], 0.0)


def test_fractional_shift_is_upwind():
    f = np.array([0.0, 1.0, 0.0, 0.0])
    shifted = bk.shift_pdf(f, 0.25, 1.0, 1.0)
    assert np.allclose(shifted, [0.0, 0.75, 0.25, 0.0])
    shifted = bk.shift_pdf(f, -0.25, 1.0, 1.0)
    assert np.allclose(shifted, [0.25, 0.75, 0.0, 0.0])


def test_shift_along_second_axis():
    f = np.zeros((3, 5))
    f[:, 1] = 1.0
    shifted = bk.shift_pdf(f, 1.0, 1.0, 2.0, axis=1)
    expected = np.zeros((3, 5))
    expected[:, 3] = 1.0
    assert np.allclose(shifted, expected)
    # the input is unchanged
    assert np.allclose(f[:, 1], 1.0)


def test_nan_detection():
    assert not bk.has_nan_fields(np.zeros(3), np.zeros(3))
    assert bk.has_nan_fields(np.array([0.0, np.nan, 0.0]), np.zeros(3))
    assert bk.has_nan_fields(np.zeros(3), np.array([np.nan, 0.0, 0.0]))
