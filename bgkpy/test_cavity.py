"""Lid driven cavity, a small end to end run of the 2D kernels."""
import numpy as np
import pytest

import bgkpy as bk

NX = 8
NY = 8
STEPS = 60
TRANSIENT = 5
K = 1.0
LID = np.array([1.0, 0.15, 0.0, 1.0])
WALL = np.array([1.0, 0.0, 0.0, 1.0])


# noinspection PyPep8Naming
def _faces(cells, vs, dt, dx, dy):
    vertical = [[None] * NY for _ in range(NX + 1)]
    horizontal = [[None] * (NY + 1) for _ in range(NX)]
    for j in range(NY):
        vertical[0][j] = bk.flux_boundary_maxwell(
            WALL, cells[0][j].pdf, vs, 0, 1, dt, dy, K)
        vertical[NX][j] = bk.flux_boundary_maxwell(
            WALL, cells[NX - 1][j].pdf, vs, 0, -1, dt, dy, K)
        for i in range(1, NX):
            vertical[i][j] = bk.flux_kfvs(cells[i - 1][j].pdf,
                                          cells[i][j].pdf,
                                          vs, 0, dt, dy)
    for i in range(NX):
        horizontal[i][0] = bk.flux_boundary_maxwell(
            WALL, cells[i][0].pdf, vs, 1, 1, dt, dx, K)
        horizontal[i][NY] = bk.flux_boundary_maxwell(
            LID, cells[i][NY - 1].pdf, vs, 1, -1, dt, dx, K)
        for j in range(1, NY):
            horizontal[i][j] = bk.flux_kfvs(cells[i][j - 1].pdf,
                                            cells[i][j].pdf,
                                            vs, 1, dt, dx)
    return vertical, horizontal


@pytest.fixture(scope="module")
def cavity():
    gas = bk.Gas(Kn=0.075, Pr=2 / 3, K=K,
                 gamma=bk.heat_capacity_ratio(K, 2))
    vs = bk.VelocitySpace([-5, -5], [5, 5], [16, 16])
    dx = 1.0 / NX
    dy = 1.0 / NY
    umax = np.max(vs.u)
    dt = 0.4 * dx / (2.0 * umax)
    w = bk.prim_conserve(WALL, gas.gamma)
    cells = [[bk.ControlVolume(w, WALL, dx * dy,
                               bk.equilibrium_distribution("2f2v", vs,
                                                           WALL, K))
              for _ in range(NY)]
             for _ in range(NX)]
    kernel = bk.CellUpdate("2f2v", gas, vs, "bgk")
    mass = [np.sum([c.w[0] for row in cells for c in row])]
    residuals = []
    for _ in range(STEPS):
        vertical, horizontal = _faces(cells, vs, dt, dx, dy)
        residual = bk.Residual(w.shape)
        for i in range(NX):
            for j in range(NY):
                kernel.update(cells[i][j],
                              vertical[i][j], vertical[i + 1][j],
                              dt, residual,
                              horizontal[i][j], horizontal[i][j + 1])
        residuals.append(np.sqrt(np.sum(residual.res)))
        mass.append(np.sum([c.w[0] for row in cells for c in row]))
    return cells, np.array(mass), np.array(residuals)


def test_cavity_conserves_mass(cavity):
    cells, mass, residuals = cavity
    assert np.allclose(mass, mass[0], rtol=1e-10)


def test_cavity_stays_physical(cavity):
    cells, mass, residuals = cavity
    for row in cells:
        for cell in row:
            assert bk.is_physical(cell.prim)
            assert abs(cell.prim[0] - 1.0) < 0.05
            for (name, f) in cell.pdf.items():
                assert np.all(np.isfinite(f))


def test_lid_drives_the_gas(cavity):
    cells, mass, residuals = cavity
    top = np.array([cells[i][NY - 1].prim[1] for i in range(NX)])
    bottom = np.array([cells[i][0].prim[1] for i in range(NX)])
    assert np.all(top > 0)
    assert np.all(top < LID[1])
    assert np.mean(top) > np.mean(bottom)


def test_cavity_residual_decays(cavity):
    cells, mass, residuals = cavity
    assert np.all(np.isfinite(residuals))
    # monotonically non-increasing after the start of the lid
    assert np.all(np.diff(residuals[TRANSIENT:]) <= 0)
    assert residuals[-1] < residuals[TRANSIENT]
