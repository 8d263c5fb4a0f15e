import numpy as np
import pytest

import bgkpy as bk

M = bk.DistributionModel
VS_1D = bk.VelocitySpace([-8], [8], [64])
VS_2D = bk.VelocitySpace([-6, -6], [6, 6], [32, 32])


def test_kfvs_of_equal_states_is_the_full_range_flux():
    prim = np.array([1.0, 0.3, 0.8])
    f = bk.equilibrium_distribution(M.F2V1, VS_1D, prim, K=2.0)
    face = bk.flux_kfvs(f, f, VS_1D, 0, dt=0.1)
    expected = 0.1 * VS_1D.u * f["h"]
    assert np.allclose(face.ff["h"], expected)
    # mass flux rho * U
    assert np.isclose(face.fw[0], 0.1 * prim[0] * prim[1])


def test_kfvs_is_upwind():
    fL = bk.Distribution(M.F1V1, f=np.ones(VS_1D.size))
    fR = bk.Distribution(M.F1V1, f=2.0 * np.ones(VS_1D.size))
    face = bk.flux_kfvs(fL, fR, VS_1D, 0, dt=1.0)
    u = VS_1D.u
    assert np.allclose(face.ff["f"][u > 0], u[u > 0])
    assert np.allclose(face.ff["f"][u < 0], 2.0 * u[u < 0])


def test_kfvs_along_second_axis():
    prim = np.array([1.0, 0.0, 0.4, 1.0])
    f = bk.equilibrium_distribution(M.F1V2, VS_2D, prim)
    face = bk.flux_kfvs(f, f, VS_2D, 1, dt=0.5, length=2.0)
    assert np.isclose(face.fw[0], 0.5 * 2.0 * 0.4)
    assert np.isclose(face.fw[1], 0.0, atol=1e-12)


@pytest.mark.parametrize("side", [1, -1])
def test_diffuse_wall_has_no_mass_flux(side):
    prim = np.array([1.2, 0.4, 0.7])
    f = bk.equilibrium_distribution(M.F2V1, VS_1D, prim, K=2.0)
    wall = np.array([1.0, 0.0, 1.0])
    face = bk.flux_boundary_maxwell(wall, f, VS_1D, 0, side, dt=0.1, K=2.0)
    assert np.isclose(face.fw[0], 0.0, atol=1e-12)
    assert np.all(np.isfinite(face.ff["b"]))


MIXTURE_WALLS = {"shared": [1.0, 0.0, 1.0],
                 "per_species": [[1.0, 1.0], [0.0, 0.0], [1.0, 0.5]]}


@pytest.mark.parametrize("side", [1, -1])
@pytest.mark.parametrize("key", MIXTURE_WALLS.keys())
def test_diffuse_wall_has_no_mass_flux_for_each_species(key, side):
    vs = bk.VelocitySpace([[-8], [-10]], [[8], [10]], [64])
    prim = np.array([[1.0, 0.5],
                     [0.4, -0.2],
                     [0.7, 0.3]])
    f = bk.equilibrium_distribution(M.F2V1, vs, prim, K=2.0)
    wall = np.array(MIXTURE_WALLS[key])
    face = bk.flux_boundary_maxwell(wall, f, vs, 0, side, dt=0.01, K=2.0)
    assert face.fw.shape == (3, 2)
    assert np.allclose(face.fw[0], 0.0, atol=1e-12)
    assert np.all(np.isfinite(face.ff["h"]))


def test_moving_wall_drags_the_gas():
    prim = np.array([1.0, 0.0, 0.0, 1.0])
    f = bk.equilibrium_distribution(M.F2V2, VS_2D, prim, K=1.0)
    lid = np.array([1.0, 0.15, 0.0, 1.0])
    # upper wall, the gas lies below
    face = bk.flux_boundary_maxwell(lid, f, VS_2D, 1, -1, dt=0.1, K=1.0)
    assert np.isclose(face.fw[0], 0.0, atol=1e-12)
    # x momentum is carried into the gas, i.e. against the face normal
    assert face.fw[1] < 0


def test_wall_at_equilibrium_only_transmits_pressure():
    prim = np.array([1.0, 0.0, 1.0])
    f = bk.equilibrium_distribution(M.F1V1, VS_1D, prim)
    face = bk.flux_boundary_maxwell(prim, f, VS_1D, 0, 1, dt=0.1)
    assert np.isclose(face.fw[0], 0.0, atol=1e-12)
    assert np.isclose(face.fw[1], 0.1 * bk.pressure(prim))
    assert np.isclose(face.fw[2], 0.0, atol=1e-12)


def test_wall_flux_needs_internal_degrees_of_freedom():
    f = bk.equilibrium_distribution(M.F2V1, VS_1D, [1.0, 0.0, 1.0], K=2.0)
    with pytest.raises(ValueError):
        bk.flux_boundary_maxwell([1.0, 0.0, 1.0], f, VS_1D, 0, 1, dt=0.1)


def test_wall_flux_of_rykov_distributions_is_not_implemented():
    prim = bk.conserve_prim_rykov([1.0, 0.0, 2.0, 0.5], 2.0, 2.0)
    f = bk.equilibrium_distribution(M.F3V1, VS_1D, prim, 2.0, 2.0)
    with pytest.raises(NotImplementedError):
        bk.flux_boundary_maxwell(prim, f, VS_1D, 0, 1, dt=0.1, K=2.0)
