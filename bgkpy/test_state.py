import numpy as np
import pytest

import bgkpy as bk

###################################
#           Setup Cases           #
###################################
PRIMS = dict()
PRIMS["1D"] = np.array([1.3, 0.4, 0.7])
PRIMS["2D"] = np.array([0.8, -0.2, 0.5, 1.4])
PRIMS["3D"] = np.array([1.1, 0.1, -0.6, 0.3, 2.0])


#############################
#           Tests           #
#############################
@pytest.mark.parametrize("key", PRIMS.keys())
@pytest.mark.parametrize("gamma", [5 / 3, 7 / 5, 3.0])
def test_round_trip(key, gamma):
    prim = PRIMS[key]
    w = bk.prim_conserve(prim, gamma)
    assert w.shape == prim.shape
    assert np.allclose(bk.conserve_prim(w, gamma), prim)


def test_conserved_state_of_gas_at_rest():
    w = bk.prim_conserve([2.0, 0.0, 0.5], 5 / 3)
    # internal energy 1.5 * rho * RT
    assert np.allclose(w, [2.0, 0.0, 3.0])


def test_mixture_round_trip():
    prim = np.array([[1.0, 0.01],
                     [0.2, -0.1],
                     [1.0, 0.002]])
    w = bk.mixture_prim_conserve(prim, 5 / 3)
    assert w.shape == (3, 2)
    for s in range(2):
        assert np.allclose(w[:, s], bk.prim_conserve(prim[:, s], 5 / 3))
    assert np.allclose(bk.mixture_conserve_prim(w, 5 / 3), prim)


def test_rykov_round_trip():
    K, Kr = 2.0, 2.0
    w = np.array([1.2, 0.3, 2.1, 0.4])
    prim = bk.conserve_prim_rykov(w, K, Kr)
    assert prim.shape == (5,)
    assert np.allclose(bk.prim_conserve_rykov(prim, K, Kr), w)


def test_rykov_equilibrium_has_equal_temperatures():
    K, Kr = 2.0, 2.0
    lam = 0.8
    prim = np.array([1.0, 0.5, lam, lam, lam])
    w = bk.prim_conserve_rykov(prim, K, Kr)
    assert np.allclose(bk.conserve_prim_rykov(w, K, Kr), prim)


@pytest.mark.parametrize("K, D, expected", [(0, 3, 5 / 3),
                                            (2, 1, 5 / 3),
                                            (0, 1, 3.0),
                                            (0, 2, 2.0),
                                            (2, 3, 7 / 5)])
def test_heat_capacity_ratio(K, D, expected):
    assert np.isclose(bk.heat_capacity_ratio(K, D), expected)


def test_is_physical():
    assert bk.is_physical([1.0, 0.0, 1.0])
    assert not bk.is_physical([1.0, 0.0, -1.0])
    assert not bk.is_physical([0.0, 0.0, 1.0])
    assert not bk.is_physical([1.0, 0.0, np.nan])
    assert not bk.is_physical([1.0, 0.0, np.inf])
    assert bk.is_physical([1.0, 0.0, 1.0, 1.0, 1.0], rykov=True)
    assert not bk.is_physical([1.0, 0.0, 1.0, -1.0, 1.0], rykov=True)
