import numpy as np
import scipy.stats

import bgkpy as bk

VS = bk.VelocitySpace([-6], [6], [80])
PRIM = np.array([1.2, 0.3, 0.8])


def _maxwellian_multipliers(prim):
    rho, U, lam = prim
    return np.array([np.log(rho) + 0.5 * np.log(lam / np.pi) - lam * U**2,
                     2 * lam * U,
                     -lam])


def test_moment_basis():
    u = np.array([-1.0, 0.5, 2.0])
    m = bk.moment_basis(u, 4)
    assert m.shape == (4, 3)
    assert np.allclose(m[0], 1.0)
    assert np.allclose(m[1], u)
    assert np.allclose(m[3], u**3)


def test_maxwellian_multipliers_reconstruct_moments():
    m = bk.moment_basis(VS.u, 3)
    alpha = _maxwellian_multipliers(PRIM)
    f = bk.maxwellian(VS.u, PRIM)
    moments = m @ (f * VS.weights)
    reconstructed = bk.realizable_reconstruct(alpha, m, VS.weights, np.exp)
    assert np.allclose(reconstructed, moments)


def test_optimized_closure_matches_moments():
    m = bk.moment_basis(VS.u, 3)
    f = bk.maxwellian(VS.u, PRIM)
    moments = m @ (f * VS.weights)
    guess = _maxwellian_multipliers(PRIM) + np.array([0.1, -0.1, 0.05])
    result = bk.optimize_closure(guess, m, VS.weights, moments, np.exp)
    assert np.allclose(result.x, _maxwellian_multipliers(PRIM), atol=1e-3)
    reconstructed = bk.realizable_reconstruct(result.x, m, VS.weights, np.exp)
    assert np.allclose(reconstructed, moments, atol=1e-4)


def test_sample_pdf_without_higher_moments_is_maxwellian():
    m = bk.moment_basis(VS.u, 3)
    f = bk.sample_pdf(m, PRIM, scipy.stats.norm(0, 0.01))
    assert np.allclose(f, bk.maxwellian(VS.u, PRIM))


def test_sample_pdf_is_positive_and_integrable():
    m = bk.moment_basis(VS.u, 5)
    rng = np.random.default_rng(3)
    for _ in range(10):
        f = bk.sample_pdf(m, PRIM, scipy.stats.norm(0, 0.01), rng)
        assert f.shape == VS.u.shape
        assert np.all(f > 0)
        assert np.all(np.isfinite(f))
        # the highest, even power decays
        assert f[0] < f[40] and f[-1] < f[40]
