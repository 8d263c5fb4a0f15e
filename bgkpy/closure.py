r"""Entropy based moment closure.

A distribution is represented by Lagrange multipliers
:math:`\alpha`, as :math:`f = \eta'_*(\alpha^T m(u))`,
where m are polynomial basis functions of the velocity.
"""
import numpy as np
from scipy.optimize import minimize


def moment_basis(u, n):
    """Create the polynomial basis functions :math:`m_{ij} = u_j^i`.

    Parameters
    ----------
    u : :obj:`~numpy.array` [:obj:`float`]
        Velocity nodes.
    n : :obj:`int`
        Number of basis functions.

    Returns
    -------
    m : :obj:`~numpy.array` [:obj:`float`]
        Array of shape (n, u.size).
    """
    u = np.asarray(u, dtype=float).reshape(-1)
    return u[np.newaxis, :] ** np.arange(n)[:, np.newaxis]


def optimize_closure(alpha, m, weights, u, eta, method="BFGS", **kwargs):
    r"""Find the Lagrange multipliers of the given moments, by
    minimizing :math:`\langle \eta(\alpha^T m) \rangle - \alpha \cdot u`.

    Parameters
    ----------
    alpha : :obj:`~numpy.array` [:obj:`float`]
        Initial guess.
    m : :obj:`~numpy.array` [:obj:`float`]
        Basis functions, see :func:`moment_basis`.
    weights : :obj:`~numpy.array` [:obj:`float`]
        Quadrature weights.
    u : :obj:`~numpy.array` [:obj:`float`]
        Target moments.
    eta : :obj:`callable`
        Dual entropy function, applied elementwise.
    method : :obj:`str`, optional
        Minimizer of :func:`scipy.optimize.minimize`.

    Returns
    -------
    result : :obj:`scipy.optimize.OptimizeResult`
        The multipliers are stored in ``result.x``.
    """
    weights = np.asarray(weights, dtype=float).reshape(-1)
    u = np.asarray(u, dtype=float)

    def loss(a):
        return np.sum(eta(a @ m) * weights) - np.dot(a, u)

    return minimize(loss, np.asarray(alpha, dtype=float),
                    method=method, **kwargs)


def realizable_reconstruct(alpha, m, weights, eta_dual_prime):
    """Compute the moments of the distribution given by alpha.

    Parameters
    ----------
    alpha : :obj:`~numpy.array` [:obj:`float`]
    m : :obj:`~numpy.array` [:obj:`float`]
    weights : :obj:`~numpy.array` [:obj:`float`]
    eta_dual_prime : :obj:`callable`

    Returns
    -------
    u : :obj:`~numpy.array` [:obj:`float`]
    """
    weights = np.asarray(weights, dtype=float).reshape(-1)
    f = eta_dual_prime(np.asarray(alpha, dtype=float) @ m)
    return m @ (f * weights)


def sample_pdf(m, prim, distribution, rng=None):
    r"""Sample a distribution function near the Maxwellian of prim.

    The first three multipliers reproduce the Maxwellian
    :math:`\rho \sqrt{\lambda / \pi} \exp(-\lambda (u - U)^2)`,
    the remaining ones are drawn from the given distribution.
    Multipliers of even powers are drawn from its negative part,
    to keep the distribution integrable.

    Parameters
    ----------
    m : :obj:`~numpy.array` [:obj:`float`]
        Basis functions, with at least 3 rows.
    prim : :obj:`~numpy.array` [:obj:`float`]
        Primitive state :math:`(\rho, U, \lambda)`.
    distribution : frozen :mod:`scipy.stats` distribution
    rng : :obj:`numpy.random.Generator`, optional

    Returns
    -------
    f : :obj:`~numpy.array` [:obj:`float`]
    """
    if rng is None:
        rng = np.random.default_rng()
    rho, U, lam = prim[0], prim[1], prim[-1]
    alpha = np.zeros(m.shape[0])
    alpha[0] = np.log(rho) + 0.5 * np.log(lam / np.pi) - lam * U**2
    alpha[1] = 2.0 * lam * U
    alpha[2] = -lam
    upper = distribution.cdf(0.0)
    for i in range(3, alpha.size):
        if i % 2 == 1:
            alpha[i] = distribution.rvs(random_state=rng)
        else:
            # inverse transform sampling of the part below zero
            alpha[i] = distribution.ppf(rng.uniform(0.0, upper))
    return np.exp(alpha @ m)
