r"""Conversions between primitive and conserved states.

A primitive state holds density, the bulk velocity components
and :math:`\lambda = 1 / (2RT)`.
A conserved state holds mass, momentum and total energy.
Mixture states carry one column per species.
"""
import numpy as np


def heat_capacity_ratio(K, D):
    """Heat capacity ratio of a gas with D translational
    and K further degrees of freedom."""
    return (K + D + 2.0) / (K + D)


def prim_conserve(prim, gamma):
    """Convert a primitive state into a conserved state.

    Parameters
    ----------
    prim : :obj:`~numpy.array` [:obj:`float`]
        Array of length 3, 4 or 5.
    gamma : :obj:`float`

    Returns
    -------
    w : :obj:`~numpy.array` [:obj:`float`]
    """
    prim = np.asarray(prim, dtype=float)
    rho = prim[0]
    velocity = prim[1:-1]
    w = np.empty(prim.size)
    w[0] = rho
    w[1:-1] = rho * velocity
    w[-1] = (0.5 * rho / prim[-1] / (gamma - 1.0)
             + 0.5 * rho * np.sum(velocity**2))
    return w


def conserve_prim(w, gamma):
    """Convert a conserved state into a primitive state.

    Parameters
    ----------
    w : :obj:`~numpy.array` [:obj:`float`]
        Array of length 3, 4 or 5.
    gamma : :obj:`float`

    Returns
    -------
    prim : :obj:`~numpy.array` [:obj:`float`]
    """
    w = np.asarray(w, dtype=float)
    rho = w[0]
    velocity = w[1:-1] / rho
    prim = np.empty(w.size)
    prim[0] = rho
    prim[1:-1] = velocity
    prim[-1] = (0.5 * rho / (gamma - 1.0)
                / (w[-1] - 0.5 * rho * np.sum(velocity**2)))
    return prim


def mixture_prim_conserve(prim, gamma):
    """Apply :func:`prim_conserve` to each species column."""
    prim = np.asarray(prim, dtype=float)
    return np.stack([prim_conserve(prim[:, s], gamma)
                     for s in range(prim.shape[1])], axis=-1)


def mixture_conserve_prim(w, gamma):
    """Apply :func:`conserve_prim` to each species column."""
    w = np.asarray(w, dtype=float)
    return np.stack([conserve_prim(w[:, s], gamma)
                     for s in range(w.shape[1])], axis=-1)


# noinspection PyPep8Naming
def prim_conserve_rykov(prim, K, Kr):
    r"""Convert a diatomic primitive state into a conserved state.

    Parameters
    ----------
    prim : :obj:`~numpy.array` [:obj:`float`]
        :math:`(\rho, U, \lambda, \lambda_t, \lambda_r)`.
        The equilibrium :math:`\lambda` is not needed for the conversion.
    K : :obj:`float`
        Internal, non rotational, degrees of freedom.
    Kr : :obj:`float`
        Rotational degrees of freedom.

    Returns
    -------
    w : :obj:`~numpy.array` [:obj:`float`]
        :math:`(\rho, \rho U, \rho E, \rho E_r)`.
    """
    rho, U, _, lam_t, lam_r = np.asarray(prim, dtype=float)
    rot = 0.25 * rho * Kr / lam_r
    return np.array([rho,
                     rho * U,
                     0.5 * rho * U**2 + 0.25 * rho * (K + 1.0) / lam_t + rot,
                     rot])


# noinspection PyPep8Naming
def conserve_prim_rykov(w, K, Kr):
    """Convert a diatomic conserved state into a primitive state,
    inverse of :func:`prim_conserve_rykov`."""
    rho, momentum, energy, rot = np.asarray(w, dtype=float)
    U = momentum / rho
    internal = energy - 0.5 * rho * U**2
    return np.array([rho,
                     U,
                     0.25 * rho * (K + Kr + 1.0) / internal,
                     0.25 * rho * (K + 1.0) / (internal - rot),
                     0.25 * rho * Kr / rot])


def temperature_parameters(prim, rykov=False):
    """Return the entries of prim that must stay positive:
    the density and all lambdas."""
    prim = np.asarray(prim, dtype=float)
    if rykov:
        return prim[[0, 2, 3, 4]]
    return prim[[0, -1]]


def is_physical(prim, rykov=False):
    """Check that density and temperatures are positive and finite.

    Parameters
    ----------
    prim : :obj:`~numpy.array` [:obj:`float`]
        Primitive state of a single species.
    rykov : :obj:`bool`, optional
        True for diatomic states :math:`(\\rho, U, \\lambda,
        \\lambda_t, \\lambda_r)`.

    Returns
    -------
    result : :obj:`bool`
    """
    values = temperature_parameters(prim, rykov)
    return bool(np.all(np.isfinite(values)) and np.all(values > 0))
