r"""Equilibrium distributions, relaxation times and
Prandtl number corrections of the collision models.

Primitive states store :math:`\lambda = 1 / (2RT)` as last entry,
the bulk velocity components follow the density.
"""
import numpy as np


def _as_axes(axes):
    if isinstance(axes, np.ndarray):
        return (axes,)
    return tuple(axes)


def maxwellian(axes, prim):
    r"""Compute the Maxwellian
    :math:`\rho (\lambda / \pi)^{D/2} \exp(-\lambda |u - U|^2)`
    on the given velocity nodes.

    Parameters
    ----------
    axes : :obj:`~numpy.array` or :obj:`tuple` [:obj:`~numpy.array`]
        Velocity nodes of each dimension, e.g. (u, v).
        A single array is treated as a 1D space.
    prim : :obj:`~numpy.array` [:obj:`float`]
        The first D velocity components of prim are used,
        further components are ignored (reduced distributions).

    Returns
    -------
    distribution : :obj:`~numpy.array` [:obj:`float`]
    """
    axes = _as_axes(axes)
    dim = len(axes)
    lam = prim[-1]
    distance = sum((a - prim[1 + d])**2 for (d, a) in enumerate(axes))
    return prim[0] * (lam / np.pi)**(0.5 * dim) * np.exp(-lam * distance)


def mixture_maxwellian(axes, prim):
    """Compute the Maxwellian of each species.

    Parameters
    ----------
    axes : :obj:`tuple` [:obj:`~numpy.array`]
        Velocity nodes with a trailing species axis.
    prim : :obj:`~numpy.array` [:obj:`float`]
        Array of shape (nprim, nspc).

    Returns
    -------
    distribution : :obj:`~numpy.array` [:obj:`float`]
    """
    prim = np.asarray(prim, dtype=float)
    axes = _as_axes(axes)
    assert all(a.shape[-1] == prim.shape[1] for a in axes)
    # species columns of prim broadcast against the trailing axis
    return maxwellian(axes, prim)


##################################
#         Relaxation times       #
##################################
def ref_vhs_vis(Kn, alpha, omega):
    """Reference viscosity of the variable hard sphere model."""
    return (5.0 * (alpha + 1.0) * (alpha + 2.0) * np.sqrt(np.pi)
            / (4.0 * alpha * (5.0 - 2.0 * omega) * (7.0 - 2.0 * omega))
            * Kn)


def vhs_collision_time(prim, mu_ref, omega):
    r"""Mean collision time of the variable hard sphere model,
    :math:`\tau = 2 \mu_{ref} \lambda^{1 - \omega} / \rho`."""
    return mu_ref * 2.0 * prim[-1]**(1.0 - omega) / prim[0]


def _aap_hs_frequencies(prim, mi, ni, me, ne, kn):
    masses = np.array([mi, me])
    lam = prim[-1]
    n = prim[0] / masses
    nu = np.empty((2, 2))
    for a in range(2):
        for b in range(2):
            nu[a, b] = (4.0 * np.sqrt(np.pi) / 3.0 * n[b] / (ni + ne)
                        * np.sqrt(1.0 / lam[a] + 1.0 / lam[b]) / kn)
    return nu


def aap_hs_collision_time(prim, mi, ni, me, ne, kn):
    """Relaxation times of a two species hard sphere mixture,
    following Andries, Aoki and Perthame.

    Parameters
    ----------
    prim : :obj:`~numpy.array` [:obj:`float`]
        Array of shape (nprim, 2).
    mi, ni, me, ne : :obj:`float`
        Species masses and reference number densities.
    kn : :obj:`float`
        Knudsen number.

    Returns
    -------
    tau : :obj:`~numpy.array` [:obj:`float`]
        One relaxation time per species.
    """
    prim = np.asarray(prim, dtype=float)
    nu = _aap_hs_frequencies(prim, mi, ni, me, ne, kn)
    return 1.0 / np.sum(nu, axis=1)


def aap_hs_prim(prim, tau, mi, ni, me, ne, kn):
    r"""Target states of the Andries-Aoki-Perthame mixture model.

    Velocities and temperatures of each species are shifted towards
    the other species, such that total momentum and energy
    of the relaxation towards the targets vanish.

    Parameters
    ----------
    prim : :obj:`~numpy.array` [:obj:`float`]
        Array of shape (nprim, 2), with :math:`\lambda = m / (2T)`.
    tau : :obj:`~numpy.array` [:obj:`float`]
        Relaxation times, see :func:`aap_hs_collision_time`.
    mi, ni, me, ne, kn : :obj:`float`

    Returns
    -------
    mixprim : :obj:`~numpy.array` [:obj:`float`]
    """
    prim = np.asarray(prim, dtype=float)
    nu = _aap_hs_frequencies(prim, mi, ni, me, ne, kn)
    masses = np.array([mi, me])
    temperature = 0.5 * masses / prim[-1]
    mixprim = np.copy(prim)
    for a in range(2):
        b = 1 - a
        ma = masses[a]
        mb = masses[b]
        dU = prim[1:-1, b] - prim[1:-1, a]
        shift = tau[a] * 2.0 * mb / (ma + mb) * nu[a, b] * dU
        T = (temperature[a]
             - ma / 3.0 * np.sum(shift**2)
             + tau[a] * 4.0 * ma * mb / (ma + mb)**2 * nu[a, b]
             * (temperature[b] - temperature[a]
                + mb / 3.0 * np.sum(dU**2)))
        mixprim[1:-1, a] = prim[1:-1, a] + shift
        mixprim[-1, a] = 0.5 * ma / T
    return mixprim


##################################
#       Shakhov corrections      #
##################################
def _heat_projection(axes, q, prim):
    c = [a - prim[1 + d] for (d, a) in enumerate(axes)]
    q = np.atleast_1d(q)
    cq = sum(cd * qd for (cd, qd) in zip(c, q))
    c2 = sum(cd**2 for cd in c)
    return cq, c2


def shakhov(axes, M, q, prim, Pr):
    r"""Shakhov correction of a single distribution,

    :math:`S = \frac{4 (1 - Pr) \lambda^2}{(D + 2) \rho} \, (c \cdot q)
    \, (2 \lambda |c|^2 - D - 2) \, M`.

    S carries no mass, momentum or energy and
    reduces the heat flux relaxation rate to :math:`Pr / \tau`.

    Parameters
    ----------
    axes : :obj:`~numpy.array` or :obj:`tuple` [:obj:`~numpy.array`]
    M : :obj:`~numpy.array` [:obj:`float`]
        Maxwellian.
    q : :obj:`float` or :obj:`~numpy.array` [:obj:`float`]
        Heat flux.
    prim : :obj:`~numpy.array` [:obj:`float`]
    Pr : :obj:`float`

    Returns
    -------
    S : :obj:`~numpy.array` [:obj:`float`]
    """
    axes = _as_axes(axes)
    dim = len(axes)
    lam = prim[-1]
    cq, c2 = _heat_projection(axes, q, prim)
    coefficient = 4.0 * (1.0 - Pr) * lam**2 / ((dim + 2.0) * prim[0])
    return coefficient * cq * (2.0 * lam * c2 - dim - 2.0) * M


# noinspection PyPep8Naming
def shakhov_internal(axes, MH, MB, q, prim, Pr, K):
    """Shakhov corrections of reduced distributions h and b,
    with K internal degrees of freedom carried by b.

    Returns
    -------
    SH, SB : :obj:`~numpy.array` [:obj:`float`]
    """
    axes = _as_axes(axes)
    dof = len(axes) + K
    lam = prim[-1]
    cq, c2 = _heat_projection(axes, q, prim)
    coefficient = 4.0 * (1.0 - Pr) * lam**2 / ((dof + 2.0) * prim[0])
    SH = coefficient * cq * (2.0 * lam * c2 + K - dof - 2.0) * MH
    SB = coefficient * cq * (2.0 * lam * c2 + K - dof) * MB
    return SH, SB


##################################
#          Rykov model           #
##################################
# noinspection PyPep8Naming
def rykov_zr(Tt, T0, Z0):
    """Rotational collision number of Parker's formula."""
    ratio = T0 / Tt
    return Z0 / (1.0 + 0.5 * np.pi**1.5 * np.sqrt(ratio)
                 + (np.pi + 0.25 * np.pi**2) * ratio)


# noinspection PyPep8Naming
def rykov_maxwellian(u, prim, K, Kr):
    r"""Equilibrium distributions of the Rykov model.

    Parameters
    ----------
    u : :obj:`~numpy.array` [:obj:`float`]
    prim : :obj:`~numpy.array` [:obj:`float`]
        :math:`(\rho, U, \lambda, \lambda_t, \lambda_r)`.
    K, Kr : :obj:`float`

    Returns
    -------
    maxwellians : :obj:`tuple` [:obj:`~numpy.array` [:obj:`float`]]
        (MHT, MBT, MRT, MHR, MBR, MRR):
        the translational equilibrium at :math:`\lambda_t, \lambda_r`
        and the full equilibrium at :math:`\lambda`.
    """
    rho, U, lam, lam_t, lam_r = prim
    MHT = rho * np.sqrt(lam_t / np.pi) * np.exp(-lam_t * (u - U)**2)
    MBT = MHT * K / (2.0 * lam_t)
    MRT = MHT * Kr / (2.0 * lam_r)
    MHR = rho * np.sqrt(lam / np.pi) * np.exp(-lam * (u - U)**2)
    MBR = MHR * K / (2.0 * lam)
    MRR = MHR * Kr / (2.0 * lam)
    return MHT, MBT, MRT, MHR, MBR, MRR


# noinspection PyPep8Naming
def rykov(u, maxwellians, q, prim, Pr, K, Kr, sigma, omega0, omega1):
    r"""Heat flux corrections of the Rykov model.

    Parameters
    ----------
    u : :obj:`~numpy.array` [:obj:`float`]
    maxwellians : :obj:`tuple` [:obj:`~numpy.array` [:obj:`float`]]
        As returned by :func:`rykov_maxwellian`.
    q : :obj:`~numpy.array` [:obj:`float`]
        Translational and rotational heat flux.
    prim : :obj:`~numpy.array` [:obj:`float`]
    Pr, K, Kr, sigma, omega0, omega1 : :obj:`float`

    Returns
    -------
    corrections : :obj:`tuple` [:obj:`~numpy.array` [:obj:`float`]]
        (SHT, SBT, SRT, SHR, SBR, SRR)
    """
    rho, U, lam, lam_t, lam_r = prim
    qt, qr = q
    c = u - U
    branches = [
        # translational branch
        (lam_t,
         0.8 * (1.0 - Pr) * lam_t**2 / rho,
         4.0 * (1.0 - sigma) * lam_t * lam_r / rho,
         maxwellians[:3]),
        # relaxed branch
        (lam,
         0.8 * omega0 * (1.0 - Pr) * lam**2 / rho,
         4.0 * omega1 * (1.0 - sigma) * lam**2 / rho,
         maxwellians[3:])]
    result = []
    for (lam_x, a, b, (MH, MB, MR)) in branches:
        SH = (a * c * qt * (2.0 * lam_x * c**2 + K - 5.0)
              + b * c * qr * (0.5 * Kr - 1.0)) * MH
        SB = (a * c * qt * (2.0 * lam_x * c**2 + K - 3.0)
              + b * c * qr * (0.5 * Kr - 1.0)) * MB
        SR = (a * c * qt * (2.0 * lam_x * c**2 + K - 5.0)
              + b * c * qr * 0.5 * Kr) * MR
        result += [SH, SB, SR]
    return tuple(result)
