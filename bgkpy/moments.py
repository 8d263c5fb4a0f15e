r"""Moments of discrete distributions and of Maxwellians.

Conserved moments are computed by the quadrature of a
:class:`~bgkpy.VelocitySpace`,
:math:`\sum_i \omega_i \, \psi(u_i) \, f_i`.
The analytic moments of Maxwellians (:func:`gauss_moments`)
are used by flux evaluators and to verify the quadrature.

None of these functions modify their arguments.
"""
import numpy as np
from scipy.special import erfc

import bgkpy as bk


def discrete_moment(f, u, weights, n=0):
    r"""Compute the n-th discrete moment :math:`\sum \omega u^n f`.

    Parameters
    ----------
    f : :obj:`~numpy.array` [:obj:`float`]
    u : :obj:`~numpy.array` [:obj:`float`]
    weights : :obj:`~numpy.array` [:obj:`float`]
    n : :obj:`int`, optional

    Returns
    -------
    moment : :obj:`float`
    """
    return np.sum(weights * u**n * f)


def _conserved(model, fields, axes, weights):
    first = fields[model.fields[0]]
    result = [np.sum(weights * first)]
    result += [np.sum(weights * a * first) for a in axes]
    energy = 0.5 * np.sum(weights * sum(a**2 for a in axes) * first)
    if model in (bk.DistributionModel.F2V1, bk.DistributionModel.F2V2):
        energy += 0.5 * np.sum(weights * fields["b"])
    elif model == bk.DistributionModel.F3V1:
        energy += 0.5 * np.sum(weights * (fields["b"] + fields["r"]))
        return np.array(result + [energy,
                                  0.5 * np.sum(weights * fields["r"])])
    elif model == bk.DistributionModel.F3V2:
        # h1 carries the w momentum, h2 the w and internal energy
        result.append(np.sum(weights * fields["h1"]))
        energy += 0.5 * np.sum(weights * fields["h2"])
    elif model == bk.DistributionModel.F4V1:
        result.append(np.sum(weights * fields["h1"]))
        result.append(np.sum(weights * fields["h2"]))
        energy += 0.5 * np.sum(weights * fields["h3"])
    return np.array(result + [energy])


def conserved_moments(dist, vs):
    """Compute the conserved moments of a distribution.

    Parameters
    ----------
    dist : :class:`~bgkpy.Distribution`
    vs : :class:`~bgkpy.VelocitySpace`

    Returns
    -------
    w : :obj:`~numpy.array` [:obj:`float`]
        Mass, momentum and energy.
        Rykov distributions append the rotational energy.
        Array of shape (nw,), or (nw, nspc) for mixtures.
    """
    model = dist.model
    if model.nv != vs.ndim:
        raise ValueError("a {} distribution needs a {}D velocity space"
                         "".format(model.label, model.nv))
    if not vs.is_mixture:
        return _conserved(model, dist.fields, vs.axes, vs.weights)
    columns = [_conserved(model,
                          {key: val[..., s] for (key, val) in dist.items()},
                          tuple(a[..., s] for a in vs.axes),
                          vs.weights[..., s])
               for s in range(vs.nspc)]
    return np.stack(columns, axis=-1)


##################################
#       Maxwellian Moments       #
##################################
def _recursion(M, U, lam):
    for i in range(2, bk.MAX_MOMENT_ORDER + 1):
        M[i] = U * M[i - 1] + 0.5 * (i - 1) * M[i - 2] / lam
    return M


def gauss_moments(prim, inK=None):
    r"""Compute the moments of a normalized Maxwellian,
    up to order :const:`~bgkpy.constants.MAX_MOMENT_ORDER`.

    The half range moments :math:`\langle u^n \rangle_{u > 0}` (MuR)
    and :math:`\langle u^n \rangle_{u < 0}` (MuL) are
    seeded by the complementary error function.

    Parameters
    ----------
    prim : :obj:`~numpy.array` [:obj:`float`]
        Primitive state of length 3, 4 or 5.
    inK : :obj:`float`, optional
        Internal degrees of freedom.
        If given, the moments of the internal energy variable
        :math:`\langle \xi^0 \rangle, \langle \xi^2 \rangle,
        \langle \xi^4 \rangle` are returned as well.

    Returns
    -------
    moments : :obj:`tuple` [:obj:`~numpy.array` [:obj:`float`]]
        ``(Mu, [Mv, [Mw,]] [Mxi,] MuL, MuR)``.
        Mxi is only returned for states of length 3 or 4.
    """
    prim = np.asarray(prim, dtype=float)
    U = prim[1]
    lam = prim[-1]
    order = bk.MAX_MOMENT_ORDER + 1
    MuL = np.zeros(order)
    MuR = np.zeros(order)
    MuL[0] = 0.5 * erfc(-np.sqrt(lam) * U)
    MuL[1] = U * MuL[0] + 0.5 * np.exp(-lam * U**2) / np.sqrt(np.pi * lam)
    MuR[0] = 0.5 * erfc(np.sqrt(lam) * U)
    MuR[1] = U * MuR[0] - 0.5 * np.exp(-lam * U**2) / np.sqrt(np.pi * lam)
    MuL = _recursion(MuL, U, lam)
    MuR = _recursion(MuR, U, lam)
    Mu = MuL + MuR

    result = [Mu]
    for V in prim[2:-1]:
        MV = np.zeros(order)
        MV[0] = 1.0
        MV[1] = V
        result.append(_recursion(MV, V, lam))
    if inK is not None and prim.size in [3, 4]:
        Mxi = np.array([1.0,
                        0.5 * inK / lam,
                        (inK**2 + 2.0 * inK) / (4.0 * lam**2)])
        result.append(Mxi)
    return tuple(result + [MuL, MuR])


def mixture_gauss_moments(prim, inK=None):
    """Compute :func:`gauss_moments` for each species column.

    Parameters
    ----------
    prim : :obj:`~numpy.array` [:obj:`float`]
        Array of shape (nprim, nspc).
    inK : :obj:`float`, optional

    Returns
    -------
    moments : :obj:`tuple` [:obj:`~numpy.array` [:obj:`float`]]
        Same order as :func:`gauss_moments`,
        each array carries a trailing species axis.
    """
    prim = np.asarray(prim, dtype=float)
    columns = [gauss_moments(prim[:, s], inK) for s in range(prim.shape[1])]
    return tuple(np.stack(moments, axis=-1) for moments in zip(*columns))


def _gauss_product(orders, translational, Mxi):
    result = 1.0
    for (M, order) in zip(translational, orders):
        result = result * M[order]
    if Mxi is not None:
        result = result * Mxi[orders[-1] // 2]
    return result


def gauss_conserved_moments(orders, Mu, Mv=None, Mw=None, Mxi=None):
    r"""Conserved moment vector of a Maxwellian, weighted by
    :math:`u^\alpha v^\beta w^\gamma \xi^\delta`.

    Parameters
    ----------
    orders : :obj:`tuple` [:obj:`int`]
        One order per given moment array, in the order Mu, Mv, Mw, Mxi.
        The order of Mxi must be even.
    Mu, Mv, Mw : :obj:`~numpy.array` [:obj:`float`]
        Moments as returned by :func:`gauss_moments`.
    Mxi : :obj:`~numpy.array` [:obj:`float`], optional
        Internal energy moments.

    Returns
    -------
    moments : :obj:`~numpy.array` [:obj:`float`]
        (density, momentum components, energy) moments.
    """
    translational = [M for M in (Mu, Mv, Mw) if M is not None]
    nv = len(translational)
    orders = list(orders)
    assert len(orders) == nv + (Mxi is not None)
    if Mxi is not None:
        assert orders[-1] % 2 == 0

    def product(shift):
        return _gauss_product([o + s for (o, s) in zip(orders, shift)],
                              translational, Mxi)

    def unit(d, length=1):
        shift = [0] * len(orders)
        shift[d] = length
        return shift

    result = [product([0] * len(orders))]
    result += [product(unit(d)) for d in range(nv)]
    energy = sum(product(unit(d, 2)) for d in range(nv))
    if Mxi is not None:
        energy = energy + product(unit(nv, 2))
    result.append(0.5 * energy)
    return np.array(result)


def gauss_conserved_slope(a, orders, Mu, Mv=None, Mw=None, Mxi=None):
    r"""Conserved moments of a Maxwellian,
    weighted by a linear slope :math:`a \cdot \psi`, with
    :math:`\psi = (1, u, v, w, \frac{1}{2}(|u|^2 + \xi^2))`.

    Parameters
    ----------
    a : :obj:`~numpy.array` [:obj:`float`]
        Slope coefficients, same length as the conserved state.
    orders, Mu, Mv, Mw, Mxi
        See :func:`gauss_conserved_moments`.

    Returns
    -------
    moments : :obj:`~numpy.array` [:obj:`float`]
    """
    nv = len([M for M in (Mu, Mv, Mw) if M is not None])
    orders = list(orders)

    def shifted(d, length):
        result = list(orders)
        result[d] += length
        return gauss_conserved_moments(result, Mu, Mv, Mw, Mxi)

    result = a[0] * gauss_conserved_moments(orders, Mu, Mv, Mw, Mxi)
    for d in range(nv):
        result = result + a[1 + d] * shifted(d, 1)
    for d in range(nv):
        result = result + 0.5 * a[-1] * shifted(d, 2)
    if Mxi is not None:
        result = result + 0.5 * a[-1] * shifted(nv, 2)
    return result


##################################
#       Physical Quantities      #
##################################
def _peculiar(prim, axes):
    return [a - prim[1 + d] for (d, a) in enumerate(axes)]


def pressure(prim):
    """Pressure of a primitive state, :math:`p = \\rho / (2 \\lambda)`."""
    return 0.5 * prim[0] / prim[-1]


def distribution_pressure(dist, prim, vs, K=0.0):
    """Compute the pressure of a distribution by quadrature.

    Parameters
    ----------
    dist : :class:`~bgkpy.Distribution`
    prim : :obj:`~numpy.array` [:obj:`float`]
    vs : :class:`~bgkpy.VelocitySpace`
    K : :obj:`float`, optional
        Internal degrees of freedom, carried by b.

    Returns
    -------
    pressure : :obj:`float`
    """
    c = _peculiar(prim, vs.axes)
    first = dist[dist.model.fields[0]]
    energy = np.sum(vs.weights * sum(cd**2 for cd in c) * first)
    if dist.model in (bk.DistributionModel.F1V1,
                      bk.DistributionModel.F1V2,
                      bk.DistributionModel.F1V3):
        return energy / vs.ndim
    elif dist.model in (bk.DistributionModel.F2V1,
                        bk.DistributionModel.F2V2):
        return (energy + np.sum(vs.weights * dist["b"])) / (K + vs.ndim)
    else:
        raise NotImplementedError(
            "no pressure for {} distributions".format(dist.model.label))


def stress(f, prim, vs):
    r"""Compute the stress tensor :math:`\sum \omega c_i c_j f`.

    Parameters
    ----------
    f : :obj:`~numpy.array` [:obj:`float`]
    prim : :obj:`~numpy.array` [:obj:`float`]
    vs : :class:`~bgkpy.VelocitySpace`

    Returns
    -------
    stress : :obj:`float` or :obj:`~numpy.array` [:obj:`float`]
        A scalar in 1D, an array of shape (ndim, ndim) otherwise.
    """
    c = _peculiar(prim, vs.axes)
    if vs.ndim == 1:
        return np.sum(vs.weights * c[0]**2 * f)
    result = np.zeros((vs.ndim, vs.ndim))
    for i in range(vs.ndim):
        for j in range(i, vs.ndim):
            result[i, j] = np.sum(vs.weights * c[i] * c[j] * f)
            result[j, i] = result[i, j]
    return result


def heat_flux(dist, prim, vs):
    r"""Compute the heat flux of a distribution,
    :math:`q = \frac{1}{2} \sum \omega \, c \, (|c|^2 f + b)`.

    Parameters
    ----------
    dist : :class:`~bgkpy.Distribution`
    prim : :obj:`~numpy.array` [:obj:`float`]
    vs : :class:`~bgkpy.VelocitySpace`

    Returns
    -------
    q : :obj:`float` or :obj:`~numpy.array` [:obj:`float`]
        A scalar for 1D distributions,
        a vector of length ndim otherwise.
        Rykov distributions return the translational and the
        rotational part.
    """
    model = dist.model
    c = _peculiar(prim, vs.axes)
    c2 = sum(cd**2 for cd in c)
    first = dist[model.fields[0]]
    if model in (bk.DistributionModel.F1V1,
                 bk.DistributionModel.F1V2,
                 bk.DistributionModel.F1V3):
        q = np.array([0.5 * np.sum(vs.weights * cd * c2 * first)
                      for cd in c])
    elif model in (bk.DistributionModel.F2V1,
                   bk.DistributionModel.F2V2,
                   bk.DistributionModel.F3V1):
        q = np.array([0.5 * np.sum(vs.weights * cd * (c2 * first
                                                      + dist["b"]))
                      for cd in c])
    else:
        raise NotImplementedError(
            "no heat flux for {} distributions".format(model.label))
    if model == bk.DistributionModel.F3V1:
        return np.array([q[0], 0.5 * np.sum(vs.weights * c[0] * dist["r"])])
    if vs.ndim == 1:
        return q[0]
    return q
